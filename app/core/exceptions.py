from fastapi import status


class AppError(Exception):
    """Base error rendered as {"error": message}"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Malformed, out-of-range or empty input"""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    """The referenced post has no matching row"""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class StoreError(AppError):
    """The underlying store operation failed"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
