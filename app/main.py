from contextlib import asynccontextmanager
import os
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import JSONResponse, Response
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from .api.api import api_router
from .core.config import settings
from .core.exceptions import AppError, NotFoundError, StoreError, ValidationError
from .db.database import create_tables
import logging
import json
import traceback
import uvicorn

# request bodies may carry whole images as data URIs
MAX_LOGGED_BODY = 2048

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # make sure tables are created and migrated
    create_tables()
    yield

logger = logging.getLogger("fastapi")

app = FastAPI(title="Confessions API", lifespan=lifespan)


def error_response(exc: AppError) -> JSONResponse:
    return JSONResponse(content={"error": exc.message}, status_code=exc.status_code)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return error_response(exc)


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    # logged once, with the request, by log_requests
    logger.debug(f"Store failure on {request.method} {request.url.path}", exc_info=exc)
    # the driver's message is passed through to the client
    message = str(exc.orig) if getattr(exc, "orig", None) is not None else str(exc)
    return error_response(StoreError(message))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    # a post id that is not an integer matches no row
    if any(tuple(error.get("loc", ()))[:1] == ("path",) for error in errors):
        return error_response(NotFoundError())
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    return error_response(ValidationError(message))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        content={"error": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None)
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    body = await request.body()
    decoded_body = body.decode(errors="replace") if body else None
    if decoded_body and len(decoded_body) > MAX_LOGGED_BODY:
        decoded_body = decoded_body[:MAX_LOGGED_BODY] + "..."
    request_info = {
        "url": str(request.url),
        "method": request.method,
        "body": decoded_body,
        "path_params": request.path_params,
        "query_params": dict(request.query_params)
    }

    try:
        # execute the request
        response = await call_next(request)

        if response.status_code >= 400:
            response_body = b""
            async for chunk in response.body_iterator:
                response_body += chunk

            # client errors are not server faults
            log = logger.error if response.status_code >= 500 else logger.info
            log(
                f"Request failed with status {response.status_code}\n"
                f"Request: {json.dumps(request_info, indent=2)}\n"
                f"Response: {response_body.decode(errors='replace')}\n"
            )
            return Response(
                content=response_body,
                status_code=response.status_code,
                headers=dict(response.headers)
            )

        return response

    except Exception as e:
        logger.error(
            f"Request failed with exception\n"
            f"Request: {json.dumps(request_info, indent=2)}\n"
            f"Error: {str(e)}\n"
            f"Traceback: {traceback.format_exc()}"
        )
        raise


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["*"],
    allow_headers=["*"],
)

# register the API router
app.include_router(api_router, prefix="/api")

# the web client, when shipped alongside the API
if os.path.isdir(settings.STATIC_DIR):
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")


def run():
    """Start the server on HOST:PORT"""
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
