from typing import Any

from app.core.exceptions import ValidationError
from app.models.post import Mood
from app.models.reaction import ReactionType
from app.models.report import ReportReason

MAX_LENGTH = 280

VALID_MOODS = [mood.value for mood in Mood]
VALID_REACTION_TYPES = [reaction_type.value for reaction_type in ReactionType]
VALID_REPORT_REASONS = [reason.value for reason in ReportReason]


def _stripped(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip()


def clean_post_text(text: Any) -> str:
    """Return the trimmed post text, or raise if it is empty or too long"""
    cleaned = _stripped(text)
    if not cleaned:
        raise ValidationError("Post cannot be empty")
    if len(cleaned) > MAX_LENGTH:
        raise ValidationError(f"Max {MAX_LENGTH} characters")
    return cleaned


def clean_reply_text(text: Any) -> str:
    """Return the trimmed reply text; replies have no length cap"""
    cleaned = _stripped(text)
    if not cleaned:
        raise ValidationError("Reply cannot be empty")
    return cleaned


def normalize_mood(mood: Any) -> str:
    """Unknown moods fall back to none instead of being rejected"""
    return mood if mood in VALID_MOODS else Mood.NONE.value


def normalize_image(image: Any) -> Any:
    """Images are not validated; empty values become null"""
    return image or None


def validate_reaction_type(reaction_type: Any) -> str:
    if reaction_type not in VALID_REACTION_TYPES:
        raise ValidationError("Invalid reaction")
    return reaction_type


def validate_report_reason(reason: Any) -> str:
    if reason not in VALID_REPORT_REASONS:
        raise ValidationError("Invalid reason")
    return reason
