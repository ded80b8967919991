from enum import Enum


class ErrorCode(str, Enum):
    """Semantic error codes attached to every validation failure."""

    # Presence
    NOT_NULL = "NOT_NULL"
    REQUIRED = "REQUIRED"
    NOT_BLANK = "NOT_BLANK"
    NOT_EMPTY = "NOT_EMPTY"
    NULL_VALUE = "NULL_VALUE"

    # Size and bounds
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    OUT_OF_RANGE = "OUT_OF_RANGE"

    # Content
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_VALUE = "INVALID_VALUE"
    WEAK_PASSWORD = "WEAK_PASSWORD"

    # User supplied
    CUSTOM_ERROR = "CUSTOM_ERROR"
    CROSS_FIELD_ERROR = "CROSS_FIELD_ERROR"

    def __str__(self) -> str:
        return self.value
