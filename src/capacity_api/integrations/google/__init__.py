from .exceptions import (
    MissingConfigurationError,
    SheetsError,
    SheetsInvalidPayloadError,
    SheetsResponseError,
    SheetsUnreachableError,
)

__all__ = [
    "MissingConfigurationError",
    "SheetsError",
    "SheetsInvalidPayloadError",
    "SheetsResponseError",
    "SheetsUnreachableError",
]
