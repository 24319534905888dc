"""
Custom exceptions for the Google Sheets integration.

Each exception carries the HTTP status code and message returned to API callers.
"""


class SheetsError(Exception):
    """Base exception for all Google Sheets errors."""

    status_code = 500
    default_message = "Google Sheets request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingConfigurationError(SheetsError):
    """Raised when the API key or sheet ID is not configured."""

    status_code = 500
    default_message = (
        "Missing required configuration: SHEETS_API_KEY and SHEET_ID must be set"
    )


class SheetsUnreachableError(SheetsError):
    """Raised when the Sheets API cannot be reached at the transport level."""

    status_code = 502
    default_message = "Failed to reach Google Sheets API"


class SheetsResponseError(SheetsError):
    """Raised when the Sheets API answers with a non-success status."""

    status_code = 502

    def __init__(self, upstream_status: int) -> None:
        self.upstream_status = upstream_status
        super().__init__(f"Google Sheets API responded with status {upstream_status}")


class SheetsInvalidPayloadError(SheetsError):
    """Raised when a successful Sheets API response is not valid JSON."""

    status_code = 502
    default_message = "Google Sheets API returned an invalid JSON response"
