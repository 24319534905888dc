import asyncio
import logging
import os
from urllib.parse import quote

import httpx

from capacity_api.integrations.google.exceptions import (
    SheetsInvalidPayloadError,
    SheetsResponseError,
    SheetsUnreachableError,
)
from capacity_api.models.sheets import DEFAULT_SHEET_RANGE, SheetValues

logger = logging.getLogger(__name__)

# Characters left unescaped by JavaScript's encodeURIComponent, besides
# the alphanumerics and "-_.~" that quote() never escapes.
_SEGMENT_SAFE = "!*'()"


def encode_path_segment(value: str) -> str:
    """Percent-encode ``value`` so it occupies exactly one URL path segment."""
    return quote(value, safe=_SEGMENT_SAFE)


class SheetsClient:
    """Minimal client for the Google Sheets API v4 values resource."""

    BASE_URL = "https://sheets.googleapis.com/v4/spreadsheets"

    def __init__(
        self,
        api_key: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self._transport = transport

    def build_values_url(self, sheet_id: str, sheet_range: str) -> str:
        """Return the ``values.get`` URL without the API key."""
        return (
            f"{self.BASE_URL}/{encode_path_segment(sheet_id)}"
            f"/values/{encode_path_segment(sheet_range)}"
        )

    async def get_values(
        self, sheet_id: str, sheet_range: str = DEFAULT_SHEET_RANGE
    ) -> SheetValues:
        """Fetch the values of ``sheet_range`` in spreadsheet ``sheet_id``.

        Args:
            sheet_id: Spreadsheet identifier
            sheet_range: A1 notation range, used verbatim

        Returns:
            The parsed ValueRange payload. A missing or non-array ``values``
            field yields an empty list.

        Raises:
            SheetsUnreachableError: If the request fails at the transport level
            SheetsResponseError: If the API responds with a non-success status
            SheetsInvalidPayloadError: If the response body is not valid JSON
        """
        url = self.build_values_url(sheet_id, sheet_range)
        logger.debug(f"Requesting sheet values from {url}")
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                resp = await client.get(url, params={"key": self.api_key})
        except httpx.HTTPError as e:
            logger.error(f"Failed to reach Google Sheets API at {url}: {e!r}")
            raise SheetsUnreachableError() from e

        if not resp.is_success:
            logger.error(f"Google Sheets API responded with status {resp.status_code}")
            raise SheetsResponseError(resp.status_code)

        try:
            payload = resp.json()
        except ValueError as e:
            logger.error(f"Google Sheets API returned a non-JSON body: {e}")
            raise SheetsInvalidPayloadError() from e

        if not isinstance(payload, dict):
            logger.warning(
                f"Expected a JSON object from Google Sheets API, got {type(payload).__name__}"
            )
            payload = {}

        return SheetValues.model_validate(payload)


if __name__ == "__main__":
    client = SheetsClient(os.environ["SHEETS_API_KEY"])
    values = asyncio.run(
        client.get_values(
            os.environ["SHEET_ID"], os.environ.get("SHEET_RANGE", DEFAULT_SHEET_RANGE)
        )
    )
    print(values.row_count)
