"""
FastAPI router for Google Sheets capacity checks.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..integrations.google.exceptions import SheetsError
from ..integrations.google.sheets_client import SheetsClient
from ..models.sheets import ErrorResult, RowCountResult, SheetsConfig
from ..settings import SheetsSettings, get_sheets_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sheets", tags=["Sheets"])


def get_sheets_config(
    settings: SheetsSettings = Depends(get_sheets_settings),
) -> SheetsConfig:
    """Dependency to get the validated Sheets configuration."""
    return settings.sheets_config()


def get_sheets_client(
    config: SheetsConfig = Depends(get_sheets_config),
) -> SheetsClient:
    """Dependency to get a Sheets client for the configured API key."""
    return SheetsClient(api_key=config.sheets_api_key)


async def sheets_error_handler(request: Request, exc: SheetsError) -> JSONResponse:
    """Render a Sheets error as ``{"success": false, "error": ...}``."""
    logger.warning(f"{request.url.path} failed with {exc.status_code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResult(error=exc.message).model_dump_response(),
    )


@router.get(
    "/row-count",
    response_model=RowCountResult,
    summary="Check if a Google Sheet exceeds a row threshold",
    responses={
        200: {"description": "Returns the row count and threshold comparison"},
        500: {"model": ErrorResult, "description": "Configuration missing"},
        502: {
            "model": ErrorResult,
            "description": "Google Sheets API unreachable or returned an error",
        },
    },
)
async def sheet_row_count(
    config: SheetsConfig = Depends(get_sheets_config),
    client: SheetsClient = Depends(get_sheets_client),
) -> RowCountResult:
    """
    Count the rows in the configured spreadsheet range.

    Reports whether the count exceeds the fixed row threshold.
    """
    values = await client.get_values(config.sheet_id, config.sheet_range)
    result = RowCountResult(row_count=values.row_count)
    logger.info(
        f"Sheet range {config.sheet_range!r} has {result.row_count} rows "
        f"(exceeds threshold: {result.exceeds_threshold})"
    )
    return result
