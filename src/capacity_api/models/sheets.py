from typing import Any

from pydantic import Field, computed_field, field_validator

from .base import BaseCapacityModel

ROW_COUNT_THRESHOLD = 20
DEFAULT_SHEET_RANGE = "Sheet1"


class SheetsConfig(BaseCapacityModel):
    """Settings required to query a spreadsheet range."""

    sheets_api_key: str = Field(description="Google API key sent as the `key` query parameter")
    sheet_id: str = Field(description="Spreadsheet identifier")
    sheet_range: str = Field(
        default=DEFAULT_SHEET_RANGE, description="A1 notation range to read"
    )


class SheetValues(BaseCapacityModel):
    """ValueRange payload returned by the Sheets API ``values.get`` call."""

    range: str | None = Field(default=None, description="Range the values cover")
    major_dimension: str | None = Field(
        default=None, alias="majorDimension", description="ROWS or COLUMNS"
    )
    values: list[Any] = Field(
        default_factory=list, description="Row entries; cell contents are opaque"
    )

    @field_validator("values", mode="before")
    @classmethod
    def coerce_values(cls, v: Any) -> list[Any]:
        # Anything other than an array counts as no rows.
        if not isinstance(v, list):
            return []
        return v

    @field_validator("range", "major_dimension", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str | None:
        # Only the row count matters; mistyped metadata is dropped.
        if not isinstance(v, str):
            return None
        return v

    @property
    def row_count(self) -> int:
        return len(self.values)


class RowCountResult(BaseCapacityModel):
    """Successful row count response."""

    success: bool = Field(default=True)
    row_count: int = Field(
        alias="rowCount",
        description="Number of rows returned for the configured range",
    )

    @computed_field(
        alias="exceedsThreshold",
        description=f"True when row count is greater than {ROW_COUNT_THRESHOLD}",
    )
    @property
    def exceeds_threshold(self) -> bool:
        return self.row_count > ROW_COUNT_THRESHOLD


class ErrorResult(BaseCapacityModel):
    """Error response body."""

    success: bool = Field(default=False)
    error: str
