"""
Base models and configuration for the capacity API.

This module provides the foundation for all data models using Pydantic v2.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class BaseCapacityModel(BaseModel):
    """
    Base model for all capacity API data structures.

    Fields may be populated either by their Python name or by the camelCase
    alias used on the wire.
    """

    model_config = ConfigDict(
        # Enable validation on assignment
        validate_assignment=True,
        # Upstream payloads carry more fields than we model
        extra="ignore",
        # Accept both snake_case names and camelCase aliases
        populate_by_name=True,
        # Validate default values
        validate_default=True,
    )

    def model_dump_response(self) -> dict[str, Any]:
        """
        Serialize model for a JSON response body.

        Returns the camelCase representation sent to API callers.
        """
        return self.model_dump(mode="json", by_alias=True)
