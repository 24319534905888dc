"""Central application settings using Pydantic."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .integrations.google.exceptions import MissingConfigurationError
from .models.sheets import DEFAULT_SHEET_RANGE, SheetsConfig


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Core application
    log_level: str = Field("INFO")
    port: int = Field(8000)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class SheetsSettings(BaseSettings):
    """Google Sheets configuration, read independently of the server settings."""

    sheets_api_key: str | None = Field(None)
    sheet_id: str | None = Field(None)
    sheet_range: str | None = Field(None)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def sheets_config(self) -> SheetsConfig:
        """Return the validated Sheets configuration.

        Raises:
            MissingConfigurationError: If the API key or sheet ID is unset or empty.
        """
        if not self.sheets_api_key or not self.sheet_id:
            raise MissingConfigurationError()
        return SheetsConfig(
            sheets_api_key=self.sheets_api_key,
            sheet_id=self.sheet_id,
            sheet_range=(
                self.sheet_range if self.sheet_range is not None else DEFAULT_SHEET_RANGE
            ),
        )


def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    return Settings()


def get_sheets_settings() -> SheetsSettings:
    """Return Sheets settings loaded from environment variables."""
    return SheetsSettings()
