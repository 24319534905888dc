"""
Shared pytest configuration and fixtures for the test suite.

This module provides common fixtures, test markers, and configuration
for all test categories.
"""

import httpx
import pytest

SHEETS_ENV_VARS = ("SHEETS_API_KEY", "SHEET_ID", "SHEET_RANGE")


@pytest.fixture(scope="function", autouse=True)
def clean_sheets_env(monkeypatch):
    """Start every test without Sheets configuration from the host environment."""
    for name in SHEETS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests (fast, isolated)"
    )
    config.addinivalue_line(
        "markers", "google: marks tests that interact with Google APIs"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        if "google" in str(item.fspath) or "sheets" in str(item.fspath):
            item.add_marker(pytest.mark.google)


class FakeSheetsApi:
    """Stand-in for the Sheets API served through ``httpx.MockTransport``."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: object = {}
        self.content: bytes | None = None
        self.error: Exception | None = None

    def respond_with_rows(self, count: int) -> None:
        self.payload = {
            "range": "Sheet1!A1:B100",
            "majorDimension": "ROWS",
            "values": [[f"row {i}", str(i)] for i in range(count)],
        }

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_sheets_api():
    """Fake Sheets API recording every outbound request."""
    return FakeSheetsApi()


@pytest.fixture
def sheets_env(monkeypatch):
    """Set up the required Sheets environment variables."""
    monkeypatch.setenv("SHEETS_API_KEY", "test-key")
    monkeypatch.setenv("SHEET_ID", "sheet-123")
