"""Google Sheets capacity endpoints."""
