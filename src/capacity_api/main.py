import logging

import uvicorn
from fastapi import FastAPI

from .integrations.google.exceptions import SheetsError
from .settings import get_settings
from .sheets.router import router as sheets_router
from .sheets.router import sheets_error_handler

app = FastAPI(title="Capacity API", version="0.1.0")

# Include routers
app.include_router(sheets_router)
app.add_exception_handler(SheetsError, sheets_error_handler)

logger = logging.getLogger(__name__)


def main():
    """Main entry point for the web server."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting Capacity API Web Server")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
