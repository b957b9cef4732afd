"""
Personal Finance Ledger: FastAPI application.

This is the entry point for the application.
All routers are registered here.
"""

import uvicorn
from fastapi import FastAPI

from personal_finance.config import get_settings
from personal_finance.logging_config import setup_logging
from personal_finance.api.health import router as health_router
from personal_finance.api.users import router as users_router
from personal_finance.api.entries import router as entries_router

settings = get_settings()
setup_logging(settings)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Income and expense ledger for personal finances",
)

# Register routers
app.include_router(health_router)
app.include_router(users_router)
app.include_router(entries_router)


def run() -> None:
    """Serve the application with uvicorn using HOST and PORT from settings."""
    uvicorn.run(
        "personal_finance.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
