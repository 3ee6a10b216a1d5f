"""
Application entry point.

Only wires logging, error tracking and the app factory.
"""

import logging

import sentry_sdk

from portal_assistant.config import get_settings
from portal_assistant.core.app_factory import create_app
from portal_assistant.core.logger import configure_logging

settings = get_settings()
configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

logger = logging.getLogger(__name__)

# Initialize Sentry for error tracking
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        send_default_pii=False,
        environment=settings.ENVIRONMENT,
    )

# Create application using factory
app = create_app(settings)

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting application in {settings.ENVIRONMENT} mode")
    uvicorn.run(
        "portal_assistant.main:app",
        host="0.0.0.0",
        port=8001,
        reload=settings.DEBUG,
    )
