"""Main entry point for the application."""
import logging

import uvicorn

from weather_service import create_app
from weather_service.utils.colored_logger import setup_colored_logging

logger = logging.getLogger(__name__)


# Create the FastAPI app instance
app = create_app()


def run() -> None:
    """Serve the application on the configured host and port (8080 by default)."""
    settings = app.state.config_service.settings
    setup_colored_logging(level=settings.logging.level)

    logger.info("=" * 50)
    logger.info("Starting Weather Service")
    logger.info("=" * 50)

    uvicorn.run(app, host=settings.server.host, port=settings.server.port, log_config=None)


if __name__ == "__main__":
    run()
