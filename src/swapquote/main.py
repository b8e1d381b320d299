"""Main entry point - runs the API server."""

import logging

import uvicorn

from swapquote.api.app import create_app
from swapquote.config import get_settings

logger = logging.getLogger(__name__)


def configure_logging(debug: bool, level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    log_level = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main():
    """Main entry point."""
    settings = get_settings()
    configure_logging(settings.debug, settings.log_level)

    logger.info("Starting swapquote...")
    logger.info(f"Environment: {settings.environment}, chain ID: {settings.chain_id}")

    app = create_app(settings)
    logger.info(f"Starting API server on {settings.api_host}:{settings.api_port}")
    try:
        uvicorn.run(
            app,
            host=settings.api_host,
            port=settings.api_port,
            log_level="debug" if settings.debug else "info",
        )
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received")


if __name__ == "__main__":
    main()
