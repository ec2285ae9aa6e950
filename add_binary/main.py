"""HTTP application exposing the binary conversion strategies."""

import uvicorn
from fastapi import FastAPI

from add_binary import __version__
from add_binary.core.config import get_config
from add_binary.core.logging import get_logger, setup_logging
from add_binary.api.conversions import router as conversions_router
from add_binary.api.health import router as health_router

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    config = get_config()
    setup_logging(config.log_level, config.log_json)

    app = FastAPI(
        title="Add Binary",
        version=__version__,
        description="Sum two integers and render the result in binary",
    )

    app.include_router(health_router)
    app.include_router(conversions_router)

    logger.info("Application created", int_width=config.int_width,
                overflow_policy=config.overflow_policy, negative_policy=config.negative_policy)
    return app


def run() -> None:
    """Serve the application with uvicorn."""
    config = get_config()
    uvicorn.run(
        "add_binary.main:create_app",
        factory=True,
        host=config.host,
        port=config.port,
        log_config=None  # Use our custom logging
    )


if __name__ == "__main__":
    run()
