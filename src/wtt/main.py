"""Process startup and shutdown for hosts embedding the service."""

from src.wtt.core.config import Settings, get_settings
from src.wtt.core.db import create_tables, dispose_engine
from src.wtt.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


async def startup(settings: Settings | None = None, create_schema: bool = False) -> None:
    """Configure logging and, for local databases, create the CRM tables."""
    if settings is None:
        settings = get_settings()
    setup_logging(settings.debug)
    logger.info(
        f"Starting {settings.app_name}",
        app_env=settings.app_env,
        segment=settings.gateway_config().segment_path,
    )
    if create_schema:
        await create_tables()


async def shutdown() -> None:
    logger.info("Closing connections...")
    await dispose_engine()
    logger.info("Shutdown complete")
