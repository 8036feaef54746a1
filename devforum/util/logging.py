"""Logging configuration for the application."""

import logging
import sys

from devforum.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure standard library logging for third-party libraries.

    Application events go through logfire; this keeps uvicorn, SQLAlchemy
    and alembic output consistent with it.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # Engine echo is noisy; logfire already traces queries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("devforum").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
