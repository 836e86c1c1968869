"""Process-wide logging setup."""
import logging
import sys

from skillsprout.core.config import Settings

_NOISY = ("sqlalchemy.engine", "aiosqlite", "passlib", "httpx", "httpcore")


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
        stream=sys.stdout,
    )
    for name in _NOISY:
        logging.getLogger(name).setLevel(logging.WARNING)
