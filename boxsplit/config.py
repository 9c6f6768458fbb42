"""Library configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class Settings(BaseSettings):
    boxsplit_log_level: str = "warning"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()


def configure_logging(level: str | None = None) -> logging.Logger:
    """Send boxsplit's log records to stderr at ``level`` (default BOXSPLIT_LOG_LEVEL).

    Meant for scripts and applications; importing boxsplit never calls it.
    Calling it again only changes the level.
    """
    logger = logging.getLogger("boxsplit")
    name = (level or settings.boxsplit_log_level).upper()
    logger.setLevel(getattr(logging, name, logging.WARNING))
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
