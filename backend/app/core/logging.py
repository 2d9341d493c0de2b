"""Logging configuration."""

from __future__ import annotations

import logging
import logging.config

from app.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install console logging with request correlation ids and PII scrubbing."""
    settings = get_settings()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "correlation_id": {
                    "()": "asgi_correlation_id.CorrelationIdFilter",
                    "uuid_length": 32,
                    "default_value": "-",
                },
                "sensitive": {"()": "app.security.logging_filters.SensitiveFilter"},
            },
            "formatters": {
                "console": {"format": LOG_FORMAT},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "console",
                    "filters": ["correlation_id", "sensitive"],
                },
            },
            "loggers": {
                "app": {"level": level or settings.log_level},
                "sqlalchemy.engine": {
                    "level": "INFO" if settings.database_echo else "WARNING"
                },
            },
            "root": {"level": "WARNING", "handlers": ["console"]},
        }
    )
    logging.getLogger(__name__).debug("Logging configured for %s", settings.app_env)
