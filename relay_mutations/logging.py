import logging
import logging.config
from typing import Optional

from .config import get_config

__all__ = ["LOGGING", "configure_logging"]

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"json": {"class": "logging.StreamHandler", "formatter": "json"}},
    "formatters": {"json": {"()": "json_log_formatter.JSONFormatter"}},
    "loggers": {"relay_mutations": {"handlers": ["json"], "level": "INFO"}},
}


def configure_logging(level: Optional[str] = None):
    """Log the relay_mutations records as JSON, at the configured level"""
    if level is None:
        level = get_config()["RELAY_MUTATIONS_LOG_LEVEL"]

    config = {
        **LOGGING,
        "loggers": {
            "relay_mutations": {
                **LOGGING["loggers"]["relay_mutations"],
                "level": level.upper(),
            }
        },
    }
    logging.config.dictConfig(config)
    return logging.getLogger("relay_mutations")
