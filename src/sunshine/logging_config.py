"""Logging setup for the command-line entrypoint."""

from __future__ import annotations

import logging.config


def logging_config(level: str) -> dict[str, object]:
    """Return a dictConfig mapping that logs to stderr at ``level``."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            }
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "plain",
            }
        },
        "loggers": {
            "urllib3": {"level": "WARNING"},
        },
        "root": {"level": level, "handlers": ["stderr"]},
    }


def configure_logging(level: str = "WARNING") -> None:
    """Apply the logging configuration."""
    logging.config.dictConfig(logging_config(level))
