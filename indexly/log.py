"""Logging setup shared by the API app and the ``indexly-build`` CLI."""

import logging.config


def configure_logging(level: str = "INFO") -> None:
    """Install the one-line JSON console formatter on the root logger.

    lunr's own logger is held at WARNING regardless of *level*.
    """
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                },
            },
            "loggers": {"lunr": {"level": "WARNING"}},
            "root": {"level": level, "handlers": ["console"]},
        }
    )
