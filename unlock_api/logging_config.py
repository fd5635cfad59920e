import logging.config
import sys


def build_logging_config(level="INFO", formatter="json"):
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                "json_ensure_ascii": False,
            },
            "console": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
                "stream": sys.stdout,
            },
        },
        "loggers": {
            "unlock_api": {
                "level": level,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": "WARNING",
        },
    }


def configure_logging(level="INFO", formatter="json"):
    """
    Configure logging for the application.

    Args:
        level (str): Level of the ``unlock_api`` logger tree.
        formatter (str): ``json`` for structured output, ``console`` for plain text.
    """
    logging.config.dictConfig(build_logging_config(level, formatter))
    return logging.getLogger("unlock_api")
