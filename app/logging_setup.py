import logging
from logging.config import dictConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] sentire.%(name)s: %(message)s"

# uvicorn keeps its own loggers; route them through our console handler
_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _logging_config() -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"sentire": {"format": LOG_FORMAT}},
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "sentire",
                "stream": "ext://sys.stdout",
            }
        },
        "root": {"level": "INFO", "handlers": ["stdout"]},
        "loggers": {
            name: {"level": "INFO", "handlers": ["stdout"], "propagate": False}
            for name in _UVICORN_LOGGERS
        },
    }


def configure_logging() -> None:
    """Install the stdout handler unless the root logger already has one."""
    if logging.getLogger().handlers:
        return
    dictConfig(_logging_config())
