# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: logging_utils.py
# -----------------------------------------------------------------------------

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

import colorlog

BASE_LOGGER_NAME = "quote_vector_search"


def _ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    formatter = colorlog.ColoredFormatter(
        fmt=(
            "%(log_color)s%(asctime)s [%(levelname)s] "
            "%(name)s:%(lineno)d:%(reset)s %(message_log_color)s%(message)s"
        ),
        datefmt="%Y-%m-%d %H:%M:%S",
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        },
        secondary_log_colors={
            "message": {
                "INFO": "white",
                "WARNING": "yellow",
                "ERROR": "light_red",
                "CRITICAL": "red",
            }
        },
        style="%",
    )
    handler.setFormatter(formatter)
    return handler


def _file_handler(log_file: str) -> logging.Handler:
    log_path = Path(log_file)
    _ensure_parent_dir(log_path)

    max_bytes = int(os.getenv("QVS_LOG_MAX_BYTES", str(5 * 1024 * 1024)))  # 5MB
    backup_count = int(os.getenv("QVS_LOG_BACKUP_COUNT", "5"))

    file_handler = RotatingFileHandler(
        filename=str(log_path),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    return file_handler


def _create_logger(full_name: str) -> logging.Logger:
    """
    Internal helper to create/configure a logger with a given full name.
    Handlers are only attached once per logger name.
    """
    logger = logging.getLogger(full_name)

    if not logger.handlers:
        logger.addHandler(_console_handler())

        # Off by default: the CLI is usually run ad hoc from a checkout
        log_to_file = os.getenv("QVS_LOG_TO_FILE", "0").lower() in ("1", "true", "yes", "y")
        if log_to_file:
            logger.addHandler(_file_handler(os.getenv("QVS_LOG_FILE", "./logs/quote_vector_search.log")))

        set_level(logger, os.getenv("QVS_LOG_LEVEL", "INFO"))
        logger.propagate = False

    return logger


def set_level(logger: logging.Logger, level_name: str) -> None:
    logger.setLevel(getattr(logging, level_name.upper(), logging.INFO))


def set_global_level(level_name: str) -> None:
    """
    Apply a level to every logger already created under the base namespace.
    Used by the CLI --log-level flag.
    """
    for name, logger in logging.root.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and name.startswith(BASE_LOGGER_NAME):
            set_level(logger, level_name)
    os.environ["QVS_LOG_LEVEL"] = level_name.upper()


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Generic logger that does not include a class name.
    """
    full_name = f"{BASE_LOGGER_NAME}.{name}" if name else BASE_LOGGER_NAME
    return _create_logger(full_name)


def get_class_logger(cls: type) -> logging.Logger:
    """
    Returns a logger whose name includes module + class, e.g.:

      quote_vector_search.embedding.HFEmbeddingClient.HFEmbeddingClient
      quote_vector_search.services.QuoteIngestService.QuoteIngestService
    """
    module = getattr(cls, "__module__", "unknown_module")
    classname = getattr(cls, "__name__", "UnknownClass")

    full_name = f"{BASE_LOGGER_NAME}.{module}.{classname}"
    return _create_logger(full_name)
