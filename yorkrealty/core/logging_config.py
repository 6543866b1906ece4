# File: yorkrealty/core/logging_config.py

"""Centralized logging configuration driven by Settings."""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from yorkrealty.core.config import settings


class LoggingConfig:
    """Root logger setup shared by the API process and the test suite."""

    LOG_LEVEL = settings.log_level
    LOG_FORMAT = settings.log_format

    _configured = False

    @classmethod
    def setup_logging(cls) -> None:
        """Configure the root logger once; later calls are no-ops."""
        if cls._configured:
            return

        level = getattr(logging, cls.LOG_LEVEL, logging.INFO)
        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)

        if cls.LOG_FORMAT == "json":
            formatter = JsonFormatter(
                "%(asctime)s %(levelname)s %(name)s %(message)s",
                rename_fields={"levelname": "level", "asctime": "timestamp"},
            )
        else:
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )

        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

        # Suppress noisy third-party loggers
        logging.getLogger("multipart").setLevel(logging.WARNING)
        logging.getLogger("python_multipart").setLevel(logging.WARNING)
        logging.getLogger("PIL").setLevel(logging.WARNING)
        logging.getLogger("httpx").setLevel(logging.WARNING)

        cls._configured = True
