"""
Logging Utilities
=================

Logging setup for applications that take their configuration from the
environment. The library modules only create module-level loggers; nothing is
configured until ``setup_logging`` is called.
"""

import logging
import logging.handlers
import os
import sys
from dataclasses import dataclass
from typing import List, Mapping, Optional

from ..config.fields import env_field
from ..config.struct_loader import load_struct
from ..errors import FieldError, ParseError
from .parsing import parse_size

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

MAX_FILE_SIZE_VAR = "ENVCONFIG_LOG_MAX_FILE_SIZE"


@dataclass
class LoggingSettings:
    """Logging options read from ENVCONFIG_LOG_* variables."""
    level: str = env_field("ENVCONFIG_LOG_LEVEL", "INFO", initial="INFO")
    file: str = env_field("ENVCONFIG_LOG_FILE", initial="")
    max_file_size: str = env_field(MAX_FILE_SIZE_VAR, "10MB", initial="10MB")
    backup_count: int = env_field("ENVCONFIG_LOG_BACKUP_COUNT", "5", initial=5)

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.level.upper(), logging.INFO)

    @property
    def max_bytes(self) -> int:
        return parse_size(self.max_file_size)

    def validate(self) -> None:
        """Check the values load_struct cannot type-check."""
        try:
            parse_size(self.max_file_size)
        except ParseError as e:
            raise FieldError(MAX_FILE_SIZE_VAR, 'max_file_size', e) from e


def setup_logging(
    settings: Optional[LoggingSettings] = None,
    environ: Optional[Mapping[str, str]] = None
) -> logging.Logger:
    """
    Replace the root logger's handlers with ones built from ``settings``.

    Args:
        settings: Explicit settings; read from the environment when omitted
        environ: Mapping to read settings from, defaults to os.environ

    Returns:
        The ``envconfig`` logger

    Raises:
        FieldError: If a logging setting is invalid; the root logger is left as it was
    """
    if settings is None:
        settings = load_struct(LoggingSettings(), environ)

    settings.validate()
    handlers = _build_handlers(settings)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(settings.numeric_level)
    for handler in handlers:
        root_logger.addHandler(handler)

    app_logger = logging.getLogger('envconfig')
    app_logger.info(f"Logging initialized - Level: {settings.level}, File: {settings.file or None}")
    return app_logger


def _build_handlers(settings: LoggingSettings) -> List[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if settings.file:
        log_dir = os.path.dirname(settings.file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            settings.file,
            maxBytes=settings.max_bytes,
            backupCount=settings.backup_count,
            encoding='utf-8'
        ))

    for handler in handlers:
        handler.setLevel(settings.numeric_level)
        handler.setFormatter(formatter)
    return handlers
