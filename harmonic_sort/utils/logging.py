"""
Logging configuration for harmonic-sort
"""

import logging
import sys
from typing import Any, Optional

import numpy as np
import structlog

from harmonic_sort.config import get_settings


def _convert_numpy_types(value: Any) -> Any:
    """Convert numpy types to native Python types for cleaner logs."""
    if isinstance(value, np.floating):
        return float(value)
    elif isinstance(value, np.integer):
        return int(value)
    elif isinstance(value, np.bool_):
        return bool(value)
    elif isinstance(value, np.ndarray):
        return value.tolist()
    elif isinstance(value, dict):
        return {k: _convert_numpy_types(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return type(value)(_convert_numpy_types(v) for v in value)
    return value


def numpy_to_python_processor(logger, method_name, event_dict):
    """Structlog processor that converts numpy types to native Python."""
    return {k: _convert_numpy_types(v) for k, v in event_dict.items()}


def setup_logging(log_level: Optional[str] = None, log_file: Optional[str] = None):
    """
    Configure structured logging using structlog.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR), defaults to settings
        log_file: Optional path of a file to mirror log output to, defaults to settings
    """
    settings = get_settings()
    log_level = log_level or settings.log_level
    log_file = settings.log_file if log_file is None else log_file

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        format="%(message)s",
        handlers=handlers,
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            numpy_to_python_processor,  # Tempos often arrive as numpy scalars
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
