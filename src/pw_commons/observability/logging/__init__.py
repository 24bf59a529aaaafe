"""Observability – structured logging helpers."""
from pw_commons.observability.logging.filters import SensitiveFieldsFilter
from pw_commons.observability.logging.factory import JsonLoggerFactory
from pw_commons.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
