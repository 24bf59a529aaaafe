"""Observability – structured logging."""

from pw_commons.observability.logging import JsonLoggerFactory, SensitiveFieldsFilter, get_logger

__all__ = ["JsonLoggerFactory", "SensitiveFieldsFilter", "get_logger"]
