"""Observability – structured logging helpers."""
from ease.observability.logging.factory import JsonLoggerFactory
from ease.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
