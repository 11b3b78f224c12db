"""Utility helpers shared across the :mod:`anagrammer` package."""

from __future__ import annotations

from .logging_config import LOG_LEVEL_ENV_VAR, configure_logging
from .observability import (
    HistogramTimer,
    StructuredLoggerAdapter,
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)
from .telemetry import StructuredTelemetry, TelemetryLogger

__all__ = [
    "LOG_LEVEL_ENV_VAR",
    "configure_logging",
    "HistogramTimer",
    "StructuredLoggerAdapter",
    "add_span_attributes",
    "create_counter",
    "create_histogram",
    "get_logger",
    "record_exception",
    "start_span",
    "StructuredTelemetry",
    "TelemetryLogger",
]
