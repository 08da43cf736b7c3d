"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from collabstore.shared.telemetry.logging import get_logger, setup_logging
from collabstore.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    get_tracer,
    set_telemetry,
)
from collabstore.shared.telemetry.tracing import (
    TracedOperation,
    add_span_attributes,
    span_name,
)

__all__ = [
    "TelemetryConfig",
    "TracedOperation",
    "add_span_attributes",
    "get_logger",
    "get_telemetry",
    "get_tracer",
    "set_telemetry",
    "setup_logging",
    "span_name",
]
