"""Tests for span helpers."""

import pytest
from opentelemetry.trace import StatusCode

from collabstore.shared.telemetry.tracing import TracedOperation, add_span_attributes, span_name


def test_span_name() -> None:
    assert span_name("repository.pg", "NotificationRepository", "Get") == (
        "repository.pg.NotificationRepository/Get"
    )


def test_traced_operation_ok(tracer, span_exporter) -> None:
    with TracedOperation("op", {"file.path": "a.txt"}, tracer=tracer):
        add_span_attributes(extra=1)

    (span,) = span_exporter.get_finished_spans()
    assert span.status.status_code is StatusCode.OK
    assert span.attributes["file.path"] == "a.txt"
    assert span.attributes["extra"] == 1


async def test_traced_operation_async_error(tracer, span_exporter) -> None:
    with pytest.raises(RuntimeError):
        async with TracedOperation("op", tracer=tracer):
            raise RuntimeError("boom")

    (span,) = span_exporter.get_finished_spans()
    assert span.status.status_code is StatusCode.ERROR
    assert span.status.description == "boom"
