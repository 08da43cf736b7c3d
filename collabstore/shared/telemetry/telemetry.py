"""OpenTelemetry setup for the data-access layer.

One TelemetryConfig per process. ``setup()`` installs the tracer provider
(console, OTLP gRPC or no exporter), ``instrument()`` hooks the Redis
client, the record-store engine and log records into it. Repository
spans (``repository.redis.*``, ``repository.pg.*``, ``repository.s3.*``)
are created through tracers obtained from ``tracer()``.
"""

import logging
import threading

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.redis import RedisInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from sqlalchemy.ext.asyncio import AsyncEngine

from collabstore.core.config import Settings

logger = logging.getLogger(__name__)

EXPORTER_CONSOLE = "console"
EXPORTER_OTLP = "otlp"
EXPORTER_NONE = "none"


class TelemetryConfig:
    """Tracer provider plus Redis, SQLAlchemy and logging instrumentation.

    Setup and instrumentation failures are logged, never raised: a broken
    exporter must not take the record store or cache down with it.
    """

    def __init__(
        self,
        service_name: str,
        service_version: str,
        *,
        enabled: bool = True,
        environment: str = "development",
        exporter: str = EXPORTER_CONSOLE,
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.enabled = enabled
        self.environment = environment
        self.exporter = exporter
        self.otlp_endpoint = otlp_endpoint
        self.sample_rate = sample_rate
        self.tracer_provider: TracerProvider | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "TelemetryConfig":
        return cls(
            settings.app_name,
            settings.app_version,
            enabled=settings.telemetry_enabled,
            environment=settings.telemetry_environment,
            exporter=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )

    def _build_exporter(self) -> SpanExporter | None:
        """Exporter for the configured type; None for ``none``.

        ``otlp`` without an endpoint and unknown types fall back to console.
        """
        if self.exporter == EXPORTER_NONE:
            return None
        if self.exporter == EXPORTER_OTLP and self.otlp_endpoint:
            return OTLPSpanExporter(
                endpoint=self.otlp_endpoint,
                insecure=self.otlp_endpoint.startswith("http://"),
            )
        if self.exporter != EXPORTER_CONSOLE:
            logger.warning("Unknown span exporter '%s', using console", self.exporter)
        return ConsoleSpanExporter()

    def setup(self) -> TracerProvider | None:
        """Create the tracer provider and install it globally.

        Returns:
            The provider, or None when telemetry is disabled or setup failed.
        """
        if not self.enabled:
            logger.info("Telemetry disabled")
            return None
        try:
            resource = Resource(
                attributes={
                    SERVICE_NAME: self.service_name,
                    SERVICE_VERSION: self.service_version,
                    "deployment.environment": self.environment,
                }
            )
            provider = TracerProvider(
                resource=resource, sampler=TraceIdRatioBased(self.sample_rate)
            )
            exporter = self._build_exporter()
            if exporter is not None:
                provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(provider)
        except Exception as e:
            logger.exception("Failed to initialize telemetry: %s", e)
            return None
        self.tracer_provider = provider
        logger.info(
            "OpenTelemetry initialized: service=%s, exporter=%s, sample_rate=%s",
            self.service_name,
            self.exporter,
            self.sample_rate,
        )
        return provider

    def instrument(self, engine: AsyncEngine | None = None) -> list[str]:
        """Instrument Redis, logging and (when given) the record-store engine.

        No-op until setup() has produced a provider.

        Returns:
            Names of the instrumentations that were enabled.
        """
        if not self.enabled or self.tracer_provider is None:
            return []
        steps = [
            ("redis", RedisInstrumentor(), {}),
            ("logging", LoggingInstrumentor(), {"set_logging_format": True}),
        ]
        if engine is not None:
            steps.append(
                (
                    "sqlalchemy",
                    SQLAlchemyInstrumentor(),
                    {"engine": engine.sync_engine, "enable_commenter": True},
                )
            )
        enabled = []
        for name, instrumentor, options in steps:
            try:
                instrumentor.instrument(tracer_provider=self.tracer_provider, **options)
            except Exception as e:
                logger.exception("Failed to instrument %s: %s", name, e)
                continue
            enabled.append(name)
        logger.info("Instrumentation enabled: %s", ", ".join(enabled) or "none")
        return enabled

    def tracer(self, name: str) -> trace.Tracer:
        """Tracer from this provider (global provider before setup)."""
        if self.tracer_provider is not None:
            return self.tracer_provider.get_tracer(name, self.service_version)
        return trace.get_tracer(name)

    def shutdown(self) -> None:
        """Flush pending spans and stop the provider."""
        if self.tracer_provider is None:
            return
        try:
            self.tracer_provider.shutdown()
        except Exception as e:
            logger.exception("Error during telemetry shutdown: %s", e)
            return
        logger.info("Telemetry shutdown complete")


_telemetry: TelemetryConfig | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> TelemetryConfig | None:
    """Return the process telemetry instance (None until set_telemetry)."""
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry


def get_tracer(name: str) -> trace.Tracer:
    """Tracer for repository spans, from the process telemetry when set."""
    telemetry = get_telemetry()
    if telemetry is not None:
        return telemetry.tracer(name)
    return trace.get_tracer(name)
