"""
OpenTelemetry Exporter for azticket

Architectural Intent:
- Exports one span per CLI command plus ticket outcome counters and command
  durations to an OTLP-compatible backend
- Disabled unless telemetry.endpoint is configured; local buffers still
  record what would have been exported

Security:
- Endpoint validation lives in TelemetryConfig; plaintext export to a remote
  host must be opted into with insecure=True
"""

from __future__ import annotations

import logging
from datetime import datetime, UTC
from typing import Any, Optional

from azticket.domain.entities.ticket import TicketResult
from azticket.infrastructure.config import TelemetryConfig

logger = logging.getLogger(__name__)

COUNTER = "counter"
HISTOGRAM = "histogram"


class OTELExporter:
    def __init__(self, config: TelemetryConfig):
        self.config = config
        self._initialized = False
        self._metrics_buffer: list[dict[str, Any]] = []
        self._meter: Any = None
        self._tracer: Any = None
        self._providers: list[Any] = []
        self._instruments: dict[tuple[str, str], Any] = {}

    @property
    def enabled(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """Initialize OpenTelemetry SDK and exporters."""
        if not self.config.endpoint:
            logger.debug("OTEL endpoint not configured, telemetry disabled")
            return

        try:
            from opentelemetry import metrics, trace
            from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import (
                OTLPMetricExporter,
            )
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
                OTLPSpanExporter,
            )
            from opentelemetry.sdk.metrics import MeterProvider
            from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
            from opentelemetry.sdk.resources import SERVICE_NAME, Resource
            from opentelemetry.sdk.trace import TracerProvider
            from opentelemetry.sdk.trace.export import BatchSpanProcessor
        except ImportError:
            logger.warning("OpenTelemetry SDK not installed, telemetry disabled")
            return

        resource = Resource(
            attributes={
                SERVICE_NAME: self.config.service_name,
                "environment": self.config.environment,
            }
        )
        insecure = self.config.endpoint.startswith("http://")

        tracer_provider = TracerProvider(resource=resource)
        tracer_provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=self.config.endpoint, insecure=insecure))
        )
        trace.set_tracer_provider(tracer_provider)
        self._tracer = trace.get_tracer(__name__)

        meter_provider = MeterProvider(
            resource=resource,
            metric_readers=[
                PeriodicExportingMetricReader(
                    OTLPMetricExporter(endpoint=self.config.endpoint, insecure=insecure)
                )
            ],
        )
        metrics.set_meter_provider(meter_provider)
        self._meter = metrics.get_meter(__name__)

        self._providers = [tracer_provider, meter_provider]
        self._initialized = True
        logger.info("Exporting telemetry to %s", self.config.endpoint)

    def _instrument(self, name: str, kind: str, unit: str) -> Any:
        key = (name, kind)
        if key not in self._instruments and self._meter:
            if kind == COUNTER:
                self._instruments[key] = self._meter.create_counter(name, unit=unit)
            else:
                self._instruments[key] = self._meter.create_histogram(name, unit=unit)
        return self._instruments.get(key)

    def record_metric(
        self,
        name: str,
        value: float,
        unit: str = "",
        attributes: Optional[dict[str, str]] = None,
        kind: str = HISTOGRAM,
    ) -> None:
        """Record a metric value."""
        attributes = attributes or {}
        self._metrics_buffer.append(
            {
                "name": name,
                "value": value,
                "unit": unit,
                "kind": kind,
                "attributes": attributes,
                "timestamp": datetime.now(UTC).isoformat(),
            }
        )

        if self._initialized:
            instrument = self._instrument(name, kind, unit)
            if kind == COUNTER:
                instrument.add(value, attributes=attributes)
            else:
                instrument.record(value, attributes=attributes)

    def record_ticket_outcome(self, command: str, result: TicketResult) -> None:
        self.record_metric(
            "azticket.ticket.outcome",
            1.0,
            attributes={
                "command": command,
                "status": result.status,
                "dry_run": str(result.dry_run),
            },
            kind=COUNTER,
        )

    def record_failure(self, command: str, error: BaseException, state: str = "") -> None:
        self.record_metric(
            "azticket.ticket.failed",
            1.0,
            attributes={
                "command": command,
                "error": type(error).__name__,
                "state": state,
            },
            kind=COUNTER,
        )

    def record_duration(self, command: str, duration_ms: float) -> None:
        self.record_metric(
            "azticket.command.duration_ms",
            duration_ms,
            unit="ms",
            attributes={"command": command},
        )

    def start_span(
        self,
        name: str,
        attributes: Optional[dict[str, str]] = None,
    ) -> Optional[Any]:
        """Start a tracing span; None while telemetry is disabled."""
        if not self._initialized:
            return None
        return self._tracer.start_span(name, attributes=attributes or {})

    def end_span(self, span: Any, error: Optional[BaseException] = None) -> None:
        if span is None:
            return
        if error is not None:
            span.record_exception(error)
        span.end()

    async def export(self) -> None:
        """Flush providers and clear the local buffer."""
        if not self._initialized:
            return

        for provider in self._providers:
            provider.force_flush()
        exported_count = len(self._metrics_buffer)
        self._metrics_buffer.clear()

        if exported_count:
            logger.debug("Flushed %d buffered metrics", exported_count)
