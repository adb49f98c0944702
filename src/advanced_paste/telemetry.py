"""Usage and error telemetry for custom-format generation."""
from abc import ABC, abstractmethod
from typing import ClassVar

import structlog
from prometheus_client import Counter
from pydantic import BaseModel, ConfigDict

GENERATE_TOTAL = Counter(
    "advanced_paste_generate_total",
    "Successful custom-format generations",
    ["model"],
)
GENERATE_ERRORS_TOTAL = Counter(
    "advanced_paste_generate_errors_total",
    "Failed custom-format generations",
)
TOKENS_TOTAL = Counter(
    "advanced_paste_tokens_total",
    "Tokens consumed by custom-format generations",
    ["model", "kind"],
)


class TelemetryEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    event_name: ClassVar[str] = "telemetry_event"


class GenerateCustomFormatEvent(TelemetryEvent):
    event_name: ClassVar[str] = "generate_custom_format"

    prompt_tokens: int
    completion_tokens: int
    model_name: str


class GenerateCustomErrorEvent(TelemetryEvent):
    event_name: ClassVar[str] = "generate_custom_error"

    error_message: str


class TelemetrySink(ABC):
    @abstractmethod
    def write_event(self, event: TelemetryEvent) -> None:
        ...


class LoggingTelemetrySink(TelemetrySink):
    def write_event(self, event: TelemetryEvent) -> None:
        structlog.get_logger().info(
            "telemetry_event",
            telemetry_event=event.event_name,
            **event.model_dump(),
        )


class PrometheusTelemetrySink(TelemetrySink):
    def write_event(self, event: TelemetryEvent) -> None:
        if isinstance(event, GenerateCustomFormatEvent):
            GENERATE_TOTAL.labels(model=event.model_name).inc()
            TOKENS_TOTAL.labels(model=event.model_name, kind="prompt").inc(event.prompt_tokens)
            TOKENS_TOTAL.labels(model=event.model_name, kind="completion").inc(event.completion_tokens)
        elif isinstance(event, GenerateCustomErrorEvent):
            GENERATE_ERRORS_TOTAL.inc()


class MultiTelemetrySink(TelemetrySink):
    """Fan out to several sinks; a failing sink never reaches the caller."""

    def __init__(self, *sinks: TelemetrySink) -> None:
        self._sinks = sinks

    def write_event(self, event: TelemetryEvent) -> None:
        for sink in self._sinks:
            try:
                sink.write_event(event)
            except Exception as e:
                structlog.get_logger().warning(
                    "telemetry_sink_failed",
                    sink=type(sink).__name__,
                    telemetry_event=event.event_name,
                    error=str(e),
                )
