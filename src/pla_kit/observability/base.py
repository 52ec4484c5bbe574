# src/pla_kit/observability/base.py

from collections import Counter
from typing import Protocol


class MetricsHook(Protocol):
    """Sink for parser metrics.

    PlaParser.parse reports one latency, a handful of counters and one gauge
    per call; names live in pla_kit.observability.names. Backends (Prometheus,
    StatsD, ...) implement this.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    """Default hook for PlaParser when nobody collects metrics.

    Every call is discarded.
    """

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


def _key(name: str, labels: dict[str, str] | None) -> str:
    if not labels:
        return name
    rendered = ",".join(f"{k}={v}" for k, v in sorted(labels.items()))
    return f"{name}{{{rendered}}}"


class InMemoryMetricsHook:
    """Keeps metrics in process; used by the CLI summary and in tests.

    Keys are the metric name, followed by sorted labels in braces when present,
    e.g. ``pla_parse_errors_total{kind=invalid_date}``.
    """

    def __init__(self) -> None:
        self.counters: Counter[str] = Counter()
        self.gauges: dict[str, float] = {}
        self.latencies: dict[str, list[float]] = {}

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.latencies.setdefault(_key(name, labels), []).append(value_ms)

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters[_key(name, labels)] += value

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.gauges[_key(name, labels)] = value
