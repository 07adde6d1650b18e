from collections import defaultdict
from typing import Protocol

LabelKey = tuple[str, tuple[tuple[str, str], ...]]


class MetricsHook(Protocol):
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


class InMemoryMetricsHook:
    """
    Metrics hook that keeps everything in process memory.

    Counters accumulate, gauges keep the last value, latencies keep every
    sample. Keys are (name, sorted labels) so the same metric with different
    labels is tracked separately.
    """

    def __init__(self) -> None:
        self.counters: dict[LabelKey, int] = defaultdict(int)
        self.gauges: dict[LabelKey, float] = {}
        self.latencies: dict[LabelKey, list[float]] = defaultdict(list)

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.latencies[_key(name, labels)].append(value_ms)

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters[_key(name, labels)] += value

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.gauges[_key(name, labels)] = value

    def counter(self, name: str, labels: dict[str, str] | None = None) -> int:
        return self.counters.get(_key(name, labels), 0)

    def gauge(self, name: str, labels: dict[str, str] | None = None) -> float | None:
        return self.gauges.get(_key(name, labels))

    def samples(self, name: str, labels: dict[str, str] | None = None) -> list[float]:
        return list(self.latencies.get(_key(name, labels), []))


def _key(name: str, labels: dict[str, str] | None) -> LabelKey:
    return name, tuple(sorted((labels or {}).items()))
