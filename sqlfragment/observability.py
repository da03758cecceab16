from dataclasses import dataclass, field
import json
import logging
from typing import Any, Callable, Mapping

# ==================================================
# Observability Types
# ==================================================

CompileObserveHook = Callable[["CompileObservation"], None]
LabelMap = Mapping[str, str]


@dataclass(frozen=True)
class ObservabilitySettings:
    """
    Compile observability settings.
    """

    compile_observer: CompileObserveHook | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CompileObservation:
    """
    Structured payload describing one fragment compilation.
    """

    placeholder_prefix: str
    sql: str
    param_count: int
    duration_ms: float
    succeeded: bool
    metadata: Mapping[str, Any] = field(default_factory=dict)
    error_type: str | None = None
    error_message: str | None = None


def observation_to_dict(observation: CompileObservation) -> dict[str, Any]:
    """
    Converts a CompileObservation into a JSON-safe dictionary.
    """

    return {
        "placeholder_prefix": observation.placeholder_prefix,
        "sql": observation.sql,
        "param_count": observation.param_count,
        "duration_ms": observation.duration_ms,
        "succeeded": observation.succeeded,
        "metadata": dict(observation.metadata),
        "error_type": observation.error_type,
        "error_message": observation.error_message,
    }


def make_json_observation_logger(
    *,
    logger: logging.Logger,
    level: int = logging.INFO,
) -> CompileObserveHook:
    """
    Builds a CompileObserveHook that emits one JSON log line per observation.
    """

    def _log_observation(observation: CompileObservation) -> None:
        payload = observation_to_dict(observation)
        logger.log(level, json.dumps(payload, separators=(",", ":"), sort_keys=True, default=str))

    return _log_observation


def compose_observers(*observers: CompileObserveHook) -> CompileObserveHook:
    """
    Composes multiple observers into a single observer.
    """

    def _composed(observation: CompileObservation) -> None:
        for observer in observers:
            observer(observation)

    return _composed


# ==================================================
# In-Memory Metrics
# ==================================================


def _labels_key(labels: LabelMap) -> tuple[tuple[str, str], ...]:
    return tuple(sorted((str(key), str(value)) for key, value in labels.items()))


@dataclass(frozen=True)
class MetricPoint:
    """
    Single metric point lookup result.
    """

    name: str
    labels: Mapping[str, str]
    value: int | float


class InMemoryCompileMetrics:
    """
    In-memory metrics adapter for CompileObservation streams.
    """

    def __init__(self) -> None:
        self._counters: dict[tuple[str, tuple[tuple[str, str], ...]], int] = {}
        self._histograms: dict[tuple[str, tuple[tuple[str, str], ...]], list[float]] = {}

    def __call__(self, observation: CompileObservation) -> None:
        labels = {
            "placeholder_prefix": observation.placeholder_prefix,
            "error_type": observation.error_type or "none",
        }
        self._inc("sqlfragment_compiles_total", labels, 1)
        if not observation.succeeded:
            self._inc("sqlfragment_compile_failures_total", labels, 1)
            return
        self._observe("sqlfragment_compile_duration_ms", labels, observation.duration_ms)
        self._observe("sqlfragment_compile_param_count", labels, observation.param_count)

    def _inc(self, metric: str, labels: LabelMap, delta: int) -> None:
        key = (metric, _labels_key(labels))
        self._counters[key] = self._counters.get(key, 0) + delta

    def _observe(self, metric: str, labels: LabelMap, value: float) -> None:
        key = (metric, _labels_key(labels))
        self._histograms.setdefault(key, []).append(value)

    def counter_value(self, metric: str, labels: LabelMap) -> int:
        return self._counters.get((metric, _labels_key(labels)), 0)

    def histogram_values(self, metric: str, labels: LabelMap) -> list[float]:
        return list(self._histograms.get((metric, _labels_key(labels)), []))

    def counters(self) -> list[MetricPoint]:
        return [
            MetricPoint(name=name, labels=dict(label_key), value=value)
            for (name, label_key), value in self._counters.items()
        ]

    def histograms(self) -> list[MetricPoint]:
        points: list[MetricPoint] = []
        for (name, label_key), values in self._histograms.items():
            for value in values:
                points.append(MetricPoint(name=name, labels=dict(label_key), value=value))
        return points
