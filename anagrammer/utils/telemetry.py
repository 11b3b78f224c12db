"""Per-run telemetry for anagram searches."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from .observability import get_logger

TelemetryListener = Callable[[str, Dict[str, Any]], None]


class StructuredTelemetry:
    """Collects timings, counters and metadata for one trace at a time."""

    def __init__(
        self,
        time_fn: Optional[Callable[[], float]] = None,
        *,
        listeners: Optional[Iterable[TelemetryListener]] = None,
    ) -> None:
        self._time_fn = time_fn or time.perf_counter
        self._listeners: List[TelemetryListener] = list(listeners or [])
        self._trace_id = 0
        self._reset_state()

    def _reset_state(self) -> None:
        self._trace_name: Optional[str] = None
        self._timings: Dict[str, Dict[str, float]] = {}
        self._counters: Dict[str, float] = {}
        self._metadata: Dict[str, Any] = {}

    def _notify(self, event_type: str, payload: Dict[str, Any]) -> None:
        for listener in tuple(self._listeners):
            listener(event_type, dict(payload))

    def now(self) -> float:
        return float(self._time_fn())

    def start_trace(self, name: str) -> int:
        """Discard the previous trace and start recording ``name``."""

        self._trace_id += 1
        self._reset_state()
        self._trace_name = name
        self._metadata["start_time"] = self.now()
        self._notify("trace_started", {"trace_id": self._trace_id, "name": name})
        return self._trace_id

    def record_timing(self, name: str, duration: float) -> None:
        duration = max(0.0, float(duration))
        bucket = self._timings.setdefault(
            name, {"count": 0, "total": 0.0, "min": duration, "max": duration}
        )
        bucket["count"] += 1
        bucket["total"] += duration
        bucket["min"] = min(bucket["min"], duration)
        bucket["max"] = max(bucket["max"], duration)
        self._notify("timing", {"name": name, "duration": duration})

    @contextmanager
    def timer(self, name: str) -> Iterator[None]:
        """Record how long the ``with`` block takes under ``name``."""

        start = self.now()
        self._notify("timer_started", {"name": name})
        try:
            yield
        finally:
            self.record_timing(name, self.now() - start)

    def increment(self, name: str, amount: float = 1.0) -> None:
        value = float(amount)
        self._counters[name] = self._counters.get(name, 0.0) + value
        self._notify(
            "counter", {"name": name, "delta": value, "value": self._counters[name]}
        )

    def annotate(self, key: str, value: Any) -> None:
        self._metadata[key] = value
        self._notify("metadata", {"key": key, "value": value})

    def snapshot(self) -> Dict[str, Any]:
        return {
            "trace_id": self._trace_id,
            "name": self._trace_name,
            "timings": {key: dict(value) for key, value in self._timings.items()},
            "counters": dict(self._counters),
            "metadata": dict(self._metadata),
        }

    def add_listener(self, listener: TelemetryListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: TelemetryListener) -> None:
        self._listeners = [entry for entry in self._listeners if entry is not listener]


class TelemetryLogger:
    """Listener that writes telemetry events to the project logger."""

    def __init__(
        self,
        *,
        logger: Optional[logging.LoggerAdapter] = None,
        level: int = logging.INFO,
        level_map: Optional[Dict[str, int]] = None,
    ) -> None:
        self._logger = logger or get_logger(__name__).bind(component="telemetry")
        self._default_level = level
        self._level_map = dict(level_map or {})

    def __call__(self, event_type: str, payload: Dict[str, Any]) -> None:
        level = self._level_map.get(event_type, self._default_level)
        if not self._logger.isEnabledFor(level):
            return

        context = {"telemetry.event": event_type}
        context.update({str(key): value for key, value in payload.items()})
        name = payload.get("name") or payload.get("key") or "event"
        self._logger.log(level, f"Telemetry {event_type}: {name}", context=context)


__all__ = ["StructuredTelemetry", "TelemetryListener", "TelemetryLogger"]
