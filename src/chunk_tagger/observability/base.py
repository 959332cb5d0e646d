# src/chunk_tagger/observability/base.py

from collections.abc import Mapping
from typing import Protocol, TypeAlias

# Taggers label every measurement with {"tagger": <name>},
# the factory with {"type": <tagger type>}.
Labels: TypeAlias = Mapping[str, str] | None


class MetricsHook(Protocol):
    """Receiver for tagging measurements.

    One hook is shared by every call of a tagger, so implementations
    must tolerate calls from several threads at once.
    """

    def record_latency(self, name: str, value_ms: float, labels: Labels = None) -> None:
        """Duration of one `find_tags` call, in milliseconds."""
        ...

    def increment(self, name: str, value: int = 1, labels: Labels = None) -> None:
        """Match, tag, widening and construction counts."""
        ...

    def record_gauge(self, name: str, value: float, labels: Labels = None) -> None:
        """Sentence length seen by a tagger."""
        ...


class NoOpMetricsHook:
    """Default hook for taggers built without one. Discards everything."""

    def record_latency(self, name: str, value_ms: float, labels: Labels = None) -> None:
        pass

    def increment(self, name: str, value: int = 1, labels: Labels = None) -> None:
        pass

    def record_gauge(self, name: str, value: float, labels: Labels = None) -> None:
        pass
