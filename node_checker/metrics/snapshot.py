"""
Immutable metrics snapshot.
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class Sample:
    """One labelled sample of a metric."""

    name: str
    labels: Mapping[str, str]
    value: float

    def __hash__(self) -> int:
        return hash((self.name, tuple(sorted(self.labels.items())), self.value))

    def matches(self, **labels: str) -> bool:
        return all(self.labels.get(k) == v for k, v in labels.items())


class MetricsSnapshot(Mapping[str, tuple[Sample, ...]]):
    """
    Parsed metrics from a single fetch, keyed by sample name.

    Two snapshots are only comparable when they come from the same node.
    """

    __slots__ = ("_samples",)

    def __init__(self, samples: Mapping[str, tuple[Sample, ...]] | None = None):
        self._samples = MappingProxyType(dict(samples or {}))

    def __getitem__(self, name: str) -> tuple[Sample, ...]:
        return self._samples[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._samples)

    def __len__(self) -> int:
        return len(self._samples)

    def __repr__(self) -> str:
        return f"MetricsSnapshot({len(self)} metrics)"

    def get_samples(self, name: str, **labels: str) -> tuple[Sample, ...]:
        """Samples of a metric whose labels include all given labels."""
        return tuple(s for s in self._samples.get(name, ()) if s.matches(**labels))

    def get_metric_value(self, name: str, **labels: str) -> float | None:
        """
        Value of the first sample matching the labels.

        Returns:
            The value, or None when the metric or label set is absent.
        """
        samples = self.get_samples(name, **labels)
        if not samples:
            return None
        return samples[0].value
