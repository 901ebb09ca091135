"""
Metrics text parser.

Parses the Prometheus text exposition format with prometheus_client.
"""
from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from types import MappingProxyType

from prometheus_client.parser import text_string_to_metric_families

from node_checker.core.exceptions import MetricsParseError
from node_checker.metrics.snapshot import MetricsSnapshot, Sample


def parse_metrics(lines: Iterable[str]) -> MetricsSnapshot:
    """
    Parse raw metrics lines into a snapshot.

    Args:
        lines: Lines of one metrics response.

    Returns:
        MetricsSnapshot keyed by sample name.

    Raises:
        MetricsParseError: If any line is malformed.
    """
    text = "\n".join(lines)
    if text and not text.endswith("\n"):
        text += "\n"

    samples: dict[str, list[Sample]] = defaultdict(list)
    try:
        # Families are produced lazily, errors surface while iterating
        for family in text_string_to_metric_families(text):
            for sample in family.samples:
                samples[sample.name].append(
                    Sample(
                        name=sample.name,
                        labels=MappingProxyType(dict(sample.labels)),
                        value=float(sample.value),
                    )
                )
    except (ValueError, TypeError, IndexError) as e:
        raise MetricsParseError(f"Invalid metrics text: {e}") from e

    return MetricsSnapshot({name: tuple(values) for name, values in samples.items()})
