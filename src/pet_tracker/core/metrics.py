"""Prometheus counters for the sighting workflow.

The counters live on a ``CollectorRegistry`` owned by the instance rather than
the process-wide default registry, so each application (and each test) gets
an independent set.
"""

from prometheus_client import CollectorRegistry, Counter, generate_latest

METRIC_PREFIX = "pet"


class SightingMetrics:
    """Counters for recorded sightings, resolved sightings and provider errors."""

    def __init__(self, registry: CollectorRegistry | None = None, prefix: str = METRIC_PREFIX) -> None:
        self.registry = registry if registry is not None else CollectorRegistry()
        self._names = {
            "recorded": f"{prefix}_sightings_recorded",
            "resolved": f"{prefix}_sightings_resolved",
            "api_errors": f"{prefix}_geocoding_api_errors",
        }
        self._recorded = Counter(self._names["recorded"], "Total sightings recorded", registry=self.registry)
        self._resolved = Counter(self._names["resolved"], "Total sightings resolved to a place", registry=self.registry)
        self._api_errors = Counter(
            self._names["api_errors"],
            "Total reverse geocoding provider errors",
            registry=self.registry,
        )

    def record_recorded(self) -> None:
        self._recorded.inc()

    def record_resolved(self) -> None:
        self._resolved.inc()

    def record_api_error(self) -> None:
        self._api_errors.inc()

    def snapshot(self) -> dict[str, float]:
        """Return the current counter values keyed by short name."""
        values: dict[str, float] = {}
        for key, name in self._names.items():
            value = self.registry.get_sample_value(f"{name}_total")
            values[key] = value if value is not None else 0.0
        return values

    def export(self) -> bytes:
        """Render all counters in the Prometheus text exposition format."""
        return generate_latest(self.registry)
