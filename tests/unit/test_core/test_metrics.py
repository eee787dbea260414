"""Unit tests for the sighting metrics sink."""

from prometheus_client import CollectorRegistry

from pet_tracker.core.metrics import SightingMetrics


class TestSightingMetrics:
    """Tests for SightingMetrics counters."""

    def test_starts_at_zero(self) -> None:
        assert SightingMetrics().snapshot() == {"recorded": 0.0, "resolved": 0.0, "api_errors": 0.0}

    def test_each_counter_increments_independently(self) -> None:
        metrics = SightingMetrics()
        metrics.record_recorded()
        metrics.record_recorded()
        metrics.record_resolved()
        metrics.record_api_error()
        assert metrics.snapshot() == {"recorded": 2.0, "resolved": 1.0, "api_errors": 1.0}

    def test_instances_are_isolated(self) -> None:
        first = SightingMetrics()
        second = SightingMetrics()
        first.record_recorded()
        assert second.snapshot()["recorded"] == 0.0

    def test_uses_injected_registry(self) -> None:
        registry = CollectorRegistry()
        metrics = SightingMetrics(registry=registry)
        metrics.record_resolved()
        assert registry.get_sample_value("pet_sightings_resolved_total") == 1.0

    def test_export_text_format(self) -> None:
        metrics = SightingMetrics()
        metrics.record_api_error()
        text = metrics.export().decode()
        assert "pet_sightings_recorded_total 0.0" in text
        assert "pet_geocoding_api_errors_total 1.0" in text
