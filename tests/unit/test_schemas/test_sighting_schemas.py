"""Tests for sighting request/response schemas."""

import uuid
from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from pet_tracker.models.sighting import Sighting
from pet_tracker.schemas.sighting import SightingCreateRequest, SightingResponse


def _valid(**overrides: object) -> dict:
    data = {"sensor_id": "S1", "latitude": -23.5505, "longitude": -46.6333, "observed_at": "2026-03-14T12:00:00"}
    data.update(overrides)
    return data


class TestSightingCreateRequest:
    """Tests for SightingCreateRequest validation."""

    def test_valid(self) -> None:
        req = SightingCreateRequest(**_valid())
        assert req.sensor_id == "S1"
        assert req.observed_at == datetime(2026, 3, 14, 12, 0)

    def test_sensor_id_kept_as_sent(self) -> None:
        assert SightingCreateRequest(**_valid(sensor_id="  S1 ")).sensor_id == "  S1 "

    @pytest.mark.parametrize("sensor_id", ["", "   "])
    def test_blank_sensor_id_rejected(self, sensor_id: str) -> None:
        with pytest.raises(ValidationError):
            SightingCreateRequest(**_valid(sensor_id=sensor_id))

    def test_sensor_id_too_long(self) -> None:
        with pytest.raises(ValidationError):
            SightingCreateRequest(**_valid(sensor_id="x" * 101))

    @pytest.mark.parametrize("latitude", [-90, 0, 90])
    def test_latitude_bounds_inclusive(self, latitude: float) -> None:
        assert SightingCreateRequest(**_valid(latitude=latitude)).latitude == latitude

    @pytest.mark.parametrize("latitude", [-90.0001, 100.0, float("nan")])
    def test_latitude_out_of_range(self, latitude: float) -> None:
        with pytest.raises(ValidationError):
            SightingCreateRequest(**_valid(latitude=latitude))

    @pytest.mark.parametrize("longitude", [-180.5, 181, float("inf")])
    def test_longitude_out_of_range(self, longitude: float) -> None:
        with pytest.raises(ValidationError):
            SightingCreateRequest(**_valid(longitude=longitude))

    def test_observed_at_required(self) -> None:
        data = _valid()
        del data["observed_at"]
        with pytest.raises(ValidationError):
            SightingCreateRequest(**data)

    def test_offset_timestamp_normalized_to_utc(self) -> None:
        brt = timezone(timedelta(hours=-3))
        req = SightingCreateRequest(**_valid(observed_at=datetime(2026, 3, 14, 9, 0, tzinfo=brt)))
        assert req.observed_at == datetime(2026, 3, 14, 12, 0, tzinfo=UTC)
        assert req.observed_at.utcoffset() == timedelta(0)


class TestSightingResponse:
    """Tests for SightingResponse serialization."""

    def test_from_model(self) -> None:
        now = datetime(2026, 3, 14, 12, 0, tzinfo=UTC)
        sighting = Sighting(
            id=uuid.uuid4(),
            sensor_id="S1",
            latitude=1.0,
            longitude=2.0,
            observed_at=now,
            resolved=False,
            created_at=now,
            updated_at=now,
        )
        resp = SightingResponse.model_validate(sighting)
        assert resp.sensor_id == "S1"
        assert resp.resolved is False
        assert resp.country is None
        assert resp.address is None
