"""Geocoder library — reverse geocoding behind a narrow provider interface.

Public API:
    - BaseReverseGeocoder: Abstract provider interface
    - ReverseGeocodeResult: Result dataclass
    - GeocodingProviderError: Provider transport/service failure
    - PositionStackGeocoder: PositionStack provider
    - get_reverse_geocoder: Build the configured provider from settings
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pet_tracker.lib.geocoder.base import (
    BaseReverseGeocoder,
    GeocodingProviderError,
    ReverseGeocodeResult,
)
from pet_tracker.lib.geocoder.positionstack import PositionStackGeocoder

if TYPE_CHECKING:
    from pet_tracker.core.config import Settings


def get_reverse_geocoder(settings: Settings) -> BaseReverseGeocoder:
    """Build the reverse geocoder described by the application settings.

    Args:
        settings: Application settings.

    Returns:
        A PositionStack geocoder. It reports ``is_configured = False`` when no
        API key is set, in which case every lookup fails as a provider error.
    """
    return PositionStackGeocoder(
        api_key=settings.positionstack_api_key,
        timeout=settings.positionstack_timeout,
        base_url=settings.positionstack_base_url,
    )


__all__ = [
    "BaseReverseGeocoder",
    "GeocodingProviderError",
    "PositionStackGeocoder",
    "ReverseGeocodeResult",
    "get_reverse_geocoder",
]
