"""Abstract reverse geocoder interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class ReverseGeocodeResult:
    """Best-ranked place returned by a reverse geocoding provider."""

    latitude: float | None = None
    longitude: float | None = None
    type: str | None = None
    name: str | None = None
    number: str | None = None
    street: str | None = None
    postal_code: str | None = None
    confidence: float | None = None
    region: str | None = None
    region_code: str | None = None
    county: str | None = None
    locality: str | None = None
    administrative_area: str | None = None
    neighbourhood: str | None = None
    country: str | None = None
    country_code: str | None = None
    continent: str | None = None
    label: str | None = None


class GeocodingProviderError(Exception):
    """Raised when a geocoding provider experiences a transport or service error.

    Distinguishes provider failures (timeout, HTTP error, error payload,
    unparseable body) from a successful response with no match (which
    returns None).

    Args:
        provider_name: Name of the failing provider.
        message: Human-readable error description.
        status_code: Optional HTTP status code from the provider.
    """

    def __init__(self, provider_name: str, message: str, status_code: int | None = None) -> None:
        self.provider_name = provider_name
        self.message = message
        self.status_code = status_code
        super().__init__(f"{provider_name}: {message}")


class BaseReverseGeocoder(ABC):
    """Reverse-geocode one coordinate pair into zero or one place."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this provider."""

    @property
    def is_configured(self) -> bool:
        """Whether this provider has all required configuration (e.g., API keys)."""
        return True

    @abstractmethod
    async def reverse(self, latitude: float, longitude: float) -> ReverseGeocodeResult | None:
        """Look up the place at a coordinate pair.

        Args:
            latitude: Latitude in decimal degrees.
            longitude: Longitude in decimal degrees.

        Returns:
            The highest-ranked result, or None if the provider found nothing.

        Raises:
            GeocodingProviderError: On transport, service or parse errors.
        """
