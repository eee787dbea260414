"""PositionStack reverse geocoder provider.

Uses the PositionStack ``/reverse`` endpoint (https://positionstack.com/)
to turn a ``lat,lon`` query into a ranked list of places. Only the first
result is requested and used.
"""

from typing import Any

import httpx
from loguru import logger

from pet_tracker.lib.geocoder.base import (
    BaseReverseGeocoder,
    GeocodingProviderError,
    ReverseGeocodeResult,
)

DEFAULT_BASE_URL = "http://api.positionstack.com/v1"
DEFAULT_TIMEOUT = 10.0
RESULT_LIMIT = 1
OUTPUT_FORMAT = "json"

_STRING_FIELDS = (
    "type",
    "name",
    "number",
    "street",
    "postal_code",
    "region",
    "region_code",
    "county",
    "locality",
    "administrative_area",
    "neighbourhood",
    "country",
    "country_code",
    "continent",
    "label",
)


def format_query(latitude: float, longitude: float) -> str:
    """Format a coordinate pair as a PositionStack reverse query."""
    return f"{latitude},{longitude}"


class PositionStackGeocoder(BaseReverseGeocoder):
    """PositionStack reverse geocoder provider."""

    def __init__(
        self,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self._api_key = api_key
        self._timeout = timeout
        self._base_url = base_url.rstrip("/")

    @property
    def provider_name(self) -> str:
        return "positionstack"

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def reverse(self, latitude: float, longitude: float) -> ReverseGeocodeResult | None:
        """Reverse geocode a coordinate pair using the PositionStack API.

        Args:
            latitude: Latitude in decimal degrees.
            longitude: Longitude in decimal degrees.

        Returns:
            ReverseGeocodeResult for the first entry, or None on an empty list.

        Raises:
            GeocodingProviderError: On missing key, transport or service errors.
        """
        if not self.is_configured:
            raise GeocodingProviderError("positionstack", "API key not configured")

        url = f"{self._base_url}/reverse"
        params: dict[str, str | int] = {
            "access_key": self._api_key,
            "query": format_query(latitude, longitude),
            "limit": RESULT_LIMIT,
            "output": OUTPUT_FORMAT,
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()

            data = response.json()
            return self._parse_response(data)

        except httpx.TimeoutException as e:
            logger.warning("PositionStack timeout for reverse query")
            raise GeocodingProviderError("positionstack", "Geocoding request timed out") from e
        except httpx.HTTPStatusError as e:
            logger.warning(f"PositionStack HTTP error {e.response.status_code}")
            raise GeocodingProviderError(
                "positionstack",
                f"Provider returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.ConnectError as e:
            logger.warning("PositionStack connection error")
            raise GeocodingProviderError("positionstack", "Connection to geocoding provider failed") from e
        except GeocodingProviderError:
            raise
        except Exception as e:
            logger.exception("PositionStack unexpected error")
            raise GeocodingProviderError("positionstack", f"Unexpected error: {e}") from e

    def _parse_response(self, data: Any) -> ReverseGeocodeResult | None:
        """Parse a PositionStack response body.

        Args:
            data: Decoded JSON body.

        Returns:
            ReverseGeocodeResult for the first entry, or None if ``data`` is empty.

        Raises:
            GeocodingProviderError: If the body carries an ``error`` object or
                is not shaped like a result list.
        """
        if not isinstance(data, dict):
            raise GeocodingProviderError("positionstack", "Response body is not a JSON object")

        # Invalid keys and exhausted quotas come back as {"error": {...}}
        error = data.get("error")
        if error:
            code = error.get("code", "unknown") if isinstance(error, dict) else "unknown"
            raise GeocodingProviderError("positionstack", f"API error: {code}")

        results = data.get("data")
        if results is None:
            return None
        if not isinstance(results, list):
            raise GeocodingProviderError("positionstack", "Unexpected 'data' shape in response")
        if not results:
            return None

        best = results[0]
        # No-match responses are sometimes shaped {"data": [[]]}
        if best == []:
            return None
        if not isinstance(best, dict):
            raise GeocodingProviderError("positionstack", "Unexpected result entry in response")

        try:
            return ReverseGeocodeResult(
                latitude=_to_float(best.get("latitude")),
                longitude=_to_float(best.get("longitude")),
                confidence=_to_float(best.get("confidence")),
                **{field: _to_str(best.get(field)) for field in _STRING_FIELDS},
            )
        except (TypeError, ValueError) as e:
            logger.warning(f"Failed to parse PositionStack response: {e}")
            raise GeocodingProviderError("positionstack", f"Failed to parse response: {e}") from e


def _to_float(value: Any) -> float | None:
    return None if value is None else float(value)


def _to_str(value: Any) -> str | None:
    return None if value is None else str(value)
