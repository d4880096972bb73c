from typing import Any

from src.clients.base import BaseProviderClient
from src.errors import LocationUnavailableError
from src.models.common import IPGeolocationData


class IpLocatorClient(BaseProviderClient):
    """Client for the IP -> coordinates endpoint (`/locate/v2/ip/loc`).

    The provider answers with:
        {"data": {"lat": 39.9, "lng": 116.4,
                  "rgeo": {"country": "...", "province": "...", "city": "...", "district": "..."}}}
    `rgeo=true` asks it to include the administrative hints inline.
    """

    status_error_prefix = "geolocation provider request failed"

    async def locate(self, ip: str) -> IPGeolocationData:
        """Look up coordinates and administrative hints for an IP address."""
        url = f"{self._base_url}/locate/v2/ip/loc?rgeo=true&ip={ip}"
        data = await self._get_json(url)
        return self._normalize_payload(data)

    @staticmethod
    def _normalize_payload(data: dict[str, Any]) -> IPGeolocationData:
        payload = data.get("data")
        if not isinstance(payload, dict):
            raise LocationUnavailableError("unable to obtain IP location data")

        rgeo = payload.get("rgeo")
        if not isinstance(rgeo, dict):
            rgeo = {}

        return IPGeolocationData(
            latitude=payload.get("lat"),
            longitude=payload.get("lng"),
            country=rgeo.get("country"),
            province=rgeo.get("province"),
            city=rgeo.get("city"),
            district=rgeo.get("district"),
        )
