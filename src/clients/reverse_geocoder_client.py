from decimal import Decimal

from src.clients.base import BaseProviderClient


def format_coordinate(value: float) -> str:
    """Render a coordinate in plain decimal notation (never `5e-05`), without trailing zeros."""
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class ReverseGeocoderClient(BaseProviderClient):
    """Client for the coordinates -> address detail endpoint (`/group/v1/city/latlng`)."""

    status_error_prefix = "detail address request failed"

    async def lookup_detail(self, lat: float, lng: float) -> str:
        """Return the human-readable address detail for a coordinate pair.

        A success response without `data.detail` yields an empty string.
        """
        url = f"{self._base_url}/group/v1/city/latlng/{format_coordinate(lat)},{format_coordinate(lng)}?tag=0"
        data = await self._get_json(url)

        payload = data.get("data")
        if not isinstance(payload, dict):
            return ""
        return str(payload.get("detail") or "")
