import math
from typing import Any

from pydantic import BaseModel, field_validator


class IPGeolocationData(BaseModel):
    """Normalized payload of the IP locator provider.

    Coordinates stay optional here: the geolocation service decides whether a
    payload without them is usable. Administrative hints default to empty strings.
    """

    latitude: float | None = None
    longitude: float | None = None
    country: str = ""
    province: str = ""
    city: str = ""
    district: str = ""

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _coerce_lat_lon(cls, value: Any) -> float | None:
        """Allow latitude/longitude to be provided as strings, numbers, or null.

        Anything that cannot be read as a finite number (including NaN and
        infinities) is treated as missing.
        """
        if value is None or isinstance(value, bool):
            return None
        try:
            coordinate = float(value)
        except (TypeError, ValueError):
            return None
        return coordinate if math.isfinite(coordinate) else None

    @field_validator("country", "province", "city", "district", mode="before")
    @classmethod
    def _default_empty(cls, value: Any) -> str:
        return str(value) if value else ""
