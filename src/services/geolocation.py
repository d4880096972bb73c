from src.clients.ip_locator_client import IpLocatorClient
from src.clients.reverse_geocoder_client import ReverseGeocoderClient
from src.errors import LocationUnavailableError
from src.ip_validation import validate_public_ipv4
from src.logger import logger
from src.models.response_models import LocationResult, QueryResponse


class GeolocationService:
    """Resolve an IP address into a merged location.

    Steps run strictly in order and each one is a hard gate:
    1. dotted-quad syntax check,
    2. reserved/private range check,
    3. IP -> coordinates lookup (with administrative hints),
    4. coordinates -> address detail lookup,
    5. assembly of the final payload.
    The reverse-geocode call needs the coordinates from the first call, so the
    two outbound requests can never run concurrently.
    """

    def __init__(self, ip_locator: IpLocatorClient, reverse_geocoder: ReverseGeocoderClient) -> None:
        self._ip_locator = ip_locator
        self._reverse_geocoder = reverse_geocoder

    async def resolve(self, ip_candidate: str) -> QueryResponse:
        ip = validate_public_ipv4(ip_candidate)

        geo = await self._ip_locator.locate(ip)
        if geo.latitude is None or geo.longitude is None:
            raise LocationUnavailableError("unable to obtain coordinates")

        logger.debug(f"Located IP ip={ip} lat={geo.latitude} lng={geo.longitude}")
        detail = await self._reverse_geocoder.lookup_detail(geo.latitude, geo.longitude)

        return QueryResponse(
            ip=ip,
            location=LocationResult(
                country=geo.country,
                province=geo.province,
                city=geo.city,
                district=geo.district,
                detail=detail,
                lat=geo.latitude,
                lng=geo.longitude,
            ),
        )
