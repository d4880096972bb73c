from pathlib import Path
from typing import Annotated

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import ValidationError

from src.clients.ip_locator_client import IpLocatorClient
from src.clients.reverse_geocoder_client import ReverseGeocoderClient
from src.config import Settings, get_settings
from src.errors import (
    InvalidIpError,
    LocationUnavailableError,
    ProviderCommunicationError,
    ReservedIpError,
    UpstreamServiceError,
)
from src.exception_handlers import (
    error_response,
    pydantic_validation_exception_handler,
    unhandled_exception_handler,
)
from src.logger import logger
from src.models.request_models import IPQueryRequest
from src.models.response_models import ClientIPResponse, QueryResponse
from src.services.geolocation import GeolocationService

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

# Checked in order; the first non-empty header wins.
CLIENT_IP_HEADERS = ("cf-connecting-ip", "x-forwarded-for")

INDEX_HTML = (Path(__file__).parent / "static" / "index.html").read_text(encoding="utf-8")

app_settings = get_settings()

# The docs routes are disabled: every path outside /api/* must serve the UI.
app = FastAPI(
    title=app_settings.app_name,
    version=app_settings.app_version,
    description="Traces an IPv4 address to coordinates and a street-level address.",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)
logger.info("Started IP Trace Service")


def get_geolocation_service(settings: Annotated[Settings, Depends(get_settings)]) -> GeolocationService:
    """Dependency to provide a GeolocationService wired to the configured providers."""
    return GeolocationService(
        ip_locator=IpLocatorClient(
            base_url=settings.ip_locator_base_url,
            timeout_seconds=settings.provider_timeout_seconds,
        ),
        reverse_geocoder=ReverseGeocoderClient(
            base_url=settings.reverse_geocoder_base_url,
            timeout_seconds=settings.provider_timeout_seconds,
        ),
    )


app.add_exception_handler(ValidationError, pydantic_validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


@app.post(
    "/api/query",
    response_model=QueryResponse,
    status_code=status.HTTP_200_OK,
    tags=["ip"],
    summary="Trace an IPv4 address to its location.",
)
async def query_ip(
    request: Request,
    service: Annotated[GeolocationService, Depends(get_geolocation_service)],
) -> QueryResponse | JSONResponse:
    """Resolve the `ip` of the JSON body into country/province/city/district, detail and coordinates.

    Every failure is answered with `{"error": "..."}`:
    - 400 for a malformed body, an invalid IPv4 address or a reserved/private one;
    - 502 when a provider fails or returns no usable location;
    - 500 when a provider cannot be reached or returns undecodable JSON.
    """
    try:
        payload = await request.json()
    except ValueError as exc:
        logger.info(f"Undecodable request body path={request.url.path} method={request.method} error={exc}")
        return error_response(status.HTTP_400_BAD_REQUEST, "invalid request body")

    ip = IPQueryRequest.model_validate(payload).ip
    logger.info(f"Performing IP query path={request.url.path} method={request.method} ip={ip}")

    try:
        return await service.resolve(ip)
    except InvalidIpError as exc:
        logger.info(f"Invalid IP used for query path={request.url.path} ip={ip} error={exc}")
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc))
    except ReservedIpError as exc:
        logger.info(
            f"Reserved/private IP used for query path={request.url.path} ip={ip} "
            f"range={exc.range_name} cidr={exc.cidr} error={exc}"
        )
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc))
    except UpstreamServiceError as exc:
        logger.error(
            f"Upstream provider error during query path={request.url.path} ip={ip} "
            f"upstream_status={exc.status_code} error={exc}"
        )
        return error_response(status.HTTP_502_BAD_GATEWAY, str(exc))
    except LocationUnavailableError as exc:
        logger.error(f"Provider returned no usable location path={request.url.path} ip={ip} error={exc}")
        return error_response(status.HTTP_502_BAD_GATEWAY, str(exc))
    except ProviderCommunicationError as exc:
        logger.exception(f"Provider communication failure path={request.url.path} ip={ip} error={exc}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


@app.api_route(
    "/api/clientip",
    methods=ALL_METHODS,
    response_model=ClientIPResponse,
    tags=["ip"],
    summary="Echo the caller's IP address as seen by the edge proxy.",
)
async def client_ip(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ClientIPResponse:
    """Return the first non-empty of CF-Connecting-IP and X-Forwarded-For, else the unknown sentinel."""
    for header in CLIENT_IP_HEADERS:
        value = request.headers.get(header, "").strip()
        if value:
            return ClientIPResponse(ip=value)

    logger.info(f"No client IP header present path={request.url.path} method={request.method}")
    return ClientIPResponse(ip=settings.unknown_client_ip)


async def index(request: Request) -> HTMLResponse:
    """Serve the lookup UI for every path and method not handled above."""
    return HTMLResponse(INDEX_HTML)


# Registered as a plain Starlette route: with no method list it also answers
# TRACE, PROPFIND and any other verb instead of producing a 405.
app.add_route("/{path:path}", index, include_in_schema=False)
