from http import HTTPStatus
from typing import Any

import httpx

from src.errors import ProviderCommunicationError, UpstreamServiceError
from src.logger import logger


class BaseProviderClient:
    """Shared HTTP plumbing for the upstream location providers.

    Subclasses build provider-specific URLs and map the decoded JSON body into
    our own shapes. Every call is a single GET with an explicit timeout; failed
    calls are never retried.
    """

    # Prefix of the message raised when the provider answers with a non-2xx status.
    status_error_prefix = "provider request failed"

    def __init__(self, base_url: str, timeout_seconds: float = 5.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds

    async def _get_json(self, url: str) -> dict[str, Any]:
        """Perform the GET request and return the decoded JSON object."""
        try:
            async with httpx.AsyncClient(timeout=self._timeout_seconds) as client:
                response = await client.get(url)
        except httpx.RequestError as exc:
            raise ProviderCommunicationError(f"Request to location provider failed: {repr(exc)}") from exc

        self._handle_http_errors(response)
        return self._parse_json(response)

    def _handle_http_errors(self, response: httpx.Response) -> None:
        status_code = int(response.status_code)
        if HTTPStatus.OK <= status_code < HTTPStatus.MULTIPLE_CHOICES:
            return

        logger.warning(
            f"Location provider returned non-success status provider={type(self).__name__} "
            f"status={status_code} body={response.text[:200]}"
        )
        raise UpstreamServiceError(f"{self.status_error_prefix}: {status_code}", status_code=status_code)

    @staticmethod
    def _parse_json(response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderCommunicationError(f"Failed to decode location provider response as JSON: {exc}") from exc

        # A JSON array or scalar carries none of the fields we read.
        if not isinstance(data, dict):
            return {}
        return data
