from http import HTTPStatus
from typing import Any

import httpx


class MockResponse:
    def __init__(self, status_code: int, payload: Any = None, text: str = "") -> None:
        self.status_code = status_code
        self._payload = payload if payload is not None else {}
        self.text = text

    def json(self) -> Any:
        return self._payload


class MockAsyncClient:
    """Minimal async context-manager mock for httpx.AsyncClient.

    Responses are handed out in order, one per `get` call, and every requested
    URL is appended to the shared `requested_urls` list.
    """

    def __init__(self, responses: list[MockResponse], requested_urls: list[str]) -> None:
        self._responses = responses
        self._requested_urls = requested_urls

    async def __aenter__(self) -> "MockAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def get(self, url: str) -> MockResponse:
        self._requested_urls.append(url)
        return self._responses.pop(0)


class FakeAsyncClientFactory:
    """Stand-in for the httpx.AsyncClient class, shared by every client instance it creates."""

    def __init__(self, *responses: MockResponse) -> None:
        self.responses = list(responses)
        self.requested_urls: list[str] = []
        self.init_kwargs: list[dict[str, Any]] = []

    def __call__(self, *args: Any, **kwargs: Any) -> MockAsyncClient:
        self.init_kwargs.append(kwargs)
        return MockAsyncClient(self.responses, self.requested_urls)


class FailingAsyncClient:
    """Async client that raises a RequestError on enter to simulate network failure."""

    def __init__(self, url: str, *args: Any, **kwargs: Any) -> None:
        self._url = url

    async def __aenter__(self) -> "FailingAsyncClient":
        request = httpx.Request("GET", self._url)
        raise httpx.ConnectError("Network failure", request=request)

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def get(self, url: str) -> MockResponse:
        return MockResponse(status_code=HTTPStatus.OK, payload={})


LOCATE_PAYLOAD = {
    "data": {
        "lat": 39.90469,
        "lng": 116.40717,
        "rgeo": {
            "country": "China",
            "province": "Beijing",
            "city": "Beijing",
            "district": "Dongcheng",
        },
    }
}

DETAIL_PAYLOAD = {"data": {"detail": "Chang'an Avenue 1"}}
