"""HTTP transport.

Thin httpx wrapper shared by the TVMaze and Slack clients. One request,
one timeout, no retries; failures surface as HttpError and callers decide
how to degrade.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any

import httpx

from whatsontv.core.errors import HttpError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
USER_AGENT = "WhatsOnTV/1.0"


@dataclass
class HttpResponse:
    """Decoded response: JSON when the body is JSON, raw text otherwise."""

    data: Any
    status: int
    headers: dict[str, str] = field(default_factory=dict)


class HttpClient:
    """Synchronous HTTP client with a lazily created httpx.Client."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._timeout = timeout
        self._headers = {"User-Agent": USER_AGENT, **(headers or {})}
        self._transport = transport
        self._client: httpx.Client | None = None
        self._lock = threading.Lock()

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            with self._lock:
                if self._client is None:
                    self._client = httpx.Client(
                        timeout=self._timeout,
                        headers=self._headers,
                        transport=self._transport,
                    )
        return self._client

    def get(self, url: str, params: dict | None = None) -> HttpResponse:
        """GET a URL.

        Raises:
            HttpError: On network failure or non-2xx status
        """
        return self._request("GET", url, params=params)

    def post(
        self,
        url: str,
        body: Any = None,
        params: dict | None = None,
        headers: dict[str, str] | None = None,
    ) -> HttpResponse:
        """POST a JSON body to a URL.

        Raises:
            HttpError: On network failure or non-2xx status
        """
        return self._request("POST", url, params=params, json=body, headers=headers)

    def _request(self, method: str, url: str, **kwargs) -> HttpResponse:
        try:
            response = self._get_client().request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.debug("[HTTP] %s %s failed: %s", method, url, e)
            raise HttpError(f"Request to {url} failed: {e}", url=url) from e

        if not response.is_success:
            raise HttpError(
                f"HTTP {response.status_code} {response.reason_phrase} for {url}",
                status_code=response.status_code,
                url=url,
            )

        return HttpResponse(
            data=_decode_body(response),
            status=response.status_code,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _decode_body(response: httpx.Response) -> Any:
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        try:
            return response.json()
        except ValueError:
            logger.debug("[HTTP] Body advertised as JSON but did not parse")
    return response.text
