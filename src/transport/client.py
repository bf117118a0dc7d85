"""HTTP transport for the dashboard API.

Builds URLs and headers, executes one HTTP verb per call, unwraps the
``{ success, data, message, error }`` envelope and classifies failures into
``ApiError`` subclasses. Holds no state between calls beyond the base URL,
default headers and optional timeout fixed at construction.

SECURITY: Never logs bearer tokens or request headers.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import TypeAdapter

from src.config.settings import DEFAULT_API_URL
from src.models.schemas import ApiInfo, HealthStatus
from src.transport.binder import BoundClient
from src.transport.envelope import unwrap_response, validate_payload
from src.transport.errors import NETWORK_ERROR_MESSAGE, ApiError, TransportFailure
from src.transport.options import DEFAULT_HEADERS, RequestOptions

if TYPE_CHECKING:
    from src.config.settings import DashboardSettings

logger = logging.getLogger(__name__)

_HEALTH = TypeAdapter(HealthStatus)
_API_INFO = TypeAdapter(ApiInfo)


class ApiClient:
    """Asynchronous client for the dashboard API.

    Parameters
    ----------
    base_url:
        API root (e.g. "https://api.afflyt.io"). A trailing separator is dropped.
    default_headers:
        Extra headers merged over the JSON defaults for every call.
    timeout:
        Per-call timeout in seconds. ``None`` leaves timing to the network layer.
    transport:
        Optional httpx transport (``httpx.MockTransport``, ``httpx.ASGITransport``)
        used instead of real network I/O.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        *,
        default_headers: dict[str, str] | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._default_headers = {**DEFAULT_HEADERS, **(default_headers or {})}
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: DashboardSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> ApiClient:
        return cls(
            settings.api_url,
            timeout=settings.request_timeout_seconds,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_url(self, endpoint: str) -> str:
        """Join the base URL and endpoint, dropping one leading separator."""
        clean_endpoint = endpoint[1:] if endpoint.startswith("/") else endpoint
        return f"{self._base_url}/{clean_endpoint}"

    def build_headers(self, options: RequestOptions | None = None) -> dict[str, str]:
        """Defaults, then bearer token, then caller headers (caller wins)."""
        headers = dict(self._default_headers)

        if options is not None and options.token:
            headers["Authorization"] = f"Bearer {options.token}"

        if options is not None and options.headers:
            headers.update(options.headers)

        return headers

    def bind(self, token: str) -> BoundClient:
        """Return a client whose every call carries ``token``."""
        return BoundClient(self, token)

    async def request(
        self,
        method: str,
        endpoint: str,
        body: Any = None,
        options: RequestOptions | None = None,
    ) -> Any:
        """Execute one call and return the unwrapped payload.

        Raises
        ------
        TransportFailure
            If no response was obtained (status 0).
        ServerFailure
            If the server answered with a non-2xx status.
        MalformedPayload
            If a 2xx body is not JSON.
        """
        url = self.build_url(endpoint)
        headers = self.build_headers(options)
        started = time.monotonic()

        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self._timeout
            ) as client:
                response = await client.request(
                    method,
                    url,
                    headers=headers,
                    json=body,
                )
        except ApiError:
            raise
        except Exception as exc:
            # Anything raised before a response is a transport failure
            logger.warning(
                "%s %s failed before a response: %s",
                method,
                url,
                exc.__class__.__name__,
                extra={"method": method, "url": url, "status": 0},
            )
            raise TransportFailure(str(exc) or NETWORK_ERROR_MESSAGE) from exc

        duration_ms = round((time.monotonic() - started) * 1000, 1)
        logger.debug(
            "%s %s -> %d",
            method,
            url,
            response.status_code,
            extra={
                "method": method,
                "url": url,
                "status": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return unwrap_response(response.status_code, response.content)

    async def get(self, endpoint: str, options: RequestOptions | None = None) -> Any:
        return await self.request("GET", endpoint, options=options)

    async def post(
        self, endpoint: str, body: Any = None, options: RequestOptions | None = None
    ) -> Any:
        return await self.request("POST", endpoint, body, options)

    async def put(
        self, endpoint: str, body: Any = None, options: RequestOptions | None = None
    ) -> Any:
        return await self.request("PUT", endpoint, body, options)

    async def patch(
        self, endpoint: str, body: Any = None, options: RequestOptions | None = None
    ) -> Any:
        return await self.request("PATCH", endpoint, body, options)

    async def delete(self, endpoint: str, options: RequestOptions | None = None) -> Any:
        return await self.request("DELETE", endpoint, options=options)

    # -- Health and version (no auth) ------------------------------------

    async def health_check(self) -> HealthStatus:
        payload = await self.get("/health")
        return validate_payload(_HEALTH, payload, "health")

    async def get_api_info(self) -> ApiInfo:
        payload = await self.get("/api/v1")
        return validate_payload(_API_INFO, payload, "API info")
