"""Bearer-token binding for the dashboard transport.

``bind(api_client, token)`` returns a ``BoundClient``: a verb-complete client
whose every call carries ``Authorization: Bearer <token>``. Binding is cheap
and side-effect-free; the token lives only on the returned value, so clients
bound to different tokens never interfere.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from src.transport.options import RequestOptions

if TYPE_CHECKING:
    from src.transport.client import ApiClient


@dataclass(frozen=True)
class BoundClient:
    """Transport pre-configured with a bearer token."""

    api_client: ApiClient
    token: str

    def __repr__(self) -> str:
        return f"BoundClient(base_url={self.api_client.base_url!r}, token=<redacted>)"

    def _options(self, headers: Mapping[str, str] | None) -> RequestOptions:
        return RequestOptions(token=self.token, headers=headers)

    async def get(self, endpoint: str, headers: Mapping[str, str] | None = None) -> Any:
        return await self.api_client.get(endpoint, self._options(headers))

    async def post(
        self,
        endpoint: str,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return await self.api_client.post(endpoint, body, self._options(headers))

    async def put(
        self,
        endpoint: str,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return await self.api_client.put(endpoint, body, self._options(headers))

    async def patch(
        self,
        endpoint: str,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return await self.api_client.patch(endpoint, body, self._options(headers))

    async def delete(self, endpoint: str, headers: Mapping[str, str] | None = None) -> Any:
        return await self.api_client.delete(endpoint, self._options(headers))


def bind(api_client: ApiClient, token: str) -> BoundClient:
    """Bind ``token`` to ``api_client``."""
    return BoundClient(api_client, token)
