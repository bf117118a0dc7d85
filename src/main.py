"""Dashboard composition root with lifespan management.

Startup: resolve settings once, configure logging, build the API client and
the credential session.
Shutdown: tear down every resource controller the dashboard created,
cancelling in-flight loads.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx

from src.auth.session import AuthSession
from src.config.settings import DashboardSettings
from src.fetch.controller import ResourceController
from src.logging_config import configure_logging
from src.models.requests import (
    ClicksTrendOptions,
    CreateLinkRequest,
    LinksOptions,
    QueryOptions,
    RevenueTrendOptions,
    StatsOptions,
)
from src.models.schemas import (
    ApiInfo,
    ClickTrendData,
    HealthStatus,
    LinkData,
    LinksResponse,
    RevenueTrendData,
    StatsData,
    UserProfile,
)
from src.resources.base import ResourceAdapter
from src.resources.links import create_link
from src.resources.registry import AdapterRegistry, default_registry
from src.transport.client import ApiClient
from src.transport.errors import NotAuthenticatedError

logger = logging.getLogger(__name__)


class Dashboard:
    """Wires settings, transport, session and resource controllers together.

    Parameters
    ----------
    settings:
        Resolved configuration. Read-only after construction.
    token:
        Bearer token issued by the auth service, if the user is signed in.
    transport:
        Optional httpx transport forwarded to the ``ApiClient``.
    registry:
        Adapter registry; defaults to every dashboard adapter.
    """

    def __init__(
        self,
        settings: DashboardSettings,
        *,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        registry: AdapterRegistry | None = None,
    ) -> None:
        self.settings = settings
        self.api_client = ApiClient.from_settings(settings, transport=transport)
        self.session = AuthSession(self.api_client, token)
        self.registry = registry or default_registry()
        self._controllers: list[ResourceController[Any, Any]] = []

    @property
    def controllers(self) -> list[ResourceController[Any, Any]]:
        return list(self._controllers)

    def watch(
        self,
        adapter: ResourceAdapter[Any, Any] | str,
        options: QueryOptions | None = None,
    ) -> ResourceController[Any, Any]:
        """Create and start a controller for *adapter* (or its registry name)."""
        if isinstance(adapter, str):
            adapter = self.registry.get(adapter)

        controller: ResourceController[Any, Any] = ResourceController(
            adapter.load,
            self.session.get_client,
            options if options is not None else adapter.default_options(),
            name=adapter.name,
        )
        self._controllers.append(controller)
        controller.start()
        return controller

    def stats(
        self, options: StatsOptions | None = None
    ) -> ResourceController[StatsOptions, StatsData]:
        return self.watch("stats", options)

    def revenue_trend(
        self, options: RevenueTrendOptions | None = None
    ) -> ResourceController[RevenueTrendOptions, list[RevenueTrendData]]:
        return self.watch("revenue_trend", options)

    def clicks_trend(
        self, options: ClicksTrendOptions | None = None
    ) -> ResourceController[ClicksTrendOptions, list[ClickTrendData]]:
        return self.watch("clicks_trend", options)

    def links(
        self, options: LinksOptions | None = None
    ) -> ResourceController[LinksOptions, LinksResponse]:
        return self.watch("links", options)

    def profile(self) -> ResourceController[Any, UserProfile]:
        return self.watch("profile")

    async def create_link(self, request: CreateLinkRequest) -> LinkData:
        """Create a short link as the signed-in user.

        Raises
        ------
        NotAuthenticatedError
            When no user is signed in; no request is sent.
        """
        client = self.session.get_client()
        if client is None:
            raise NotAuthenticatedError()
        return await create_link(client, request)

    async def health(self) -> HealthStatus:
        return await self.api_client.health_check()

    async def api_info(self) -> ApiInfo:
        return await self.api_client.get_api_info()

    async def close(self) -> None:
        """Tear down every controller created by this dashboard."""
        for controller in self._controllers:
            await controller.close()
        logger.info("Dashboard closed (%d controllers)", len(self._controllers))
        self._controllers.clear()


@asynccontextmanager
async def open_dashboard(
    settings: DashboardSettings | None = None,
    *,
    token: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[Dashboard]:
    """Dashboard lifespan: startup and shutdown logic."""
    if settings is None:
        settings = DashboardSettings()

    configure_logging(settings.log_level, json_format=settings.json_logs)
    logger.info("Starting dashboard client against %s", settings.api_url)

    dashboard = Dashboard(settings, token=token, transport=transport)
    try:
        yield dashboard
    finally:
        await dashboard.close()
