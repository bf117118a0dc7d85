"""Adapter registry.

Maps adapter names to ``ResourceAdapter`` definitions so consumers can ask
for a resource by name. Adding an endpoint requires only defining an adapter
and calling ``register()``.
"""

from __future__ import annotations

import logging
from typing import Any

from src.resources.account import USER_PROFILE
from src.resources.analytics import CLICKS_TREND, REVENUE_TREND, STATS_SUMMARY
from src.resources.base import ResourceAdapter
from src.resources.links import LINKS

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """Registry that maps names to resource adapters."""

    def __init__(self) -> None:
        self._adapters: dict[str, ResourceAdapter[Any, Any]] = {}

    def register(self, adapter: ResourceAdapter[Any, Any]) -> None:
        """Register an adapter under its ``name``.

        Raises
        ------
        ValueError
            If an adapter with the same name is already registered.
        """
        if adapter.name in self._adapters:
            raise ValueError(f"Adapter '{adapter.name}' is already registered")
        self._adapters[adapter.name] = adapter
        logger.debug("Registered adapter '%s' -> %s", adapter.name, adapter.path)

    def get(self, name: str) -> ResourceAdapter[Any, Any]:
        """Return the adapter registered as *name*.

        Raises
        ------
        KeyError
            If no adapter is registered under that name.
        """
        try:
            return self._adapters[name]
        except KeyError:
            raise KeyError(f"No adapter registered as '{name}'") from None

    def names(self) -> list[str]:
        return list(self._adapters.keys())


def default_registry() -> AdapterRegistry:
    """Registry pre-populated with every dashboard adapter."""
    registry = AdapterRegistry()
    for adapter in (STATS_SUMMARY, REVENUE_TREND, CLICKS_TREND, LINKS, USER_PROFILE):
        registry.register(adapter)
    return registry
