"""Resource fetch controller."""

from src.fetch.controller import ClientProvider, FetchState, ResourceController

__all__ = [
    "ClientProvider",
    "FetchState",
    "ResourceController",
]
