"""Holder for the externally issued bearer token.

Token issuance (login, magic links) happens elsewhere; the session only keeps
the current token and hands out a ``BoundClient`` for it. The same
``BoundClient`` is returned while the token is unchanged, so controllers see
a stable dependency until the user signs in as someone else or signs out.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from src.transport.binder import BoundClient, bind

if TYPE_CHECKING:
    from src.transport.client import ApiClient

logger = logging.getLogger(__name__)


class AuthSession:
    """Current credential for one dashboard user."""

    def __init__(self, api_client: ApiClient, token: str | None = None) -> None:
        self._api_client = api_client
        self._token = token or None
        self._bound: BoundClient | None = None

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def set_token(self, token: str | None) -> None:
        """Replace the current token; an empty value signs out."""
        token = token or None
        if token == self._token:
            return
        self._token = token
        self._bound = None
        logger.info("Session %s", "authenticated" if token else "signed out")

    def clear(self) -> None:
        self.set_token(None)

    def get_client(self) -> BoundClient | None:
        """Bound client for the current token, or None when signed out."""
        if self._token is None:
            return None
        if self._bound is None:
            self._bound = bind(self._api_client, self._token)
        return self._bound
