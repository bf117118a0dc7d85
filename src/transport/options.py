"""Per-call request options."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


@dataclass(frozen=True)
class RequestOptions:
    """Bearer token and extra headers merged over the client defaults."""

    token: str | None = None
    headers: Mapping[str, str] | None = None
