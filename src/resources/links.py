"""Short-link adapters: paginated list and creation."""

from __future__ import annotations

import logging

from pydantic import TypeAdapter

from src.models.requests import CreateLinkRequest, LinksOptions
from src.models.schemas import LinkData, LinksResponse
from src.resources.base import ResourceAdapter
from src.transport.binder import BoundClient
from src.transport.envelope import validate_payload

logger = logging.getLogger(__name__)

CREATE_LINK_PATH = "/api/v1/links"

_LINK = TypeAdapter(LinkData)

LINKS: ResourceAdapter[LinksOptions, LinksResponse] = ResourceAdapter(
    name="links",
    path="/api/user/links",
    options_model=LinksOptions,
    response_type=LinksResponse,
    query_fields=(
        ("limit", "limit"),
        ("page", "page"),
        ("sort_by", "sortBy"),
        ("sort_order", "sortOrder"),
    ),
)


async def create_link(client: BoundClient, request: CreateLinkRequest) -> LinkData:
    """Create a short link for ``request.original_url``.

    The server may answer with the link itself or with ``{"link": {...}}``.
    """
    payload = await client.post(CREATE_LINK_PATH, request.to_body())
    if isinstance(payload, dict) and isinstance(payload.get("link"), dict):
        payload = payload["link"]

    link = validate_payload(_LINK, payload, "link")
    logger.info("Created link %s", link.hash)
    return link
