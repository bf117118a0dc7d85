"""Per-endpoint resource adapters.

An adapter declares an endpoint path, the option fields it accepts with their
query-string keys, and the expected payload shape. It performs no I/O of its
own: ``load`` delegates to the bound client it is given.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar
from urllib.parse import urlencode

from pydantic import TypeAdapter

from src.models.requests import QueryOptions
from src.transport.binder import BoundClient
from src.transport.envelope import validate_payload

OptionsT = TypeVar("OptionsT", bound=QueryOptions)
T = TypeVar("T")


@dataclass(frozen=True)
class ResourceAdapter(Generic[OptionsT, T]):
    """Endpoint definition consumed by ``ResourceController``.

    Attributes:
        name: Registry key and log label.
        path: Endpoint path, without query string.
        options_model: Option model accepted by ``build_query``.
        query_fields: ``(attribute, query key)`` pairs in query-string order.
        response_type: Type the unwrapped payload is validated against.
    """

    name: str
    path: str
    options_model: type[OptionsT]
    response_type: Any
    query_fields: tuple[tuple[str, str], ...] = ()
    _validator: TypeAdapter | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_validator", TypeAdapter(self.response_type))

    def default_options(self) -> OptionsT:
        return self.options_model()

    def build_query(self, options: OptionsT | None = None) -> str:
        """Query string of the options that are set, in declared order."""
        if options is None:
            options = self.default_options()
        values = options.model_dump(mode="json")
        pairs = [
            (key, values[attr])
            for attr, key in self.query_fields
            if values.get(attr) is not None
        ]
        return urlencode(pairs)

    def endpoint(self, options: OptionsT | None = None) -> str:
        query = self.build_query(options)
        return f"{self.path}?{query}" if query else self.path

    def parse(self, payload: Any) -> T:
        return validate_payload(self._validator, payload, self.name.replace("_", " "))

    async def load(self, client: BoundClient, options: OptionsT | None = None) -> T:
        payload = await client.get(self.endpoint(options))
        return self.parse(payload)
