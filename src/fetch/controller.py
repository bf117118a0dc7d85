"""Resource fetch controller: one state machine shape for server-derived data.

State machine:
- Mount → Loading: ``start()`` begins the first load cycle
- Loading → Success: the load operation returns; data replaced, error cleared
- Loading → Error: the load operation or the client provider raises, or no
  bound client is available ("Not authenticated"); data left as it was
- Success/Error → Loading: the dependency set changes (``update``) or the
  consumer calls ``refetch``

Each cycle is an asyncio task. Cycles are numbered; only the most recently
started cycle may change state, so a slow stale response never overwrites a
newer one. ``close()`` cancels in-flight cycles and ignores their results.
Failures are logged and stored in ``error``; they are never re-raised.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

from src.transport.binder import BoundClient
from src.transport.errors import NOT_AUTHENTICATED, ApiError

logger = logging.getLogger(__name__)

P = TypeVar("P")
T = TypeVar("T")

ClientProvider = Callable[[], BoundClient | None]

_UNSET: Any = object()


@dataclass(frozen=True)
class FetchState(Generic[T]):
    """Snapshot of one controller's state."""

    data: T | None = None
    is_loading: bool = True
    error: str | None = None


class ResourceController(Generic[P, T]):
    """Drives a load operation through loading/success/error cycles.

    Args:
        load: Coroutine function ``load(bound_client, params) -> T``.
        client_provider: Returns the bound client for the current user, or
            None when not authenticated.
        params: Dependency values passed to ``load``; a changed value (or a
            changed bound client) triggers a new cycle on ``update``.
        name: Resource label used in logs and fallback error messages.
    """

    def __init__(
        self,
        load: Callable[[BoundClient, P], Awaitable[T]],
        client_provider: ClientProvider,
        params: P = None,  # type: ignore[assignment]
        *,
        name: str = "resource",
    ) -> None:
        self._load = load
        self._client_provider = client_provider
        self._params = params
        self._name = name

        self._state: FetchState[T] = FetchState()
        self._generation = 0
        self._dependency_key: Any = _UNSET
        self._current: asyncio.Task[None] | None = None
        self._tasks: set[asyncio.Task[None]] = set()
        self._closed = False

    # -- Read-only views ---------------------------------------------------

    @property
    def state(self) -> FetchState[T]:
        return self._state

    @property
    def params(self) -> P:
        return self._params

    @property
    def name(self) -> str:
        return self._name

    @property
    def generation(self) -> int:
        """Number of cycles started so far."""
        return self._generation

    @property
    def is_closed(self) -> bool:
        return self._closed

    # -- Triggers ----------------------------------------------------------

    def start(self) -> asyncio.Task[None]:
        """Mount: begin the first cycle."""
        return self._begin_cycle(*self._resolve_client())

    def update(self, params: P) -> asyncio.Task[None] | None:
        """Set new dependency values; begins a cycle only if they changed."""
        self._params = params
        client, provider_error = self._resolve_client()
        if provider_error is None and (client, params) == self._dependency_key:
            return None
        return self._begin_cycle(client, provider_error)

    def refetch(self) -> asyncio.Task[None]:
        """Unconditionally begin a new cycle with the current params."""
        return self._begin_cycle(*self._resolve_client())

    async def wait(self) -> FetchState[T]:
        """Wait for the most recent cycle to settle and return the state."""
        while self._current is not None and not self._current.done():
            await asyncio.wait({self._current})
        return self._state

    async def close(self) -> None:
        """Unmount: cancel in-flight cycles and stop accepting results."""
        if self._closed:
            return
        self._closed = True

        pending = [task for task in self._tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
            logger.debug("Cancelled %d in-flight %s cycle(s)", len(pending), self._name)

    async def __aenter__(self) -> ResourceController[P, T]:
        if self._current is None:
            self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # -- Cycle -------------------------------------------------------------

    def _resolve_client(self) -> tuple[BoundClient | None, Exception | None]:
        """Ask the provider once; a failure is handed to the cycle, not raised."""
        try:
            return self._client_provider(), None
        except Exception as exc:
            return None, exc

    def _begin_cycle(
        self,
        client: BoundClient | None,
        provider_error: Exception | None = None,
    ) -> asyncio.Task[None]:
        if self._closed:
            raise RuntimeError(f"{self._name} controller is closed")

        self._generation += 1
        generation = self._generation
        # A failed provider call never matches, so the next update retries
        self._dependency_key = _UNSET if provider_error is not None else (client, self._params)
        self._state = replace(self._state, is_loading=True, error=None)

        task = asyncio.create_task(
            self._run_cycle(generation, client, self._params, provider_error),
            name=f"{self._name}-cycle-{generation}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        self._current = task
        return task

    async def _run_cycle(
        self,
        generation: int,
        client: BoundClient | None,
        params: P,
        provider_error: Exception | None,
    ) -> None:
        try:
            if provider_error is not None:
                raise provider_error
            if client is None:
                logger.warning(
                    "Cannot load %s: not authenticated",
                    self._name,
                    extra={"resource": self._name, "generation": generation},
                )
                self._fail(generation, NOT_AUTHENTICATED)
                return

            data = await self._load(client, params)
        except Exception as exc:
            message = str(exc) or f"Failed to fetch {self._name}"
            logger.error(
                "Error fetching %s: %s",
                self._name,
                message,
                exc_info=not isinstance(exc, ApiError),
                extra={
                    "resource": self._name,
                    "status": getattr(exc, "status", None),
                    "error_reason": message,
                    "generation": generation,
                },
            )
            self._fail(generation, message)
            return

        self._succeed(generation, data)

    def _is_current(self, generation: int) -> bool:
        if self._closed or generation != self._generation:
            logger.debug(
                "Dropping stale %s result (cycle %d, latest %d)",
                self._name,
                generation,
                self._generation,
            )
            return False
        return True

    def _succeed(self, generation: int, data: T) -> None:
        if self._is_current(generation):
            self._state = FetchState(data=data, is_loading=False, error=None)

    def _fail(self, generation: int, message: str) -> None:
        if self._is_current(generation):
            self._state = replace(self._state, is_loading=False, error=message)
