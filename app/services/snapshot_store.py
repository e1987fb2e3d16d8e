import logging
from collections.abc import Awaitable, Callable, Hashable
from typing import Generic, TypeVar

from app.core.errors import ScheduleError

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class SnapshotStore(Generic[K, T]):
    """Single-writer holder of the latest fetched value for a key.

    Every load takes a new generation number. When a fetch completes, its
    result (or failure) is committed only if no newer load has been issued
    since; otherwise it is dropped. A failed fetch keeps the previous value
    and records the error until the next successful load.
    """

    name = "snapshot"

    def __init__(self) -> None:
        self._generation = 0
        self._key: K | None = None
        self._value: T | None = None
        self._pending_key: K | None = None
        self.error: ScheduleError | None = None

    @property
    def key(self) -> K | None:
        return self._key

    @property
    def value(self) -> T | None:
        return self._value

    @property
    def loading(self) -> bool:
        return self._pending_key is not None

    async def _load(self, key: K, fetch: Callable[[], Awaitable[T]]) -> T | None:
        self._generation += 1
        generation = self._generation
        self._pending_key = key
        try:
            value = await fetch()
        except ScheduleError as e:
            if generation != self._generation:
                logger.debug("Discarding failed %s load for %s (superseded)", self.name, key)
                return None
            self.error = e
            logger.warning("Loading %s for %s failed: %s", self.name, key, e)
            return None
        finally:
            # Cancellation and unexpected errors must not leave the store loading
            if generation == self._generation:
                self._pending_key = None
        if generation != self._generation:
            logger.debug("Discarding stale %s result for %s", self.name, key)
            return None
        self._key = key
        self._value = value
        self.error = None
        return value
