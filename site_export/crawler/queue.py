# === FILE: site_export/crawler/queue.py ===
"""
Bounded asyncio work queue that accepts new items while it is draining.

Handlers may call :meth:`WorkQueue.add` for items they discover; ``run()``
returns once nothing is pending and nothing is in flight. All bookkeeping
happens in synchronous code between awaits, so the quiescence check cannot
race an ``add`` on the same event loop.
"""
from __future__ import annotations

import asyncio
from collections import deque
from typing import (
    Awaitable,
    Callable,
    Deque,
    Generic,
    Hashable,
    List,
    Optional,
    Set,
    TypeVar,
)

from site_export.crawler.models import ItemFailure
from site_export.logger import get_logger

__all__ = ("WorkQueue", "QueueClosedError")

T = TypeVar("T")


class QueueClosedError(RuntimeError):
    """Raised when an item is added to a queue that has already drained."""


class WorkQueue(Generic[T]):
    """FIFO queue running at most ``max_concurrent`` handlers at a time."""

    def __init__(
        self,
        handler: Callable[[T], Awaitable[object]],
        *,
        max_concurrent: int = 50,
        item_timeout: Optional[float] = None,
        key: Optional[Callable[[T], Hashable]] = None,
    ) -> None:
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be >= 1")
        if item_timeout is not None and item_timeout <= 0:
            raise ValueError("item_timeout must be > 0")
        self.max_concurrent = max_concurrent
        self.item_timeout = item_timeout
        self.failures: List[ItemFailure] = []
        self.processed = 0
        self.peak_in_flight = 0
        self._handler = handler
        self._key = key
        self._seen: Set[Hashable] = set()
        self._pending: Deque[T] = deque()
        self._in_flight = 0
        self._tasks: Set[asyncio.Task[None]] = set()
        self._done: Optional[asyncio.Future[None]] = None
        self._closed = False
        self.logger = get_logger("queue")

    # ------------------------------------------------------------------ #
    # state                                                              #
    # ------------------------------------------------------------------ #

    @property
    def pending(self) -> int:
        return len(self._pending)

    @property
    def in_flight(self) -> int:
        return self._in_flight

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------ #
    # public API                                                         #
    # ------------------------------------------------------------------ #

    def add(self, item: T) -> bool:
        """
        Enqueue *item*. Returns False when deduplication dropped it.

        Safe to call from inside a running handler; the new item is
        dispatched as soon as a slot is free.
        """
        if self._closed:
            raise QueueClosedError(f"queue already drained, cannot add {item!r}")
        if self._key is not None:
            k = self._key(item)
            if k in self._seen:
                self.logger.debug("Skipping duplicate %r", item)
                return False
            self._seen.add(k)
        self._pending.append(item)
        if self._done is not None:
            self._dispatch()
        return True

    async def run(self) -> List[ItemFailure]:
        """Drain the queue and return the failures collected along the way."""
        if self._done is not None:
            raise RuntimeError("WorkQueue.run() may only be awaited once")
        self._done = asyncio.get_running_loop().create_future()
        self._dispatch()
        try:
            await self._done
        except asyncio.CancelledError:
            self._close()
            for task in list(self._tasks):
                task.cancel()
            await asyncio.gather(*self._tasks, return_exceptions=True)
            raise
        return self.failures

    # ------------------------------------------------------------------ #
    # internals                                                          #
    # ------------------------------------------------------------------ #

    def _dispatch(self) -> None:
        if self._closed or self._done is None:
            return
        while self._in_flight < self.max_concurrent and self._pending:
            item = self._pending.popleft()
            self._in_flight += 1
            self.peak_in_flight = max(self.peak_in_flight, self._in_flight)
            task = asyncio.ensure_future(self._process(item))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
        if not self._pending and self._in_flight == 0:
            self._close()
            if not self._done.done():
                self._done.set_result(None)

    def _close(self) -> None:
        self._closed = True
        self._pending.clear()

    async def _process(self, item: T) -> None:
        # asyncio.timeout(None) never expires
        timer = asyncio.timeout(self.item_timeout)
        try:
            async with timer:
                await self._handler(item)
        except Exception as exc:
            if timer.expired():
                self.logger.warning("Timed out after %.2f s: %r", self.item_timeout, item)
            else:
                self.logger.warning("Failed %r: %s", item, exc)
            self.failures.append(ItemFailure(item, exc))
        else:
            self.processed += 1
        finally:
            self._in_flight -= 1
            self._dispatch()
