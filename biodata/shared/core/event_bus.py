from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, Dict, List, Optional, TypeAlias

EventPayload: TypeAlias = Dict[str, Any]
EventHandler: TypeAlias = Callable[[EventPayload], Awaitable[None]]

logger = logging.getLogger(__name__)


class EventBus:
    """Async PubSub hub for form notifications.

    Every connected page owns one bus. Handlers run as tasks, so ``publish``
    returns before they finish; use ``wait_until_idle`` to join them.
    """

    def __init__(self) -> None:
        self._subscribers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._lock: Optional[asyncio.Lock] = None
        self._lock_loop: Optional[int] = None
        self._pending_tasks: set[asyncio.Task] = set()

    def _ensure_lock(self) -> asyncio.Lock:
        """Return a lock bound to the running loop."""
        try:
            running = id(asyncio.get_running_loop())
        except RuntimeError:
            running = None

        if self._lock is None or (running is not None and running != self._lock_loop):
            self._lock = asyncio.Lock()
            self._lock_loop = running
        return self._lock

    async def subscribe(self, topic: str, handler: EventHandler) -> None:
        async with self._ensure_lock():
            if handler not in self._subscribers[topic]:
                self._subscribers[topic].append(handler)

    async def unsubscribe(self, topic: str, handler: EventHandler) -> None:
        async with self._ensure_lock():
            handlers = self._subscribers.get(topic, [])
            if handler in handlers:
                handlers.remove(handler)

    def subscriber_count(self, topic: str) -> int:
        return len(self._subscribers.get(topic, []))

    async def publish(self, topic: str, payload: EventPayload) -> None:
        """Schedule every handler of ``topic`` with ``payload``."""
        async with self._ensure_lock():
            handlers = list(self._subscribers.get(topic, []))

        if not handlers:
            logger.debug(f"Dropped '{topic}': no subscribers")
            return

        logger.debug(f"Publishing '{topic}' to {len(handlers)} handler(s)")
        for handler in handlers:
            task = asyncio.create_task(self._safe_dispatch(topic, handler, payload))
            self._pending_tasks.add(task)
            task.add_done_callback(self._pending_tasks.discard)

    async def wait_until_idle(self, timeout: float = 5.0) -> bool:
        """Wait for all pending event handlers to complete.

        Args:
            timeout: Maximum time to wait in seconds

        Returns:
            True if all tasks completed, False if timeout reached
        """
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while self._pending_tasks:
            if loop.time() > deadline:
                logger.warning(f"EventBus: {len(self._pending_tasks)} handler(s) still running after {timeout}s")
                return False
            await asyncio.gather(*list(self._pending_tasks), return_exceptions=True)
            await asyncio.sleep(0)
        return True

    async def _safe_dispatch(self, topic: str, handler: EventHandler, payload: EventPayload) -> None:
        handler_name = getattr(handler, "__name__", repr(handler))
        try:
            await handler(payload)
        except Exception:
            logger.exception(f"EventBus handler '{handler_name}' failed on '{topic}'")

    def clear(self) -> None:
        """Remove all subscriptions."""
        self._subscribers.clear()
