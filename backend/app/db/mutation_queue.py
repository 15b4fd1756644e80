"""Per-file mutation queue.

At most one mutation runs per filename at a time. Later callers wait on the
handle of the mutation registered just before them, so mutations on one file
complete in call-arrival order. Different filenames never wait on each other.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

T = TypeVar("T")


class MutationQueue:
    """Process-local registry of pending mutations, keyed by filename.

    Not shared across processes: two processes writing the same files are unsafe.
    """

    def __init__(self) -> None:
        self._pending: dict[str, asyncio.Future[None]] = {}

    def pending(self, name: str) -> bool:
        """Whether a mutation is registered for this file."""
        return name in self._pending

    async def run(self, name: str, fn: Callable[[], Awaitable[T]]) -> T:
        """Run fn once every earlier mutation on name has finished.

        Args:
            name: Filename the mutation touches
            fn: Coroutine function doing the read-modify-write

        Returns:
            Whatever fn returns
        """
        previous = self._pending.get(name)
        done: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        self._pending[name] = done

        try:
            if previous is not None:
                # Shield so a cancelled waiter does not cancel its predecessor's handle
                await asyncio.shield(previous)
            return await fn()
        finally:
            if previous is not None and not previous.done():
                # Cancelled while waiting: hand the slot on only once the predecessor finishes
                previous.add_done_callback(lambda _: self._release(name, done))
            else:
                self._release(name, done)

    def _release(self, name: str, done: asyncio.Future[None]) -> None:
        """Deregister done if it is still the tail and wake the next waiter."""
        if self._pending.get(name) is done:
            del self._pending[name]
        if not done.done():
            done.set_result(None)
