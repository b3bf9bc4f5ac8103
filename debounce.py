import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


class Debouncer:
    """Run ``callback`` once ``delay`` seconds pass without a new trigger.

    Each ``trigger`` cancels the pending timer and arms a fresh one with the
    latest arguments. ``cancel`` leaves a callback that has already started
    to finish; ``cancel_all`` stops it too.
    """

    def __init__(self, delay: float, callback: Callable[..., Awaitable[Any]]) -> None:
        self.delay = delay
        self.callback = callback
        self._timer: Optional[asyncio.Task] = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> bool:
        return self._timer is not None and not self._timer.done()

    def trigger(self, *args: Any) -> None:
        self.cancel()
        self._timer = asyncio.create_task(self._fire(args))
        self._tasks.add(self._timer)
        self._timer.add_done_callback(self._tasks.discard)

    def cancel(self) -> None:
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = None

    def cancel_all(self) -> None:
        """Drop the pending timer and stop any callback still running."""
        self.cancel()
        for task in list(self._tasks):
            task.cancel()

    async def _fire(self, args: tuple) -> None:
        await asyncio.sleep(self.delay)
        # past this point the timer no longer owns the call; cancel() won't touch it
        self._timer = None
        try:
            await self.callback(*args)
        except Exception:
            logger.exception("Debounced callback failed")
