from __future__ import annotations

import asyncio
import time
from typing import Any, Dict

from stacks_events.config import load_settings
from stacks_events.schemas.event_codes import EventCode
from stacks_events.schemas.events import ApplicationEvent
from stacks_events.utils.logger_util import get_logger

logger = get_logger(__name__)


class Channel:
    def __init__(self, maxsize: int = 100):
        self.q: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self.maxsize = int(maxsize)
        self.dropped = 0
        self.published = 0
        self.created_at = time.time()

    @property
    def depth(self) -> int:
        return self.q.qsize()

    async def publish(self, item: Any, block: bool = False, timeout: float | None = None) -> bool:
        # non-blocking publish drops when the queue is full
        try:
            if block:
                await asyncio.wait_for(self.q.put(item), timeout=timeout)
            else:
                self.q.put_nowait(item)
        except (asyncio.QueueFull, asyncio.TimeoutError):
            self.dropped += 1
            return False
        self.published += 1
        return True


def _channel_name(event_code: int) -> str:
    try:
        return EventCode(event_code).name
    except ValueError:
        return str(event_code)


class EventBus:
    """In-process publisher with one bounded channel per event code.

    Stands in for the external dispatch infrastructure in tests and local
    wiring: it routes on ``event_code`` only and never looks at the
    concrete event type.
    """

    def __init__(self, default_maxsize: int | None = None):
        if default_maxsize is None:
            default_maxsize = load_settings().bus_maxsize
        self.channels: Dict[int, Channel] = {}
        self.default_maxsize = int(default_maxsize)

    def register_channel(self, event_code: int, maxsize: int | None = None) -> Channel:
        if maxsize is None:
            maxsize = self.default_maxsize
        ch = Channel(maxsize=int(maxsize))
        self.channels[int(event_code)] = ch
        return ch

    def _channel(self, event_code: int) -> Channel:
        ch = self.channels.get(int(event_code))
        if ch is None:
            ch = self.register_channel(event_code)
        return ch

    def subscribe(self, event_code: int) -> asyncio.Queue:
        return self._channel(event_code).q

    async def publish(self, event: Any, block: bool = False, timeout: float | None = None) -> bool:
        if not isinstance(event, ApplicationEvent):
            raise TypeError(f"{type(event).__name__} is not an application event")
        ok = await self._channel(event.event_code).publish(event, block=block, timeout=timeout)
        if ok:
            logger.debug(
                "published %s code=%s correlation_id=%s operation_code=%s",
                type(event).__name__, event.event_code, event.correlation_id, event.operation_code,
            )
        else:
            logger.warning(
                "dropped %s code=%s correlation_id=%s (channel full)",
                type(event).__name__, event.event_code, event.correlation_id,
            )
        return ok

    def metrics(self) -> Dict[str, Dict[str, int]]:
        """Return simple per-channel metrics keyed by event code name."""
        out: Dict[str, Dict[str, int]] = {}
        for code, ch in self.channels.items():
            out[_channel_name(code)] = {
                "queue_depth": ch.depth,
                "published": ch.published,
                "dropped": ch.dropped,
                "maxsize": ch.maxsize,
            }
        return out
