"""
Live Timer Stream

Server-Sent Events stream that reports whole seconds elapsed since the
connection opened, one ``timer`` event per tick. Starlette cancels the
generator when the client disconnects; nothing else needs cleaning up.
"""

import asyncio
import contextlib
import logging
import time
from typing import AsyncIterator, Awaitable, Callable

from datastar_py import SSE_HEADERS
from fasthtml.common import sse_message
from starlette.responses import StreamingResponse

from .config import TimerConfig

logger = logging.getLogger(__name__)


async def timer_events(
    interval: float = 1.0,
    event: str = "timer",
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> AsyncIterator[str]:
    """
    Yield one SSE message per tick with the elapsed whole seconds as data.

    The first tick fires immediately. Later ticks sit on a fixed grid
    measured from the start, so a slow consumer does not accumulate drift.
    """
    started = clock()
    deadline = started
    sent = 0
    logger.info("Timer stream opened")
    try:
        while True:
            delay = deadline - clock()
            if delay > 0:
                await sleep(delay)
            yield sse_message(str(int(clock() - started)), event=event)
            sent += 1
            deadline += interval
    finally:
        logger.info("Timer stream closed after %d events", sent)


async def keep_alive(events: AsyncIterator[str], interval: float, comment: str = "keep-alive") -> AsyncIterator[str]:
    """
    Relay `events`, inserting an SSE comment whenever none arrives for `interval` seconds.

    The pending ``__anext__`` runs as its own task so a timeout never cancels
    the wrapped generator mid-step.
    """
    iterator = events.__aiter__()
    pending = None
    try:
        while True:
            if pending is None:
                pending = asyncio.ensure_future(iterator.__anext__())
            done, _ = await asyncio.wait({pending}, timeout=interval)
            if not done:
                yield f": {comment}\n\n"
                continue
            task, pending = pending, None
            try:
                message = task.result()
            except StopAsyncIteration:
                return
            yield message
    finally:
        if pending is not None:
            pending.cancel()
            with contextlib.suppress(asyncio.CancelledError, StopAsyncIteration):
                await pending
        aclose = getattr(iterator, "aclose", None)
        if aclose is not None:
            await aclose()


def event_stream(config: TimerConfig) -> StreamingResponse:
    """The ``/timer`` response: timer events wrapped with keep-alive comments."""
    events = timer_events(interval=config.interval, event=config.event)
    return StreamingResponse(
        keep_alive(events, config.keep_alive),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
