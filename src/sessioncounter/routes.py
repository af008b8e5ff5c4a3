from fasthtml.core import APIRouter
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from .pages import render_page
from .session import CounterSession
from .timer import event_stream

rt = APIRouter()
timer_rt = APIRouter()


@rt("/", methods=["get"])
def index(req: Request, session):
    """Counter page for the caller's session."""
    config = req.app.state.config
    counter = CounterSession(session)
    return render_page(
        counter.count,
        live=config.web.live,
        stylesheet=config.web.stylesheet_url,
        timer_event=config.timer.event,
    )


@rt("/increment", methods=["post"])
def increment(session):
    return PlainTextResponse(str(CounterSession(session).increment()))


@rt("/decrement", methods=["post"])
def decrement(session):
    return PlainTextResponse(str(CounterSession(session).decrement()))


@timer_rt("/timer", methods=["get"])
async def timer(req: Request):
    """Seconds since connect, pushed once per tick."""
    return event_stream(req.app.state.config.timer)
