"""
Counter page

The single HTML document served at ``/``. htmx drives the +/- buttons and, in
the live variant, the htmx SSE extension subscribes to ``/timer`` and swaps
each ``timer`` event into the seconds display.
"""

from fasthtml.common import Html, Head, Title, Link, Script, Body, H1, P, Span, Div, Button

HTMX_SRC = "https://unpkg.com/htmx.org@2.0.3"
HTMX_INTEGRITY = "sha384-0895/pl2MU10Hqc6jd4RvrthNlDiE9U1tWmX7WRESftEDRosgxNsQG/Ze9YMRzHq"
HTMX_SSE_SRC = "https://unpkg.com/htmx-ext-sse@2.2.2/sse.js"

PAGE_TITLE = "Hello, World!"
BUTTON_CLS = "border rounded-md px-4 py-2 hover:bg-slate-100"
COUNTER_CLS = "flex justify-center bg-slate-100 rounded-md px-4 py-2 w-16"


def page_head(stylesheet: str, live: bool = True):
    scripts = [Script(src=HTMX_SRC, integrity=HTMX_INTEGRITY, crossorigin="anonymous")]
    if live:
        scripts.append(Script(src=HTMX_SSE_SRC))
    return Head(
        Title(PAGE_TITLE),
        Link(rel="stylesheet", href=stylesheet),
        *scripts,
    )


def counter_controls(count: int):
    """Decrement button, current value, increment button."""
    return Div(
        Button("-", hx_post="/decrement", hx_target="#counter", cls=BUTTON_CLS),
        Div(str(count), id="counter", cls=COUNTER_CLS),
        Button("+", hx_post="/increment", hx_target="#counter", cls=BUTTON_CLS),
        cls="flex gap-2",
    )


def elapsed_display(event: str = "timer"):
    return P(
        Span("0", sse_swap=event),
        " seconds since the page was loaded.",
    )


def render_page(count: int, live: bool = True, stylesheet: str = "/public/style.css",
                timer_path: str = "/timer", timer_event: str = "timer"):
    """Full document for the counter page showing `count`."""
    body = [
        H1(PAGE_TITLE),
        P("Welcome to my website!"),
    ]
    body_kw = {"cls": "flex flex-col gap-2 p-4"}
    if live:
        body.append(elapsed_display(timer_event))
        body_kw.update(hx_ext="sse", sse_connect=timer_path)
    body.append(counter_controls(count))

    return Html(
        page_head(stylesheet, live=live),
        Body(*body, **body_kw),
    )
