"""
SessionCounter - a session-scoped counter page for FastHTML

One page with +/- buttons that update a counter kept in the signed session
cookie, and an optional live "seconds elapsed" display pushed over SSE.
"""

from .app import create_app
from .config import ApplicationConfig, Environment, configure_logging, get_config, set_config
from .pages import render_page
from .session import CounterSession
from .timer import timer_events, keep_alive, event_stream

__all__ = [
    'create_app',
    'ApplicationConfig',
    'Environment',
    'configure_logging',
    'get_config',
    'set_config',
    'render_page',
    'CounterSession',
    'timer_events',
    'keep_alive',
    'event_stream',
]
