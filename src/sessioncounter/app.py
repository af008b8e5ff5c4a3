"""
Application factory

Builds the FastHTML app: signed-cookie sessions, the counter routes, the
optional ``/timer`` stream and the static mount for the built stylesheet.
"""

import logging
from typing import Optional

from fasthtml.common import FastHTML
from starlette.staticfiles import StaticFiles

from .config import ApplicationConfig, configure_logging, get_config
from .routes import rt, timer_rt

logger = logging.getLogger(__name__)


def create_app(config: Optional[ApplicationConfig] = None) -> FastHTML:
    """
    Create a configured app instance.

    Args:
        config: Application configuration. Defaults to ``get_config()``,
                i.e. the environment-derived configuration.

    Returns:
        The FastHTML (Starlette) application
    """
    config = config or get_config()
    session = config.session
    # also runs in uvicorn reload workers, which never see the CLI process
    configure_logging(config.logging)

    # FastHTML's page wrapping and default headers are unused: "/" returns a full document.
    app = FastHTML(
        debug=config.web.debug,
        default_hdrs=False,
        secret_key=session.secret_key,
        key_fname=session.key_file,
        session_cookie=session.cookie_name,
        max_age=session.max_age,
        same_site=session.same_site,
        sess_https_only=session.https_only,
    )
    app.state.config = config

    rt.to_app(app)
    if config.web.live:
        timer_rt.to_app(app)

    app.mount(
        config.web.static_prefix,
        StaticFiles(directory=str(config.web.static_dir)),
        name="static",
    )

    logger.info(
        "Created app (environment=%s, live=%s, static=%s)",
        config.environment.value, config.web.live, config.web.static_dir,
    )
    return app
