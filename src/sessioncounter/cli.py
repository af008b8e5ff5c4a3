import logging
import os

import uvicorn
from fastcore.script import call_parse, Param, store_true

from .assets import build_stylesheet
from .config import ENV_PREFIX, configure_logging, get_config

logger = logging.getLogger(__name__)


@call_parse
def main(
    host: Param("Interface to bind", str) = None,
    port: Param("Port to listen on", int) = None,
    no_live: Param("Serve the page without the live timer stream", store_true) = False,
    reload: Param("Restart the server when source files change", store_true) = False,
    build_css: Param("Compile the Tailwind stylesheet before starting", store_true) = False,
):
    "Run the session counter server"
    config = get_config()
    if host is not None: config.web.host = host
    if port is not None: config.web.port = port
    if no_live:
        # the app factory reads its config from the environment, also under --reload
        os.environ[ENV_PREFIX + "LIVE"] = "false"
        config.web.live = False
    configure_logging(config.logging)

    if build_css:
        build_stylesheet(config.web.static_dir / "style.css")

    logger.info("Serving on http://%s:%d", config.web.host, config.web.port)
    uvicorn.run(
        "sessioncounter.app:create_app",
        factory=True,
        host=config.web.host,
        port=config.web.port,
        reload=reload or config.web.auto_reload,
    )
