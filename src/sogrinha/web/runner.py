"""Uvicorn server runner for the local privileged process."""

import copy

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from sogrinha.app import App
from sogrinha.config import Config
from sogrinha.web.server import create_fastapi_app


def run_server(app: App, config: Config) -> None:
    """Serve the API on the configured loopback address with compact log lines."""
    fastapi_app = create_fastapi_app(app, config)

    log_config = copy.deepcopy(LOGGING_CONFIG)
    log_config["formatters"]["access"]["fmt"] = '%(asctime)s - "%(request_line)s" %(status_code)s'
    log_config["formatters"]["default"]["fmt"] = "%(asctime)s - %(levelname)s - %(message)s"

    uvicorn.run(
        fastapi_app,
        host=config.host,
        port=config.port,
        log_config=log_config,
        log_level="debug" if config.debug else "info",
        access_log=config.debug,
    )
