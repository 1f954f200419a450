"""Application entry point for the Sogrinha backend server."""

from sogrinha.app import App
from sogrinha.config import Config
from sogrinha.logging import setup_logging
from sogrinha.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug, config.log_file)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
