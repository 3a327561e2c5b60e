# =============================================================================
# File: run.py
# Purpose: Entry point. Builds the forum app and serves it on HOST:PORT.
# =============================================================================
# run.py
import logging

from flask import Flask
from werkzeug.serving import make_server

from forum import create_app
from forum.config import Config

log = logging.getLogger("forum")


def run(app: Flask, host: str = Config.HOST, port: int = Config.PORT) -> None:
    """Bind a listener for app and serve until interrupted."""
    server = make_server(host, port, app, threaded=True)
    # Report the bound address (port 0 picks a free one)
    host, port = server.server_address[:2]
    log.info("listening server at http://%s:%s", host, port)
    try:
        server.serve_forever()
    finally:
        server.server_close()


def main() -> None:
    settings = Config.from_env()
    logging.basicConfig(
        level=settings["LOG_LEVEL"].upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app = create_app()
    # host '0.0.0.0' lets other machines reach the server
    run(app, settings["HOST"], settings["PORT"])


if __name__ == "__main__":
    main()
