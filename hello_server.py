import errno
import logging
import socket
import sys

from flask import Flask
from werkzeug.serving import make_server

HOST = "0.0.0.0"
PORT = 5000
GREETING = "Hello World! Express server is running on port 5000."

logger = logging.getLogger(__name__)

app = Flask(__name__)


class BindError(OSError):
    pass


@app.route("/")
def home():
    return GREETING


def _check_port(host, port):
    # werkzeug exits the process itself on a failed bind, so probe first
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as exc:
        raise BindError(exc.errno, f"cannot bind port {port}: {exc.strerror}") from exc
    finally:
        sock.close()


def bind(port=PORT, host=HOST):
    if not 1 <= port <= 65535:
        raise ValueError(f"port must be between 1 and 65535, got {port}")

    _check_port(host, port)
    try:
        server = make_server(host, port, app, threaded=True)
    except SystemExit as exc:
        # port taken between the probe and the real bind
        raise BindError(
            errno.EADDRINUSE, f"cannot bind port {port}: Address already in use"
        ) from exc
    logger.info("Express server listening at http://localhost:%d", port)
    return server


def start(port=PORT):
    server = bind(port)
    server.serve_forever()


def configure_logging():
    out = logging.StreamHandler(sys.stdout)
    out.addFilter(lambda record: record.levelno < logging.WARNING)
    err = logging.StreamHandler(sys.stderr)
    err.setLevel(logging.WARNING)
    logging.basicConfig(level=logging.INFO, format="%(message)s", handlers=[out, err])


def main():
    configure_logging()
    try:
        start(PORT)
    except BindError as exc:
        logger.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
