"""A small web service with one endpoint that answers with a JSON document."""

from __future__ import annotations

import argparse
import json
import logging
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

logger = logging.getLogger(__name__)

SEND_JSON_PATH = "/sendjson"


def send_json() -> bytes:
    """Return the body served at /sendjson: a user as compact JSON plus a newline."""
    user = {"Name": "Bill", "Email": "bill@example.com"}
    return (json.dumps(user, separators=(",", ":")) + "\n").encode("utf-8")


class JsonHandler(BaseHTTPRequestHandler):
    """Serves the /sendjson route and answers 404 elsewhere."""

    def do_GET(self) -> None:
        if self.path.split("?", 1)[0] == SEND_JSON_PATH:
            body = send_json()
            self.send_response(HTTPStatus.OK)
            self.send_header("Content-Type", "application/json")
        else:
            body = b"404 page not found\n"
            self.send_response(HTTPStatus.NOT_FOUND)
            self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:
        logger.debug(format, *args)


def create_server(host: str = "", port: int = 4000) -> ThreadingHTTPServer:
    """Bind a server for the service; call serve_forever on it to run."""
    return ThreadingHTTPServer((host, port), JsonHandler)


def main(argv: list[str] | None = None) -> int:
    """Run the web service until interrupted."""
    parser = argparse.ArgumentParser(
        prog="sendjson", description="Serve a JSON document at /sendjson."
    )
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=4000)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    server = create_server(args.host, args.port)
    logger.info("listener : Started : Listening on :%d", args.port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
    return 0