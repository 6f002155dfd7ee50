"""A tiny TCP server that answers every connection with a fixed HTTP page."""

from __future__ import annotations

import argparse
import socket
import socketserver
from collections.abc import Sequence

RESPONSE = b"HTTP/1.0 200\r\nContent-type:text/html\r\n\r\n<h1>Hello world!</h1>"
DEFAULT_PORT = 8080


class HelloHandler(socketserver.BaseRequestHandler):
    """Write the fixed response and shut the connection down."""

    def handle(self) -> None:
        self.request.sendall(RESPONSE)
        try:
            self.request.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass


class _HelloServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True
    request_queue_size = 5


def make_server(host: str = "", port: int = DEFAULT_PORT) -> socketserver.TCPServer:
    """Bind and return a server answering with :data:`RESPONSE`."""
    return _HelloServer((host, port), HelloHandler)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Serve a fixed hello page.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    with make_server(args.host, args.port) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())