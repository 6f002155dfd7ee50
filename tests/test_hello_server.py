import socket
import threading

import pytest

from cppexperiments.hello_server import RESPONSE, HelloHandler, make_server

EXPECTED = b"HTTP/1.0 200\r\nContent-type:text/html\r\n\r\n<h1>Hello world!</h1>"


def _read_all(sock):
    chunks = []
    while True:
        chunk = sock.recv(4096)
        if not chunk:
            return b"".join(chunks)
        chunks.append(chunk)


@pytest.fixture
def running_server():
    server = make_server("127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()
    thread.join(timeout=5)


def test_handler_writes_response_and_closes():
    left, right = socket.socketpair()
    with left, right:
        handler = HelloHandler(left, ("local", 0), None)
        assert handler.client_address == ("local", 0)
        right.settimeout(5)
        received = _read_all(right)
        assert received == EXPECTED
        assert received == RESPONSE


def test_server_answers_each_connection(running_server):
    address = running_server.server_address
    for _ in range(2):
        with socket.create_connection(address, timeout=5) as client:
            assert _read_all(client) == EXPECTED