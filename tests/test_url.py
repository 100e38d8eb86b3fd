import json
import socket
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from multitask.base import ExecutionType
from multitask.url import RequestMethod, UrlToDataTask


class _Handler(BaseHTTPRequestHandler):
    def _reply(self):
        if self.path.startswith("/slow"):
            time.sleep(1.0)
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length else b""
        payload = json.dumps(
            {
                "method": self.command,
                "path": self.path,
                "body": body.decode(),
                "x_test": self.headers.get("X-Test"),
                "x_empty": self.headers.get("X-Empty"),
            }
        ).encode()
        status = 404 if self.path.startswith("/missing") else 200
        self.send_response(status)
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(payload)

    do_GET = do_POST = do_PUT = do_DELETE = do_PATCH = do_OPTIONS = do_HEAD = _reply

    def log_message(self, *args):
        pass


@pytest.fixture
def server_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()


def _run(task):
    assert task.start() is True
    assert task.wait(timeout=10) is True
    return task


def test_method_values_match_verbs():
    assert RequestMethod("PATCH") is RequestMethod.PATCH
    assert [m.value for m in RequestMethod] == [
        "GET", "POST", "PUT", "DELETE", "OPTIONS", "HEAD", "PATCH",
    ]


def test_get_fetches_body(server_url):
    task = _run(UrlToDataTask(server_url + "/a", execution_type=ExecutionType.THREAD))
    reply = json.loads(task.data)
    assert reply["method"] == "GET"
    assert reply["path"] == "/a"
    assert task.is_running() is False


@pytest.mark.parametrize("method", [RequestMethod.POST, RequestMethod.PUT, RequestMethod.PATCH])
def test_content_is_sent(server_url, method):
    task = _run(UrlToDataTask(server_url + "/b", method=method, content=b"hello"))
    reply = json.loads(task.data)
    assert reply["method"] == method.value
    assert reply["body"] == "hello"


def test_empty_headers_are_skipped(server_url):
    task = _run(
        UrlToDataTask(server_url, headers={"X-Test": "yes", "X-Empty": "", "": "ignored"})
    )
    reply = json.loads(task.data)
    assert reply["x_test"] == "yes"
    assert reply["x_empty"] is None


def test_error_status_still_returns_body(server_url):
    task = _run(UrlToDataTask(server_url + "/missing"))
    assert json.loads(task.data)["path"] == "/missing"


def test_head_has_empty_body(server_url):
    task = _run(UrlToDataTask(server_url, method="HEAD"))
    assert task.data == b""


def test_completion_listener_fires(server_url):
    calls = []
    task = UrlToDataTask(server_url)
    task.complete_listeners.append(lambda: calls.append(1))
    _run(task)
    assert calls == [1]


def test_refused_connection_leaves_data_empty():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    completed = []
    task = UrlToDataTask(f"http://127.0.0.1:{port}/", timeout=2.0)
    task.complete_listeners.append(lambda: completed.append(1))
    _run(task)
    assert task.data == b""
    assert completed == [1]


def test_invalid_url_leaves_data_empty():
    task = _run(UrlToDataTask("not a url"))
    assert task.data == b""
    assert task.is_canceled() is False


def test_second_start_while_running_fails(server_url):
    task = UrlToDataTask(server_url + "/slow")
    assert task.start() is True
    assert task.start() is False
    assert task.wait(timeout=10) is True
    assert json.loads(task.data)["path"] == "/slow"


def test_cancel_discards_result(server_url):
    canceled, completed = [], []
    task = UrlToDataTask(server_url + "/slow")
    task.cancel_listeners.append(lambda: canceled.append(1))
    task.complete_listeners.append(lambda: completed.append(1))
    assert task.start() is True
    task.cancel()
    assert task.is_canceled() is True
    assert task.wait(timeout=10) is True
    assert task.data == b""
    assert canceled == [1]
    assert completed == []


def test_cancel_when_idle_does_nothing():
    task = UrlToDataTask("http://localhost/")
    task.cancel()
    assert task.is_canceled() is False
    assert task.is_running() is False