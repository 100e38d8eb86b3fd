"""A background task that fetches the body of an HTTP request."""

from __future__ import annotations

import enum
import http.client
import math
import threading
import urllib.error
import urllib.request
from collections.abc import Mapping
from concurrent.futures import Executor

from .base import ExecutionType, MultiThreadTask

__all__ = ["RequestMethod", "UrlToDataTask"]


class RequestMethod(enum.Enum):
    """HTTP verbs a request may use."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"
    PATCH = "PATCH"


class UrlToDataTask(MultiThreadTask):
    """Sends one HTTP request in the background and keeps the response body in ``data``.

    Headers with an empty name or value are not sent; an empty ``content``
    sends no body; a timeout of zero leaves the default timeout in place.
    A request that fails to connect leaves ``data`` empty.
    """

    def __init__(
        self,
        url: str = "",
        method: RequestMethod | str = RequestMethod.GET,
        headers: Mapping[str, str] | None = None,
        content: bytes = b"",
        timeout: float = 0.0,
        execution_type: ExecutionType = ExecutionType.THREAD_POOL,
        thread_pool: Executor | None = None,
    ) -> None:
        super().__init__(None, execution_type, thread_pool)
        self.url = url
        self.method = RequestMethod(method)
        self.headers: dict[str, str] = dict(headers or {})
        self.content = bytes(content)
        self.timeout = timeout
        self.data = b""
        self._lock = threading.Lock()
        self._pending = False
        self._response = None

    def start(self) -> bool:
        if self.is_running():
            return False
        self._canceled.clear()
        self.data = b""
        with self._lock:
            self._pending = True
        self._tasks = [self._submit(self._run)]
        return True

    def cancel(self) -> None:
        running = self.is_running() and not self.is_canceled()
        super().cancel()
        if running:
            with self._lock:
                response = self._response
            if response is not None:
                response.close()

    def is_running(self) -> bool:
        with self._lock:
            return self._pending

    def task_body(self) -> None:
        try:
            body = self._fetch()
            if body is not None and not self.is_canceled():
                self.data = body
        finally:
            with self._lock:
                self._response = None
                self._pending = False

    def _build_request(self) -> urllib.request.Request:
        request = urllib.request.Request(
            self.url, data=self.content or None, method=self.method.value
        )
        for name, value in self.headers.items():
            if name and value:
                request.add_header(name, value)
        return request

    def _fetch(self) -> bytes | None:
        try:
            request = self._build_request()
        except ValueError:
            return None
        options = {} if math.isclose(self.timeout, 0.0, abs_tol=1e-8) else {"timeout": self.timeout}
        try:
            response = urllib.request.urlopen(request, **options)
        except urllib.error.HTTPError as err:
            response = err
        except (urllib.error.URLError, OSError, ValueError, http.client.HTTPException):
            return None
        with self._lock:
            if self.is_canceled():
                response.close()
                return None
            self._response = response
        try:
            return response.read()
        except (OSError, ValueError, AttributeError, http.client.HTTPException):
            return None
        finally:
            response.close()