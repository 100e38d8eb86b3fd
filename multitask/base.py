"""Task primitives: cancellation, completion hooks and background execution."""

from __future__ import annotations

import abc
import enum
import threading
from collections.abc import Callable
from concurrent.futures import Executor, Future, ThreadPoolExecutor, wait as wait_futures
from functools import lru_cache

Listener = Callable[[], None]


class ExecutionType(enum.Enum):
    """Where a threaded task body runs."""

    TASK_GRAPH = "task_graph"
    THREAD = "thread"
    THREAD_POOL = "thread_pool"


class Branches(enum.Enum):
    """Outcomes reported for a task without a per-iteration body."""

    ON_START = 0
    ON_COMPLETED = 1
    ON_CANCELED = 2


class BranchesWithBody(enum.Enum):
    """Outcomes reported for a task that also reports each body call."""

    ON_START = 0
    ON_TASK_BODY = 1
    ON_COMPLETED = 2
    ON_CANCELED = 3


@lru_cache(maxsize=None)
def _shared_executor() -> ThreadPoolExecutor:
    return ThreadPoolExecutor(thread_name_prefix="multitask")


class TaskBase(abc.ABC):
    """A cancellable unit of work with cancel and complete notifications."""

    def __init__(self) -> None:
        self._canceled = threading.Event()
        self.cancel_listeners: list[Listener] = []
        self.complete_listeners: list[Listener] = []
        self.tickable = False
        self.tickable_when_paused = False

    @abc.abstractmethod
    def start(self) -> bool:
        """Start the task; return False if it could not be started."""

    @abc.abstractmethod
    def is_running(self) -> bool:
        """Tell whether the task is in progress."""

    def cancel(self) -> None:
        """Cancel a running task and notify the cancel listeners once."""
        if self.is_running() and not self.is_canceled():
            self._canceled.set()
            self.on_cancel()

    def is_canceled(self) -> bool:
        return self._canceled.is_set()

    def on_cancel(self) -> None:
        """Called when the task is cancelled; notifies the cancel listeners."""
        for listener in list(self.cancel_listeners):
            listener()

    def on_complete(self) -> None:
        """Called when the task completes; notifies the complete listeners."""
        for listener in list(self.complete_listeners):
            listener()

    def tick(self, delta_time: float) -> None:
        """Advance a tickable task by ``delta_time`` seconds; the base task has no per-tick work."""
        return None


class ThreadTask(TaskBase):
    """A task whose work runs as one or more background jobs."""

    def __init__(
        self,
        execution_type: ExecutionType = ExecutionType.THREAD_POOL,
        thread_pool: Executor | None = None,
    ) -> None:
        super().__init__()
        self.execution_type = execution_type
        self.thread_pool = thread_pool
        self._tasks: list[Future] = []

    def start(self) -> bool:
        raise NotImplementedError

    def is_running(self) -> bool:
        return any(not task.done() for task in self._tasks)

    def wait(self, timeout: float | None = None) -> bool:
        """Block until every job finishes; return False on timeout."""
        if not self._tasks:
            return True
        _, not_done = wait_futures(list(self._tasks), timeout=timeout)
        return not not_done

    def _submit(self, job: Callable[[], None]) -> Future:
        if self.execution_type is ExecutionType.THREAD:
            future: Future = Future()

            def run() -> None:
                if not future.set_running_or_notify_cancel():
                    return
                try:
                    job()
                except BaseException as exc:  # recorded on the future
                    future.set_exception(exc)
                else:
                    future.set_result(None)

            threading.Thread(target=run, daemon=True).start()
            return future
        if self.execution_type is ExecutionType.THREAD_POOL and self.thread_pool is not None:
            return self.thread_pool.submit(job)
        return _shared_executor().submit(job)

    def __enter__(self) -> ThreadTask:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self.is_running():
            self.cancel()
        self.wait()


class MultiThreadTask(ThreadTask):
    """Runs ``task_body`` once in the background, then ``on_complete`` unless cancelled."""

    def __init__(
        self,
        body: Callable[[MultiThreadTask], None] | None = None,
        execution_type: ExecutionType = ExecutionType.THREAD_POOL,
        thread_pool: Executor | None = None,
    ) -> None:
        super().__init__(execution_type, thread_pool)
        self.body = body
        self.task_listeners: list[Listener] = []

    def start(self) -> bool:
        if self.is_running():
            return False
        self._canceled.clear()
        self._tasks = [self._submit(self._run)]
        return True

    def task_body(self) -> None:
        """The work of the task; calls the body given at construction."""
        if self.body is not None:
            self.body(self)

    def _run(self) -> None:
        self.task_body()
        for listener in list(self.task_listeners):
            listener()
        if not self.is_canceled():
            self.on_complete()