import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from multitask.base import ExecutionType, MultiThreadTask, TaskBase


def test_task_base_is_abstract():
    with pytest.raises(TypeError):
        TaskBase()


def test_body_runs_and_completes():
    ran = []
    completed = []
    task = MultiThreadTask(lambda t: ran.append(t))
    task.complete_listeners.append(lambda: completed.append(True))
    assert task.start() is True
    assert task.wait(5) is True
    assert ran == [task]
    assert completed == [True]
    assert task.is_running() is False


def test_task_listeners_called_after_body():
    order = []
    task = MultiThreadTask(lambda t: order.append("body"))
    task.task_listeners.append(lambda: order.append("listener"))
    task.start()
    task.wait(5)
    assert order == ["body", "listener"]


def test_start_refused_while_running():
    release = threading.Event()
    task = MultiThreadTask(lambda t: release.wait(5))
    assert task.start() is True
    assert task.is_running() is True
    assert task.start() is False
    release.set()
    assert task.wait(5) is True
    assert task.start() is True
    assert task.wait(5) is True


def test_cancel_running_task_skips_completion():
    release = threading.Event()
    cancels = []
    completes = []
    task = MultiThreadTask(lambda t: release.wait(5))
    task.cancel_listeners.append(lambda: cancels.append(True))
    task.complete_listeners.append(lambda: completes.append(True))
    task.start()
    task.cancel()
    task.cancel()
    assert task.is_canceled() is True
    assert cancels == [True]
    release.set()
    task.wait(5)
    assert completes == []


def test_cancel_idle_task_does_nothing():
    cancels = []
    task = MultiThreadTask()
    task.cancel_listeners.append(lambda: cancels.append(True))
    task.cancel()
    assert task.is_canceled() is False
    assert cancels == []


def test_start_clears_previous_cancel():
    release = threading.Event()
    task = MultiThreadTask(lambda t: release.wait(5))
    task.start()
    task.cancel()
    release.set()
    task.wait(5)
    assert task.start() is True
    task.wait(5)
    assert task.is_canceled() is False


@pytest.mark.parametrize(
    "execution_type",
    [ExecutionType.THREAD, ExecutionType.TASK_GRAPH, ExecutionType.THREAD_POOL],
)
def test_execution_types_run_body(execution_type):
    seen = []
    task = MultiThreadTask(lambda t: seen.append(threading.current_thread().name),
                           execution_type=execution_type)
    task.start()
    assert task.wait(5) is True
    assert len(seen) == 1
    assert seen[0] != threading.main_thread().name


def test_custom_thread_pool_is_used():
    seen = []
    with ThreadPoolExecutor(thread_name_prefix="custompool") as pool:
        task = MultiThreadTask(lambda t: seen.append(threading.current_thread().name),
                               thread_pool=pool)
        task.start()
        task.wait(5)
    assert seen[0].startswith("custompool")


def test_context_manager_cancels_and_waits():
    started = threading.Event()

    def body(t):
        started.set()
        while not t.is_canceled():
            threading.Event().wait(0.01)

    with MultiThreadTask(body) as task:
        task.start()
        started.wait(5)
    assert task.is_canceled() is True
    assert task.is_running() is False


def test_wait_without_jobs_returns_true():
    assert MultiThreadTask().wait(0) is True