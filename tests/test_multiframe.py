import pytest

from multitask.multiframe import (
    MultiFrameAsyncTask,
    MultiFrameLoop1DTask,
    MultiFrameLoop2DTask,
    MultiFrameLoop3DTask,
)


def run_to_end(task, limit=1000):
    for _ in range(limit):
        if not task.is_running():
            break
        task.tick(0.0)
    return task


@pytest.mark.parametrize(
    "kwargs",
    [{"iterations_per_tick": 0}, {"delay": -1.0}],
)
def test_async_start_rejects_bad_settings(kwargs):
    task = MultiFrameAsyncTask(**kwargs)
    assert task.start() is False
    assert task.is_running() is False


def test_async_runs_iterations_per_tick():
    calls = []
    task = MultiFrameAsyncTask(lambda t: calls.append(t), iterations_per_tick=3)
    task.tick(0.0)
    assert calls == []
    assert task.start() is True
    assert task.is_running() is True
    task.tick(0.0)
    task.tick(0.0)
    assert len(calls) == 6
    assert all(c is task for c in calls)


def test_async_delay_gates_ticks():
    calls = []
    task = MultiFrameAsyncTask(lambda t: calls.append(1), delay=0.5)
    task.start()
    task.tick(0.25)
    assert len(calls) == 1
    task.tick(0.25)
    assert len(calls) == 1
    task.tick(0.25)
    assert len(calls) == 2


def test_async_cancel_stops_and_notifies():
    canceled = []
    calls = []

    def body(task):
        calls.append(1)
        if len(calls) == 2:
            task.cancel()

    task = MultiFrameAsyncTask(body, iterations_per_tick=5)
    task.cancel_listeners.append(lambda: canceled.append(True))
    task.start()
    task.tick(0.0)
    task.tick(0.0)
    assert len(calls) == 2
    assert task.is_canceled() is True
    assert task.is_running() is False
    assert canceled == [True]


def test_async_task_listeners_called_per_iteration():
    seen = []
    task = MultiFrameAsyncTask(iterations_per_tick=4)
    task.task_listeners.append(lambda: seen.append(1))
    task.start()
    task.tick(0.0)
    assert len(seen) == 4


@pytest.mark.parametrize("size", [0, -2])
def test_loop1d_rejects_empty(size):
    assert MultiFrameLoop1DTask(x_size=size).start() is False


def test_loop1d_visits_each_index_in_order():
    visited = []
    task = MultiFrameLoop1DTask(lambda t, x: visited.append(x), x_size=7, iterations_per_tick=3)
    assert task.start() is True
    task.tick(0.0)
    assert visited == list(range(3))
    run_to_end(task)
    assert visited == list(range(7))
    assert task.is_running() is False
    assert task.is_canceled() is False


def test_loop1d_listener_sees_current_index_before_advance():
    task = MultiFrameLoop1DTask(x_size=4, iterations_per_tick=4)
    seen = []
    task.task_listeners.append(lambda: seen.append(task.current_x))
    task.start()
    task.tick(0.0)
    assert seen == [0, 1, 2, 3]


def test_loop1d_cancel_in_body():
    visited = []

    def body(task, x):
        visited.append(x)
        if x == 1:
            task.cancel()

    task = MultiFrameLoop1DTask(body, x_size=5, iterations_per_tick=5)
    task.start()
    task.tick(0.0)
    assert visited == [0, 1]
    assert task.is_running() is False


def test_loop2d_order_x_fastest():
    visited = []
    task = MultiFrameLoop2DTask(
        lambda t, x, y: visited.append((x, y)), x_size=3, y_size=2, iterations_per_tick=2
    )
    assert task.start() is True
    run_to_end(task)
    assert visited == [(x, y) for y in range(2) for x in range(3)]
    assert task.is_running() is False


def test_loop2d_rejects_zero_dimension():
    assert MultiFrameLoop2DTask(x_size=3, y_size=0).start() is False


def test_loop3d_order_and_coverage():
    visited = []
    task = MultiFrameLoop3DTask(
        lambda t, x, y, z: visited.append((x, y, z)),
        x_size=2,
        y_size=3,
        z_size=2,
        iterations_per_tick=5,
    )
    assert task.start() is True
    run_to_end(task)
    assert visited == [(x, y, z) for z in range(2) for y in range(3) for x in range(2)]
    assert task.current_index == task.size


def test_loop3d_rejects_zero_dimension():
    assert MultiFrameLoop3DTask(x_size=2, y_size=2, z_size=0).start() is False


def test_loop3d_delay_spreads_work():
    visited = []
    task = MultiFrameLoop3DTask(
        lambda t, x, y, z: visited.append((x, y, z)), x_size=2, y_size=2, z_size=2, delay=1.0
    )
    task.start()
    task.tick(0.5)
    task.tick(0.5)
    assert len(visited) == 1
    task.tick(0.5)
    assert len(visited) == 2
    assert task.is_running() is True