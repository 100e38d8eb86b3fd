"""Tasks that spread their work over successive ticks of a game loop."""

from __future__ import annotations

import abc
from collections.abc import Callable

from .base import Listener, TaskBase


class _MultiFrameTask(TaskBase):
    """Shared tick logic: run up to ``iterations_per_tick`` steps every ``delay`` seconds."""

    def __init__(self, iterations_per_tick: int = 1, delay: float = 0.0) -> None:
        super().__init__()
        self.tickable = True
        self.iterations_per_tick = iterations_per_tick
        self.delay = delay
        self.task_listeners: list[Listener] = []
        self._started = False
        self._time_remaining = 0.0

    def _can_start(self) -> bool:
        return self.iterations_per_tick >= 1 and self.delay >= 0.0

    def start(self) -> bool:
        if not self._can_start():
            return False
        self._time_remaining = 0.0
        self._started = True
        return True

    def _has_next(self) -> bool:
        return True

    @abc.abstractmethod
    def _step(self) -> None:
        """Run one iteration of the task body."""

    def _notify(self) -> None:
        for listener in list(self.task_listeners):
            listener()

    def tick(self, delta_time: float) -> None:
        if not self._started or self.is_canceled():
            return
        self._time_remaining -= delta_time
        if self._time_remaining > 0.0:
            return
        self._time_remaining = self.delay
        for _ in range(self.iterations_per_tick):
            if not self._has_next() or self.is_canceled():
                break
            self._step()


class MultiFrameAsyncTask(_MultiFrameTask):
    """Calls its body ``iterations_per_tick`` times per tick until cancelled."""

    def __init__(
        self,
        body: Callable[[MultiFrameAsyncTask], None] | None = None,
        iterations_per_tick: int = 1,
        delay: float = 0.0,
    ) -> None:
        super().__init__(iterations_per_tick, delay)
        self.body = body

    def start(self) -> bool:
        return super().start()

    def is_running(self) -> bool:
        return self._started and not self.is_canceled()

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)

    def task_body(self) -> None:
        """One iteration of work; calls the body given at construction."""
        if self.body is not None:
            self.body(self)

    def _step(self) -> None:
        self.task_body()
        self._notify()


class _LoopTask(_MultiFrameTask):
    """A multi-frame task that walks a finite index range."""

    def __init__(self, iterations_per_tick: int, delay: float) -> None:
        super().__init__(iterations_per_tick, delay)
        self.current_index = 0

    @property
    @abc.abstractmethod
    def size(self) -> int:
        """Total number of iterations."""

    def _can_start(self) -> bool:
        return self.size > 0 and super()._can_start()

    def is_running(self) -> bool:
        if self._started and not self.is_canceled():
            return self.current_index < self.size
        return False

    def _has_next(self) -> bool:
        return self.current_index < self.size

    @abc.abstractmethod
    def _run_body(self) -> None:
        """Call ``task_body`` with the coordinates of ``current_index``."""

    def _step(self) -> None:
        self._run_body()
        self._notify()
        self.current_index += 1


class MultiFrameLoop1DTask(_LoopTask):
    """Calls its body once for each x in ``range(x_size)``, spread over ticks."""

    def __init__(
        self,
        body: Callable[[MultiFrameLoop1DTask, int], None] | None = None,
        x_size: int = 1,
        iterations_per_tick: int = 1,
        delay: float = 0.0,
    ) -> None:
        super().__init__(iterations_per_tick, delay)
        self.body = body
        self.x_size = x_size

    @property
    def size(self) -> int:
        return self.x_size

    @property
    def current_x(self) -> int:
        return self.current_index % self.x_size

    def start(self) -> bool:
        return super().start()

    def is_running(self) -> bool:
        return super().is_running()

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)

    def task_body(self, x: int) -> None:
        """Work for index ``x``; calls the body given at construction."""
        if self.body is not None:
            self.body(self, x)

    def _run_body(self) -> None:
        self.task_body(self.current_x)


class MultiFrameLoop2DTask(_LoopTask):
    """Calls its body for every (x, y) cell, x varying fastest, spread over ticks."""

    def __init__(
        self,
        body: Callable[[MultiFrameLoop2DTask, int, int], None] | None = None,
        x_size: int = 1,
        y_size: int = 1,
        iterations_per_tick: int = 1,
        delay: float = 0.0,
    ) -> None:
        super().__init__(iterations_per_tick, delay)
        self.body = body
        self.x_size = x_size
        self.y_size = y_size

    @property
    def size(self) -> int:
        return self.x_size * self.y_size

    @property
    def current_coords(self) -> tuple[int, int]:
        index = self.current_index
        return index % self.x_size, (index // self.x_size) % self.y_size

    def start(self) -> bool:
        return super().start()

    def is_running(self) -> bool:
        return super().is_running()

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)

    def task_body(self, x: int, y: int) -> None:
        """Work for cell (x, y); calls the body given at construction."""
        if self.body is not None:
            self.body(self, x, y)

    def _run_body(self) -> None:
        self.task_body(*self.current_coords)


class MultiFrameLoop3DTask(_LoopTask):
    """Calls its body for every (x, y, z) cell, x fastest and z slowest, over ticks."""

    def __init__(
        self,
        body: Callable[[MultiFrameLoop3DTask, int, int, int], None] | None = None,
        x_size: int = 1,
        y_size: int = 1,
        z_size: int = 1,
        iterations_per_tick: int = 1,
        delay: float = 0.0,
    ) -> None:
        super().__init__(iterations_per_tick, delay)
        self.body = body
        self.x_size = x_size
        self.y_size = y_size
        self.z_size = z_size

    @property
    def size(self) -> int:
        return self.x_size * self.y_size * self.z_size

    @property
    def current_coords(self) -> tuple[int, int, int]:
        index = self.current_index
        return (
            index % self.x_size,
            (index // self.x_size) % self.y_size,
            index // (self.x_size * self.y_size),
        )

    def start(self) -> bool:
        return super().start()

    def is_running(self) -> bool:
        return super().is_running()

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)

    def task_body(self, x: int, y: int, z: int) -> None:
        """Work for cell (x, y, z); calls the body given at construction."""
        if self.body is not None:
            self.body(self, x, y, z)

    def _run_body(self) -> None:
        self.task_body(*self.current_coords)