import logging
from typing import Callable, List, Protocol

logger = logging.getLogger(__name__)

TickCallback = Callable[[], None]


class ScheduledTask(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    def schedule_repeating(self, interval_ms: int, callback: TickCallback) -> ScheduledTask:
        ...


class _TimerTask:
    def __init__(self, timer, interval_ms: int):
        self.timer = timer
        self.interval_ms = interval_ms
        self.cancelled = False

    def cancel(self) -> None:
        if not self.cancelled:
            self.timer.stop()
            self.cancelled = True


class MatplotlibScheduler:
    """Repeating tasks backed by the figure canvas timers."""

    def __init__(self, canvas):
        self.canvas = canvas

    def schedule_repeating(self, interval_ms: int, callback: TickCallback) -> _TimerTask:
        timer = self.canvas.new_timer(interval=int(interval_ms))
        timer.add_callback(callback)
        timer.start()
        logger.debug("Started canvas timer (interval=%d ms)", interval_ms)
        return _TimerTask(timer, int(interval_ms))


class ManualTask:
    def __init__(self, interval_ms: int, callback: TickCallback):
        self.interval_ms = interval_ms
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """
    Scheduler whose ticks are fired explicitly with ``tick()``.

    Used for headless rendering and tests, where no event loop drives time.
    """

    def __init__(self):
        self.tasks: List[ManualTask] = []

    def _prune(self) -> None:
        self.tasks = [t for t in self.tasks if not t.cancelled]

    @property
    def active_tasks(self) -> List[ManualTask]:
        self._prune()
        return list(self.tasks)

    def schedule_repeating(self, interval_ms: int, callback: TickCallback) -> ManualTask:
        task = ManualTask(int(interval_ms), callback)
        self._prune()
        self.tasks.append(task)
        return task

    def tick(self, count: int = 1) -> int:
        """
        Fire every active task ``count`` times. Returns the number of callbacks run.
        """
        fired = 0
        for _ in range(count):
            active = self.active_tasks
            if not active:
                break
            for task in active:
                # a callback may cancel its own or another task mid-round
                if not task.cancelled:
                    task.callback()
                    fired += 1
        return fired
