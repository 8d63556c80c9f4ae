import enum
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from boundary.geometry import line_for
from boundary.weights import WeightTriple

from .scheduler import ScheduledTask, Scheduler

logger = logging.getLogger(__name__)

BOUNDARY_SERIES = "boundary"
BASELINE_LABEL = "x2 = 0"
BOUNDARY_LABEL = "Decision boundary"
DEFAULT_INTERVAL_MS = 300


class AnimationState(enum.Enum):
    EMPTY = "empty"
    READY = "ready"
    RUNNING = "running"


class BoundaryAnimator:
    """
    Steps the decision-boundary line through a loaded weight sequence.

    The cursor is -1 at baseline (line x2 = 0) and otherwise indexes the
    weight triple currently drawn. At most one repeating task is scheduled at
    any time, and it exists exactly while the state is RUNNING.

    Args:
        plot: Plot adapter receiving the boundary series and redraw requests.
            Axis bounds are read back from it whenever a line is computed.
        scheduler: Source of repeating tasks for the animation ticks.
        interval_ms: Tick interval used when ``toggle_animate`` gets none.
    """

    def __init__(self, plot, scheduler: Scheduler, interval_ms: int = DEFAULT_INTERVAL_MS):
        self.plot = plot
        self.scheduler = scheduler
        self.interval_ms = int(interval_ms)
        self.weights: Tuple[WeightTriple, ...] = ()
        self.cursor = -1
        self._task: Optional[ScheduledTask] = None
        self._listeners: List[Callable[["BoundaryAnimator"], None]] = []

    @property
    def state(self) -> AnimationState:
        if not self.weights:
            return AnimationState.EMPTY
        if self._task is not None:
            return AnimationState.RUNNING
        return AnimationState.READY

    @property
    def is_running(self) -> bool:
        return self._task is not None

    @property
    def current_weights(self) -> Optional[WeightTriple]:
        if self.cursor < 0:
            return None
        return self.weights[self.cursor]

    @property
    def at_end(self) -> bool:
        return self.cursor >= len(self.weights) - 1

    def add_listener(self, fn: Callable[["BoundaryAnimator"], None]) -> None:
        self._listeners.append(fn)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def load_sequence(self, weights: Sequence[WeightTriple]) -> AnimationState:
        self.stop()
        self.weights = tuple(weights)
        self.cursor = -1
        self._draw_current()
        logger.info("Loaded %d weight steps", len(self.weights))
        self._notify()
        return self.state

    def step(self) -> bool:
        """Advance one step. Returns False when nothing changed."""
        if not self.weights:
            logger.debug("step() ignored: no weights loaded")
            return False
        return self._advance()

    def toggle_animate(self, interval_ms: Optional[int] = None) -> bool:
        """
        Start or pause the animation. Returns True if it is running afterwards.
        """
        state = self.state
        if state is AnimationState.EMPTY:
            logger.debug("toggle_animate() ignored: no weights loaded")
            return False
        if state is AnimationState.RUNNING:
            self.stop()
            logger.info("Animation paused at step %d/%d", self.cursor + 1, len(self.weights))
            self._notify()
            return False

        interval = int(interval_ms) if interval_ms is not None else self.interval_ms
        if interval <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval}")
        self.stop()
        self._task = self.scheduler.schedule_repeating(interval, self._tick)
        logger.info("Animation started (interval=%d ms)", interval)
        self._notify()
        return True

    def reset(self) -> None:
        self.stop()
        if not self.weights:
            return
        self.cursor = -1
        self._draw_current()
        self._notify()

    def refresh(self) -> None:
        """Recompute the current line against the plot's present axis bounds."""
        self._draw_current()
        self._notify()

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _tick(self) -> None:
        if self._task is None:
            return
        if not self.at_end:
            self._advance()
        if self.at_end:
            self.stop()
            logger.info("Animation finished at step %d/%d", self.cursor + 1, len(self.weights))
            self._notify()

    def _advance(self) -> bool:
        if self.at_end:
            return False
        self.cursor += 1
        self._draw_current()
        self._notify()
        return True

    def _draw_current(self) -> None:
        x_min, x_max = self.plot.get_axis_bounds("x")
        y_min, y_max = self.plot.get_axis_bounds("y")
        weights = self.current_weights
        segment = line_for(weights, x_min, x_max, y_min, y_max)
        label = BASELINE_LABEL if weights is None else BOUNDARY_LABEL
        self.plot.set_series(BOUNDARY_SERIES, segment, label=label)
        self.plot.redraw()

    def _notify(self) -> None:
        for fn in self._listeners:
            fn(self)

    def status_text(self) -> str:
        loaded = len(self.weights)
        if loaded == 0:
            return "0 steps loaded"
        at = 0 if self.cursor < 0 else self.cursor + 1
        plural = "s" if loaded != 1 else ""
        return f"{loaded} step{plural} loaded • at {at}/{loaded}"
