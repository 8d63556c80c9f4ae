from .scheduler import ManualScheduler, MatplotlibScheduler, ScheduledTask, Scheduler
from .controller import (
    BASELINE_LABEL,
    BOUNDARY_LABEL,
    BOUNDARY_SERIES,
    DEFAULT_INTERVAL_MS,
    AnimationState,
    BoundaryAnimator,
)

__all__ = [
    "ManualScheduler",
    "MatplotlibScheduler",
    "ScheduledTask",
    "Scheduler",
    "BASELINE_LABEL",
    "BOUNDARY_LABEL",
    "BOUNDARY_SERIES",
    "DEFAULT_INTERVAL_MS",
    "AnimationState",
    "BoundaryAnimator",
]
