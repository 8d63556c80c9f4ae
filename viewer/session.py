from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence, Tuple

from animation.controller import DEFAULT_INTERVAL_MS, BoundaryAnimator
from animation.scheduler import Scheduler
from boundary.checkpoints import load_checkpoint_sequence
from boundary.geometry import axis_bounds
from boundary.weights import WeightTriple, load_weight_sequence, parse_weight_sequence
from datagen.dataset_utils import (
    GaussianBlobsConfig,
    Point,
    dataset_to_csv,
    generate_two_gaussians,
    next_seed,
    write_text_export,
)

from .plot_adapter import CLASS0_SERIES, CLASS1_SERIES, PlotAdapter

logger = logging.getLogger(__name__)

# Receives (filename stem, text) and delivers the blob; returns where it went.
Exporter = Callable[[str, str], object]


class RegeneratePolicy(enum.Enum):
    PRESERVE = "preserve"  # keep the current step, recomputed for the new bounds
    RESET = "reset"        # stop and return to baseline


@dataclass
class ViewerConfig:
    n_points: int = 200
    initial_seed: int = 123
    interval_ms: int = DEFAULT_INTERVAL_MS
    pad_fraction: float = 0.15
    on_regenerate: RegeneratePolicy = RegeneratePolicy.PRESERVE
    export_prefix: str = "two_feature_binary_dataset"
    blobs: GaussianBlobsConfig = field(default_factory=GaussianBlobsConfig)


def file_exporter(out_dir: str | Path = ".", timestamp: Optional[str] = "") -> Exporter:
    """Exporter writing each blob to ``out_dir/<stem>.csv``."""
    def deliver(stem: str, text: str) -> Path:
        return write_text_export(text, out_dir=out_dir, prefix=stem, timestamp=timestamp)
    return deliver


def _is_file(text: str) -> bool:
    try:
        return Path(text).is_file()
    except OSError:
        # long pasted CSV text can exceed the file name limit
        return False


class Session:
    """
    One viewer session: the current dataset, its seed and the boundary animator.

    Every user action is one method; ``dispatch`` maps command names onto them
    so that a UI only needs to forward button presses.
    """

    COMMANDS = (
        "regenerate",
        "export",
        "load_weights",
        "load_weights_file",
        "load_weights_input",
        "load_checkpoints",
        "step",
        "toggle_animate",
        "reset_animation",
        "set_speed",
    )

    def __init__(
        self,
        plot: PlotAdapter,
        scheduler: Scheduler,
        exporter: Optional[Exporter] = None,
        config: Optional[ViewerConfig] = None,
    ):
        self.config = config or ViewerConfig()
        if self.config.interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {self.config.interval_ms}")
        self.plot = plot
        self.exporter = exporter or file_exporter()
        self.animator = BoundaryAnimator(plot, scheduler, interval_ms=self.config.interval_ms)
        self.seed = self.config.initial_seed
        self.data_seed = self.seed
        self.points: Tuple[Point, ...] = self._generate(self.seed)

    @property
    def interval_ms(self) -> int:
        return self.animator.interval_ms

    def _generate(self, seed: int) -> Tuple[Point, ...]:
        # a zero seed from the LCG step is replaced by 1
        self.data_seed = seed or 1
        return generate_two_gaussians(self.config.n_points, self.data_seed, self.config.blobs)

    def _push_dataset(self) -> None:
        class0 = [(p.x1, p.x2) for p in self.points if p.y == 0]
        class1 = [(p.x1, p.x2) for p in self.points if p.y == 1]
        self.plot.set_series(CLASS0_SERIES, class0)
        self.plot.set_series(CLASS1_SERIES, class1)

        bounds = axis_bounds(self.points, self.config.pad_fraction)
        self.plot.set_axis_bounds("x", bounds.x_min, bounds.x_max)
        self.plot.set_axis_bounds("y", bounds.y_min, bounds.y_max)

    def render(self) -> None:
        """Initial render of the dataset with the baseline line."""
        self._push_dataset()
        self.animator.refresh()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def regenerate(self) -> int:
        """Draw a new dataset from the next seed. Returns the new seed."""
        self.seed = next_seed(self.seed)
        self.points = self._generate(self.seed)
        logger.info("Regenerated %d points (seed=%d)", len(self.points), self.seed)
        self._push_dataset()

        if self.config.on_regenerate is RegeneratePolicy.RESET and self.animator.weights:
            self.animator.reset()
        else:
            self.animator.refresh()
        return self.seed

    def export(self):
        return self.exporter(self.config.export_prefix, dataset_to_csv(self.points))

    def load_weights(self, text: str) -> int:
        return self._load(parse_weight_sequence(text))

    def load_weights_file(self, path: str | Path) -> int:
        return self._load(load_weight_sequence(path))

    def load_checkpoints(self, paths: Iterable[str | Path]) -> int:
        return self._load(load_checkpoint_sequence(paths))

    def load_weights_input(self, text: str) -> int:
        """
        Load from one text box: an existing ``.pth`` file is read as a checkpoint,
        any other existing file as a weights CSV, and anything else as CSV text.
        """
        text = text.strip()
        if text and _is_file(text):
            if Path(text).suffix == ".pth":
                return self.load_checkpoints([text])
            return self.load_weights_file(text)
        return self.load_weights(text)

    def _load(self, weights: Sequence[WeightTriple]) -> int:
        self.animator.load_sequence(weights)
        if not weights:
            logger.info("No weight steps loaded")
        return len(weights)

    def step(self) -> bool:
        return self.animator.step()

    def toggle_animate(self) -> bool:
        return self.animator.toggle_animate(self.animator.interval_ms)

    def reset_animation(self) -> None:
        self.animator.reset()

    def set_speed(self, interval_ms: int) -> None:
        """Set the tick interval; a running animation keeps its old one."""
        interval_ms = int(interval_ms)
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.animator.interval_ms = interval_ms

    def dispatch(self, command: str, *args):
        if command not in self.COMMANDS:
            raise KeyError(f"Unknown command: {command!r}")
        return getattr(self, command)(*args)

    def status_text(self) -> str:
        return f"{len(self.points)} points • seed {self.data_seed} • {self.animator.status_text()}"
