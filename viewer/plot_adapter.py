from __future__ import annotations

from typing import Dict, List, Optional, Protocol, Sequence, Tuple

import numpy as np

from animation.controller import BOUNDARY_SERIES

CLASS0_SERIES = "class0"
CLASS1_SERIES = "class1"

XY = Tuple[float, float]


class PlotAdapter(Protocol):
    def set_series(self, series_id: str, points: Sequence[XY], label: Optional[str] = None) -> None:
        ...

    def set_axis_bounds(self, axis: str, lo: float, hi: float) -> None:
        ...

    def get_axis_bounds(self, axis: str) -> Tuple[float, float]:
        ...

    def redraw(self) -> None:
        ...


def _check_axis(axis: str) -> str:
    if axis not in ("x", "y"):
        raise ValueError(f"axis must be 'x' or 'y', got {axis!r}")
    return axis


class RecordingPlotAdapter:
    """In-memory adapter: keeps the last data per series and counts redraws."""

    def __init__(self, x_bounds: XY = (-1.0, 1.0), y_bounds: XY = (-1.0, 1.0)):
        self.series: Dict[str, List[XY]] = {}
        self.labels: Dict[str, Optional[str]] = {}
        self.bounds: Dict[str, XY] = {"x": tuple(x_bounds), "y": tuple(y_bounds)}
        self.redraw_count = 0

    def set_series(self, series_id: str, points: Sequence[XY], label: Optional[str] = None) -> None:
        self.series[series_id] = [tuple(p) for p in points]
        if label is not None:
            self.labels[series_id] = label

    def set_axis_bounds(self, axis: str, lo: float, hi: float) -> None:
        self.bounds[_check_axis(axis)] = (float(lo), float(hi))

    def get_axis_bounds(self, axis: str) -> Tuple[float, float]:
        return self.bounds[_check_axis(axis)]

    def redraw(self) -> None:
        self.redraw_count += 1


class MatplotlibPlotAdapter:
    """
    Draws the two class scatters and the boundary line on a matplotlib Axes.

    Args:
        ax: Target axes. Limits are owned by the adapter (autoscaling off).
        interactive: Use ``draw_idle`` on redraw; otherwise draw synchronously,
            which headless rendering needs before grabbing a frame.
    """

    def __init__(self, ax, interactive: bool = True):
        self.ax = ax
        self.interactive = interactive
        self._scatters = {
            CLASS0_SERIES: ax.scatter(
                [], [], s=32, c="#3b82f6", edgecolors="#1d4ed8", label="Class 0 (blue)", zorder=2
            ),
            CLASS1_SERIES: ax.scatter(
                [], [], s=32, c="#ef4444", edgecolors="#b91c1c", label="Class 1 (red)", zorder=2
            ),
        }
        (self._line,) = ax.plot([], [], color="#111827", linewidth=2, label="x2 = 0", zorder=3)
        ax.set_autoscale_on(False)
        ax.set_xlabel("x1")
        ax.set_ylabel("x2")
        ax.grid(True, color="black", alpha=0.06)

    def set_series(self, series_id: str, points: Sequence[XY], label: Optional[str] = None) -> None:
        data = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        if series_id in self._scatters:
            artist = self._scatters[series_id]
            artist.set_offsets(data)
        elif series_id == BOUNDARY_SERIES:
            artist = self._line
            artist.set_data(data[:, 0], data[:, 1])
        else:
            raise KeyError(f"Unknown series: {series_id!r}")
        if label is not None:
            artist.set_label(label)

    def set_axis_bounds(self, axis: str, lo: float, hi: float) -> None:
        if _check_axis(axis) == "x":
            self.ax.set_xlim(lo, hi)
        else:
            self.ax.set_ylim(lo, hi)

    def get_axis_bounds(self, axis: str) -> Tuple[float, float]:
        if _check_axis(axis) == "x":
            return tuple(self.ax.get_xlim())
        return tuple(self.ax.get_ylim())

    def redraw(self) -> None:
        self.ax.legend(loc="upper left")
        if self.interactive:
            self.ax.figure.canvas.draw_idle()
        else:
            self.ax.figure.canvas.draw()
