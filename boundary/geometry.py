import math
from typing import NamedTuple, Optional, Sequence, Tuple

from .weights import WeightTriple

EPSILON = 1e-12

Segment = Tuple[Tuple[float, float], ...]


class AxisBounds(NamedTuple):
    x_min: float
    x_max: float
    y_min: float
    y_max: float


def line_for(
    weights: Optional[WeightTriple],
    x_min: float,
    x_max: float,
    y_min: float,
    y_max: float,
) -> Segment:
    """
    Endpoints of the boundary ``w0 + w1*x1 + w2*x2 = 0`` inside the given bounds.

    Args:
        weights: Weight triple, or None for the baseline line x2 = 0.
        x_min, x_max: Horizontal extent the segment is evaluated over.
        y_min, y_max: Vertical extent used when the line is vertical.

    Returns:
        Two (x1, x2) endpoints, or an empty tuple when no line exists
        (w1 and w2 both negligible, or a non-finite weight).
    """
    if weights is None:
        return ((x_min, 0.0), (x_max, 0.0))

    w0, w1, w2 = weights.w0, weights.w1, weights.w2
    if not all(math.isfinite(w) for w in (w0, w1, w2)):
        return ()

    if abs(w2) > EPSILON:
        return (
            (x_min, -(w0 + w1 * x_min) / w2),
            (x_max, -(w0 + w1 * x_max) / w2),
        )
    if abs(w1) > EPSILON:
        x_const = -w0 / w1
        return ((x_const, y_min), (x_const, y_max))
    return ()


def axis_bounds(points: Sequence, pad_fraction: float = 0.15) -> AxisBounds:
    """
    Padded plot bounds around ``points`` (objects with ``x1``/``x2``).

    Each axis is widened by ``pad_fraction`` of its span on both sides, or of
    1.0 when the span is zero. No points gives the unit box [-1, 1]^2.
    """
    if len(points) == 0:
        return AxisBounds(-1.0, 1.0, -1.0, 1.0)

    xs = [p.x1 for p in points]
    ys = [p.x2 for p in points]
    x_lo, x_hi = min(xs), max(xs)
    y_lo, y_hi = min(ys), max(ys)
    pad_x = pad_fraction * ((x_hi - x_lo) or 1.0)
    pad_y = pad_fraction * ((y_hi - y_lo) or 1.0)
    return AxisBounds(x_lo - pad_x, x_hi + pad_x, y_lo - pad_y, y_hi + pad_y)
