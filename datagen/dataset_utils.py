from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from .rng import Mulberry32, randn

logger = logging.getLogger(__name__)

CSV_HEADER = ("x1", "x2", "y")

LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280


@dataclass(frozen=True)
class Point:
    x1: float
    x2: float
    y: int


@dataclass(frozen=True)
class GaussianBlobsConfig:
    """
    Class-conditional Gaussians used by ``generate_two_gaussians``.

    Coordinates are left unclamped unless ``clamp`` is given, in which case
    both features are clipped into ``[lo, hi]`` after sampling.
    """

    mean_class0: Tuple[float, float] = (-1.0, -0.5)
    mean_class1: Tuple[float, float] = (1.1, 0.7)
    std: float = 0.8
    clamp: Optional[Tuple[float, float]] = None


def next_seed(seed: int) -> int:
    """Linear congruential step applied to the seed on every regeneration."""
    return (seed * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS


def generate_two_gaussians(
    n: int = 200,
    seed: int = 42,
    config: GaussianBlobsConfig = GaussianBlobsConfig(),
) -> Tuple[Point, ...]:
    """
    Generate a reproducible two-class dataset in 2D.

    Parameters
    ----------
    n : int
        Total number of points. The first ``n // 2`` get label 0, the rest
        label 1; the order is not shuffled.
    seed : int
        Seed of the Mulberry32 generator. Identical ``(n, seed, config)``
        always gives identical points.
    config : GaussianBlobsConfig
        Class means, shared standard deviation and optional clamp box.

    Returns
    -------
    tuple of Point
        The dataset in generation order.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise TypeError(f"n must be an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    rng = Mulberry32(seed)
    means = (config.mean_class0, config.mean_class1)
    n_class0 = n // 2

    points = []
    for i in range(n):
        y = 0 if i < n_class0 else 1
        m1, m2 = means[y]
        x1 = m1 + config.std * randn(rng)
        x2 = m2 + config.std * randn(rng)
        if config.clamp is not None:
            lo, hi = config.clamp
            x1 = min(max(x1, lo), hi)
            x2 = min(max(x2, lo), hi)
        points.append(Point(x1=x1, x2=x2, y=y))

    logger.debug("Generated %d points (seed=%s, class0=%d)", n, seed, n_class0)
    return tuple(points)


def dataset_to_csv(points: Sequence[Point]) -> str:
    """Render points as ``x1,x2,y`` CSV text, rows in generation order."""
    lines = [",".join(CSV_HEADER)]
    for p in points:
        lines.append(f"{p.x1!r},{p.x2!r},{p.y}")
    return "\n".join(lines)


def dataset_to_arrays(points: Sequence[Point]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Return ``X`` of shape (n, 2) and ``y`` of shape (n,) for the given points.
    """
    X = np.array([[p.x1, p.x2] for p in points], dtype=np.float64).reshape(-1, 2)
    y = np.array([p.y for p in points], dtype=np.int64)
    return X, y


def save_dataset_to_csv(
    points: Sequence[Point],
    out_dir: str | Path = ".",
    prefix: str = "two_feature_binary_dataset",
    timestamp: Optional[str] = None,
) -> Path:
    """
    Save a dataset to a CSV file.

    Parameters
    ----------
    points : sequence of Point
        Dataset to write.
    out_dir : str or Path
        Directory where the CSV file will be saved.
    prefix : str
        Prefix for the filename.
    timestamp : str or None
        If None, current timestamp (YYYYMMDD_HHMMSS) is used. Pass an empty
        string to write ``<prefix>.csv``.

    Returns
    -------
    Path
        Path to the saved CSV file.
    """
    return write_text_export(dataset_to_csv(points), out_dir, prefix, timestamp)


def write_text_export(
    text: str,
    out_dir: str | Path = ".",
    prefix: str = "two_feature_binary_dataset",
    timestamp: Optional[str] = None,
) -> Path:
    """Write an exported text blob as ``<prefix>_<timestamp>.csv``."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    if timestamp is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    stem = f"{prefix}_{timestamp}" if timestamp else prefix
    filename = out_dir / f"{stem}.csv"
    filename.write_text(text, encoding="utf-8")
    logger.info("Wrote %s", filename)
    return filename


def load_dataset_from_csv(csv_path: str | Path) -> Tuple[Point, ...]:
    """
    Load a dataset previously written by ``save_dataset_to_csv``.

    Parameters
    ----------
    csv_path : str or Path
        Path to the CSV file.

    Returns
    -------
    tuple of Point
        Points in file order.
    """
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"Data file not found at {csv_path}")

    try:
        df = pd.read_csv(csv_path, skipinitialspace=True, float_precision="round_trip")
    except pd.errors.EmptyDataError:
        return ()

    header = tuple(str(col).strip().lower() for col in df.columns)
    if header != CSV_HEADER:
        raise ValueError(f"Unexpected header in {csv_path}: {list(df.columns)!r}")
    df.columns = list(CSV_HEADER)

    x1 = df["x1"].astype(np.float64).to_numpy()
    x2 = df["x2"].astype(np.float64).to_numpy()
    y = df["y"].astype(np.int64).to_numpy()
    return tuple(Point(x1=float(a), x2=float(b), y=int(c)) for a, b, c in zip(x1, x2, y))


def plot_2d_dataset(
    points: Sequence[Point],
    out_dir: str | Path = ".",
    prefix: str = "two_feature_binary_plot",
    timestamp: Optional[str] = None,
    show: bool = True,
) -> Path:
    """
    Visualize the dataset as a static scatter plot and save it as PNG.

    Parameters
    ----------
    points : sequence of Point
        Dataset to draw.
    out_dir : str or Path
        Directory where the PNG file will be saved.
    prefix : str
        Prefix for the plot filename.
    timestamp : str or None
        If None, current timestamp (YYYYMMDD_HHMMSS) is used.
    show : bool
        Whether to display the plot using plt.show().

    Returns
    -------
    Path
        Path to the saved PNG file.
    """
    X, y = dataset_to_arrays(points)

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    if timestamp is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    plot_path = out_dir / f"{prefix}_{timestamp}.png"

    plt.figure(figsize=(10, 6))
    plt.scatter(
        X[y == 0, 0],
        X[y == 0, 1],
        c="#3b82f6",
        label="Class 0 (blue)",
        alpha=0.8,
        edgecolors="#1d4ed8",
    )
    plt.scatter(
        X[y == 1, 0],
        X[y == 1, 1],
        c="#ef4444",
        label="Class 1 (red)",
        alpha=0.8,
        edgecolors="#b91c1c",
    )
    plt.axhline(0.0, color="#111827", linewidth=2, label="x2 = 0")
    plt.xlabel("x1")
    plt.ylabel("x2")
    plt.title("Two-Feature Binary Dataset")
    plt.legend()
    plt.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.savefig(plot_path, dpi=150)

    if show:
        plt.show()
    else:
        plt.close()

    return plot_path
