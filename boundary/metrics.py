from typing import Sequence

import numpy as np
import pandas as pd

from .weights import WeightTriple


def boundary_scores(X: np.ndarray, weights: WeightTriple) -> np.ndarray:
    """Signed score ``w0 + w1*x1 + w2*x2`` for each row of X (N, 2)."""
    X = np.asarray(X, dtype=np.float64)
    if X.ndim != 2 or X.shape[1] != 2:
        raise ValueError(f"X must have shape (N, 2), got {X.shape}")
    return weights.w0 + X @ np.array([weights.w1, weights.w2], dtype=np.float64)


def step_accuracy(X: np.ndarray, y: np.ndarray, weights: WeightTriple) -> float:
    """
    Fraction of points on the side of the boundary matching their label.

    A positive score predicts class 1. An empty dataset has accuracy NaN.
    """
    y = np.asarray(y)
    if len(y) == 0:
        return float("nan")
    preds = (boundary_scores(X, weights) > 0).astype(np.int64)
    return float(np.mean(preds == y))


def sequence_report(X: np.ndarray, y: np.ndarray, weights: Sequence[WeightTriple]) -> pd.DataFrame:
    """One row per weight step with its weights, accuracy and error count."""
    rows = []
    for i, w in enumerate(weights):
        acc = step_accuracy(X, y, w)
        rows.append({
            "step": i + 1,
            "w0": w.w0,
            "w1": w.w1,
            "w2": w.w2,
            "accuracy": acc,
            "n_misclassified": int(round((1.0 - acc) * len(y))) if len(y) else 0,
        })
    return pd.DataFrame(rows, columns=["step", "w0", "w1", "w2", "accuracy", "n_misclassified"])
