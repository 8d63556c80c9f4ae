import math

import numpy as np
import pytest

from boundary import WeightTriple, boundary_scores, sequence_report, step_accuracy

X = np.array([[-2.0, 0.0], [-1.0, 1.0], [1.0, -1.0], [2.0, 0.5]])
y = np.array([0, 0, 1, 1])


def test_scores():
    scores = boundary_scores(X, WeightTriple(1.0, 2.0, -1.0))
    np.testing.assert_allclose(scores, [-3.0, -2.0, 4.0, 4.5])


def test_scores_shape_checked():
    with pytest.raises(ValueError):
        boundary_scores(np.zeros((3, 3)), WeightTriple(0, 1, 1))


def test_step_accuracy():
    assert step_accuracy(X, y, WeightTriple(0.0, 1.0, 0.0)) == 1.0
    assert step_accuracy(X, y, WeightTriple(0.0, -1.0, 0.0)) == 0.0
    # baseline-like x2 > 0 split
    assert step_accuracy(X, y, WeightTriple(0.0, 0.0, 1.0)) == 0.5


def test_step_accuracy_empty():
    assert math.isnan(step_accuracy(np.zeros((0, 2)), np.zeros(0), WeightTriple(0, 1, 1)))


def test_sequence_report():
    weights = [WeightTriple(0.0, -1.0, 0.0), WeightTriple(0.0, 1.0, 0.0)]
    df = sequence_report(X, y, weights)

    assert list(df.columns) == ["step", "w0", "w1", "w2", "accuracy", "n_misclassified"]
    assert df["step"].tolist() == [1, 2]
    assert df["accuracy"].tolist() == [0.0, 1.0]
    assert df["n_misclassified"].tolist() == [4, 0]


def test_sequence_report_empty():
    df = sequence_report(X, y, [])
    assert df.empty
    assert "accuracy" in df.columns
