import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from animation import BOUNDARY_SERIES, ManualScheduler
from viewer import CLASS0_SERIES, CLASS1_SERIES, MatplotlibPlotAdapter, Session, ViewerConfig


@pytest.fixture
def ax():
    fig, ax = plt.subplots()
    yield ax
    plt.close(fig)


def test_series_and_bounds(ax):
    plot = MatplotlibPlotAdapter(ax, interactive=False)
    plot.set_series(CLASS0_SERIES, [(0.0, 1.0), (2.0, 3.0)])
    plot.set_series(BOUNDARY_SERIES, [(0.0, 0.0), (5.0, 0.0)], label="x2 = 0")
    plot.set_axis_bounds("x", -1.0, 6.0)
    plot.set_axis_bounds("y", -2.0, 4.0)
    plot.redraw()

    np.testing.assert_allclose(plot._scatters[CLASS0_SERIES].get_offsets(), [[0.0, 1.0], [2.0, 3.0]])
    np.testing.assert_allclose(plot._line.get_xdata(), [0.0, 5.0])
    assert plot._line.get_label() == "x2 = 0"
    assert plot.get_axis_bounds("x") == pytest.approx((-1.0, 6.0))
    assert plot.get_axis_bounds("y") == pytest.approx((-2.0, 4.0))


def test_empty_boundary_clears_line(ax):
    plot = MatplotlibPlotAdapter(ax, interactive=False)
    plot.set_series(BOUNDARY_SERIES, [(0.0, 0.0), (1.0, 1.0)])
    plot.set_series(BOUNDARY_SERIES, [])
    assert len(plot._line.get_xdata()) == 0


def test_unknown_series_and_axis(ax):
    plot = MatplotlibPlotAdapter(ax)
    with pytest.raises(KeyError):
        plot.set_series("class2", [])
    with pytest.raises(ValueError):
        plot.set_axis_bounds("z", 0.0, 1.0)


def test_session_renders_on_axes(ax):
    session = Session(MatplotlibPlotAdapter(ax, interactive=False), ManualScheduler(), config=ViewerConfig(n_points=30))
    session.render()
    session.load_weights("w0,w1,w2\n0,1,1")
    session.step()

    assert len(ax.collections[0].get_offsets()) == 15
    assert len(ax.collections[1].get_offsets()) == 15
    assert ax.get_legend() is not None
    x_lo, x_hi = ax.get_xlim()
    np.testing.assert_allclose(ax.lines[0].get_xdata(), [x_lo, x_hi])
    np.testing.assert_allclose(ax.lines[0].get_ydata(), [-x_lo, -x_hi])
