import pytest

from animation import (
    BASELINE_LABEL,
    BOUNDARY_LABEL,
    BOUNDARY_SERIES,
    AnimationState,
    BoundaryAnimator,
    ManualScheduler,
)
from boundary import WeightTriple
from viewer import RecordingPlotAdapter

SEQ = (
    WeightTriple(0.0, 0.0, 1.0),
    WeightTriple(-2.0, 1.0, 0.0),
    WeightTriple(0.0, 0.0, 0.0),
)


@pytest.fixture
def plot():
    return RecordingPlotAdapter(x_bounds=(0.0, 10.0), y_bounds=(0.0, 10.0))


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def animator(plot, scheduler):
    return BoundaryAnimator(plot, scheduler, interval_ms=100)


def _assert_invariants(animator, scheduler):
    assert -1 <= animator.cursor <= max(len(animator.weights) - 1, -1)
    assert len(scheduler.active_tasks) == (1 if animator.state is AnimationState.RUNNING else 0)


def test_starts_empty(animator):
    assert animator.state is AnimationState.EMPTY
    assert animator.cursor == -1
    assert animator.status_text() == "0 steps loaded"


def test_load_sequence_goes_to_ready_with_baseline(animator, plot):
    assert animator.load_sequence(SEQ) is AnimationState.READY
    assert animator.cursor == -1
    assert plot.series[BOUNDARY_SERIES] == [(0.0, 0.0), (10.0, 0.0)]
    assert plot.labels[BOUNDARY_SERIES] == BASELINE_LABEL
    assert plot.redraw_count == 1
    assert animator.status_text() == "3 steps loaded • at 0/3"


def test_load_empty_sequence_is_empty_state(animator):
    animator.load_sequence(SEQ)
    assert animator.load_sequence([]) is AnimationState.EMPTY
    assert animator.step() is False
    assert animator.toggle_animate() is False
    assert animator.cursor == -1


def test_step_walks_the_sequence_then_stops(animator, plot, scheduler):
    animator.load_sequence(SEQ)

    cursors = []
    for _ in range(3):
        assert animator.step() is True
        cursors.append(animator.cursor)
        _assert_invariants(animator, scheduler)
    assert cursors == [0, 1, 2]

    redraws = plot.redraw_count
    assert animator.step() is False
    assert animator.cursor == 2
    assert plot.redraw_count == redraws


def test_step_draws_each_boundary(animator, plot):
    animator.load_sequence(SEQ)

    animator.step()
    assert plot.series[BOUNDARY_SERIES] == [(0.0, 0.0), (10.0, 0.0)]
    assert plot.labels[BOUNDARY_SERIES] == BOUNDARY_LABEL

    animator.step()
    assert plot.series[BOUNDARY_SERIES] == [(2.0, 0.0), (2.0, 10.0)]

    animator.step()
    assert plot.series[BOUNDARY_SERIES] == []
    assert animator.status_text() == "3 steps loaded • at 3/3"


def test_toggle_starts_and_pauses(animator, scheduler):
    animator.load_sequence(SEQ)

    assert animator.toggle_animate() is True
    assert animator.state is AnimationState.RUNNING
    assert scheduler.active_tasks[0].interval_ms == 100

    assert animator.toggle_animate() is False
    assert animator.state is AnimationState.READY
    assert animator.cursor == -1
    assert scheduler.active_tasks == []


def test_pause_keeps_cursor_from_fired_ticks(animator, scheduler):
    animator.load_sequence(SEQ)
    animator.toggle_animate()
    scheduler.tick()
    animator.toggle_animate()

    assert animator.cursor == 0
    assert scheduler.tick() == 0
    assert animator.cursor == 0


def test_ticks_run_to_the_end_and_stop(animator, scheduler):
    animator.load_sequence(SEQ)
    animator.toggle_animate(interval_ms=50)

    for expected in (0, 1, 2):
        scheduler.tick()
        assert animator.cursor == expected
        _assert_invariants(animator, scheduler)

    assert animator.state is AnimationState.READY
    assert scheduler.tick() == 0


def test_toggle_at_end_stops_on_first_tick(animator, scheduler):
    animator.load_sequence(SEQ[:1])
    animator.step()
    animator.toggle_animate()
    scheduler.tick()

    assert animator.cursor == 0
    assert animator.state is AnimationState.READY


def test_interval_is_read_at_start(animator, scheduler):
    animator.load_sequence(SEQ)
    animator.toggle_animate()
    animator.interval_ms = 700

    assert scheduler.active_tasks[0].interval_ms == 100
    animator.toggle_animate()
    animator.toggle_animate()
    assert scheduler.active_tasks[0].interval_ms == 700


def test_load_while_running_cancels_task(animator, scheduler):
    animator.load_sequence(SEQ)
    animator.toggle_animate()
    scheduler.tick()

    animator.load_sequence(SEQ[:2])

    assert animator.state is AnimationState.READY
    assert animator.cursor == -1
    assert scheduler.active_tasks == []


def test_at_most_one_task(animator, scheduler):
    animator.load_sequence(SEQ)
    for _ in range(5):
        animator.toggle_animate()
        _assert_invariants(animator, scheduler)
    assert len(scheduler.active_tasks) == 1


@pytest.mark.parametrize("steps", [0, 1, 2, 3, 5])
def test_reset_returns_to_baseline(animator, plot, scheduler, steps):
    animator.load_sequence(SEQ)
    for _ in range(steps):
        animator.step()
    animator.toggle_animate()

    animator.reset()

    assert animator.cursor == -1
    assert animator.state is AnimationState.READY
    assert plot.series[BOUNDARY_SERIES] == [(0.0, 0.0), (10.0, 0.0)]
    assert plot.labels[BOUNDARY_SERIES] == BASELINE_LABEL
    assert scheduler.active_tasks == []


def test_reset_without_sequence_is_noop(animator, plot):
    animator.reset()
    assert animator.state is AnimationState.EMPTY
    assert plot.redraw_count == 0


def test_refresh_uses_current_bounds(animator, plot):
    animator.load_sequence(SEQ)
    animator.step()
    animator.step()

    plot.set_axis_bounds("x", -5.0, 5.0)
    plot.set_axis_bounds("y", -3.0, 4.0)
    animator.refresh()

    assert animator.cursor == 1
    assert plot.series[BOUNDARY_SERIES] == [(2.0, -3.0), (2.0, 4.0)]


def test_step_while_running_advances(animator, scheduler):
    animator.load_sequence(SEQ)
    animator.toggle_animate()
    assert animator.step() is True
    scheduler.tick()
    assert animator.cursor == 1


def test_listeners_see_every_transition(animator):
    seen = []
    animator.add_listener(lambda a: seen.append((a.state, a.cursor)))

    animator.load_sequence(SEQ[:1])
    animator.step()
    animator.reset()

    assert seen == [
        (AnimationState.READY, -1),
        (AnimationState.READY, 0),
        (AnimationState.READY, -1),
    ]


def test_non_positive_interval_rejected(animator):
    animator.load_sequence(SEQ)
    with pytest.raises(ValueError):
        animator.toggle_animate(interval_ms=0)
    assert animator.state is AnimationState.READY
