"""
Unit tests for the wheel chart widget.

Covers appearance updates, pointer-to-signal translation and move
coalescing. Runs on the offscreen Qt platform.
"""

import pytest
from PyQt6.QtCore import QPointF

from lifewheel.core import default_categories
from lifewheel.gui.widgets import WheelChart, PointerMoveCoalescer
from tests.fixtures import pointer_position


@pytest.fixture
def chart(qapp):
    chart = WheelChart(default_categories(), rest_opacity=0.8, hover_opacity=0.3)
    yield chart
    chart.dispose()
    chart.deleteLater()


def point(index, radial):
    return QPointF(*pointer_position(index, radial, WheelChart.RADIUS))


class TestAppearance:
    """Test wedge appearance."""

    def test_initial_state(self, chart):
        """Test wedges start empty at rest opacity."""
        for index in range(8):
            assert chart.committed_value(index) == 0
            assert chart.live_value(index) == 0
            assert chart.wedge_opacity(index) == pytest.approx(0.8)
        assert chart.snapshotter is not None

    def test_highlight_changes_opacity(self, chart):
        """Test hovered wedges switch to the hover opacity and back."""
        chart.set_highlight(1, True)
        assert chart.wedge_opacity(1) == pytest.approx(0.3)

        chart.set_highlight(1, False)
        assert chart.wedge_opacity(1) == pytest.approx(0.8)

    def test_committed_value_grows_wedge(self, chart):
        """Test the committed value sets the wedge radius."""
        chart.set_committed_value(4, 5)
        assert chart.committed_value(4) == 5

    def test_rest_appearance(self, chart):
        """Test the rest context temporarily restores rest opacity."""
        chart.set_highlight(2, True)

        with chart.rest_appearance():
            assert chart.wedge_opacity(2) == pytest.approx(0.8)

        assert chart.wedge_opacity(2) == pytest.approx(0.3)

    def test_needs_categories(self, qapp):
        """Test a chart without categories is rejected."""
        with pytest.raises(ValueError):
            WheelChart([])


class TestPointerSignals:
    """Test pointer samples become move/leave/click signals."""

    def test_move(self, chart):
        moves = []
        chart.pointer_moved.connect(lambda i, r: moves.append((i, r)))

        chart.process_pointer_sample(point(6, 0.5))

        assert len(moves) == 1
        assert moves[0][0] == 6
        assert moves[0][1] == pytest.approx(0.5)

    def test_leave(self, chart):
        left = []
        chart.pointer_left_region.connect(lambda: left.append(True))

        chart.process_pointer_sample(QPointF(0, -WheelChart.RADIUS * 1.2))

        assert left == [True]

    def test_click_inside_and_outside(self, chart):
        clicks = []
        chart.wheel_clicked.connect(lambda: clicks.append(True))

        chart.process_click(point(0, 0.4))
        chart.process_click(QPointF(WheelChart.RADIUS * 2, 0))

        assert clicks == [True]

    def test_dispose(self, chart):
        """Test a disposed chart detaches export and ignores samples."""
        moves = []
        chart.pointer_moved.connect(lambda i, r: moves.append(i))

        chart.dispose()
        chart.process_pointer_sample(point(1, 0.5))

        assert chart.is_disposed()
        assert chart.snapshotter is None
        assert moves == []


class TestPointerMoveCoalescer:
    """Test trailing-edge coalescing of pointer moves."""

    def test_only_latest_sample_delivered(self, qapp):
        delivered = []
        coalescer = PointerMoveCoalescer(delivered.append, interval_ms=16)

        coalescer.push(QPointF(1, 1))
        coalescer.push(QPointF(2, 2))
        coalescer.push(QPointF(3, 3))
        coalescer.flush()

        assert delivered == [QPointF(3, 3)]
        assert not coalescer.has_pending()

    def test_cancel_drops_sample(self, qapp):
        delivered = []
        coalescer = PointerMoveCoalescer(delivered.append)

        coalescer.push(QPointF(1, 1))
        coalescer.cancel()
        coalescer.flush()

        assert delivered == []
