"""
Integration tests for the life wheel.

Drives the complete widget (chart, hover engine, commit store and action
buttons) through pointer samples and button requests, with a manual
scheduler in place of Qt timers.
"""

import pytest
from PyQt6.QtCore import QPointF

from lifewheel.core import ButtonPhase
from lifewheel.gui.widgets import LifeWheelWidget, WheelChart
from tests.fixtures import (
    ManualScheduler,
    FakeClipboard,
    RecordingLocationProvider,
    pointer_position,
)


def scene_point(index: int, radial: float) -> QPointF:
    x, y = pointer_position(index, radial, WheelChart.RADIUS)
    return QPointF(x, y)


OUTSIDE = QPointF(0, -WheelChart.RADIUS * 1.5)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def location(tmp_path):
    return RecordingLocationProvider(tmp_path)


@pytest.fixture
def wheel(settings, scheduler, clipboard, location):
    settings.export.image_size = 128
    widget = LifeWheelWidget(
        settings=settings,
        scheduler=scheduler,
        location_provider=location,
        clipboard_provider=lambda: clipboard,
    )
    yield widget
    widget.dispose()
    widget.deleteLater()


class TestHoverAndCommit:
    """Test pointer interaction end to end."""

    def test_hover_then_click_commits(self, wheel):
        """Test hovering category 3 at r=0.65 and clicking commits 7."""
        wheel.chart.process_pointer_sample(scene_point(3, 0.65))

        assert wheel.hover.active_index == 3
        assert wheel.hover.live_value == 7
        assert wheel.chart.live_value(3) == 7
        assert wheel.chart.is_highlighted(3)

        wheel.chart.process_click(scene_point(3, 0.65))

        assert wheel.values()[3] == 7
        assert wheel.chart.committed_value(3) == 7
        assert sum(wheel.values().values()) == 7

    def test_commit_signal(self, wheel):
        """Test committed values are announced."""
        committed = []
        wheel.value_committed.connect(lambda i, v: committed.append((i, v)))

        wheel.chart.process_click(scene_point(0, 1.0))

        assert committed == [(0, 10)]

    def test_moving_between_wedges(self, wheel):
        """Test moving to another wedge resets the previous live value."""
        wheel.chart.process_pointer_sample(scene_point(1, 0.5))
        wheel.chart.process_pointer_sample(scene_point(2, 0.4))

        assert wheel.chart.live_value(1) == 0
        assert not wheel.chart.is_highlighted(1)
        assert wheel.chart.live_value(2) == 4

    def test_leave_region(self, wheel):
        """Test moving beyond the wheel restores the rest appearance."""
        wheel.chart.process_click(scene_point(5, 0.3))
        wheel.chart.process_pointer_sample(scene_point(5, 0.9))

        wheel.chart.process_pointer_sample(OUTSIDE)

        assert wheel.chart.live_value(5) == 0
        assert not wheel.chart.is_highlighted(5)
        assert wheel.values()[5] == 3

    def test_rim_tolerance(self, wheel):
        """Test the pointer just outside the edge still hovers at max."""
        wheel.chart.process_pointer_sample(scene_point(4, 1.05))
        assert wheel.hover.live_value == 10

    def test_click_outside_ignored(self, wheel):
        """Test a click beyond the interaction region commits nothing."""
        wheel.chart.process_pointer_sample(scene_point(2, 0.5))

        wheel.chart.process_click(OUTSIDE)

        assert all(v == 0 for v in wheel.values().values())

    def test_reset(self, wheel):
        """Test reset clears committed and live values."""
        wheel.chart.process_click(scene_point(6, 0.8))
        wheel.reset()

        assert all(v == 0 for v in wheel.values().values())
        assert wheel.chart.committed_value(6) == 0
        assert wheel.hover.active_index is None


class TestDownloadFlow:
    """Test the download button end to end."""

    def test_download(self, wheel, scheduler, tmp_path):
        """Test a download writes livshjulet.png and returns to idle."""
        assert wheel.request_download()
        assert wheel.download_state.phase == ButtonPhase.BUSY
        assert not wheel.download_button.isEnabled()

        scheduler.advance(0)

        assert wheel.download_state.phase == ButtonPhase.SUCCESS
        assert (tmp_path / "livshjulet.png").exists()
        assert wheel.download_button.text() == "Last ned bilde"

        scheduler.advance(2000)
        assert wheel.download_state.phase == ButtonPhase.IDLE
        assert wheel.download_button.isEnabled()

    def test_double_click_single_artifact(self, wheel, scheduler, location):
        """Test two download requests within 100 ms produce one image."""
        assert wheel.request_download()
        scheduler.advance(50)
        assert not wheel.request_download()
        scheduler.advance(50)

        assert len(location.requests) == 1

    def test_download_and_copy_independent(self, wheel, scheduler):
        """Test a running download does not block copying."""
        assert wheel.request_download()
        assert wheel.request_copy()


class TestCopyFlow:
    """Test the copy button end to end."""

    def test_copy(self, wheel, scheduler, clipboard):
        """Test a copy shows the success label, then the idle label."""
        wheel.request_copy()
        scheduler.advance(0)

        assert clipboard.writes == 1
        assert wheel.copy_state.phase == ButtonPhase.SUCCESS
        assert wheel.copy_button.text() == "Kopiert!"

        scheduler.advance(2000)
        assert wheel.copy_button.text() == "Kopier til utklippstavle"

    def test_copy_without_capability(self, wheel, scheduler, clipboard):
        """Test copying before the chart can export shows the failure label."""
        wheel.chart.snapshotter = None

        wheel.request_copy()
        scheduler.advance(0)

        assert wheel.copy_state.phase == ButtonPhase.FAILURE
        assert wheel.copy_button.text() == "Kopiering feilet"
        assert clipboard.writes == 0

        scheduler.advance(1999)
        assert wheel.copy_state.phase == ButtonPhase.FAILURE

        scheduler.advance(1)
        assert wheel.copy_state.phase == ButtonPhase.IDLE
        assert wheel.copy_button.text() == "Kopier til utklippstavle"


class TestSettingsChanges:
    """Test that changed settings reach a running wheel."""

    def test_button_labels(self, wheel, settings):
        """Test a new copy label is shown at once."""
        settings.set_setting("buttons", "copy_label", "Kopier")

        assert wheel.copy_button.text() == "Kopier"
        assert wheel.copy_state.label == "Kopier"

    def test_dwell_time(self, wheel, settings, scheduler):
        """Test a shorter dwell applies to the next copy."""
        settings.set_setting("buttons", "dwell_ms", 500)

        wheel.request_copy()
        scheduler.advance(0)
        assert wheel.copy_state.phase == ButtonPhase.SUCCESS

        scheduler.advance(500)
        assert wheel.copy_state.phase == ButtonPhase.IDLE

    def test_wheel_opacity(self, wheel, settings):
        """Test a new rest opacity is applied to resting wedges."""
        settings.set_setting("wheel", "rest_opacity", 0.6)

        assert wheel.chart.wedge_opacity(0) == pytest.approx(0.6)

    def test_export_settings_rebound(self, wheel, settings):
        """Test resetting export settings hands the new object to the exporters."""
        settings.reset_to_defaults("export")

        assert wheel.pipeline.settings is settings.export
        assert wheel.downloader.settings is settings.export
        assert wheel.pipeline.settings.image_size == 1024

    def test_ignored_after_dispose(self, wheel, settings):
        """Test a disposed wheel no longer follows settings changes."""
        wheel.dispose()

        settings.set_setting("buttons", "copy_label", "Kopier")

        assert wheel.copy_button.text() == "Kopier til utklippstavle"


class TestDispose:
    """Test teardown."""

    def test_dispose_releases_everything(self, wheel, scheduler, clipboard):
        """Test pending work is dropped on dispose."""
        wheel.request_copy()
        wheel.dispose()
        scheduler.advance(5000)

        assert clipboard.writes == 0
        assert wheel.chart.snapshotter is None
        assert not wheel.request_download()

    def test_no_pointer_handling_after_dispose(self, wheel):
        """Test pointer samples are ignored after dispose."""
        wheel.dispose()
        wheel.chart.process_click(scene_point(3, 0.65))
        assert all(v == 0 for v in wheel.values().values())
