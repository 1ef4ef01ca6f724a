"""
Unit tests for error classification.
"""

from lifewheel.utils import (
    LifeWheelError,
    RendererUnavailable,
    ExportEncodingFault,
    ClipboardWriteDenied,
    DownloadFailed,
    WidgetInitializationFault,
    describe_error,
    is_recoverable_error,
    get_error_severity,
)


class TestDescribeError:
    """Test user-facing messages."""

    def test_known_errors(self):
        assert describe_error(ClipboardWriteDenied("NotAllowedError")) == "Kopiering feilet"
        assert describe_error(DownloadFailed("cancelled")) == "Nedlasting feilet"

    def test_details_not_leaked(self):
        """Test exception text never reaches the user message."""
        message = describe_error(ExportEncodingFault("/tmp/secret path"))
        assert "secret" not in message

    def test_unknown_error(self):
        assert describe_error(ValueError("x")) == "Det oppstod en feil."
        assert describe_error(WidgetInitializationFault()) == "Det oppstod en feil."


class TestSeverity:
    """Test recoverability and severity."""

    def test_export_errors_recoverable(self):
        for error in (RendererUnavailable(), ExportEncodingFault(),
                      ClipboardWriteDenied(), DownloadFailed()):
            assert is_recoverable_error(error)
            assert isinstance(error, LifeWheelError)

    def test_initialization_fault_not_recoverable(self):
        assert not is_recoverable_error(WidgetInitializationFault())
        assert get_error_severity(WidgetInitializationFault()) == "critical"

    def test_severity_levels(self):
        assert get_error_severity(RendererUnavailable()) == "warning"
        assert get_error_severity(DownloadFailed()) == "warning"
        assert get_error_severity(ClipboardWriteDenied()) == "error"
        assert get_error_severity(ExportEncodingFault()) == "error"
        assert get_error_severity(RuntimeError()) == "critical"
