"""
Error handling utilities for Livshjulet.

Defines the error taxonomy of the wheel's export and initialization paths
together with helpers that turn errors into user-safe messages and
severity levels for logging.
"""


class LifeWheelError(Exception):
    """Base class for all Livshjulet errors."""

    user_message = "Det oppstod en feil."


class RendererUnavailable(LifeWheelError):
    """The render surface has not attached its export capability yet."""

    user_message = "Bildet er ikke klart ennå."


class ExportEncodingFault(LifeWheelError):
    """Producing or encoding the still image failed."""

    user_message = "Kunne ikke lage bilde."


class ClipboardWriteDenied(LifeWheelError):
    """The platform refused the clipboard write."""

    user_message = "Kopiering feilet"


class DownloadFailed(LifeWheelError):
    """The image could not be saved (dialog cancelled or write error)."""

    user_message = "Nedlasting feilet"


class WidgetInitializationFault(LifeWheelError):
    """The wheel could not be built; shown by the error boundary."""


def describe_error(error: BaseException) -> str:
    """
    Get a user-safe message for an error.

    Diagnostic detail (exception text, tracebacks) is never included;
    that belongs in the log.

    Args:
        error: Any exception

    Returns:
        Short message suitable for a button label or fallback display

    Example:
        >>> describe_error(ClipboardWriteDenied("NotAllowedError"))
        'Kopiering feilet'
    """
    if isinstance(error, LifeWheelError):
        return error.user_message
    return LifeWheelError.user_message


def is_recoverable_error(error: BaseException) -> bool:
    """
    Determine if an error is recovered locally by the wheel.

    Export, clipboard and download errors become a transient FAILURE on
    the affected button. Anything else escapes to the error boundary.

    Args:
        error: Any exception

    Returns:
        True if the error is handled inside the wheel
    """
    return isinstance(error, (
        RendererUnavailable,
        ExportEncodingFault,
        ClipboardWriteDenied,
        DownloadFailed,
    ))


def get_error_severity(error: BaseException) -> str:
    """
    Get the severity level of an error.

    Args:
        error: Any exception

    Returns:
        Severity level: "critical", "error" or "warning"

    Example:
        >>> get_error_severity(RendererUnavailable())
        'warning'
    """
    if isinstance(error, (RendererUnavailable, DownloadFailed)):
        return "warning"

    if is_recoverable_error(error):
        return "error"

    return "critical"
