"""
Utility functions for Livshjulet.

This module provides logging, error handling and context managers for
the life wheel application.
"""

from lifewheel.utils.error_handler import (
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

from lifewheel.utils.logging import (
    setup_logging,
    log_system_info,
    log_operation,
    log_error,
)

from lifewheel.utils.context_managers import StagedFileContext

__all__ = [
    # Error handling
    "LifeWheelError",
    "RendererUnavailable",
    "ExportEncodingFault",
    "ClipboardWriteDenied",
    "DownloadFailed",
    "WidgetInitializationFault",
    "describe_error",
    "is_recoverable_error",
    "get_error_severity",

    # Logging
    "setup_logging",
    "log_system_info",
    "log_operation",
    "log_error",

    # Context managers
    "StagedFileContext",
]
