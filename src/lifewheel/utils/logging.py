"""
Logging configuration for Livshjulet.

Provides file and console logging with system information capture for
debugging and troubleshooting.
"""

import logging
import sys
import platform
from pathlib import Path


def setup_logging(log_file: str = "lifewheel.log", level: int = logging.DEBUG) -> None:
    """
    Configure logging for the application.

    Sets up file-based logging and a console handler at INFO level, then
    logs system information for troubleshooting.

    Args:
        log_file: Path to log file (default: "lifewheel.log")
        level: Logging level (default: logging.DEBUG)

    Example:
        >>> setup_logging()
        >>> logging.info("Application started")
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        filename=log_file,
        level=level,
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Also log to console for development
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_formatter = logging.Formatter('%(levelname)s - %(message)s')
    console_handler.setFormatter(console_formatter)
    logging.getLogger().addHandler(console_handler)

    log_system_info()


def log_system_info() -> None:
    """
    Log system information for debugging purposes.

    Captures platform, Python and Qt versions.
    """
    from PyQt6.QtCore import PYQT_VERSION_STR, QT_VERSION_STR

    logging.info("=" * 60)
    logging.info("Livshjulet - System Information")
    logging.info("=" * 60)
    logging.info(f"Platform: {platform.system()} {platform.release()}")
    logging.info(f"Machine: {platform.machine()}")
    logging.info(f"Python version: {sys.version}")
    logging.info(f"Qt version: {QT_VERSION_STR} (PyQt {PYQT_VERSION_STR})")
    logging.info("=" * 60)


def log_operation(operation: str, details: str, level: int = logging.INFO) -> None:
    """
    Log a user-facing operation with details.

    Args:
        operation: Name of the operation (e.g., "download", "copy")
        details: Additional details about the operation
        level: Logging level (default: logging.INFO)

    Example:
        >>> log_operation("download", "saved /home/kari/livshjulet.png")
    """
    logging.log(level, f"{operation}: {details}")


def log_error(operation: str, error: BaseException) -> None:
    """
    Log a failed operation with its error type.

    Args:
        operation: Name of the operation that failed
        error: The exception that caused the failure

    Example:
        >>> log_error("copy", ClipboardWriteDenied("no clipboard"))
    """
    logging.error(f"{operation} failed - {type(error).__name__}: {error}")
