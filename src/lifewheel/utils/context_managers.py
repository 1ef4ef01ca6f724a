"""
Context managers for Livshjulet.

Provides safe resource management for writing exported images: the
image is staged in a temporary file and only moved into place when the
write completed, with the staging file always released.
"""

import logging
from pathlib import Path
from typing import Optional

from PyQt6.QtCore import QIODevice, QSaveFile

from lifewheel.utils.error_handler import DownloadFailed


class StagedFileContext:
    """
    Context manager for atomically writing a file.

    Opens a QSaveFile (which writes to a temporary file next to the
    target) and commits it on a clean exit. If the body raises, the
    staged data is discarded and the target is left untouched.

    Attributes:
        path: Final destination of the file
        save_file: The open QSaveFile (set during context)

    Example:
        >>> with StagedFileContext(Path("livshjulet.png")) as f:
        ...     f.write(png_bytes)
        >>> # File committed, staging file released
    """

    def __init__(self, path: Path):
        """
        Initialize staged file context.

        Args:
            path: Destination path
        """
        self.path = Path(path)
        self.save_file: Optional[QSaveFile] = None

    def __enter__(self) -> QSaveFile:
        """
        Enter context - open the staging file.

        Returns:
            Open QSaveFile to write to

        Raises:
            DownloadFailed: If the staging file cannot be opened
        """
        logging.debug(f"Staging {self.path}")
        self.save_file = QSaveFile(str(self.path))
        if not self.save_file.open(QIODevice.OpenModeFlag.WriteOnly):
            error = self.save_file.errorString()
            self.save_file = None
            logging.error(f"Failed to open {self.path}: {error}")
            raise DownloadFailed(f"Cannot write {self.path}: {error}")
        return self.save_file

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Exit context - commit on success, discard on error.

        Returns:
            False to not suppress exceptions

        Raises:
            DownloadFailed: If committing the staged file fails
        """
        save_file = self.save_file
        self.save_file = None
        if save_file is None:
            return False

        if exc_type is not None:
            save_file.cancelWriting()
            save_file.commit()
            logging.debug(f"Discarded staged {self.path}")
            return False

        if not save_file.commit():
            error = save_file.errorString()
            logging.error(f"Failed to commit {self.path}: {error}")
            raise DownloadFailed(f"Cannot write {self.path}: {error}")

        logging.debug(f"Committed {self.path}")
        return False
