"""
Image export pipeline for Livshjulet.

Renders the committed state of the wheel to a PNG buffer and hands it to
one of two consumers:

- ImageDownloader: saves the image as livshjulet.png
- ClipboardWriter: puts the image on the system clipboard as image/png

Every failure is caught where it happens, logged, and reported to the
caller as a False outcome so the button state machine can show it.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from PyQt6.QtCore import QBuffer, QByteArray, QIODevice, QMimeData
from PyQt6.QtGui import QColor, QGuiApplication
from PyQt6.QtWidgets import QFileDialog, QWidget

from lifewheel.core.settings import ExportSettings
from lifewheel.utils.context_managers import StagedFileContext
from lifewheel.utils.error_handler import (
    RendererUnavailable,
    ExportEncodingFault,
    ClipboardWriteDenied,
    DownloadFailed,
)
from lifewheel.utils.logging import log_error, log_operation


logger = logging.getLogger(__name__)

PNG_MIME_TYPE = "image/png"
EXPORT_FILENAME = "livshjulet.png"


# =============================================================================
# Rendering
# =============================================================================


def encode_png(image) -> bytes:
    """
    Encode a QImage as PNG bytes.

    Raises:
        ExportEncodingFault: If the image is empty or encoding fails
    """
    if image is None or image.isNull():
        raise ExportEncodingFault("Snapshot produced an empty image")

    data = QByteArray()
    buffer = QBuffer(data)
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    try:
        if not image.save(buffer, "PNG"):
            raise ExportEncodingFault("PNG encoding failed")
    finally:
        buffer.close()
    return bytes(data)


class ExportPipeline:
    """
    Produces PNG images of the wheel's committed state.

    The chart's export capability (its snapshotter) is looked up on every
    render, so a chart that has not finished initializing, or has been
    torn down, yields no image.
    """

    def __init__(self, chart, settings: Optional[ExportSettings] = None):
        """
        Initialize the export pipeline.

        Args:
            chart: WheelChart (or any object with a ``snapshotter`` attribute)
            settings: Export settings (background, image size)
        """
        self._chart = chart
        self.settings = settings or ExportSettings()

    def render(self) -> bytes:
        """
        Render the wheel to PNG bytes.

        Raises:
            RendererUnavailable: If the chart has no export capability
            ExportEncodingFault: If the snapshot or encoding fails
        """
        snapshotter = getattr(self._chart, "snapshotter", None)
        if snapshotter is None:
            raise RendererUnavailable("Chart export not available")

        background = QColor(self.settings.background_color)
        if not background.isValid():
            background = QColor("#ffffff")

        try:
            image = snapshotter.snapshot(self.settings.image_size, background)
        except Exception as e:
            raise ExportEncodingFault(f"Couldn't export chart image: {e}") from e

        return encode_png(image)

    def render_to_image(self) -> Optional[bytes]:
        """
        Render the wheel to PNG bytes, reporting failure as None.

        Returns:
            PNG bytes, or None if no image could be produced
        """
        try:
            return self.render()
        except RendererUnavailable as e:
            logger.warning(f"{e}")
        except ExportEncodingFault as e:
            log_error("render", e)
        return None


# =============================================================================
# Download
# =============================================================================

# Location provider signature: (suggested directory) -> chosen directory or None
LocationProvider = Callable[[Path], Optional[Path]]


def dialog_location_provider(parent: Optional[QWidget] = None) -> LocationProvider:
    """Build a location provider that asks the user for a directory."""
    def ask(suggested: Path) -> Optional[Path]:
        directory = QFileDialog.getExistingDirectory(
            parent,
            "Last ned bilde",
            str(suggested),
        )
        if not directory:
            return None
        return Path(directory)
    return ask


def fixed_location_provider(suggested: Path) -> Optional[Path]:
    """Location provider that accepts the suggested directory as-is."""
    return suggested


class ImageDownloader:
    """
    Saves exported images to disk as livshjulet.png.

    Only the directory is chosen, either with a dialog or from the export
    settings; the file name and format are fixed.
    """

    def __init__(
        self,
        settings: Optional[ExportSettings] = None,
        location_provider: Optional[LocationProvider] = None,
        parent: Optional[QWidget] = None,
    ):
        """
        Initialize the downloader.

        Args:
            settings: Export settings (directory, dialog preference)
            location_provider: Override for choosing the directory
            parent: Parent widget for the directory dialog
        """
        self.settings = settings or ExportSettings()
        self._location_provider = location_provider
        self._parent = parent

    def location_provider(self) -> LocationProvider:
        """Get the provider used for the next download."""
        if self._location_provider is not None:
            return self._location_provider
        if self.settings.ask_for_location:
            return dialog_location_provider(self._parent)
        return fixed_location_provider

    def suggested_directory(self) -> Path:
        return self.settings.get_download_directory()

    def save(self, png: bytes) -> Path:
        """
        Save PNG bytes as livshjulet.png in the chosen directory.

        Args:
            png: Encoded image

        Returns:
            Path the image was written to

        Raises:
            DownloadFailed: If the user cancelled or the write failed
        """
        directory = self.location_provider()(self.suggested_directory())
        if directory is None:
            raise DownloadFailed("Download cancelled")
        target = Path(directory) / EXPORT_FILENAME

        with StagedFileContext(target) as staged:
            if staged.write(png) != len(png):
                raise DownloadFailed(f"Short write to {target}: {staged.errorString()}")

        log_operation("download", f"saved {target}")
        return target


# =============================================================================
# Clipboard
# =============================================================================


def system_clipboard():
    """Get the application clipboard, or None when there is none."""
    return QGuiApplication.clipboard()


class ClipboardWriter:
    """Places exported images on the clipboard as a single image/png entry."""

    def __init__(self, clipboard_provider: Optional[Callable] = None):
        """
        Initialize the clipboard writer.

        Args:
            clipboard_provider: Callable returning a QClipboard-like object
        """
        self._clipboard_provider = clipboard_provider or system_clipboard

    @staticmethod
    def build_payload(png: bytes) -> QMimeData:
        """Wrap PNG bytes in clipboard data with no text fallback."""
        mime = QMimeData()
        mime.setData(PNG_MIME_TYPE, QByteArray(png))
        return mime

    def write(self, png: bytes) -> None:
        """
        Write PNG bytes to the clipboard.

        Raises:
            ClipboardWriteDenied: If no clipboard is available or it
                refuses the data
        """
        try:
            clipboard = self._clipboard_provider()
            if clipboard is None:
                raise ClipboardWriteDenied("No clipboard available")
            clipboard.setMimeData(self.build_payload(png))
        except ClipboardWriteDenied:
            raise
        except Exception as e:
            raise ClipboardWriteDenied(f"Clipboard copy failed: {e}") from e

        log_operation("copy", f"{len(png)} bytes placed on clipboard")


# =============================================================================
# Actions
# =============================================================================


def download_image(pipeline: ExportPipeline, downloader: ImageDownloader) -> bool:
    """
    Render the wheel and save it.

    Returns:
        True if an image file was written
    """
    png = pipeline.render_to_image()
    if png is None:
        return False

    try:
        downloader.save(png)
    except DownloadFailed as e:
        logger.warning(f"Export failed: {e}")
        return False
    return True


def copy_image(pipeline: ExportPipeline, writer: ClipboardWriter) -> bool:
    """
    Render the wheel and copy it to the clipboard.

    Returns:
        True if the image was placed on the clipboard
    """
    png = pipeline.render_to_image()
    if png is None:
        return False

    try:
        writer.write(png)
    except ClipboardWriteDenied as e:
        log_error("copy", e)
        return False
    return True
