"""
Persistent UI configuration for Livshjulet.

Settings are grouped into dataclass categories and stored as one JSON
document in the platform config directory. Wheel scores are session state
and are never written to disk.

Categories:
    - wheel: Score range, interaction tolerance, opacities
    - export: Background, image size, download location
    - buttons: Dwell time and button labels
    - window: Size and position

Widgets that depend on a category listen to ``signals.category_changed``
and re-read the category object, which may have been replaced.
"""

import json
import logging
import os
import sys
from dataclasses import dataclass, asdict, fields
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from PyQt6.QtCore import QObject, pyqtSignal


logger = logging.getLogger(__name__)


# =============================================================================
# Settings File Paths
# =============================================================================

def get_settings_dir() -> Path:
    """
    Get the platform-specific settings directory.

    Platform paths:
        - Linux: $XDG_CONFIG_HOME/lifewheel/ (default ~/.config/lifewheel/)
        - Windows: %APPDATA%/Livshjulet/
        - macOS: ~/Library/Application Support/Livshjulet/
    """
    if sys.platform == 'win32':
        base = Path(os.environ.get('APPDATA', Path.home() / 'AppData' / 'Roaming'))
        return base / 'Livshjulet'
    if sys.platform == 'darwin':
        return Path.home() / 'Library' / 'Application Support' / 'Livshjulet'
    return Path(os.environ.get('XDG_CONFIG_HOME', Path.home() / '.config')) / 'lifewheel'


def get_settings_file() -> Path:
    return get_settings_dir() / 'settings.json'


# =============================================================================
# Categories
# =============================================================================

@dataclass
class WheelSettings:
    """Interaction and appearance settings for the wheel."""
    max_value: int = 10                  # Highest score a category can get
    leave_tolerance: float = 1.1         # Hover clears beyond radius * tolerance
    pointer_interval_ms: int = 16        # Pointer move coalescing interval (one frame)
    rest_opacity: float = 0.8            # Committed wedge opacity at rest
    hover_opacity: float = 0.3           # Committed wedge opacity while hovered
    hover_layer_opacity: float = 0.5     # Opacity of the live-score layer
    show_grid: bool = True               # Draw score rings behind the wedges


@dataclass
class ExportSettings:
    """
    Image export settings.

    The file name is always livshjulet.png; only the directory can be chosen.
    """
    background_color: str = "#ffffff"    # Exported image is never transparent
    image_size: int = 1024               # Exported image width/height in pixels
    ask_for_location: bool = True        # Ask for a directory on download
    download_directory: str = ""         # Empty = ~/Downloads

    def get_download_directory(self) -> Path:
        """Get the download directory, falling back to ~/Downloads or home."""
        if self.download_directory:
            path = Path(self.download_directory).expanduser()
            if path.is_dir():
                return path
        downloads = Path.home() / 'Downloads'
        return downloads if downloads.is_dir() else Path.home()


@dataclass
class ButtonSettings:
    """Action button settings."""
    dwell_ms: int = 2000                           # Hold time for success/failure
    download_label: str = "Last ned bilde"
    copy_label: str = "Kopier til utklippstavle"
    copy_success_label: str = "Kopiert!"
    copy_failure_label: str = "Kopiering feilet"


@dataclass
class WindowSettings:
    """Main window geometry."""
    window_x: int = 100
    window_y: int = 100
    window_width: int = 900
    window_height: int = 1000
    window_maximized: bool = False


CATEGORY_TYPES = {
    'wheel': WheelSettings,
    'export': ExportSettings,
    'buttons': ButtonSettings,
    'window': WindowSettings,
}


# =============================================================================
# Settings Manager (Singleton)
# =============================================================================

class SettingsSignals(QObject):
    """Qt signals for settings changes."""

    settings_changed = pyqtSignal(str, object)  # ("category.field", new value)
    category_changed = pyqtSignal(str)          # category name


class Settings:
    """
    Singleton settings store.

    Usage:
        settings = Settings.instance()
        settings.set_setting("buttons", "dwell_ms", 1500)
        settings.save()

        # Or edit directly and save on exit:
        with settings.modify():
            settings.export.ask_for_location = False
    """

    _instance: Optional["Settings"] = None
    _initialized: bool = False

    SETTINGS_VERSION = 1

    CATEGORIES = tuple(CATEGORY_TYPES)

    def __new__(cls) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self._initialized = True

        for category, factory in CATEGORY_TYPES.items():
            setattr(self, category, factory())
        self.signals = SettingsSignals()

        self.load()

    @classmethod
    def instance(cls) -> "Settings":
        """Get the singleton settings instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the singleton (for testing)."""
        cls._instance = None
        cls._initialized = False

    @property
    def settings_file(self) -> Path:
        return get_settings_file()

    # =========================================================================
    # Persistence
    # =========================================================================

    def load(self) -> bool:
        """
        Read settings from disk into the current category objects.

        Unknown keys and values of the wrong type are ignored. A file that
        is not valid JSON is moved aside as settings.backup.

        Returns:
            True if a settings file was read
        """
        settings_file = get_settings_file()
        if not settings_file.exists():
            logger.info(f"No settings file at {settings_file}, using defaults")
            return False

        try:
            with open(settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in settings file: {e}")
            self._backup_corrupted_file(settings_file)
            return False
        except OSError as e:
            logger.error(f"Error loading settings: {e}")
            return False

        for category in self.CATEGORIES:
            section = data.get(category)
            if isinstance(section, dict):
                self._apply_section(getattr(self, category), section)

        logger.info(f"Settings loaded from {settings_file}")
        return True

    def save(self) -> bool:
        """
        Write settings to disk through a temporary file.

        Returns:
            True if the file was written
        """
        settings_file = get_settings_file()
        data = {
            'version': self.SETTINGS_VERSION,
            'saved_at': datetime.now().isoformat(),
        }
        for category in self.CATEGORIES:
            data[category] = asdict(getattr(self, category))

        try:
            settings_file.parent.mkdir(parents=True, exist_ok=True)
            temp_file = settings_file.with_suffix('.tmp')
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
            temp_file.replace(settings_file)
        except OSError as e:
            logger.error(f"Could not save settings to {settings_file}: {e}")
            return False

        logger.info(f"Settings saved to {settings_file}")
        return True

    @staticmethod
    def _apply_section(target: Any, section: Dict[str, Any]) -> None:
        known = {f.name for f in fields(target)}
        for key, value in section.items():
            if key not in known:
                continue
            current = getattr(target, key)
            if isinstance(current, bool) or isinstance(value, bool):
                valid = isinstance(current, bool) and isinstance(value, bool)
            elif isinstance(current, (int, float)):
                valid = isinstance(value, (int, float))
            else:
                valid = isinstance(value, type(current))
            if not valid:
                logger.warning(f"Ignoring setting {key}={value!r}: expected {type(current).__name__}")
                continue
            setattr(target, key, value)

    @staticmethod
    def _backup_corrupted_file(file_path: Path) -> None:
        backup_path = file_path.with_suffix('.backup')
        try:
            file_path.replace(backup_path)
            logger.info(f"Corrupted settings moved to {backup_path}")
        except OSError as e:
            logger.error(f"Could not back up corrupted settings: {e}")

    # =========================================================================
    # Changes
    # =========================================================================

    def set_setting(self, category: str, name: str, value: Any) -> None:
        """
        Change one setting and notify listeners.

        Raises:
            KeyError: If the category or field does not exist
        """
        if category not in CATEGORY_TYPES:
            raise KeyError(f"Unknown settings category: {category}")
        target = getattr(self, category)
        if name not in {f.name for f in fields(target)}:
            raise KeyError(f"Unknown setting: {category}.{name}")

        setattr(target, name, value)
        self.signals.settings_changed.emit(f'{category}.{name}', value)
        self.signals.category_changed.emit(category)

    def reset_to_defaults(self, category: Optional[str] = None) -> None:
        """
        Replace one category, or all of them, with fresh defaults.

        Args:
            category: Category name, or None for every category
        """
        for name, factory in CATEGORY_TYPES.items():
            if category is None or category == name:
                setattr(self, name, factory())
                self.signals.category_changed.emit(name)
        logger.info(f"Settings reset to defaults: {category or 'all'}")

    class _ModifyContext:
        def __init__(self, settings: "Settings"):
            self.settings = settings

        def __enter__(self) -> "Settings":
            return self.settings

        def __exit__(self, exc_type, exc_val, exc_tb) -> None:
            if exc_type is None:
                self.settings.save()

    def modify(self) -> "_ModifyContext":
        """Context manager that saves the settings on a clean exit."""
        return self._ModifyContext(self)


def get_settings() -> Settings:
    """Get the global settings instance."""
    return Settings.instance()


__all__ = [
    'WheelSettings',
    'ExportSettings',
    'ButtonSettings',
    'WindowSettings',
    'SettingsSignals',
    'Settings',
    'get_settings',
    'get_settings_dir',
    'get_settings_file',
]
