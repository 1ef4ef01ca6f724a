"""
Test fixtures for Livshjulet.

Provides fakes for the wedge appearance sink, timers, charts without an
export capability and clipboards, so the engine and the export actions
can be tested deterministically.
"""

from tests.fixtures.fakes import (
    RecordingAppearance,
    ManualScheduler,
    UnavailableChart,
    FakeClipboard,
    RaisingClipboard,
    RecordingLocationProvider,
    pointer_position,
)

__all__ = [
    "RecordingAppearance",
    "ManualScheduler",
    "UnavailableChart",
    "FakeClipboard",
    "RaisingClipboard",
    "RecordingLocationProvider",
    "pointer_position",
]
