"""
Unit tests for wheel categories.
"""

import pytest
from lifewheel.core import build_categories, default_categories, DEFAULT_COLORS


class TestCategories:
    """Test category construction."""

    def test_default_categories(self):
        """Test the eight standard categories in wheel order."""
        categories = default_categories()

        assert len(categories) == 8
        assert [c.index for c in categories] == list(range(8))
        assert categories[0].label == "Helse"
        assert categories[7].label == "Hjem og omgivelser"
        assert [c.color for c in categories] == DEFAULT_COLORS

    def test_colors_cycle(self):
        """Test colors are reused when there are more labels than colors."""
        categories = build_categories(["a", "b", "c"], ["#111111", "#222222"])
        assert [c.color for c in categories] == ["#111111", "#222222", "#111111"]

    def test_short_labels_default_to_labels(self):
        """Test missing short labels fall back to the full labels."""
        categories = build_categories(["Helse"], ["#4267b6"])
        assert categories[0].short_label == "Helse"

    def test_invalid_input(self):
        """Test empty or mismatched input is rejected."""
        with pytest.raises(ValueError):
            build_categories([], ["#fff"])
        with pytest.raises(ValueError):
            build_categories(["a"], [])
        with pytest.raises(ValueError):
            build_categories(["a", "b"], ["#fff"], short_labels=["a"])
