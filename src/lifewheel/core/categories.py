"""
Life wheel category definitions.

A category is one fixed life-domain slot on the wheel. The set is defined
once at startup and never mutated; the number of wedges on the wheel is
always the length of the category list.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence


@dataclass(frozen=True)
class Category:
    """
    Immutable identity of a single wheel category.

    Attributes:
        index: Position on the wheel (0 is at twelve o'clock, clockwise)
        label: Full display label
        short_label: Compact label for narrow layouts
        color: Hex color token (e.g. "#4267b6")
    """
    index: int
    label: str
    short_label: str
    color: str


# Default labels (Norwegian, as presented to end users)
DEFAULT_LABELS = [
    "Helse",
    "Jobb",
    "Kjærlighet",
    "Personlig utvikling",
    "Venner og familie",
    "Økonomi",
    "Moro og avkobling",
    "Hjem og omgivelser",
]

DEFAULT_SHORT_LABELS = [
    "Helse",
    "Jobb",
    "Kjærlighet",
    "Utvikling",
    "Relasjoner",
    "Økonomi",
    "Moro",
    "Hjem",
]

# Wedge palette, one color per category
DEFAULT_COLORS = [
    "#4267b6",  # Blue
    "#7ED321",  # Lime
    "#c93939",  # Red
    "#e48820",  # Orange
    "#e6e34a",  # Yellow
    "#3c801c",  # Green
    "#a346a7",  # Purple
    "#3dbead",  # Teal
]


def build_categories(
    labels: Sequence[str],
    colors: Sequence[str],
    short_labels: Optional[Sequence[str]] = None,
) -> List[Category]:
    """
    Build an ordered category list.

    Colors are reused cyclically when there are fewer colors than labels.

    Args:
        labels: Full labels, one per category
        colors: Palette of hex colors
        short_labels: Optional compact labels (defaults to the full labels)

    Returns:
        List of Category objects indexed 0..N-1

    Raises:
        ValueError: If no labels or no colors are given, or the short label
            count does not match the label count
    """
    if not labels:
        raise ValueError("At least one category label is required")
    if not colors:
        raise ValueError("At least one category color is required")
    if short_labels is not None and len(short_labels) != len(labels):
        raise ValueError(
            f"Expected {len(labels)} short labels, got {len(short_labels)}"
        )

    categories = []
    for index, label in enumerate(labels):
        short_label = short_labels[index] if short_labels is not None else label
        categories.append(Category(
            index=index,
            label=label,
            short_label=short_label,
            color=colors[index % len(colors)],
        ))
    return categories


def default_categories() -> List[Category]:
    """Get the eight standard life wheel categories."""
    return build_categories(DEFAULT_LABELS, DEFAULT_COLORS, DEFAULT_SHORT_LABELS)
