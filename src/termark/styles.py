"""Static glyph and style table for headings, list items, quotes and code."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Type

from rich.segment import Segment
from rich.style import Style

from .nodes import (
    Checked,
    HardChecked,
    HeadingLevel,
    ItemKind,
    Ordered,
    Unchecked,
    Unordered,
)


@dataclass(frozen=True)
class Marker:
    """A glyph drawn in front of a line, and the style it is drawn with."""
    glyph: str
    style: Style

    def segment(self) -> Segment:
        return Segment(self.glyph, self.style)


HEADING_MARKERS: Mapping[HeadingLevel, Marker] = MappingProxyType({
    HeadingLevel.H1: Marker("█ ", Style(color="blue")),
    HeadingLevel.H2: Marker("██ ", Style(color="cyan")),
    HeadingLevel.H3: Marker("▓▓▓ ", Style(color="green")),
    HeadingLevel.H4: Marker("▓▓▓▓ ", Style(color="yellow")),
    HeadingLevel.H5: Marker("▓▓▓▓▓ ", Style(color="red")),
    HeadingLevel.H6: Marker("░░░░░░ ", Style(color="red")),
})

# Ordered items draw their number in this style; the glyph is a format string.
ITEM_MARKERS: Mapping[Type, Marker] = MappingProxyType({
    Unchecked: Marker("󰄱 ", Style(color="black")),
    Checked: Marker("󰄲 ", Style(color="magenta")),
    HardChecked: Marker("󰄲 ", Style(color="magenta")),
    Ordered: Marker("{number}", Style(color="black")),
    Unordered: Marker("- ", Style(color="black")),
})

ORDERED_SUFFIX = Segment(". ")

HEADING_LINE = Style(bold=True)
HARD_CHECKED_LINE = Style(color="black", strike=True)

QUOTE_MARKER = Marker("┃ ", Style(color="magenta"))
QUOTE_MUTE = Style(color="bright_black")

CODE_STYLE = Style(color="red", bgcolor="rgb(10,10,10)")


def heading_marker(level: HeadingLevel) -> Marker:
    """Return the glyph and color for a heading level."""
    return HEADING_MARKERS[level]


def item_marker_spans(kind: Optional[ItemKind]) -> List[Segment]:
    """
    Return the marker spans for a list item.

    Items without a kind use the unordered bullet.
    """
    if kind is None:
        kind = Unordered()
    marker = ITEM_MARKERS[type(kind)]
    if isinstance(kind, Ordered):
        return [Segment(marker.glyph.format(number=kind.number), marker.style), ORDERED_SUFFIX]
    return [marker.segment()]
