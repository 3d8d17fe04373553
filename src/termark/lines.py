"""Styled display lines produced by the renderer."""

from typing import Iterable, List, Optional

from rich.cells import cell_len
from rich.control import strip_control_codes
from rich.segment import Segment
from rich.style import Style

# A styled span is a Rich segment: text plus color, bold, strike and background.
StyledSpan = Segment

TAB_SIZE = 8

# C0 controls and DEL left by strip_control_codes; a newline is kept as a space
_ROW_BREAKING = {codepoint: None for codepoint in (*range(32), 127) if codepoint != 9}
_ROW_BREAKING[10] = " "


def printable(text: str, column: int = 0) -> str:
    """
    Make ``text`` safe to paint on one row starting at cell ``column``.

    Control codes are dropped, newlines become spaces and tabs are
    expanded to the next tab stop.
    """
    text = strip_control_codes(text).translate(_ROW_BREAKING)
    if "\t" not in text:
        return text
    expanded = []
    for char in text:
        if char == "\t":
            spaces = TAB_SIZE - column % TAB_SIZE
            expanded.append(" " * spaces)
            column += spaces
        else:
            expanded.append(char)
            column += cell_len(char)
    return "".join(expanded)


class StyledLine:
    """
    One display line: an ordered run of spans plus stacked line styles.

    Line styles are applied beneath span styles when the line is painted,
    so a span's own color wins over a line-wide recolor. Every call to
    ``patch`` pushes another layer; layers are never merged away, which
    keeps repeated recolors observable through ``overlay_depth``.
    """

    __slots__ = ("spans", "overlays")

    def __init__(self, spans: Optional[Iterable[Segment]] = None, style: Optional[Style] = None):
        self.spans: List[Segment] = list(spans or [])
        self.overlays: List[Style] = [style] if style else []

    @classmethod
    def blank(cls) -> "StyledLine":
        return cls()

    @property
    def style(self) -> Style:
        """Combined line-level style."""
        return Style.chain(*self.overlays) if self.overlays else Style.null()

    @property
    def overlay_depth(self) -> int:
        return len(self.overlays)

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)

    def patch(self, style: Style) -> "StyledLine":
        """Layer ``style`` on top of the current line style."""
        self.overlays.append(style)
        return self

    def segments(self) -> List[Segment]:
        """Spans with the line style folded in, ready to paint."""
        line_style = self.style
        column = 0
        painted = []
        for span in self.spans:
            text = printable(span.text, column)
            column += cell_len(text)
            painted.append(Segment(text, line_style + span.style))
        return painted

    def __len__(self) -> int:
        return len(self.spans)

    def __eq__(self, other) -> bool:
        if not isinstance(other, StyledLine):
            return NotImplemented
        return self.spans == other.spans and self.overlays == other.overlays

    def __repr__(self) -> str:
        return f"StyledLine({self.text!r}, depth={self.overlay_depth})"
