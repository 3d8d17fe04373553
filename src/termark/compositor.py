"""Paint rendered lines into a bordered, scrollable frame of strips."""

import math
from typing import List, Optional, Sequence, Tuple

from rich.segment import Segment
from rich.style import Style
from textual.strip import Strip

from .lines import StyledLine
from .parser import from_str
from .renderer import DEFAULT_MAX_QUOTE_DEPTH, render_document
from .state import ViewState

# Rounded border
TOP_LEFT = "╭"
BOTTOM_LEFT = "╰"
HORIZONTAL = "─"
VERTICAL = "│"

# Scrollbar drawn over the right border
SCROLL_BEGIN = "▲"
SCROLL_END = "▼"
SCROLL_TRACK = "║"
SCROLL_THUMB = "█"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def scrollbar_thumb(offset: int, content_length: int, viewport_height: int,
                    track_length: int) -> Tuple[int, int]:
    """
    Compute where the scrollbar thumb sits on its track.

    Args:
        offset: Index of the first visible line
        content_length: Total number of rendered lines
        viewport_height: Number of visible content rows
        track_length: Cells available between the two arrow heads

    Returns:
        (thumb_start, thumb_length) in track cells
    """
    if track_length <= 0:
        return 0, 0
    max_position = max(0, content_length - 1)
    start = max(0, min(offset, max_position))
    span = max_position + viewport_height
    if span <= 0:
        return 0, track_length
    thumb_start = _round_half_up(start * track_length / span)
    thumb_end = _round_half_up((start + viewport_height) * track_length / span)
    thumb_start = max(0, min(thumb_start, track_length - 1))
    thumb_end = max(0, min(thumb_end, track_length))
    return thumb_start, max(1, thumb_end - thumb_start)


def scrollbar_column(offset: int, content_length: int, viewport_height: int,
                     height: int) -> List[str]:
    """One scrollbar glyph per row of a frame ``height`` rows tall."""
    track_length = height - 2
    thumb_start, thumb_length = scrollbar_thumb(
        offset, content_length, viewport_height, track_length
    )
    track = [
        SCROLL_THUMB if thumb_start <= row < thumb_start + thumb_length else SCROLL_TRACK
        for row in range(track_length)
    ]
    return [SCROLL_BEGIN, *track, SCROLL_END]


def _content_row(line: StyledLine, width: int) -> Strip:
    return Strip(line.segments()).adjust_cell_length(width)


def compose_frame(lines: Sequence[StyledLine], state: ViewState,
                  width: int, height: int, border_style: Optional[Style] = None) -> List[Strip]:
    """
    Paint the visible window of ``lines`` inside a rounded frame.

    Rows ``[offset, offset + inner_height)`` are shown, cropped or padded to
    the inner width, with blank rows after the last line. The right border
    is replaced by a vertical scrollbar.
    """
    if width < 2 or height < 2:
        return [Strip.blank(max(0, width)) for _ in range(max(0, height))]

    inner_width = width - 2
    inner_height = height - 2
    offset = state.scroll_offset
    visible = list(lines[offset:offset + inner_height])
    scrollbar = scrollbar_column(offset, state.content_length, inner_height, height)

    strips = [
        Strip([
            Segment(TOP_LEFT + HORIZONTAL * inner_width, border_style),
            Segment(scrollbar[0], border_style),
        ], width)
    ]
    for row in range(inner_height):
        if row < len(visible):
            content = _content_row(visible[row], inner_width)
        else:
            content = Strip.blank(inner_width)
        strips.append(Strip.join([
            Strip([Segment(VERTICAL, border_style)], 1),
            content,
            Strip([Segment(scrollbar[row + 1], border_style)], 1),
        ]))
    strips.append(
        Strip([
            Segment(BOTTOM_LEFT + HORIZONTAL * inner_width, border_style),
            Segment(scrollbar[-1], border_style),
        ], width)
    )
    return strips


def render_lines(text: str, max_quote_depth: int = DEFAULT_MAX_QUOTE_DEPTH) -> List[StyledLine]:
    """Parse ``text`` from scratch and render it to display lines."""
    return render_document(from_str(text), max_quote_depth)


def render_frame(state: ViewState, width: int, height: int,
                 max_quote_depth: int = DEFAULT_MAX_QUOTE_DEPTH,
                 border_style: Optional[Style] = None) -> List[Strip]:
    """
    Render ``state.text`` and paint it at the current scroll offset.

    The content length is refreshed from the new lines before painting, so
    an offset left over from longer content is pulled back into range.
    """
    lines = render_lines(state.text, max_quote_depth)
    state.set_content_length(len(lines))
    return compose_frame(lines, state, width, height, border_style)
