"""Tests for painting rendered lines into a frame."""

import pytest
from rich.segment import Segment

from termark.compositor import (
    compose_frame,
    render_frame,
    render_lines,
    scrollbar_column,
    scrollbar_thumb,
)
from termark.lines import StyledLine, printable
from termark.state import ViewState

HELLO = "# Hello, world!\nThis is a test."


def frame_text(strips):
    return [strip.text for strip in strips]


class TestScrollbar:
    """Test scrollbar thumb geometry."""

    def test_thumb_for_short_document(self):
        """Test four lines in an eight-row viewport."""
        assert scrollbar_thumb(0, 4, 8, 8) == (0, 6)

    def test_thumb_for_empty_document_fills_track(self):
        """Test no content shows a full-length thumb."""
        assert scrollbar_thumb(0, 0, 8, 8) == (0, 8)

    def test_thumb_moves_to_end(self):
        """Test the thumb reaches the bottom at the last offset."""
        start, length = scrollbar_thumb(99, 100, 10, 10)

        assert start + length == 10

    def test_thumb_never_empty(self):
        """Test very long content still shows a one-cell thumb."""
        start, length = scrollbar_thumb(5000, 10000, 5, 8)

        assert length == 1
        assert 0 <= start < 8

    def test_column_has_arrow_heads(self):
        """Test the column starts and ends with arrows."""
        column = scrollbar_column(0, 4, 8, 10)

        assert column[0] == "▲"
        assert column[-1] == "▼"
        assert "".join(column[1:-1]) == "██████║║"

    def test_zero_track(self):
        """Test a frame with no room between arrows."""
        assert scrollbar_thumb(0, 10, 0, 0) == (0, 0)


class TestFrame:
    """Test frame composition."""

    def test_hello_world_frame(self):
        """Test the full frame for a heading and paragraph."""
        state = ViewState(HELLO)
        strips = render_frame(state, 20, 10)

        assert frame_text(strips) == [
            "╭──────────────────▲",
            "│█ Hello, world!   █",
            "│                  █",
            "│This is a test.   █",
            "│                  █",
            "│                  █",
            "│                  █",
            "│                  ║",
            "│                  ║",
            "╰──────────────────▼",
        ]
        assert state.content_length == 4
        assert all(strip.cell_length == 20 for strip in strips)

    def test_empty_text_still_draws_frame(self):
        """Test empty content shows a border and scrollbar."""
        state = ViewState("")
        strips = render_frame(state, 12, 5)

        assert state.content_length == 0
        assert frame_text(strips) == [
            "╭──────────▲",
            "│          █",
            "│          █",
            "│          █",
            "╰──────────▼",
        ]

    def test_visible_slice_starts_at_offset(self):
        """Test scrolled frames begin at the offset line."""
        state = ViewState(HELLO)
        state.set_content_length(4)
        state.scroll_by(2)
        strips = render_frame(state, 20, 6)

        assert strips[1].text == "│This is a test.   ║"
        assert strips[2].text == "│                  █"
        assert strips[3].text == "│                  █"

    def test_stale_offset_is_clamped(self):
        """Test shorter new text pulls the offset back into range."""
        state = ViewState("\n\n".join(f"para {n}" for n in range(20)))
        state.set_content_length(len(render_lines(state.text)))
        state.scroll_to_bottom()
        state.text = "# Short"

        strips = render_frame(state, 20, 6)

        assert state.content_length == 2
        assert state.scroll_offset == 1
        assert len(strips) == 6

    def test_long_lines_are_cropped(self):
        """Test content wider than the frame is cut at the border."""
        state = ViewState("abcdefghijklmnop")
        strips = render_frame(state, 10, 4)

        assert strips[1].text[:9] == "│abcdefgh"
        assert strips[1].cell_length == 10

    @pytest.mark.parametrize("width,height", [(0, 0), (1, 1), (5, 1), (1, 5)])
    def test_tiny_areas(self, width, height):
        """Test areas too small for a border paint blanks."""
        strips = compose_frame([], ViewState(), width, height)

        assert len(strips) == height
        assert all(strip.text.strip() == "" for strip in strips)


class TestControlCharacters:
    """Test rows stay one terminal row wide."""

    def test_hard_break_stays_on_one_row(self):
        """Test a hard break paints as a space."""
        strips = render_frame(ViewState("a  \nb"), 20, 5)

        assert strips[1].text == "│a b               █"

    def test_tabs_in_code_are_expanded(self):
        """Test tabs in a fenced block become spaces up to the tab stop."""
        strips = render_frame(ViewState("```\n\tx = 1\n```"), 20, 6)
        row = strips[2].text

        assert "\t" not in row
        assert row[1:19] == "        x = 1     "
        assert all(strip.cell_length == 20 for strip in strips)

    def test_newline_in_span_is_painted_as_space(self):
        """Test a newline inside a run cannot break the row."""
        line = StyledLine([Segment("a\nb"), Segment("\x07c")])

        assert "".join(segment.text for segment in line.segments()) == "a bc"

    def test_tab_stops_continue_across_spans(self):
        """Test tab expansion counts the cells of earlier spans."""
        line = StyledLine([Segment("abc"), Segment("\td")])

        assert "".join(segment.text for segment in line.segments()) == "abc     d"

    def test_printable_leaves_plain_text(self):
        """Test ordinary text is unchanged."""
        assert printable("█ Hello") == "█ Hello"
        assert printable("\tx", column=6) == "  x"
