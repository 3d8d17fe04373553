"""Markdown view widget: a bordered, scrollable pane of rendered markdown."""

from typing import List

from textual.geometry import Region
from textual.message import Message
from textual.strip import Strip
from textual.widget import Widget

from .compositor import render_frame, render_lines
from .renderer import DEFAULT_MAX_QUOTE_DEPTH
from .state import ViewState


class MarkdownView(Widget):
    """Renders markdown source into a rounded frame with a scrollbar."""

    DEFAULT_CSS = """
    MarkdownView {
        height: 1fr;
        width: 1fr;
    }
    """

    can_focus = True

    class ViewScrolled(Message):
        """Message sent when the scroll offset changes."""

        def __init__(self, offset: int) -> None:
            self.offset = offset
            super().__init__()

    def __init__(self, text: str = "", *args,
                 max_quote_depth: int = DEFAULT_MAX_QUOTE_DEPTH,
                 page_size: int = 20, **kwargs):
        super().__init__(*args, **kwargs)
        self.view_state = ViewState(text)
        self.max_quote_depth = max_quote_depth
        self.page_size = page_size
        self._frame: List[Strip] = []
        self._measure()

    @property
    def document_text(self) -> str:
        return self.view_state.text

    def update_text(self, text: str) -> None:
        """Show new source text, scrolled to the top."""
        self.view_state.set_text(text)
        self._measure()
        self.refresh()

    def _measure(self) -> None:
        self.view_state.set_content_length(len(render_lines(self.view_state.text, self.max_quote_depth)))

    def render_lines(self, crop: Region) -> List[Strip]:
        # Re-parse and re-render on every paint; nothing is cached between frames
        self._frame = render_frame(
            self.view_state, self.size.width, self.size.height, self.max_quote_depth
        )
        return super().render_lines(crop)

    def render_line(self, y: int) -> Strip:
        """Render a single row of the frame."""
        if y >= len(self._frame):
            return Strip.blank(self.size.width)
        return self._frame[y].apply_style(self.rich_style)

    def _scrolled(self, before: int) -> None:
        if self.view_state.scroll_offset != before:
            self.post_message(self.ViewScrolled(self.view_state.scroll_offset))
            self.refresh()

    def scroll_lines(self, delta: int) -> None:
        before = self.view_state.scroll_offset
        self.view_state.scroll_by(delta)
        self._scrolled(before)

    def jump_to_top(self) -> None:
        before = self.view_state.scroll_offset
        self.view_state.scroll_to_top()
        self._scrolled(before)

    def jump_to_bottom(self) -> None:
        before = self.view_state.scroll_offset
        self.view_state.scroll_to_bottom()
        self._scrolled(before)

    def next_page(self) -> None:
        """Move down one page."""
        self.scroll_lines(self.page_size)

    def previous_page(self) -> None:
        """Move up one page."""
        self.scroll_lines(-self.page_size)
