"""Scroll state for the markdown view."""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class ViewState:
    """
    Source text plus the scroll position into its rendered lines.

    The offset always satisfies ``0 <= scroll_offset <= max_offset``.
    ``content_length`` is the line count of the most recent render and may
    go stale when ``text`` changes, so callers refresh it with
    ``set_content_length`` before drawing.
    """

    text: str = ""
    scroll_offset: int = 0
    content_length: int = 0

    def __post_init__(self) -> None:
        self.set_content_length(self.content_length)

    @property
    def max_offset(self) -> int:
        return max(0, self.content_length - 1)

    def _clamp(self, offset: int) -> int:
        return max(0, min(offset, self.max_offset))

    def set_content_length(self, length: int) -> None:
        """Record the latest rendered line count."""
        if length < 0:
            raise ValueError(f"content length must be non-negative, got {length}")
        self.content_length = length
        clamped = self._clamp(self.scroll_offset)
        if clamped != self.scroll_offset:
            logger.debug(f"Clamping stale scroll offset {self.scroll_offset} -> {clamped}")
            self.scroll_offset = clamped

    def set_text(self, text: str) -> None:
        """Replace the source text and return to the top."""
        self.text = text
        self.scroll_offset = 0

    def scroll_by(self, delta: int) -> None:
        self.scroll_offset = self._clamp(self.scroll_offset + delta)

    def scroll_up(self, amount: int = 1) -> None:
        self.scroll_by(-amount)

    def scroll_down(self, amount: int = 1) -> None:
        self.scroll_by(amount)

    def scroll_to_top(self) -> None:
        self.scroll_offset = 0

    def scroll_to_bottom(self) -> None:
        self.scroll_offset = self.max_offset
