"""Main Textual application for viewing a markdown file."""

import logging
from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding

from .config import Config
from .markdown_view import MarkdownView
from .status_bar import StatusBar, StatusInfo

logger = logging.getLogger(__name__)

NO_FILE_TEXT = "No file loaded. Pass a markdown file on the command line."


def load_document(file_path: Optional[str]) -> str:
    """Read the markdown file, or describe why it could not be read."""
    if not file_path:
        return NO_FILE_TEXT
    try:
        return Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to load {file_path}: {e}", exc_info=True)
        return f"Error loading file: {e}"


class TermarkApp(App):
    """Scrollable terminal view of a single markdown document."""

    CSS = """
    Screen {
        layout: vertical;
    }
    """

    BINDINGS = [
        Binding("j", "scroll_down", "Down", show=False),
        Binding("down", "scroll_down", "Down", show=False),
        Binding("k", "scroll_up", "Up", show=False),
        Binding("up", "scroll_up", "Up", show=False),
        Binding("ctrl+d,pagedown", "page_down", "Page down", show=False),
        Binding("ctrl+u,pageup", "page_up", "Page up", show=False),
        Binding("g,home", "scroll_top", "Top", show=False),
        Binding("G,end", "scroll_bottom", "Bottom", show=False),
        Binding("r", "reload_file", "Reload"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, file_path: str | None = None, config: Config | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.file_path = file_path
        self.config = config or Config.default()
        self.viewer: MarkdownView | None = None
        self.status_bar: StatusBar | None = None

    def compose(self) -> ComposeResult:
        """Create the UI layout."""
        self.viewer = MarkdownView(
            load_document(self.file_path),
            max_quote_depth=self.config.max_quote_depth,
            page_size=self.config.page_size,
            id="markdown-view",
        )
        yield self.viewer
        self.status_bar = StatusBar(id="status-bar")
        yield self.status_bar

    def on_mount(self) -> None:
        """Handle app mount."""
        self.viewer.focus()
        self._update_status()

    def _update_status(self) -> None:
        meta = Path(self.file_path).name if self.file_path else None
        self.status_bar.set_status(StatusInfo.for_document(self.viewer.document_text, meta))

    def action_scroll_down(self) -> None:
        self.viewer.scroll_lines(self.config.scroll_step)

    def action_scroll_up(self) -> None:
        self.viewer.scroll_lines(-self.config.scroll_step)

    def action_page_down(self) -> None:
        self.viewer.next_page()

    def action_page_up(self) -> None:
        self.viewer.previous_page()

    def action_scroll_top(self) -> None:
        self.viewer.jump_to_top()

    def action_scroll_bottom(self) -> None:
        self.viewer.jump_to_bottom()

    def action_reload_file(self) -> None:
        """Reload the markdown file from disk."""
        self.viewer.update_text(load_document(self.file_path))
        self._update_status()
        logger.info(f"Reloaded {self.file_path}")
