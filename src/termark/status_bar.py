"""Status bar showing the view mode, file name and document counts."""

from dataclasses import dataclass
from typing import Optional

from rich.style import Style
from rich.table import Table
from rich.text import Text
from textual.widgets import Static


@dataclass
class StatusInfo:
    """What the status bar displays."""
    mode: str = "VIEW"
    meta: Optional[str] = None
    word_count: int = 0
    char_count: int = 0

    @classmethod
    def for_document(cls, text: str, meta: Optional[str] = None, mode: str = "VIEW") -> "StatusInfo":
        return cls(mode=mode, meta=meta, word_count=len(text.split()), char_count=len(text))


def status_left(info: StatusInfo) -> Text:
    """Mode pill followed by the optional file name pill."""
    text = Text.assemble(
        ("\ue0b6", Style(color="magenta")),
        (" ", Style(bgcolor="magenta")),
        (info.mode, Style(color="magenta", reverse=True, bold=True)),
        (" ", Style(bgcolor="magenta")),
        ("\ue0b4", Style(color="magenta", bgcolor="black" if info.meta else None)),
    )
    if info.meta:
        text.append(" ", Style(bgcolor="black"))
        text.append(info.meta, Style(color="grey70", bgcolor="black", bold=True))
        text.append(" ", Style(bgcolor="black"))
        text.append("\ue0b4", Style(color="black"))
    return text


def status_right(info: StatusInfo) -> Text:
    return Text(f"{info.word_count} words  {info.char_count} chars", justify="right")


class StatusBar(Static):
    """One-row bar docked under the markdown view."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
    }
    """

    def __init__(self, *args, **kwargs):
        super().__init__("", *args, **kwargs)
        self.status_info = StatusInfo()

    def set_status(self, info: StatusInfo) -> None:
        """Replace the displayed status."""
        self.status_info = info
        grid = Table.grid(expand=True)
        grid.add_column(justify="left", ratio=1)
        grid.add_column(justify="right", width=28)
        grid.add_row(status_left(info), status_right(info))
        self.update(grid)
