"""Block-level markdown node types consumed by the line renderer."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class HeadingLevel(Enum):
    """Heading depth, from ``#`` (H1) to ``######`` (H6)."""
    H1 = 1
    H2 = 2
    H3 = 3
    H4 = 4
    H5 = 5
    H6 = 6


@dataclass(frozen=True)
class TextNode:
    """A single raw inline text run."""
    content: str


Text = Tuple[TextNode, ...]


def text_from(*contents: str) -> Text:
    """Build an inline run sequence from plain strings."""
    return tuple(TextNode(content) for content in contents)


def plain_text(text: Text) -> str:
    """Join the runs of ``text`` into one string."""
    return "".join(node.content for node in text)


@dataclass(frozen=True)
class Unchecked:
    """Task item ``- [ ]``."""


@dataclass(frozen=True)
class Checked:
    """Task item ``- [x]``."""


@dataclass(frozen=True)
class HardChecked:
    """Task item ``- [X]``; shown checked and struck through."""


@dataclass(frozen=True)
class Ordered:
    """Numbered item ``1.``."""
    number: int


@dataclass(frozen=True)
class Unordered:
    """Bullet item ``-``, ``*`` or ``+``."""


ItemKind = Union[Unchecked, Checked, HardChecked, Ordered, Unordered]
ITEM_KINDS = (Unchecked, Checked, HardChecked, Ordered, Unordered)


@dataclass(frozen=True)
class Paragraph:
    text: Text


@dataclass(frozen=True)
class Heading:
    level: HeadingLevel
    text: Text


@dataclass(frozen=True)
class Item:
    kind: Optional[ItemKind]
    text: Text


@dataclass(frozen=True)
class CodeBlock:
    text: Text
    lang: Optional[str] = None


@dataclass(frozen=True)
class BlockQuote:
    nodes: Tuple["Node", ...]


Node = Union[Paragraph, Heading, Item, CodeBlock, BlockQuote]
