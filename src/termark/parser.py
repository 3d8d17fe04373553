"""Build block nodes from markdown source using markdown-it-py."""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

import markdown_it
from markdown_it.token import Token

from .nodes import (
    BlockQuote,
    Checked,
    CodeBlock,
    HardChecked,
    Heading,
    HeadingLevel,
    Item,
    ItemKind,
    Node,
    Ordered,
    Paragraph,
    Text,
    TextNode,
    Unchecked,
    Unordered,
)

logger = logging.getLogger(__name__)

TASK_MARKER = re.compile(r"^\[([ xX])\]\s+")
TASK_KINDS = {" ": Unchecked, "x": Checked, "X": HardChecked}

# Block tokens that can open a list item in place of its first paragraph
ITEM_CHILD_STARTS = frozenset({
    "heading_open",
    "fence",
    "code_block",
    "blockquote_open",
    "bullet_list_open",
    "ordered_list_open",
    "hr",
    "html_block",
})


@dataclass
class _ListItem:
    """An open list item whose marker line has not been emitted yet."""
    kind: ItemKind
    emitted: bool = False


@dataclass
class _Container:
    """An open block quote collecting child nodes."""
    nodes: List[Node] = field(default_factory=list)


def inline_runs(token: Optional[Token]) -> Text:
    """
    Collect the raw text runs of an ``inline`` token.

    Emphasis, links and other markup are dropped; only their text content
    is kept. Soft and hard breaks both become spaces, since a run is
    painted on a single row.
    """
    if token is None or not token.children:
        return ()
    runs = []
    for child in token.children:
        if child.type in ("text", "code_inline", "html_inline", "image"):
            runs.append(TextNode(child.content))
        elif child.type in ("softbreak", "hardbreak"):
            runs.append(TextNode(" "))
    return tuple(run for run in runs if run.content)


def task_kind(text: Text, fallback: ItemKind) -> tuple[ItemKind, Text]:
    """Split a leading ``[ ]``/``[x]``/``[X]`` task marker off item text."""
    if not text:
        return fallback, text
    match = TASK_MARKER.match(text[0].content)
    if not match:
        return fallback, text
    kind = TASK_KINDS[match.group(1)]()
    rest = text[0].content[match.end():]
    head = (TextNode(rest),) if rest else ()
    return kind, head + text[1:]


def _inline_after(tokens: List[Token], index: int) -> Optional[Token]:
    if index + 1 < len(tokens) and tokens[index + 1].type == "inline":
        return tokens[index + 1]
    return None


def _code_lang(info: str) -> Optional[str]:
    info = info.strip()
    return info.split()[0] if info else None


def from_tokens(tokens: List[Token]) -> List[Node]:
    """Convert a flat markdown-it token stream into a node tree."""
    root = _Container()
    quotes: List[_Container] = [root]
    items: List[_ListItem] = []
    ordered_lists: List[bool] = []

    for index, token in enumerate(tokens):
        current = quotes[-1].nodes

        if token.type in ITEM_CHILD_STARTS and items and not items[-1].emitted:
            # The marker line goes before whatever block the item starts with
            items[-1].emitted = True
            current.append(Item(items[-1].kind, ()))

        if token.type == "heading_open":
            level = HeadingLevel(int(token.tag[1:]))
            current.append(Heading(level, inline_runs(_inline_after(tokens, index))))

        elif token.type == "paragraph_open":
            text = inline_runs(_inline_after(tokens, index))
            if items and not items[-1].emitted:
                item = items[-1]
                item.emitted = True
                kind, text = task_kind(text, item.kind)
                current.append(Item(kind, text))
            else:
                current.append(Paragraph(text))

        elif token.type in ("fence", "code_block"):
            lang = _code_lang(token.info) if token.type == "fence" else None
            current.append(CodeBlock((TextNode(token.content),), lang))

        elif token.type == "blockquote_open":
            quotes.append(_Container())

        elif token.type == "blockquote_close":
            quote = quotes.pop()
            quotes[-1].nodes.append(BlockQuote(tuple(quote.nodes)))

        elif token.type in ("bullet_list_open", "ordered_list_open"):
            ordered_lists.append(token.type == "ordered_list_open")

        elif token.type in ("bullet_list_close", "ordered_list_close"):
            ordered_lists.pop()

        elif token.type == "list_item_open":
            if ordered_lists and ordered_lists[-1]:
                kind: ItemKind = Ordered(int(token.info or 1))
            else:
                kind = Unordered()
            items.append(_ListItem(kind))

        elif token.type == "list_item_close":
            item = items.pop()
            if not item.emitted:
                # Empty item, e.g. "-" on its own line
                current.append(Item(item.kind, ()))

        elif token.type in ("hr", "html_block"):
            logger.debug(f"No node for {token.type} at lines {token.map}")

    return root.nodes


def from_str(source: str) -> List[Node]:
    """Parse markdown source into top-level block nodes."""
    md = markdown_it.MarkdownIt("commonmark")
    return from_tokens(md.parse(source))
