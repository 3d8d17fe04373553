"""Turn markdown block nodes into styled display lines."""

from typing import Iterable, List, Optional, Sequence, assert_never

from rich.segment import Segment

from .lines import StyledLine
from .nodes import BlockQuote, CodeBlock, Heading, Item, Node, Paragraph, Text, HardChecked
from .styles import (
    CODE_STYLE,
    HARD_CHECKED_LINE,
    HEADING_LINE,
    QUOTE_MARKER,
    QUOTE_MUTE,
    heading_marker,
    item_marker_spans,
)

DEFAULT_MAX_QUOTE_DEPTH = 16


def text_to_spans(text: Text) -> List[Segment]:
    """One unstyled span per inline run."""
    return [Segment(node.content) for node in text]


def _prefixed(prefix: Optional[Segment], spans: List[Segment]) -> List[Segment]:
    return [prefix, *spans] if prefix is not None else spans


def render_heading(node: Heading) -> StyledLine:
    marker = heading_marker(node.level)
    return StyledLine([marker.segment(), *text_to_spans(node.text)], HEADING_LINE)


def render_item(node: Item, prefix: Optional[Segment]) -> StyledLine:
    spans = _prefixed(prefix, [*item_marker_spans(node.kind), *text_to_spans(node.text)])
    if isinstance(node.kind, HardChecked):
        return StyledLine(spans, HARD_CHECKED_LINE)
    return StyledLine(spans)


def render_code_block(node: CodeBlock) -> List[StyledLine]:
    # TODO: syntax highlighting for node.lang via rich.syntax
    return [
        StyledLine([Segment(line)], CODE_STYLE)
        for run in node.text
        for line in run.content.split("\n")
    ]


def _flatten_quotes(nodes: Iterable[Node]) -> List[Node]:
    """Inline the children of nested block quotes, depth first."""
    flat: List[Node] = []
    stack = [iter(nodes)]
    while stack:
        node = next(stack[-1], None)
        if node is None:
            stack.pop()
        elif isinstance(node, BlockQuote):
            stack.append(iter(node.nodes))
        else:
            flat.append(node)
    return flat


def render_node(
    node: Node,
    prefix: Optional[Segment] = None,
    max_quote_depth: int = DEFAULT_MAX_QUOTE_DEPTH,
    _depth: int = 0,
) -> List[StyledLine]:
    """
    Render one node into display lines.

    Args:
        node: The block node to render
        prefix: Span drawn in front of paragraph and item lines. Block quotes
            replace it with their own marker rather than extending it.
        max_quote_depth: Quotes nested deeper than this are folded into the
            deepest allowed quote.

    Returns:
        The lines for ``node``, including its separating blank line.
    """
    if isinstance(node, Paragraph):
        return [
            StyledLine(_prefixed(prefix, text_to_spans(node.text))),
            StyledLine(_prefixed(prefix, [])),
        ]
    if isinstance(node, Heading):
        return [render_heading(node), StyledLine.blank()]
    if isinstance(node, Item):
        return [render_item(node, prefix), StyledLine.blank()]
    if isinstance(node, CodeBlock):
        return [StyledLine.blank(), *render_code_block(node)]
    if isinstance(node, BlockQuote):
        depth = _depth + 1
        children = node.nodes
        if depth >= max(1, max_quote_depth):
            children = _flatten_quotes(children)
        lines = [
            line.patch(QUOTE_MUTE)
            for child in children
            for line in render_node(child, QUOTE_MARKER.segment(), max_quote_depth, depth)
        ]
        lines.append(StyledLine.blank())
        return lines
    assert_never(node)


def render_document(
    nodes: Sequence[Node],
    max_quote_depth: int = DEFAULT_MAX_QUOTE_DEPTH,
) -> List[StyledLine]:
    """Render top-level nodes in order into one flat line sequence."""
    return [
        line
        for node in nodes
        for line in render_node(node, None, max_quote_depth)
    ]
