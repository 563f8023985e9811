"""
Vertical flow of the letter body on a single page.

The pass is split into small pure stages. Each stage takes a ``RenderCursor``
and returns a ``Step``: the advanced cursor, the draw operations it produced
and whether the page ran out. Once a stage stops, nothing further is drawn;
there is never a second page.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import NamedTuple

from coverletter.classify import ClassifiedLine, LineKind, classify
from coverletter.config import DEFAULT_STYLE, PageStyle
from coverletter.measure import measure_width, wrap, wrap_spans
from coverletter.ops import DrawOp, RuleOp, TextOp
from coverletter.spans import InlineSpan, parse_spans

# Paragraph-gap multiples
LIST_ENTER_GAP = 0.5
LIST_EXIT_GAP = 0.75
LIST_FORCE_EXIT_GAP = 1.0
HEADING_BEFORE_GAP = 0.5
HEADING_AFTER_GAP = 0.75
PARAGRAPH_AFTER_GAP = 0.25
BLANK_GAP = 0.75


class ListState(Enum):
    NORMAL = "normal"
    IN_BULLET_LIST = "in_bullet_list"


def next_state(state: ListState, kind: LineKind) -> tuple[ListState, float]:
    """
    Transition of the bullet-list state for the next line.

    Returns the new state and the extra vertical space to add before the
    line, as a multiple of the paragraph gap.
    """
    if state is ListState.NORMAL:
        if kind is LineKind.BULLET:
            return ListState.IN_BULLET_LIST, LIST_ENTER_GAP
        return state, 0.0
    if kind is LineKind.PARAGRAPH:
        return ListState.NORMAL, LIST_EXIT_GAP
    if kind in (LineKind.SEPARATOR, LineKind.HEADING):
        return ListState.NORMAL, LIST_FORCE_EXIT_GAP
    return state, 0.0


@dataclass(frozen=True)
class RenderCursor:
    y: float
    line_height: float
    list_state: ListState = ListState.NORMAL

    def advance(self, dy: float) -> "RenderCursor":
        return replace(self, y=self.y + dy)


class Step(NamedTuple):
    cursor: RenderCursor
    ops: list
    stopped: bool = False


@dataclass
class PaginationResult:
    cursor: RenderCursor
    ops: list[DrawOp] = field(default_factory=list)
    truncated: bool = False


# ── Stages ───────────────────────────────────────────────────────────────────
def place_separator(cursor: RenderCursor, style: PageStyle = DEFAULT_STYLE) -> Step:
    cursor = cursor.advance(cursor.line_height * 0.5)
    if cursor.y > style.bottom - style.separator_advance:
        return Step(cursor, [], stopped=True)
    rule = RuleOp(
        style.margin,
        style.page_width - style.margin,
        cursor.y,
        style.separator_rule_width,
        style.accent_color,
    )
    cursor = replace(cursor.advance(style.separator_advance), line_height=style.body_line_height)
    return Step(cursor, [rule])


def place_heading(cursor: RenderCursor, text: str, style: PageStyle = DEFAULT_STYLE) -> Step:
    line_height = style.line_height(style.heading_size)
    cursor = replace(cursor.advance(style.paragraph_gap * HEADING_BEFORE_GAP), line_height=line_height)
    if cursor.y + line_height > style.bottom:
        return Step(cursor, [], stopped=True)

    ops: list[DrawOp] = []
    for sub_line in wrap(text, style.bold_font, style.heading_size, style.content_width):
        if cursor.y + line_height > style.bottom:
            return Step(cursor, ops, stopped=True)
        ops.append(TextOp(sub_line, style.margin, cursor.y, style.bold_font, style.heading_size, style.accent_color))
        cursor = cursor.advance(line_height)

    cursor = replace(cursor, line_height=style.body_line_height)
    return Step(cursor.advance(style.paragraph_gap * HEADING_AFTER_GAP), ops)


def _span_ops(spans: list[InlineSpan], x: float, y: float, style: PageStyle) -> list[DrawOp]:
    ops: list[DrawOp] = []
    for span in spans:
        font = style.bold_font if span.emphasis else style.font
        ops.append(TextOp(span.text, x, y, font, style.body_size, style.body_color))
        x += measure_width(span.text, font, style.body_size)
    return ops


def place_text(
    cursor: RenderCursor,
    content: str,
    style: PageStyle = DEFAULT_STYLE,
    bullet: bool = False,
    reserve: float = 0.0,
) -> Step:
    """
    Draw a paragraph or bullet item, wrapped to the content width.

    ``reserve`` is kept free below the last sub-line (room for the signature
    when this is the final line of the letter).
    """
    cursor = replace(cursor, line_height=style.body_line_height)
    indent = style.bullet_indent if bullet else 0.0
    sub_lines = wrap_spans(
        parse_spans(content), style.font, style.bold_font, style.body_size, style.content_width - indent
    )
    if bullet and not sub_lines:
        # a bare marker still gets its glyph and one line
        sub_lines = [[]]

    ops: list[DrawOp] = []
    for index, spans in enumerate(sub_lines):
        keep_free = reserve if index == len(sub_lines) - 1 else 0.0
        if cursor.y + cursor.line_height > style.bottom - keep_free:
            return Step(cursor, ops, stopped=True)
        if bullet and index == 0:
            ops.append(TextOp(style.bullet_glyph, style.margin, cursor.y, style.font, style.body_size, style.body_color))
        ops.extend(_span_ops(spans, style.margin + indent, cursor.y, style))
        cursor = cursor.advance(cursor.line_height)

    if not bullet:
        cursor = cursor.advance(style.paragraph_gap * PARAGRAPH_AFTER_GAP)
    return Step(cursor, ops)


def place_blank(cursor: RenderCursor, next_is_content: bool, style: PageStyle = DEFAULT_STYLE) -> Step:
    if not next_is_content:
        return Step(cursor, [])
    return Step(cursor.advance(style.body_line_height + style.paragraph_gap * BLANK_GAP), [])


def place_line(
    cursor: RenderCursor,
    line: ClassifiedLine,
    style: PageStyle = DEFAULT_STYLE,
    next_is_content: bool = False,
    reserve: float = 0.0,
) -> Step:
    """Apply the list transition for ``line``, then draw it."""
    state, gap = next_state(cursor.list_state, line.kind)
    cursor = replace(cursor.advance(style.paragraph_gap * gap), list_state=state)

    if line.kind is LineKind.SEPARATOR:
        return place_separator(cursor, style)
    if line.kind is LineKind.HEADING:
        return place_heading(cursor, line.content, style)
    if line.kind is LineKind.BLANK:
        return place_blank(cursor, next_is_content, style)
    return place_text(cursor, line.content, style, bullet=line.kind is LineKind.BULLET, reserve=reserve)


# ── Pass ─────────────────────────────────────────────────────────────────────
def paginate(raw_lines: list[str], cursor: RenderCursor, style: PageStyle = DEFAULT_STYLE) -> PaginationResult:
    """
    Lay out ``raw_lines`` from ``cursor`` downwards, stopping at the first
    line that does not fit. The last line keeps the signature reserve free.
    """
    result = PaginationResult(cursor)
    last = len(raw_lines) - 1
    for index, raw in enumerate(raw_lines):
        reserve = style.signature_reserve if index == last else 0.0
        if cursor.y > style.bottom - cursor.line_height - reserve:
            result.truncated = True
            break

        next_is_content = index < last and bool(raw_lines[index + 1].strip())
        step = place_line(cursor, classify(raw), style, next_is_content=next_is_content, reserve=reserve)
        cursor = step.cursor
        result.ops.extend(step.ops)
        if step.stopped:
            result.truncated = True
            break

    result.cursor = cursor
    return result
