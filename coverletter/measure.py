"""
Text measurement and word wrapping on top of reportlab's font metrics.
"""

from __future__ import annotations

import re

from reportlab.pdfbase import pdfmetrics

from coverletter.spans import InlineSpan

_WS_RE = re.compile(r"(\s+)")


def measure_width(text: str, font: str, size: float) -> float:
    return pdfmetrics.stringWidth(text, font, size)


def _break_long_word(word: str, font: str, size: float, max_width: float) -> list[str]:
    """Split a word that cannot fit on its own line at character boundaries."""
    pieces: list[str] = []
    current = ""
    for char in word:
        candidate = current + char
        if current and measure_width(candidate, font, size) > max_width:
            pieces.append(current)
            current = char
        else:
            current = candidate
    if current:
        pieces.append(current)
    return pieces


def wrap(text: str, font: str, size: float, max_width: float) -> list[str]:
    """Greedy word wrap so every line measures at most ``max_width``."""
    lines: list[str] = []
    current = ""
    for word in text.split():
        if measure_width(word, font, size) > max_width:
            if current:
                lines.append(current)
                current = ""
            *full, word = _break_long_word(word, font, size, max_width)
            lines.extend(full)
        candidate = word if not current else f"{current} {word}"
        if measure_width(candidate, font, size) <= max_width:
            current = candidate
            continue
        if current:
            lines.append(current)
        current = word
    if current:
        lines.append(current)
    return lines


# ── Span-aware wrapping ──────────────────────────────────────────────────────
def _font_for(span: InlineSpan, font: str, bold_font: str) -> str:
    return bold_font if span.emphasis else font


def spans_width(spans: list[InlineSpan], font: str, bold_font: str, size: float) -> float:
    return sum(measure_width(s.text, _font_for(s, font, bold_font), size) for s in spans)


def _merge(spans: list[InlineSpan]) -> list[InlineSpan]:
    merged: list[InlineSpan] = []
    for span in spans:
        if not span.text:
            continue
        if merged and merged[-1].emphasis == span.emphasis:
            merged[-1] = InlineSpan(merged[-1].text + span.text, span.emphasis)
        else:
            merged.append(span)
    return merged


def _words(spans: list[InlineSpan]) -> list[list[InlineSpan]]:
    """Group span fragments into whitespace-delimited words."""
    words: list[list[InlineSpan]] = []
    current: list[InlineSpan] = []
    for span in spans:
        for part in _WS_RE.split(span.text):
            if not part:
                continue
            if part.isspace():
                if current:
                    words.append(current)
                    current = []
                continue
            current.append(InlineSpan(part, span.emphasis))
    if current:
        words.append(current)
    return words


def _break_long_span_word(
    word: list[InlineSpan], font: str, bold_font: str, size: float, max_width: float
) -> list[list[InlineSpan]]:
    pieces: list[list[InlineSpan]] = []
    current: list[InlineSpan] = []
    for fragment in word:
        for char in fragment.text:
            candidate = _merge(current + [InlineSpan(char, fragment.emphasis)])
            if current and spans_width(candidate, font, bold_font, size) > max_width:
                pieces.append(current)
                current = [InlineSpan(char, fragment.emphasis)]
            else:
                current = candidate
    if current:
        pieces.append(current)
    return pieces


def _join(line: list[InlineSpan], word: list[InlineSpan]) -> list[InlineSpan]:
    if not line:
        return _merge(list(word))
    same = line[-1].emphasis and word[0].emphasis
    return _merge(line + [InlineSpan(" ", same)] + word)


def wrap_spans(
    spans: list[InlineSpan], font: str, bold_font: str, size: float, max_width: float
) -> list[list[InlineSpan]]:
    """
    Word-wrap a run of inline spans. Each word is measured in the font of the
    span it belongs to; the returned sub-lines are lists of merged spans.
    """
    lines: list[list[InlineSpan]] = []
    current: list[InlineSpan] = []
    for word in _words(spans):
        if spans_width(word, font, bold_font, size) > max_width:
            if current:
                lines.append(current)
                current = []
            *full, word = _break_long_span_word(word, font, bold_font, size, max_width)
            lines.extend(full)
        candidate = _join(current, word)
        if spans_width(candidate, font, bold_font, size) <= max_width:
            current = candidate
            continue
        if current:
            lines.append(current)
        current = _merge(list(word))
    if current:
        lines.append(current)
    return lines
