"""
Inline bold spans (``**text**`` and ``__text__``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

BOLD_RE = re.compile(r"(\*\*.*?\*\*|__.*?__)")


@dataclass(frozen=True)
class InlineSpan:
    text: str
    emphasis: bool = False


def _is_bold(fragment: str) -> bool:
    return len(fragment) >= 4 and (
        (fragment.startswith("**") and fragment.endswith("**"))
        or (fragment.startswith("__") and fragment.endswith("__"))
    )


def parse_spans(content: str) -> list[InlineSpan]:
    """
    Split ``content`` into plain and bold spans, in order.

    Markers only pair up on the same line and the first closing marker wins;
    bold spans are not parsed further. Unmatched markers stay literal.
    """
    spans: list[InlineSpan] = []
    for fragment in BOLD_RE.split(content):
        if not fragment:
            continue
        if _is_bold(fragment):
            inner = fragment[2:-2]
            if inner:
                spans.append(InlineSpan(inner, emphasis=True))
        else:
            spans.append(InlineSpan(fragment))
    return spans


def plain_text(spans: list[InlineSpan]) -> str:
    return "".join(span.text for span in spans)
