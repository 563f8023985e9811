"""
Line classification for generated letter text.

Each raw line maps to exactly one kind, independently of its neighbours.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

SEPARATOR_TOKEN = "---***---"
HEADING_MARKER = "## "
BULLET_RE = re.compile(r"^\s*([*-])\s*(.*)")


class LineKind(Enum):
    SEPARATOR = "separator"
    HEADING = "heading"
    BULLET = "bullet"
    BLANK = "blank"
    PARAGRAPH = "paragraph"


@dataclass(frozen=True)
class ClassifiedLine:
    kind: LineKind
    content: str


def classify(raw_line: str) -> ClassifiedLine:
    """Classify one line: separator, heading, bullet, blank, then paragraph."""
    line = raw_line.strip()
    if line == SEPARATOR_TOKEN:
        return ClassifiedLine(LineKind.SEPARATOR, "")
    if line.startswith(HEADING_MARKER):
        return ClassifiedLine(LineKind.HEADING, line[len(HEADING_MARKER):].strip())
    match = BULLET_RE.match(line)
    if match:
        return ClassifiedLine(LineKind.BULLET, match.group(2).strip())
    if not line:
        return ClassifiedLine(LineKind.BLANK, "")
    return ClassifiedLine(LineKind.PARAGRAPH, line)
