"""
Draw operations emitted by the layout engine.

Coordinates are PDF points with ``y`` measured from the top of the page.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class TextOp:
    text: str
    x: float
    y: float
    font: str
    size: float
    color: str


@dataclass(frozen=True)
class RuleOp:
    x1: float
    x2: float
    y: float
    width: float
    color: str


DrawOp = Union[TextOp, RuleOp]
