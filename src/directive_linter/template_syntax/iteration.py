"""
Iteration value grammar: `<alias>[, <key>][, <index>] in <iterable>`.

The left-hand side may be parenthesized and `of` is accepted in place of
`in`. Parsers that already produce an `IterationExpression` don't need this;
it exists for adapters whose parser only hands back the raw value text.
"""

from __future__ import annotations

import re

from .expressions import Expression
from .expressions import Identifier
from .expressions import IterationExpression
from .expressions import OtherExpression
from .expressions import is_identifier_text
from .expressions import parse_simple_expression

_ITERATION_RE = re.compile(
    r"(?P<lhs>.*?)(?:^|\s+)(?:in|of)\s+(?P<rhs>\S.*?)\s*\Z",
    re.DOTALL,
)

_OPENING = "([{"
_CLOSING = ")]}"


def parse_iteration_expression(
    text: str, offset: int = 0
) -> IterationExpression | None:
    """
    Parse an iteration value, or return None if it isn't one.

    Each declared left-hand position yields an `Identifier`, an
    `OtherExpression` (destructuring patterns, anything that isn't a bare
    name) or None when the position is empty. `"in list"` declares a single
    empty alias.
    """
    match = _ITERATION_RE.match(text)
    if match is None:
        return None

    lhs_start, lhs_end = match.span("lhs")
    left = _parse_aliases(text[lhs_start:lhs_end], offset + lhs_start)
    rhs_start, rhs_end = match.span("rhs")
    right = parse_simple_expression(text[rhs_start:rhs_end], offset + rhs_start)

    start = offset + (len(text) - len(text.lstrip()))
    return IterationExpression(
        left=left, right=right, range=(start, offset + len(text.rstrip()))
    )


def _parse_aliases(lhs: str, offset: int) -> list[Expression | None]:
    stripped = lhs.strip()
    start = offset + (len(lhs) - len(lhs.lstrip()))
    if stripped.startswith("(") and stripped.endswith(")"):
        stripped = stripped[1:-1]
        start += 1

    aliases: list[Expression | None] = []
    for part, part_offset in _split_top_level(stripped, start):
        text = part.strip()
        if not text:
            aliases.append(None)
            continue
        part_start = part_offset + (len(part) - len(part.lstrip()))
        span = (part_start, part_start + len(text))
        if is_identifier_text(text):
            aliases.append(Identifier(name=text, range=span))
        else:
            aliases.append(OtherExpression(kind="pattern", text=text, range=span))
    return aliases


def _split_top_level(text: str, offset: int) -> list[tuple[str, int]]:
    """Split on commas outside brackets, keeping each part's offset."""
    parts: list[tuple[str, int]] = []
    depth = 0
    part_start = 0
    for i, char in enumerate(text):
        if char in _OPENING:
            depth += 1
        elif char in _CLOSING:
            depth = max(0, depth - 1)
        elif char == "," and depth == 0:
            parts.append((text[part_start:i], offset + part_start))
            part_start = i + 1
    parts.append((text[part_start:], offset + part_start))
    return parts
