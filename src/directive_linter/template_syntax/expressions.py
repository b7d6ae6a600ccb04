"""
Bound-expression AST variants.

Only the shapes the rules need to tell apart are modeled explicitly. Anything
else a parser produces is carried as an `OtherExpression` with its kind and
source text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from dataclasses import field


@dataclass(eq=False)
class Identifier:
    name: str
    range: tuple[int, int] = (0, 0)


@dataclass(eq=False)
class MemberExpression:
    """`object.property` or `object[property]`."""

    object: Expression
    property: Expression
    computed: bool = False
    range: tuple[int, int] = (0, 0)


@dataclass(eq=False)
class IterationExpression:
    """
    `<alias>[, <key>][, <index>] in <iterable>`.

    `left` has one entry per position the value declares; an entry is None
    when that position was left empty (e.g. `(, key) in list`).
    """

    left: list[Expression | None] = field(default_factory=list)
    right: Expression | None = None
    range: tuple[int, int] = (0, 0)


@dataclass(eq=False)
class OtherExpression:
    kind: str
    text: str = ""
    range: tuple[int, int] = (0, 0)


Expression = Identifier | MemberExpression | IterationExpression | OtherExpression


def is_assignable(expression: Expression | None) -> bool:
    """True for expressions valid as an assignment target."""
    return isinstance(expression, (Identifier, MemberExpression))


_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][\w$]*\Z")


def is_identifier_text(text: str) -> bool:
    return bool(_IDENTIFIER_RE.match(text))


def parse_simple_expression(text: str, offset: int = 0) -> Expression:
    """
    Classify a bound-expression source string.

    Recognizes bare identifiers and dotted member paths (`a.b.c`); every
    other shape becomes an `OtherExpression` holding the stripped text.
    `offset` is the position of `text` in the template source.
    """
    stripped = text.strip()
    start = offset + (len(text) - len(text.lstrip()))
    end = start + len(stripped)
    parts = stripped.split(".")
    if not all(is_identifier_text(part) for part in parts):
        return OtherExpression(kind="expression", text=stripped, range=(start, end))

    expression: Expression = Identifier(
        name=parts[0], range=(start, start + len(parts[0]))
    )
    position = start + len(parts[0])
    for part in parts[1:]:
        prop_start = position + 1
        prop = Identifier(name=part, range=(prop_start, prop_start + len(part)))
        position = prop_start + len(part)
        expression = MemberExpression(
            object=expression, property=prop, range=(start, position)
        )
    return expression
