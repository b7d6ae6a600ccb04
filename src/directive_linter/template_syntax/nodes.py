"""
Template tree model.

The tree is produced by a parser outside this package and is read-only while
rules run. Nodes compare by identity, which sibling lookup relies on.

`parent` links are non-owning back-references; ownership flows from the
program down through `template_body`, `children`, `start_tag` and
`attributes`. `scope.link_parents()` fills them in for trees built by hand.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum

from .expressions import Expression
from .expressions import Identifier

HTML_NAMESPACE = "http://www.w3.org/1999/xhtml"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
MATHML_NAMESPACE = "http://www.w3.org/1998/Math/MathML"


class VariableKind(Enum):
    ITERATION = "iteration"
    OTHER = "other"


@dataclass(eq=False)
class ScopeVariable:
    """A name introduced on an element, visible to its subtree."""

    id: Identifier
    kind: VariableKind = VariableKind.ITERATION


@dataclass(eq=False)
class Reference:
    """A free identifier used inside a bound expression."""

    id: Identifier
    variable: ScopeVariable | None = None


@dataclass(frozen=True)
class ParseError:
    message: str
    range: tuple[int, int] = (0, 0)


@dataclass(eq=False)
class ExpressionContainer:
    """
    Holds either a parsed expression or the error that prevented parsing.

    A container with neither is a directive written with an empty value.
    Mustache interpolations in element content are containers too.
    """

    expression: Expression | None = None
    references: list[Reference] = field(default_factory=list)
    syntax_error: ParseError | None = None
    range: tuple[int, int] = (0, 0)
    parent: Element | DirectiveAttribute | None = field(
        default=None, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.expression is not None and self.syntax_error is not None:
            raise ValueError(
                "An expression container can't hold both an expression "
                "and a syntax error"
            )


@dataclass(eq=False)
class DirectiveKey:
    """
    `v-<name>[:<argument>][.<modifier>...]`.

    A static argument is a plain string, a dynamic one (`v-bind:[expr]`) an
    expression.
    """

    name: str
    argument: str | Expression | None = None
    modifiers: list[str] = field(default_factory=list)
    range: tuple[int, int] = (0, 0)


@dataclass(eq=False)
class PlainAttribute:
    name: str
    value: str | None = None
    range: tuple[int, int] = (0, 0)
    parent: StartTag | None = field(default=None, repr=False, compare=False)


@dataclass(eq=False)
class DirectiveAttribute:
    key: DirectiveKey
    value: ExpressionContainer | None = None
    range: tuple[int, int] = (0, 0)
    parent: StartTag | None = field(default=None, repr=False, compare=False)


Attribute = PlainAttribute | DirectiveAttribute


@dataclass(eq=False)
class StartTag:
    attributes: list[Attribute] = field(default_factory=list)
    self_closing: bool = False
    range: tuple[int, int] = (0, 0)
    parent: Element | None = field(default=None, repr=False, compare=False)


@dataclass(eq=False)
class EndTag:
    range: tuple[int, int] = (0, 0)
    parent: Element | None = field(default=None, repr=False, compare=False)


@dataclass(eq=False)
class Text:
    value: str
    range: tuple[int, int] = (0, 0)
    parent: Element | None = field(default=None, repr=False, compare=False)


@dataclass(eq=False)
class Element:
    name: str
    start_tag: StartTag = field(default_factory=StartTag)
    children: list[Node] = field(default_factory=list)
    end_tag: EndTag | None = None
    variables: list[ScopeVariable] = field(default_factory=list)
    namespace: str = HTML_NAMESPACE
    range: tuple[int, int] = (0, 0)
    parent: Element | Program | None = field(default=None, repr=False, compare=False)


Node = Element | Text | ExpressionContainer


@dataclass(eq=False)
class Program:
    """The root handed over by the parser; `template_body` is the `<template>` element."""

    template_body: Element | None = None
    range: tuple[int, int] = (0, 0)
