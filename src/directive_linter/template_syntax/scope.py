"""
Host-side helpers for finishing a parsed tree.

Parsers that don't supply parent links, iteration variables or resolved
references can run `bind_scopes()` once before validation. Resolution is a
pure nearest-enclosing-scope lookup over the ancestor chain.
"""

from __future__ import annotations

from collections.abc import Iterator

from .expressions import Identifier
from .expressions import IterationExpression
from .nodes import DirectiveAttribute
from .nodes import Element
from .nodes import ExpressionContainer
from .nodes import Program
from .nodes import ScopeVariable
from .nodes import VariableKind


def link_parents(program: Program) -> None:
    """Set every `parent` back-reference below `program`."""
    if program.template_body is None:
        return
    program.template_body.parent = program
    _link_element(program.template_body)


def _link_element(element: Element) -> None:
    element.start_tag.parent = element
    for attribute in element.start_tag.attributes:
        attribute.parent = element.start_tag
        if isinstance(attribute, DirectiveAttribute) and attribute.value is not None:
            attribute.value.parent = attribute
    if element.end_tag is not None:
        element.end_tag.parent = element
    for child in element.children:
        child.parent = element
        if isinstance(child, Element):
            _link_element(child)


def iter_elements(element: Element) -> Iterator[Element]:
    """Yield `element` and its descendants in document order."""
    yield element
    for child in element.children:
        if isinstance(child, Element):
            yield from iter_elements(child)


def declare_iteration_variables(element: Element) -> list[ScopeVariable]:
    """Add the aliases of the element's `v-for` value to `element.variables`."""
    declared: list[ScopeVariable] = []
    for attribute in element.start_tag.attributes:
        if not isinstance(attribute, DirectiveAttribute):
            continue
        if attribute.key.name != "for" or attribute.value is None:
            continue
        expression = attribute.value.expression
        if not isinstance(expression, IterationExpression):
            continue
        known = {variable.id.name for variable in element.variables}
        for alias in expression.left:
            if isinstance(alias, Identifier) and alias.name not in known:
                variable = ScopeVariable(id=alias, kind=VariableKind.ITERATION)
                element.variables.append(variable)
                declared.append(variable)
                known.add(alias.name)
    return declared


def resolve_variable(element: Element | None, name: str) -> ScopeVariable | None:
    """Find `name` on `element` or its nearest ancestor declaring it."""
    node = element
    while isinstance(node, Element):
        for variable in node.variables:
            if variable.id.name == name:
                return variable
        node = node.parent
    return None


def bind_scopes(program: Program) -> None:
    """
    Link parents, declare iteration variables and resolve every reference.

    A `v-for` value's own references resolve from the enclosing scope, so
    `v-for="item in item.children"` reads the outer `item`.
    """
    link_parents(program)
    if program.template_body is None:
        return
    for element in iter_elements(program.template_body):
        declare_iteration_variables(element)
        for attribute in element.start_tag.attributes:
            if isinstance(attribute, DirectiveAttribute) and attribute.value is not None:
                scope = element.parent if attribute.key.name == "for" else element
                _resolve_container(attribute.value, scope)
        for child in element.children:
            if isinstance(child, ExpressionContainer):
                _resolve_container(child, element)


def _resolve_container(container: ExpressionContainer, scope) -> None:
    for reference in container.references:
        reference.variable = resolve_variable(
            scope if isinstance(scope, Element) else None, reference.id.name
        )
