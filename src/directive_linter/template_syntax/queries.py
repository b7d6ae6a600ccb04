"""
Stateless queries over the template tree.

These mirror the questions the renderer itself asks when it compiles a
template: which element precedes this one, does a start tag carry a given
directive, is an element the template's root, and so on.
"""

from __future__ import annotations

from .element_names import is_html_element_name
from .element_names import is_mathml_element_name
from .element_names import is_svg_element_name
from .nodes import DirectiveAttribute
from .nodes import Element
from .nodes import ExpressionContainer
from .nodes import PlainAttribute
from .nodes import Program
from .nodes import StartTag
from .nodes import VariableKind

CONDITIONAL_DIRECTIVES = ("if", "else-if")


def prev_sibling(element: Element) -> Element | None:
    """The closest preceding sibling *element*, skipping text and mustaches."""
    parent = element.parent
    if not isinstance(parent, Element):
        return None
    previous: Element | None = None
    for sibling in parent.children:
        if sibling is element:
            return previous
        if isinstance(sibling, Element):
            previous = sibling
    return None


def get_directive(
    start_tag: StartTag, name: str, argument: str | None = None
) -> DirectiveAttribute | None:
    """
    First directive called `name` on the tag.

    With `argument`, only a directive whose static argument equals it
    matches (`get_directive(tag, "bind", "key")` finds `v-bind:key`).
    """
    for attribute in start_tag.attributes:
        if not isinstance(attribute, DirectiveAttribute):
            continue
        if attribute.key.name != name:
            continue
        if argument is None or attribute.key.argument == argument:
            return attribute
    return None


def has_directive(start_tag: StartTag, name: str, argument: str | None = None) -> bool:
    return get_directive(start_tag, name, argument) is not None


def has_attribute(start_tag: StartTag, name: str, value: str | None = None) -> bool:
    """Plain attribute `name`, optionally with exactly `value`."""
    return any(
        isinstance(attribute, PlainAttribute)
        and attribute.name == name
        and (value is None or attribute.value == value)
        for attribute in start_tag.attributes
    )


def has_attribute_value(attribute: DirectiveAttribute) -> bool:
    """True if the directive's value parsed, or at least failed to parse."""
    container = attribute.value
    return container is not None and (
        container.expression is not None or container.syntax_error is not None
    )


def prev_element_has_if(element: Element) -> bool:
    """True if the previous sibling element opens or continues a conditional chain."""
    previous = prev_sibling(element)
    return previous is not None and any(
        has_directive(previous.start_tag, name) for name in CONDITIONAL_DIRECTIVES
    )


def is_root_element(element: Element) -> bool:
    """True for the top-level elements of the template body."""
    parent = element.parent
    return isinstance(parent, Element) and isinstance(parent.parent, Program)


def is_custom_component(element: Element) -> bool:
    """
    True for tags rendered as components rather than native elements.

    A native name still counts as a component when `is` (static or bound)
    swaps the rendered component.
    """
    name = element.name
    start_tag = element.start_tag
    return (
        not (
            is_html_element_name(name)
            or is_svg_element_name(name)
            or is_mathml_element_name(name)
        )
        or has_attribute(start_tag, "is")
        or has_directive(start_tag, "bind", "is")
    )


def uses_iteration_variable(container: ExpressionContainer | None, element: Element) -> bool:
    """
    True if `container` references a `v-for` variable declared on `element`.

    Matching is by name, like the renderer's own scoping, not by the
    resolved `Reference.variable` link.
    """
    if container is None:
        return False
    names = {
        variable.id.name
        for variable in element.variables
        if variable.kind is VariableKind.ITERATION
    }
    return any(reference.id.name in names for reference in container.references)
