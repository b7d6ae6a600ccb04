"""
`v-if` / `v-else-if` / `v-else` validation.

Each directive of the family must stand alone on its element, and the two
continuation directives must directly follow an element that opens or
continues the chain (text and mustaches in between don't break it).
"""

from __future__ import annotations

from ..template_syntax.nodes import DirectiveAttribute
from ..template_syntax.queries import has_attribute_value
from ..template_syntax.queries import has_directive
from ..template_syntax.queries import prev_element_has_if
from .dispatch import Rule
from .dispatch import RuleContext
from .dispatch import register_template_body_visitor


def _check_key_shape(context: RuleContext, node: DirectiveAttribute, label: str) -> None:
    if node.key.argument is not None:
        context.report(node, f"'{label}' directives require no argument.")
    if node.key.modifiers:
        context.report(node, f"'{label}' directives require no modifier.")


def create_if(context: RuleContext) -> dict:
    def check_if(node: DirectiveAttribute) -> None:
        start_tag = node.parent
        if has_directive(start_tag, "else"):
            context.report(
                node,
                "'v-if' and 'v-else' directives can't exist on the same element. "
                "You may want 'v-else-if' directives.",
            )
        if has_directive(start_tag, "else-if"):
            context.report(
                node,
                "'v-if' and 'v-else-if' directives can't exist on the same element.",
            )
        _check_key_shape(context, node, "v-if")
        if not has_attribute_value(node):
            context.report(node, "'v-if' directives require that attribute value.")

    register_template_body_visitor(context, {"directive:if": check_if})
    return {}


def create_else_if(context: RuleContext) -> dict:
    def check_else_if(node: DirectiveAttribute) -> None:
        start_tag = node.parent
        element = start_tag.parent
        if has_directive(start_tag, "if"):
            context.report(
                node,
                "'v-else-if' and 'v-if' directives can't exist on the same element. "
                "You may want 'v-else' directives.",
            )
        if has_directive(start_tag, "else"):
            context.report(
                node,
                "'v-else-if' and 'v-else' directives can't exist on the same element.",
            )
        if not prev_element_has_if(element):
            context.report(
                node,
                "'v-else-if' directives require being preceded by the element which "
                "has a 'v-if' or 'v-else-if' directive.",
            )
        _check_key_shape(context, node, "v-else-if")
        if not has_attribute_value(node):
            context.report(
                node, "'v-else-if' directives require that attribute value."
            )

    register_template_body_visitor(context, {"directive:else-if": check_else_if})
    return {}


def create_else(context: RuleContext) -> dict:
    def check_else(node: DirectiveAttribute) -> None:
        start_tag = node.parent
        element = start_tag.parent
        if has_directive(start_tag, "if"):
            context.report(
                node,
                "'v-else' and 'v-if' directives can't exist on the same element. "
                "You may want 'v-else-if' directives.",
            )
        if has_directive(start_tag, "else-if"):
            context.report(
                node,
                "'v-else' and 'v-else-if' directives can't exist on the same element.",
            )
        if not prev_element_has_if(element):
            context.report(
                node,
                "'v-else' directives require being preceded by the element which "
                "has a 'v-if' or 'v-else-if' directive.",
            )
        _check_key_shape(context, node, "v-else")
        if node.value is not None:
            context.report(node, "'v-else' directives require no attribute value.")

    register_template_body_visitor(context, {"directive:else": check_else})
    return {}


IF_RULE = Rule(
    name="no-invalid-v-if",
    description="disallow invalid v-if directives",
    create=create_if,
)

ELSE_IF_RULE = Rule(
    name="no-invalid-v-else-if",
    description="disallow invalid v-else-if directives",
    create=create_else_if,
)

ELSE_RULE = Rule(
    name="no-invalid-v-else",
    description="disallow invalid v-else directives",
    create=create_else,
)
