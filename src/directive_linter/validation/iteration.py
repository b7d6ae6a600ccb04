"""
`v-for` validation.

Two rules live here:
- `no-invalid-v-for`: the directive's own grammar plus the constraints the
  renderer enforces (no `v-for` on the root, keyed custom components).
- `require-v-for-key`: keys on native elements, and keys that actually vary
  with the iteration.
"""

from __future__ import annotations

from ..template_syntax.element_names import is_reserved_tag_name
from ..template_syntax.expressions import Identifier
from ..template_syntax.expressions import IterationExpression
from ..template_syntax.nodes import DirectiveAttribute
from ..template_syntax.nodes import StartTag
from ..template_syntax.queries import get_directive
from ..template_syntax.queries import has_attribute_value
from ..template_syntax.queries import has_directive
from ..template_syntax.queries import is_custom_component
from ..template_syntax.queries import is_root_element
from ..template_syntax.queries import uses_iteration_variable
from .dispatch import CATEGORY_BEST_PRACTICES
from .dispatch import Rule
from .dispatch import RuleContext
from .dispatch import register_template_body_visitor


def create_for(context: RuleContext) -> dict:
    def check_for(node: DirectiveAttribute) -> None:
        element = node.parent.parent
        name = element.name

        if is_root_element(element):
            context.report(node, "The root element can't have 'v-for' directives.")

        if (
            not is_reserved_tag_name(name)
            and name != "template"
            and not has_directive(node.parent, "bind", "key")
        ):
            context.report(
                node,
                "'v-for' directives on custom elements require 'v-bind:key' directives.",
            )

        if node.key.argument is not None:
            context.report(node, "'v-for' directives require no argument.")
        if node.key.modifiers:
            context.report(node, "'v-for' directives require no modifier.")
        if not has_attribute_value(node):
            context.report(node, "'v-for' directives require that attribute value.")
            return

        expression = node.value.expression
        if expression is None:
            # Syntax errors are reported by `no-parsing-error`.
            return
        if not isinstance(expression, IterationExpression):
            context.report(
                node.value,
                "'v-for' directives require the special syntax "
                "'<alias> in <expression>'.",
            )
            return

        left = expression.left
        alias = left[0] if left else None
        if alias is None:
            context.report(expression, "Invalid alias ''.")
        for position in left[1:3]:
            if isinstance(position, Identifier):
                continue
            context.report(
                position if position is not None else expression,
                "Invalid alias '{text}'.",
                {"text": context.get_text(position) if position is not None else ""},
            )

    register_template_body_visitor(context, {"directive:for": check_for})
    return {}


def create_for_key(context: RuleContext) -> dict:
    def check_start_tag(node: StartTag) -> None:
        v_for = get_directive(node, "for")
        if v_for is None:
            return
        element = node.parent
        v_bind_key = get_directive(node, "bind", "key")

        if v_bind_key is not None:
            if not uses_iteration_variable(v_bind_key.value, element):
                context.report(
                    node,
                    "Expected 'v-bind:key' directive to use the variables which "
                    "are defined by the 'v-for' directive.",
                )
        elif not is_custom_component(element):
            context.report(node, "'v-for' directives require 'v-bind:key' directives.")

    register_template_body_visitor(context, {"start_tag": check_start_tag})
    return {}


FOR_RULE = Rule(
    name="no-invalid-v-for",
    description="disallow invalid v-for directives",
    create=create_for,
)

FOR_KEY_RULE = Rule(
    name="require-v-for-key",
    description="require v-bind:key with v-for directives",
    create=create_for_key,
    category=CATEGORY_BEST_PRACTICES,
    recommended=False,
)
