"""
`v-if` next to `v-for` on the same element.

The renderer evaluates `v-for` first, so a `v-if` that ignores the loop
variables filters nothing per item and belongs on a wrapping element.
"""

from __future__ import annotations

from ..template_syntax.nodes import Element
from ..template_syntax.queries import get_directive
from ..template_syntax.queries import uses_iteration_variable
from .dispatch import CATEGORY_BEST_PRACTICES
from .dispatch import Rule
from .dispatch import RuleContext
from .dispatch import register_template_body_visitor


def create(context: RuleContext) -> dict:
    def check_element(node: Element) -> None:
        v_for = get_directive(node.start_tag, "for")
        v_if = get_directive(node.start_tag, "if")
        if v_for is None or v_if is None:
            return
        if not uses_iteration_variable(v_if.value, node):
            context.report(v_if, "This 'v-if' should be moved to the wrapper element.")

    register_template_body_visitor(context, {"element": check_element})
    return {}


RULE = Rule(
    name="no-confusing-v-for-v-if",
    description="disallow confusing v-for and v-if on the same element",
    create=create,
    category=CATEGORY_BEST_PRACTICES,
)
