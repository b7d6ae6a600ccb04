"""`v-pre` validation: the directive takes nothing at all."""

from __future__ import annotations

from ..template_syntax.nodes import DirectiveAttribute
from .dispatch import Rule
from .dispatch import RuleContext
from .dispatch import register_template_body_visitor


def create(context: RuleContext) -> dict:
    def check_pre(node: DirectiveAttribute) -> None:
        if node.key.argument is not None:
            context.report(node, "'v-pre' directives require no argument.")
        if node.key.modifiers:
            context.report(node, "'v-pre' directives require no modifier.")
        if node.value is not None:
            context.report(node, "'v-pre' directives require no attribute value.")

    register_template_body_visitor(context, {"directive:pre": check_pre})
    return {}


RULE = Rule(
    name="no-invalid-v-pre",
    description="disallow invalid v-pre directives",
    create=create,
)
