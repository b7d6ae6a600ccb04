"""`v-model` validation."""

from __future__ import annotations

from ..overrides import MODEL_MODIFIERS
from ..overrides import MODEL_UNSUPPORTED_TAGS
from ..template_syntax.expressions import is_assignable
from ..template_syntax.nodes import DirectiveAttribute
from ..template_syntax.queries import has_attribute
from ..template_syntax.queries import has_attribute_value
from ..template_syntax.queries import has_directive
from .dispatch import Rule
from .dispatch import RuleContext
from .dispatch import register_template_body_visitor


def create(context: RuleContext) -> dict:
    def check_model(node: DirectiveAttribute) -> None:
        start_tag = node.parent
        name = start_tag.parent.name

        if name in MODEL_UNSUPPORTED_TAGS:
            context.report(
                node,
                "'v-model' directives aren't supported on <{name}> elements.",
                {"name": name},
            )
        if name == "input":
            if has_directive(start_tag, "bind", "type"):
                context.report(
                    node, "'v-model' directives don't support dynamic input types."
                )
            if has_attribute(start_tag, "type", "file"):
                context.report(
                    node, "'v-model' directives don't support 'file' input type."
                )

        if node.key.argument is not None:
            context.report(node, "'v-model' directives require no argument.")
        for modifier in node.key.modifiers:
            if modifier not in MODEL_MODIFIERS:
                context.report(
                    node,
                    "'v-model' directives don't support the modifier '{name}'.",
                    {"name": modifier},
                )

        if not has_attribute_value(node):
            context.report(node, "'v-model' directives require that attribute value.")
            return
        if not is_assignable(node.value.expression):
            context.report(
                node,
                "'v-model' directives require the attribute value which is valid as LHS.",
            )

    register_template_body_visitor(context, {"directive:model": check_model})
    return {}


RULE = Rule(
    name="no-invalid-v-model",
    description="disallow invalid v-model directives",
    create=create,
)
