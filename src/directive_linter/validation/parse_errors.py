"""Surface expression syntax errors recorded by the parser, unchanged."""

from __future__ import annotations

from ..template_syntax.nodes import ExpressionContainer
from .dispatch import Rule
from .dispatch import RuleContext
from .dispatch import register_template_body_visitor


def create(context: RuleContext) -> dict:
    def check_container(node: ExpressionContainer) -> None:
        error = node.syntax_error
        if error is None:
            return
        context.report(
            node,
            "Parsing error: {message}.",
            {"message": error.message},
            loc=context.location(error.range),
        )

    register_template_body_visitor(context, {"expression_container": check_container})
    return {}


RULE = Rule(
    name="no-parsing-error",
    description="disallow expression parsing errors in templates",
    create=create,
)
