"""
Tag style rules with automatic fixes.

- `html-no-self-closing`: `<tag/>` becomes `<tag>` outside SVG, where the
  self-closing marker is meaningful and kept.
- `html-end-tags`: non-void elements must be closed explicitly.
"""

from __future__ import annotations

from ..template_syntax.element_names import is_svg_element
from ..template_syntax.element_names import is_void_element_name
from ..template_syntax.nodes import Element
from ..template_syntax.nodes import StartTag
from ..types import insert_text_at
from ..types import remove_range
from .dispatch import CATEGORY_BEST_PRACTICES
from .dispatch import Rule
from .dispatch import RuleContext
from .dispatch import register_template_body_visitor


def create_no_self_closing(context: RuleContext) -> dict:
    def check_start_tag(node: StartTag) -> None:
        if not node.self_closing or is_svg_element(node.parent):
            return
        # The marker sits right before the closing `>`.
        position = node.range[1] - 2
        context.report(
            node,
            "Self-closing should not be used.",
            fix=lambda source: remove_range(position, position + 1),
        )

    register_template_body_visitor(context, {"start_tag": check_start_tag})
    return {}


def create_end_tags(context: RuleContext) -> dict:
    def check_element(node: Element) -> None:
        if is_void_element_name(node.name):
            return
        if node.start_tag.self_closing or node.end_tag is not None:
            return
        end = node.range[1]
        context.report(
            node.start_tag,
            "'<{name}>' should have end tag.",
            {"name": node.name},
            fix=lambda source: insert_text_at(end, f"</{node.name}>"),
        )

    register_template_body_visitor(context, {"element": check_element})
    return {}


NO_SELF_CLOSING_RULE = Rule(
    name="html-no-self-closing",
    description="disallow self-closing elements outside SVG",
    create=create_no_self_closing,
    category=CATEGORY_BEST_PRACTICES,
    fixable=True,
)

END_TAGS_RULE = Rule(
    name="html-end-tags",
    description="require end tags on non-void elements",
    create=create_end_tags,
    category=CATEGORY_BEST_PRACTICES,
    recommended=False,
    fixable=True,
)
