"""
Template root validation.

The renderer mounts exactly one element per component, so the template body
must hold a single element. A `v-if` root may be followed by `v-else-if`
siblings and must end with a `v-else` sibling: exactly one of them renders.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..overrides import RESERVED_ROOT_TAGS
from ..template_syntax.nodes import Element
from ..template_syntax.nodes import Program
from ..template_syntax.queries import has_directive
from .dispatch import Rule
from .dispatch import RuleContext

MESSAGE_TEXT = "The template root requires an element rather than texts."
MESSAGE_EXACTLY_ONE = "The template root requires exactly one element."
MESSAGE_DISALLOWED_TAG = "The template root disallows '<{name}>' elements."
MESSAGE_REQUIRES_ELSE = (
    "The template root requires the next element which has 'v-else' directives "
    "if it has 'v-if' directives."
)
MESSAGE_NO_FOR = "The template root disallows 'v-for' directives."


@dataclass
class RootScan:
    """What a single pass over the template body's children found."""

    root_found: bool = False
    root_name: str | None = None
    root_has_if: bool = False
    root_has_for: bool = False
    extra_text: bool = False
    extra_element: bool = False


def scan_root(
    template_body: Element,
    context: RuleContext,
    *,
    allow_conditional_chain: bool = True,
) -> RootScan:
    """
    Classify the template body's children in document order.

    With `allow_conditional_chain`, siblings continuing the root's `v-if`
    chain are tolerated; a `v-else` closes the chain and anything after it
    counts as an extra element.
    """
    scan = RootScan()
    for child in template_body.children:
        if not isinstance(child, Element):
            if context.get_text(child).strip():
                scan.extra_text = True
            continue

        start_tag = child.start_tag
        if not scan.root_found:
            scan.root_found = True
            scan.root_name = child.name
            scan.root_has_if = has_directive(start_tag, "if")
            scan.root_has_for = has_directive(start_tag, "for")
        elif (
            allow_conditional_chain
            and scan.root_has_if
            and has_directive(start_tag, "else-if")
        ):
            pass
        elif (
            allow_conditional_chain
            and scan.root_has_if
            and has_directive(start_tag, "else")
        ):
            scan.root_has_if = False
        else:
            scan.extra_element = True
    return scan


def _report_cardinality(context: RuleContext, node: Element, scan: RootScan) -> bool:
    if scan.extra_text:
        context.report(node, MESSAGE_TEXT)
        return True
    if scan.extra_element or not scan.root_found:
        context.report(node, MESSAGE_EXACTLY_ONE)
        return True
    return False


def create_template_root(context: RuleContext) -> dict:
    def check_program(program: Program) -> None:
        node = program.template_body
        if node is None:
            return
        scan = scan_root(node, context)
        if _report_cardinality(context, node, scan):
            return

        if scan.root_name in RESERVED_ROOT_TAGS:
            context.report(node, MESSAGE_DISALLOWED_TAG, {"name": scan.root_name})
        if scan.root_has_if:
            context.report(node, MESSAGE_REQUIRES_ELSE)
        if scan.root_has_for:
            context.report(node, MESSAGE_NO_FOR)

    return {"program": check_program}


def create_one_root(context: RuleContext) -> dict:
    def check_program(program: Program) -> None:
        node = program.template_body
        if node is None:
            return
        scan = scan_root(node, context, allow_conditional_chain=False)
        _report_cardinality(context, node, scan)

    return {"program": check_program}


TEMPLATE_ROOT_RULE = Rule(
    name="no-invalid-template-root",
    description="disallow invalid template root",
    create=create_template_root,
)

ONE_ROOT_RULE = Rule(
    name="require-one-root-element",
    description="require exactly one root element in the template",
    create=create_one_root,
    recommended=False,
)
