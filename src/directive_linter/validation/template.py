"""
Template-wide orchestration.

One call validates one template: every enabled rule gets its own
`RuleContext`, program-level handlers run first, then the template body is
walked once for all registered handlers. Nothing is kept between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..config import LintConfig
from ..template_syntax.nodes import Program
from ..types import Diagnostic
from ..types import LineIndex
from .dispatch import DiagnosticCollector
from .dispatch import DiagnosticSink
from .dispatch import ParserServices
from .dispatch import RuleContext
from .dispatch import TemplateBodyVisitor
from .dispatch import register_template_body_visitor
from .registry import get_rule

logger = logging.getLogger(__name__)


def validate_program(
    program: Program,
    source: str,
    config: LintConfig | None = None,
    *,
    sink: DiagnosticSink | None = None,
    template_services: bool = True,
) -> list[Diagnostic]:
    """
    Validate one template tree.

    Args:
        program: Tree produced by the parser for `source`
        source: Template source text; offsets in the tree index into it
        config: Rule selection, defaults to the recommended rules
        sink: Where diagnostics go; a fresh collector if omitted
        template_services: False when the parser can't traverse template
            bodies, which is reported once and skips all checks

    Returns:
        Diagnostics reported through this call, in reporting order
    """
    config = config or LintConfig()
    collector = DiagnosticCollector()
    services = ParserServices(
        template_visitor=TemplateBodyVisitor() if template_services else None
    )

    line_index = LineIndex(source)
    program_handlers = []
    contexts = []
    for name, severity in config.enabled_rules().items():
        rule = get_rule(name)
        context = RuleContext(
            rule=name,
            source=source,
            sink=collector,
            parser_services=services,
            severity=severity,
            line_index=line_index,
        )
        contexts.append(context)
        handlers = rule.create(context) or {}
        if "program" in handlers:
            program_handlers.append(handlers["program"])
    logger.debug(
        "Created %d rules (%d program handlers)",
        len(config.enabled_rules()),
        len(program_handlers),
    )

    if services.template_visitor is None and contexts:
        # Program-level rules never register, so report on their behalf.
        register_template_body_visitor(contexts[0], {})

    if services.template_visitor is not None and program.template_body is not None:
        for handler in program_handlers:
            handler(program)
        services.template_visitor.walk(program.template_body)

    if sink is not None:
        for diagnostic in collector.diagnostics:
            sink.add(diagnostic)
    return collector.diagnostics


def apply_fixes(source: str, diagnostics: Iterable[Diagnostic]) -> str:
    """
    Apply the fixes carried by `diagnostics` to `source`.

    Edits are applied in source order; an edit overlapping one already taken
    is skipped and left for the next validation pass.
    """
    edits = sorted(
        (d.fix for d in diagnostics if d.fix is not None),
        key=lambda edit: edit.range,
    )
    chosen = []
    last_end = -1
    for edit in edits:
        start, end = edit.range
        if start < last_end:
            logger.debug("Skipping overlapping fix at %d-%d", start, end)
            continue
        chosen.append(edit)
        last_end = max(last_end, end)

    for edit in reversed(chosen):
        source = edit.apply(source)
    return source
