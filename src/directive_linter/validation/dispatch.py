"""
Rule contexts and template-body traversal.

Rules never walk the tree themselves. Each rule registers handlers keyed by
node kind; `TemplateBodyVisitor.walk()` visits the template body once,
depth-first in document order, and calls every handler registered for the
node being visited.

Handler keys:
- `element`, `start_tag`, `end_tag`, `text`
- `attribute` (plain attributes), `directive` (every directive)
- `directive:<name>` (directives called `<name>`, e.g. `directive:for`)
- `expression_container` (directive values and mustaches)
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Protocol

from ..template_syntax.nodes import DirectiveAttribute
from ..template_syntax.nodes import Element
from ..template_syntax.nodes import EndTag
from ..template_syntax.nodes import ExpressionContainer
from ..template_syntax.nodes import PlainAttribute
from ..template_syntax.nodes import StartTag
from ..template_syntax.nodes import Text
from ..types import SEVERITY_ERROR
from ..types import Diagnostic
from ..types import LineIndex
from ..types import Position
from ..types import SourceLocation
from ..types import TextEdit

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]
FixFunction = Callable[[str], TextEdit]

NODE_EVENTS = frozenset(
    {
        "element",
        "start_tag",
        "end_tag",
        "text",
        "attribute",
        "directive",
        "expression_container",
    }
)
DIRECTIVE_EVENT_PREFIX = "directive:"

MISSING_SERVICES_MESSAGE = (
    "Template body traversal is unavailable; use a parser that provides "
    "template body services."
)


class DiagnosticSink(Protocol):
    def add(self, diagnostic: Diagnostic) -> None: ...


@dataclass
class DiagnosticCollector:
    """Default sink: keeps diagnostics in the order they were reported."""

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def add(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)


def _check_event(event: str) -> None:
    if event in NODE_EVENTS:
        return
    if event.startswith(DIRECTIVE_EVENT_PREFIX) and len(event) > len(
        DIRECTIVE_EVENT_PREFIX
    ):
        return
    raise ValueError(f"Unknown template body event '{event}'")


class TemplateBodyVisitor:
    """Walks one template body, dispatching to registered handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = defaultdict(list)

    def register(self, handlers: dict[str, Handler]) -> None:
        for event, handler in handlers.items():
            _check_event(event)
            self._handlers[event].append(handler)

    @property
    def events(self) -> set[str]:
        return {event for event, handlers in self._handlers.items() if handlers}

    def walk(self, template_body: Element) -> int:
        """Visit every node below (and including) `template_body`; return the visit count."""
        count = self._visit_element(template_body)
        logger.debug("Visited %d template nodes", count)
        return count

    def _emit(self, event: str, node: Any) -> None:
        for handler in self._handlers.get(event, ()):
            handler(node)

    def _visit_element(self, element: Element) -> int:
        count = 1
        self._emit("element", element)
        count += self._visit_start_tag(element.start_tag)
        for child in element.children:
            if isinstance(child, Element):
                count += self._visit_element(child)
            elif isinstance(child, Text):
                self._emit("text", child)
                count += 1
            elif isinstance(child, ExpressionContainer):
                self._emit("expression_container", child)
                count += 1
        if element.end_tag is not None:
            self._visit_end_tag(element.end_tag)
            count += 1
        return count

    def _visit_start_tag(self, start_tag: StartTag) -> int:
        count = 1
        self._emit("start_tag", start_tag)
        for attribute in start_tag.attributes:
            count += 1
            if isinstance(attribute, PlainAttribute):
                self._emit("attribute", attribute)
                continue
            self._emit("directive", attribute)
            self._emit(f"{DIRECTIVE_EVENT_PREFIX}{attribute.key.name}", attribute)
            if attribute.value is not None:
                self._emit("expression_container", attribute.value)
                count += 1
        return count

    def _visit_end_tag(self, end_tag: EndTag) -> None:
        self._emit("end_tag", end_tag)


@dataclass
class ParserServices:
    """
    What the parser offers beyond the tree itself.

    `template_visitor` is None when the parser can't traverse template
    bodies; the first rule asking for it reports that once per template.
    """

    template_visitor: TemplateBodyVisitor | None = field(
        default_factory=TemplateBodyVisitor
    )
    missing_reported: bool = False


@dataclass
class RuleContext:
    """Per-rule view of one template validation."""

    rule: str
    source: str
    sink: DiagnosticSink
    parser_services: ParserServices = field(default_factory=ParserServices)
    severity: str = SEVERITY_ERROR
    line_index: LineIndex | None = field(default=None, repr=False)

    def get_text(self, node: Any) -> str:
        start, end = node.range
        return self.source[start:end]

    def location(self, span: tuple[int, int]) -> SourceLocation:
        if self.line_index is None:
            self.line_index = LineIndex(self.source)
        return SourceLocation.from_range(
            self.source, span[0], span[1], self.line_index
        )

    def report(
        self,
        node: Any,
        message: str,
        data: dict[str, Any] | None = None,
        fix: FixFunction | None = None,
        loc: SourceLocation | None = None,
    ) -> Diagnostic:
        """
        Format `message` with `data` and forward a diagnostic to the sink.

        `fix` is called with the current source and its edit stored on the
        diagnostic; applying it is left to the host.
        """
        data = dict(data or {})
        diagnostic = Diagnostic(
            rule=self.rule,
            message=message.format(**data) if data else message,
            loc=loc if loc is not None else self.location(node.range),
            severity=self.severity,
            message_template=message,
            data=data,
            fix=fix(self.source) if fix is not None else None,
        )
        self.sink.add(diagnostic)
        return diagnostic


def register_template_body_visitor(
    context: RuleContext, handlers: dict[str, Handler]
) -> None:
    """
    Register `handlers` for the template body walk.

    Without template body services nothing is registered and a single
    diagnostic at the start of the document explains why.
    """
    services = context.parser_services
    if services.template_visitor is None:
        if not services.missing_reported:
            services.missing_reported = True
            context.report(
                None,
                MISSING_SERVICES_MESSAGE,
                loc=SourceLocation(start=Position(1, 0), end=Position(1, 0)),
            )
        return
    services.template_visitor.register(handlers)


CATEGORY_POSSIBLE_ERRORS = "Possible Errors"
CATEGORY_BEST_PRACTICES = "Best Practices"

ProgramHandlers = dict[str, Handler]


@dataclass(frozen=True)
class Rule:
    """
    A rule's metadata and its `create(context)` entry point.

    `create` registers template-body handlers through
    `register_template_body_visitor()` and may return program-level handlers
    under the `program` key.
    """

    name: str
    description: str
    create: Callable[[RuleContext], ProgramHandlers | None]
    category: str = CATEGORY_POSSIBLE_ERRORS
    recommended: bool = True
    fixable: bool = False
