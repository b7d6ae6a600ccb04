"""Lookup of every rule by name."""

from __future__ import annotations

from . import colocation
from . import conditionals
from . import iteration
from . import literal
from . import markup
from . import model
from . import parse_errors
from . import root
from .dispatch import Rule

RULES: dict[str, Rule] = {
    rule.name: rule
    for rule in (
        root.TEMPLATE_ROOT_RULE,
        root.ONE_ROOT_RULE,
        iteration.FOR_RULE,
        iteration.FOR_KEY_RULE,
        model.RULE,
        literal.RULE,
        conditionals.IF_RULE,
        conditionals.ELSE_IF_RULE,
        conditionals.ELSE_RULE,
        markup.NO_SELF_CLOSING_RULE,
        markup.END_TAGS_RULE,
        colocation.RULE,
        parse_errors.RULE,
    )
}


def recommended_rule_names() -> list[str]:
    return sorted(name for name, rule in RULES.items() if rule.recommended)


def get_rule(name: str) -> Rule:
    try:
        return RULES[name]
    except KeyError:
        raise ValueError(f"Unknown rule '{name}'") from None
