"""
Rule configuration.

Loading configuration files is the host's job; hosts hand the parsed mapping
to `LintConfig.model_validate()` and get rule names and severities checked.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from .types import SEVERITY_ERROR
from .types import SEVERITY_OFF
from .validation.registry import RULES
from .validation.registry import recommended_rule_names

Severity = Literal["off", "warn", "error"]


class LintConfig(BaseModel):
    """
    Which rules run, and at what severity.

    With `extends_recommended`, every recommended rule runs as an error
    unless `rules` says otherwise; rules set to `off` don't run at all.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    extends_recommended: bool = True
    rules: dict[str, Severity] = Field(default_factory=dict)

    @field_validator("rules")
    @classmethod
    def _known_rules(cls, value: dict[str, Severity]) -> dict[str, Severity]:
        unknown = sorted(name for name in value if name not in RULES)
        if unknown:
            raise ValueError(f"Unknown rule(s): {', '.join(unknown)}")
        return value

    @classmethod
    def all_rules(cls, severity: Severity = "error") -> LintConfig:
        return cls(
            extends_recommended=False,
            rules={name: severity for name in RULES},
        )

    @classmethod
    def only(cls, *names: str, severity: Severity = "error") -> LintConfig:
        return cls(extends_recommended=False, rules={name: severity for name in names})

    def enabled_rules(self) -> dict[str, str]:
        """Rule name to severity, in registry order, without `off` rules."""
        selected: dict[str, str] = {}
        if self.extends_recommended:
            selected = {name: SEVERITY_ERROR for name in recommended_rule_names()}
        selected.update(self.rules)
        return {
            name: selected[name]
            for name in RULES
            if selected.get(name, SEVERITY_OFF) != SEVERITY_OFF
        }
