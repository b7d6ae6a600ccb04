"""
Directive template linter - static validation of component templates.

Rules inspect a parsed, directive-annotated element tree (conditional
rendering, list iteration, two-way binding, literal-text suppression) and
report misuse the renderer would reject or silently mishandle.
"""

from __future__ import annotations
