from __future__ import annotations

import pytest

from directive_linter.template_syntax.expressions import Identifier
from directive_linter.template_syntax.expressions import OtherExpression
from directive_linter.template_syntax.iteration import parse_iteration_expression

from ._template_builders import attr
from ._template_builders import directive
from ._template_builders import el
from ._template_builders import key
from ._template_builders import lint
from ._template_builders import messages
from ._template_builders import template

FOR = "no-invalid-v-for"
FOR_KEY = "require-v-for-key"

MISSING_KEY = "'v-for' directives on custom elements require 'v-bind:key' directives."
NO_ARGUMENT = "'v-for' directives require no argument."
NO_MODIFIER = "'v-for' directives require no modifier."
NO_VALUE = "'v-for' directives require that attribute value."
SPECIAL_SYNTAX = (
    "'v-for' directives require the special syntax '<alias> in <expression>'."
)
ROOT_FOR = "The root element can't have 'v-for' directives."


def nested(name: str, *attrs) -> object:
    """`name` inside a wrapper so it isn't the template root."""
    return template(el("div", el(name, attrs=list(attrs))))


FOR_CASES = [
    (nested("li", directive("for", "item in list")), [], "native element"),
    (nested("li", directive("for", "item of list")), [], "of instead of in"),
    (
        nested("li", directive("for", "(item, key, index) in list")),
        [],
        "alias, key and index",
    ),
    (nested("li", directive("for", "(item, i) in list")), [], "alias and index"),
    (nested("template", directive("for", "x in list")), [], "template grouping tag"),
    (
        nested("my-item", directive("for", "item in list")),
        [MISSING_KEY],
        "custom element without key",
    ),
    (
        nested("my-item", directive("for", "item in list"), key("item.id")),
        [],
        "custom element with key",
    ),
    (
        template(el("div", attrs=[directive("for", "x in list")])),
        [ROOT_FOR],
        "root element",
    ),
    (
        nested("li", directive("for", "x in list", argument="a")),
        [NO_ARGUMENT],
        "argument",
    ),
    (
        nested("li", directive("for", "x in list", modifiers=("m",))),
        [NO_MODIFIER],
        "modifier",
    ),
    (nested("li", directive("for")), [NO_VALUE], "no value"),
    (nested("li", directive("for", "")), [NO_VALUE], "empty value"),
    (
        nested("li", directive("for", "x in", syntax_error="Unexpected end")),
        [],
        "syntax errors are left to no-parsing-error",
    ),
    (nested("li", directive("for", "items")), [SPECIAL_SYNTAX], "not an iteration"),
    (nested("li", directive("for", "in list")), ["Invalid alias ''."], "empty alias"),
    (
        nested("li", directive("for", "(item, , index) in list")),
        ["Invalid alias ''."],
        "empty key",
    ),
    (
        nested("li", directive("for", "(item, a.b) in list")),
        ["Invalid alias 'a.b'."],
        "key is not an identifier",
    ),
    (
        nested("li", directive("for", "(item, key, 1) in list")),
        ["Invalid alias '1'."],
        "index is not an identifier",
    ),
    (
        nested("my-item", directive("for", argument="a", modifiers=("b",))),
        [MISSING_KEY, NO_ARGUMENT, NO_MODIFIER, NO_VALUE],
        "independent checks all report",
    ),
]


@pytest.mark.parametrize(
    "built,expected,description",
    FOR_CASES,
    ids=[case[2] for case in FOR_CASES],
)
def test_invalid_v_for(built, expected, description):
    assert messages(lint(built, FOR)) == expected, description


def test_missing_key_reported_once_and_removed_by_key():
    without_key = nested("todo-item", directive("for", "todo in todos"))
    assert messages(lint(without_key, FOR)).count(MISSING_KEY) == 1

    with_key = nested("todo-item", directive("for", "todo in todos"), key("todo.id"))
    assert MISSING_KEY not in messages(lint(with_key, FOR))


def test_invalid_alias_points_at_the_alias():
    built = nested("li", directive("for", "(item, 1) in list"))
    [diagnostic] = lint(built, FOR)
    assert built.source[diagnostic.column :].startswith("1) in list")


FOR_KEY_CASES = [
    (
        nested("li", directive("for", "item in list")),
        ["'v-for' directives require 'v-bind:key' directives."],
        "native element without key",
    ),
    (nested("li", directive("for", "item in list"), key("item.id")), [], "keyed"),
    (
        nested("li", directive("for", "(item, i) in list"), key("i")),
        [],
        "keyed by index",
    ),
    (
        nested("li", directive("for", "item in list"), key("other")),
        [
            "Expected 'v-bind:key' directive to use the variables which are "
            "defined by the 'v-for' directive."
        ],
        "key ignores the iteration",
    ),
    (nested("my-item", directive("for", "item in list")), [], "custom component"),
    (
        nested("div", attr("is", "my-item"), directive("for", "item in list")),
        [],
        "native tag swapped with is",
    ),
    (
        nested(
            "div",
            directive("bind", "kind", argument="is"),
            directive("for", "item in list"),
        ),
        [],
        "native tag swapped with bound is",
    ),
    (nested("li", key("x")), [], "no v-for"),
]


@pytest.mark.parametrize(
    "built,expected,description",
    FOR_KEY_CASES,
    ids=[case[2] for case in FOR_KEY_CASES],
)
def test_require_v_for_key(built, expected, description):
    assert messages(lint(built, FOR_KEY)) == expected, description


class TestParseIterationExpression:
    def test_alias_key_index(self):
        expression = parse_iteration_expression("(item, key, index) in list")
        assert expression is not None
        assert [alias.name for alias in expression.left] == ["item", "key", "index"]
        assert isinstance(expression.right, Identifier)
        assert expression.right.name == "list"

    def test_unparenthesized_aliases(self):
        expression = parse_iteration_expression("item, index in list")
        assert [alias.name for alias in expression.left] == ["item", "index"]

    def test_empty_alias(self):
        expression = parse_iteration_expression("in list")
        assert expression is not None
        assert expression.left == [None]

    def test_empty_key(self):
        expression = parse_iteration_expression("(a, , c) in list")
        assert expression.left[1] is None
        assert expression.left[2].name == "c"

    def test_destructuring_alias(self):
        expression = parse_iteration_expression("({ id, name }, index) in list")
        assert isinstance(expression.left[0], OtherExpression)
        assert expression.left[0].text == "{ id, name }"
        assert expression.left[1].name == "index"

    def test_iterable_keeps_later_in(self):
        expression = parse_iteration_expression("x in y in z")
        assert expression.left[0].name == "x"
        assert expression.right.text == "y in z"

    def test_member_iterable(self):
        expression = parse_iteration_expression("child in item.children")
        assert expression.right.property.name == "children"

    @pytest.mark.parametrize("value", ["items", "", "x in", "index"])
    def test_not_an_iteration(self, value):
        assert parse_iteration_expression(value) is None

    def test_ranges_are_offset(self):
        source = 'v-for="(a, b) in list"'
        offset = source.index("(")
        expression = parse_iteration_expression("(a, b) in list", offset)
        first, second = expression.left
        assert source[first.range[0] : first.range[1]] == "a"
        assert source[second.range[0] : second.range[1]] == "b"
        assert source[expression.right.range[0] : expression.right.range[1]] == "list"
