from __future__ import annotations

import pytest

from directive_linter.validation.root import MESSAGE_DISALLOWED_TAG
from directive_linter.validation.root import MESSAGE_EXACTLY_ONE
from directive_linter.validation.root import MESSAGE_NO_FOR
from directive_linter.validation.root import MESSAGE_REQUIRES_ELSE
from directive_linter.validation.root import MESSAGE_TEXT

from ._template_builders import directive
from ._template_builders import el
from ._template_builders import empty_program
from ._template_builders import lint
from ._template_builders import messages
from ._template_builders import mustache
from ._template_builders import template
from ._template_builders import text

TEMPLATE_ROOT = "no-invalid-template-root"
ONE_ROOT = "require-one-root-element"


def _if(value="a"):
    return directive("if", value)


def _else_if(value="b"):
    return directive("else-if", value)


def _else():
    return directive("else")


TEMPLATE_ROOT_CASES = [
    (template(el("div", text("abc"))), [], "single element"),
    (
        template(text("\n    "), el("div", text("abc")), text("\n")),
        [],
        "whitespace around the root",
    ),
    (template(text("\n")), [MESSAGE_EXACTLY_ONE], "whitespace only"),
    (template(), [MESSAGE_EXACTLY_ONE], "empty body"),
    (template(el("div"), el("div")), [MESSAGE_EXACTLY_ONE], "two elements"),
    (
        template(text("\n    "), el("div"), text("\n    "), el("div"), text("\n")),
        [MESSAGE_EXACTLY_ONE],
        "two elements on separate lines",
    ),
    (template(mustache("a b c")), [MESSAGE_TEXT], "mustache only"),
    (template(el("div"), text("aaaaaa")), [MESSAGE_TEXT], "text after root"),
    (template(text("aaaaaa"), el("div")), [MESSAGE_TEXT], "text before root"),
    (
        template(text("aaaaaa"), el("div"), el("div")),
        [MESSAGE_TEXT],
        "text wins over extra elements",
    ),
    (
        template(el("template")),
        [MESSAGE_DISALLOWED_TAG.format(name="template")],
        "template root",
    ),
    (
        template(el("slot")),
        [MESSAGE_DISALLOWED_TAG.format(name="slot")],
        "slot root",
    ),
    (
        template(el("div", attrs=[_if()]), el("div", attrs=[_else()])),
        [],
        "if/else chain",
    ),
    (
        template(
            el("div", attrs=[_if()]),
            el("div", attrs=[_else_if()]),
            el("div", attrs=[_else_if("c")]),
            el("div", attrs=[_else()]),
        ),
        [],
        "if/else-if/else-if/else chain",
    ),
    (
        template(el("div", attrs=[_if()])),
        [MESSAGE_REQUIRES_ELSE],
        "lone if",
    ),
    (
        template(el("div", attrs=[_if()]), el("div", attrs=[_else_if()])),
        [MESSAGE_REQUIRES_ELSE],
        "if/else-if without else",
    ),
    (
        template(
            el("div", attrs=[_if()]),
            el("div", attrs=[_else()]),
            el("div", attrs=[_else_if()]),
        ),
        [MESSAGE_EXACTLY_ONE],
        "else-if after a closed chain",
    ),
    (
        template(
            el("div", attrs=[_if()]),
            el("div", attrs=[_else()]),
            el("div", attrs=[_else()]),
        ),
        [MESSAGE_EXACTLY_ONE],
        "second else",
    ),
    (
        template(el("div"), el("div", attrs=[_else()])),
        [MESSAGE_EXACTLY_ONE],
        "else without if root",
    ),
    (
        template(el("div"), el("div", attrs=[_else_if()])),
        [MESSAGE_EXACTLY_ONE],
        "else-if without if root",
    ),
    (
        template(el("div", attrs=[directive("for", "x in list")])),
        [MESSAGE_NO_FOR],
        "for on root",
    ),
    (
        template(el("template", attrs=[_if(), directive("for", "x in list")])),
        [
            MESSAGE_DISALLOWED_TAG.format(name="template"),
            MESSAGE_REQUIRES_ELSE,
            MESSAGE_NO_FOR,
        ],
        "attribute checks are independent",
    ),
]


@pytest.mark.parametrize(
    "built,expected,description",
    TEMPLATE_ROOT_CASES,
    ids=[case[2] for case in TEMPLATE_ROOT_CASES],
)
def test_template_root(built, expected, description):
    assert messages(lint(built, TEMPLATE_ROOT)) == expected, description


@pytest.mark.parametrize("name", ["div", "my-component", "section", "svg"])
@pytest.mark.parametrize("padding", ["", " ", "\n  ", "\t\n"])
def test_single_element_is_always_valid(name, padding):
    children = [el(name)]
    if padding:
        children = [text(padding), el(name), text(padding)]
    built = template(*children)
    assert lint(built, TEMPLATE_ROOT) == []
    assert lint(built, ONE_ROOT) == []


@pytest.mark.parametrize("count", [2, 3, 5])
def test_extra_elements_without_conditional_root(count):
    built = template(*[el("div") for _ in range(count)])
    assert messages(lint(built, TEMPLATE_ROOT)) == [MESSAGE_EXACTLY_ONE]


def test_structural_report_is_at_template_body():
    built = template(el("div"), el("span"))
    [diagnostic] = lint(built, TEMPLATE_ROOT)
    assert diagnostic.line == 1
    assert diagnostic.column == 0
    assert diagnostic.rule == TEMPLATE_ROOT


def test_missing_template_body_is_skipped():
    assert lint(empty_program(), TEMPLATE_ROOT, ONE_ROOT) == []


ONE_ROOT_CASES = [
    (template(el("div")), [], "single element"),
    (template(), [MESSAGE_EXACTLY_ONE], "empty body"),
    (template(text("\n")), [MESSAGE_EXACTLY_ONE], "whitespace only"),
    (template(el("div"), el("div")), [MESSAGE_EXACTLY_ONE], "two elements"),
    (template(mustache("a b c")), [MESSAGE_TEXT], "mustache only"),
    (template(el("div"), text("aaaaaa")), [MESSAGE_TEXT], "text after root"),
    (
        template(el("div", attrs=[_if()]), el("div", attrs=[_else()])),
        [MESSAGE_EXACTLY_ONE],
        "conditional chains count every element",
    ),
    (template(el("template")), [], "tag is not checked"),
    (
        template(el("div", attrs=[directive("for", "x in list")])),
        [],
        "directives are not checked",
    ),
]


@pytest.mark.parametrize(
    "built,expected,description",
    ONE_ROOT_CASES,
    ids=[case[2] for case in ONE_ROOT_CASES],
)
def test_one_root_element(built, expected, description):
    assert messages(lint(built, ONE_ROOT)) == expected, description
