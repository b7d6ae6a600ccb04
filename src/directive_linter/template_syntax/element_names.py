"""
Element name classification.

HTML and void names compare case-insensitively, SVG and MathML names
case-sensitively (SVG keeps camelCase names such as `foreignObject`).
"""

from __future__ import annotations

from .nodes import SVG_NAMESPACE
from .nodes import Element

HTML_ELEMENT_NAMES = frozenset(
    {
        "a", "abbr", "address", "area", "article", "aside", "audio", "b",
        "base", "bdi", "bdo", "blockquote", "body", "br", "button", "canvas",
        "caption", "cite", "code", "col", "colgroup", "content", "data",
        "datalist", "dd", "del", "details", "dfn", "dialog", "div", "dl", "dt",
        "element", "em", "embed", "fieldset", "figcaption", "figure", "footer",
        "form", "h1", "h2", "h3", "h4", "h5", "h6", "head", "header", "hgroup",
        "hr", "html", "i", "iframe", "img", "input", "ins", "kbd", "label",
        "legend", "li", "link", "main", "map", "mark", "math", "menu",
        "menuitem", "meta", "meter", "nav", "noscript", "object", "ol",
        "optgroup", "option", "output", "p", "param", "picture", "pre",
        "progress", "q", "rb", "rp", "rt", "rtc", "ruby", "s", "samp",
        "script", "section", "select", "shadow", "slot", "small", "source",
        "span", "strong", "style", "sub", "summary", "sup", "svg", "table",
        "tbody", "td", "template", "textarea", "tfoot", "th", "thead", "time",
        "title", "tr", "track", "u", "ul", "var", "video", "wbr",
    }
)  # fmt: skip

SVG_ELEMENT_NAMES = frozenset(
    {
        "a", "animate", "animateMotion", "animateTransform", "circle",
        "clipPath", "cursor", "defs", "desc", "discard", "ellipse", "feBlend",
        "feColorMatrix", "feComponentTransfer", "feComposite",
        "feConvolveMatrix", "feDiffuseLighting", "feDisplacementMap",
        "feDistantLight", "feDropShadow", "feFlood", "feFuncA", "feFuncB",
        "feFuncG", "feFuncR", "feGaussianBlur", "feImage", "feMerge",
        "feMergeNode", "feMorphology", "feOffset", "fePointLight",
        "feSpecularLighting", "feSpotLight", "feTile", "feTurbulence",
        "filter", "font-face", "foreignObject", "g", "glyph", "image", "line",
        "linearGradient", "marker", "mask", "metadata", "missing-glyph",
        "mpath", "path", "pattern", "polygon", "polyline", "radialGradient",
        "rect", "set", "stop", "style", "svg", "switch", "symbol", "text",
        "textPath", "title", "tspan", "use", "view",
    }
)  # fmt: skip

MATHML_ELEMENT_NAMES = frozenset(
    {
        "annotation", "annotation-xml", "maction", "math", "merror", "mfrac",
        "mi", "mmultiscripts", "mn", "mo", "mover", "mpadded", "mphantom",
        "mprescripts", "mroot", "mrow", "ms", "mspace", "msqrt", "mstyle",
        "msub", "msubsup", "msup", "mtable", "mtd", "mtext", "mtr", "munder",
        "munderover", "semantics",
    }
)  # fmt: skip

VOID_ELEMENT_NAMES = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input", "keygen",
        "link", "menuitem", "meta", "param", "source", "track", "wbr",
    }
)  # fmt: skip


def is_html_element_name(name: str) -> bool:
    return name.lower() in HTML_ELEMENT_NAMES


def is_svg_element_name(name: str) -> bool:
    return name in SVG_ELEMENT_NAMES


def is_mathml_element_name(name: str) -> bool:
    return name in MATHML_ELEMENT_NAMES


def is_void_element_name(name: str) -> bool:
    return name.lower() in VOID_ELEMENT_NAMES


def is_reserved_tag_name(name: str) -> bool:
    """True for names the renderer treats as native elements, not components."""
    return is_html_element_name(name) or is_svg_element_name(name)


def is_svg_element(element: Element) -> bool:
    """
    Elements the parser placed in the SVG namespace.

    Names SVG shares with HTML (`a`, `title`, `style`) are ambiguous, so the
    name alone never decides.
    """
    return element.namespace == SVG_NAMESPACE
