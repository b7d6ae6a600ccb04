"""
Centralized hard-coded tag and modifier sets.

Goal:
- Keep renderer-specific name lists out of rule logic.
- Make it obvious where to extend behavior when the host renderer grows new
  elements or modifiers.
"""

from __future__ import annotations

# Non-renderable tags that can't be the template root.
RESERVED_ROOT_TAGS = frozenset({"template", "slot"})

# Modifiers `v-model` understands.
MODEL_MODIFIERS = frozenset({"lazy", "number", "trim"})

# Elements that never produce a value, so `v-model` can't bind to them.
# Compared against the element name as written.
MODEL_UNSUPPORTED_TAGS = frozenset(
    {
        "html", "body", "base", "head", "link", "meta", "style", "title",
        "address", "article", "aside", "footer", "header", "h1", "h2", "h3",
        "h4", "h5", "h6", "hgroup", "nav", "section", "div", "dd", "dl", "dt",
        "figcaption", "figure", "hr", "img", "li", "main", "ol", "p", "pre",
        "ul", "a", "b", "abbr", "bdi", "bdo", "br", "cite", "code", "data",
        "dfn", "em", "i", "kbd", "mark", "q", "rp", "rt", "rtc", "ruby", "s",
        "samp", "small", "span", "strong", "sub", "sup", "time", "u", "var",
        "wbr", "area", "audio", "map", "track", "video", "embed", "object",
        "param", "source", "canvas", "script", "noscript", "del", "ins",
        "caption", "col", "colgroup", "table", "thead", "tbody", "td", "th",
        "tr", "button", "datalist", "fieldset", "form", "label", "legend",
        "meter", "optgroup", "option", "output", "progress", "details",
        "dialog", "menu", "menuitem", "summary", "content", "element",
        "shadow", "template", "svg", "animate", "circle", "clippath",
        "cursor", "defs", "desc", "ellipse", "filter", "font-face",
        "foreignObject", "g", "glyph", "image", "line", "marker", "mask",
        "missing-glyph", "path", "pattern", "polygon", "polyline", "rect",
        "switch", "symbol", "text", "textpath", "tspan", "use", "view",
    }
)  # fmt: skip
