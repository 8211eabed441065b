"""
Noteful API - XSS Sanitizer
=============================

What:  Cleans user-supplied text before it is returned in a response.
How:   Scans the text for tags and decides per tag; the text in between is
       copied through untouched (no HTML re-serialization).
       - Tags outside the allow-list are entity-escaped, not removed:
           '<script>alert(1)</script>' → '&lt;script&gt;alert(1)&lt;/script&gt;'
       - Allowed tags keep only their allowed attributes. Each opening tag
         is filtered on its own by bleach (attribute allow-list, URL
         protocols), so unsafe handlers and javascript: links are dropped:
           '<img src="x.png" onerror="...">' → '<img src="x.png">'
       - Allowed markup ('<strong>', '<em>', links, images) passes through,
         balanced or not.
       - Comments are removed. A stray '<' or '>' becomes '&lt;' / '&gt;'.
       - Everything else ('&', quotes, whitespace) is left as typed:
           'R&D <b>x' → 'R&D <b>x'
Who:   Called by the serializers in noteful.schemas for every free-text field.

Stored values are never modified; sanitizing happens on the way out.
"""

import re
from typing import Dict, Optional

import bleach

ALLOWED_TAGS = frozenset({
    "a", "abbr", "address", "article", "aside", "b", "bdi", "bdo", "big",
    "blockquote", "br", "caption", "center", "cite", "code", "col",
    "colgroup", "dd", "del", "details", "div", "dl", "dt", "em",
    "figcaption", "figure", "font", "footer", "h1", "h2", "h3", "h4", "h5",
    "h6", "header", "hr", "i", "img", "ins", "kbd", "li", "mark", "nav",
    "ol", "p", "pre", "s", "section", "small", "span", "strike", "strong",
    "sub", "summary", "sup", "table", "tbody", "td", "tfoot", "th", "thead",
    "tr", "tt", "u", "ul",
})

_TABLE_CELL_ATTRIBUTES = ["width", "rowspan", "colspan", "align", "valign"]

ALLOWED_ATTRIBUTES = {
    "a": ["target", "href", "title"],
    "abbr": ["title"],
    "bdi": ["dir"],
    "bdo": ["dir"],
    "blockquote": ["cite"],
    "col": ["align", "valign", "span", "width"],
    "colgroup": ["align", "valign", "span", "width"],
    "del": ["datetime"],
    "details": ["open"],
    "font": ["color", "size", "face"],
    "img": ["src", "alt", "title", "width", "height"],
    "ins": ["datetime"],
    "table": ["width", "border", "align", "valign"],
    "td": _TABLE_CELL_ATTRIBUTES,
    "th": _TABLE_CELL_ATTRIBUTES,
    "tr": ["rowspan", "align", "valign"],
}

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)
_TAG = re.compile(r"<[^<>]*>")
_TAG_PARTS = re.compile(r"<(/)?([a-zA-Z][a-zA-Z0-9]*)(?=[\s/>])(.*?)(/)?\s*>\Z", re.DOTALL)

# bleach filters attributes on a neutral <span> carrying the real tag's
# allow-list; table tags would be dropped by the parser outside a <table>.
_CARRIER = "span"
_CARRIER_OPEN = f"<{_CARRIER}"
_CARRIER_CLOSE = f"></{_CARRIER}>"

_attribute_cleaners: Dict[str, bleach.Cleaner] = {
    tag: bleach.Cleaner(
        tags={_CARRIER},
        attributes={_CARRIER: list(allowed)},
        protocols=ALLOWED_PROTOCOLS,
        strip=False,
        strip_comments=True,
    )
    for tag, allowed in ALLOWED_ATTRIBUTES.items()
}


def _escape_markup(text: str) -> str:
    return text.replace("<", "&lt;").replace(">", "&gt;")


def _filter_attributes(tag: str, attributes: str) -> Optional[str]:
    """
    Allowed attributes of `tag`, serialized (' src="x.png"'), or None when
    bleach did not return the carrier element.
    """
    cleaner = _attribute_cleaners.get(tag)
    if cleaner is None or not attributes.strip():
        return ""
    cleaned = cleaner.clean(f"{_CARRIER_OPEN}{attributes}>")
    if not (cleaned.startswith(_CARRIER_OPEN) and cleaned.endswith(_CARRIER_CLOSE)):
        return None
    return cleaned[len(_CARRIER_OPEN):-len(_CARRIER_CLOSE)]


def _sanitize_tag(tag_text: str) -> str:
    parts = _TAG_PARTS.match(tag_text)
    if parts is None:
        return _escape_markup(tag_text)

    closing, name, attributes, self_closing = parts.groups()
    name = name.lower()
    if name not in ALLOWED_TAGS:
        return _escape_markup(tag_text)
    if closing:
        return f"</{name}>"

    kept = _filter_attributes(name, attributes)
    if kept is None:
        return _escape_markup(tag_text)
    return f"<{name}{kept}{' /' if self_closing else ''}>"


def sanitize_text(value: Optional[str]) -> Optional[str]:
    """Return `value` with unsafe markup neutralized; None passes through."""
    if value is None:
        return None

    text = _COMMENT.sub("", value)
    pieces = []
    position = 0
    for match in _TAG.finditer(text):
        pieces.append(_escape_markup(text[position:match.start()]))
        pieces.append(_sanitize_tag(match.group()))
        position = match.end()
    pieces.append(_escape_markup(text[position:]))
    return "".join(pieces)
