"""HTML escaping helpers."""

from __future__ import annotations

import html
import re

_UNESCAPE_TABLE: dict[str, str] = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#x27;": "'",
    "&#39;": "'",
    "&#x2F;": "/",
    "&#x2f;": "/",
}

_UNESCAPE_RE = re.compile("|".join(re.escape(entity) for entity in _UNESCAPE_TABLE))


def escape_html(value: str) -> str:
    """Escape ``& < > " '`` as ``&amp; &lt; &gt; &quot; &#x27;``.

    Not a sanitizer; only these five characters are touched.
    """
    return html.escape(value, quote=True)


def unescape_html(value: str) -> str:
    """Reverse :func:`escape_html`, also accepting ``&#39;`` and ``&#x2F;``.

    Only the entities above are decoded, in a single pass, so
    ``unescape_html(escape_html(s)) == s`` for every *s*.
    """
    return _UNESCAPE_RE.sub(lambda m: _UNESCAPE_TABLE[m.group(0)], value)
