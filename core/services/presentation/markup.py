"""Render the lightweight markup used in structured answers."""
import re
from typing import Optional

from markupsafe import Markup, escape

EMPHASIS_PATTERN = re.compile(r'\*\*(.*?)\*\*')
# URL may hold one level of balanced parentheses, e.g. .../wiki/Foo_(bar);
# deeper nesting ends the link early
LINK_PATTERN = re.compile(r'\[(.*?)\]\(((?:[^()]|\([^()]*\))*)\)')
ALLOWED_LINK_SCHEMES = ("http://", "https://")


def _render_link(match: "re.Match[str]") -> str:
    label, url = match.group(1), match.group(2)
    if not url.strip().lower().startswith(ALLOWED_LINK_SCHEMES):
        return match.group(0)
    return (
        f'<a href="{url.strip()}" target="_blank" rel="noopener noreferrer" '
        f'class="source-link">{label}</a>'
    )


def format_markdown(text: Optional[str]) -> Markup:
    """
    Convert ``**text**`` to a highlighted span and ``[label](url)`` to a link.

    The input is HTML-escaped first so tags in model output render as text.
    Only http(s) URLs become links, opening in a new tab; any other scheme
    (javascript:, data:, ...) is left as plain ``[label](url)`` text.
    """
    if not text:
        return Markup("")

    html = str(escape(text))
    html = EMPHASIS_PATTERN.sub(r'<strong class="highlight">\1</strong>', html)
    html = LINK_PATTERN.sub(_render_link, html)
    return Markup(html)
