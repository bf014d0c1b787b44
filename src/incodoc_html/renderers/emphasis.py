"""Emphasis matrix shared by every HTML renderer.

The (EmType, EmStrength) pair maps to one of six fixed wrapper pairs. The
same table serves paragraph-level, heading-level and link-label emphasis.

"""

from incodoc_html.nodes import EmStrength, EmType, Emphasis
from incodoc_html.stringbuilder import StringBuilder

EMPHASIS_TAGS: dict[tuple[EmType, EmStrength], tuple[str, str]] = {
    (EmType.EMPHASIS, EmStrength.LIGHT): ("<em>", "</em>"),
    (EmType.EMPHASIS, EmStrength.MEDIUM): ("<strong>", "</strong>"),
    (EmType.EMPHASIS, EmStrength.STRONG): ("<mark>", "</mark>"),
    (EmType.DEEMPHASIS, EmStrength.LIGHT): ('<span class="light-em">', "</span>"),
    (EmType.DEEMPHASIS, EmStrength.MEDIUM): ('<span class="medium-em">', "</span>"),
    (EmType.DEEMPHASIS, EmStrength.STRONG): ('<span class="strong-em">', "</span>"),
}


def render_emphasis(em: Emphasis, sb: StringBuilder) -> None:
    """Append an emphasis span. Text is emitted as-is."""
    start, end = EMPHASIS_TAGS[(em.etype, em.strength)]
    sb.append(start).append(em.text).append(end)
