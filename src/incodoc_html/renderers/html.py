"""Semantic HTML renderer using the StringBuilder pattern.

Walks a ``Doc`` in document order (pre-order, left to right) and appends
markup to a single StringBuilder owned by the render() call.

No escaping is performed anywhere: text, URLs, tags and code reach the
output exactly as they appear in the tree.

Thread Safety:
The renderer holds no per-render state. A single HtmlRenderer instance can
be shared between threads and render() called concurrently.
"""

import logging

from incodoc_html.errors import RenderError
from incodoc_html.nodes import (
    Code,
    CodeBlock,
    CodeIdentError,
    Doc,
    DocItem,
    Emphasis,
    Heading,
    HeadingItem,
    Link,
    List,
    ListType,
    MText,
    Nav,
    Paragraph,
    ParagraphItem,
    Section,
    SectionItem,
    Table,
)
from incodoc_html.renderers.emphasis import render_emphasis
from incodoc_html.stringbuilder import StringBuilder

logger = logging.getLogger(__name__)

CODE_INDENTATION_ERROR_MARKER = (
    '<span class="code-indentation-error">incodoc code indentation error</span>'
)

# Tags of list items that render as completed tasks
CHECKED_TAG = "checked"


def heading_size(level: int) -> int:
    """Map a 0-based heading level to an HTML heading size.

    Levels 0-4 map to h1-h5; every deeper level collapses onto h6.

    """
    return level + 1 if level < 5 else 6


def class_list(tags: tuple[str, ...]) -> str:
    """Join tags for a class attribute. Every tag keeps its trailing space."""
    return "".join(f"{tag} " for tag in tags)


class HtmlRenderer:
    """Render a Doc to semantic HTML.

    Navigation trees become <nav> elements, emphasis uses <em>/<strong>/<mark>,
    lists, tables and code blocks use their native elements.

    Usage:
        >>> from incodoc_html.nodes import Doc, Paragraph
        >>> HtmlRenderer().render(Doc(items=(Paragraph(items=("Hello",)),)))
        '<html>\\n<body>\\n<p>\\nHello\\n</p>\\n</body>\\n</html>\\n'

    """

    __slots__ = ()

    def render(self, doc: Doc) -> str:
        """Render document to an HTML string.

        Args:
            doc: Document root

        Returns:
            HTML string wrapped in <html> and <body>

        Raises:
            RenderError: If the tree holds an item outside the node set
        """
        sb = StringBuilder()
        sb.append("<html>\n")
        sb.append("<body>\n")
        for item in doc.items:
            self._render_doc_item(item, sb)
        sb.append("</body>\n")
        sb.append("</html>\n")
        return sb.build()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_doc_item(self, item: DocItem, sb: StringBuilder) -> None:
        match item:
            case Nav():
                self._render_nav(item, sb)
            case Paragraph():
                self._render_paragraph(item, sb)
            case Section():
                self._render_section(item, sb)
            case _:
                raise RenderError(f"Unexpected document item: {type(item).__name__}")

    def _render_nav(self, nav: Nav, sb: StringBuilder) -> None:
        """Render navigation tree, sub-navs nested inside their parent."""
        sb.append("<nav>\n")
        if nav.description:
            sb.append("<header>").append(nav.description).append("</header>\n")
        for link in nav.links:
            self._render_link(link, sb)
            sb.append("\n")
        for sub in nav.subs:
            self._render_nav(sub, sb)
        sb.append("</nav>\n")

    def _render_paragraph(self, par: Paragraph, sb: StringBuilder) -> None:
        sb.append("<p>\n")
        for item in par.items:
            self._render_paragraph_item(item, sb)
        sb.append("\n</p>\n")

    def _render_section(self, section: Section, sb: StringBuilder) -> None:
        sb.append("<section>\n")
        self._render_heading(section.heading, sb)
        for item in section.items:
            self._render_section_item(item, sb)
        sb.append("</section>\n")

    def _render_section_item(self, item: SectionItem, sb: StringBuilder) -> None:
        match item:
            case Paragraph():
                self._render_paragraph(item, sb)
            case Section():
                self._render_section(item, sb)
            case _:
                raise RenderError(f"Unexpected section item: {type(item).__name__}")

    def _render_heading(self, heading: Heading, sb: StringBuilder) -> None:
        size = heading_size(heading.level)
        sb.append(f"<h{size}>\n")
        self._render_spans(heading.items, sb)
        sb.append(f"\n</h{size}>\n")

    def _render_list(self, lst: List, sb: StringBuilder) -> None:
        """Render list; checked lists are <ul> with a marker class."""
        tag = "ol" if lst.ltype is ListType.DISTINCT else "ul"
        if lst.ltype is ListType.CHECKED:
            sb.append(f'<{tag} class="checked-list">\n')
        else:
            sb.append(f"<{tag}>\n")

        for par in lst.items:
            if CHECKED_TAG in par.tags:
                sb.append('<li class="checked-list-item">\n')
            else:
                sb.append("<li>\n")
            self._render_paragraph(par, sb)
            sb.append("</li>\n")

        sb.append(f"</{tag}>\n")

    def _render_table(self, table: Table, sb: StringBuilder) -> None:
        sb.append("<table>\n")
        for row in table.rows:
            sb.append("<tr>\n")
            tag = "th" if row.is_header else "td"
            for cell in row.items:
                sb.append(f"<{tag}>\n")
                self._render_paragraph(cell, sb)
                sb.append(f"</{tag}>\n")
            sb.append("</tr>\n")
        sb.append("</table>\n")

    def _render_code(self, code: Code, sb: StringBuilder) -> None:
        """Render code block verbatim, or the marker for an indentation error."""
        match code:
            case CodeBlock():
                sb.append(f'<pre><code lang="{code.language}">\n')
                sb.append(code.code)
                sb.append("\n</code></pre>\n")
            case CodeIdentError():
                logger.debug("Rendering code indentation error marker")
                sb.append(CODE_INDENTATION_ERROR_MARKER)

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_paragraph_item(self, item: ParagraphItem, sb: StringBuilder) -> None:
        match item:
            case str():
                sb.append(item)
            case MText():
                self._render_mtext(item, sb)
            case Emphasis():
                render_emphasis(item, sb)
            case Link():
                self._render_link(item, sb)
            case CodeBlock() | CodeIdentError():
                self._render_code(item, sb)
            case List():
                self._render_list(item, sb)
            case Table():
                self._render_table(item, sb)
            case _:
                raise RenderError(f"Unexpected paragraph item: {type(item).__name__}")

    def _render_mtext(self, mtext: MText, sb: StringBuilder) -> None:
        """Render tagged text as a span classed with its tags."""
        sb.append(f'<span class="{class_list(mtext.tags)}">')
        sb.append(mtext.text)
        sb.append("</span>")

    def _render_link(self, link: Link, sb: StringBuilder) -> None:
        """Render link; opens in a new tab, class attribute only when tagged."""
        sb.append(f'<a href="{link.url}" target="_blank"')
        if link.tags:
            sb.append(f' class="{class_list(link.tags)}"')
        sb.append(">")
        self._render_spans(link.items, sb)
        sb.append("</a>")

    def _render_spans(self, items: tuple[HeadingItem, ...], sb: StringBuilder) -> None:
        """Render plain strings and emphasis (heading and link content)."""
        for item in items:
            match item:
                case str():
                    sb.append(item)
                case Emphasis():
                    render_emphasis(item, sb)
                case _:
                    raise RenderError(f"Unexpected text span: {type(item).__name__}")
