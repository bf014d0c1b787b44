"""incodoc-html: render incodoc documents to HTML.

Renders the incodoc document model (the intermediate tree produced by a
markup parser) to HTML in two variants:

- semantic: native heading, emphasis, list and nav elements
- css: class-annotated containers styled entirely by a stylesheet,
  navigation suppressed

Quick Start:
    >>> from incodoc_html import Doc, Paragraph, render
    >>> print(render(Doc(items=(Paragraph(items=("Hello",)),))), end="")
    <html>
    <body>
    <p>
    Hello
    </p>
    </body>
    </html>

    >>> # Wrap an external parser
    >>> from incodoc_html import IncodocHtml
    >>> converter = IncodocHtml(my_parser, variant="css")  # doctest: +SKIP
    >>> html = converter("# Hello")  # doctest: +SKIP

Installation:
    pip install incodoc-html          # Zero runtime dependencies
"""

from collections.abc import Iterable

from incodoc_html.code import code_block, prune_indentation
from incodoc_html.config import (
    RenderConfig,
    Variant,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from incodoc_html.errors import (
    CodeIndentationError,
    IncodocError,
    RenderError,
    SerializationError,
)
from incodoc_html.nodes import (
    Code,
    CodeBlock,
    CodeIdentError,
    Doc,
    DocItem,
    EmStrength,
    EmType,
    Emphasis,
    Heading,
    HeadingItem,
    Link,
    LinkItem,
    List,
    ListType,
    MText,
    Nav,
    Paragraph,
    ParagraphItem,
    Row,
    Section,
    SectionItem,
    Table,
)
from incodoc_html.renderers.html import HtmlRenderer
from incodoc_html.renderers.html_css import HtmlCssRenderer
from incodoc_html.renderers.protocol import DocParser, DocRenderer
from incodoc_html.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"

_RENDERERS: dict[str, DocRenderer] = {
    "semantic": HtmlRenderer(),
    "css": HtmlCssRenderer(),
}


def get_renderer(variant: Variant | None = None) -> DocRenderer:
    """Return the shared renderer for an output variant.

    Args:
        variant: "semantic" or "css"; None uses the active RenderConfig

    Raises:
        RenderError: If the variant is unknown
    """
    name = variant if variant is not None else get_render_config().variant
    renderer = _RENDERERS.get(name)
    if renderer is None:
        raise RenderError(f"Unknown output variant: {name!r} (expected one of {sorted(_RENDERERS)})")
    return renderer


def render(doc: Doc, *, variant: Variant | None = None) -> str:
    """Render a Doc to HTML.

    Args:
        doc: Document to render
        variant: "semantic" or "css"; None uses the active RenderConfig

    Returns:
        HTML string

    Example:
        >>> render(Doc(items=(Nav(description="Site"),)), variant="css")
        '<html>\\n<body>\\n</body>\\n</html>\\n'
    """
    return get_renderer(variant).render(doc)


def render_css(doc: Doc) -> str:
    """Render a Doc to class-annotated HTML."""
    return get_renderer("css").render(doc)


class IncodocHtml:
    """Markup-to-HTML converter combining an external parser and a renderer.

    The parser is any callable taking markup text and returning a Doc.

    Usage:
        >>> converter = IncodocHtml(parse_md_to_incodoc)  # doctest: +SKIP
        >>> html = converter("# Hello *World*")  # doctest: +SKIP

        >>> # Access the document tree
        >>> doc = converter.parse("# Heading")  # doctest: +SKIP

    Thread Safety:
        Holds only the parser and a stateless renderer. Safe to share when
        the parser is.

    """

    __slots__ = ("_parser", "_renderer")

    def __init__(self, parser: DocParser, *, variant: Variant = "semantic") -> None:
        """Initialize converter.

        Args:
            parser: Callable turning markup text into a Doc
            variant: Output variant, "semantic" or "css"

        Raises:
            RenderError: If the variant is unknown
        """
        self._parser = parser
        self._renderer = get_renderer(variant)

    def __call__(self, source: str) -> str:
        """Parse and render markup in one call."""
        return self._renderer.render(self._parser(source))

    def parse(self, source: str) -> Doc:
        """Parse markup into a Doc using the wrapped parser."""
        return self._parser(source)

    def render(self, doc: Doc) -> str:
        """Render a Doc with this converter's variant."""
        return self._renderer.render(doc)

    def convert_many(self, sources: Iterable[str]) -> list[str]:
        """Parse and render several markup sources, preserving order."""
        return [self(source) for source in sources]


__all__ = [  # noqa: RUF022 (grouped by category for maintainability)
    # Version
    "__version__",
    # Core API
    "render",
    "render_css",
    "get_renderer",
    "IncodocHtml",
    # Document model
    "Doc",
    "DocItem",
    "Nav",
    "Section",
    "SectionItem",
    "Heading",
    "HeadingItem",
    "Paragraph",
    "ParagraphItem",
    "MText",
    "Emphasis",
    "EmType",
    "EmStrength",
    "Link",
    "LinkItem",
    "List",
    "ListType",
    "Table",
    "Row",
    "Code",
    "CodeBlock",
    "CodeIdentError",
    # Code normalisation
    "code_block",
    "prune_indentation",
    # Renderers
    "HtmlRenderer",
    "HtmlCssRenderer",
    "DocRenderer",
    "DocParser",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "IncodocError",
    "CodeIndentationError",
    "RenderError",
    "SerializationError",
]
