"""Protocols at the renderer boundary.

``DocRenderer`` is anything with ``render(doc) -> str``; both built-in
renderers conform. ``DocParser`` is the upstream markup parser, consumed as
a pure function from raw markup text to a ``Doc``.

Example:
    from incodoc_html.renderers.protocol import DocRenderer

    def render_page(renderer: DocRenderer, doc: Doc) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from incodoc_html.nodes import Doc


class DocRenderer(Protocol):
    """Protocol for document renderers."""

    def render(self, doc: Doc) -> str:
        """Render a Doc to a string.

        Args:
            doc: The document to render.

        Returns:
            Rendered string output.

        """
        ...


class DocParser(Protocol):
    """Protocol for the external markup parser."""

    def __call__(self, source: str) -> Doc: ...
