"""incodoc-html renderers.

Renderers convert a Doc into HTML text.

Available Renderers:
- HtmlRenderer: semantic HTML (native heading, emphasis, list, nav elements)
- HtmlCssRenderer: class-annotated HTML, navigation suppressed

Thread Safety:
All renderers use a StringBuilder local to each render() call.
Safe for concurrent use from multiple threads.

"""

from incodoc_html.renderers.html import HtmlRenderer
from incodoc_html.renderers.html_css import HtmlCssRenderer
from incodoc_html.renderers.protocol import DocParser, DocRenderer

__all__ = ["DocParser", "DocRenderer", "HtmlCssRenderer", "HtmlRenderer"]
