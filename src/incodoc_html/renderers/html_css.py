"""Class-annotated HTML renderer.

Output meant to be styled entirely by a stylesheet: tagged text becomes
spans carrying the tags as classes, de-emphasis uses ``light-em`` /
``medium-em`` / ``strong-em`` spans, checked lists and items carry
``checked-list`` / ``checked-list-item``, and an indentation error is a
``code-indentation-error`` span.

Navigation is not rendered at all; the host page template is expected to
place and style it.

Thread Safety:
Stateless, like HtmlRenderer. Safe to share between threads.
"""

from incodoc_html.nodes import Nav
from incodoc_html.renderers.html import HtmlRenderer
from incodoc_html.stringbuilder import StringBuilder


class HtmlCssRenderer(HtmlRenderer):
    """Render a Doc to class-annotated HTML.

    Usage:
        >>> from incodoc_html.nodes import Doc, Nav
        >>> HtmlCssRenderer().render(Doc(items=(Nav(description="Site"),)))
        '<html>\\n<body>\\n</body>\\n</html>\\n'

    """

    __slots__ = ()

    def _render_nav(self, nav: Nav, sb: StringBuilder) -> None:
        """Navigation produces no output in this variant."""
