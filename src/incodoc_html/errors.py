"""Exception classes for incodoc-html.

Rendering a well-formed document never raises: a code block whose
indentation could not be normalised travels through the tree as a
``CodeIdentError`` value and is rendered as an inline marker.
"""

from __future__ import annotations


class IncodocError(Exception):
    """Base exception for all incodoc-html errors.

    Subclass this for specific error categories.
    """

    pass


class CodeIndentationError(IncodocError):
    """Leading whitespace of a code block could not be stripped consistently.

    Raised by ``prune_indentation`` when the non-blank lines do not share
    the indentation of the least-indented line (for example tabs on one
    line, spaces on another). ``code_block`` turns it into a
    ``CodeIdentError`` node.
    """

    def __init__(self, message: str = "code indentation could not be determined") -> None:
        super().__init__(message)


class RenderError(IncodocError):
    """Error during HTML rendering.

    Raised when a renderer meets an item outside the closed node set or
    when an unknown output variant is requested.
    """

    pass


class SerializationError(IncodocError, ValueError):
    """Error while restoring a document from its dict/JSON form.

    Raised when a ``_type`` discriminator is missing or unknown, or when the
    root of a JSON document is not a ``Doc``.
    """

    def __init__(self, message: str, type_name: str | None = None) -> None:
        """Initialize serialization error.

        Args:
            message: Description of the problem
            type_name: Offending ``_type`` value (optional)
        """
        self.type_name = type_name
        super().__init__(message)
