"""Code block indentation normalisation.

Parsers hand code blocks over with whatever indentation the source had.
Before a block enters the document tree its common leading whitespace is
stripped; when that cannot be done consistently the block is replaced by a
``CodeIdentError`` node so rendering can continue.

Example:
    >>> code_block("py", "    x = 1\\n    if x:\\n        y = 2\\n")
    CodeBlock(language='py', code='x = 1\\nif x:\\n    y = 2')
    >>> code_block("py", "\\tx = 1\\n    y = 2")
    CodeIdentError()

"""

from __future__ import annotations

from incodoc_html.errors import CodeIndentationError
from incodoc_html.nodes import Code, CodeBlock, CodeIdentError
from incodoc_html.utils.logger import get_logger

logger = get_logger(__name__)


def _leading_whitespace(line: str) -> str:
    return line[: len(line) - len(line.lstrip())]


def prune_indentation(code: str) -> str:
    """Strip the indentation shared by every non-blank line.

    Leading and trailing blank lines are dropped and blank lines inside the
    block become empty lines.

    Args:
        code: Raw code block content

    Returns:
        Code with the common indentation removed

    Raises:
        CodeIndentationError: If some non-blank line does not start with the
            indentation of the least-indented line
    """
    lines = code.split("\n")
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        return ""

    indents = [_leading_whitespace(line) for line in lines if line.strip()]
    common = min(indents, key=len)
    for indent in indents:
        if not indent.startswith(common):
            raise CodeIndentationError(
                f"indentation {indent!r} does not extend common prefix {common!r}"
            )

    cut = len(common)
    return "\n".join(line[cut:] if line.strip() else "" for line in lines)


def code_block(language: str, code: str) -> Code:
    """Build the tree value for a code block.

    Args:
        language: Language name (may be empty)
        code: Raw code block content

    Returns:
        CodeBlock with normalised code, or CodeIdentError when the
        indentation is inconsistent
    """
    try:
        return CodeBlock(language=language, code=prune_indentation(code))
    except CodeIndentationError:
        logger.debug("Code block (language %r) has inconsistent indentation", language, exc_info=True)
        return CodeIdentError()
