"""Tests for code block indentation normalisation."""

import logging

import pytest

from incodoc_html.code import code_block, prune_indentation
from incodoc_html.errors import CodeIndentationError, IncodocError
from incodoc_html.nodes import CodeBlock, CodeIdentError


class TestPruneIndentation:
    """prune_indentation() strips the shared indentation."""

    def test_unindented_code_is_unchanged(self) -> None:
        assert prune_indentation("let x = 0;\nlet y = 1;") == "let x = 0;\nlet y = 1;"

    def test_common_spaces_removed(self) -> None:
        code = "    if x:\n        y = 1\n    z = 2"
        assert prune_indentation(code) == "if x:\n    y = 1\nz = 2"

    def test_common_tabs_removed(self) -> None:
        assert prune_indentation("\tfoo()\n\t\tbar()") == "foo()\n\tbar()"

    def test_surrounding_blank_lines_dropped(self) -> None:
        assert prune_indentation("\n   \n  a\n  b\n\n  \n") == "a\nb"

    def test_inner_blank_lines_emptied(self) -> None:
        assert prune_indentation("  a\n      \n  b") == "a\n\nb"

    def test_blank_lines_do_not_lower_indentation(self) -> None:
        assert prune_indentation("    a\n\n    b") == "a\n\nb"

    def test_empty_code(self) -> None:
        assert prune_indentation("") == ""
        assert prune_indentation("\n  \n") == ""

    def test_mixed_tabs_and_spaces_rejected(self) -> None:
        with pytest.raises(CodeIndentationError):
            prune_indentation("\tfoo()\n    bar()")

    def test_diverging_prefix_rejected(self) -> None:
        with pytest.raises(CodeIndentationError):
            prune_indentation(" \tfoo()\n\t bar()")

    def test_error_is_incodoc_error(self) -> None:
        with pytest.raises(IncodocError):
            prune_indentation("\ta\n b")


class TestCodeBlock:
    """code_block() returns the tree value, never raising."""

    def test_success(self) -> None:
        assert code_block("rust", "  let x = 0;\n") == CodeBlock(language="rust", code="let x = 0;")

    def test_failure_becomes_error_node(self) -> None:
        assert code_block("py", "\ta\n  b") == CodeIdentError()

    def test_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="incodoc_html.code"):
            code_block("py", "\ta\n  b")
        assert any("inconsistent indentation" in r.getMessage() for r in caplog.records)

    def test_language_kept_verbatim(self) -> None:
        block = code_block("", "x")
        assert isinstance(block, CodeBlock)
        assert block.language == ""
