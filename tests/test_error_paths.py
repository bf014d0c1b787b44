"""Error hierarchy and formatting tests."""

import pytest

from incodoc_html.errors import (
    CodeIndentationError,
    IncodocError,
    RenderError,
    SerializationError,
)


class TestHierarchy:
    """All library errors share one base."""

    @pytest.mark.parametrize("cls", [CodeIndentationError, RenderError, SerializationError])
    def test_subclasses_base(self, cls: type[Exception]) -> None:
        assert issubclass(cls, IncodocError)

    def test_serialization_error_is_value_error(self) -> None:
        assert issubclass(SerializationError, ValueError)


class TestCodeIndentationError:
    """The one domain error."""

    def test_default_message(self) -> None:
        assert str(CodeIndentationError()) == "code indentation could not be determined"

    def test_custom_message(self) -> None:
        assert str(CodeIndentationError("mixed tabs")) == "mixed tabs"


class TestSerializationError:
    """Serialization error carries the offending type name."""

    def test_type_name(self) -> None:
        err = SerializationError("bad", type_name="Blink")
        assert err.type_name == "Blink"
        assert str(err) == "bad"

    def test_type_name_optional(self) -> None:
        assert SerializationError("bad").type_name is None
