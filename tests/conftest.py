"""Shared fixtures for incodoc-html tests."""

import pytest

from incodoc_html.code import code_block
from incodoc_html.nodes import (
    Doc,
    EmStrength,
    EmType,
    Emphasis,
    Heading,
    Link,
    List,
    ListType,
    MText,
    Nav,
    Paragraph,
    Row,
    Section,
    Table,
)


def _link(text: str, url: str = "url") -> Link:
    return Link(url=url, items=(text,))


@pytest.fixture
def sample_nav() -> Nav:
    """Three-level navigation tree with two sibling navs at the bottom."""
    return Nav(
        description="l0",
        links=(_link("link text"),),
        subs=(
            Nav(
                description="l1",
                links=(_link("link text"),),
                subs=(
                    Nav(description="l2a", links=(_link("first"), _link("second"))),
                    Nav(description="l2b", links=(_link("third"),)),
                ),
            ),
        ),
    )


@pytest.fixture
def sample_doc(sample_nav: Nav) -> Doc:
    """Document exercising every node kind."""
    strong = Emphasis(etype=EmType.EMPHASIS, strength=EmStrength.STRONG, text="emphasis")
    nested_list = List(
        ltype=ListType.CHECKED,
        items=(
            Paragraph(items=("list",)),
            Paragraph(items=("in",), tags=frozenset({"checked"})),
        ),
    )
    bullets = List(
        ltype=ListType.IDENTICAL,
        items=(
            Paragraph(items=("yay",)),
            Paragraph(items=("a", nested_list)),
        ),
    )
    table = Table(
        rows=(
            Row(items=(Paragraph(items=("C",)), Paragraph(items=("D",))), is_header=True),
            Row(
                items=(
                    Paragraph(
                        items=(Emphasis(etype=EmType.EMPHASIS, strength=EmStrength.MEDIUM, text="5"),)
                    ),
                    Paragraph(items=(MText(text="let x = 0;", tags=("code",)),)),
                )
            ),
        )
    )
    code = code_block("rust", "let x = 0;\nfor i in 0..10 {\n    println!(\"{}\", i);\n}\n")
    return Doc(
        items=(
            sample_nav,
            Section(
                heading=Heading(level=0, items=("H1",)),
                items=(
                    Paragraph(items=("test par with some ", strong, " yay.")),
                    Section(
                        heading=Heading(level=1, items=("H2",)),
                        items=(
                            Paragraph(items=("par par ", Link(url="url", items=("link ", strong)))),
                            Paragraph(items=(bullets,)),
                            Paragraph(items=(table,)),
                            Paragraph(items=(code,)),
                        ),
                    ),
                ),
            ),
        )
    )
