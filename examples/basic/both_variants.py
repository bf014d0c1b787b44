"""Render the same document with the semantic and the class-annotated renderer."""

from incodoc_html import (
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
    code_block,
    render,
    render_css,
)

nav = Nav(
    description="l0",
    links=(Link(url="url", items=("link text",)),),
    subs=(Nav(description="l1", links=(Link(url="url", items=("link text",)),)),),
)

tasks = List(
    ltype=ListType.CHECKED,
    items=(
        Paragraph(items=("list",)),
        Paragraph(items=("in",), tags=frozenset({"checked"})),
    ),
)

table = Table(
    rows=(
        Row(items=(Paragraph(items=("C",)), Paragraph(items=("D",))), is_header=True),
        Row(
            items=(
                Paragraph(items=(Emphasis(EmType.EMPHASIS, EmStrength.MEDIUM, "5"),)),
                Paragraph(items=(MText(text="let x = 0;", tags=("code",)),)),
            )
        ),
    )
)

doc = Doc(
    items=(
        nav,
        Section(
            heading=Heading(level=0, items=("H1",)),
            items=(
                Paragraph(items=("par par ", Link(url="url", items=("link",), tags=("external",)))),
                Paragraph(items=(tasks, table)),
                Paragraph(items=(code_block("rust", "    let x = 0;\n    x += 1;\n"),)),
                # Mixed tab/space indentation: rendered as an inline marker
                Paragraph(items=(code_block("rust", "\tlet x = 0;\n    x += 1;\n"),)),
            ),
        ),
    )
)

print("=== semantic ===")
print(render(doc))
print("=== class-annotated ===")
print(render_css(doc))
