"""Build a document by hand and render it: zero config, zero deps."""

from incodoc_html import Doc, EmStrength, EmType, Emphasis, Heading, Paragraph, Section, render

doc = Doc(
    items=(
        Section(
            heading=Heading(level=0, items=("Hello ", Emphasis(EmType.EMPHASIS, EmStrength.MEDIUM, "World"))),
            items=(Paragraph(items=("First paragraph.",)),),
        ),
    )
)
print(render(doc))
