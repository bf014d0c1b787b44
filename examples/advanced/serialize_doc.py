"""Hand a document over as JSON, e.g. from a parser running in another process."""

from incodoc_html import Doc, Paragraph, render_css
from incodoc_html.serialization import from_json, to_json

doc = Doc(items=(Paragraph(items=("This document can be serialized and restored.",)),))

json_str = to_json(doc)
restored = from_json(json_str)

print("Original == restored:", doc == restored)
print("JSON length:", len(json_str), "chars")
print(render_css(restored))
