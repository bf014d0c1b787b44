"""Document model serialization: JSON round-trip for incodoc nodes.

Converts nodes to/from JSON-compatible dicts so a document built by an
out-of-process parser can be handed to the renderers.

Encoding:
- every node is a dict with a ``_type`` discriminator
- plain text items stay bare strings
- enum members are stored by name ("EMPHASIS", "CHECKED", ...)
- tuples become lists, paragraph tag sets become sorted lists

All output is deterministic (sorted keys).

Example:
    from incodoc_html.serialization import from_json, to_json

    json_str = to_json(doc)
    assert from_json(json_str) == doc

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from enum import Enum
from typing import Any

from incodoc_html.errors import SerializationError
from incodoc_html.nodes import (
    CodeBlock,
    CodeIdentError,
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
    Node,
    Paragraph,
    Row,
    Section,
    Table,
)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Doc": Doc,
    "Nav": Nav,
    "Section": Section,
    "Heading": Heading,
    "Paragraph": Paragraph,
    "MText": MText,
    "Emphasis": Emphasis,
    "Link": Link,
    "CodeBlock": CodeBlock,
    "CodeIdentError": CodeIdentError,
    "List": List,
    "Table": Table,
    "Row": Row,
}

_NODE_CLASSES = tuple(_NODE_TYPES.values())

# Fields holding enum members, restored by member name
_ENUM_FIELDS: dict[str, type[Enum]] = {
    "etype": EmType,
    "strength": EmStrength,
    "ltype": ListType,
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Args:
        node: Any incodoc node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, _NODE_CLASSES):
        return to_dict(value)
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    if isinstance(value, frozenset):
        return sorted(value)
    # Primitives: str, int, bool
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed node from a dict.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        SerializationError: If ``_type`` is missing or unknown, or an enum
            member name is not recognised.

    """
    type_name = data.get("_type")
    if type_name is None:
        raise SerializationError("Missing '_type' field in serialized node")

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        raise SerializationError(f"Unknown node type: {type_name!r}", type_name=type_name)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_field(node_cls, f.name, data[f.name])

    return node_cls(**kwargs)


def _deserialize_field(node_cls: type, field_name: str, value: Any) -> Any:
    enum_cls = _ENUM_FIELDS.get(field_name)
    if enum_cls is not None:
        try:
            return enum_cls[value]
        except KeyError:
            raise SerializationError(
                f"Unknown {enum_cls.__name__} member: {value!r}", type_name=node_cls.__name__
            ) from None
    if node_cls is Paragraph and field_name == "tags":
        return frozenset(value)
    return _deserialize_value(value)


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(doc: Doc, *, indent: int | None = None) -> str:
    """Serialize a Doc to a JSON string.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Doc:
    """Deserialize a Doc from a JSON string.

    Raises:
        SerializationError: If the JSON doesn't represent a Doc.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        raise SerializationError(f"Expected a JSON object, got {type(raw).__name__}")
    node = from_dict(raw)
    if not isinstance(node, Doc):
        raise SerializationError(
            f"Expected Doc, got {type(node).__name__}", type_name=type(node).__name__
        )
    return node
