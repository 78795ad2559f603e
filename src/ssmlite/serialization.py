"""Tree serialization: JSON round-trip for ssmlite nodes.

Converts typed tree nodes to/from JSON-compatible dicts. Useful for
debugging, snapshot tests and shipping parsed trees between processes.
This is not SSML output: markup is never regenerated from a tree.

All output is deterministic (sorted keys).

Example:
    from ssmlite import parse
    from ssmlite.serialization import to_json, from_json

    doc = parse('<speak>Hi <break time="1s"/></speak>')
    json_str = to_json(doc)
    restored = from_json(json_str)
    assert doc == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import MISSING, fields
from typing import Any

from ssmlite.nodes import Attribute, Element, Node, Text

# Registry of type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Element": Element,
    "Text": Text,
    "Attribute": Attribute,
}


def to_dict(node: Node | Attribute) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        value = getattr(node, f.name)
        result[f.name] = _serialize_value(value)

    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, (Text, Element, Attribute)):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    return value


def from_dict(data: dict[str, Any]) -> Node | Attribute:
    """Reconstruct a typed node from a dict.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Raises:
        ValueError: If ``_type`` is missing or unknown, a required field is
            missing, or a field holds the wrong kind of value.

    """
    if not isinstance(data, dict):
        msg = f"Expected a dict for a serialized node, got {type(data).__name__}"
        raise ValueError(msg)

    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name) if isinstance(type_name, str) else None
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            if f.default is MISSING:
                msg = f"Missing field {f.name!r} for {type_name}"
                raise ValueError(msg)
            continue
        value = _deserialize_value(data[f.name])
        if not _FIELD_CHECKS.get(f.name, _is_str)(value):
            msg = f"Invalid value for {type_name}.{f.name}: {data[f.name]!r}"
            raise ValueError(msg)
        kwargs[f.name] = value

    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def _is_str(value: Any) -> bool:
    return isinstance(value, str)


def _is_attributes(value: Any) -> bool:
    return isinstance(value, tuple) and all(isinstance(a, Attribute) for a in value)


def _is_children(value: Any) -> bool:
    return isinstance(value, tuple) and all(isinstance(c, (Text, Element)) for c in value)


# Tuple fields get element checks; every other node field is a string
_FIELD_CHECKS: dict[str, Callable[[Any], bool]] = {
    "attributes": _is_attributes,
    "children": _is_children,
}


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize a tree to a JSON string.

    Args:
        node: Root of the tree to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)


def from_json(data: str) -> Element:
    """Deserialize a document from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent an Element.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    node = from_dict(raw)
    if not isinstance(node, Element):
        msg = f"Expected Element, got {type(node).__name__}"
        raise ValueError(msg)
    return node
