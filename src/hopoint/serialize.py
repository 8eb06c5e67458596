"""Composition tree serialization helpers.

Trees map onto plain nested dictionaries: every node becomes
``{"type": <kind>, <field>: <value>, ...}``, points become ``[x, y, z]``
lists and child generators nest as dictionaries.  ``dumps``/``loads``
wrap that form in a small YAML document tagged with ``SCHEMA_ID``.

Decoding builds nodes through their normal constructors, so a document
describing an invalid tree raises the same errors as building it in code.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, Dict

import yaml

from hopoint.geom import Point3
from hopoint.tree import NODE_TYPES, Node

SCHEMA_ID = "hopoint-tree-v0.1"

_NODE_CLASSES = {cls.kind: cls for cls in NODE_TYPES}


def _encode(value: Any) -> Any:
    if isinstance(value, Node):
        return node_to_dict(value)
    if isinstance(value, Point3):
        return [value.x, value.y, value.z]
    if isinstance(value, (list, tuple)):
        return [_encode(v) for v in value]
    return value


def _decode(value: Any) -> Any:
    if isinstance(value, dict):
        return node_from_dict(value)
    if isinstance(value, list):
        return tuple(_decode(v) for v in value)
    return value


def node_to_dict(node: Node) -> Dict[str, Any]:
    """Return the plain dictionary form of ``node`` and its subtree."""
    data: Dict[str, Any] = {"type": node.kind}
    for f in fields(node):
        data[f.name] = _encode(getattr(node, f.name))
    return data


def node_from_dict(data: Dict[str, Any]) -> Node:
    """Rebuild a tree from the dictionary form produced by ``node_to_dict``."""
    if not isinstance(data, dict) or "type" not in data:
        raise ValueError(f"node description must be a dict with a 'type' key: {data!r}")
    kind = data["type"]
    cls = _NODE_CLASSES.get(kind)
    if cls is None:
        raise ValueError(f"unknown node type '{kind}'; known types: {sorted(_NODE_CLASSES)}")
    names = {f.name for f in fields(cls)}
    unknown = set(data) - names - {"type"}
    if unknown:
        raise ValueError(f"unknown field(s) for {kind}: {sorted(unknown)}")
    kwargs = {k: _decode(v) for k, v in data.items() if k != "type"}
    return cls(**kwargs)


def dumps(node: Node) -> str:
    """Serialize ``node`` to YAML text."""
    doc = {"schema": SCHEMA_ID, "root": node_to_dict(node)}
    return yaml.safe_dump(doc, sort_keys=False)


def loads(text: str) -> Node:
    """Rebuild a tree from YAML text produced by ``dumps``."""
    doc = yaml.safe_load(text)
    if not isinstance(doc, dict):
        raise ValueError("invalid tree document: expected a mapping at the root")
    schema = doc.get("schema")
    if schema != SCHEMA_ID:
        raise ValueError(f"unsupported schema {schema!r}, expected {SCHEMA_ID!r}")
    return node_from_dict(doc.get("root"))


__all__ = [
    "SCHEMA_ID",
    "node_to_dict",
    "node_from_dict",
    "dumps",
    "loads",
]
