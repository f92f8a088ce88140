"""Table serialization: JSON round-trip for the table data model.

Converts Table / Row / Cell to and from JSON-compatible dicts. Useful for:
- Handing table content to a host UI without re-parsing grid text
- Storing an edit session's table state
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from gridtables import parse
    from gridtables.serialization import to_json, from_json

    table = parse("+---+\\n| a |\\n+---+")
    restored = from_json(to_json(table))
    assert table == restored

Thread Safety:
    All functions are pure, safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from gridtables.nodes import Cell, Row, Table

Node = Table | Row | Cell

# Registry of type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Table": Table,
    "Row": Row,
    "Cell": Cell,
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a Table, Row, or Cell to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        value = getattr(node, f.name)
        if isinstance(value, list):
            result[f.name] = [to_dict(item) for item in value]
        else:
            result[f.name] = value

    return result


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a Table, Row, or Cell from a dict.

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        if isinstance(raw, list):
            kwargs[f.name] = [from_dict(item) for item in raw]
        else:
            kwargs[f.name] = raw

    return node_cls(**kwargs)


def to_json(table: Table, *, indent: int | None = None) -> str:
    """Serialize a Table to a JSON string."""
    return json.dumps(to_dict(table), sort_keys=True, indent=indent)


def from_json(data: str) -> Table:
    """Deserialize a Table from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Table.

    """
    raw = json.loads(data)
    node = from_dict(raw)
    if not isinstance(node, Table):
        msg = f"Expected Table, got {type(node).__name__}"
        raise ValueError(msg)
    return node


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
