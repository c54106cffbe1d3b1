"""Classification of the values produced by the YAML parser."""

from __future__ import annotations

import datetime
import enum
from typing import Any


class NodeKind(enum.Enum):
    """The kind of a parsed document node."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"
    STRING = "string"
    INT = "int"
    BOOL = "bool"
    FLOAT = "float"
    NULL = "null"
    TIMESTAMP = "timestamp"
    BINARY = "binary"
    SET = "set"

    def __str__(self) -> str:
        return self.value


def kind_of(node: Any) -> NodeKind:
    """Return the :class:`NodeKind` of a value from ``yaml.safe_load``.

    Raises
    ------
    TypeError
        If *node* is not something the safe loader can produce.
    """
    # bool before int: True/False are ints to Python but not to YAML
    if isinstance(node, bool):
        return NodeKind.BOOL
    if isinstance(node, int):
        return NodeKind.INT
    if isinstance(node, float):
        return NodeKind.FLOAT
    if isinstance(node, str):
        return NodeKind.STRING
    if node is None:
        return NodeKind.NULL
    if isinstance(node, dict):
        return NodeKind.MAPPING
    if isinstance(node, (list, tuple)):
        return NodeKind.SEQUENCE
    if isinstance(node, set):
        return NodeKind.SET
    if isinstance(node, datetime.date):
        return NodeKind.TIMESTAMP
    if isinstance(node, bytes):
        return NodeKind.BINARY
    raise TypeError(f"Unsupported document node type: {type(node).__name__}")


def is_mapping(node: Any) -> bool:
    """Return ``True`` if *node* can be descended into by a dot-path."""
    return isinstance(node, dict)
