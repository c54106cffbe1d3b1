"""Dot-path resolution over a parsed document tree.

A dot-path such as ``"a.b.c"`` names a value by joining mapping keys with
periods.  Resolution is structural only: it returns whatever node sits at
the path and leaves type checks to the typed accessors in
:mod:`dots.document`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dots.errors import KeyNotFound, TypeMismatch
from dots.nodes import NodeKind, is_mapping, kind_of

SEPARATOR = "."


def split_path(path: str) -> list[str]:
    """Split *path* into its segments.

    An empty string yields a single empty segment, which never matches a key.
    """
    return path.split(SEPARATOR)


def resolve(tree: Mapping[str, Any], path: str) -> Any:
    """Return the raw node at *path* inside *tree*.

    Parameters
    ----------
    tree:
        Document root, normally a mapping.
    path:
        Dot-separated key, e.g. ``"server.http.port"``.

    Returns
    -------
    Any
        The node found at the final segment.  It may be a scalar, a mapping
        or a sequence.

    Raises
    ------
    KeyNotFound
        If any segment is missing at its level.
    TypeMismatch
        If an intermediate segment (or the root) is not a mapping.
    """
    *parents, last = split_path(path)
    current = _expect_mapping(tree, path, None)

    for segment in parents:
        current = _expect_mapping(_lookup(current, path, segment), path, segment)

    return _lookup(current, path, last)


def _lookup(mapping: Mapping[str, Any], path: str, segment: str) -> Any:
    if segment not in mapping:
        raise KeyNotFound(path, segment)
    return mapping[segment]


def _expect_mapping(node: Any, path: str, segment: str | None) -> Mapping[str, Any]:
    """Return *node* if it is a mapping, else fail on *segment*."""
    if not is_mapping(node):
        raise TypeMismatch(
            path,
            expected=str(NodeKind.MAPPING),
            actual=str(kind_of(node)),
            segment=segment,
        )
    return node
