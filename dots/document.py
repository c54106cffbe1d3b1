"""YAML configuration document with typed, memoized dot-path access.

Load a document once with :func:`load` and read nested values with
``get_string("a.b.c")``, ``get_int(...)`` or ``get_bool(...)``.  Each typed
accessor keeps its own cache keyed by the dot-path, scoped to the document
instance.

Single-key accessors fail fast and raise.  The batch accessors
(``get_strings``, ``get_ints``, ``get_bools``) are best-effort: a path that
fails is replaced by the type's zero value (``""``, ``0``, ``False``), so a
zero in their output may be either a real value or a substitution.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any, TypeVar

import yaml
from loguru import logger

from dots.errors import ParseError, ReadError, ResolutionError, TypeMismatch
from dots.nodes import NodeKind, kind_of
from dots.resolver import resolve

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "example.yml"

T = TypeVar("T")


class ConfigDocument:
    """A parsed YAML document plus per-type caches of resolved values.

    Parameters
    ----------
    data:
        The parsed document root.  It is never modified.
    path:
        File the document was read from, or ``None`` for in-memory text.
    """

    def __init__(self, data: dict[str, Any], path: Path | None = None) -> None:
        self._data = data
        self.path = path
        self._strings: dict[str, str] = {}
        self._ints: dict[str, int] = {}
        self._bools: dict[str, bool] = {}
        # Guards the caches only; resolution runs unlocked.
        self._lock = threading.Lock()

    @classmethod
    def from_string(cls, text: str | bytes, source: str = "<string>") -> ConfigDocument:
        """Build a document from YAML text already held in memory.

        Raises
        ------
        ParseError
            If the text is not valid YAML or its root is not a mapping.
        """
        return cls(_parse(text, source))

    def __repr__(self) -> str:
        source = str(self.path) if self.path else "<string>"
        return f"ConfigDocument({source!r}, keys={sorted(map(str, self._data))!r})"

    # ------------------------------------------------------------------
    # Untyped access
    # ------------------------------------------------------------------

    def get(self, path: str) -> Any:
        """Return the raw node at *path* (scalar, mapping or list).  Not cached."""
        return resolve(self._data, path)

    def has(self, path: str) -> bool:
        """Return ``True`` if *path* resolves to a value."""
        try:
            resolve(self._data, path)
        except ResolutionError:
            return False
        return True

    def to_dict(self) -> dict[str, Any]:
        """Return the document root."""
        return self._data

    # ------------------------------------------------------------------
    # Typed single-key access (fail fast)
    # ------------------------------------------------------------------

    def get_string(self, path: str) -> str:
        """Return the string at *path*.

        Raises
        ------
        KeyNotFound
            If a segment of *path* does not exist.
        TypeMismatch
            If an intermediate segment is not a mapping, or the value is not
            a string.
        """
        return self._get_typed(path, NodeKind.STRING, self._strings)

    def get_int(self, path: str) -> int:
        """Return the integer at *path*.  Floats, booleans and numeric strings are rejected."""
        return self._get_typed(path, NodeKind.INT, self._ints)

    def get_bool(self, path: str) -> bool:
        """Return the boolean at *path*."""
        return self._get_typed(path, NodeKind.BOOL, self._bools)

    # ------------------------------------------------------------------
    # Typed batch access (best effort)
    # ------------------------------------------------------------------

    def get_strings(self, paths: Iterable[str]) -> list[str]:
        """Return the string for each path, ``""`` where a path fails."""
        return self._get_many(paths, self.get_string, "")

    def get_ints(self, paths: Iterable[str]) -> list[int]:
        """Return the integer for each path, ``0`` where a path fails."""
        return self._get_many(paths, self.get_int, 0)

    def get_bools(self, paths: Iterable[str]) -> list[bool]:
        """Return the boolean for each path, ``False`` where a path fails."""
        return self._get_many(paths, self.get_bool, False)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _get_typed(self, path: str, kind: NodeKind, cache: dict[str, Any]) -> Any:
        with self._lock:
            if path in cache:
                logger.debug(f"Cache hit for {kind} {path!r}")
                return cache[path]

        try:
            node = resolve(self._data, path)
        except ResolutionError as exc:
            raise exc.with_context(f"unable to unwrap nested value for {path!r}") from exc

        actual = kind_of(node)
        if actual is not kind:
            raise TypeMismatch(path, expected=str(kind), actual=str(actual))

        with self._lock:
            cache[path] = node
        return node

    def _get_many(self, paths: Iterable[str], getter: Callable[[str], T], zero: T) -> list[T]:
        values: list[T] = []
        for path in paths:
            try:
                values.append(getter(path))
            except ResolutionError as exc:
                logger.warning(f"Substituting {zero!r} for {path!r}: {exc}")
                values.append(zero)
        return values


def load(path: Path | str) -> ConfigDocument:
    """Read and parse the YAML file at *path*.

    Parameters
    ----------
    path:
        Location of the YAML document.

    Returns
    -------
    ConfigDocument
        A document with empty caches.

    Raises
    ------
    ReadError
        If the file does not exist, cannot be read, or *path* is malformed.
    ParseError
        If the contents are not valid YAML or the root is not a mapping.
    """
    config_path = Path(path)
    try:
        contents = config_path.read_bytes()
    except (OSError, ValueError) as exc:
        logger.error(f"Unable to find yaml file at path: {path}\n{exc}")
        raise ReadError(str(path), "Unable to read YAML file") from exc

    return ConfigDocument(_parse(contents, str(path)), config_path)


def _parse(contents: str | bytes, source: str) -> dict[str, Any]:
    """Parse YAML text into a mapping, treating an empty document as ``{}``."""
    try:
        data = yaml.safe_load(contents)
    except yaml.YAMLError as exc:
        logger.error(f"Unable to unmarshal yaml document {source}\n{exc}")
        raise ParseError(source, f"Invalid YAML ({exc})") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.error(f"YAML document {source} has a {kind_of(data)} root, not a mapping")
        raise ParseError(source, "YAML document root must be a mapping")
    return data
