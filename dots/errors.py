"""Error types raised while loading documents and reading dot-paths.

``LoadError`` subclasses are fatal: no document exists afterwards.
``ResolutionError`` subclasses are local to a single read and leave the
document and its caches untouched.
"""

from __future__ import annotations


class DotsError(Exception):
    """Base class for every error raised by this package."""


class LoadError(DotsError):
    """A document could not be produced from a file or string."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{message}: {source}")
        self.source = source


class ReadError(LoadError):
    """The file is missing, unreadable, or the path itself is malformed."""


class ParseError(LoadError):
    """The document is not valid YAML or its root is not a mapping."""


class ResolutionError(DotsError):
    """A dot-path could not be resolved to a value.

    Parameters
    ----------
    path:
        The full dot-path that was requested.
    segment:
        The segment at which resolution stopped, or ``None`` when the
        failure concerns the resolved value as a whole.
    message:
        Human readable description.
    context:
        Optional description of the read that failed, prepended to *message*.
    """

    def __init__(
        self,
        path: str,
        segment: str | None,
        message: str,
        context: str | None = None,
    ) -> None:
        super().__init__(f"{context}: {message}" if context else message)
        self.path = path
        self.segment = segment
        self.context = context

    def with_context(self, context: str) -> ResolutionError:
        """Return a new error of the same kind carrying *context*."""
        return ResolutionError(self.path, self.segment, str(self), context)


class KeyNotFound(ResolutionError):
    """A path segment does not exist at its level of the document."""

    def __init__(self, path: str, segment: str, context: str | None = None) -> None:
        super().__init__(
            path, segment, f"key {segment!r} could not be found for {path!r}", context
        )

    def with_context(self, context: str) -> KeyNotFound:
        return KeyNotFound(self.path, self.segment, context)


class TypeMismatch(ResolutionError):
    """The value found has a different kind than the one requested."""

    def __init__(
        self,
        path: str,
        expected: str,
        actual: str,
        segment: str | None = None,
        context: str | None = None,
    ) -> None:
        where = f"segment {segment!r} of {path!r}" if segment is not None else repr(path)
        super().__init__(
            path, segment, f"expected {expected} value for {where} but found {actual}", context
        )
        self.expected = expected
        self.actual = actual

    def with_context(self, context: str) -> TypeMismatch:
        return TypeMismatch(self.path, self.expected, self.actual, self.segment, context)
