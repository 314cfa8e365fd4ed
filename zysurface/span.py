"""Source locations: file line tables, spans and span-carrying values."""

from __future__ import annotations

import bisect
import os
from dataclasses import dataclass
from typing import Any, Callable, Generic, Protocol, TypeVar, Union, runtime_checkable

T = TypeVar("T")
U = TypeVar("U")

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class Cursor2:
    """A line/column position in a source file."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class FileInfo:
    """Line table of a source file, used to turn offsets into line/column positions.

    Offsets are character offsets into the source string.
    """

    def __init__(self, source: str, path: PathLike) -> None:
        self.path = path
        self.newlines = [0, *(i for i, c in enumerate(source) if c == "\n"), len(source)]

    def trans_span2(self, offset: int) -> Cursor2:
        """Translate a character offset into a line/column cursor."""
        idx = bisect.bisect_left(self.newlines, offset)
        if idx >= len(self.newlines):
            raise ValueError(f"Span: offset {offset} is not in {self!r}")
        base = self.newlines[idx - 1 if idx > 0 else idx]
        return Cursor2(line=idx, column=offset - base)

    def display_path(self) -> str:
        return os.fspath(self.path)

    def __repr__(self) -> str:
        return f"FileInfo(newlines={self.newlines!r}, path={self.display_path()!r})"


class Span:
    """A range of character offsets, optionally enriched with file information."""

    __slots__ = ("start", "end", "_span2", "_path")

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        self._span2: tuple[Cursor2, Cursor2] | None = None
        self._path: PathLike | None = None

    @classmethod
    def dummy(cls) -> Span:
        return cls(0, 0)

    @property
    def span2(self) -> tuple[Cursor2, Cursor2] | None:
        return self._span2

    @property
    def path(self) -> PathLike | None:
        return self._path

    def is_dummy(self) -> bool:
        return (self.start, self.end) == (0, 0) and self._span2 is None and self._path is None

    def copy(self) -> Span:
        other = Span(self.start, self.end)
        other._span2 = self._span2
        other._path = self._path
        return other

    def make(self, inner: T) -> Sp[T]:
        """Attach a copy of this span to a value."""
        return Sp(inner, self.copy())

    def set_info(self, file_info: FileInfo) -> None:
        """Resolve line/column positions and the path; may only be done once."""
        if self._span2 is not None:
            raise RuntimeError("span2 is already set")
        if self._path is not None:
            raise RuntimeError("path is already set")
        self._span2 = (file_info.trans_span2(self.start), file_info.trans_span2(self.end))
        self._path = file_info.path

    def _key(self) -> tuple[Any, ...]:
        path = None if self._path is None else os.fspath(self._path)
        return (self.start, self.end, self._span2, path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Span({self.start}, {self.end})"

    def __str__(self) -> str:
        if self._path is None:
            return f"{self.start}-{self.end}"
        prefix = os.fspath(self._path)
        if self._span2 is not None:
            left, right = self._span2
            return f"{prefix}:{left} - {right}"
        return f"{prefix}:{self.start}-{self.end}"


@dataclass(eq=False)
class Sp(Generic[T]):
    """A value together with the span it came from; equality ignores the span."""

    inner: T
    info: Span

    @property
    def span(self) -> Span:
        return self.info

    def map(self, f: Callable[[T], U]) -> Sp[U]:
        return self.info.make(f(self.inner))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sp):
            return NotImplemented
        return self.inner == other.inner

    def __hash__(self) -> int:
        return hash(self.inner)

    def __str__(self) -> str:
        info = "<internal>" if self.info.is_dummy() else str(self.info)
        return f"{self.inner} ({info})"


@runtime_checkable
class SpanHolder(Protocol):
    """Something that knows how to apply a function to every span it holds."""

    def map_spans(self, f: Callable[[Span], None]) -> None: ...


def span_map(value: T, f: Callable[[Span], None]) -> T:
    """Apply ``f`` to every span reachable from ``value``, in place, and return ``value``."""
    if isinstance(value, Sp):
        f(value.info)
        span_map(value.inner, f)
    elif isinstance(value, (list, tuple)):
        for item in value:
            span_map(item, f)
    elif value is None or isinstance(value, (bool, str)):
        pass
    elif isinstance(value, SpanHolder):
        value.map_spans(f)
    else:
        raise TypeError(f"cannot map spans inside {type(value).__name__}")
    return value