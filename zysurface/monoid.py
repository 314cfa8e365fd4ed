"""Monoids, and the monoid of spanned values."""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from typing import Iterable, TypeVar

from .span import Sp, Span

M = TypeVar("M", bound="Monoid")


class Monoid(ABC):
    """A type with an identity element and an associative append."""

    @classmethod
    @abstractmethod
    def empty(cls: type[M]) -> M: ...

    @abstractmethod
    def append(self: M, other: M) -> M: ...

    def extend(self: M, others: Iterable[M]) -> M:
        return functools.reduce(lambda acc, item: acc.append(item), others, self)

    @classmethod
    def concat(cls: type[M], others: Iterable[M]) -> M:
        return cls.empty().extend(others)


def sp_empty(inner_type: type[M]) -> Sp[M]:
    """The empty spanned value: the monoid's identity at a dummy span."""
    return Span.dummy().make(inner_type.empty())


def sp_append(left: Sp[M], right: Sp[M]) -> Sp[M]:
    """Append two spanned values; the result carries the right one's span."""
    return right.info.make(left.inner.append(right.inner))