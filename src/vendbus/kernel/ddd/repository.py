"""Repository port – keyed store handing out shared references."""

from __future__ import annotations

import abc
from collections.abc import Iterator
from typing import Generic, Protocol, TypeVar


class Identified(Protocol):
    @property
    def id(self) -> str: ...


T = TypeVar("T", bound=Identified)


class Repository(abc.ABC, Generic[T]):
    """Port: passive store of items keyed by their ``id``.

    ``lookup`` returns the stored instance itself so every caller shares
    the same object; implementations never change item state.
    """

    @abc.abstractmethod
    def add(self, item: T) -> None: ...

    @abc.abstractmethod
    def get(self, id: str) -> T | None: ...  # noqa: A002

    @abc.abstractmethod
    def lookup(self, id: str) -> T:  # noqa: A002
        """Return the item or raise a ``NotFoundError`` subclass."""

    @abc.abstractmethod
    def __iter__(self) -> Iterator[T]: ...

    @abc.abstractmethod
    def __len__(self) -> int: ...


__all__ = ["Identified", "Repository"]
