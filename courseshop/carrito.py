"""A simple shopping cart."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Generic, TextIO, TypeVar

T = TypeVar("T")


class Carrito(Generic[T]):
    """An ordered collection of items awaiting purchase."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def agregar(self, item: T) -> None:
        """Add an item at the end."""
        self._items.append(item)

    def eliminar(self, item: T) -> None:
        """Remove the first item equal to ``item``; do nothing if absent."""
        try:
            self._items.remove(item)
        except ValueError:
            pass

    def mostrar(self, out: TextIO | None = None) -> None:
        """Print each item on its own line."""
        stream = out if out is not None else sys.stdout
        for item in self._items:
            print(item, file=stream)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def vaciar(self) -> None:
        """Remove every item."""
        self._items.clear()