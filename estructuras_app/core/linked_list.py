"""Lista doblemente enlazada mínima para la demostración."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False, slots=True)
class _Node(Generic[T]):
    value: T
    prev: Optional["_Node[T]"] = None
    next: Optional["_Node[T]"] = None


class DoublyLinkedList(Generic[T]):
    """Secuencia con enlaces hacia delante y hacia atrás.

    Solo implementa lo que usa el reporte: inserción al final y recorrido
    desde ``head`` o desde ``tail``.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self.head: _Node[T] | None = None
        self.tail: _Node[T] | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: T) -> None:
        node = _Node(value, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def nodes(self) -> Iterator[_Node[T]]:
        current = self.head
        while current is not None:
            yield current
            current = current.next

    def __iter__(self) -> Iterator[T]:
        for node in self.nodes():
            yield node.value

    def __reversed__(self) -> Iterator[T]:
        current = self.tail
        while current is not None:
            yield current.value
            current = current.prev

    def __len__(self) -> int:
        return self._size


__all__ = ["DoublyLinkedList"]
