"""Demostrador de estructuras de datos.

Recibe la lista completa de usuarios (en orden de inserción) y produce un
reporte de texto que reproduce el orden de recorrido y la forma de cada
estructura. Todas las funciones son puras: no leen widgets ni el almacén.
"""

from __future__ import annotations

import logging
from collections import deque
from enum import Enum
from typing import Callable, Dict, List, Sequence

import numpy as np

from estructuras_app.core.linked_list import DoublyLinkedList
from estructuras_app.models.user import User

logger = logging.getLogger(__name__)

NO_USERS_MESSAGE = "No users found in the database."


class ContainerKind(Enum):
    """Estructuras disponibles, identificadas por una clave estable."""

    LIST = "list"
    ARRAY = "array"
    MATRIX = "matrix"
    JAGGED = "jagged"
    DICT = "dict"
    QUEUE = "queue"
    STACK = "stack"
    SET = "set"
    LINKED_LIST = "linked_list"

    @property
    def title(self) -> str:
        return _TITLES[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def label(self) -> str:
        """Texto del combo; nunca se usa para decidir la estructura."""

        return f"{self.title} - {self.description}"

    @classmethod
    def from_key(cls, key: object) -> "ContainerKind | None":
        if isinstance(key, cls):
            return key
        try:
            return cls(key)
        except ValueError:
            return None


_TITLES: Dict[ContainerKind, str] = {
    ContainerKind.LIST: "list[User]",
    ContainerKind.ARRAY: "Array",
    ContainerKind.MATRIX: "Multi-dimensional Array",
    ContainerKind.JAGGED: "Jagged Array",
    ContainerKind.DICT: "dict[int, User]",
    ContainerKind.QUEUE: "Queue[User]",
    ContainerKind.STACK: "Stack[User]",
    ContainerKind.SET: "set[User]",
    ContainerKind.LINKED_LIST: "LinkedList[User]",
}

_DESCRIPTIONS: Dict[ContainerKind, str] = {
    ContainerKind.LIST: (
        "Dynamic array that can grow in size. Fast access by index, "
        "good for frequent additions/removals at the end."
    ),
    ContainerKind.ARRAY: (
        "Fixed-size collection. Fastest access by index but size cannot be "
        "changed after creation."
    ),
    ContainerKind.MATRIX: (
        "Table-like structure (e.g., 2D arrays). Good for grid-based data "
        "with fixed dimensions."
    ),
    ContainerKind.JAGGED: (
        "Array of arrays where each element can be a different size. More "
        "flexible than multi-dimensional arrays."
    ),
    ContainerKind.DICT: (
        "Key-value pairs. Extremely fast lookups by key (O(1)). Each key "
        "must be unique."
    ),
    ContainerKind.QUEUE: (
        "FIFO (First-In-First-Out) collection. Use when you need to process "
        "items in the order they were added."
    ),
    ContainerKind.STACK: (
        "LIFO (Last-In-First-Out) collection. The last item added is the "
        "first one to be removed."
    ),
    ContainerKind.SET: (
        "Collection of unique elements. Very fast for checking if an item "
        "exists (O(1)). No duplicate items allowed."
    ),
    ContainerKind.LINKED_LIST: (
        "Doubly-linked list. Fast insertions/deletions anywhere in the list, "
        "but slower index-based access."
    ),
}


# ----------------------------------------------------------------------
# Construcción de estructuras
# ----------------------------------------------------------------------
def build_array(users: Sequence[User]) -> np.ndarray:
    array = np.empty(len(users), dtype=object)
    for index, user in enumerate(users):
        array[index] = user
    return array


def build_matrix(users: Sequence[User]) -> np.ndarray:
    """Tabla N×2 con el id en la columna 0 y el usuario en la 1."""

    matrix = np.empty((len(users), 2), dtype=object)
    for row, user in enumerate(users):
        matrix[row, 0] = user.id
        matrix[row, 1] = user
    return matrix


def build_jagged(users: Sequence[User]) -> List[List[User]]:
    """La fila ``i`` contiene los primeros ``min(i + 1, N)`` usuarios."""

    total = len(users)
    return [list(users[: min(row + 1, total)]) for row in range(total)]


def build_dict(users: Sequence[User]) -> Dict[int, User]:
    by_id: Dict[int, User] = {}
    for user in users:
        by_id[user.id] = user
    return by_id


# ----------------------------------------------------------------------
# Renderizado por estructura
# ----------------------------------------------------------------------
def _render_list(users: Sequence[User]) -> List[str]:
    lines = ["=== list[User] ==="]
    lines.extend(f"- {user}" for user in list(users))
    return lines


def _render_array(users: Sequence[User]) -> List[str]:
    array = build_array(users)
    lines = ["=== Array ==="]
    lines.extend(f"[{index}]: {array[index]}" for index in range(array.shape[0]))
    return lines


def _render_matrix(users: Sequence[User]) -> List[str]:
    matrix = build_matrix(users)
    lines = ["=== Multi-dimensional Array (ID, User) ==="]
    lines.extend(
        f"ID: {matrix[row, 0]}, User: {matrix[row, 1]}"
        for row in range(matrix.shape[0])
    )
    return lines


def _render_jagged(users: Sequence[User]) -> List[str]:
    lines = ["=== Jagged Array ==="]
    for row, entries in enumerate(build_jagged(users), start=1):
        initials = " ".join(user.initials for user in entries)
        lines.append(f"Row {row}: {initials}")
    return lines


def _render_dict(users: Sequence[User]) -> List[str]:
    lines = ["=== dict[int, User] ==="]
    lines.extend(f"Key: {key}, Value: {user}" for key, user in build_dict(users).items())
    return lines


def _render_queue(users: Sequence[User]) -> List[str]:
    queue = deque(users)
    lines = ["=== Queue[User] (FIFO) ===", "Queue order (first to be dequeued first):"]
    position = 1
    while queue:
        lines.append(f"{position}. {queue.popleft()}")
        position += 1
    return lines


def _render_stack(users: Sequence[User]) -> List[str]:
    stack: List[User] = []
    for user in users:
        stack.append(user)
    lines = ["=== Stack[User] (LIFO) ===", "Stack order (top to bottom):"]
    position = 1
    while stack:
        lines.append(f"{position}. {stack.pop()}")
        position += 1
    return lines


def _render_set(users: Sequence[User]) -> List[str]:
    unique = set(users)
    lines = ["=== set[User] ===", f"Total unique users: {len(unique)}", ""]
    lines.extend(f"- {user}" for user in unique)
    return lines


def _render_linked_list(users: Sequence[User]) -> List[str]:
    linked = DoublyLinkedList(users)
    lines = ["=== LinkedList[User] ==="]
    for index, node in enumerate(linked.nodes(), start=1):
        lines.append(f"Node {index}: {node.value}")
    return lines


_RENDERERS: Dict[ContainerKind, Callable[[Sequence[User]], List[str]]] = {
    ContainerKind.LIST: _render_list,
    ContainerKind.ARRAY: _render_array,
    ContainerKind.MATRIX: _render_matrix,
    ContainerKind.JAGGED: _render_jagged,
    ContainerKind.DICT: _render_dict,
    ContainerKind.QUEUE: _render_queue,
    ContainerKind.STACK: _render_stack,
    ContainerKind.SET: _render_set,
    ContainerKind.LINKED_LIST: _render_linked_list,
}


def render_report(users: Sequence[User], kind: ContainerKind | str | None) -> str:
    """Genera el reporte de ``users`` según la estructura indicada.

    Sin usuarios devuelve siempre ``NO_USERS_MESSAGE``. Una clave de
    estructura desconocida no produce salida.
    """

    if not users:
        return NO_USERS_MESSAGE

    resolved = ContainerKind.from_key(kind)
    if resolved is None:
        logger.warning("Estructura desconocida ignorada: %r", kind)
        return ""

    return "\n".join(_RENDERERS[resolved](users))


__all__ = [
    "ContainerKind",
    "NO_USERS_MESSAGE",
    "build_array",
    "build_dict",
    "build_jagged",
    "build_matrix",
    "render_report",
]
