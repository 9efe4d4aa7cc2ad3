"""Search tree of per-priority patient queues; lower value is served first."""

from __future__ import annotations

from dataclasses import dataclass, field

from .patient import Patient
from .queue import PatientQueue

MIN_PRIORITY = 1
MAX_PRIORITY = 5


@dataclass(eq=False)
class Node:
    """A tree node holding the queue for one priority value."""

    value: int
    left: Node | None = None
    right: Node | None = None
    queue: PatientQueue = field(default_factory=PatientQueue)


def _remove_node(node: Node) -> Node | None:
    """Return the subtree that replaces ``node`` once it is removed."""
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    parent, successor = node, node.right
    while successor.left is not None:
        parent, successor = successor, successor.left
    if parent is not node:
        parent.left = successor.right
        successor.right = node.right
    successor.left = node.left
    return successor


class PriorityTree:
    """Priorities 1 to 5, each with its own queue of patients."""

    def __init__(self) -> None:
        n1, n2, n3, n4, n5 = (Node(value) for value in range(1, 6))
        n3.left, n3.right = n2, n5
        n2.left = n1
        n5.left = n4
        self.root: Node | None = n3

    def find(self, priority: int) -> Node | None:
        """Return the node for ``priority``, or None."""
        node = self.root
        while node is not None and node.value != priority:
            node = node.left if priority < node.value else node.right
        return node

    def is_empty(self) -> bool:
        return self.root is None

    def _leftmost(self) -> tuple[Node | None, Node | None]:
        parent, node = None, self.root
        if node is None:
            return None, None
        while node.left is not None:
            parent, node = node, node.left
        return parent, node

    def peek(self) -> Patient | None:
        """Next patient of the lowest priority node, or None if it has none."""
        _, node = self._leftmost()
        return node.queue.peek() if node is not None else None

    def insert(self, patient: Patient) -> None:
        """Queue a patient under its priority; others are ignored."""
        priority = int(patient.priority)
        if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
            return
        if self.root is None:
            self.root = Node(priority)
            self.root.queue.append(patient)
            return
        node = self.root
        while True:
            if priority == node.value:
                node.queue.append(patient)
                return
            side = "left" if priority < node.value else "right"
            child = getattr(node, side)
            if child is None:
                child = Node(priority)
                child.queue.append(patient)
                setattr(node, side, child)
                return
            node = child

    def pop(self) -> Patient | None:
        """Take the next patient of the lowest priority node.

        Returns None when that node's queue is empty. A node whose queue
        becomes empty is removed from the tree.
        """
        parent, node = self._leftmost()
        if node is None or not node.queue:
            return None
        patient = node.queue.pop()
        if not node.queue:
            replacement = _remove_node(node)
            if parent is None:
                self.root = replacement
            elif parent.left is node:
                parent.left = replacement
            else:
                parent.right = replacement
        return patient

    def _in_order(self, node: Node | None):
        if node is None:
            return
        yield from self._in_order(node.left)
        yield node
        yield from self._in_order(node.right)

    def render(self) -> str:
        """In-order listing of every priority and its queue."""
        parts = []
        for node in self._in_order(self.root):
            parts.append(f"Prioridade {node.value}:\n")
            if node.queue:
                ids = " -> ".join(f"F{p.id}" for p in node.queue)
                parts.append(f"  [Fila] -> {ids}\n")
            else:
                parts.append("  [Fila] -> (vazia)\n")
            parts.append("\n")
        return "".join(parts)