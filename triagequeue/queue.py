"""First-in, first-out queue of patients."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from .patient import Patient


class PatientQueue:
    """Patients in arrival order."""

    def __init__(self) -> None:
        self._items: deque[Patient] = deque()

    def append(self, patient: Patient) -> None:
        """Add a patient at the end of the queue."""
        self._items.append(patient)

    def pop(self) -> Patient:
        """Remove and return the first patient; IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty patient queue")
        return self._items.popleft()

    def peek(self) -> Patient | None:
        """Return the first patient without removing it, or None."""
        return self._items[0] if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Patient]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)