"""Patient records and the single-record file that hands new patients over."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

DEFAULT_PATH = "./novo_cliente_fila.dat"
SPECIALTY_SIZE = 100

_RECORD = struct.Struct(f"=iiii{SPECIALTY_SIZE}s")


class Priority(IntEnum):
    """Named priority levels."""

    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3


@dataclass
class Patient:
    """A patient waiting to be attended."""

    id: int = -1
    processing_time: int = 0
    priority: int = Priority.NONE
    finished: int = 0
    specialty: str = ""

    def to_bytes(self) -> bytes:
        """Encode the patient as a fixed-size binary record."""
        raw = self.specialty.encode("utf-8")
        if len(raw) >= SPECIALTY_SIZE:
            raise ValueError(
                f"specialty must encode to fewer than {SPECIALTY_SIZE} bytes"
            )
        return _RECORD.pack(
            self.id,
            self.processing_time,
            int(self.priority),
            self.finished,
            raw,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "Patient":
        """Decode a patient from the start of a binary record."""
        if len(data) < _RECORD.size:
            raise ValueError(
                f"patient record needs {_RECORD.size} bytes, got {len(data)}"
            )
        ident, processing_time, priority, finished, raw = _RECORD.unpack_from(data)
        specialty = raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        return cls(ident, processing_time, priority, finished, specialty)


class PatientStore:
    """File holding the most recently added patient."""

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def _ensure(self) -> None:
        if not self.path.exists():
            self.path.write_bytes(Patient().to_bytes())

    def read(self) -> Patient:
        """Return the stored patient, creating the file if it is missing."""
        self._ensure()
        return Patient.from_bytes(self.path.read_bytes())

    def save(self, patient: Patient) -> None:
        """Overwrite the stored patient."""
        self._ensure()
        with self.path.open("r+b") as handle:
            handle.write(patient.to_bytes())

    def initial(self) -> Patient:
        """Return the stored patient with its id reset to -1."""
        patient = self.read()
        patient.id = -1
        return patient