"""Processing settings shared through a small binary file."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

DEFAULT_PATH = "./configuracoes.dat"

_RECORD = struct.Struct("=ii")


class Status(IntEnum):
    """What the simulation should be doing."""

    WAIT = 0
    SIMULATE = 1
    FINISH = 2


_LABELS = {Status.WAIT: "Aguardar", Status.SIMULATE: "Simular"}


@dataclass
class Configs:
    """Current status and polling interval in seconds."""

    status: Status = Status.WAIT
    interval: int = 1

    def to_bytes(self) -> bytes:
        """Encode the settings as a binary record."""
        return _RECORD.pack(int(self.status), self.interval)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Configs":
        """Decode settings from the start of a binary record."""
        if len(data) < _RECORD.size:
            raise ValueError(
                f"config record needs {_RECORD.size} bytes, got {len(data)}"
            )
        status, interval = _RECORD.unpack_from(data)
        return cls(Status(status), interval)

    def describe(self) -> str:
        """Human-readable summary of the settings."""
        label = _LABELS.get(self.status, "Terminar")
        return (
            "\nConfigurações:\n"
            f" - Status: {label}\n"
            f" - Intervalo: {self.interval} segundo\n\n"
        )


class ConfigStore:
    """File holding the shared settings."""

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def _ensure(self) -> None:
        if not self.path.exists():
            self.path.write_bytes(Configs().to_bytes())

    def read(self) -> Configs:
        """Return the stored settings, creating defaults if missing."""
        self._ensure()
        return Configs.from_bytes(self.path.read_bytes())

    def save(self, configs: Configs) -> None:
        """Overwrite the stored settings."""
        self._ensure()
        with self.path.open("r+b") as handle:
            handle.write(configs.to_bytes())

    def update(self, status: Status, interval: int) -> Configs:
        """Store a new status and interval and return them."""
        configs = Configs(Status(status), interval)
        self.save(configs)
        return configs