"""Interactive menu that changes settings and hands over new patients."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, TextIO

from .configs import Configs, ConfigStore, Status
from .patient import Patient, PatientStore

MIN_PROCESSING_TIME = 5
MAX_PROCESSING_TIME = 10

_MENU_TEXT = (
    "1. Aguardar\n2. Simular\n3. Terminar\n4. Ler\n5. Adicionar\n0. Sair\n"
    "Informe a opção desejada: "
)

_STATUS_OPTIONS = {1: Status.WAIT, 2: Status.SIMULATE, 3: Status.FINISH}


def format_patient(patient: Patient) -> str:
    """Render a patient record for display."""
    return (
        " \npaciente: {"
        f"\n  id: {patient.id}"
        f"\n  prioridade: {int(patient.priority)}"
        f"\n  tempo_processamento: {patient.processing_time}"
        f"\n  finalizado: {patient.finished}"
        "\n}\n\n"
    )


class Menu:
    """Reads options from the user and acts on the shared files."""

    def __init__(
        self,
        config_store: ConfigStore | None = None,
        patient_store: PatientStore | None = None,
        read: Callable[[], str] = input,
        out: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config_store = config_store if config_store is not None else ConfigStore()
        self.patient_store = (
            patient_store if patient_store is not None else PatientStore()
        )
        self.read = read
        self.out = out if out is not None else sys.stdout
        self.rng = rng if rng is not None else random.Random()
        self.patient = self.patient_store.initial()
        self.config_store.read()

    def _say(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def _read_int(self) -> int | None:
        try:
            return int(self.read().strip())
        except ValueError:
            return None

    def choose(self) -> int:
        """Show the menu and return the chosen option, -1 if not a number."""
        self._say(_MENU_TEXT)
        option = self._read_int()
        return -1 if option is None else option

    def add_patient(self, priority: int) -> Patient:
        """Store a new patient with the next id and a random processing time."""
        self.patient.id += 1
        self.patient.processing_time = self.rng.randint(
            MIN_PROCESSING_TIME, MAX_PROCESSING_TIME
        )
        self.patient.priority = priority
        self.patient.finished = 0
        self.patient_store.save(self.patient)
        self._say(f"id: {self.patient.id}\nprioridade: {priority}\n")
        return Patient(
            self.patient.id,
            self.patient.processing_time,
            self.patient.priority,
            self.patient.finished,
            self.patient.specialty,
        )

    def show(self) -> tuple[Configs, Patient]:
        """Display and return the stored settings and last patient."""
        configs = self.config_store.read()
        self._say(configs.describe())
        patient = self.patient_store.read()
        self._say(format_patient(patient))
        return configs, patient

    def handle(self, option: int) -> bool:
        """Act on one option; return False when the user chose to leave."""
        if option in _STATUS_OPTIONS:
            self.config_store.update(_STATUS_OPTIONS[option], 1)
        elif option == 4:
            self.show()
        elif option == 5:
            self._say("Informe a prioridade: ")
            priority = self._read_int()
            if priority is None:
                self._say("Opção inválida!\n")
            else:
                self.add_patient(priority)
        elif option == 0:
            self._say("Até a próxima!\n")
            return False
        else:
            self._say("Opção inválida!\n")
        return True

    def run(self) -> None:
        """Keep reading options until the user leaves."""
        while self.handle(self.choose()):
            pass


def main(argv: list[str] | None = None) -> int:
    """Start the interactive menu."""
    parser = argparse.ArgumentParser(description="Control the patient simulation.")
    parser.add_argument("--config", default=None, help="settings file")
    parser.add_argument("--patients", default=None, help="new patient file")
    args = parser.parse_args(argv)
    config_store = ConfigStore(args.config) if args.config else ConfigStore()
    patient_store = PatientStore(args.patients) if args.patients else PatientStore()
    try:
        Menu(config_store, patient_store).run()
    except (EOFError, KeyboardInterrupt):
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())