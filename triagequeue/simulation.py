"""Attends patients from the priority tree and the common queue."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from typing import Callable, TextIO

from .configs import ConfigStore, Configs, Status
from .patient import Patient, PatientStore
from .pqueue import PriorityTree
from .queue import PatientQueue

COMMON_PRIORITY = 6
POLL_INTERVAL = 0.1
STEP_INTERVAL = 1


class Simulation:
    """Watches the patient file and serves patients while told to simulate."""

    def __init__(
        self,
        config_store: ConfigStore | None = None,
        patient_store: PatientStore | None = None,
        sleep: Callable[[float], None] = time.sleep,
        out: TextIO | None = None,
    ) -> None:
        self.config_store = config_store if config_store is not None else ConfigStore()
        self.patient_store = (
            patient_store if patient_store is not None else PatientStore()
        )
        self.sleep = sleep
        self.out = out if out is not None else sys.stdout
        self.common = PatientQueue()
        self.tree = PriorityTree()
        self.last_id = -1
        self.configs: Configs = self.config_store.read()
        self._lock = threading.Lock()
        self._stop = threading.Event()

    def _say(self, text: str) -> None:
        self.out.write(text)

    def poll(self) -> Patient | None:
        """Queue the stored patient if it is new; return it, or None."""
        patient = self.patient_store.read()
        if patient.id == self.last_id or patient.id <= -1:
            return None
        with self._lock:
            if patient.priority == COMMON_PRIORITY:
                self.common.append(patient)
            else:
                node = self.tree.find(patient.priority)
                if node is None:
                    self._say(
                        f"Erro: prioridade {patient.priority} não está na árvore "
                        "ou fila não inicializada!\n"
                    )
                    return None
                node.queue.append(patient)
            self.last_id = patient.id
        self._say(f"Novo paciente {patient.id} adicionado à fila (thread).\n")
        return patient

    def simulate(self) -> Patient | None:
        """Attend the next patient, if any, and return it."""
        with self._lock:
            next_priority = self.tree.peek()
            next_common = self.common.peek()
            if next_priority is not None:
                self._say(f"Próximo com prioridade: F{next_priority.id}\n")
            else:
                self._say("Próximo com prioridade: Fila de prioridade vazia.\n")
            if next_common is not None:
                self._say(f"Próximo sem prioridade: F{next_common.id}\n")
            else:
                self._say("Próximo sem prioridade: Fila comum vazia.\n")

            attend: Patient | None = None
            if not self.tree.is_empty():
                attend = self.tree.pop()
            elif self.common:
                attend = self.common.pop()

        if attend is None:
            self._say("Nenhum paciente para simular.\n\n")
            return None
        self._say(
            f"Simulando paciente {attend.id} por "
            f"{attend.processing_time} segundos...\n"
        )
        self.sleep(attend.processing_time)
        self._say("Atendimento finalizado!\n\n")
        return attend

    def step(self) -> bool:
        """Run one cycle; return False once the settings say to finish."""
        self.sleep(STEP_INTERVAL)
        with self._lock:
            tree_text = self.tree.render()
        self._say("\n======== ÁRVORE DE PRIORIDADE ========\n")
        self._say(tree_text)
        self._say("======================================\n\n")
        if self.configs.status == Status.SIMULATE:
            self.simulate()
        else:
            self._say("Aguardando...\n")
        self.configs = self.config_store.read()
        return self.configs.status != Status.FINISH

    def _poll_loop(self) -> None:
        while not self._stop.wait(POLL_INTERVAL):
            self.poll()

    def run(self) -> None:
        """Poll for patients in the background and cycle until told to finish."""
        self._say("Arquivo acessado!\n")
        self.configs = self.config_store.read()
        self._say(self.configs.describe())
        self.last_id = self.patient_store.read().id
        self._say(f"\nultimo id lido: {self.last_id}\n")

        self._stop.clear()
        poller = threading.Thread(target=self._poll_loop, daemon=True)
        poller.start()
        try:
            running = self.configs.status != Status.FINISH
            while running:
                running = self.step()
        finally:
            self._stop.set()
            poller.join()


def main(argv: list[str] | None = None) -> int:
    """Start the simulation loop."""
    parser = argparse.ArgumentParser(description="Simulate patient attendance.")
    parser.add_argument("--config", default=None, help="settings file")
    parser.add_argument("--patients", default=None, help="new patient file")
    args = parser.parse_args(argv)
    config_store = ConfigStore(args.config) if args.config else ConfigStore()
    patient_store = PatientStore(args.patients) if args.patients else PatientStore()
    try:
        Simulation(config_store, patient_store).run()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())