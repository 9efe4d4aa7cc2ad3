import io
import random

import pytest

from triagequeue.configs import ConfigStore, Status
from triagequeue.menu import Menu, format_patient, main
from triagequeue.patient import Patient, PatientStore


def make_menu(tmp_path, inputs=()):
    feed = iter(inputs)
    configs = ConfigStore(tmp_path / "configs.dat")
    patients = PatientStore(tmp_path / "patients.dat")
    out = io.StringIO()
    menu = Menu(configs, patients, lambda: next(feed), out, random.Random(1))
    return menu, configs, patients, out


def test_choose_reads_option_and_prints_menu(tmp_path):
    menu, _, _, out = make_menu(tmp_path, ["4"])
    assert menu.choose() == 4
    assert "Informe a opção desejada: " in out.getvalue()
    assert "5. Adicionar" in out.getvalue()


def test_choose_non_number_is_invalid(tmp_path):
    menu, _, _, _ = make_menu(tmp_path, ["abc"])
    assert menu.choose() == -1


@pytest.mark.parametrize(
    "option, status",
    [(1, Status.WAIT), (2, Status.SIMULATE), (3, Status.FINISH)],
)
def test_status_options_update_settings(tmp_path, option, status):
    menu, configs, _, _ = make_menu(tmp_path)
    assert menu.handle(option) is True
    stored = configs.read()
    assert stored.status == status
    assert stored.interval == 1


def test_add_patient_increments_id_from_reset(tmp_path):
    menu, _, patients, out = make_menu(tmp_path)
    first = menu.add_patient(2)
    second = menu.add_patient(6)
    assert first.id == 0
    assert second.id == 1
    stored = patients.read()
    assert stored.id == 1
    assert stored.priority == 6
    assert stored.finished == 0
    assert "prioridade: 6" in out.getvalue()


def test_add_patient_processing_time_in_range(tmp_path):
    menu, _, _, _ = make_menu(tmp_path)
    times = {menu.add_patient(1).processing_time for _ in range(50)}
    assert min(times) >= 5
    assert max(times) <= 10


def test_option_five_reads_priority(tmp_path):
    menu, _, patients, _ = make_menu(tmp_path, ["3"])
    assert menu.handle(5) is True
    stored = patients.read()
    assert stored.priority == 3
    assert stored.id == 0


def test_option_five_rejects_non_number(tmp_path):
    menu, _, patients, out = make_menu(tmp_path, ["x"])
    menu.handle(5)
    assert patients.read().id == -1
    assert "Opção inválida!" in out.getvalue()


def test_show_returns_stored_values(tmp_path):
    menu, configs, patients, out = make_menu(tmp_path)
    configs.update(Status.SIMULATE, 1)
    patients.save(Patient(id=4, processing_time=6, priority=2))
    shown_configs, shown_patient = menu.show()
    assert shown_configs.status == Status.SIMULATE
    assert shown_patient.id == 4
    text = out.getvalue()
    assert "Status: Simular" in text
    assert "tempo_processamento: 6" in text


def test_option_zero_says_goodbye(tmp_path):
    menu, _, _, out = make_menu(tmp_path)
    assert menu.handle(0) is False
    assert "Até a próxima!" in out.getvalue()


def test_unknown_option(tmp_path):
    menu, _, _, out = make_menu(tmp_path)
    assert menu.handle(9) is True
    assert "Opção inválida!" in out.getvalue()


def test_run_processes_until_exit(tmp_path):
    menu, configs, patients, out = make_menu(tmp_path, ["2", "5", "4", "x", "3", "0"])
    menu.run()
    assert configs.read().status == Status.FINISH
    assert patients.read().priority == 4
    assert out.getvalue().count("Opção inválida!") == 1


def test_format_patient_lists_fields():
    text = format_patient(Patient(id=2, processing_time=7, priority=1, finished=0))
    assert text.startswith(" \npaciente: {")
    assert "\n  id: 2" in text
    assert "\n  prioridade: 1" in text
    assert "\n  tempo_processamento: 7" in text
    assert text.endswith("\n}\n\n")


def test_main_stops_at_end_of_input(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    config_path = tmp_path / "c.dat"
    code = main(["--config", str(config_path), "--patients", str(tmp_path / "p.dat")])
    assert code == 0
    assert ConfigStore(config_path).read().status == Status.SIMULATE