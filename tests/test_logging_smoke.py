from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from urgencias.app.bootstrap_logging import configure_logging, get_logger, log_soft_exception, set_run_context
from urgencias.app.crash_handler import fatal_exception_handler


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_creates_operational_log(tmp_path: Path) -> None:
    configure_logging("test-app", tmp_path, json=False)
    set_run_context("run-test")
    logger = get_logger("tests.logging")

    logger.info("hello operational", extra={"departamento": "Cardiologia"})

    content = (tmp_path / "app.log").read_text(encoding="utf-8")
    assert "hello operational" in content
    assert "run_id=run-test" in content
    assert "departamento=Cardiologia" in content


def test_json_mode_writes_one_object_per_line(tmp_path: Path) -> None:
    configure_logging("test-app", tmp_path, json=True)
    set_run_context("run-json")

    get_logger("tests.logging").info("informe_guardado", extra={"informe_id": "1"})

    lines = (tmp_path / "app.log").read_text(encoding="utf-8").splitlines()
    payload = json.loads(lines[-1])
    assert payload["message"] == "informe_guardado"
    assert payload["informe_id"] == "1"
    assert payload["run_id"] == "run-json"


def test_log_soft_exception_writes_soft_file(tmp_path: Path) -> None:
    configure_logging("test-app", tmp_path, json=False)
    set_run_context("run-soft")
    logger = get_logger("tests.logging")

    try:
        raise ValueError("esperable")
    except ValueError as exc:
        log_soft_exception(logger, exc, {"step": "validation"})

    content = (tmp_path / "crash_soft.log").read_text(encoding="utf-8")
    assert "soft_exception" in content
    assert "ValueError: esperable" in content
    assert "esperable" not in (tmp_path / "app.log").read_text(encoding="utf-8")


def test_fatal_hook_handler_writes_fatal_file(tmp_path: Path) -> None:
    configure_logging("test-app", tmp_path, json=False)
    set_run_context("run-fatal")
    handler = fatal_exception_handler(get_logger("tests.logging"))

    try:
        raise RuntimeError("fatal")
    except RuntimeError as exc:
        handler(type(exc), exc, exc.__traceback__)

    content = (tmp_path / "crash_fatal.log").read_text(encoding="utf-8")
    assert "unhandled_exception" in content
    assert "RuntimeError: fatal" in content


def test_logging_redacts_pii_in_message_and_extra(tmp_path: Path) -> None:
    configure_logging("test-app", tmp_path, json=False)
    set_run_context("run-redact")
    logger = get_logger("tests.logging")

    logger.info(
        "Paciente RSSMRA85T10A562S email mario@example.com",
        extra={"codigo_fiscal": "X-123", "apellidos": "Rossi"},
    )

    content = (tmp_path / "app.log").read_text(encoding="utf-8")
    assert "RSSMRA85T10A562S" not in content
    assert "mario@example.com" not in content
    assert "X-123" not in content
    assert "Rossi" not in content
    assert "***" in content


def test_usecase_events_reach_the_log(tmp_path: Path, facade) -> None:
    configure_logging("test-app", tmp_path, json=False)
    set_run_context("run-uc")
    facade.add_departamento("ER1", 1)
    facade.add_paciente("RSSMRA85T10A562S", "Mario", "Rossi", "1985-12-10", "Dolor", "2024-01-15")

    facade.ingresar_o_dar_alta("RSSMRA85T10A562S", "ER1")

    content = (tmp_path / "app.log").read_text(encoding="utf-8")
    assert "paciente_hospitalizado" in content
    assert "camas_restantes=0" in content
    assert "RSSMRA85T10A562S" not in content
