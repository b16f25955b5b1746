from __future__ import annotations

import difflib
import pprint
from typing import Any, Dict

import pytest

from urgencias.app.application.services.urgencias_facade import UrgenciasFacade
from urgencias.app.container import build_container


@pytest.fixture()
def container():
    return build_container()


@pytest.fixture()
def facade(container) -> UrgenciasFacade:
    return UrgenciasFacade(container)


@pytest.fixture()
def assert_expected_actual():
    def _assert(expected: Any, actual: Any, *, message: str) -> None:
        expected_str = pprint.pformat(expected, width=120)
        actual_str = pprint.pformat(actual, width=120)
        diff = "\n".join(
            difflib.unified_diff(
                expected_str.splitlines(),
                actual_str.splitlines(),
                fromfile="expected",
                tofile="actual",
                lineterm="",
            )
        )
        assert expected == actual, (
            f"{message}\nExpected:\n{expected_str}\nActual:\n{actual_str}\nDiff:\n{diff}"
        )

    return _assert


@pytest.fixture()
def seed_data(facade: UrgenciasFacade) -> Dict[str, Any]:
    facade.add_profesional("P003", "Giulia", "Bianchi", "Cardiologia", "2024-01-01 to 2024-01-31")
    facade.add_profesional("P001", "Marco", "Rossi", "Cardiologia", "2024-01-10 to 2024-03-31")
    facade.add_profesional("P002", "Anna", "Verdi", "Pediatria", "2024-01-01 to 2024-12-31")

    facade.add_departamento("Cardiologia", 2)
    facade.add_departamento("Pediatria", 0)

    facade.add_paciente("RSSMRA85T10A562S", "Mario", "Rossi", "1985-12-10", "Dolor torácico", "2024-01-15")
    facade.add_paciente("BNCLCU90A41F205X", "Lucia", "Bianchi", "1990-01-01", "Fiebre", "2024-01-15")
    facade.add_paciente("VRDGPP70M01H501Z", "Giuseppe", "Verdi", "1970-08-01", "Fractura", "2024-02-01")

    return {
        "profesionales": ["P001", "P002", "P003"],
        "departamentos": ["Cardiologia", "Pediatria"],
        "pacientes": ["RSSMRA85T10A562S", "BNCLCU90A41F205X", "VRDGPP70M01H501Z"],
    }
