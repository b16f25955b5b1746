from __future__ import annotations

import pytest

from urgencias.app.application.usecases.asignar_profesional import AsignarProfesional
from urgencias.app.domain.exceptions import NoEncontradoError
from urgencias.app.domain.personas import Paciente, Profesional
from urgencias.app.infrastructure.memoria.repos_asignaciones import AsignacionesRepository
from urgencias.app.infrastructure.memoria.repos_pacientes import PacientesRepository
from urgencias.app.infrastructure.memoria.repos_profesionales import ProfesionalesRepository


def _uc(*profesionales: Profesional, fecha_admision: str = "2024-01-15"):
    pacientes = PacientesRepository()
    pacientes.registrar(Paciente("X", "Ana", "Neri", "2000-01-01", "Tos", fecha_admision))
    repo = ProfesionalesRepository()
    for profesional in profesionales:
        repo.guardar(profesional)
    asignaciones = AsignacionesRepository()
    return AsignarProfesional(pacientes, repo, asignaciones), asignaciones


def test_desempate_por_id_menor() -> None:
    uc, _ = _uc(
        Profesional.nuevo("b", "Marco", "Rossi", "Cardiologia", "2024-01-01 to 2024-01-31"),
        Profesional.nuevo("a", "Giulia", "Bianchi", "Cardiologia", "2024-01-01 to 2024-01-31"),
    )

    assert uc.ejecutar("X", "Cardiologia") == "a"


def test_guardia_contiene_fecha_admision() -> None:
    guardia = Profesional.nuevo("P1", "Marco", "Rossi", "Cardiologia", "2024-01-01 to 2024-01-31")

    dentro, _ = _uc(guardia, fecha_admision="2024-01-15")
    fuera, _ = _uc(guardia, fecha_admision="2024-02-01")

    assert dentro.ejecutar("X", "Cardiologia") == "P1"
    with pytest.raises(NoEncontradoError):
        fuera.ejecutar("X", "Cardiologia")


def test_ignora_otras_especialidades() -> None:
    uc, _ = _uc(
        Profesional.nuevo("A0", "Anna", "Verdi", "Pediatria", "2024-01-01 to 2024-12-31"),
        Profesional.nuevo("Z9", "Marco", "Rossi", "Cardiologia", "2024-01-01 to 2024-12-31"),
    )

    assert uc.ejecutar("X", "Cardiologia") == "Z9"


def test_paciente_inexistente() -> None:
    uc, _ = _uc(Profesional.nuevo("P1", "Marco", "Rossi", "Cardiologia", "2024-01-01 to 2024-01-31"))

    with pytest.raises(NoEncontradoError):
        uc.ejecutar("NOPE", "Cardiologia")


def test_registra_la_asignacion_y_la_ultima_gana() -> None:
    uc, asignaciones = _uc(
        Profesional.nuevo("C1", "Marco", "Rossi", "Cardiologia", "2024-01-01 to 2024-01-31"),
        Profesional.nuevo("N1", "Sara", "Conti", "Neurologia", "2024-01-01 to 2024-01-31"),
    )

    uc.ejecutar("X", "Cardiologia")
    assert asignaciones.profesional_de("X") == "C1"

    uc.ejecutar("X", "Neurologia")
    assert asignaciones.profesional_de("X") == "N1"


def test_sin_candidatos_no_registra_asignacion() -> None:
    uc, asignaciones = _uc()

    with pytest.raises(NoEncontradoError):
        uc.ejecutar("X", "Cardiologia")
    assert asignaciones.profesional_de("X") is None


def test_asignacion_desde_fachada(facade, seed_data) -> None:
    assert facade.asignar_paciente_a_profesional("RSSMRA85T10A562S", "Cardiologia") == "P001"
    # Admitido el 2024-02-01: P003 ya no está de guardia.
    assert facade.asignar_paciente_a_profesional("VRDGPP70M01H501Z", "Cardiologia") == "P001"
    assert facade.asignar_paciente_a_profesional("VRDGPP70M01H501Z", "Pediatria") == "P002"
