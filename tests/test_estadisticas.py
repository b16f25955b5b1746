from __future__ import annotations

import pytest

from urgencias.app.domain.exceptions import NoEncontradoError


def test_recuentos_sin_datos(facade) -> None:
    assert facade.numero_pacientes() == 0
    assert facade.numero_pacientes_por_fecha("2024-01-15") == 0
    assert facade.numero_dados_de_alta() == 0
    assert facade.numero_dados_de_alta_por_especialidad("Cardiologia") == 0


def test_numero_pacientes_y_por_fecha(facade, seed_data) -> None:
    assert facade.numero_pacientes() == 3
    assert facade.numero_pacientes_por_fecha("2024-01-15") == 2
    assert facade.numero_pacientes_por_fecha("2024-02-01") == 1
    # Comparación exacta del string de admisión.
    assert facade.numero_pacientes_por_fecha("2024-01") == 0


def test_hospitalizados_por_departamento(facade, seed_data) -> None:
    facade.ingresar_o_dar_alta("RSSMRA85T10A562S", "Cardiologia")
    facade.ingresar_o_dar_alta("BNCLCU90A41F205X", "Cardiologia")

    assert facade.numero_hospitalizados_en_departamento("Cardiologia") == 2
    assert facade.numero_hospitalizados_en_departamento("Pediatria") == 0
    with pytest.raises(NoEncontradoError):
        facade.numero_hospitalizados_en_departamento("NOPE")


def test_capacidad_no_cambia_al_ocupar_camas(facade, seed_data) -> None:
    facade.ingresar_o_dar_alta("RSSMRA85T10A562S", "Cardiologia")

    assert facade.capacidad_departamento("Cardiologia") == 2
    assert facade.get_departamento("Cardiologia").camas_disponibles == 1
    assert facade.capacidad_departamento("Pediatria") == 0
    with pytest.raises(NoEncontradoError):
        facade.capacidad_departamento("NOPE")


def test_numero_pacientes_no_cuenta_registros_repetidos(facade, seed_data) -> None:
    facade.add_paciente("RSSMRA85T10A562S", "Otro", "Nombre", "2000-01-01", "Tos", "2024-03-01")

    assert facade.numero_pacientes() == 3
    assert facade.numero_pacientes_por_fecha("2024-03-01") == 0


def test_dados_de_alta(facade, seed_data) -> None:
    facade.ingresar_o_dar_alta("RSSMRA85T10A562S", "Pediatria")
    facade.ingresar_o_dar_alta("BNCLCU90A41F205X", "Cardiologia")

    assert facade.numero_dados_de_alta() == 1


def test_dados_de_alta_por_especialidad_usa_la_asignacion(facade, seed_data) -> None:
    facade.asignar_paciente_a_profesional("RSSMRA85T10A562S", "Cardiologia")
    facade.asignar_paciente_a_profesional("BNCLCU90A41F205X", "Pediatria")
    facade.asignar_paciente_a_profesional("VRDGPP70M01H501Z", "Cardiologia")

    facade.ingresar_o_dar_alta("RSSMRA85T10A562S", "Pediatria")
    facade.ingresar_o_dar_alta("BNCLCU90A41F205X", "Pediatria")
    facade.ingresar_o_dar_alta("VRDGPP70M01H501Z", "Cardiologia")

    assert facade.numero_dados_de_alta() == 2
    assert facade.numero_dados_de_alta_por_especialidad("Cardiologia") == 1
    assert facade.numero_dados_de_alta_por_especialidad("Pediatria") == 1
    assert facade.numero_dados_de_alta_por_especialidad("Neurologia") == 0


def test_dado_de_alta_sin_asignacion_no_cuenta(facade, seed_data) -> None:
    facade.ingresar_o_dar_alta("RSSMRA85T10A562S", "Pediatria")

    assert facade.numero_dados_de_alta() == 1
    assert facade.numero_dados_de_alta_por_especialidad("Cardiologia") == 0
