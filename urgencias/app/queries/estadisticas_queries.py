from __future__ import annotations

import logging

from urgencias.app.domain.enums import EstadoPaciente
from urgencias.app.domain.repositorios import (
    RepositorioAsignaciones,
    RepositorioDepartamentos,
    RepositorioPacientes,
    RepositorioProfesionales,
)


logger = logging.getLogger(__name__)


class EstadisticasQueries:
    """
    Recuentos derivados del contenido de los repositorios.

    No guarda estado propio: cada consulta recorre los datos actuales.
    """

    def __init__(
        self,
        pacientes: RepositorioPacientes,
        departamentos: RepositorioDepartamentos,
        profesionales: RepositorioProfesionales,
        asignaciones: RepositorioAsignaciones,
    ) -> None:
        self._pacientes = pacientes
        self._departamentos = departamentos
        self._profesionales = profesionales
        self._asignaciones = asignaciones

    def numero_pacientes(self) -> int:
        return len(self._pacientes)

    def numero_pacientes_por_fecha(self, fecha: str) -> int:
        return sum(1 for p in self._pacientes.listar_todos() if p.fecha_admision == fecha)

    def numero_hospitalizados_en_departamento(self, nombre_departamento: str) -> int:
        return self._departamentos.obtener(nombre_departamento).numero_hospitalizados

    def capacidad_departamento(self, nombre_departamento: str) -> int:
        """Camas con las que se dio de alta el departamento, ocupadas o no."""
        return self._departamentos.obtener(nombre_departamento).capacidad_inicial

    def numero_dados_de_alta(self) -> int:
        return sum(1 for p in self._pacientes.listar_todos() if p.estado is EstadoPaciente.DADO_DE_ALTA)

    def numero_dados_de_alta_por_especialidad(self, especialidad: str) -> int:
        # Join: paciente dado de alta -> profesional asignado -> especialidad actual.
        total = 0
        for paciente in self._pacientes.listar_todos():
            if paciente.estado is not EstadoPaciente.DADO_DE_ALTA:
                continue
            profesional_id = self._asignaciones.profesional_de(paciente.codigo_fiscal)
            if profesional_id is None:
                continue
            profesional = self._profesionales.get_by_id(profesional_id)
            if profesional is None:
                logger.warning("Asignación a profesional inexistente: %s", profesional_id)
                continue
            if profesional.especialidad == especialidad:
                total += 1
        return total
