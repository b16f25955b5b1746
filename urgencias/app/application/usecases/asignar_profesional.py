# application/usecases/asignar_profesional.py
"""
Caso de uso: Asignar un paciente a un profesional.

Reglas:
- Paciente inexistente -> NoEncontradoError.
- Candidatos: misma especialidad (comparación exacta) y periodo de guardia
  que contiene la fecha de admisión (inicio <= admisión <= fin).
- Desempate determinista: id lexicográficamente menor.
- Sin candidatos -> NoEncontradoError.

Efectos:
- Registra la asignación (código fiscal -> id profesional); una asignación
  posterior del mismo paciente sustituye a la anterior.
"""

from __future__ import annotations

from dataclasses import dataclass

from urgencias.app.bootstrap_logging import get_logger
from urgencias.app.domain.exceptions import NoEncontradoError
from urgencias.app.domain.informes import Asignacion
from urgencias.app.domain.repositorios import (
    RepositorioAsignaciones,
    RepositorioPacientes,
    RepositorioProfesionales,
)


LOGGER = get_logger(__name__)


@dataclass(slots=True)
class AsignarProfesional:
    pacientes: RepositorioPacientes
    profesionales: RepositorioProfesionales
    asignaciones: RepositorioAsignaciones

    def ejecutar(self, codigo_fiscal: str, especialidad: str) -> str:
        paciente = self.pacientes.obtener(codigo_fiscal)
        candidatos = [
            p.id
            for p in self.profesionales.listar_todos()
            if p.especialidad == especialidad and p.disponible_en(paciente.fecha_admision)
        ]
        if not candidatos:
            LOGGER.info("asignacion_sin_candidatos", extra={"especialidad": especialidad})
            raise NoEncontradoError(
                f"No hay profesionales de {especialidad} de guardia el {paciente.fecha_admision}."
            )

        profesional_id = min(candidatos)
        self.asignaciones.registrar(Asignacion(codigo_fiscal=codigo_fiscal, profesional_id=profesional_id))
        LOGGER.info(
            "profesional_asignado",
            extra={"profesional_id": profesional_id, "especialidad": especialidad, "candidatos": len(candidatos)},
        )
        return profesional_id
