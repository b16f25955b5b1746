# infrastructure/memoria/repos_profesionales.py
"""
Repositorio en memoria para Profesionales.

Responsabilidades:
- Alta/sustitución por id
- Búsqueda por especialidad y por periodo de servicio

No contiene:
- Lógica de asignación a pacientes
- Lectura de ficheros
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from urgencias.app.domain.exceptions import NoEncontradoError
from urgencias.app.domain.periodos import PeriodoGuardia
from urgencias.app.domain.personas import Profesional
from urgencias.app.domain.repositorios import RepositorioProfesionales


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Repositorio
# ---------------------------------------------------------------------


class ProfesionalesRepository(RepositorioProfesionales):
    def __init__(self) -> None:
        self._items: Dict[str, Profesional] = {}

    # --------------------------------------------------------------
    # Alta / lectura
    # --------------------------------------------------------------

    def guardar(self, profesional: Profesional) -> None:
        if profesional.id in self._items:
            logger.debug("Profesional %s sustituido.", profesional.id)
        self._items[profesional.id] = profesional

    def obtener(self, profesional_id: str) -> Profesional:
        profesional = self.get_by_id(profesional_id)
        if profesional is None:
            raise NoEncontradoError(f"No existe el profesional {profesional_id}.")
        return profesional

    def get_by_id(self, profesional_id: str) -> Optional[Profesional]:
        return self._items.get(profesional_id)

    def listar_todos(self) -> List[Profesional]:
        return list(self._items.values())

    # --------------------------------------------------------------
    # Búsquedas
    # --------------------------------------------------------------

    def listar_por_especialidad(self, especialidad: str) -> List[str]:
        ids = sorted(p.id for p in self._items.values() if p.especialidad == especialidad)
        if not ids:
            raise NoEncontradoError(f"No hay profesionales de {especialidad}.")
        return ids

    def listar_en_servicio(self, especialidad: str, periodo: PeriodoGuardia) -> List[str]:
        ids = sorted(
            p.id
            for p in self._items.values()
            if p.especialidad == especialidad and p.en_servicio_durante(periodo)
        )
        if not ids:
            raise NoEncontradoError(
                f"No hay profesionales de {especialidad} en servicio durante {periodo.como_texto()}."
            )
        return ids
