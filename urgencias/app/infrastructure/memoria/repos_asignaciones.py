# infrastructure/memoria/repos_asignaciones.py
"""
Historial de asignaciones paciente -> profesional.

Una entrada por paciente; una nueva asignación sustituye a la anterior.
"""

from __future__ import annotations

from typing import Dict, Optional

from urgencias.app.domain.informes import Asignacion
from urgencias.app.domain.repositorios import RepositorioAsignaciones


class AsignacionesRepository(RepositorioAsignaciones):
    def __init__(self) -> None:
        self._por_paciente: Dict[str, str] = {}

    def registrar(self, asignacion: Asignacion) -> None:
        self._por_paciente[asignacion.codigo_fiscal] = asignacion.profesional_id

    def profesional_de(self, codigo_fiscal: str) -> Optional[str]:
        return self._por_paciente.get(codigo_fiscal)
