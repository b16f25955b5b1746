# infrastructure/memoria/repos_pacientes.py
"""
Repositorio en memoria para Pacientes.

El código fiscal es la clave primaria. El alta es idempotente: si el código
ya existe se devuelve el registro guardado sin modificarlo.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from urgencias.app.domain.exceptions import NoEncontradoError
from urgencias.app.domain.personas import Paciente
from urgencias.app.domain.repositorios import RepositorioPacientes


logger = logging.getLogger(__name__)


class PacientesRepository(RepositorioPacientes):
    def __init__(self) -> None:
        self._items: Dict[str, Paciente] = {}

    def registrar(self, paciente: Paciente) -> Paciente:
        existente = self._items.get(paciente.codigo_fiscal)
        if existente is not None:
            logger.debug("Paciente ya registrado; se conserva el registro original.")
            return existente
        self._items[paciente.codigo_fiscal] = paciente
        return paciente

    def obtener(self, codigo_fiscal: str) -> Paciente:
        paciente = self.get_by_id(codigo_fiscal)
        if paciente is None:
            raise NoEncontradoError("No existe el paciente indicado.")
        return paciente

    def get_by_id(self, codigo_fiscal: str) -> Optional[Paciente]:
        return self._items.get(codigo_fiscal)

    def listar_todos(self) -> List[Paciente]:
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)
