# infrastructure/memoria/repos_departamentos.py
"""
Repositorio en memoria para Departamentos.

Registrar un nombre existente lo sustituye con capacidad completa y sin
pacientes.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from urgencias.app.domain.departamentos import Departamento
from urgencias.app.domain.exceptions import NoEncontradoError
from urgencias.app.domain.repositorios import RepositorioDepartamentos


class DepartamentosRepository(RepositorioDepartamentos):
    def __init__(self) -> None:
        self._items: Dict[str, Departamento] = {}

    def guardar(self, departamento: Departamento) -> None:
        self._items[departamento.nombre] = departamento

    def obtener(self, nombre: str) -> Departamento:
        departamento = self.get_by_id(nombre)
        if departamento is None:
            raise NoEncontradoError(f"No existe el departamento {nombre}.")
        return departamento

    def get_by_id(self, nombre: str) -> Optional[Departamento]:
        return self._items.get(nombre)

    def listar_nombres(self) -> List[str]:
        if not self._items:
            raise NoEncontradoError("No hay departamentos registrados.")
        return list(self._items)
