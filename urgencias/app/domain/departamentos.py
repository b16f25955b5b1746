"""Departamentos y su capacidad de camas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from urgencias.app.domain.value_objects import _ensure_non_negative


@dataclass(slots=True)
class Departamento:
    """
    Departamento hospitalario.

    La capacidad se consume: cada hospitalización resta una cama y nunca se
    devuelve. Los pacientes se guardan por código fiscal, en orden de ingreso.
    """

    nombre: str
    capacidad_inicial: int
    camas_disponibles: int
    pacientes: List[str] = field(default_factory=list)

    @classmethod
    def nuevo(cls, nombre: str, max_pacientes: int) -> "Departamento":
        _ensure_non_negative(max_pacientes, "max_pacientes")
        return cls(nombre=nombre, capacidad_inicial=max_pacientes, camas_disponibles=max_pacientes)

    def tiene_camas_disponibles(self) -> bool:
        return self.camas_disponibles > 0

    def hospitalizar(self, codigo_fiscal: str) -> None:
        """Ocupa una cama. Sin camas libres no hace nada (el llamador ya lo comprobó)."""
        if not self.tiene_camas_disponibles():
            return
        self.pacientes.append(codigo_fiscal)
        self.camas_disponibles -= 1

    @property
    def numero_hospitalizados(self) -> int:
        return len(self.pacientes)
