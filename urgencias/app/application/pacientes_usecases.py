from __future__ import annotations

from dataclasses import dataclass
from typing import List

from urgencias.app.domain.exceptions import NoEncontradoError
from urgencias.app.domain.personas import Paciente
from urgencias.app.domain.repositorios import RepositorioPacientes
# Importamos el contrato (RepositorioPacientes) para depender de abstracciones, no del almacenamiento.


@dataclass(frozen=True)
class RegistrarPaciente:
    """
    Caso de uso: admitir un paciente en urgencias.
    Si el código fiscal ya existe se devuelve el paciente guardado, sin cambios.
    """
    repo: RepositorioPacientes

    def ejecutar(
        self,
        codigo_fiscal: str,
        nombre: str,
        apellidos: str,
        fecha_nacimiento: str,
        motivo: str,
        fecha_admision: str,
    ) -> Paciente:
        return self.repo.registrar(
            Paciente(
                codigo_fiscal=codigo_fiscal,
                nombre=nombre,
                apellidos=apellidos,
                fecha_nacimiento=fecha_nacimiento,
                motivo=motivo,
                fecha_admision=fecha_admision,
            )
        )


@dataclass(frozen=True)
class BuscarPacientes:
    """
    Caso de uso: buscar por código fiscal o por apellidos (coincidencia exacta).
    """
    repo: RepositorioPacientes

    def ejecutar(self, identificador: str) -> List[Paciente]:
        encontrados = [
            p for p in self.repo.listar_todos()
            if p.codigo_fiscal == identificador or p.apellidos == identificador
        ]
        if not encontrados:
            raise NoEncontradoError("Ningún paciente coincide con el identificador.")
        return encontrados


@dataclass(frozen=True)
class ListarCodigosPorFecha:
    """
    Caso de uso: códigos fiscales admitidos en una fecha, por apellidos y nombre.
    Sin coincidencias devuelve lista vacía.
    """
    repo: RepositorioPacientes

    def ejecutar(self, fecha: str) -> List[str]:
        pacientes = [p for p in self.repo.listar_todos() if p.fecha_admision == fecha]
        pacientes.sort(key=lambda p: (p.apellidos, p.nombre))
        return [p.codigo_fiscal for p in pacientes]
