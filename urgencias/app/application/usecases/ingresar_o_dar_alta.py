# application/usecases/ingresar_o_dar_alta.py
"""
Caso de uso: Hospitalizar o dar de alta a un paciente.

Reglas:
- Paciente o departamento inexistente -> NoEncontradoError.
- Solo un paciente ADMITIDO puede cambiar de estado; cualquier otro estado
  lanza TransicionEstadoError sin tocar el departamento.
- Con cama libre: el departamento ocupa una cama y el paciente pasa a
  HOSPITALIZADO. Sin cama: el paciente pasa a DADO_DE_ALTA.
"""

from __future__ import annotations

from dataclasses import dataclass

from urgencias.app.bootstrap_logging import get_logger
from urgencias.app.domain.enums import EstadoPaciente
from urgencias.app.domain.exceptions import TransicionEstadoError
from urgencias.app.domain.repositorios import RepositorioDepartamentos, RepositorioPacientes


LOGGER = get_logger(__name__)


@dataclass(slots=True)
class IngresarODarAlta:
    pacientes: RepositorioPacientes
    departamentos: RepositorioDepartamentos

    def ejecutar(self, codigo_fiscal: str, nombre_departamento: str) -> EstadoPaciente:
        paciente = self.pacientes.obtener(codigo_fiscal)
        departamento = self.departamentos.obtener(nombre_departamento)

        if paciente.estado is not EstadoPaciente.ADMITIDO:
            LOGGER.warning(
                "transicion_rechazada",
                extra={"departamento": nombre_departamento, "estado": paciente.estado.value},
            )
            raise TransicionEstadoError(
                f"El paciente ya está en {paciente.estado.value}; no admite otra transición."
            )

        if departamento.tiene_camas_disponibles():
            departamento.hospitalizar(paciente.codigo_fiscal)
            paciente.hospitalizar()
            LOGGER.info(
                "paciente_hospitalizado",
                extra={"departamento": departamento.nombre, "camas_restantes": departamento.camas_disponibles},
            )
        else:
            paciente.dar_alta()
            LOGGER.info("paciente_dado_de_alta", extra={"departamento": departamento.nombre})
        return paciente.estado
