"""Entidades de dominio relacionadas con personas."""

from __future__ import annotations

from dataclasses import dataclass

from urgencias.app.domain.enums import EstadoPaciente
from urgencias.app.domain.exceptions import TransicionEstadoError
from urgencias.app.domain.periodos import PeriodoGuardia


@dataclass(frozen=True, slots=True)
class Profesional:
    """Profesional de urgencias. Inmutable: re-registrar el id lo sustituye."""

    id: str
    nombre: str
    apellidos: str
    especialidad: str
    periodo: PeriodoGuardia

    @classmethod
    def nuevo(cls, id: str, nombre: str, apellidos: str, especialidad: str, periodo: str) -> "Profesional":
        return cls(
            id=id,
            nombre=nombre,
            apellidos=apellidos,
            especialidad=especialidad,
            periodo=PeriodoGuardia.desde_texto(periodo),
        )

    @property
    def periodo_texto(self) -> str:
        return self.periodo.como_texto()

    def en_servicio_durante(self, periodo: PeriodoGuardia) -> bool:
        return self.periodo.contiene_periodo(periodo)

    def disponible_en(self, fecha: str) -> bool:
        return self.periodo.contiene_fecha(fecha)


@dataclass(slots=True)
class Paciente:
    """
    Paciente admitido en urgencias.

    Ciclo de vida: ADMITIDO -> HOSPITALIZADO | DADO_DE_ALTA.
    Ambos destinos son terminales.
    """

    codigo_fiscal: str
    nombre: str
    apellidos: str
    fecha_nacimiento: str
    motivo: str
    fecha_admision: str
    estado: EstadoPaciente = EstadoPaciente.ADMITIDO

    def hospitalizar(self) -> None:
        self._transicionar(EstadoPaciente.HOSPITALIZADO)

    def dar_alta(self) -> None:
        self._transicionar(EstadoPaciente.DADO_DE_ALTA)

    def _transicionar(self, destino: EstadoPaciente) -> None:
        if self.estado is not EstadoPaciente.ADMITIDO:
            raise TransicionEstadoError(
                f"El paciente {self.codigo_fiscal} ya está en {self.estado.value}; no puede pasar a {destino.value}."
            )
        self.estado = destino
