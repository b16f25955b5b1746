from __future__ import annotations

from dataclasses import dataclass

from urgencias.app.domain.enums import EstadoPaciente, ResultadoVerificacion
from urgencias.app.domain.repositorios import RepositorioPacientes


@dataclass(frozen=True)
class VerificarPaciente:
    """
    Caso de uso: clasificar el estado de un paciente.
    ADMITIDO se informa como NINGUNO (ni hospitalizado ni dado de alta).
    """
    repo: RepositorioPacientes

    def ejecutar(self, codigo_fiscal: str) -> ResultadoVerificacion:
        estado = self.repo.obtener(codigo_fiscal).estado
        if estado is EstadoPaciente.DADO_DE_ALTA:
            return ResultadoVerificacion.DADO_DE_ALTA
        if estado is EstadoPaciente.HOSPITALIZADO:
            return ResultadoVerificacion.HOSPITALIZADO
        return ResultadoVerificacion.NINGUNO
