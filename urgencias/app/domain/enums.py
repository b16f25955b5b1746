# domain/enums.py
from __future__ import annotations
from enum import Enum


class EstadoPaciente(str, Enum):
    ADMITIDO = "ADMITIDO"
    HOSPITALIZADO = "HOSPITALIZADO"
    DADO_DE_ALTA = "DADO_DE_ALTA"


class ResultadoVerificacion(str, Enum):
    """Clasificación devuelta al verificar un paciente."""

    DADO_DE_ALTA = "DADO_DE_ALTA"
    HOSPITALIZADO = "HOSPITALIZADO"
    NINGUNO = "NINGUNO"
