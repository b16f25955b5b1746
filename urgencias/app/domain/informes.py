"""Informes clínicos y registro de asignaciones paciente -> profesional."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True, slots=True)
class Informe:
    """Nota clínica numerada secuencialmente. Solo se añaden, nunca se editan."""

    id: str
    profesional_id: str
    codigo_fiscal: str
    fecha: str
    descripcion: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class Asignacion:
    codigo_fiscal: str
    profesional_id: str
