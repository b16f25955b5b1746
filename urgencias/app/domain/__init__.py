from urgencias.app.domain.departamentos import Departamento
from urgencias.app.domain.informes import Asignacion, Informe
from urgencias.app.domain.periodos import PeriodoGuardia
from urgencias.app.domain.personas import Paciente, Profesional
from urgencias.app.domain.enums import *  # noqa: F401,F403
from urgencias.app.domain.exceptions import *  # noqa: F401,F403

__all__ = [
    "PeriodoGuardia",
    "Profesional",
    "Paciente",
    "Departamento",
    "Informe",
    "Asignacion",
]
