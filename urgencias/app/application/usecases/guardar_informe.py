from __future__ import annotations

from dataclasses import dataclass

from urgencias.app.bootstrap_logging import get_logger
from urgencias.app.domain.informes import Informe
from urgencias.app.domain.repositorios import RepositorioInformes, RepositorioProfesionales


LOGGER = get_logger(__name__)


@dataclass(slots=True)
class GuardarInforme:
    """
    Caso de uso: guardar un informe clínico.

    Solo se valida el profesional. El paciente no se comprueba: se admiten
    informes sobre códigos fiscales aún no registrados.
    """

    profesionales: RepositorioProfesionales
    informes: RepositorioInformes

    def ejecutar(self, profesional_id: str, codigo_fiscal: str, fecha: str, descripcion: str) -> Informe:
        self.profesionales.obtener(profesional_id)
        informe = self.informes.crear(profesional_id, codigo_fiscal, fecha, descripcion)
        LOGGER.info("informe_guardado", extra={"informe_id": informe.id, "profesional_id": profesional_id})
        return informe
