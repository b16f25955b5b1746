# application/csv/csv_service.py
"""
Importación masiva de profesionales y departamentos.

Formatos (la primera línea es cabecera):
- Profesionales: id,nombre,apellidos,especialidad,"<inicio> to <fin>"
- Departamentos: nombre,capacidad_maxima

Cada fila se registra con la misma semántica que el alta individual:
los ids/nombres repetidos sustituyen al registro anterior.
Una fila mal formada aborta la importación con ValidationError; las filas
anteriores ya quedaron registradas.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from urgencias.app.application.csv.csv_errors import CsvErrorMixin
from urgencias.app.application.csv.csv_io import FuenteCsv, read_rows
from urgencias.app.bootstrap_logging import get_logger, log_soft_exception
from urgencias.app.container import AppContainer
from urgencias.app.domain.departamentos import Departamento
from urgencias.app.domain.exceptions import ValidationError
from urgencias.app.domain.personas import Profesional


LOGGER = get_logger(__name__)

_COLUMNAS_PROFESIONAL = 5
_COLUMNAS_DEPARTAMENTO = 2


class ImportadorCsv(CsvErrorMixin):
    def __init__(self, container: AppContainer) -> None:
        self._c = container

    def importar_profesionales(self, fuente: Optional[FuenteCsv]) -> int:
        return self._importar(fuente, "profesionales", _COLUMNAS_PROFESIONAL, self._registrar_profesional)

    def importar_departamentos(self, fuente: Optional[FuenteCsv]) -> int:
        return self._importar(fuente, "departamentos", _COLUMNAS_DEPARTAMENTO, self._registrar_departamento)

    # -----------------------------------------------------------------
    # Internos
    # -----------------------------------------------------------------

    def _importar(
        self,
        fuente: Optional[FuenteCsv],
        entidad: str,
        columnas: int,
        registrar: Callable[[List[str]], None],
    ) -> int:
        n = 0
        for row in read_rows(fuente):
            try:
                self._check_columns(row.row_number, row.fields, columnas)
                try:
                    registrar(row.fields)
                except ValidationError as exc:
                    raise self._row_error(row.row_number, str(exc)) from exc
            except ValidationError as exc:
                log_soft_exception(LOGGER, exc, {"entidad": entidad, "fila": row.row_number, "importados": n})
                raise
            n += 1
        LOGGER.info("csv_importado", extra={"entidad": entidad, "registros": n})
        return n

    def _registrar_profesional(self, fields: List[str]) -> None:
        self._c.profesionales_repo.guardar(Profesional.nuevo(*fields))

    def _registrar_departamento(self, fields: List[str]) -> None:
        nombre, capacidad = fields
        try:
            max_pacientes = int(capacidad)
        except ValueError:
            raise ValidationError(f"capacidad no entera: {capacidad!r}.") from None
        self._c.departamentos_repo.guardar(Departamento.nuevo(nombre, max_pacientes))
