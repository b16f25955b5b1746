from __future__ import annotations

from urgencias.app.domain.exceptions import ValidationError


class ErrorLecturaCsv(OSError):
    """Fuente CSV ausente o ilegible."""


class CsvErrorMixin:
    def _row_error(self, row_number: int, message: str) -> ValidationError:
        return ValidationError(f"Fila {row_number}: {message}")

    def _check_columns(self, row_number: int, fields: list[str], expected: int) -> None:
        if len(fields) != expected:
            raise self._row_error(row_number, f"se esperaban {expected} columnas, hay {len(fields)}.")
