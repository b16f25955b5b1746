# application/csv/csv_io.py
"""
Lectura CSV para la importación masiva.

Características:
- Fuente: ruta (str/Path) o stream de texto ya abierto
- Lectura robusta de ficheros (utf-8-sig, fallback latin-1)
- La primera línea es cabecera y se descarta
- Líneas en blanco ignoradas
- Campos entrecomillados soportados (p. ej. el periodo "<inicio> to <fin>")
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, TextIO, Union

from urgencias.app.application.csv.csv_errors import ErrorLecturaCsv

FuenteCsv = Union[str, Path, TextIO]


# ---------------------------------------------------------------------
# Tipos
# ---------------------------------------------------------------------


@dataclass(slots=True)
class CsvRow:
    row_number: int          # 1-based (la cabecera es la fila 1)
    fields: List[str]


# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------


def _read_text(path: Path) -> str:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ErrorLecturaCsv(f"No se puede leer {path}: {exc}") from exc
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def _load(fuente: Optional[FuenteCsv]) -> str:
    if fuente is None:
        raise ErrorLecturaCsv("Fuente CSV no indicada.")
    if isinstance(fuente, (str, Path)):
        return _read_text(Path(fuente))
    try:
        text = fuente.read()
    except (OSError, ValueError) as exc:
        # ValueError: stream ya cerrado.
        raise ErrorLecturaCsv(f"No se puede leer la fuente CSV: {exc}") from exc
    if not isinstance(text, str):
        raise ErrorLecturaCsv("La fuente CSV debe abrirse en modo texto.")
    return text


# ---------------------------------------------------------------------
# API
# ---------------------------------------------------------------------


def read_rows(fuente: Optional[FuenteCsv]) -> List[CsvRow]:
    """Devuelve las filas de datos (sin cabecera) con sus campos sin espacios laterales."""
    text = _load(fuente)
    rows: List[CsvRow] = []
    reader = csv.reader(io.StringIO(text), skipinitialspace=True)
    for idx, raw in enumerate(reader, start=1):
        if idx == 1:
            continue
        fields = [f.strip() for f in raw]
        if not any(fields):
            continue
        rows.append(CsvRow(row_number=idx, fields=fields))
    return rows
