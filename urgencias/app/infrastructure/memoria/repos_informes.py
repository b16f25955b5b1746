# infrastructure/memoria/repos_informes.py
"""
Almacén en memoria de informes clínicos.

Ids: string de un contador entero propio de cada instancia. Empieza en 1,
se incrementa tras cada guardado y no se reinicia ni se reutiliza.
"""

from __future__ import annotations

from typing import Dict, List

from urgencias.app.domain.exceptions import NoEncontradoError
from urgencias.app.domain.informes import Informe
from urgencias.app.domain.repositorios import RepositorioInformes


class InformesRepository(RepositorioInformes):
    def __init__(self, primer_id: int = 1) -> None:
        self._siguiente_id = primer_id
        self._items: Dict[str, Informe] = {}

    def crear(self, profesional_id: str, codigo_fiscal: str, fecha: str, descripcion: str) -> Informe:
        informe = Informe(
            id=str(self._siguiente_id),
            profesional_id=profesional_id,
            codigo_fiscal=codigo_fiscal,
            fecha=fecha,
            descripcion=descripcion,
        )
        self._items[informe.id] = informe
        self._siguiente_id += 1
        return informe

    def obtener(self, informe_id: str) -> Informe:
        try:
            return self._items[informe_id]
        except KeyError:
            raise NoEncontradoError(f"No existe el informe {informe_id}.") from None

    def listar_por_paciente(self, codigo_fiscal: str) -> List[Informe]:
        return [i for i in self._items.values() if i.codigo_fiscal == codigo_fiscal]
