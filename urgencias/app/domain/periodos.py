# domain/periodos.py
"""
Periodo de guardia de un profesional.

Las fechas se comparan como strings. Precondición de formato: ISO-8601
("AAAA-MM-DD"), de modo que el orden lexicográfico coincide con el
cronológico. No se convierten a date/datetime ni se normalizan: un periodo
con inicio > fin se guarda tal cual.
"""

from __future__ import annotations

from dataclasses import dataclass

from urgencias.app.domain.exceptions import ValidationError

SEPARADOR = " to "


@dataclass(frozen=True, slots=True)
class PeriodoGuardia:
    inicio: str
    fin: str

    @classmethod
    def desde_texto(cls, texto: str) -> "PeriodoGuardia":
        """Parsea "<inicio> to <fin>"."""
        partes = (texto or "").strip().split(SEPARADOR)
        if len(partes) != 2:
            raise ValidationError(f"Periodo inválido (se espera '<inicio>{SEPARADOR}<fin>'): {texto!r}")
        inicio, fin = (p.strip() for p in partes)
        return cls(inicio=inicio, fin=fin)

    def contiene_periodo(self, otro: "PeriodoGuardia") -> bool:
        # Superconjunto, no solape.
        return self.inicio <= otro.inicio and self.fin >= otro.fin

    def contiene_fecha(self, fecha: str) -> bool:
        return self.inicio <= fecha <= self.fin

    def como_texto(self) -> str:
        return f"{self.inicio}{SEPARADOR}{self.fin}"
