"""Utilidades internas de dominio."""

from __future__ import annotations

from urgencias.app.domain.exceptions import ValidationError


def _ensure_non_negative(value: int, field_name: str) -> None:
    """Exige entero >= 0; lanza ValidationError si no cumple."""
    if value < 0:
        raise ValidationError(f"{field_name} no puede ser negativo.")
