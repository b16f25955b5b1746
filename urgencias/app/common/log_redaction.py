from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

_REDACTED = "***"

_EMAIL_RE = re.compile(r"(?P<user>[A-Za-z0-9._%+-]+)@(?P<domain>[A-Za-z0-9.-]+\.[A-Za-z]{2,})")
# Código fiscal italiano: 6 letras, 2 dígitos, letra, 2 dígitos, letra, 3 dígitos, letra.
_CODIGO_FISCAL_RE = re.compile(r"\b[A-Za-z]{6}\d{2}[A-Za-z]\d{2}[A-Za-z]\d{3}[A-Za-z]\b")
# Las fechas ISO (AAAA-MM-DD) no son teléfonos.
_PHONE_RE = re.compile(r"(?<!\w)(?!\d{4}-\d{2}-\d{2}\b)(?:\+?\d[\d\s().-]{7,}\d)")

_SENSITIVE_KEY_PARTS = (
    "codigo_fiscal",
    "fiscal",
    "telefono",
    "teléfono",
    "phone",
    "email",
    "correo",
    "nombre",
    "apellidos",
    "name",
    "fecha_nacimiento",
    "motivo",
)


def redact_text(value: str) -> str:
    redacted = _EMAIL_RE.sub(lambda _: _REDACTED, value)
    redacted = _CODIGO_FISCAL_RE.sub(_REDACTED, redacted)
    redacted = _PHONE_RE.sub(_REDACTED, redacted)
    return redacted


def redact_value(value: Any, *, key: str | None = None) -> Any:
    if value is None:
        return None
    if isinstance(value, str):
        if key and _is_sensitive_key(key):
            return _REDACTED
        return redact_text(value)
    if isinstance(value, Mapping):
        return {k: redact_value(v, key=str(k)) for k, v in value.items()}
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return [redact_value(item, key=key) for item in value]
    return value


def _is_sensitive_key(key: str) -> bool:
    lowered = key.lower()
    return any(part in lowered for part in _SENSITIVE_KEY_PARTS)
