# domain/exceptions.py
"""
Excepciones del dominio.

Propósito:
- Distinguir errores de reglas de negocio (dominio) de errores técnicos (I/O).
- Permitir que la capa de aplicación traduzca errores a mensajes para el usuario.
"""


class DomainError(Exception):
    """Error base del dominio."""


class ValidationError(DomainError):
    """Entrada mal formada o violación de invariantes."""


class NoEncontradoError(DomainError):
    """Paciente, profesional, departamento o resultado de búsqueda inexistente."""


class BusinessRuleError(DomainError):
    """Violación de regla de negocio."""


class TransicionEstadoError(BusinessRuleError):
    """El paciente ya salió de ADMITIDO: no admite otra transición."""
