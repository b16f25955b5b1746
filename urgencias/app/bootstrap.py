# bootstrap.py
"""
Bootstrap del motor de urgencias.

Responsabilidades:
- Resolver la configuración de logging desde variables de entorno
- Configurar logging y el hook de excepciones no controladas
- Devolver la fachada lista para usar (estado en memoria, vacío)

No contiene lógica de dominio ni de aplicación.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from os import getenv
from pathlib import Path

from urgencias.app.application.services.urgencias_facade import UrgenciasFacade
from urgencias.app.bootstrap_logging import configure_logging, get_logger, set_run_context
from urgencias.app.crash_handler import install_global_exception_hook


LOGGER = get_logger(__name__)

_ENV_LOG_DIR = "URGENCIAS_LOG_DIR"
_ENV_LOG_LEVEL = "URGENCIAS_LOG_LEVEL"
_ENV_LOG_JSON = "URGENCIAS_LOG_JSON"


@dataclass(frozen=True, slots=True)
class LogSettings:
    log_dir: Path
    level: str
    json: bool


def resolve_log_settings() -> LogSettings:
    """Lee URGENCIAS_LOG_DIR, URGENCIAS_LOG_LEVEL y URGENCIAS_LOG_JSON (con valores por defecto)."""
    log_dir = Path(getenv(_ENV_LOG_DIR) or "./logs").expanduser()
    level = (getenv(_ENV_LOG_LEVEL) or "INFO").strip().upper()
    raw_json = (getenv(_ENV_LOG_JSON) or "true").strip().lower()
    return LogSettings(log_dir=log_dir, level=level, json=raw_json in {"1", "true", "yes", "on"})


def bootstrap_app(settings: LogSettings | None = None, run_id: str | None = None) -> UrgenciasFacade:
    settings = settings or resolve_log_settings()
    configure_logging("urgencias", settings.log_dir, level=settings.level, json=settings.json)
    set_run_context(run_id or uuid.uuid4().hex[:8])
    install_global_exception_hook(LOGGER)
    LOGGER.info("app_bootstrapped", extra={"log_dir": settings.log_dir.as_posix(), "level": settings.level})
    return UrgenciasFacade()
