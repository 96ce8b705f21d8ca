"""Configuración de la aplicación.

Los valores se leen de variables de entorno (o de un archivo ``.env`` en la
raíz del proyecto) y se exponen como un dataclass tipado.

Variables reconocidas:

``ESTRUCTURAS_DB_PATH``
    Ruta del archivo SQLite. Por defecto ``UserData.db`` en el directorio
    de trabajo.
``ESTRUCTURAS_LOG_LEVEL``
    Nivel de logging (``INFO`` por defecto).
``ESTRUCTURAS_SEED``
    Si es falso (``0``, ``false``, ``no``) la base nueva se crea vacía.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_DB_NAME = "UserData.db"

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class AppConfig:
    database_path: Path
    log_level: str = "INFO"
    seed_sample_data: bool = True


_config_instance: Optional[AppConfig] = None


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE_VALUES


def get_config() -> AppConfig:
    """Carga la configuración una sola vez y la reutiliza."""

    global _config_instance

    if _config_instance is not None:
        return _config_instance

    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    db_path = os.getenv("ESTRUCTURAS_DB_PATH") or str(Path.cwd() / DEFAULT_DB_NAME)
    _config_instance = AppConfig(
        database_path=Path(db_path),
        log_level=os.getenv("ESTRUCTURAS_LOG_LEVEL", "INFO").upper(),
        seed_sample_data=_env_flag("ESTRUCTURAS_SEED", True),
    )
    return _config_instance


def reset_config() -> None:
    global _config_instance
    _config_instance = None


__all__ = ["AppConfig", "DEFAULT_DB_NAME", "get_config", "reset_config"]
