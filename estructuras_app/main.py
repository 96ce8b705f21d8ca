"""Punto de entrada de la aplicación.

Carga la configuración, prepara la base de datos y los servicios, y arranca
la interfaz gráfica principal.
"""

from __future__ import annotations

import logging
import sys

from PyQt6.QtWidgets import QApplication

from estructuras_app.config import get_config
from estructuras_app.core.errors import StoreError
from estructuras_app.core.services import UserService
from estructuras_app.infrastructure.database import Database, init_database
from estructuras_app.infrastructure.repositories import UserRepository
from estructuras_app.logging_setup import configure_logging
from estructuras_app.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> None:
    """Arranca la aplicación PyQt6 con las dependencias configuradas."""

    config = get_config()
    configure_logging(config.log_level)

    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    database = Database(config.database_path)
    init_error: str | None = None
    try:
        init_database(database, seed=config.seed_sample_data)
    except (StoreError, OSError) as exc:
        logger.error("Fallo al inicializar la base de datos: %s", exc)
        init_error = str(exc)

    repository = UserRepository(database)
    user_service = UserService(repository)

    window = MainWindow(user_service=user_service, init_error=init_error)
    window.show()

    exit_code = app.exec()
    database.dispose()
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover - punto de entrada interactivo
    main()
