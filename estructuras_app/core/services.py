"""Servicios de aplicación que coordinan el acceso a datos."""

from __future__ import annotations

import logging
from pathlib import Path

from estructuras_app.core.containers import ContainerKind, render_report
from estructuras_app.core.validation import validate_draft
from estructuras_app.infrastructure.exporter import export_users
from estructuras_app.infrastructure.repositories import UserRepository
from estructuras_app.models.user import User, UserDraft

logger = logging.getLogger(__name__)


class UserService:
    """Orquesta el alta de usuarios y la generación de reportes.

    No guarda estado entre llamadas: cada reporte vuelve a leer el almacén.
    """

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def agregar_usuario(self, draft: UserDraft) -> User:
        """Valida el formulario e inserta el usuario.

        Lanza ``ValidationError`` sin tocar el almacén si los datos no son
        válidos; los errores del almacén se propagan como ``StoreError``.
        """

        first_name, last_name, email, age = validate_draft(draft)
        user_id = self._repository.insert(first_name, last_name, email, age)
        return User(id=user_id, first_name=first_name, last_name=last_name, email=email, age=age)

    def listar_usuarios(self) -> list[User]:
        return self._repository.list_all()

    def contar_usuarios(self) -> int:
        return self._repository.count()

    def generar_reporte(self, kind: ContainerKind | str | None) -> str:
        usuarios = self._repository.list_all()
        logger.debug("Generando reporte %r con %d usuarios", kind, len(usuarios))
        return render_report(usuarios, kind)

    def exportar(self, path: str | Path) -> int:
        """Exporta todos los usuarios y devuelve cuántos se escribieron."""

        usuarios = self._repository.list_all()
        export_users(path, usuarios)
        logger.info("Exportados %d usuarios a %s", len(usuarios), path)
        return len(usuarios)


__all__ = ["UserService"]
