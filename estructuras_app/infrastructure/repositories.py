"""Implementaciones de repositorios para acceso a datos."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from estructuras_app.core.errors import DuplicateEmailError, StoreError
from estructuras_app.core.validation import check_fields
from estructuras_app.infrastructure.database import Database, UserRow
from estructuras_app.models.user import User

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MARKER = "UNIQUE constraint failed: Users.Email"


def _is_duplicate_email(exc: IntegrityError) -> bool:
    return DUPLICATE_EMAIL_MARKER in str(exc.orig)


class UserRepository:
    """Almacén de usuarios sobre SQLite.

    Cada operación abre su propia sesión justo antes de usarla y la cierra
    al terminar, incluso si ocurre un error.
    """

    def __init__(self, database: Database) -> None:
        self._database = database

    def insert(self, first_name: str, last_name: str, email: str, age: int) -> int:
        """Inserta un usuario y devuelve el id asignado.

        Lanza ``ValidationError`` antes de abrir la sesión si los datos no
        cumplen las invariantes del usuario.
        """

        check_fields(first_name, last_name, email, age)

        session = self._database.session()
        try:
            row = UserRow(first_name=first_name, last_name=last_name, email=email, age=age)
            session.add(row)
            session.commit()
            logger.info("Usuario %s insertado con id %s", email, row.id)
            return row.id
        except IntegrityError as exc:
            session.rollback()
            if _is_duplicate_email(exc):
                logger.warning("Email duplicado rechazado: %s", email)
                raise DuplicateEmailError(email) from exc
            logger.error("Restricción violada insertando %s: %s", email, exc)
            raise StoreError(str(exc)) from exc
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error("Error insertando usuario %s: %s", email, exc)
            raise StoreError(str(exc)) from exc
        finally:
            session.close()

    def list_all(self) -> list[User]:
        """Devuelve todos los usuarios en orden de inserción."""

        session = self._database.session()
        try:
            rows = session.execute(select(UserRow).order_by(UserRow.id)).scalars().all()
            return [
                User(
                    id=row.id,
                    first_name=row.first_name,
                    last_name=row.last_name,
                    email=row.email,
                    age=row.age,
                )
                for row in rows
            ]
        except SQLAlchemyError as exc:
            logger.error("Error leyendo usuarios: %s", exc)
            raise StoreError(str(exc)) from exc
        finally:
            session.close()

    def count(self) -> int:
        session = self._database.session()
        try:
            return session.execute(select(func.count()).select_from(UserRow)).scalar_one()
        except SQLAlchemyError as exc:
            logger.error("Error contando usuarios: %s", exc)
            raise StoreError(str(exc)) from exc
        finally:
            session.close()


__all__ = ["UserRepository"]
