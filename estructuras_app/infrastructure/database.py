"""Base de datos SQLite de usuarios (SQLAlchemy).

Define la tabla ``Users``, la fábrica de sesiones y la inicialización
idempotente con datos de ejemplo.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy import Column, Integer, Text, create_engine, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from estructuras_app.core.errors import StoreError

logger = logging.getLogger(__name__)

Base = declarative_base()


class UserRow(Base):
    __tablename__ = "Users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column("Id", Integer, primary_key=True, autoincrement=True)
    first_name = Column("FirstName", Text, nullable=False)
    last_name = Column("LastName", Text, nullable=False)
    email = Column("Email", Text, nullable=False, unique=True)
    age = Column("Age", Integer, nullable=False)


SAMPLE_USERS = (
    {"first_name": "John", "last_name": "Doe", "email": "john.doe@example.com", "age": 30},
    {"first_name": "Jane", "last_name": "Smith", "email": "jane.smith@example.com", "age": 25},
    {"first_name": "Robert", "last_name": "Johnson", "email": "robert.j@example.com", "age": 35},
    {"first_name": "Emily", "last_name": "Williams", "email": "emily.w@example.com", "age": 28},
    {"first_name": "Michael", "last_name": "Brown", "email": "michael.b@example.com", "age": 42},
)


class Database:
    """Motor y fábrica de sesiones para un archivo SQLite concreto."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.engine = create_engine(f"sqlite:///{self.path}", echo=False)
        self._session_factory = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False
        )

    def session(self) -> Session:
        """Abre una sesión nueva; quien la pide debe cerrarla."""

        return self._session_factory()

    def dispose(self) -> None:
        self.engine.dispose()


def _seed_sample_data(session: Session) -> int:
    inserted = 0
    for data in SAMPLE_USERS:
        existing = session.execute(
            select(UserRow.id).where(UserRow.email == data["email"])
        ).scalar_one_or_none()
        if existing is None:
            session.add(UserRow(**data))
            inserted += 1
    return inserted


def _has_users_table(database: Database) -> bool:
    try:
        return inspect(database.engine).has_table(UserRow.__tablename__)
    except SQLAlchemyError as exc:
        logger.error("No se pudo abrir la base de datos %s: %s", database.path, exc)
        raise StoreError(f"Could not open the database: {exc}") from exc


def _discard_schema(database: Database) -> None:
    try:
        Base.metadata.drop_all(bind=database.engine)
    except SQLAlchemyError as exc:
        logger.error("No se pudo eliminar el esquema incompleto: %s", exc)


def init_database(database: Database, seed: bool = True) -> bool:
    """Crea la tabla ``Users`` y los datos de ejemplo si aún no existen.

    Devuelve ``True`` si la tabla se creó en esta llamada. Si la tabla ya
    existe no se modifica nada. Si la carga de datos de ejemplo falla, la
    tabla recién creada se elimina para que el siguiente arranque lo
    reintente.
    """

    database.path.parent.mkdir(parents=True, exist_ok=True)

    if _has_users_table(database):
        logger.info("Base de datos existente: %s", database.path)
        return False

    logger.info("Creando base de datos en %s", database.path)
    try:
        Base.metadata.create_all(bind=database.engine)
    except SQLAlchemyError as exc:
        logger.error("No se pudo crear el esquema: %s", exc)
        raise StoreError(f"Could not create the database schema: {exc}") from exc

    if not seed:
        return True

    session = database.session()
    try:
        inserted = _seed_sample_data(session)
        session.commit()
        logger.info("Datos de ejemplo insertados: %d", inserted)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Error insertando datos de ejemplo: %s", exc)
        session.close()
        _discard_schema(database)
        raise StoreError(f"Could not seed sample data: {exc}") from exc
    finally:
        session.close()

    return True


__all__ = ["Base", "Database", "SAMPLE_USERS", "UserRow", "init_database"]
