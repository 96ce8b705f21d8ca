"""Excepciones de la aplicación."""

from __future__ import annotations


class AppError(Exception):
    """Base de los errores que la interfaz muestra al usuario."""


class ValidationError(AppError):
    """Los datos del formulario no son válidos; el almacén no se toca."""


class StoreError(AppError):
    """Falla del almacén de usuarios (conexión, esquema, restricciones)."""


class DuplicateEmailError(StoreError):
    """Ya existe un usuario con el mismo email."""

    def __init__(self, email: str) -> None:
        super().__init__(f"A user with email '{email}' already exists.")
        self.email = email


__all__ = ["AppError", "ValidationError", "StoreError", "DuplicateEmailError"]
