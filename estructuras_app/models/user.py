"""Definiciones de modelos de dominio."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    """Usuario tal como se lee del almacén.

    Al ser un dataclass congelado, la igualdad y el hash se calculan sobre
    los cinco campos, de modo que ``set`` y ``dict`` eliminan duplicados por
    contenido y no por identidad del objeto.
    """

    id: int
    first_name: str
    last_name: str
    email: str
    age: int

    @property
    def initials(self) -> str:
        """Iniciales en formato ``N.A`` usadas por el arreglo dentado."""

        return f"{self.first_name[:1]}.{self.last_name[:1]}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "age": self.age,
        }

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} ({self.email}), {self.age} years old"


@dataclass(frozen=True, slots=True)
class UserDraft:
    """Instantánea inmutable del formulario de alta.

    Contiene los textos tal como los escribió el usuario; la validación y la
    conversión de la edad ocurren fuera de la interfaz.
    """

    first_name: str
    last_name: str
    email: str
    age: str


__all__ = ["User", "UserDraft"]
