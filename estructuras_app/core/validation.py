"""Validación local del formulario antes de contactar el almacén."""

from __future__ import annotations

from typing import Tuple

from estructuras_app.core.errors import ValidationError
from estructuras_app.models.user import UserDraft

VALIDATION_MESSAGE = "Please fill in all fields with valid data."


def parse_age(text: str) -> int | None:
    try:
        age = int(text.strip())
    except ValueError:
        return None
    return age if age > 0 else None


def check_fields(first_name: object, last_name: object, email: object, age: object) -> None:
    """Comprueba las invariantes de un usuario ya convertido.

    Los textos deben ser ``str`` no vacíos tras ``strip()`` y la edad un
    ``int`` mayor que cero.
    """

    textos_validos = all(
        isinstance(valor, str) and valor.strip()
        for valor in (first_name, last_name, email)
    )
    edad_valida = isinstance(age, int) and not isinstance(age, bool) and age > 0
    if not textos_validos or not edad_valida:
        raise ValidationError(VALIDATION_MESSAGE)


def validate_draft(draft: UserDraft) -> Tuple[str, str, str, int]:
    """Devuelve los campos limpios o lanza ``ValidationError``.

    Todos los textos deben quedar no vacíos tras ``strip()`` y la edad debe
    ser un entero mayor que cero.
    """

    first_name = draft.first_name.strip()
    last_name = draft.last_name.strip()
    email = draft.email.strip()
    age = parse_age(draft.age)

    if age is None:
        raise ValidationError(VALIDATION_MESSAGE)
    check_fields(first_name, last_name, email, age)

    return first_name, last_name, email, age


__all__ = ["VALIDATION_MESSAGE", "check_fields", "parse_age", "validate_draft"]
