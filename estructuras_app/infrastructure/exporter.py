"""Exportadores simples a JSON y CSV."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

import pandas as pd

from estructuras_app.models.user import User

FIELDNAMES = ["id", "first_name", "last_name", "email", "age"]


def export_to_csv(path: str | Path, users: Sequence[User]) -> None:
    df = pd.DataFrame([user.to_dict() for user in users], columns=FIELDNAMES)
    df.to_csv(path, index=False)


def export_to_json(path: str | Path, users: Sequence[User]) -> None:
    data = [user.to_dict() for user in users]
    Path(path).write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


def export_users(path: str | Path, users: Sequence[User]) -> None:
    """Elige el formato según la extensión (``.json`` o CSV por defecto)."""

    if Path(path).suffix.lower() == ".json":
        export_to_json(path, users)
    else:
        export_to_csv(path, users)


__all__ = ["FIELDNAMES", "export_to_csv", "export_to_json", "export_users"]
