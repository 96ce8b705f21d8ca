"""Tests de modelos, lista enlazada y configuración."""

import logging
from pathlib import Path

import pytest

from estructuras_app.config import get_config, reset_config
from estructuras_app.core.linked_list import DoublyLinkedList
from estructuras_app.logging_setup import configure_logging
from estructuras_app.models.user import User


class TestUser:
    def test_value_equality_and_hash(self):
        a = User(1, "John", "Doe", "john.doe@example.com", 30)
        b = User(1, "John", "Doe", "john.doe@example.com", 30)
        assert a == b and a is not b
        assert len({a, b}) == 1

    def test_different_id_is_different_user(self):
        a = User(1, "John", "Doe", "john.doe@example.com", 30)
        assert a != User(2, "John", "Doe", "john.doe@example.com", 30)

    def test_str_and_initials(self):
        user = User(1, "Emily", "Williams", "emily.w@example.com", 28)
        assert str(user) == "Emily Williams (emily.w@example.com), 28 years old"
        assert user.initials == "E.W"


class TestDoublyLinkedList:
    def test_forward_and_backward(self):
        linked = DoublyLinkedList([1, 2, 3])
        assert list(linked) == [1, 2, 3]
        assert list(reversed(linked)) == [3, 2, 1]
        assert len(linked) == 3

    def test_links(self):
        linked = DoublyLinkedList("ab")
        assert linked.head.next is linked.tail
        assert linked.tail.prev is linked.head
        assert linked.head.prev is None and linked.tail.next is None

    def test_empty(self):
        linked = DoublyLinkedList()
        assert linked.head is None and linked.tail is None
        assert list(linked.nodes()) == []


class TestConfig:
    @pytest.fixture(autouse=True)
    def _fresh_config(self):
        reset_config()
        yield
        reset_config()

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ESTRUCTURAS_DB_PATH", str(tmp_path / "demo.db"))
        monkeypatch.setenv("ESTRUCTURAS_LOG_LEVEL", "debug")
        monkeypatch.setenv("ESTRUCTURAS_SEED", "no")

        config = get_config()
        assert config.database_path == tmp_path / "demo.db"
        assert config.log_level == "DEBUG"
        assert config.seed_sample_data is False

    def test_defaults_and_singleton(self, monkeypatch):
        for name in ("ESTRUCTURAS_DB_PATH", "ESTRUCTURAS_LOG_LEVEL", "ESTRUCTURAS_SEED"):
            monkeypatch.delenv(name, raising=False)

        config = get_config()
        assert config.database_path == Path.cwd() / "UserData.db"
        assert config.seed_sample_data is True
        assert get_config() is config


def test_configure_logging_quiets_sqlalchemy():
    configure_logging("debug")
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
