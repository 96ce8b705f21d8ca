"""Tests del demostrador de estructuras."""

import re

import pytest

from estructuras_app.core.containers import (
    NO_USERS_MESSAGE,
    ContainerKind,
    build_array,
    build_dict,
    build_jagged,
    build_matrix,
    render_report,
)
from estructuras_app.models.user import User

NUMBERED = re.compile(r"^(\d+)\. (.+)$")


def _numbered_entries(report):
    return [NUMBERED.match(line).group(2) for line in report.splitlines() if NUMBERED.match(line)]


def _bullets(report):
    return [line[2:] for line in report.splitlines() if line.startswith("- ")]


class TestContainerKind:
    def test_keys_are_stable(self):
        assert [kind.value for kind in ContainerKind] == [
            "list",
            "array",
            "matrix",
            "jagged",
            "dict",
            "queue",
            "stack",
            "set",
            "linked_list",
        ]

    def test_from_key(self):
        assert ContainerKind.from_key("stack") is ContainerKind.STACK
        assert ContainerKind.from_key(ContainerKind.SET) is ContainerKind.SET
        assert ContainerKind.from_key("HashSet<User>") is None
        assert ContainerKind.from_key(None) is None

    def test_label_includes_description(self):
        label = ContainerKind.QUEUE.label
        assert label.startswith(ContainerKind.QUEUE.title)
        assert "FIFO" in label


class TestEmptyAndUnknown:
    @pytest.mark.parametrize("kind", list(ContainerKind) + ["bogus", None])
    def test_empty_input_reports_no_users(self, kind):
        assert render_report([], kind) == NO_USERS_MESSAGE

    def test_unknown_kind_is_noop(self, sample_users):
        assert render_report(sample_users, "bogus") == ""

    def test_accepts_key_string(self, sample_users):
        assert render_report(sample_users, "list") == render_report(sample_users, ContainerKind.LIST)


class TestBlockTitles:
    @pytest.mark.parametrize("kind", list(ContainerKind))
    def test_report_starts_with_kind_title(self, sample_users, kind):
        first_line = render_report(sample_users, kind).splitlines()[0]
        assert first_line.startswith(f"=== {kind.title}")
        assert kind.description not in first_line

    def test_queue_and_stack_titles(self, sample_users):
        assert render_report(sample_users, ContainerKind.QUEUE).splitlines()[0] == "=== Queue[User] (FIFO) ==="
        assert render_report(sample_users, ContainerKind.STACK).splitlines()[0] == "=== Stack[User] (LIFO) ==="


class TestSequences:
    def test_list_keeps_insertion_order(self, sample_users):
        report = render_report(sample_users, ContainerKind.LIST)
        assert report.splitlines()[0] == "=== list[User] ==="
        assert _bullets(report) == [str(user) for user in sample_users]

    def test_array_shows_indices_in_order(self, sample_users):
        report = render_report(sample_users, ContainerKind.ARRAY)
        lines = [line for line in report.splitlines() if line.startswith("[")]
        assert lines == [f"[{i}]: {user}" for i, user in enumerate(sample_users)]

    def test_build_array_is_fixed_length(self, sample_users):
        array = build_array(sample_users)
        assert array.shape == (5,)
        assert list(array) == sample_users


class TestMatrix:
    def test_shape_is_n_by_two(self, sample_users):
        matrix = build_matrix(sample_users)
        assert matrix.shape == (5, 2)
        assert [matrix[i, 0] for i in range(5)] == [1, 2, 3, 4, 5]
        assert matrix[2, 1] == sample_users[2]

    def test_render(self, sample_users):
        report = render_report(sample_users[:2], ContainerKind.MATRIX)
        assert f"ID: 1, User: {sample_users[0]}" in report
        assert f"ID: 2, User: {sample_users[1]}" in report


class TestJagged:
    def test_row_lengths(self, sample_users):
        rows = build_jagged(sample_users)
        assert [len(row) for row in rows] == [1, 2, 3, 4, 5]
        for i, row in enumerate(rows):
            assert row == sample_users[: i + 1]

    def test_single_user(self, sample_users):
        assert build_jagged(sample_users[:1]) == [[sample_users[0]]]

    def test_render_initials(self, sample_users):
        report = render_report(sample_users[:3], ContainerKind.JAGGED)
        assert "Row 1: J.D" in report.splitlines()
        assert "Row 2: J.D J.S" in report.splitlines()
        assert "Row 3: J.D J.S R.J" in report.splitlines()


class TestDict:
    def test_last_write_wins(self):
        first = User(7, "Ana", "Lopez", "ana@example.com", 20)
        second = User(7, "Ana", "Lopez", "ana.new@example.com", 21)
        assert build_dict([first, second]) == {7: second}

    def test_render(self, sample_users):
        report = render_report(sample_users, ContainerKind.DICT)
        assert f"Key: 4, Value: {sample_users[3]}" in report


class TestQueueAndStack:
    def test_queue_is_fifo(self, sample_users):
        report = render_report(sample_users, ContainerKind.QUEUE)
        assert _numbered_entries(report) == [str(user) for user in sample_users]

    def test_stack_is_reverse_of_queue(self, sample_users):
        queue = _numbered_entries(render_report(sample_users, ContainerKind.QUEUE))
        stack = _numbered_entries(render_report(sample_users, ContainerKind.STACK))
        assert stack == list(reversed(queue))
        assert stack[0] == str(sample_users[-1])


class TestSet:
    def test_reports_unique_count(self, sample_users):
        report = render_report(sample_users, ContainerKind.SET)
        assert "Total unique users: 5" in report
        assert sorted(_bullets(report)) == sorted(str(user) for user in sample_users)

    def test_identical_records_collapse(self):
        user = User(1, "John", "Doe", "john.doe@example.com", 30)
        clone = User(1, "John", "Doe", "john.doe@example.com", 30)
        report = render_report([user, clone], ContainerKind.SET)
        assert "Total unique users: 1" in report
        assert len(_bullets(report)) == 1

    def test_count_precedes_listing(self, sample_users):
        lines = render_report(sample_users, ContainerKind.SET).splitlines()
        count_line = next(i for i, line in enumerate(lines) if line.startswith("Total unique users"))
        first_item = next(i for i, line in enumerate(lines) if line.startswith("- "))
        assert count_line < first_item


class TestLinkedList:
    def test_node_indices_are_one_based_without_gaps(self, sample_users):
        report = render_report(sample_users, ContainerKind.LINKED_LIST)
        nodes = [line for line in report.splitlines() if line.startswith("Node ")]
        indices = [int(line.split(":")[0].split()[1]) for line in nodes]
        assert indices == list(range(1, len(sample_users) + 1))
        assert nodes[0] == f"Node 1: {sample_users[0]}"
