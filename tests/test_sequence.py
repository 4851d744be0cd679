"""Tests for serialized max + 1 allocation"""
from unittest.mock import MagicMock

import pytest

from apps.projects.models import Project
from apps.projects.repository import create_project
from apps.shared.sequence import advisory_lock_key, lock_sequence, next_in_sequence


def test_empty_table_starts_at_one(db):
    assert next_in_sequence(db, Project.display_order) == 1


def test_custom_start(db):
    assert next_in_sequence(db, Project.display_order, start=100) == 100


def test_follows_current_maximum(db):
    create_project(db, {"title": "a", "description": "d", "display_order": 41})

    assert next_in_sequence(db, Project.display_order) == 42


def test_rejects_non_column(db):
    with pytest.raises(ValueError):
        next_in_sequence(db, "display_order")


def test_lock_key_is_stable_signed_32_bit():
    key = advisory_lock_key("projects")

    assert key == advisory_lock_key("projects")
    assert key != advisory_lock_key("blog_posts")
    assert -(2 ** 31) <= key < 2 ** 31


def test_lock_skipped_outside_postgres():
    session = MagicMock()
    session.get_bind.return_value.dialect.name = "sqlite"

    lock_sequence(session, "projects")

    session.execute.assert_not_called()


def test_lock_taken_on_postgres():
    session = MagicMock()
    session.get_bind.return_value.dialect.name = "postgresql"

    lock_sequence(session, "projects")

    session.execute.assert_called_once()
    statement = str(session.execute.call_args[0][0])
    assert "pg_advisory_xact_lock" in statement
