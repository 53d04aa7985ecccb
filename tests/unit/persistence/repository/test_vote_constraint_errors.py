"""Unit tests for telling the cooldown constraint apart from other violations."""

import pytest
from sqlalchemy.exc import IntegrityError

from toplist.persistence.repository.vote import is_cooldown_violation


class _DriverError(Exception):
    """Stands in for the asyncpg error SQLAlchemy wraps."""

    def __init__(self, sqlstate: str, message: str):
        super().__init__(message)
        self.sqlstate = sqlstate


def _integrity_error(sqlstate: str, message: str) -> IntegrityError:
    return IntegrityError("INSERT INTO votes ...", None, _DriverError(sqlstate, message))


def test_exclusion_violation_on_cooldown_constraint():
    error = _integrity_error(
        "23P01",
        'conflicting key value violates exclusion constraint "votes_no_overlapping_cooldown"',
    )

    assert is_cooldown_violation(error)


@pytest.mark.parametrize(
    "sqlstate,message",
    [
        (
            "23503",
            'insert or update on table "votes" violates foreign key constraint '
            '"votes_server_id_fkey"',
        ),
        (
            "23514",
            'new row for relation "votes" violates check constraint "cooldown_after_vote"',
        ),
        ("23505", 'duplicate key value violates unique constraint "votes_pkey"'),
    ],
)
def test_other_violations_are_not_cooldown_conflicts(sqlstate, message):
    assert not is_cooldown_violation(_integrity_error(sqlstate, message))


def test_error_without_sqlstate_is_not_a_cooldown_conflict():
    error = IntegrityError("INSERT INTO votes ...", None, Exception("boom"))

    assert not is_cooldown_violation(error)
