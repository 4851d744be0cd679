"""
Serialized "max + 1" sequence allocation

Display order for new projects is computed from the current maximum. Doing
that as a plain SELECT followed by an INSERT has a race condition:

    Request A: SELECT max(display_order) -> 4
    Request B: SELECT max(display_order) -> 4
    Request A: INSERT display_order=5
    Request B: INSERT display_order=5   <- duplicate order

On PostgreSQL this module takes a transaction-scoped advisory lock keyed on
the table name before reading the maximum, so concurrent creators queue up
behind each other until the first one commits or rolls back. SQLite
serializes writers with its database lock, so no extra locking is needed.

Usage:
    from apps.shared.sequence import next_in_sequence

    order = next_in_sequence(db, Project.display_order)
    db.add(Project(display_order=order, ...))
    db.commit()  # releases the advisory lock
"""

import logging
import zlib

from sqlalchemy import func, select
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import InstrumentedAttribute

logger = logging.getLogger(__name__)


def advisory_lock_key(name: str) -> int:
    """Stable signed 32-bit key for pg_advisory_xact_lock derived from a name."""
    key = zlib.crc32(name.encode("utf-8"))
    return key - (1 << 32) if key >= (1 << 31) else key


def lock_sequence(db: Session, name: str) -> None:
    """
    Serialize sequence allocation for `name` until the current transaction ends.

    No-op on dialects without advisory locks.
    """
    if db.get_bind().dialect.name != "postgresql":
        return

    db.execute(select(func.pg_advisory_xact_lock(advisory_lock_key(name))))


def next_in_sequence(db: Session, column: InstrumentedAttribute, start: int = 1) -> int:
    """
    Return max(column) + 1, or `start` when the table is empty.

    Must be called inside the transaction that performs the INSERT so the lock
    covers both the read and the write.

    Args:
        db: SQLAlchemy database session
        column: Integer model attribute (e.g. Project.display_order)
        start: Value used when no rows exist

    Raises:
        ValueError: If the attribute is not backed by a table column
    """
    model = getattr(column, "class_", None)
    if model is None or not hasattr(model, "__table__"):
        raise ValueError(f"{column!r} is not a mapped table column")

    lock_sequence(db, model.__table__.name)

    current = db.execute(select(func.max(column))).scalar()
    if current is None:
        return start

    return current + 1
