"""
RecordBook Backend — Record SQLAlchemy Models
===============================================

What:  ORM models for the three record tables.
Why:   The tables share one skeleton (document text, active flag, audit
       columns, timestamps) and differ only in the foreign-key column, so the
       skeleton lives in RecordMixin and each model adds its own key.
Who:   Used by RecordRepository for CRUD and by Alembic for schema management.

Lifecycle of a row:
    1. Inserted by the create operation (active = true, created_by stamped)
    2. Updated in place: foreign key + document replaced, updated_by stamped
    3. Toggled: active flipped, updated_by stamped
    4. Never deleted
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import TIMESTAMP, Boolean, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from recordbook.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RecordMixin:
    """
    Columns shared by every record table.

    `active` is never assigned on create; the column default makes new rows
    active. `created_by` is written once; `updated_by` on every later write.
    """

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # Free text; no length limit
    document: Mapped[str] = mapped_column(Text, nullable=False)

    active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=text("true"),
    )

    # ── Audit ─────────────────────────────────────────────────────────────
    # Display name of the acting user; NULL when the request was anonymous
    created_by: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    updated_by: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # ── Timestamps ────────────────────────────────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__}(id={self.id}, active={self.active}, "
            f"created_by={self.created_by!r})>"
        )


class FinancialHistory(RecordMixin, Base):
    """A history entry attached to a financial record."""

    __tablename__ = "financial_histories"

    financial_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)


class AssociatedFile(RecordMixin, Base):
    """A file (document reference) attached to a member."""

    __tablename__ = "associated_files"

    associate_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)


class AssociatedHistory(RecordMixin, Base):
    """A history entry attached to a member history."""

    __tablename__ = "associated_histories"

    history_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
