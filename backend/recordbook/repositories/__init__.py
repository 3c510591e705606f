"""
Repositories package: data-access layer.

RecordRepository is generic over the record models; all functions accept an
AsyncSession and only flush. Commit/rollback is handled by the
get_db_session dependency.
"""

from recordbook.repositories.record_repository import RecordRepository

__all__ = ["RecordRepository"]
