"""
RecordBook Backend — Application Package Initializer
====================================================

Record-management API for a member association: financial history entries,
member files and member history entries.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← one router per collection
    ├─────────────────────────────────────┤
    │   RecordService (CRUD orchestration)│  ← validate → store → result
    ├─────────────────────────────────────┤
    │   RecordRepository (store contract) │  ← create / find / save
    ├─────────────────────────────────────┤
    │  Models & Schemas (Data)            │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘

    The three collections share every layer; EntityDescriptor (entities.py)
    holds what differs between them.
"""

__version__ = "1.0.0"
