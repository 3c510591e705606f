"""
RecordBook Backend — Entity Descriptors
=========================================

The three record collections differ only in model, schemas, foreign-key
name and route. Each EntityDescriptor carries that set of parameters; the
generic service and router factory do everything else.
"""

from dataclasses import dataclass
from typing import Tuple, Type

from pydantic import BaseModel

from recordbook.models.records import (
    AssociatedFile,
    AssociatedHistory,
    FinancialHistory,
    RecordMixin,
)
from recordbook.schemas.records import (
    AssociatedFileIn,
    AssociatedFileOut,
    AssociatedHistoryIn,
    AssociatedHistoryOut,
    FinancialHistoryIn,
    FinancialHistoryOut,
    RecordIn,
)


@dataclass(frozen=True)
class EntityDescriptor:
    name: str                      # log/label name, e.g. "financial_history"
    model: Type[RecordMixin]
    schema_in: Type[RecordIn]
    schema_out: Type[BaseModel]
    foreign_key: str               # attribute name on model and schema_in
    path: str                      # route segment below the API prefix
    tag: str                       # OpenAPI tag

    @property
    def writable_fields(self) -> Tuple[str, str]:
        return (self.foreign_key, "document")


FINANCIAL_HISTORY = EntityDescriptor(
    name="financial_history",
    model=FinancialHistory,
    schema_in=FinancialHistoryIn,
    schema_out=FinancialHistoryOut,
    foreign_key="financial_id",
    path="/financial-history",
    tag="Financial History",
)

ASSOCIATED_FILE = EntityDescriptor(
    name="associated_file",
    model=AssociatedFile,
    schema_in=AssociatedFileIn,
    schema_out=AssociatedFileOut,
    foreign_key="associate_id",
    path="/associated-files",
    tag="Associated Files",
)

ASSOCIATED_HISTORY = EntityDescriptor(
    name="associated_history",
    model=AssociatedHistory,
    schema_in=AssociatedHistoryIn,
    schema_out=AssociatedHistoryOut,
    foreign_key="history_id",
    path="/associated-history",
    tag="Associated History",
)

ALL_ENTITIES = (FINANCIAL_HISTORY, ASSOCIATED_FILE, ASSOCIATED_HISTORY)
