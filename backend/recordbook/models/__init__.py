# Models package init
from recordbook.models.records import (
    AssociatedFile,
    AssociatedHistory,
    FinancialHistory,
    RecordMixin,
)

__all__ = ["AssociatedFile", "AssociatedHistory", "FinancialHistory", "RecordMixin"]
