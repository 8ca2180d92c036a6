"""
Domain package for tableview.

Exports the record models, the pipeline value objects and the field schemas.
Keep this package focused on data definitions; the stages live in
``tableview.pipeline``.
"""

from tableview.domain.models import (
    Direction,
    PageResult,
    PaginationState,
    Record,
    SortConfig,
    TableView,
    UserRecord,
    UserStatus,
    ViewState,
)
from tableview.domain.schema import (
    RECORD_SCHEMA,
    USER_SCHEMA,
    FieldSpec,
    FieldType,
    TableSchema,
    infer_schema,
)

__all__ = [
    "Direction",
    "FieldSpec",
    "FieldType",
    "PageResult",
    "PaginationState",
    "RECORD_SCHEMA",
    "Record",
    "SortConfig",
    "TableSchema",
    "TableView",
    "USER_SCHEMA",
    "UserRecord",
    "UserStatus",
    "ViewState",
    "infer_schema",
]
