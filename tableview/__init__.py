"""
tableview - search, sort and paginate in-memory record listings.

The package implements the data side of an administrative listing screen:

- A filter stage matching a free-text query against rendered field values
- A stable sort stage with per-field-type comparison rules
- A pagination stage that always clamps the requested page
- A view controller owning query, sort and page state as immutable values

One implementation serves both the generic record listing and the user
listing; each supplies its own TableSchema.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from tableview.config import Settings, get_settings
from tableview.controller import ViewController
from tableview.domain import (
    RECORD_SCHEMA,
    USER_SCHEMA,
    Direction,
    FieldSpec,
    FieldType,
    PageResult,
    PaginationState,
    Record,
    SortConfig,
    TableSchema,
    TableView,
    UserRecord,
    UserStatus,
    ViewState,
    infer_schema,
)
from tableview.pipeline import filter_records, paginate, run_pipeline, sort_records
from tableview.sample_data import generate_records, sample_users
from tableview.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Controller
    "ViewController",
    # Domain
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
    # Pipeline
    "filter_records",
    "paginate",
    "run_pipeline",
    "sort_records",
    # Sample data
    "generate_records",
    "sample_users",
    # Logging
    "configure_logging",
    "get_logger",
]
