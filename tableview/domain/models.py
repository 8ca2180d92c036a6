"""
Domain models for tableview.

Defines the two record shapes shown by the listing views and the immutable
value objects that flow through the filter → sort → paginate pipeline.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, Field

from tableview.utils.display import parse_timestamp


class Record(BaseModel):
    """
    A single row of the generic listing.
    """

    id: int = Field(..., description="Numeric identifier.")
    name: str = Field(..., description="Display name.")
    email: str = Field(..., description="Contact email.")
    role: str = Field(..., description="Role label, e.g. Admin, Editor, User.")
    created_at: str = Field(
        ...,
        alias="createdAt",
        description="Creation timestamp as stored (ISO-8601); compared by instant.",
    )

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    @property
    def created_instant(self):
        """Parsed creation time, or None when the stored string is unparsable."""
        return parse_timestamp(self.created_at)


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class UserRecord(Record):
    """
    A row of the user listing: a generic record plus an active/inactive flag.
    """

    status: UserStatus = Field(UserStatus.ACTIVE, description="Whether the user is active.")


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "Direction":
        return Direction.DESC if self is Direction.ASC else Direction.ASC


class SortConfig(BaseModel):
    """Active sort field and direction. ``key=None`` keeps source order."""

    key: Optional[str] = None
    direction: Direction = Direction.ASC

    model_config = {"frozen": True}


class PaginationState(BaseModel):
    page_size: int = Field(10, ge=1)
    current_page: int = 1

    model_config = {"frozen": True}


class PageResult(BaseModel):
    """
    One page of the ordered result set plus the metadata needed to render
    "Showing X to Y of Z" and the page-jump controls.
    """

    items: Tuple[Any, ...] = ()
    effective_page: int = 1
    total_pages: int = 1
    total_count: int = 0
    page_size: int = 10
    window_start: Optional[int] = None
    window_end: int = 0

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @property
    def has_previous(self) -> bool:
        return self.effective_page > 1

    @property
    def has_next(self) -> bool:
        return self.effective_page < self.total_pages

    @property
    def page_numbers(self) -> Tuple[int, ...]:
        return tuple(range(1, self.total_pages + 1))

    def summary(self) -> str:
        if self.window_start is None:
            return "No records found"
        return f"Showing {self.window_start} to {self.window_end} of {self.total_count} entries"


class ViewState(BaseModel):
    """The three pieces of interaction state owned by a view."""

    query: str = ""
    sort: SortConfig = SortConfig(key="id")
    pagination: PaginationState = PaginationState()

    model_config = {"frozen": True}


class TableView(BaseModel):
    """Output of one recomputation: the state it was computed from and the page."""

    state: ViewState
    page: PageResult

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @property
    def items(self) -> Tuple[Any, ...]:
        return self.page.items


__all__ = [
    "Direction",
    "PageResult",
    "PaginationState",
    "Record",
    "SortConfig",
    "TableView",
    "UserRecord",
    "UserStatus",
    "ViewState",
]
