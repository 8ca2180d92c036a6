"""
Pagination stage: slice the ordered records into one page.

The requested page is always clamped into ``[1, total_pages]`` here, so callers
never need to trust a page number computed against an older result set.
"""

from __future__ import annotations

from typing import Any, Sequence

from tableview.domain.models import PageResult


def total_pages_for(total_count: int, page_size: int) -> int:
    """``max(1, ceil(total_count / page_size))`` without float rounding."""
    return max(1, -(-total_count // page_size))


def clamp_page(current_page: int, total_pages: int) -> int:
    return min(max(1, current_page), total_pages)


def paginate(records: Sequence[Any], page_size: int, current_page: int) -> PageResult:
    """
    Return the clamped page of ``records`` with its window metadata.

    Raises
    ------
    ValueError
        If ``page_size`` is not a positive integer.
    """
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        raise ValueError(f"page_size must be a positive integer, got {page_size!r}")

    total_count = len(records)
    total_pages = total_pages_for(total_count, page_size)
    effective_page = clamp_page(current_page, total_pages)
    start = (effective_page - 1) * page_size
    end = min(effective_page * page_size, total_count)

    return PageResult(
        items=tuple(records[start:end]),
        effective_page=effective_page,
        total_pages=total_pages,
        total_count=total_count,
        page_size=page_size,
        window_start=start + 1 if total_count > 0 else None,
        window_end=end,
    )


__all__ = ["clamp_page", "paginate", "total_pages_for"]
