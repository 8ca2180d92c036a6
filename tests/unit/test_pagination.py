from __future__ import annotations

import pytest

from tableview.pipeline.pagination import clamp_page, paginate, total_pages_for

ROWS = list(range(1, 16))


def test_first_page_of_fifteen():
    page = paginate(ROWS, page_size=10, current_page=1)
    assert page.items == tuple(range(1, 11))
    assert page.total_pages == 2
    assert page.total_count == 15
    assert (page.window_start, page.window_end) == (1, 10)
    assert page.summary() == "Showing 1 to 10 of 15 entries"


def test_last_page_is_truncated():
    page = paginate(ROWS, page_size=10, current_page=2)
    assert page.items == tuple(range(11, 16))
    assert (page.window_start, page.window_end) == (11, 15)
    assert not page.has_next
    assert page.has_previous


@pytest.mark.parametrize("requested, expected", [(999, 2), (0, 1), (-3, 1), (2, 2)])
def test_requested_page_is_clamped(requested, expected):
    assert paginate(ROWS, page_size=10, current_page=requested).effective_page == expected


def test_empty_input_has_one_empty_page():
    page = paginate([], page_size=10, current_page=4)
    assert page.items == ()
    assert page.effective_page == 1
    assert page.total_pages == 1
    assert page.window_start is None
    assert page.window_end == 0
    assert page.summary() == "No records found"


@pytest.mark.parametrize("page_size", [1, 2, 3, 4, 5, 7, 10, 15, 16, 50])
def test_pages_cover_every_row_exactly_once(page_size):
    total_pages = paginate(ROWS, page_size, 1).total_pages
    joined = [row for n in range(1, total_pages + 1) for row in paginate(ROWS, page_size, n).items]
    assert joined == ROWS


@pytest.mark.parametrize("total_count", [0, 1, 9, 10, 11, 20, 21])
@pytest.mark.parametrize("page_size", [1, 5, 10])
@pytest.mark.parametrize("current_page", [-1, 0, 1, 2, 3, 100])
def test_effective_page_always_in_range(total_count, page_size, current_page):
    page = paginate(list(range(total_count)), page_size, current_page)
    upper = max(1, -(-total_count // page_size))
    assert page.total_pages == upper
    assert 1 <= page.effective_page <= upper
    assert len(page.items) <= page_size


def test_page_numbers_list_every_page():
    assert paginate(ROWS, 4, 1).page_numbers == (1, 2, 3, 4)


@pytest.mark.parametrize("bad_size", [0, -1, True, 2.5])
def test_invalid_page_size_raises(bad_size):
    with pytest.raises(ValueError, match="page_size"):
        paginate(ROWS, bad_size, 1)


def test_total_pages_and_clamp_helpers():
    assert total_pages_for(0, 10) == 1
    assert total_pages_for(10, 10) == 1
    assert total_pages_for(11, 10) == 2
    assert clamp_page(5, 3) == 3
    assert clamp_page(-5, 3) == 1
