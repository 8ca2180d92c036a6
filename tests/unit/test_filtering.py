from __future__ import annotations

import pytest

from tableview.domain.models import Record
from tableview.domain.schema import RECORD_SCHEMA, USER_SCHEMA, infer_schema
from tableview.pipeline.filtering import filter_records, search_text

ADMIN_IDS = [1, 5, 9, 14]
SAMPLE_SIZE = 15


def _ids(records) -> list[int]:
    return [r["id"] if isinstance(r, dict) else r.id for r in records]


def test_empty_query_returns_every_record_in_order(users):
    result = filter_records(users, "", USER_SCHEMA)
    assert result == users
    assert result is not users


def test_whitespace_query_is_treated_as_empty(users):
    assert _ids(filter_records(users, "   \t", USER_SCHEMA)) == list(range(1, SAMPLE_SIZE + 1))


@pytest.mark.parametrize("query", ["admin", "ADMIN", "  Admin  "])
def test_query_is_trimmed_and_case_folded(users, query):
    assert _ids(filter_records(users, query, USER_SCHEMA)) == ADMIN_IDS


def test_unmatched_query_yields_empty_list(users):
    assert filter_records(users, "no such person", USER_SCHEMA) == []


def test_match_spans_joined_field_values(users):
    # name and email are joined with a single space before matching
    assert _ids(filter_records(users, "doe john@", USER_SCHEMA)) == [1]


def test_user_listing_does_not_search_status_or_id(users):
    assert filter_records(users, "inactive", USER_SCHEMA) == []
    assert filter_records(users, "#", USER_SCHEMA) == []


def test_generic_listing_searches_id_as_decimal(users):
    assert _ids(filter_records(users, "12", RECORD_SCHEMA, locale="iso")) == [12]


def test_timestamp_matches_rendered_form_not_stored_string(users):
    # en-US renders 2024-01-15 as "1/15/2024, 12:00:00 AM"
    assert _ids(filter_records(users, "1/15/2024", RECORD_SCHEMA)) == [1]
    assert filter_records(users, "2024-01-15", RECORD_SCHEMA) == []
    assert len(filter_records(users, "12:00:00 am", RECORD_SCHEMA)) == SAMPLE_SIZE


def test_timestamp_search_follows_explicit_locale(users):
    assert _ids(filter_records(users, "2024-01-15", RECORD_SCHEMA, locale="iso")) == [1]
    assert _ids(filter_records(users, "15/1/2024", RECORD_SCHEMA, locale="id-ID")) == [1]


def test_unparsable_timestamp_renders_as_invalid_date():
    rows = [
        {"id": 1, "name": "a", "created_at": "2024-01-01"},
        {"id": 2, "name": "b", "created_at": "someday"},
    ]
    schema = infer_schema(rows)
    assert _ids(filter_records(rows, "invalid date", schema)) == [2]


def test_search_text_is_case_folded(users):
    text = search_text(users[0], RECORD_SCHEMA)
    assert text == "1 john doe john@example.com admin 1/15/2024, 12:00:00 am"


@pytest.mark.parametrize("query", ["", "a", "admin", "example", "1/2", "zzz"])
def test_filter_is_idempotent(users, query):
    once = filter_records(users, query, RECORD_SCHEMA)
    assert filter_records(once, query, RECORD_SCHEMA) == once


def test_extending_query_never_increases_matches(generated_records):
    word = "santoso1"
    counts = [
        len(filter_records(generated_records, word[:n], RECORD_SCHEMA)) for n in range(len(word) + 1)
    ]
    assert counts[0] == len(generated_records)
    assert counts == sorted(counts, reverse=True)


EDGE_OF_RANGE = [
    Record(id=1, name="a", email="a@x", role="User", created_at="0001-01-01T00:00:00+05:00"),
    Record(id=2, name="b", email="b@x", role="User", created_at="9999-12-31T23:00:00-05:00"),
    Record(id=3, name="c", email="c@x", role="User", created_at="2024-01-01"),
]


def test_timestamps_at_the_edge_of_the_calendar_keep_their_offset():
    # converting either to UTC would leave years 1..9999
    assert _ids(filter_records(EDGE_OF_RANGE, "1/1/1,", RECORD_SCHEMA)) == [1]
    assert _ids(filter_records(EDGE_OF_RANGE, "12/31/9999, 11:00:00 pm", RECORD_SCHEMA)) == [2]
    assert _ids(filter_records(EDGE_OF_RANGE, "2024", RECORD_SCHEMA)) == [3]
