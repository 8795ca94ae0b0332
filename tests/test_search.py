"""Unit tests for search documents and the top-level pipeline."""

from __future__ import annotations

import json

import pytest

import groupql
from groupql.errors import (
    ConfigurationError,
    GroupQLError,
    InvalidFilterError,
    InvalidPaginationError,
    ParseError,
)
from groupql.schema.enums import MemberRole, SortDirection
from groupql.schema.filters import GroupNameFilter, MemberFilter, StartDateFilter
from groupql.schema.layout import TableLayout
from groupql.schema.pagination import Pagination
from groupql.schema.search import GroupSearch
from groupql.schema.sorting import MentorSorting, StartDaySorting

SEARCH = {
    "table": "learning_groups",
    "filters": [
        {"kind": "group_name", "search_term": "java"},
        {"kind": "start_date", "instant": "2025-03-01T00:00:00Z", "expression": "FROM"},
        {"kind": "member", "guids": ["g1", "g2"], "role": "TEACHER"},
    ],
    "sorting": {"kind": "mentor", "direction": "DESC"},
    "pagination": {"page": 2, "size": 10},
}


def test_parse_search_builds_typed_models():
    search = groupql.parse_search(json.dumps(SEARCH))
    assert search.fields == "*"
    assert [type(f) for f in search.filters] == [GroupNameFilter, StartDateFilter, MemberFilter]
    assert search.filters[2].role is MemberRole.TEACHER
    assert search.sorting == MentorSorting(direction=SortDirection.DESC)
    assert search.pagination == Pagination(page=2, size=10)


def test_build_search():
    sql = groupql.build_search(json.dumps(SEARCH))
    assert sql == (
        "SELECT * FROM learning_groups WHERE name ILIKE '%java%' "
        "AND scheduled_for >= '2025-03-01T00:00:00Z' "
        "AND EXISTS (SELECT * FROM jsonb_array_elements(group_data->'members') AS member "
        "WHERE member->>'guid' = ANY(ARRAY['g1', 'g2']) AND member->>'role' = 'TEACHER') "
        "ORDER BY (SELECT jsonb_path_query_first(group_data,"
        "'$.members[*] ? (@.role == \"TEACHER\").lastName')::text) DESC "
        "LIMIT 10 OFFSET 10"
    )


def test_compile_search_returns_params():
    compiled = groupql.compile_search(json.dumps(SEARCH))
    assert compiled.dialect == "postgres"
    assert "%(param_0)s" in compiled.sql
    assert compiled.params["param_0"] == "%java%"
    assert compiled.params["param_2"] == ["g1", "g2"]
    assert compiled.params["param_3"] == "TEACHER"


def test_compile_search_with_layout():
    search = {"table": "cohorts", "filters": [{"kind": "group_name", "search_term": "x"}]}
    compiled = groupql.compile_search(json.dumps(search), layout=TableLayout(name_column="title"))
    assert compiled.sql == "SELECT * FROM cohorts WHERE title ILIKE %(param_0)s"


def test_minimal_search():
    assert groupql.build_search('{"table": "groups"}') == "SELECT * FROM groups"


def test_custom_fields():
    sql = groupql.build_search('{"table": "groups", "fields": "name, scheduled_for"}')
    assert sql == "SELECT name, scheduled_for FROM groups"


def test_invalid_json_raises_parse_error():
    with pytest.raises(ParseError) as exc_info:
        groupql.compile_search("{not json")
    assert exc_info.value.raw == "{not json"


@pytest.mark.parametrize(
    "document",
    [
        {},
        {"table": "groups", "filters": [{"kind": "unknown"}]},
        {"table": "groups", "sorting": {"kind": "start_day", "direction": "UP"}},
        {"table": "groups", "limit": 10},
        {"table": "groups", "pagination": {"page": "first", "size": 10}},
    ],
)
def test_invalid_structure_raises_parse_error(document):
    with pytest.raises(ParseError):
        groupql.compile_search(json.dumps(document))


def test_empty_guids_propagates_invalid_filter_error():
    document = {"table": "groups", "filters": [{"kind": "member", "guids": [], "role": "INTERN"}]}
    with pytest.raises(InvalidFilterError):
        groupql.compile_search(json.dumps(document))


def test_zero_page_propagates_invalid_pagination_error():
    document = {"table": "groups", "pagination": {"page": 0, "size": 10}}
    with pytest.raises(InvalidPaginationError):
        groupql.build_search(json.dumps(document))


def test_blank_table_raises_configuration_error():
    with pytest.raises(ConfigurationError):
        groupql.build_search('{"table": ""}')


def test_to_builder_matches_fluent_builder():
    search = GroupSearch(
        table="groups",
        filters=[GroupNameFilter(search_term="a")],
        sorting=StartDaySorting(direction=SortDirection.DESC),
        pagination=Pagination(page=1, size=5),
    )
    fluent = (
        groupql.QueryBuilder.create()
        .select("*")
        .from_("groups")
        .where([GroupNameFilter(search_term="a")])
        .order_by(StartDaySorting(direction=SortDirection.DESC))
        .paginate(Pagination(page=1, size=5))
    )
    assert search.to_builder().build() == fluent.build()


def test_all_errors_share_a_base_class():
    for error in (
        groupql.ConfigurationError,
        groupql.InvalidFilterError,
        groupql.InvalidPaginationError,
        groupql.ParseError,
        groupql.CompilationError,
        groupql.SchemaError,
    ):
        assert issubclass(error, GroupQLError)
        assert not issubclass(error, ValueError)
