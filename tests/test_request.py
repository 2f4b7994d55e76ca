"""
Unit tests for search request parameter building.
"""

import json

import pytest

from opensearch_client import SearchRequest, SortField, SortOrder


class TestQueryClauses:
    """Test the packed query parameter."""

    def test_minimal(self):
        """Test only config and query clauses appear by default."""
        request = SearchRequest(query="apple", hits=3, start=0)
        assert request.params() == {"query": "config=start:0,hit:3,format:fulljson&&query=apple"}

    def test_empty_query_still_present(self):
        request = SearchRequest(hits=10)
        assert request.params()["query"] == "config=start:0,hit:10,format:fulljson&&query="

    def test_all_clauses_in_order(self):
        """Test clause order is config, query, sort, filter, kvpairs."""
        request = SearchRequest(
            query="title:'apple'",
            start=20,
            hits=5,
            filter="price>100",
            kvpairs="uid:42",
            sort_fields=[SortField("price", SortOrder.DESC)]
        )
        assert request.params()["query"] == (
            "config=start:20,hit:5,format:fulljson"
            "&&query=title:'apple'"
            "&&sort=-price"
            "&&filter=price>100"
            "&&kvpairs=uid:42"
        )

    def test_kvpairs_without_filter(self):
        """Test skipped clauses leave no dangling separator."""
        request = SearchRequest(query="q", kvpairs="a:1")
        clauses = request.params()["query"]
        assert clauses == "config=start:0,hit:0,format:fulljson&&query=q&&kvpairs=a:1"
        assert "&&&&" not in clauses
        assert not clauses.startswith("&&")
        assert not clauses.endswith("&&")


class TestSortClause:
    """Test sort clause construction."""

    def test_caller_order_preserved(self):
        """Test sort fields keep the given order."""
        request = SearchRequest(sort_fields=[
            SortField("price", SortOrder.DESC),
            SortField("date", SortOrder.ASC)
        ])
        assert request.sort_clause() == "sort=-price;+date"

    @pytest.mark.parametrize("order", ["ASC", "asc", "increase", "INCREASE", SortOrder.ASC])
    def test_ascending_tokens(self, order):
        assert SortField("f", order).clause() == "+f"

    @pytest.mark.parametrize("order", ["DESC", "decrease", "Asc", "", "up", SortOrder.DESC])
    def test_everything_else_descending(self, order):
        assert SortField("f", order).clause() == "-f"

    def test_default_descending(self):
        assert SortField("f").clause() == "-f"

    def test_no_sort_fields(self):
        assert SearchRequest().sort_clause() == ""


class TestParams:
    """Test the parameter map."""

    def test_fetch_fields(self):
        """Test fetch fields are joined with ; in order."""
        request = SearchRequest(query="q", fetch_fields=["title", "id", "body"])
        assert request.params()["fetch_fields"] == "title;id;body"

    def test_no_fetch_fields(self):
        assert "fetch_fields" not in SearchRequest().params()

    def test_headers_map(self):
        """Test caller headers are exposed as a copy."""
        request = SearchRequest(headers={"X-Opensearch-Trace": "1"})
        headers = request.headers_map()
        headers["X-Other"] = "2"
        assert request.headers_map() == {"X-Opensearch-Trace": "1"}


class TestSearchRequest:
    """Test request value semantics."""

    def test_immutable(self):
        request = SearchRequest(query="q")
        with pytest.raises(AttributeError):
            request.query = "other"

    def test_sequences_frozen(self):
        """Test list arguments are stored as tuples."""
        fields = ["a"]
        request = SearchRequest(fetch_fields=fields)
        fields.append("b")
        assert request.fetch_fields == ("a",)

    @pytest.mark.parametrize("kwargs", [{"start": -1}, {"hits": -1}])
    def test_negative_paging_rejected(self, kwargs):
        with pytest.raises(ValueError):
            SearchRequest(**kwargs)

    def test_str(self):
        """Test the JSON summary of the request."""
        request = SearchRequest(
            query="q",
            hits=3,
            fetch_fields=["id"],
            sort_fields=[SortField("price", "DESC"), SortField("date", SortOrder.ASC)]
        )
        assert json.loads(str(request)) == {
            "fetch_fields": ["id"],
            "start": 0,
            "hits": 3,
            "kvpairs": "",
            "query": "q",
            "filter": "",
            "sort_fields": "price:DESC;date:ASC"
        }

    def test_sort_field_str(self):
        assert str(SortField("price", "increase")) == "price:increase"

    def test_default_paging(self):
        """Test start and hits default to zero."""
        request = SearchRequest(query="a")
        assert request.config_clause() == "config=start:0,hit:0,format:fulljson"
