"""
Search request and query clause construction.

The service packs several clauses into the single ``query`` parameter:

    config=start:0,hit:10,format:fulljson&&query=...&&sort=...&&filter=...&&kvpairs=...

Clause order is fixed and empty clauses are dropped without leaving a
dangling ``&&``.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Sequence, Union

from .constants import ASCENDING_ORDERS


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class SortField:
    field: str
    order: Union[SortOrder, str] = SortOrder.DESC

    @property
    def ascending(self) -> bool:
        order = self.order.value if isinstance(self.order, SortOrder) else self.order
        return order in ASCENDING_ORDERS

    def clause(self) -> str:
        """Field prefixed with + for ascending and - otherwise."""
        return ("+" if self.ascending else "-") + self.field

    def __str__(self) -> str:
        order = self.order.value if isinstance(self.order, SortOrder) else self.order
        return f"{self.field}:{order}"


@dataclass(frozen=True)
class SearchRequest:
    """
    A search against one app.

    Attributes:
        query: Raw query text, sent even when empty
        start: Offset of the first hit
        hits: Number of hits to return
        filter: Raw filter expression
        kvpairs: Raw kvpairs expression
        sort_fields: Sort fields, applied in the given order
        fetch_fields: Fields to return per hit
        headers: Extra headers to send with the request
    """

    query: str = ""
    start: int = 0
    hits: int = 0
    filter: str = ""
    kvpairs: str = ""
    sort_fields: Sequence[SortField] = ()
    fetch_fields: Sequence[str] = ()
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if self.start < 0:
            raise ValueError(f"start must be non-negative, got {self.start}")
        if self.hits < 0:
            raise ValueError(f"hits must be non-negative, got {self.hits}")
        object.__setattr__(self, 'sort_fields', tuple(self.sort_fields))
        object.__setattr__(self, 'fetch_fields', tuple(self.fetch_fields))

    def params(self) -> Dict[str, str]:
        """Parameter map fed to the canonical resource and the wire query."""
        params = {"query": self.build_query_clauses()}
        if self.fetch_fields:
            params["fetch_fields"] = ";".join(self.fetch_fields)
        return params

    def headers_map(self) -> Dict[str, str]:
        return dict(self.headers)

    def build_query_clauses(self) -> str:
        clauses = [
            self.config_clause(),
            self.query_clause(),
            self.sort_clause(),
            self.filter_clause(),
            self.kvpairs_clause(),
        ]
        return "&&".join(clause for clause in clauses if clause)

    def config_clause(self) -> str:
        return f"config=start:{self.start},hit:{self.hits},format:fulljson"

    def query_clause(self) -> str:
        return "query=" + self.query

    def sort_clause(self) -> str:
        if not self.sort_fields:
            return ""
        return "sort=" + ";".join(sort_field.clause() for sort_field in self.sort_fields)

    def filter_clause(self) -> str:
        if not self.filter:
            return ""
        return "filter=" + self.filter

    def kvpairs_clause(self) -> str:
        if not self.kvpairs:
            return ""
        return "kvpairs=" + self.kvpairs

    def __str__(self) -> str:
        return json.dumps({
            "fetch_fields": list(self.fetch_fields),
            "start": self.start,
            "hits": self.hits,
            "kvpairs": self.kvpairs,
            "query": self.query,
            "filter": self.filter,
            "sort_fields": ";".join(str(sort_field) for sort_field in self.sort_fields),
        })
