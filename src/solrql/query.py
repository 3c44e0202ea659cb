"""Solr query object and the fluent DSL built on top of it.

`SolrQuery` holds the request parameters of one Solr search and is mutated in
place. Its ``set_*`` / ``add_*`` methods are the raw parameter setters; the
short DSL methods (`fq`, `fl`, `sort_asc`, `facet`, ...) each delegate to
exactly one of them and return the query so calls chain.

Typical usage::

    query = q(F("id") == 12345, lambda s: s.fq(F("field") == or_(15, 20, 25)))
    # q=id:12345&fq=field:(15 OR 20 OR 25)

    query = (
        q()
        .add_fq(tag("t", where("type", "book")))
        .facet(lambda f: f.facet_field(ex("t", "type")).facet_min_count(1))
    )
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

from .constants import Param, SortOrder
from .logger import get_logger
from .settings import settings
from .types import QueryOp

__all__ = ("SortClause", "SolrQuery", "q")

logger = get_logger(__name__)


class SortClause(BaseModel):
    """A single ``field order`` entry of the ``sort`` parameter."""

    model_config = ConfigDict(frozen=True)

    item: str
    order: Literal["asc", "desc"]

    @classmethod
    def asc(cls, item: str) -> "SortClause":
        return cls(item=item, order=SortOrder.ASC)

    @classmethod
    def desc(cls, item: str) -> "SortClause":
        return cls(item=item, order=SortOrder.DESC)

    def __str__(self) -> str:
        return f"{self.item} {self.order}"


def _as_list(value: Any) -> List[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "on", "yes")
    return bool(value)


class SolrQuery:
    """Mutable Solr request parameters.

    Attributes:
        query: The main (scored) query, sent as ``q``
        filter_queries: Filter queries, sent as repeated ``fq``
        fields: Field list, sent comma-joined as ``fl``
        sorts: Sort clauses, sent comma-joined as ``sort``
        facet_fields: Sent as repeated ``facet.field``
        facet_queries: Sent as repeated ``facet.query``
    """

    def __init__(self, query: Optional[str] = None) -> None:
        self.query: str = settings.SOLR_DEFAULT_QUERY if query is None else query
        self.filter_queries: List[str] = []
        self.fields: List[str] = []
        self.sorts: List[Union[SortClause, str]] = []
        self.facet_enabled: bool = False
        self.facet_fields: List[str] = []
        self.facet_queries: List[str] = []
        self.facet_limit_value: Optional[int] = None
        self.facet_min_count_value: Optional[int] = None
        self.extra: Dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"<SolrQuery: q={self.query!r} {self.to_params()}>"

    # -------------------
    # Parameter setters
    # -------------------
    def set_query(self, query: str) -> "SolrQuery":
        self.query = query
        return self

    def set_filter_queries(self, *fq: str) -> "SolrQuery":
        self.filter_queries = list(fq)
        return self

    def add_filter_query(self, *fq: str) -> "SolrQuery":
        self.filter_queries.extend(fq)
        return self

    def set_fields(self, *fields: str) -> "SolrQuery":
        self.fields = list(fields)
        return self

    def add_field(self, field: str) -> "SolrQuery":
        self.fields.append(field)
        return self

    def add_sort(self, clause: SortClause) -> "SolrQuery":
        self.sorts.append(clause)
        return self

    def set_facet(self, enabled: bool) -> "SolrQuery":
        self.facet_enabled = enabled
        return self

    def add_facet_field(self, *fields: str) -> "SolrQuery":
        """Append facet fields. Adding a facet field also turns faceting on."""
        self.facet_fields.extend(fields)
        self.facet_enabled = True
        return self

    def add_facet_query(self, query: str) -> "SolrQuery":
        """Append a facet query. Adding a facet query also turns faceting on."""
        self.facet_queries.append(query)
        self.facet_enabled = True
        return self

    def set_facet_limit(self, limit: int) -> "SolrQuery":
        self.facet_limit_value = limit
        return self

    def set_facet_min_count(self, count: int) -> "SolrQuery":
        self.facet_min_count_value = count
        return self

    def set(self, name: str, value: Any) -> "SolrQuery":
        """Set a request parameter by its Solr name.

        Parameters the query models (``q``, ``fq``, ``fl``, ``sort`` and the
        ``facet`` family) replace the state the typed setters write, so a
        following `add_fq` or `sort_asc` appends to what was set here. Any
        other name (``rows``, ``start``, ``defType``, ...) is sent as given.
        """
        if name == Param.Q:
            return self.set_query(value)
        elif name == Param.FQ:
            return self.set_filter_queries(*_as_list(value))
        elif name == Param.FL:
            return self.set_fields(*_as_list(value))
        elif name == Param.SORT:
            # raw "field order" strings are kept as-is
            self.sorts = _as_list(value)
            return self
        elif name == Param.FACET:
            return self.set_facet(_as_bool(value))
        elif name == Param.FACET_FIELD:
            self.facet_fields = []
            return self.add_facet_field(*_as_list(value))
        elif name == Param.FACET_QUERY:
            self.facet_queries = _as_list(value)
            return self.set_facet(True)
        elif name == Param.FACET_LIMIT:
            return self.set_facet_limit(value)
        elif name == Param.FACET_MINCOUNT:
            return self.set_facet_min_count(value)
        self.extra[name] = value
        return self

    # -------------------
    # DSL
    # -------------------
    def fq(self, *fq: str) -> "SolrQuery":
        """Replace the filter queries."""
        return self.set_filter_queries(*fq)

    def add_fq(self, fq: str) -> "SolrQuery":
        return self.add_filter_query(fq)

    def fl(self, *fl: str) -> "SolrQuery":
        """Replace the field list."""
        return self.set_fields(*fl)

    def add_fl(self, fl: str) -> "SolrQuery":
        return self.add_field(fl)

    def sort_asc(self, field: str) -> "SolrQuery":
        return self.add_sort(SortClause.asc(field))

    def sort_desc(self, field: str) -> "SolrQuery":
        return self.add_sort(SortClause.desc(field))

    def facet(self, op: Optional[QueryOp] = None) -> "SolrQuery":
        """Enable faceting, then apply ``op`` to the query.

        ``op`` is meant for the facet calls (`facet_field`, `facet_query`,
        `facet_limit`, `facet_min_count`) but may call anything on the query.
        """
        self.set_facet(True)
        if op is not None:
            op(self)
        return self

    def facet_field(self, *fields: str) -> "SolrQuery":
        return self.add_facet_field(*fields)

    def facet_query(self, query: str) -> "SolrQuery":
        return self.add_facet_query(query)

    def facet_limit(self, limit: int) -> "SolrQuery":
        return self.set_facet_limit(limit)

    def facet_min_count(self, count: int) -> "SolrQuery":
        return self.set_facet_min_count(count)

    # -------------------
    # Rendering
    # -------------------
    def to_params(self) -> Dict[str, Any]:
        """Return the request parameters other than ``q``.

        Multi-valued parameters are lists, which pysolr sends as repeated
        keys. Unset parameters are left out.
        """
        params: Dict[str, Any] = {}
        if self.filter_queries:
            params[Param.FQ] = list(self.filter_queries)
        if self.fields:
            params[Param.FL] = ",".join(self.fields)
        if self.sorts:
            params[Param.SORT] = ",".join(str(s) for s in self.sorts)
        if self.facet_enabled:
            params[Param.FACET] = "true"
        if self.facet_fields:
            params[Param.FACET_FIELD] = list(self.facet_fields)
        if self.facet_queries:
            params[Param.FACET_QUERY] = list(self.facet_queries)
        if self.facet_limit_value is not None:
            params[Param.FACET_LIMIT] = self.facet_limit_value
        if self.facet_min_count_value is not None:
            params[Param.FACET_MINCOUNT] = self.facet_min_count_value
        params.update(self.extra)
        return params


def q(query: Optional[str] = None, op: Optional[QueryOp] = None) -> SolrQuery:
    """Create a `SolrQuery` and apply ``op`` to it.

    Args:
        query: The initial query; defaults to SOLR_DEFAULT_QUERY (``*:*``)
        op: Configuration block called with the new query

    Returns:
        The query after ``op`` has run
    """
    solr_query = SolrQuery(query)
    if op is not None:
        op(solr_query)
    logger.debug("Built %r", solr_query)
    return solr_query
