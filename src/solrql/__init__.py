"""
solrql: a small fluent DSL for building Solr queries.

Clause helpers produce fragments of the Solr query syntax, `SolrQuery` collects
them into request parameters, and `execute` hands the result to pysolr.
"""

from .client import execute, get_client
from .exceptions import ConfigurationError, MissingConfigError, SearchError, SolrQlError
from .query import SolrQuery, SortClause, q
from .querydsl import F, and_, ex, not_, or_, quote, range_, tag, where

__version__ = "0.1.0"

__all__ = [
    "q",
    "SolrQuery",
    "SortClause",
    "F",
    "where",
    "not_",
    "and_",
    "or_",
    "range_",
    "tag",
    "ex",
    "quote",
    "get_client",
    "execute",
    "SolrQlError",
    "ConfigurationError",
    "MissingConfigError",
    "SearchError",
]
