"""Query DSL module.

Exports the clause helpers and the `F` field wrapper used to compose Solr
query and filter strings. Query objects live in `solrql.query`.
"""

from .clauses import and_, ex, not_, or_, quote, range_, tag, where
from .field import F

__all__ = (
    "F",
    "where",
    "not_",
    "and_",
    "or_",
    "range_",
    "tag",
    "ex",
    "quote",
)
