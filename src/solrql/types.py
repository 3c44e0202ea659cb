"""Type aliases for the solrql package."""

from typing import Any, Callable, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .query import SolrQuery

# Anything Solr can take once stringified: ints, strings, dates, enums, nested clauses
Value = Any

# Range bounds as a (lower, upper) pair
Bounds = Tuple[Value, Value]

# Configuration block applied to a query by `q()` and `SolrQuery.facet()`
QueryOp = Callable[["SolrQuery"], Any]
