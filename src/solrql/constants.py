"""
Solr parameter names and sort orders used when rendering a query.
"""

DEFAULT_QUERY = "*:*"


class SortOrder:
    ASC = "asc"
    DESC = "desc"


class Param:
    Q = "q"
    FQ = "fq"
    FL = "fl"
    SORT = "sort"
    FACET = "facet"
    FACET_FIELD = "facet.field"
    FACET_QUERY = "facet.query"
    FACET_LIMIT = "facet.limit"
    FACET_MINCOUNT = "facet.mincount"
