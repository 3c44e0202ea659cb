"""
Hand-off from a built `SolrQuery` to the pysolr client.

The builder adds nothing of its own to a request: `execute` sends exactly the
parameters the query holds, so a query built through the DSL and one built
through the raw setters produce the same call.
"""

from typing import Any, Optional

import pysolr

from .constants import Param
from .exceptions import MissingConfigError, SearchError
from .logger import get_logger
from .query import SolrQuery
from .settings import settings

__all__ = ("get_client", "execute")

logger = get_logger(__name__)


def get_client(url: Optional[str] = None, timeout: Optional[int] = None, **kwargs: Any) -> pysolr.Solr:
    """Create a `pysolr.Solr` client.

    Args:
        url: Core/collection URL, e.g. ``http://localhost:8983/solr/books``.
            Defaults to SOLR_URL.
        timeout: Request timeout in seconds. Defaults to SOLR_TIMEOUT.
        **kwargs: Passed through to `pysolr.Solr`

    Raises:
        MissingConfigError: If no URL is given and SOLR_URL is not set
    """
    url = url or settings.SOLR_URL
    if not url:
        raise MissingConfigError("Solr URL not set", config_key="SOLR_URL")
    kwargs.setdefault("always_commit", settings.SOLR_ALWAYS_COMMIT)
    client = pysolr.Solr(url, timeout=timeout if timeout is not None else settings.SOLR_TIMEOUT, **kwargs)
    logger.message("Solr client created for %s", url)
    return client


def execute(query: SolrQuery, client: Optional[pysolr.Solr] = None, **extra: Any) -> pysolr.Results:
    """Run ``query`` against Solr and return pysolr's results.

    Args:
        query: The query to send
        client: Client to use; a new one is built from settings when omitted
        **extra: Additional request parameters (e.g. ``search_handler``, ``rows``).
            A ``q`` given here replaces the query's own for this call only.

    Raises:
        SearchError: If pysolr reports a failure
    """
    if client is None:
        client = get_client()
    params = query.to_params()
    params.update(extra)
    main_query = params.pop(Param.Q, query.query)
    logger.debug("Searching q=%r params=%r", main_query, params)
    try:
        return client.search(main_query, **params)
    except pysolr.SolrError as e:
        logger.error("Search failed for q=%r: %s", main_query, e)
        raise SearchError(str(e), q=main_query, params=params) from e
