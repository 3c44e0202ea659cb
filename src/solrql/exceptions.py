"""Exceptions raised by solrql.

Clause helpers never raise; malformed fields or values are handed to Solr
untouched. Errors only come from configuring the client or from the client
itself.
"""

from typing import Any, Dict


class SolrQlError(Exception):
    """Base exception for all solrql errors.

    Attributes:
        message: Error message
        details: Additional error context as key-value pairs
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        self.message = message
        self.details: Dict[str, Any] = kwargs
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.details:
            return self.message

        details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        if self.message:
            return f"{self.message} ({details_str})"
        return details_str

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# Configuration exceptions
class ConfigurationError(SolrQlError):
    """Raised when configuration is invalid or missing.

    Example:
        >>> raise ConfigurationError("Invalid configuration", setting="SOLR_TIMEOUT", value=-1)
    """


class MissingConfigError(ConfigurationError):
    """Raised when required configuration values are not set.

    Example:
        >>> raise MissingConfigError("Configuration not set", config_key="SOLR_URL")
    """


# Search exceptions
class SearchError(SolrQlError):
    """Raised when the Solr client rejects or fails to run a query.

    Example:
        >>> raise SearchError("Search failed", q="id:1", params={"fq": ["-x:1"]})
    """
