"""Settings for the solrql query builder."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_QUERY


class SolrQlSettings(BaseSettings):
    """solrql configuration settings."""

    # Solr
    SOLR_URL: Optional[str] = None
    SOLR_TIMEOUT: int = 60
    SOLR_ALWAYS_COMMIT: bool = False

    # Query defaults
    SOLR_DEFAULT_QUERY: str = DEFAULT_QUERY
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = SolrQlSettings()
