"""Pytest configuration and fixtures for solrql tests."""

import json
from unittest.mock import patch

import pysolr
import pytest
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

EMPTY_RESPONSE = json.dumps({"responseHeader": {"status": 0}, "response": {"numFound": 0, "start": 0, "docs": []}})


@pytest.fixture
def solr():
    """A pysolr client pointed at a URL that is never contacted."""
    return pysolr.Solr("http://localhost:8983/solr/test", timeout=5)


@pytest.fixture
def mock_select(solr):
    """Patch the client's transport and return the mock to inspect sent params."""
    with patch.object(solr, "_select", return_value=EMPTY_RESPONSE) as mocked:
        yield mocked
