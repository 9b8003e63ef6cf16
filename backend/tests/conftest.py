"""Pytest configuration and fixtures."""
from typing import Any, Dict
import pytest
from hubspot_client.converters.document_converter import DocumentConverter
from hubspot_client.core.logging import setup_logging

setup_logging()


@pytest.fixture
def converter() -> DocumentConverter:
    """Create a document converter."""
    return DocumentConverter()


@pytest.fixture
def contact_document() -> Dict[str, Any]:
    """Single contact as returned by the v1 contact endpoint."""
    return {
        "vid": 42,
        "canonical-vid": 42,
        "portal-id": 62515,
        "is-contact": True,
        "properties": {
            "email": {"value": "a@b.com", "versions": []},
            "firstname": {"value": "Ada"},
            "lastname": {"value": "Lovelace"},
            "lastmodifieddate": {"value": "1484026585538"},
            "hs_analytics_source": {"versions": []},
        },
    }


@pytest.fixture
def contact_list_document() -> Dict[str, Any]:
    """Page of the "all contacts" endpoint."""
    return {
        "contacts": [
            {"vid": 1, "properties": {"email": {"value": "x@y.com"}}},
            {
                "vid": 2,
                "properties": {
                    "email": {"value": "z@y.com"},
                    "firstname": {"value": "Grace"},
                },
            },
        ],
        "has-more": True,
        "vid-offset": 2,
        "time-offset": 1484026585538,
    }
