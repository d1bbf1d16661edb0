"""Shared fixtures for TSML-MCP tests."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from tsml_mcp.config import TsmlServerConfig
from tsml_mcp.tsml_client import TsmlClient


SITE_URL = "https://meetings.example.org/"
AJAX_URL = "https://meetings.example.org/wp-admin/admin-ajax.php"


def make_response(status=200, body=None, text=None, content_type="application/json"):
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status
    response.url = AJAX_URL
    response.encoding = "utf-8"
    response.headers["Content-Type"] = content_type
    if text is None:
        text = json.dumps(body)
    response._content = text.encode("utf-8")
    return response


@pytest.fixture
def config():
    return TsmlServerConfig(wordpress_url=SITE_URL, api_key="secret")


@pytest.fixture
def client(config):
    """TsmlClient whose HTTP session is a mock."""
    tsml_client = TsmlClient(config)
    tsml_client.session = MagicMock()
    return tsml_client


@pytest.fixture
def open_client():
    """TsmlClient for a site without an API key."""
    tsml_client = TsmlClient(TsmlServerConfig(wordpress_url=SITE_URL))
    tsml_client.session = MagicMock()
    return tsml_client
