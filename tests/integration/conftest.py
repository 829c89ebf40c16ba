"""Integration fixtures: real cache, argparse, and rich. Only the API client is faked."""

import io
import json
from unittest.mock import MagicMock
from urllib.parse import parse_qs, urlsplit

import pytest
from rich.console import Console

from gh_starred.cache import ResultCache
from gh_starred.cli import App
from gh_starred.errors import TransportError

STARRED = [
    {"name": "cli", "full_name": "cli/cli", "topics": ["cli", "go"], "html_url": "https://gh.test/cli/cli"},
    {"name": "rich", "full_name": "Textualize/rich", "topics": ["python", "terminal"], "html_url": "https://gh.test/t/rich"},
    {"name": "httpx", "full_name": "encode/httpx", "topics": ["python", "http"], "html_url": "https://gh.test/e/httpx"},
    {"name": "fzf", "full_name": "junegunn/fzf", "topics": ["cli", "fuzzy"], "html_url": "https://gh.test/j/fzf"},
    {"name": "notes", "full_name": "me/notes", "topics": [], "html_url": "https://gh.test/me/notes"},
]


def _make_client(starred=STARRED, fail_pages=()):
    """A fake API client paginating ``starred`` like `GET user/starred`."""
    client = MagicMock()

    def invoke(endpoint):
        query = parse_qs(urlsplit(endpoint).query)
        page, per_page = int(query["page"][0]), int(query["per_page"][0])
        if page in fail_pages:
            raise TransportError(f"HTTP 502 on page {page}")
        start = (page - 1) * per_page
        return json.dumps(starred[start : start + per_page]).encode()

    client.invoke.side_effect = invoke
    return client


@pytest.fixture
def client():
    return _make_client()


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def app(client, out):
    # Two repos per page so the fixture data spans several windows
    return App(ResultCache(client, per_page=2), batch_size=2, console=Console(file=out, width=120))


@pytest.fixture
def make_client():
    return _make_client
