"""Shared fixtures for query tests."""

from __future__ import annotations

import textwrap

import pytest

from defhint.index.indexer import build_index
from defhint.index.models import Index

QUERY_SOURCE = textwrap.dedent(
    '''\
    def helper(value, scale=2):
        """Scale a value."""
        return value * scale


    class crshSession:
        """Session wrapper."""

        def __init__(self, name, retries: int = 3):
            pass

        def send(self, payload, sep=", "):
            pass

        def helper(self):
            pass


    class longName:
        def go(self):
            pass


    def broken(a,
               b):
        pass
    '''
)


@pytest.fixture
def index() -> Index:
    return build_index(QUERY_SOURCE, blocked_params={"self"})
