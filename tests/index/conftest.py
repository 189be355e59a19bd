"""Shared fixtures for index tests."""

from __future__ import annotations

import textwrap

import pytest

LIBRARY_SOURCE = textwrap.dedent(
    '''\
    import os

    MAX_RETRIES = 3


    def connect(host, port: int = 8080, *, timeout=None):
        """Open a connection to host."""
        return Session(host, port)


    class Session:
        """A live session.

        Holds one connection.
        """

        def __init__(self, host: str, port: int = 8080):
            self.host = host
            self.port = port

        def send(self, payload, sep=", ", retries=MAX_RETRIES):
            """Send payload."""
            def _encode(chunk):
                return chunk

            return _encode(payload)


        def close(self):
            pass


    def broken(a,
               b):
        return a + b


    class Config(Base):
        def load(self, path):
            pass
    '''
)


@pytest.fixture
def library_source() -> str:
    """Module text exercising functions, classes, nesting and a multi-line header."""
    return LIBRARY_SOURCE
