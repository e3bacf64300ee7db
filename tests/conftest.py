"""
Shared fixtures for buffer tests.
"""

import pytest


class Document:
    """Minimal Identifiable value used across the tests"""

    def __init__(self, doc_id: str, body: str = ""):
        self.doc_id = doc_id
        self.body = body

    def id(self) -> str:
        return self.doc_id

    def __repr__(self):
        return f"Document({self.doc_id!r}, {self.body!r})"


class FakeClock:
    """Manually advanced time source"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def doc():
    """Factory for Document values."""
    def _make(doc_id: str, body: str = "") -> Document:
        return Document(doc_id, body or f"body of {doc_id}")
    return _make
