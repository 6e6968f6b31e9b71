"""Shared fixtures for histogram tests."""
from __future__ import annotations

import pytest

from histogram_lite.core.histogram import Histogram


class Tagged:
    """Object whose str() is its id, so default keys tell them apart."""

    def __init__(self, id: str) -> None:
        self.id = id

    def __str__(self) -> str:
        return self.id


@pytest.fixture
def hist() -> Histogram:
    return Histogram()


@pytest.fixture
def objects() -> list[Tagged]:
    return [Tagged("id1"), Tagged("id2"), Tagged("id3"), Tagged("id4")]
