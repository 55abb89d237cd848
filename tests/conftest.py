"""Shared fixtures for spellcheck options tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from spellcheck_options import SpellcheckOptions


@dataclass
class StubQuery:
    """Stand-in for the query object owned by the execution layer."""

    text: str


@pytest.fixture
def query() -> StubQuery:
    return StubQuery(text="hell wrld")


@pytest.fixture
def options() -> SpellcheckOptions:
    """Fresh options without a query."""
    return SpellcheckOptions.create()
