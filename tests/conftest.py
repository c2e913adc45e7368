"""Shared fixtures for uncpath tests."""

import pytest

from uncpath.config import ENV_VAR
from uncpath.mapping import MappingTable


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's UNCPATH_MAPPINGS out of the tests."""
    monkeypatch.delenv(ENV_VAR, raising=False)


@pytest.fixture
def table() -> MappingTable:
    """A table with one mapping for server/shared."""
    table = MappingTable()
    table.add_mapping("server", "shared", "/mnt/shared")
    return table
