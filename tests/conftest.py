"""Shared pytest fixtures for famgrid tests."""

from __future__ import annotations

import os

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from graph import relate  # noqa: E402
from models import Person, RelType, Sex  # noqa: E402
from store import PersonStore  # noqa: E402

RENE, KATHARINA, SAMUEL, VAL, ANNIKA = range(5)


@pytest.fixture
def store() -> PersonStore:
    """Empty, unbounded store."""
    return PersonStore()


@pytest.fixture
def family(store: PersonStore) -> PersonStore:
    """Rene and Katharina, married, with children Samuel, Val and Annika.

    IDs are 0 to 4 in that order.
    """
    store.add(Person(name="Rene", sex=Sex.M))
    store.add(Person(name="Katharina", sex=Sex.F))
    store.add(Person(name="Samuel", sex=Sex.M))
    store.add(Person(name="Val", sex=Sex.F))
    store.add(Person(name="Annika", sex=Sex.F))

    relate(store, RENE, KATHARINA, RelType.MARRIED)
    for parent in (RENE, KATHARINA):
        for child in (SAMUEL, VAL, ANNIKA):
            relate(store, parent, child, RelType.PARENT)
    return store


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep FAMGRID_* variables from the outer environment out of tests."""
    for key in list(os.environ):
        if key.startswith("FAMGRID_"):
            monkeypatch.delenv(key)
