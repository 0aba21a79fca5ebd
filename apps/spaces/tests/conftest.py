from __future__ import annotations

import pytest

from .fakes import InMemoryStore, build_manager


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def owner(store):
    return store.add_user()


@pytest.fixture
def manager(store):
    return build_manager(store)
