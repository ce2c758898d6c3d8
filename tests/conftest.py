"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from typemeta import MroResolver, SideTableStorage
from typemeta.config import reset_defaults


@pytest.fixture
def storage():
    """Fresh side-table storage, isolated from the process default."""
    return SideTableStorage()


@pytest.fixture
def resolver():
    return MroResolver()


@pytest.fixture
def family():
    """Fresh (Parent, Child, GrandChild) single-inheritance chain."""

    class Parent:
        pass

    class Child(Parent):
        pass

    class GrandChild(Child):
        pass

    return Parent, Child, GrandChild


@pytest.fixture
def clean_defaults(monkeypatch):
    """Reset cached settings and defaults around a test that changes env."""
    for name in ("TYPEMETA_STORAGE_BACKEND", "TYPEMETA_ATTRIBUTE_NAME", "TYPEMETA_LINEAGE"):
        monkeypatch.delenv(name, raising=False)
    reset_defaults()
    yield monkeypatch
    reset_defaults()
