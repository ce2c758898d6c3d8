"""Tests for metadata keys and the key registry.

Critical Invariants:
- Same label never yields the same key
- Existing keys pass through unchanged
"""

import pytest

from typemeta import KeyRegistry, Metadata, MetadataKey, make_key


@pytest.fixture
def registry():
    """Create a KeyRegistry for testing."""
    return KeyRegistry()


def test_same_label_produces_distinct_keys(registry):
    """CRITICAL: Two keys from one label must never be equal.

    Why: Unrelated annotation libraries may pick the same human-readable name.
    """
    key1 = registry.make_key("test:label")
    key2 = registry.make_key("test:label")

    assert key1 != key2
    assert key1 is not key2
    assert key1.label == key2.label == "test:label"


def test_existing_key_passes_through(registry):
    """make_key(key) returns the key itself, not a new wrapper."""
    key = registry.make_key("test:label")

    assert registry.make_key(key) is key


def test_key_from_other_registry_passes_through(registry):
    foreign = KeyRegistry().make_key("foreign")

    assert registry.make_key(foreign) is foreign


def test_non_string_label_rejected(registry):
    with pytest.raises(TypeError, match="must be a str or MetadataKey"):
        registry.make_key(42)  # type: ignore[arg-type]


def test_serials_increase(registry):
    first = registry.make_key("a")
    second = registry.make_key("b")

    assert second.serial > first.serial


def test_registry_lookups(registry):
    key_a1 = registry.make_key("a")
    key_a2 = registry.make_key("a")
    key_b = registry.make_key("b")

    assert registry.find("a") == [key_a1, key_a2]
    assert registry.find("missing") == []
    assert registry.get(key_b.serial) is key_b
    assert registry.get(-1) is None
    assert key_a1 in registry
    assert "a" not in registry
    assert len(registry) == 3


def test_find_returns_copy(registry):
    registry.make_key("a")
    found = registry.find("a")
    found.clear()

    assert len(registry.find("a")) == 1


def test_module_level_make_key_is_unique():
    assert isinstance(make_key("x"), MetadataKey)
    assert make_key("x") != make_key("x")


def test_slots_with_same_label_do_not_collide(storage, family):
    """Keys from identical labels keep their entries apart."""
    parent, _, _ = family
    first = Metadata[str]("test:shared-label", storage=storage)
    second = Metadata[str]("test:shared-label", storage=storage)

    first.set(parent, "first")

    assert first.get(parent) == "first"
    assert second.get(parent) is None
    assert not second.has(parent)


def test_slots_sharing_a_key_share_storage(storage, family):
    """Passing one slot's key to another targets the same entries."""
    parent, _, _ = family
    first = Metadata[str]("test:label", storage=storage)
    second = Metadata[str](first.metadata_key, storage=storage)

    first.set(parent, "value")

    assert second.metadata_key is first.metadata_key
    assert second.get(parent) == "value"
