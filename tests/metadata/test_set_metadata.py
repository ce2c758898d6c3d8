"""Tests for SetMetadata."""

import pytest

from typemeta import SetMetadata


@pytest.fixture
def tags(storage):
    return SetMetadata[str]("test:set", storage=storage)


def test_init_empty_and_persisted(tags, family):
    parent, _, _ = family

    tags.init(parent).add("value")

    assert tags.get_set(parent) == {"value"}


def test_init_inherits_parent_set(tags, family):
    parent, child, _ = family
    tags.init(parent).add("value")

    assert tags.init(child) == {"value"}


def test_init_child_then_parent_change(tags, family):
    parent, child, _ = family
    tags.init(parent).add("value")
    tags.init(child).add("child")

    tags.add(parent, "late")

    assert tags.get_set(child) == {"value", "child"}
    assert tags.get_set(parent) == {"value", "late"}


def test_add_on_class_and_instance(tags, family):
    parent, child, _ = family

    tags.add(parent, "a")
    tags.add(child(), "b")

    assert tags.get_set(parent) == {"a"}
    assert tags.get_set(child) == {"a", "b"}


def test_add_ignores_duplicates(tags, family):
    parent, _, _ = family

    for value in ("a", "b", "a", "a"):
        tags.add(parent, value)

    assert tags.get_size(parent) == 2


def test_get_set_is_stable(tags, family):
    """Two reads without mutation see the same contents and the same object."""
    parent, child, _ = family
    tags.add(parent, "a")

    first = tags.get_set(child)
    second = tags.get_set(child)

    assert first == second == {"a"}
    assert first is second


def test_has(tags, family):
    parent, child, _ = family

    assert not tags.has(parent, "a")
    assert not tags.has(parent(), "a")

    tags.add(parent, "a")

    assert tags.has(parent, "a")
    assert tags.has(child(), "a")
    assert not tags.has(parent, "b")


def test_delete(tags, family):
    parent, _, _ = family
    tags.add(parent, "a")

    assert tags.delete(parent, "a") is True
    assert tags.delete(parent(), "a") is False
    assert tags.get_size(parent) == 0


def test_delete_on_child_keeps_parent(tags, family):
    parent, child, _ = family
    tags.add(parent, "a")

    assert tags.delete(child, "a") is True

    assert tags.has(parent, "a")
    assert not tags.has(child, "a")


def test_clear(tags, family):
    parent, child, _ = family
    tags.add(parent, "a")

    tags.clear(child())

    assert tags.get_size(child) == 0
    assert tags.get_size(parent) == 1

    tags.clear(parent)
    assert tags.get_size(parent) == 0


def test_iteration_views(tags, family):
    parent, _, _ = family
    tags.add(parent, "a")
    tags.add(parent, "b")

    assert set(tags.keys(parent)) == {"a", "b"}
    assert set(tags.values(parent)) == {"a", "b"}
    assert set(tags.entries(parent)) == {("a", "a"), ("b", "b")}


def test_iteration_restartable(tags, family):
    """Each call re-derives from current contents."""
    parent, _, _ = family
    tags.add(parent, "a")
    values = tags.values(parent)
    assert list(values) == ["a"]
    assert list(values) == []

    tags.add(parent, "b")

    assert sorted(tags.values(parent)) == ["a", "b"]


def test_iteration_pins_child(tags, family):
    parent, child, _ = family
    tags.add(parent, "a")

    assert list(tags.keys(child)) == ["a"]
    tags.add(parent, "b")

    assert list(tags.keys(child)) == ["a"]


def test_get_size(tags, family):
    parent, _, _ = family

    assert tags.get_size(parent) == 0
    assert tags.get_size(parent()) == 0
    tags.add(parent, "a")
    assert tags.get_size(parent) == 1


def test_class_decorator(tags):
    @tags.mark("a", "b", "a")
    class Target:
        pass

    assert tags.get_set(Target) == {"a", "b"}


def test_delete_while_iterating(tags, family):
    """Iterators walk a copy, so deleting inside the loop is safe."""
    parent, _, _ = family
    for value in ("a", "b", "c"):
        tags.add(parent, value)

    for value in tags.keys(parent):
        tags.delete(parent, value)

    assert tags.get_size(parent) == 0


def test_add_while_iterating(tags, family):
    parent, _, _ = family
    tags.add(parent, "a")
    tags.add(parent, "b")

    for value, _ in tags.entries(parent):
        tags.add(parent, value.upper())

    assert tags.get_set(parent) == {"a", "b", "A", "B"}
