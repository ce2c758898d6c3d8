"""Tests for type resolution and ancestor walks."""

from typemeta import BaseChainResolver, MroResolver, resolve_type


class Base:
    pass


class Mixin:
    pass


class Derived(Base):
    pass


class Combined(Derived, Mixin):
    pass


def test_resolve_type_passes_classes_through():
    assert resolve_type(Derived) is Derived


def test_resolve_type_maps_instances_to_class():
    assert resolve_type(Derived()) is Derived


def test_resolve_type_on_metaclass_instance():
    """Classes are instances of type, but resolve to themselves."""
    assert resolve_type(type) is type
    assert resolve_type(int) is int
    assert resolve_type(3) is int


def test_base_chain_lineage():
    resolver = BaseChainResolver()

    assert list(resolver.lineage(Derived)) == [Derived, Base, object]
    assert resolver.parent_of(Derived) is Base
    assert resolver.parent_of(object) is None


def test_mro_lineage_matches_base_chain_for_single_inheritance():
    assert list(MroResolver().lineage(Derived)) == list(BaseChainResolver().lineage(Derived))


def test_mro_lineage_includes_mixins():
    assert list(MroResolver().lineage(Combined)) == [Combined, Derived, Base, Mixin, object]
    assert Mixin not in list(BaseChainResolver().lineage(Combined))


def test_mro_parent_of():
    resolver = MroResolver()

    assert resolver.parent_of(Combined) is Derived
    assert resolver.parent_of(object) is None


def test_lineage_is_restartable():
    resolver = BaseChainResolver()

    assert list(resolver.lineage(Derived)) == list(resolver.lineage(Derived))
