"""Tests for ReferenceResolver."""

import logging

import pytest

from umlloom.core.model import InMemoryTypeModel
from umlloom.core.uml.legacy_tags import LegacyTagReferences
from umlloom.core.uml.reference import Notation, Reference, from_side, to_side
from umlloom.core.uml.resolver import ReferenceResolver

from .conftest import make_type


def ref(from_name, notation, to_name):
    return Reference(from_side(from_name), notation, to_side(to_name))


# =========================================================================
# Tests: Supertypes
# =========================================================================

class TestSupertypes:
    def test_dog_animal_pet(self, type_model, dog):
        references = ReferenceResolver(type_model).references_for(dog)
        assert references == [
            ref("animals.Animal", Notation.EXTENSION, "animals.Dog"),
            ref("pets.Pet", Notation.INTERFACE_IMPLEMENTATION, "animals.Dog"),
        ]

    def test_excluded_superclass(self, type_model, dog):
        resolver = ReferenceResolver(type_model, excluded_references=["animals.Animal"])
        assert resolver.references_for(dog) == [
            ref("pets.Pet", Notation.INTERFACE_IMPLEMENTATION, "animals.Dog"),
        ]

    def test_excluded_interface(self, type_model, dog):
        resolver = ReferenceResolver(type_model, excluded_references=["pets.Pet"])
        assert resolver.references_for(dog) == [
            ref("animals.Animal", Notation.EXTENSION, "animals.Dog"),
        ]

    def test_no_superclass(self, type_model, pet):
        assert ReferenceResolver(type_model).references_for(pet) == []

    def test_unnamed_interface_skipped(self, caplog):
        odd = make_type("a.Odd", interfaces=[None, "a.Named"])
        with caplog.at_level(logging.INFO):
            references = ReferenceResolver(InMemoryTypeModel([odd])).references_for(odd)
        assert references == [ref("a.Named", Notation.INTERFACE_IMPLEMENTATION, "a.Odd")]
        assert "unnamed interface" in caplog.text

    def test_unresolvable_names_kept(self):
        dog = make_type("animals.Dog", interfaces=["external.Unknown"])
        references = ReferenceResolver(InMemoryTypeModel([dog])).references_for(dog)
        assert references == [ref("external.Unknown", Notation.INTERFACE_IMPLEMENTATION, "animals.Dog")]


# =========================================================================
# Tests: Containment
# =========================================================================

class TestContainment:
    def test_nested_type(self):
        outer = make_type("a.Outer")
        inner = make_type("a.Outer.Inner", package="a", enclosing_type="a.Outer")
        references = ReferenceResolver(InMemoryTypeModel([outer, inner])).references_for(inner)
        assert references == [ref("a.Outer", Notation.CONTAINMENT, "a.Outer.Inner")]

    def test_containment_ignores_exclusions(self):
        inner = make_type("a.Outer.Inner", package="a", enclosing_type="a.Outer")
        resolver = ReferenceResolver(InMemoryTypeModel([inner]), excluded_references=["a.Outer"])
        assert resolver.references_for(inner) == [ref("a.Outer", Notation.CONTAINMENT, "a.Outer.Inner")]


# =========================================================================
# Tests: Ordering and deduplication
# =========================================================================

class TestOrdering:
    def test_order_superclass_interfaces_containment(self):
        inner = make_type(
            "a.Outer.Inner",
            package="a",
            superclass="a.Base",
            interfaces=["a.Second", "a.First"],
            enclosing_type="a.Outer",
        )
        references = ReferenceResolver(InMemoryTypeModel([inner])).references_for(inner)
        assert [r.from_.qualified_name for r in references] == ["a.Base", "a.Second", "a.First", "a.Outer"]

    def test_duplicate_interfaces_collapse(self):
        twice = make_type("a.Twice", interfaces=["a.I", "a.I"])
        references = ReferenceResolver(InMemoryTypeModel([twice])).references_for(twice)
        assert references == [ref("a.I", Notation.INTERFACE_IMPLEMENTATION, "a.Twice")]

    def test_deterministic(self, type_model, dog):
        resolver = ReferenceResolver(type_model)
        assert resolver.references_for(dog) == resolver.references_for(dog)

    def test_none_type_rejected(self, type_model):
        with pytest.raises(ValueError):
            ReferenceResolver(type_model).references_for(None)


# =========================================================================
# Tests: Reference sources
# =========================================================================

class TestReferenceSources:
    def test_legacy_tags_appended_after_supertypes(self, animal, pet):
        dog = make_type("animals.Dog", superclass="animals.Animal", tags=[("depend", "Animal"), ("has", "1 - 4 Leg")])
        leg = make_type("animals.Leg")
        model = InMemoryTypeModel([animal, pet, dog, leg])
        resolver = ReferenceResolver(model, reference_sources=[LegacyTagReferences(model)])
        references = resolver.references_for(dog)
        assert references[0] == ref("animals.Animal", Notation.EXTENSION, "animals.Dog")
        assert [r.type for r in references] == [Notation.EXTENSION, Notation.AGGREGATION, Notation.DEPENDENCY]
        assert references[1].from_.qualified_name == "animals.Leg"

    def test_legacy_tags_exempt_from_exclusions(self):
        dog = make_type("animals.Dog", tags=[("extends", "java.lang.Object")])
        model = InMemoryTypeModel([dog])
        resolver = ReferenceResolver(
            model,
            excluded_references=["java.lang.Object"],
            reference_sources=[LegacyTagReferences(model)],
        )
        assert resolver.references_for(dog) == [ref("java.lang.Object", Notation.EXTENSION, "animals.Dog")]

    def test_tag_duplicating_supertype_collapses(self, animal):
        dog = make_type("animals.Dog", superclass="animals.Animal", tags=[("extends", "Animal")])
        model = InMemoryTypeModel([animal, dog])
        resolver = ReferenceResolver(model, reference_sources=[LegacyTagReferences(model)])
        assert resolver.references_for(dog) == [ref("animals.Animal", Notation.EXTENSION, "animals.Dog")]
