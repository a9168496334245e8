"""Tests for the class diagram writer and member rendering."""

import pytest

from umlloom.core.config import UmlConfig
from umlloom.core.model import FieldInfo, InMemoryTypeModel, MethodInfo
from umlloom.core.uml.diagram import ClassDiagram
from umlloom.core.uml.indent import IndentingWriter
from umlloom.core.uml.members import ordered_methods, uml_type_of, write_members_to
from umlloom.core.uml.parameters import ParamNames, Parameters, TypeDisplay, TypeName

from .conftest import STRING, make_type

INT = TypeName.of("int")


# =========================================================================
# Tests: Full diagrams
# =========================================================================

class TestClassDiagram:
    def test_dog_animal_pet(self, type_model, dog):
        assert ClassDiagram(type_model).render(dog) == (
            "@startuml\n"
            "class Dog {\n"
            "  +speak(): String\n"
            "}\n"
            "\n"
            "abstract class Animal {\n"
            "  {abstract} +speak(): String\n"
            "}\n"
            'Animal "" <|-- "" Dog\n'
            "\n"
            "interface pets.Pet\n"
            'pets.Pet "" <|.. "" Dog\n'
            "\n"
            "@enduml\n"
        )

    def test_excluded_animal(self, type_model, dog):
        config = UmlConfig(excluded_references=["animals.Animal"])
        puml = ClassDiagram(type_model, config).render(dog)
        assert "Animal" not in puml
        assert 'pets.Pet "" <|.. "" Dog' in puml

    def test_unknown_interface(self):
        dog = make_type("animals.Dog", superclass="java.lang.Object", interfaces=["external.Unknown"])
        puml = ClassDiagram(InMemoryTypeModel([dog])).render(dog)
        assert "interface external.Unknown <<(?,orchid)>>\n" in puml
        assert 'external.Unknown "" <|.. "" Dog' in puml

    def test_unknown_superclass(self):
        dog = make_type("animals.Dog", superclass="external.Unknown")
        puml = ClassDiagram(InMemoryTypeModel([dog])).render(dog)
        assert "class external.Unknown <<(?,orchid)>>\n" in puml

    def test_implicit_object_root_excluded(self, type_model, animal):
        puml = ClassDiagram(type_model).render(animal)
        assert "java.lang.Object" not in puml

    def test_shared_supertype_declared_once(self, animal):
        multi = make_type("animals.Multi", superclass="animals.Animal", tags=[("depend", "Animal")])
        puml = ClassDiagram(InMemoryTypeModel([animal, multi])).render(multi)
        assert puml.count("abstract class Animal") == 1
        assert 'Animal "" <.. "" Multi' in puml

    def test_fresh_state_per_diagram(self, type_model, dog):
        diagram = ClassDiagram(type_model)
        assert diagram.render(dog) == diagram.render(dog)

    def test_legacy_tags_disabled(self, animal):
        multi = make_type("animals.Multi", tags=[("depend", "Animal")])
        puml = ClassDiagram(InMemoryTypeModel([animal, multi]), UmlConfig(legacy_tags=False)).render(multi)
        assert "<.." not in puml

    def test_generic_subject(self):
        box = make_type("a.Box", type_parameters=["T", "U extends Comparable<U>"])
        puml = ClassDiagram(InMemoryTypeModel([box])).render(box)
        assert "class Box<T, U extends Comparable<U>>\n" in puml

    def test_none_rejected(self, type_model):
        with pytest.raises(ValueError):
            ClassDiagram(type_model).render(None)


# =========================================================================
# Tests: Members
# =========================================================================

def members(fields=(), methods=(), config=None):
    out = write_members_to(list(fields), list(methods), config or UmlConfig(), IndentingWriter())
    return out.getvalue()


class TestMembers:
    def test_private_hidden_by_default(self):
        field = FieldInfo(name="secret", type=STRING, visibility="private")
        assert members(fields=[field]) == ""

    def test_private_included(self):
        field = FieldInfo(name="secret", type=STRING, visibility="private")
        assert members(fields=[field], config=UmlConfig(include_private_members=True)) == (
            "{\n  -secret: String\n}"
        )

    def test_static_and_visibility(self):
        field = FieldInfo(name="COUNT", type=INT, modifiers=["protected", "static"], visibility="protected")
        method = MethodInfo(name="make", return_type=STRING, modifiers=["static"], visibility="package")
        assert members(fields=[field], methods=[method]) == (
            "{\n  {static} #COUNT: int\n  {static} ~make(): String\n}"
        )

    def test_void_and_constructor_have_no_return(self):
        ctor = MethodInfo(name="Dog", is_constructor=True, parameters=Parameters().add("name", STRING))
        run = MethodInfo(name="run", return_type=TypeName.of("void"))
        assert members(methods=[ctor, run]) == "{\n  +Dog(name: String)\n  +run()\n}"

    def test_qualified_display(self):
        method = MethodInfo(name="greet", return_type=STRING, parameters=Parameters().add("to", STRING))
        config = UmlConfig(param_names=ParamNames.AFTER_TYPE, param_types=TypeDisplay.QUALIFIED,
                           return_types=TypeDisplay.QUALIFIED)
        assert members(methods=[method], config=config) == (
            "{\n  +greet(java.lang.String: to): java.lang.String\n}"
        )

    def test_overloads_grouped_and_ordered(self):
        two = MethodInfo(name="add", parameters=Parameters().add("a", INT).add("b", INT))
        other = MethodInfo(name="size", return_type=INT)
        one = MethodInfo(name="add", parameters=Parameters().add("a", INT))
        ordered = ordered_methods([two, other, one])
        assert [(m.name, len(m.parameters)) for m in ordered] == [("add", 1), ("add", 2), ("size", 0)]

    def test_uml_type_of(self):
        assert uml_type_of(make_type("a.I", kind="interface")) == "interface"
        assert uml_type_of(make_type("a.E", kind="enum")) == "enum"
        assert uml_type_of(make_type("a.A", modifiers=["abstract"])) == "abstract class"
        assert uml_type_of(make_type("a.C")) == "class"


# =========================================================================
# Tests: Indenting writer
# =========================================================================

class TestIndentingWriter:
    def test_indentation_is_lazy(self):
        out = IndentingWriter()
        with out.indented():
            out.append("a").newline().newline().append("b")
        assert out.getvalue() == "  a\n\n  b"

    def test_whitespace(self):
        out = IndentingWriter()
        out.whitespace().append("a").whitespace().whitespace().append("b")
        assert str(out) == "a b"

    def test_multiline_append(self):
        out = IndentingWriter()
        with out.indented():
            out.append("x\ny")
        assert out.getvalue() == "  x\n  y"
