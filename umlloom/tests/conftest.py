"""Shared fixtures: a small animals/pets type universe."""

import pytest

from umlloom.core.config import UmlConfig
from umlloom.core.model import FieldInfo, InMemoryTypeModel, MethodInfo, TypeInfo
from umlloom.core.uml.parameters import Parameters, TypeName

STRING = TypeName("String", "java.lang.String")


def make_type(qualified_name, **kwargs):
    package, _, name = qualified_name.rpartition(".")
    kwargs.setdefault("package", package)
    return TypeInfo(qualified_name=qualified_name, name=name, **kwargs)


@pytest.fixture
def animal():
    return make_type(
        "animals.Animal",
        modifiers=["public", "abstract"],
        superclass="java.lang.Object",
        methods=[
            MethodInfo(name="speak", return_type=STRING, modifiers=["public", "abstract"]),
            MethodInfo(name="age", return_type=TypeName.of("int"), modifiers=["public"]),
        ],
    )


@pytest.fixture
def pet():
    return make_type("pets.Pet", kind="interface")


@pytest.fixture
def dog():
    return make_type(
        "animals.Dog",
        modifiers=["public"],
        superclass="animals.Animal",
        interfaces=["pets.Pet"],
        methods=[MethodInfo(name="speak", return_type=STRING, modifiers=["public"])],
        fields=[FieldInfo(name="name", type=STRING, modifiers=["private"], visibility="private")],
    )


@pytest.fixture
def type_model(animal, pet, dog):
    return InMemoryTypeModel([animal, pet, dog])


@pytest.fixture
def config():
    return UmlConfig()


@pytest.fixture
def params():
    return Parameters()
