"""Type model: the read-only view over discovered types that diagrams are drawn from."""

from .in_memory import InMemoryTypeModel
from .parsed import TypeNameResolver, build_type_model
from .types import FieldInfo, MethodInfo, TypeInfo, TypeModel, visibility_of

__all__ = [
    "TypeModel",
    "TypeInfo",
    "MethodInfo",
    "FieldInfo",
    "InMemoryTypeModel",
    "TypeNameResolver",
    "build_type_model",
    "visibility_of",
]
