"""TypeModel capability interface and the read-only values it hands out.

Every query the diagram engine makes about source types goes through
``TypeModel``. Names are always fully qualified strings; a name returned by
``superclass_of`` or ``interfaces_of`` does not have to resolve through
``find_type`` (it may point outside the documented sources).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..uml.parameters import Parameters, TypeName

VISIBILITY_MODIFIERS = ("public", "protected", "private")


def visibility_of(modifiers: List[str], default: str = "package") -> str:
    for modifier in VISIBILITY_MODIFIERS:
        if modifier in modifiers:
            return modifier
    return default


@dataclass
class MethodInfo:
    """A method or constructor declared directly on a type."""

    name: str
    parameters: Parameters = field(default_factory=Parameters)
    return_type: Optional[TypeName] = None  # None for constructors
    modifiers: List[str] = field(default_factory=list)
    is_constructor: bool = False
    abstract: bool = False
    visibility: str = "public"

    @property
    def is_abstract(self) -> bool:
        return self.abstract or "abstract" in self.modifiers

    @property
    def is_static(self) -> bool:
        return "static" in self.modifiers


@dataclass
class FieldInfo:
    name: str
    type: TypeName
    modifiers: List[str] = field(default_factory=list)
    visibility: str = "package"

    @property
    def is_static(self) -> bool:
        return "static" in self.modifiers


@dataclass
class TypeInfo:
    """A discovered type.

    ``interfaces`` may contain ``None`` entries when the host could not name an
    implemented interface; consumers skip those.
    """

    qualified_name: str
    name: str
    package: str = ""
    kind: str = "class"  # "class" | "interface" | "enum" | "annotation"
    modifiers: List[str] = field(default_factory=list)
    type_parameters: List[str] = field(default_factory=list)
    superclass: Optional[str] = None
    interfaces: List[Optional[str]] = field(default_factory=list)
    enclosing_type: Optional[str] = None
    methods: List[MethodInfo] = field(default_factory=list)
    fields: List[FieldInfo] = field(default_factory=list)
    tags: List[Tuple[str, str]] = field(default_factory=list)
    file_path: Optional[str] = None

    @property
    def is_abstract(self) -> bool:
        return self.kind == "class" and "abstract" in self.modifiers

    @property
    def is_interface(self) -> bool:
        return self.kind in ("interface", "annotation")

    def tags_named(self, name: str) -> List[str]:
        return [text for tag, text in self.tags if tag == name]


class TypeModel(ABC):
    """Read-only view over the discovered type universe.

    Implementations must not change while a diagram is rendering.
    """

    @abstractmethod
    def find_type(self, qualified_name: str) -> Optional[TypeInfo]:
        """Look up a type anywhere in the universe; None when unknown."""
        ...

    @abstractmethod
    def all_types(self) -> List[TypeInfo]:
        ...

    def superclass_of(self, type_info: TypeInfo) -> Optional[str]:
        return type_info.superclass

    def interfaces_of(self, type_info: TypeInfo) -> List[Optional[str]]:
        return list(type_info.interfaces)

    def containing_type_of(self, type_info: TypeInfo) -> Optional[str]:
        return type_info.enclosing_type

    def methods_of(self, type_info: TypeInfo) -> List[MethodInfo]:
        """Methods declared directly on the type, inherited ones excluded."""
        return list(type_info.methods)
