"""Build a TypeModel from parsed Java sources.

The parser keeps type names exactly as written (``Animal``, ``List<Pet>``);
this module resolves them to qualified names the way the Java compiler
scopes them, as far as the sources at hand allow:

1. member types of the enclosing type chain
2. single-type imports
3. types in the same package
4. on-demand (``.*``) imports, when the imported type is known
5. well-known ``java.lang`` types
6. otherwise the name as written
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Set

from ..ast_parser.models import CodeUnit, ParseResult
from ..uml.parameters import Parameters, TypeName
from .in_memory import InMemoryTypeModel
from .types import FieldInfo, MethodInfo, TypeInfo, visibility_of

logger = logging.getLogger(__name__)

JAVA_LANG_OBJECT = "java.lang.Object"
JAVA_LANG_ENUM = "java.lang.Enum"
JAVA_LANG_RECORD = "java.lang.Record"

PRIMITIVE_TYPES = frozenset({
    "boolean", "byte", "char", "short", "int", "long", "float", "double", "void", "var",
})

JAVA_LANG_TYPES = frozenset({
    "Object", "String", "Enum", "Record", "Class", "Number", "Integer", "Long", "Short",
    "Byte", "Double", "Float", "Boolean", "Character", "Void", "Math", "System",
    "StringBuilder", "CharSequence", "Comparable", "Iterable", "Runnable", "Cloneable",
    "AutoCloseable", "Thread", "Throwable", "Exception", "RuntimeException", "Error",
    "IllegalArgumentException", "IllegalStateException", "NullPointerException",
    "UnsupportedOperationException", "IndexOutOfBoundsException",
    "Override", "Deprecated", "FunctionalInterface", "SuppressWarnings", "SafeVarargs",
})


class TypeNameResolver:
    """Resolves written type names against the known type universe."""

    __slots__ = ("known", "enclosing")

    def __init__(self, known: Set[str], enclosing: Dict[str, Optional[str]]):
        self.known = known
        self.enclosing = enclosing

    @classmethod
    def from_units(cls, units: Iterable[CodeUnit]) -> "TypeNameResolver":
        known: Set[str] = set()
        enclosing: Dict[str, Optional[str]] = {}
        for unit in units:
            if unit.is_type:
                known.add(unit.qualified_name)
                enclosing[unit.qualified_name] = unit.parent_name
        return cls(known, enclosing)

    def resolve(self, written: str, package: str, imports: List[str], scope: Optional[str] = None) -> str:
        """Resolve a bare (non-generic, non-array) type name."""
        name = _erase(written)
        if not name or name in PRIMITIVE_TYPES:
            return name or written
        if "." in name and name in self.known:
            return name

        head, _, tail = name.partition(".")
        suffix = f".{tail}" if tail else ""

        while scope:
            candidate = f"{scope}.{name}"
            if candidate in self.known:
                return candidate
            scope = self.enclosing.get(scope)

        for imported in imports:
            if not imported.endswith(".*") and imported.rsplit(".", 1)[-1] == head:
                return imported + suffix

        candidate = f"{package}.{name}" if package else name
        if candidate in self.known:
            return candidate

        for imported in imports:
            if imported.endswith(".*"):
                candidate = f"{imported[:-2]}.{name}"
                if candidate in self.known:
                    return candidate

        if head in JAVA_LANG_TYPES:
            return f"java.lang.{name}"

        return name

    def qualify(self, written: str, package: str, imports: List[str], scope: Optional[str] = None) -> TypeName:
        """Qualify the base of a type expression, keeping generics and array suffixes as written.

        ``List<Pet>[]`` with ``import java.util.List`` -> ``java.util.List<Pet>[]``
        """
        simple = " ".join(written.split())
        cut = len(simple)
        for marker in ("<", "["):
            pos = simple.find(marker)
            if pos != -1:
                cut = min(cut, pos)
        base, rest = simple[:cut], simple[cut:]
        return TypeName(simple=simple, qualified=self.resolve(base, package, imports, scope) + rest)


def _erase(written: str) -> str:
    """Drop type annotations and generic arguments: ``@NonNull Map<K, V>`` -> ``Map``."""
    words = [w for w in written.split() if not w.startswith("@")]
    return "".join(words).split("<", 1)[0].strip()


def build_type_model(results: Iterable[ParseResult]) -> InMemoryTypeModel:
    """Turn parse results into a TypeModel."""
    results = list(results)
    units = [unit for result in results for unit in result.units]
    resolver = TypeNameResolver.from_units(units)

    members: Dict[str, List[CodeUnit]] = defaultdict(list)
    for unit in units:
        if not unit.is_type and unit.parent_name:
            members[unit.parent_name].append(unit)

    types = [
        _to_type_info(unit, members.get(unit.qualified_name, []), resolver)
        for unit in units
        if unit.is_type
    ]
    logger.info("Built type model with %d types from %d files", len(types), len(results))
    return InMemoryTypeModel(types)


def _to_type_info(unit: CodeUnit, members: List[CodeUnit], resolver: TypeNameResolver) -> TypeInfo:
    def resolve(written: str) -> str:
        return resolver.resolve(written, unit.package, unit.imports, scope=unit.parent_name)

    superclass: Optional[str] = None
    interfaces: List[Optional[str]] = [resolve(name) or None for name in unit.implements]

    if unit.unit_type == "class":
        if unit.extends:
            superclass = resolve(unit.extends[0])
        elif unit.metadata.get("record"):
            superclass = JAVA_LANG_RECORD
        elif unit.qualified_name != JAVA_LANG_OBJECT:
            superclass = JAVA_LANG_OBJECT
    elif unit.unit_type == "enum":
        superclass = JAVA_LANG_ENUM
    elif unit.unit_type == "interface":
        interfaces = [resolve(name) or None for name in unit.extends] + interfaces

    type_info = TypeInfo(
        qualified_name=unit.qualified_name,
        name=unit.name,
        package=unit.package,
        kind=unit.unit_type,
        modifiers=list(unit.modifiers),
        type_parameters=list(unit.type_parameters),
        superclass=superclass,
        interfaces=interfaces,
        enclosing_type=unit.parent_name,
        tags=list(unit.tags),
        file_path=unit.file_path,
    )

    def qualify(written: str) -> TypeName:
        return resolver.qualify(written, unit.package, unit.imports, scope=unit.qualified_name)

    default_visibility = "public" if unit.unit_type in ("interface", "annotation") else "package"
    for member in members:
        if member.unit_type == "field":
            type_info.fields.append(FieldInfo(
                name=member.name,
                type=qualify(member.return_type or "?"),
                modifiers=list(member.modifiers),
                visibility=visibility_of(member.modifiers, default_visibility),
            ))
            continue

        parameters = Parameters()
        for param in member.parameters:
            parameters.add(param.name, qualify(param.type))
        parameters.varargs(bool(member.parameters) and member.parameters[-1].varargs)

        is_constructor = member.unit_type == "constructor"
        type_info.methods.append(MethodInfo(
            name=member.name,
            parameters=parameters,
            return_type=None if is_constructor else qualify(member.return_type or "void"),
            modifiers=list(member.modifiers),
            is_constructor=is_constructor,
            abstract=_is_abstract_method(unit, member),
            visibility=visibility_of(member.modifiers, default_visibility),
        ))

    return type_info


def _is_abstract_method(owner: CodeUnit, method: CodeUnit) -> bool:
    if method.unit_type != "method":
        return False
    if "abstract" in method.modifiers:
        return True
    if owner.unit_type == "interface" and not method.has_body:
        return not {"static", "default", "private"} & set(method.modifiers)
    return False
