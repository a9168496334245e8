"""PlantUML text for type headers, fields and methods."""

from typing import List

from ..model.types import FieldInfo, MethodInfo, TypeInfo
from .indent import IndentingWriter
from .parameters import TypeDisplay

_VISIBILITY_SYMBOLS = {
    "public": "+",
    "protected": "#",
    "package": "~",
    "private": "-",
}


def uml_type_of(type_info: TypeInfo) -> str:
    """PlantUML keyword for a type box."""
    if type_info.kind == "interface":
        return "interface"
    if type_info.kind == "enum":
        return "enum"
    if type_info.kind == "annotation":
        return "annotation"
    if type_info.is_abstract:
        return "abstract class"
    return "class"


def write_generics_of(type_info: TypeInfo, out: IndentingWriter) -> IndentingWriter:
    if type_info.type_parameters:
        out.append("<" + ", ".join(type_info.type_parameters) + ">")
    return out


def visibility_symbol(visibility: str) -> str:
    return _VISIBILITY_SYMBOLS.get(visibility, "~")


def is_visible(member, config) -> bool:
    return config.include_private_members or member.visibility != "private"


def write_field_to(field: FieldInfo, config, out: IndentingWriter) -> IndentingWriter:
    if field.is_static:
        out.append("{static} ")
    out.append(visibility_symbol(field.visibility)).append(field.name)
    type_uml = field.type.to_uml(config.return_types)
    if type_uml:
        out.append(": ").append(type_uml)
    return out.newline()


def write_method_to(method: MethodInfo, config, out: IndentingWriter) -> IndentingWriter:
    """``{abstract} +speak(times: int): String``"""
    if method.is_abstract:
        out.append("{abstract} ")
    elif method.is_static:
        out.append("{static} ")
    out.append(visibility_symbol(method.visibility)).append(method.name)
    out.append(method.parameters.render(config.param_names, config.param_types))
    if method.return_type is not None and config.return_types is not TypeDisplay.NONE:
        return_uml = method.return_type.to_uml(config.return_types)
        if return_uml and return_uml != "void":
            out.append(": ").append(return_uml)
    return out.newline()


def ordered_methods(methods: List[MethodInfo]) -> List[MethodInfo]:
    """Group overloads under the first declaration of their name.

    Within a group, overloads are ordered by their parameter lists.
    """
    first_seen = {}
    for i, method in enumerate(methods):
        first_seen.setdefault((not method.is_constructor, method.name), i)
    return sorted(
        methods,
        key=lambda m: (first_seen[(not m.is_constructor, m.name)], m.parameters),
    )


def write_members_to(
    fields: List[FieldInfo], methods: List[MethodInfo], config, out: IndentingWriter
) -> IndentingWriter:
    """Write a ``{ ... }`` block with the visible fields and methods.

    Nothing is written when no member is visible.
    """
    fields = [f for f in fields if is_visible(f, config)]
    methods = [m for m in ordered_methods(methods) if is_visible(m, config)]
    if not fields and not methods:
        return out

    out.whitespace().append("{").newline()
    with out.indented():
        for field in fields:
            write_field_to(field, config, out)
        for method in methods:
            write_method_to(method, config, out)
    return out.append("}")
