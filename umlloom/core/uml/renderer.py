"""PlantUML text for a single Reference.

A ReferenceRenderer first declares whichever endpoint types the diagram has
not declared yet, then writes the relationship line::

    abstract class Animal {
      {abstract} +speak(): String
    }
    interface pets.Pet
    Animal "" <|-- "" Dog

Type declarations are tracked per diagram in ``DiagramContext``; a type is
declared at most once per diagram.
"""

import logging
from typing import List, Optional, Set

from ..model.types import MethodInfo, TypeInfo, TypeModel
from .indent import IndentingWriter
from .members import uml_type_of, write_generics_of, write_members_to
from .reference import Notation, Reference, Side

logger = logging.getLogger(__name__)

UNKNOWN_TYPE_MARKER = "<<(?,orchid)>>"


class DiagramContext:
    """State shared by all renderers of one diagram.

    Create a new context for every diagram; ``encountered_types`` must never
    leak from one diagram into the next.
    """

    def __init__(self, type_model: TypeModel, config, subject: TypeInfo):
        if subject is None:
            raise ValueError("A diagram context needs a subject type.")
        self.type_model = type_model
        self.config = config
        self.subject = subject
        self.encountered_types: Set[str] = set()

    @property
    def package(self) -> str:
        return self.subject.package

    def simplify(self, qualified_name: str) -> str:
        """Drop the subject's package prefix from names declared in that package."""
        if self.config.always_use_qualified_names or not self.package:
            return qualified_name
        prefix = self.package + "."
        if not qualified_name.startswith(prefix):
            return qualified_name
        type_info = self.type_model.find_type(qualified_name)
        if type_info is not None:
            in_package = type_info.package == self.package
        else:
            # Unknown type: only a direct member of the package qualifies
            in_package = "." not in qualified_name[len(prefix):]
        return qualified_name[len(prefix):] if in_package else qualified_name


class ReferenceRenderer:
    """Renders one Reference in the scope of a diagram.

    Two renderers are equal when their References are equal, so a diagram can
    deduplicate renderers the same way the resolver deduplicates References.
    """

    def __init__(self, context: Optional[DiagramContext], reference: Optional[Reference]):
        if context is None:
            raise ValueError("A reference renderer needs a diagram context.")
        if reference is None:
            raise ValueError("A reference renderer needs a reference.")
        self.context = context
        self.reference = reference
        self.documented_type = self._find_documented_type()
        self.children = self._find_children()

    def _find_documented_type(self) -> TypeInfo:
        subject = self.context.subject
        for side in (self.reference.to, self.reference.from_):
            if side.qualified_name == subject.qualified_name:
                continue
            type_info = self.context.type_model.find_type(side.qualified_name)
            if type_info is not None:
                return type_info
        return subject

    def _find_children(self) -> List[MethodInfo]:
        if self.reference.is_self_reference():
            return []
        if not self.context.config.include_abstract_superclass_methods:
            return []
        if self.documented_type is self.context.subject:
            return []
        return [m for m in self.context.type_model.methods_of(self.documented_type) if m.is_abstract]

    def add_note(self, note: str) -> "ReferenceRenderer":
        self.reference = self.reference.add_note(note)
        return self

    def write_type_declarations_to(self, out: IndentingWriter) -> IndentingWriter:
        for side in (self.reference.from_, self.reference.to):
            name = side.qualified_name
            if name in self.context.encountered_types:
                continue
            self.context.encountered_types.add(name)

            type_info = self.context.type_model.find_type(name)
            if type_info is None:
                logger.debug("Declaring unresolved type %s as a stub", name)
                out.append(self._guess_class_or_interface()).whitespace()
                out.append(self.context.simplify(name)).whitespace().append(UNKNOWN_TYPE_MARKER)
                out.newline()
                continue

            out.append(uml_type_of(type_info)).whitespace().append(self.context.simplify(name))
            write_generics_of(type_info, out)
            if type_info is self.documented_type and self.children:
                write_members_to([], self.children, self.context.config, out)
            out.newline()
        return out

    def _guess_class_or_interface(self) -> str:
        return "interface" if self.reference.type in Notation.IMPLEMENTATION_TOKENS else "class"

    def write_to(self, out: IndentingWriter) -> IndentingWriter:
        self.write_type_declarations_to(out)
        reference = self.reference
        out.append(self.context.simplify(reference.from_.qualified_name))
        out.whitespace().append(_quoted_cardinality(reference.from_))
        out.whitespace().append(reference.type)
        out.whitespace().append(_quoted_cardinality(reference.to))
        out.whitespace().append(self.context.simplify(reference.to.qualified_name))
        if reference.notes:
            out.append(": " + "\\n".join(note.replace("\n", "\\n") for note in reference.notes))
        return out.newline().newline()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReferenceRenderer):
            return NotImplemented
        return self.reference == other.reference

    def __hash__(self) -> int:
        return hash(self.reference)

    def __repr__(self) -> str:
        return f"ReferenceRenderer({self.reference})"


def _quoted_cardinality(side: Side) -> str:
    return f'"{side.cardinality or ""}"'
