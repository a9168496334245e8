"""References contributed by UMLGraph-style javadoc tags.

Supported tags on a type's javadoc::

    @extends Animal
    @implements Pet
    @depend Logger
    @assoc 1 owns * Toy          (own cardinality, label, target cardinality, target)
    @navassoc - uses - Leash
    @has 1 - 4 Leg
    @composed 1 - 1 Heart

A ``-`` cardinality or label means "none". The target type is the ``from``
side of the Reference and the documented type the ``to`` side, so
``@has 1 - 4 Leg`` on Dog renders as ``Leg "4" o-- "1" Dog``.
"""

import logging
from enum import Enum
from typing import List, Optional

from ..model.types import TypeInfo, TypeModel
from .reference import Notation, Reference, from_side, to_side

logger = logging.getLogger(__name__)

_NONE = "-"


class LegacyTag(Enum):
    EXTENDS = ("extends", Notation.EXTENSION)
    IMPLEMENTS = ("implements", Notation.INTERFACE_IMPLEMENTATION)
    ASSOC = ("assoc", Notation.ASSOCIATION)
    NAVASSOC = ("navassoc", Notation.NAVIGABLE_ASSOCIATION)
    HAS = ("has", Notation.AGGREGATION)
    COMPOSED = ("composed", Notation.COMPOSITION)
    DEPEND = ("depend", Notation.DEPENDENCY)

    def __init__(self, tag_name: str, notation: str):
        self.tag_name = tag_name
        self.notation = notation

    def to_reference(self, type_info: TypeInfo, text: str, type_model: TypeModel) -> Optional[Reference]:
        parts = text.split()
        if len(parts) == 1:
            target = _resolve_target(parts[0], type_info, type_model)
            return Reference(from_side(target), self.notation, to_side(type_info.qualified_name))

        if len(parts) == 4:
            own_card, label, target_card, target_name = parts
            target = _resolve_target(target_name, type_info, type_model)
            reference = Reference(
                from_side(target, _optional(target_card)),
                self.notation,
                to_side(type_info.qualified_name, _optional(own_card)),
            )
            return reference.add_note(label) if label != _NONE else reference

        logger.warning(
            "Ignoring @%s tag on %s: expected 1 or 4 words, got %r",
            self.tag_name, type_info.qualified_name, text,
        )
        return None


def _optional(value: str) -> Optional[str]:
    return None if value == _NONE else value


def _resolve_target(name: str, type_info: TypeInfo, type_model: TypeModel) -> str:
    """Qualified name of a tag target: as written, then within the documented type's package."""
    if type_model.find_type(name) is not None:
        return name
    if type_info.package and "." not in name:
        candidate = f"{type_info.package}.{name}"
        if type_model.find_type(candidate) is not None:
            return candidate
    return name


class LegacyTagReferences:
    """Reference source reading legacy tags from a type's javadoc."""

    def __init__(self, type_model: TypeModel):
        self.type_model = type_model

    def references_for(self, type_info: TypeInfo) -> List[Reference]:
        references: List[Reference] = []
        for legacy_tag in LegacyTag:
            for text in type_info.tags_named(legacy_tag.tag_name):
                reference = legacy_tag.to_reference(type_info, text, self.type_model)
                if reference is not None:
                    logger.debug("Legacy @%s tag on %s adds %s", legacy_tag.tag_name, type_info.qualified_name, reference)
                    references.append(reference)
        return references
