"""Collect the References a type participates in.

Order of the result: superclass, interfaces in declaration order, containing
type, then whatever the configured reference sources contribute. Equal
References collapse onto the first occurrence.
"""

import logging
from typing import Dict, Iterable, List, Optional, Protocol

from ..model.types import TypeInfo, TypeModel
from .reference import Notation, Reference, from_side, to_side

logger = logging.getLogger(__name__)


class ReferenceSource(Protocol):
    def references_for(self, type_info: TypeInfo) -> List[Reference]:
        ...


class ReferenceResolver:
    """Resolves the superclass, interface, containment and extra References of a type."""

    def __init__(
        self,
        type_model: TypeModel,
        excluded_references: Iterable[str] = (),
        reference_sources: Iterable[ReferenceSource] = (),
    ):
        self.type_model = type_model
        self.excluded_references = frozenset(excluded_references)
        self.reference_sources = list(reference_sources)

    def references_for(self, type_info: Optional[TypeInfo]) -> List[Reference]:
        """Ordered, deduplicated References for ``type_info``.

        Raises:
            ValueError: If ``type_info`` is None
        """
        if type_info is None:
            raise ValueError("Cannot resolve references without a type.")

        name = type_info.qualified_name
        references: Dict[Reference, Reference] = {}

        superclass = self.type_model.superclass_of(type_info)
        if superclass is None:
            logger.debug("%s has no superclass", name)
        elif superclass in self.excluded_references:
            logger.debug("Superclass %s of %s is excluded", superclass, name)
        else:
            _add(references, Reference(from_side(superclass), Notation.EXTENSION, to_side(name)))

        for interface in self.type_model.interfaces_of(type_info):
            if interface is None:
                logger.info("Skipping unnamed interface of %s", name)
            elif interface in self.excluded_references:
                logger.debug("Interface %s of %s is excluded", interface, name)
            else:
                _add(references, Reference(from_side(interface), Notation.INTERFACE_IMPLEMENTATION, to_side(name)))

        containing_type = self.type_model.containing_type_of(type_info)
        if containing_type is not None:
            _add(references, Reference(from_side(containing_type), Notation.CONTAINMENT, to_side(name)))

        for source in self.reference_sources:
            for reference in source.references_for(type_info):
                _add(references, reference)

        logger.debug("Resolved %d references for %s", len(references), name)
        return list(references)


def _add(references: Dict[Reference, Reference], reference: Reference) -> None:
    if reference not in references:
        references[reference] = reference
