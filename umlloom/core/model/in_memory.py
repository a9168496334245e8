"""Dictionary-backed TypeModel."""

import logging
from typing import Dict, Iterable, List, Optional

from .types import TypeInfo, TypeModel

logger = logging.getLogger(__name__)


class InMemoryTypeModel(TypeModel):
    """TypeModel over a fixed collection of TypeInfo values.

    Used both for models built from parsed sources and as the test double.
    Types keep their insertion order in ``all_types``.
    """

    def __init__(self, types: Iterable[TypeInfo] = ()):
        self._types: Dict[str, TypeInfo] = {}
        for type_info in types:
            if type_info.qualified_name in self._types:
                logger.warning("Duplicate type %s; keeping the first declaration", type_info.qualified_name)
                continue
            self._types[type_info.qualified_name] = type_info

    def find_type(self, qualified_name: str) -> Optional[TypeInfo]:
        if not qualified_name:
            return None
        return self._types.get(qualified_name)

    def all_types(self) -> List[TypeInfo]:
        return list(self._types.values())

    def __contains__(self, qualified_name: str) -> bool:
        return qualified_name in self._types

    def __len__(self) -> int:
        return len(self._types)
