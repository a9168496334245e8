"""Class diagram for one documented type."""

import logging
from typing import List, Optional

from ..config.config_loader import UmlConfig
from ..model.types import TypeInfo, TypeModel
from .indent import IndentingWriter
from .legacy_tags import LegacyTagReferences
from .members import uml_type_of, write_generics_of, write_members_to
from .renderer import DiagramContext, ReferenceRenderer
from .resolver import ReferenceResolver

logger = logging.getLogger(__name__)


class ClassDiagram:
    """Writes the PlantUML document for a type and its direct relationships."""

    def __init__(self, type_model: TypeModel, config: Optional[UmlConfig] = None):
        self.type_model = type_model
        self.config = config or UmlConfig()
        sources = [LegacyTagReferences(type_model)] if self.config.legacy_tags else []
        self.resolver = ReferenceResolver(
            type_model,
            excluded_references=self.config.excluded_references,
            reference_sources=sources,
        )

    def renderers_for(self, context: DiagramContext) -> List[ReferenceRenderer]:
        renderers = [ReferenceRenderer(context, ref) for ref in self.resolver.references_for(context.subject)]
        return list(dict.fromkeys(renderers))

    def render(self, type_info: Optional[TypeInfo]) -> str:
        """Render the diagram text, ``@startuml`` through ``@enduml``.

        Raises:
            ValueError: If ``type_info`` is None
        """
        if type_info is None:
            raise ValueError("Cannot render a diagram without a type.")

        context = DiagramContext(self.type_model, self.config, type_info)
        out = IndentingWriter()
        out.append("@startuml").newline()

        context.encountered_types.add(type_info.qualified_name)
        out.append(uml_type_of(type_info)).whitespace().append(context.simplify(type_info.qualified_name))
        write_generics_of(type_info, out)
        write_members_to(type_info.fields, self.type_model.methods_of(type_info), self.config, out)
        out.newline().newline()

        renderers = self.renderers_for(context)
        for renderer in renderers:
            renderer.write_to(out)

        out.append("@enduml").newline()
        logger.debug("Rendered diagram for %s with %d relationships", type_info.qualified_name, len(renderers))
        return out.getvalue()
