"""DiagramService: class diagrams for every type in a model.

Each documented type gets one ``.puml`` artifact at
``<output_dir>/<package path>/<TypeName>.puml``; nested types keep their
enclosing type in the file name (``Outer.Inner.puml``).
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from ..config.config_loader import UmlConfig
from ..model.types import TypeInfo, TypeModel
from ..uml.diagram import ClassDiagram

logger = logging.getLogger(__name__)

PUML_SUFFIX = ".puml"


class DiagramOutputError(RuntimeError):
    """A diagram artifact could not be written."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Failed to write diagram {path}: {reason}")
        self.path = path


class DiagramService:
    """Renders and writes class diagrams for a TypeModel."""

    def __init__(self, type_model: TypeModel, config: Optional[UmlConfig] = None):
        """Initialize DiagramService.

        Args:
            type_model: Source of the documented types
            config: Diagram settings; defaults when omitted
        """
        self._type_model = type_model
        self._config = config or UmlConfig()
        self._diagram = ClassDiagram(type_model, self._config)

    def diagram_for(self, qualified_name: str) -> str:
        """PlantUML text for one type.

        Raises:
            ValueError: If the type is not in the model
        """
        type_info = self._type_model.find_type(qualified_name)
        if type_info is None:
            raise ValueError(f"Unknown type: {qualified_name}")
        return self._diagram.render(type_info)

    def render_all(self) -> Dict[str, str]:
        """``{qualified_name: puml}`` for every type, sorted by name."""
        types = sorted(self._type_model.all_types(), key=lambda t: t.qualified_name)
        return {t.qualified_name: self._diagram.render(t) for t in types}

    def artifact_path(self, output_dir: Path, type_info: TypeInfo) -> Path:
        package_dir = Path(output_dir).joinpath(*type_info.package.split(".")) if type_info.package else Path(output_dir)
        local_name = type_info.qualified_name
        if type_info.package:
            local_name = local_name[len(type_info.package) + 1:]
        return package_dir / (local_name + PUML_SUFFIX)

    def write_all(self, output_dir) -> List[Path]:
        """Write one artifact per type and return the written paths.

        Raises:
            DiagramOutputError: If any artifact cannot be written
        """
        written: List[Path] = []
        for type_info in sorted(self._type_model.all_types(), key=lambda t: t.qualified_name):
            path = self.artifact_path(Path(output_dir), type_info)
            puml = self._diagram.render(type_info)
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(puml, encoding="utf-8")
            except OSError as e:
                raise DiagramOutputError(path, str(e)) from e
            logger.debug("Wrote %s", path)
            written.append(path)

        logger.info("Wrote %d diagrams to %s", len(written), output_dir)
        return written
