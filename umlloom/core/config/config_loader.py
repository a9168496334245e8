"""Diagram configuration loaded from config/umlloom.yaml.

Path precedence: explicit argument, the UMLLOOM_CONFIG environment variable,
then config/umlloom.yaml at the repository root. A missing or unreadable file
falls back to defaults; a readable file with invalid values is an error.
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar

import yaml

from ..uml.parameters import ParamNames, TypeDisplay

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "UMLLOOM_CONFIG"
DEFAULT_EXCLUDED_REFERENCES = ("java.lang.Object", "java.lang.Enum")

E = TypeVar("E", bound=Enum)


def get_config_path() -> Path:
    """Directory holding the bundled configuration files."""
    return Path(__file__).parent.parent.parent.parent / "config"


@dataclass
class UmlConfig:
    """Settings consumed while resolving and rendering diagrams."""

    excluded_references: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDED_REFERENCES))
    include_abstract_superclass_methods: bool = True
    always_use_qualified_names: bool = False
    legacy_tags: bool = True
    param_names: ParamNames = ParamNames.BEFORE_TYPE
    param_types: TypeDisplay = TypeDisplay.SIMPLE
    return_types: TypeDisplay = TypeDisplay.SIMPLE
    include_private_members: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UmlConfig":
        """Build a config from the YAML document structure.

        Raises:
            ValueError: For unknown enum values or wrongly typed sections
        """
        diagrams = _section(data, "diagrams")
        methods = _section(data, "methods")
        defaults = cls()

        excluded = diagrams.get("excluded_references", defaults.excluded_references)
        if excluded is None:
            excluded = []
        if not isinstance(excluded, list):
            raise ValueError("diagrams.excluded_references must be a list of qualified names")

        return cls(
            excluded_references=[str(name) for name in excluded],
            include_abstract_superclass_methods=bool(
                diagrams.get("include_abstract_superclass_methods", defaults.include_abstract_superclass_methods)
            ),
            always_use_qualified_names=bool(
                diagrams.get("always_use_qualified_names", defaults.always_use_qualified_names)
            ),
            legacy_tags=bool(diagrams.get("legacy_tags", defaults.legacy_tags)),
            param_names=_enum(ParamNames, methods, "param_names", defaults.param_names),
            param_types=_enum(TypeDisplay, methods, "param_types", defaults.param_types),
            return_types=_enum(TypeDisplay, methods, "return_types", defaults.return_types),
            include_private_members=bool(methods.get("include_private", defaults.include_private_members)),
        )


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    return section


def _enum(enum_type: Type[E], section: Dict[str, Any], key: str, default: E) -> E:
    value = section.get(key)
    if value is None:
        return default
    try:
        return enum_type(str(value).lower())
    except ValueError:
        allowed = ", ".join(member.value for member in enum_type)
        raise ValueError(f"Invalid value {value!r} for methods.{key}; expected one of: {allowed}") from None


def load_config(path: Optional[str] = None) -> UmlConfig:
    """Load the diagram configuration.

    Args:
        path: Explicit YAML file; overrides the environment and the default location.
    """
    config_file = Path(path or os.environ.get(CONFIG_ENV_VAR) or get_config_path() / "umlloom.yaml")

    if not config_file.exists():
        logger.warning(f"{config_file} not found, using default diagram configuration")
        return UmlConfig()

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Error loading {config_file}: {e}")
        return UmlConfig()

    if not isinstance(data, dict):
        logger.error(f"Error loading {config_file}: top level must be a mapping")
        return UmlConfig()

    config = UmlConfig.from_dict(data)
    logger.debug("Loaded diagram configuration from %s: %s", config_file, config)
    return config
