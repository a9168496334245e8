"""AST Parser data models.

Plain containers for what the Java parser extracts. No parsing logic and no
name resolution lives here; written type names are kept exactly as they
appear in the source and resolved later by the type model adapter.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


TYPE_UNIT_KINDS = ("class", "interface", "enum", "annotation")
MEMBER_UNIT_KINDS = ("method", "constructor", "field")


@dataclass
class ParsedParameter:
    """One formal parameter as written: ``String... names`` -> ("names", "String[]", varargs)."""

    name: str
    type: str
    varargs: bool = False


@dataclass
class CodeUnit:
    """A single parsed code entity (type, method, constructor or field).

    Type units carry their inheritance clauses in ``extends`` / ``implements``;
    member units point back to their declaring type via ``parent_name``.
    """

    unit_type: str  # "class" | "interface" | "enum" | "annotation" | "method" | "constructor" | "field"
    name: str  # "Dog"
    qualified_name: str  # "animals.Dog" or "animals.Dog.bark"
    package: str  # "animals"
    file_path: str
    start_line: int
    end_line: int
    signature: Optional[str] = None
    docstring: Optional[str] = None
    parent_name: Optional[str] = None  # Qualified name of the declaring/enclosing type
    modifiers: List[str] = field(default_factory=list)
    annotations: List[str] = field(default_factory=list)
    type_parameters: List[str] = field(default_factory=list)
    extends: List[str] = field(default_factory=list)
    implements: List[str] = field(default_factory=list)
    tags: List[Tuple[str, str]] = field(default_factory=list)  # javadoc block tags
    return_type: Optional[str] = None  # methods; fields store their declared type here
    parameters: List[ParsedParameter] = field(default_factory=list)
    has_body: bool = True
    imports: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_type(self) -> bool:
        return self.unit_type in TYPE_UNIT_KINDS


@dataclass
class ParseError:
    """An error encountered during parsing."""

    file_path: str
    line: int
    message: str
    severity: str = "warning"  # "warning" | "error"


@dataclass
class ParseResult:
    """Complete parse output for a single source file."""

    file_path: str
    language: str
    package: str
    units: List[CodeUnit]
    imports: List[str]  # Imported names, e.g. "java.util.List" or "java.util.*"
    line_count: int = 0
    errors: List[ParseError] = field(default_factory=list)

    @property
    def types(self) -> List[CodeUnit]:
        return [u for u in self.units if u.is_type]
