"""Parameter lists and type names as they appear in method signatures.

Rendering honours two configuration choices: where a parameter's name goes
relative to its type (``ParamNames``) and how verbose the type is
(``TypeDisplay``). Ordering of parameter lists is used to keep overloaded
methods in a stable order within a diagram.
"""

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Iterator, List, Optional


class TypeDisplay(Enum):
    """How much of a type name to show."""
    QUALIFIED = "qualified"
    SIMPLE = "simple"
    NONE = "none"


class ParamNames(Enum):
    """Where a parameter name appears relative to its type."""
    BEFORE_TYPE = "before_type"
    AFTER_TYPE = "after_type"
    NONE = "none"


ARRAY_MARKER = "[]"
VARARGS_MARKER = "..."


@total_ordering
@dataclass(frozen=True)
class TypeName:
    """A type reference with both its written (simple) and qualified forms.

    ``TypeName("List<String>", "java.util.List<String>")``
    """

    simple: str
    qualified: str

    @classmethod
    def of(cls, name: str) -> "TypeName":
        return cls(simple=name, qualified=name)

    def to_uml(self, display: TypeDisplay) -> str:
        if display is TypeDisplay.QUALIFIED:
            return self.qualified
        if display is TypeDisplay.SIMPLE:
            return self.simple
        return ""

    def __lt__(self, other: "TypeName") -> bool:
        if not isinstance(other, TypeName):
            return NotImplemented
        return (self.qualified, self.simple) < (other.qualified, other.simple)

    def __str__(self) -> str:
        return self.qualified


@dataclass(frozen=True)
class Parameter:
    name: Optional[str]
    type: Optional[TypeName]

    def render(self, param_names: ParamNames, param_types: TypeDisplay, varargs: bool = False) -> str:
        parts: List[str] = []
        if self.name is not None and param_names is ParamNames.BEFORE_TYPE:
            parts.append(self.name)
        if self.type is not None and param_types is not TypeDisplay.NONE:
            type_uml = self.type.to_uml(param_types)
            if varargs and type_uml.endswith(ARRAY_MARKER):
                type_uml = type_uml[: -len(ARRAY_MARKER)] + VARARGS_MARKER
            parts.append(type_uml)
        if self.name is not None and param_names is ParamNames.AFTER_TYPE:
            parts.append(self.name)
        return ": ".join(parts)


@total_ordering
@dataclass
class Parameters:
    """Ordered parameter list of a method or constructor.

    Comparison orders by parameter count first, then by each positional
    parameter's type. Two lists with the same types but different parameter
    names compare equal, which is what overload ordering needs.
    """

    params: List[Parameter] = field(default_factory=list)
    is_varargs: bool = False

    def add(self, name: Optional[str], type: Optional[TypeName]) -> "Parameters":
        self.params.append(Parameter(name, type))
        return self

    def varargs(self, varargs: bool) -> "Parameters":
        self.is_varargs = varargs
        return self

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self.params)

    def __len__(self) -> int:
        return len(self.params)

    def render(
        self,
        param_names: ParamNames = ParamNames.BEFORE_TYPE,
        param_types: TypeDisplay = TypeDisplay.SIMPLE,
    ) -> str:
        """Render as ``(name: Type, other: Type...)``.

        Only the last parameter is treated as varargs.
        """
        last = len(self.params) - 1
        rendered = [
            param.render(param_names, param_types, varargs=self.is_varargs and i == last)
            for i, param in enumerate(self.params)
        ]
        return "(" + ", ".join(rendered) + ")"

    def _sort_key(self):
        return (
            len(self.params),
            tuple(p.type.qualified if p.type is not None else "" for p in self.params),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Parameters):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __lt__(self, other: "Parameters") -> bool:
        if not isinstance(other, Parameters):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    __hash__ = None  # mutable via add()
