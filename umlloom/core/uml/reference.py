"""Reference value type: one relationship edge between two types.

A Reference is stored the way PlantUML reads it, left to right. For
inheritance-like notations the supertype is the ``from_`` side and the
referring type the ``to`` side, so ``Animal <|-- Dog`` is
``Reference(from_side("animals.Animal"), Notation.EXTENSION, to_side("animals.Dog"))``.

References are immutable. ``add_note`` returns a new value; a Reference that
is already held in a set or used as a dict key is NOT updated by it, so
callers that index references must re-insert the returned value.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple


class Notation:
    """PlantUML relationship tokens."""
    EXTENSION = "<|--"
    INTERFACE_IMPLEMENTATION = "<|.."
    CONTAINMENT = "+--"
    ASSOCIATION = "--"
    NAVIGABLE_ASSOCIATION = "<--"
    AGGREGATION = "o--"
    COMPOSITION = "*--"
    DEPENDENCY = "<.."

    # Tokens that imply the supertype end is an interface
    IMPLEMENTATION_TOKENS = frozenset({"<|..", "..|>"})


@dataclass(frozen=True)
class Side:
    """One endpoint of a Reference."""

    qualified_name: str
    cardinality: Optional[str] = None


def from_side(qualified_name: str, cardinality: Optional[str] = None) -> Side:
    return Side(qualified_name, cardinality)


def to_side(qualified_name: str, cardinality: Optional[str] = None) -> Side:
    return Side(qualified_name, cardinality)


@dataclass(frozen=True)
class Reference:
    """A relationship between two qualified type names.

    Equality and hashing consider ``from_``, ``to`` and ``type`` only; two
    references that differ just in their notes are the same edge.
    """

    from_: Side
    type: str
    to: Side
    notes: Tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self):
        for label, side in (("from", self.from_), ("to", self.to)):
            if side is None:
                raise ValueError(f"Reference '{label}' side is required.")
            if not side.qualified_name:
                raise ValueError(f"Reference '{label}' side needs a qualified name.")
        if not self.type:
            raise ValueError("Reference notation is required.")

    def is_self_reference(self) -> bool:
        return self.from_.qualified_name == self.to.qualified_name

    def add_note(self, note: str) -> "Reference":
        return replace(self, notes=self.notes + (note,))

    def __str__(self) -> str:
        text = f"{self.from_.qualified_name} {self.type} {self.to.qualified_name}"
        if self.notes:
            text += ": " + "; ".join(self.notes)
        return text
