"""Data classes for family tree entities and layout placements."""

from dataclasses import dataclass, field
from enum import Enum, Flag


class Sex(str, Enum):
    F = "F"  # female
    M = "M"  # male
    U = "U"  # unknown


class RelType(str, Enum):
    MARRIED = "MARRIED"
    PARENT = "PARENT"


@dataclass(frozen=True)
class Relation:
    kind: RelType
    from_id: int  # parent for PARENT
    to_id: int  # child for PARENT

    def other(self, person_id: int) -> int:
        """Return the endpoint on the far side of `person_id`."""
        return self.to_id if self.from_id == person_id else self.from_id


@dataclass
class Person:
    name: str
    sex: Sex = Sex.U
    rels: list[Relation] = field(default_factory=list)
    id: int | None = None  # assigned by PersonStore.add


@dataclass
class FreeSlot:
    """A reclaimed store slot, linking to the next free slot or None."""

    next_free: int | None


class LayerKnowledge(Flag):
    """Which coordinates of a Layer were already fixed when it was created."""

    KNOWN_COL = 1
    KNOWN_ROW = 2
    KNOWN_BOTH = KNOWN_COL | KNOWN_ROW


@dataclass(frozen=True)
class Layer:
    """
    Placement of a person on the layout grid.

    The start person is always on (0, 0). Spouses share a row, children sit
    one row below their parent and parents one row above their child.
    """

    row: int
    col: int
    person_id: int
    known: LayerKnowledge = LayerKnowledge.KNOWN_BOTH


@dataclass
class MinMax:
    """Nearest free columns on either side of a row's claimed span."""

    min: int
    max: int
