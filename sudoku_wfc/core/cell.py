"""Cell value states: a settled digit or a list of remaining candidates."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Fixed:
    """A cell whose value is settled."""
    value: int

    def is_certain(self) -> bool:
        return True

    def as_sequence(self) -> Tuple[int, ...]:
        return (self.value,)

    def __len__(self) -> int:
        return 1


@dataclass(frozen=True)
class Candidates:
    """
    A cell that is still undecided.

    Holds the values that remain possible, in the order they were
    generated. An empty tuple means either "not computed yet" (right after
    loading or a reset) or a contradiction (after recomputation).
    """
    values: Tuple[int, ...] = ()

    def __post_init__(self):
        # Accept any iterable but store an immutable tuple
        values = tuple(self.values)
        if len(set(values)) != len(values):
            raise ValueError(f"Candidates must be distinct, got {values}")
        object.__setattr__(self, "values", values)

    def is_certain(self) -> bool:
        return False

    def as_sequence(self) -> Tuple[int, ...]:
        return self.values

    def __len__(self) -> int:
        return len(self.values)


CellDomain = Union[Fixed, Candidates]


@dataclass
class Cell:
    """A board cell: its domain plus whether the puzzle supplied it."""
    domain: CellDomain
    is_static: bool = False

    def copy(self) -> Cell:
        # Domains are immutable, so sharing them between copies is safe
        return Cell(self.domain, self.is_static)
