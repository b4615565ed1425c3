from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from santa_draw.services.matrix import EligibilityMatrix


@dataclass(frozen=True)
class MutualExclusion:
    """``a`` and ``b`` may not draw each other."""

    a: str
    b: str


@dataclass(frozen=True)
class DirectedExclusion:
    """``giver`` may not draw ``receiver``; the reverse stays allowed."""

    giver: str
    receiver: str


Constraint = Union[MutualExclusion, DirectedExclusion]


def apply_constraint(matrix: EligibilityMatrix, constraint: Constraint) -> None:
    # Only ever clears cells, so the order constraints are applied in does not matter.
    match constraint:
        case MutualExclusion(a=a, b=b):
            matrix.set(a, b, False)
            matrix.set(b, a, False)
        case DirectedExclusion(giver=giver, receiver=receiver):
            matrix.set(giver, receiver, False)
        case _:
            raise TypeError(f"Unsupported constraint: {constraint!r}")
