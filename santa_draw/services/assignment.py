from __future__ import annotations

import random
from typing import Dict, List, Optional, Tuple

from loguru import logger

from santa_draw.services.constraints import (
    Constraint,
    DirectedExclusion,
    MutualExclusion,
    apply_constraint,
)
from santa_draw.services.matrix import EligibilityMatrix, UnknownParticipantError

DEFAULT_MAX_ATTEMPTS = 1000

Assignment = List[Tuple[str, str]]


class AssignmentError(RuntimeError):
    pass


class BadConstraintError(AssignmentError):
    def __init__(self, name: str) -> None:
        super().__init__(f'Unknown person "{name}"')
        self.name = name


class GivingUpError(AssignmentError):
    def __init__(self, attempts: int) -> None:
        super().__init__(
            f"Could not find assignments satisfying all constraints after {attempts} attempts."
        )
        self.attempts = attempts


class _DeadEnd(Exception):
    pass


class Group:
    """A group of people drawing names from a basket.

    Names are collected with :meth:`add`, exclusions with :meth:`exclude` and
    :meth:`exclude_pair`. Exclusions may mention names that were never added;
    they are only checked when :meth:`assign` runs.

    Each attempt shuffles the people, builds a fresh eligibility matrix,
    applies all exclusions and lets everyone draw in turn. An attempt where
    somebody is left with an empty basket is thrown away entirely and the
    next one starts from scratch, up to ``max_attempts`` times.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts
        # dict keeps insertion order, so a seeded rng gives reproducible draws
        self._people: Dict[str, None] = {}
        self._constraints: List[Constraint] = []

    @property
    def participants(self) -> Tuple[str, ...]:
        return tuple(self._people)

    @property
    def constraints(self) -> Tuple[Constraint, ...]:
        return tuple(self._constraints)

    def __len__(self) -> int:
        return len(self._people)

    def add(self, name: str) -> None:
        self._people[name] = None

    def contains_name(self, name: str) -> bool:
        return name in self._people

    def exclude(self, giver: str, receiver: str) -> None:
        """Make sure ``giver`` does not have to give ``receiver`` a gift."""
        self._constraints.append(DirectedExclusion(giver, receiver))

    def exclude_pair(self, a: str, b: str) -> None:
        """Make sure ``a`` and ``b`` don't have to give each other gifts."""
        self._constraints.append(MutualExclusion(a, b))

    def _build_matrix(self, people: List[str]) -> EligibilityMatrix:
        matrix = EligibilityMatrix(people)
        for constraint in self._constraints:
            try:
                apply_constraint(matrix, constraint)
            except UnknownParticipantError as exc:
                logger.bind(constraint=constraint).warning(
                    "Constraint references unknown person {name}", name=exc.name
                )
                raise BadConstraintError(exc.name) from exc
        return matrix

    def _draw(self, people: List[str], matrix: EligibilityMatrix) -> Assignment:
        assignments: Assignment = []
        for person in people:
            logger.trace("Drawing recipient for {person}", person=person)
            basket = matrix.eligible_receivers(person)
            logger.trace("Options: {basket}", basket=basket)
            if not basket:
                raise _DeadEnd(person)
            choice = self.rng.choice(basket)
            logger.trace("Picked {choice}!", choice=choice)
            matrix.clear_column(choice)
            assignments.append((person, choice))
        return assignments

    def assign(self) -> Assignment:
        """Run the name assignment.

        Returns ``(giver, receiver)`` pairs in drawing order. Raises
        ``BadConstraintError`` if an exclusion names someone outside the
        group and ``GivingUpError`` once every attempt has dead-ended.
        """
        people = list(self._people)

        for attempt in range(1, self.max_attempts + 1):
            self.rng.shuffle(people)
            matrix = self._build_matrix(people)
            try:
                assignments = self._draw(people, matrix)
            except _DeadEnd as dead_end:
                logger.debug(
                    "Attempt {attempt} failed, {person} has nobody left to draw. Retrying...",
                    attempt=attempt,
                    person=dead_end.args[0],
                )
                continue
            logger.debug(
                "Assigned {count} people after {attempt} attempt(s)",
                count=len(assignments),
                attempt=attempt,
            )
            return assignments

        logger.warning("Giving up after {attempts} attempts", attempts=self.max_attempts)
        raise GivingUpError(self.max_attempts)

    def __repr__(self) -> str:
        return f"<Group(participants={list(self._people)}, constraints={len(self._constraints)})>"
