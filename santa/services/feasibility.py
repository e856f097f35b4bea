from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from santa.services.graph import (
    Compatibility,
    build_compatibility,
    giver_degrees,
    receiver_degrees,
)
from santa.services.participants import ParticipantLike, as_participants

REASON_TOO_FEW = "Need at least 2 participants"
REASON_VALID = "Valid assignment exists"
REASON_UNSATISFIABLE = (
    "The combination of exclusions makes it impossible to find a valid assignment. "
    "Some participants need to remove exclusions."
)


@dataclass(frozen=True)
class SolvableResult:
    possible: bool
    reason: str


def find_assignment(
    compatible: Compatibility,
    order: Sequence[int],
    rng: Optional[random.Random] = None,
) -> Optional[List[int]]:
    # assignment[giver] = receiver; None means the search was exhausted.
    # Recursion depth equals the group size.
    n = len(compatible)
    assignment = [-1] * n
    used = [False] * n

    def backtrack(position: int) -> bool:
        if position == len(order):
            return True

        giver = order[position]
        choices = [r for r in range(n) if compatible[giver][r] and not used[r]]
        if rng is not None:
            rng.shuffle(choices)
        for receiver in choices:
            assignment[giver] = receiver
            used[receiver] = True
            if backtrack(position + 1):
                return True
            used[receiver] = False
            assignment[giver] = -1
        return False

    if backtrack(0):
        return assignment
    return None


def check_solvable(participants: Optional[Sequence[ParticipantLike]]) -> SolvableResult:
    group = as_participants(participants)
    if len(group) < 2:
        return SolvableResult(False, REASON_TOO_FEW)

    compatible = build_compatibility(group)

    for participant, degree in zip(group, giver_degrees(compatible)):
        if degree == 0:
            return SolvableResult(
                False,
                f"{participant.name} has excluded too many people and has no one to gift to",
            )

    for participant, degree in zip(group, receiver_degrees(compatible)):
        if degree == 0:
            return SolvableResult(
                False,
                f"{participant.name} is excluded by too many people and cannot receive a gift",
            )

    if find_assignment(compatible, range(len(group))) is not None:
        return SolvableResult(True, REASON_VALID)
    return SolvableResult(False, REASON_UNSATISFIABLE)
