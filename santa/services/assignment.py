from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from loguru import logger

from santa.services.feasibility import find_assignment
from santa.services.graph import build_compatibility, giver_degrees
from santa.services.participants import Participant, ParticipantLike, as_participants

MAX_ATTEMPTS = 100


@dataclass(frozen=True)
class AssignmentPair:
    participant_id: Any
    giver_name: str
    assigned_to: str


def most_constrained_order(degrees: Sequence[int]) -> List[int]:
    # sorted() is stable, so equal degrees keep input order.
    return sorted(range(len(degrees)), key=lambda giver: degrees[giver])


def to_pairs(group: Sequence[Participant], assignment: Sequence[int]) -> List[AssignmentPair]:
    return [
        AssignmentPair(
            participant_id=participant.id,
            giver_name=participant.name,
            assigned_to=group[assignment[index]].name,
        )
        for index, participant in enumerate(group)
    ]


def generate_assignment(
    participants: Optional[Sequence[ParticipantLike]],
    seed: Optional[int] = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> Optional[List[AssignmentPair]]:
    group = as_participants(participants)
    if len(group) < 2:
        return None

    rng = random.Random(seed)
    compatible = build_compatibility(group)
    order = most_constrained_order(giver_degrees(compatible))

    for attempt in range(max_attempts):
        assignment = find_assignment(compatible, order, rng=rng)
        if assignment is not None:
            return to_pairs(group, assignment)
        logger.bind(attempt=attempt + 1, participants=len(group)).debug(
            "Randomized search found no assignment"
        )

    return None
