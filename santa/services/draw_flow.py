from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from loguru import logger

from santa.core.config import Settings
from santa.services.assignment import (
    MAX_ATTEMPTS,
    AssignmentPair,
    generate_assignment,
    to_pairs,
)
from santa.services.errors import AssignmentError
from santa.services.feasibility import check_solvable, find_assignment
from santa.services.graph import build_compatibility
from santa.services.participants import ParticipantLike, as_participants, validate_participants


@dataclass(frozen=True)
class DrawResult:
    assignments: List[AssignmentPair]
    seed: int
    used_fallback: bool


def draw(
    participants: Optional[Sequence[ParticipantLike]],
    seed: Optional[int] = None,
    max_attempts: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> DrawResult:
    # Without settings there is no group-size cap; the searches recurse once
    # per participant, so hosts should pass settings for untrusted input.
    if settings is not None:
        group = validate_participants(
            participants,
            max_exclusions=settings.max_exclusions,
            max_participants=settings.max_participants,
        )
        if max_attempts is None:
            max_attempts = settings.max_attempts
    else:
        group = as_participants(participants)
    verdict = check_solvable(group)
    if not verdict.possible:
        logger.bind(participants=len(group)).info(
            "Draw rejected: {reason}", reason=verdict.reason
        )
        raise AssignmentError(verdict.reason)

    if seed is None:
        seed = random.randint(1, 2**31 - 1)
    if max_attempts is None:
        max_attempts = MAX_ATTEMPTS

    assignments = generate_assignment(
        group,
        seed=seed,
        max_attempts=max_attempts,
    )
    used_fallback = False
    if assignments is None:
        logger.bind(participants=len(group), seed=seed).warning(
            "Randomized generator exhausted, using deterministic search"
        )
        compatible = build_compatibility(group)
        assignment = find_assignment(compatible, range(len(group)))
        if assignment is None:
            raise AssignmentError("Failed to generate assignments with the given exclusions.")
        assignments = to_pairs(group, assignment)
        used_fallback = True

    logger.bind(participants=len(group), seed=seed).info("Assignments generated")
    return DrawResult(assignments=assignments, seed=seed, used_fallback=used_fallback)
