from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from santa.services.participants import ParticipantLike, as_participants


@dataclass(frozen=True)
class ParticipantStats:
    name: str
    exclusions: int
    available_recipients: int
    constraint_level: float


@dataclass(frozen=True)
class ConstraintStats:
    total_participants: int
    participants: List[ParticipantStats]


def get_constraint_stats(participants: Optional[Sequence[ParticipantLike]]) -> ConstraintStats:
    group = as_participants(participants)
    n = len(group)
    max_possible = n - 1
    names = {participant.name for participant in group}

    stats = []
    for participant in group:
        # Only exclusions naming another member count.
        excluded = set(participant.exclusions) & (names - {participant.name})
        exclusion_count = len(excluded)
        level = exclusion_count / max_possible if max_possible > 0 else 0.0
        stats.append(
            ParticipantStats(
                name=participant.name,
                exclusions=exclusion_count,
                available_recipients=max(max_possible - exclusion_count, 0),
                constraint_level=level,
            )
        )

    stats.sort(key=lambda item: item.constraint_level, reverse=True)
    return ConstraintStats(total_participants=n, participants=stats)
