from __future__ import annotations

from typing import List, Optional, Sequence

from santa.services.errors import AssignmentError
from santa.services.participants import Participant, ParticipantLike, as_participants

Compatibility = List[List[bool]]


def build_compatibility(participants: Optional[Sequence[ParticipantLike]]) -> Compatibility:
    """Return ``compatible[giver][receiver]``; the diagonal is always False."""
    if participants is None:
        raise AssignmentError("A participant list is required.")

    group: List[Participant] = as_participants(participants)
    compatible: Compatibility = []
    for i, giver in enumerate(group):
        excluded = set(giver.exclusions)
        compatible.append(
            [i != j and receiver.name not in excluded for j, receiver in enumerate(group)]
        )
    return compatible


def giver_degrees(compatible: Compatibility) -> List[int]:
    return [sum(row) for row in compatible]


def receiver_degrees(compatible: Compatibility) -> List[int]:
    return [sum(column) for column in zip(*compatible)]
