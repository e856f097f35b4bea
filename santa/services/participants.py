from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union


class ParticipantError(ValueError):
    pass


@dataclass(frozen=True)
class Participant:
    name: str
    exclusions: Tuple[str, ...] = field(default_factory=tuple)
    id: Any = None


ParticipantLike = Union[Participant, Mapping[str, Any]]


def normalize_exclusions(exclusions: Optional[Iterable[str]]) -> Tuple[str, ...]:
    """Strip names, drop blanks and repeats, keep first-seen order."""
    seen = []
    for name in exclusions or ():
        cleaned = name.strip()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return tuple(seen)


def as_participant(item: ParticipantLike) -> Participant:
    if isinstance(item, Participant):
        return item
    exclusions = item.get("exclusions") or ()
    if isinstance(exclusions, str):
        exclusions = (exclusions,)
    return Participant(
        name=item["name"],
        exclusions=tuple(exclusions),
        id=item.get("id"),
    )


def as_participants(items: Optional[Sequence[ParticipantLike]]) -> List[Participant]:
    if items is None:
        return []
    return [as_participant(item) for item in items]


def validate_participants(
    participants: Optional[Sequence[ParticipantLike]],
    max_exclusions: int,
    max_participants: Optional[int] = None,
) -> List[Participant]:
    group = as_participants(participants)
    if max_participants is not None and len(group) > max_participants:
        raise ParticipantError(
            f"Too many participants. Maximum allowed: {max_participants}"
        )

    names = set()
    cleaned = []
    for participant in group:
        name = participant.name.strip() if participant.name else ""
        if not name:
            raise ParticipantError("Every participant needs a name.")
        if name in names:
            raise ParticipantError(f"Duplicate participant name: {name}")
        names.add(name)

        exclusions = normalize_exclusions(participant.exclusions)
        if name in exclusions:
            raise ParticipantError(f"{name} cannot exclude themselves.")
        if len(exclusions) > max_exclusions:
            raise ParticipantError(
                f"Too many exclusions. Maximum allowed: {max_exclusions}"
            )
        cleaned.append(replace(participant, name=name, exclusions=exclusions))

    return cleaned
