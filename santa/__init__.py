from santa.core import Settings, configure
from santa.services import (
    AssignmentError,
    ParticipantError,
    check_solvable,
    draw,
    generate_assignment,
    get_constraint_stats,
)

__all__ = [
    "AssignmentError",
    "ParticipantError",
    "Settings",
    "configure",
    "check_solvable",
    "draw",
    "generate_assignment",
    "get_constraint_stats",
]
