from santa.services.assignment import generate_assignment
from santa.services.diagnostics import get_constraint_stats
from santa.services.draw_flow import draw
from santa.services.errors import AssignmentError
from santa.services.feasibility import check_solvable
from santa.services.participants import ParticipantError

__all__ = [
    "AssignmentError",
    "ParticipantError",
    "check_solvable",
    "draw",
    "generate_assignment",
    "get_constraint_stats",
]
