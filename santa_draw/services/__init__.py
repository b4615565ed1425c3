from santa_draw.services.assignment import (
    AssignmentError,
    BadConstraintError,
    GivingUpError,
    Group,
)
from santa_draw.services.constraints import DirectedExclusion, MutualExclusion
from santa_draw.services.matrix import EligibilityMatrix, UnknownParticipantError

__all__ = [
    "AssignmentError",
    "BadConstraintError",
    "GivingUpError",
    "Group",
    "DirectedExclusion",
    "MutualExclusion",
    "EligibilityMatrix",
    "UnknownParticipantError",
]
