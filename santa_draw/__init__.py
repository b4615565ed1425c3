from santa_draw.services import AssignmentError, BadConstraintError, GivingUpError, Group

__version__ = "0.1.0"

__all__ = ["AssignmentError", "BadConstraintError", "GivingUpError", "Group", "__version__"]
