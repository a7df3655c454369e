from .state import State
from .task import TaskHandle

__all__ = (
    "State",
    "TaskHandle",
)
