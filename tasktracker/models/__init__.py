from .tenant import Tenant
from .person import Person
from .task import Task
from .task_completion import TaskCompletion


__all__ = [
    "Tenant",
    "Person",
    "Task",
    "TaskCompletion",
]
