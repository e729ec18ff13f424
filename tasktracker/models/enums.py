from enum import Enum


class CompletionStatus(str, Enum):
    COMPLETED = "completed"
    EXCLUDED = "excluded"

