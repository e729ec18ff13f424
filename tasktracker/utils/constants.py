class ResponseMessages:
    """Standard API response messages"""

    SUCCESS = "Success"
    CREATED = "Created successfully"

    TENANT_CREATED = "Account created successfully"
    PASSWORD_UPDATED = "Password updated successfully"
    PERSON_CREATED = "Person created successfully"
    PERSON_UPDATED = "Person updated successfully"
    GOAL_UPDATED = "Point goal updated successfully"
    TASK_CREATED = "Task created successfully"
    TASK_UPDATED = "Task updated successfully"
    TASKS_REORDERED = "Tasks reordered successfully"
    COMPLETION_TOGGLED = "Task completion updated"
    TASK_RETIRED = "One-off task completed and removed"


class AppConstants:
    # Validation Limits
    MIN_PASSWORD_LENGTH = 4
    MAX_NAME_LENGTH = 100
    MAX_TITLE_LENGTH = 200
    MAX_DESCRIPTION_LENGTH = 1000
    MAX_COLOR_LENGTH = 32

    # Reporting
    MIN_REPORT_YEAR = 1970
    MAX_REPORT_YEAR = 9999

    ADMIN_ACCOUNT_NAME = "admin"


class ErrorCodes:
    VALIDATION_ERROR = "VALIDATION_ERROR"
