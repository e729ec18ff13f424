class ServiceError(Exception):
    """Base exception for service errors"""

    pass


class ValidationError(ServiceError):
    """Malformed or missing input"""

    pass


class InvalidRangeError(ValidationError):
    """Requested reporting window is out of bounds"""

    pass


class NotFoundError(ServiceError):
    """Tenant, person or task not found"""

    pass


class AccessDeniedError(ServiceError):
    """Resource belongs to another tenant"""

    pass


class ConflictError(ServiceError):
    """Uniqueness violation that is not an expected race"""

    pass


class AuthenticationError(ServiceError):
    """Credentials did not verify"""

    pass
