"""
Domain errors.

Services raise these; main.py maps each one to an HTTP response with
the same {"detail": ...} body FastAPI uses for HTTPException.
"""


class PortalError(Exception):
    status_code = 500
    headers = None

    def __init__(self, message: str = "Server error"):
        super().__init__(message)
        self.message = message


class InvalidCredentialsError(PortalError):
    status_code = 400

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class ConflictError(PortalError):
    status_code = 400


class AuthenticationError(PortalError):
    status_code = 401
    headers = {"WWW-Authenticate": "Bearer"}

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class PermissionDeniedError(PortalError):
    status_code = 403

    def __init__(self, message: str = "Not allowed to act on this account"):
        super().__init__(message)


class NotFoundError(PortalError):
    status_code = 404


class StorageUnavailableError(PortalError):
    """Document store unreachable. Safe for the client to retry."""
    status_code = 503
    headers = {"Retry-After": "5"}

    def __init__(self, message: str = "Storage temporarily unavailable"):
        super().__init__(message)
