"""
Error taxonomy.

Each domain failure maps to exactly one HTTP status. They subclass
HTTPException so services and routes raise them directly and FastAPI
renders {"detail": ...} without extra plumbing.
"""

from fastapi import HTTPException, status


class ValidationError(HTTPException):
    """Missing or malformed input."""

    def __init__(self, detail: str = "Invalid input"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ConflictError(HTTPException):
    """Uniqueness violation. Reported as 400 like the rest of the client errors."""

    def __init__(self, detail: str = "Email already in use."):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class AuthError(HTTPException):
    """Bad credentials. Same message whether the email or the password was wrong."""

    def __init__(self, detail: str = "Invalid credentials."):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class FileTooLargeError(HTTPException):
    def __init__(self, max_mb: int):
        super().__init__(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File too large. Maximum size: {max_mb}MB"
        )


class StorageError(HTTPException):
    """Blob or document store failure."""

    def __init__(self, detail: str = "Storage error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
