"""HTTP error types shared by the API and service layers."""

from typing import Any

from fastapi import HTTPException, status


class ValidationError(HTTPException):
    """Malformed or missing input (400)."""

    def __init__(self, detail: Any = "Invalid request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class AuthenticationError(HTTPException):
    """Missing, invalid or expired token (401)."""

    def __init__(self, detail: str = "Token is not valid"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class AuthorizationError(HTTPException):
    """Authenticated caller does not own the resource (401)."""

    def __init__(self, detail: str = "User not authorized"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class NotFoundError(HTTPException):
    """Resource id does not resolve (404)."""

    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
