from typing import Optional


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(DomainError):
    """Bad input value or illegal state transition, optionally naming the field."""

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message, 400)
        self.field = field


class NotFoundError(CustomBaseError):
    def __init__(self, message: str, *, resource_id: Optional[str] = None) -> None:
        super().__init__(message, 404)
        self.resource_id = resource_id


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class DispatchError(CustomBaseError):
    """Downstream delivery failed. The message never carries transport details."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 502)
