"""Exceptions for service layer operations."""


class ServiceError(Exception):
    """Base class for service layer errors."""


class UserDaoNotConfiguredError(ServiceError, RuntimeError):
    """Raised when an operation needs a UserDao but none was injected.

    Attributes:
        operation (str): Name of the operation that needed the collaborator.
    """

    def __init__(self, operation: str) -> None:
        super().__init__(f"UserService.{operation}() requires a UserDao collaborator.")
        self.operation = operation
