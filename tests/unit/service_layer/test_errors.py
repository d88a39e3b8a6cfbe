"""Unit tests for service layer errors."""

from userreg.service_layer.errors import ServiceError, UserDaoNotConfiguredError


class TestUserDaoNotConfiguredError:
    """Tests for UserDaoNotConfiguredError."""

    @staticmethod
    def test_attributes() -> None:
        """The error records the operation that needed the collaborator."""
        error = UserDaoNotConfiguredError("delete")
        assert error.operation == "delete"

    @staticmethod
    def test_error_message() -> None:
        """The message names the operation."""
        error = UserDaoNotConfiguredError("delete")
        assert str(error) == "UserService.delete() requires a UserDao collaborator."

    @staticmethod
    def test_hierarchy() -> None:
        """It is both a ServiceError and a RuntimeError."""
        error = UserDaoNotConfiguredError("delete")
        assert isinstance(error, ServiceError)
        assert isinstance(error, RuntimeError)
