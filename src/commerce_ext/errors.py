"""Error hierarchy for extension registration."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "RegistrationError",
    "ConfigNotFoundError",
    "ConfigError",
    "MessageNotFoundError",
    "GatewayError",
    "ClassNotFoundError",
    "InvalidExtensionPointError",
    "MissingNameError",
    "RegistrationConflictError",
    "RegistrationWriteError",
    "ProjectionMissingError",
    "ErrorCodes",
]


class RegistrationError(Exception):
    """Base error for all commerce_ext errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
        trace_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.trace_id = trace_id
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(RegistrationError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(RegistrationError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class MessageNotFoundError(RegistrationError):
    """Raised when a message key is missing from the catalogue."""

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(
            code="MESSAGE_NOT_FOUND",
            message=f"Message not found: {key}",
            details={"key": key},
            **kwargs,
        )


class GatewayError(RegistrationError):
    """Raised when the remote data gateway cannot complete a call."""

    def __init__(self, message: str, statement: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="GATEWAY_ERROR",
            message=message,
            details={"statement": statement},
            **kwargs,
        )


class ClassNotFoundError(RegistrationError):
    """Raised when an Apex class name does not resolve to an id."""

    def __init__(
        self,
        class_name: str,
        remote_message: str | None = None,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        default = f"Apex class '{class_name}' not found"
        if remote_message:
            default = f"{default}: {remote_message}"
        super().__init__(
            code="CLASS_NOT_FOUND",
            message=message or default,
            details={"class_name": class_name, "remote_message": remote_message},
            **kwargs,
        )

    @property
    def class_name(self) -> str:
        """The Apex class name that failed to resolve."""
        return self.details["class_name"]


class InvalidExtensionPointError(RegistrationError):
    """Raised when an extension point name is not a valid picklist value."""

    def __init__(self, extension_point_name: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_EXTENSION_POINT",
            message=message or f"Invalid extension point name: {extension_point_name}",
            details={"extension_point_name": extension_point_name},
            **kwargs,
        )

    @property
    def extension_point_name(self) -> str:
        """The rejected extension point name."""
        return self.details["extension_point_name"]


class MissingNameError(RegistrationError):
    """Raised when no registered extension name was supplied."""

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="MISSING_NAME",
            message=message or "Registered extension name is required",
            **kwargs,
        )


class RegistrationConflictError(RegistrationError):
    """Raised when the remote store rejects the registration record."""

    def __init__(
        self,
        registered_name: str,
        remote_message: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            code="REGISTRATION_CONFLICT",
            message=message or f"Could not register extension '{registered_name}': {remote_message}",
            details={"registered_name": registered_name, "remote_message": remote_message},
            **kwargs,
        )

    @property
    def registered_name(self) -> str:
        """The name that was rejected."""
        return self.details["registered_name"]


class RegistrationWriteError(RegistrationError):
    """Raised when the registration create call fails in transport."""

    def __init__(
        self,
        registered_name: str,
        remote_message: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            code="REGISTRATION_WRITE_ERROR",
            message=message or f"Failed to write registration '{registered_name}': {remote_message}",
            details={"registered_name": registered_name, "remote_message": remote_message},
            **kwargs,
        )

    @property
    def registered_name(self) -> str:
        """The name whose write failed."""
        return self.details["registered_name"]


class ProjectionMissingError(RegistrationError):
    """Raised when a just-written registration cannot be read back.

    The record may exist remotely; ``record_id`` is the id returned by the
    create call and is kept for reconciliation.
    """

    def __init__(
        self,
        registered_name: str,
        record_id: str | None = None,
        remote_message: str | None = None,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            code="PROJECTION_MISSING",
            message=message or f"Registration '{registered_name}' was written but could not be read back",
            details={
                "registered_name": registered_name,
                "record_id": record_id,
                "remote_message": remote_message,
            },
            **kwargs,
        )

    @property
    def registered_name(self) -> str:
        """The name that was written."""
        return self.details["registered_name"]

    @property
    def record_id(self) -> str | None:
        """The id returned by the create call, if any."""
        return self.details["record_id"]


class ErrorCodes:
    """All error codes as constants.

    Example:
        if error.code == ErrorCodes.REGISTRATION_CONFLICT:
            handle_conflict()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    MESSAGE_NOT_FOUND = "MESSAGE_NOT_FOUND"
    GATEWAY_ERROR = "GATEWAY_ERROR"
    CLASS_NOT_FOUND = "CLASS_NOT_FOUND"
    INVALID_EXTENSION_POINT = "INVALID_EXTENSION_POINT"
    MISSING_NAME = "MISSING_NAME"
    REGISTRATION_CONFLICT = "REGISTRATION_CONFLICT"
    REGISTRATION_WRITE_ERROR = "REGISTRATION_WRITE_ERROR"
    PROJECTION_MISSING = "PROJECTION_MISSING"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
