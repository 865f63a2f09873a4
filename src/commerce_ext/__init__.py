"""commerce_ext - Register Apex classes as commerce extension point implementations."""

from __future__ import annotations

# Core
from commerce_ext.context import Context
from commerce_ext.extension import (
    ApexClassResolver,
    ExtensionPointValidator,
    ExtensionRegistrar,
    RegistrationOutcome,
    RegistrationProjector,
    RegistrationState,
    RegistrationWriter,
)

# Records
from commerce_ext.records import (
    ApexClassRef,
    RegisteredExtension,
    RegistrationRequest,
    RegistrationResult,
)

# Gateway
from commerce_ext.gateway import CreateResult, DataGateway, QueryResult, SfdxGateway

# Config and messages
from commerce_ext.config import Config
from commerce_ext.messages import Messages

# Errors
from commerce_ext.errors import (
    ClassNotFoundError,
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    GatewayError,
    InvalidExtensionPointError,
    MessageNotFoundError,
    MissingNameError,
    ProjectionMissingError,
    RegistrationConflictError,
    RegistrationError,
    RegistrationWriteError,
)

# Observers
from commerce_ext.observers import LoggingObserver, StepObserver

__version__ = "0.1.0"

__all__ = [
    # Core
    "Context",
    "ExtensionRegistrar",
    "RegistrationOutcome",
    "RegistrationState",
    "ApexClassResolver",
    "ExtensionPointValidator",
    "RegistrationWriter",
    "RegistrationProjector",
    # Records
    "RegistrationRequest",
    "ApexClassRef",
    "RegisteredExtension",
    "RegistrationResult",
    # Gateway
    "DataGateway",
    "QueryResult",
    "CreateResult",
    "SfdxGateway",
    # Config and messages
    "Config",
    "Messages",
    # Errors
    "ErrorCodes",
    "RegistrationError",
    "ConfigError",
    "ConfigNotFoundError",
    "MessageNotFoundError",
    "GatewayError",
    "ClassNotFoundError",
    "InvalidExtensionPointError",
    "MissingNameError",
    "RegistrationConflictError",
    "RegistrationWriteError",
    "ProjectionMissingError",
    # Observers
    "StepObserver",
    "LoggingObserver",
]
