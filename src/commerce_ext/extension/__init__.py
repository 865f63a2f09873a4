"""Extension point registration steps and the registrar that sequences them."""

from commerce_ext.extension.projector import RegistrationProjector
from commerce_ext.extension.registrar import ExtensionRegistrar, RegistrationOutcome, RegistrationState
from commerce_ext.extension.resolver import ApexClassResolver
from commerce_ext.extension.validator import ExtensionPointValidator
from commerce_ext.extension.writer import RegistrationWriter

__all__ = [
    "ExtensionRegistrar",
    "RegistrationOutcome",
    "RegistrationState",
    "ApexClassResolver",
    "ExtensionPointValidator",
    "RegistrationWriter",
    "RegistrationProjector",
]
