"""Read-back of a registration record into its public projection."""

from __future__ import annotations

from commerce_ext.extension.writer import REGISTRATION_OBJECT
from commerce_ext.gateway.base import DataGateway
from commerce_ext.records import RegisteredExtension, RegistrationResult
from commerce_ext.soql import quote

__all__ = ["RegistrationProjector", "PROJECTION_FIELDS"]

PROJECTION_FIELDS = (
    "Id",
    "ConfigUrl",
    "DeveloperName",
    "DocumentationUrl",
    "ExtensionPointName",
    "ExternalServiceProviderId",
    "ExternalServiceProviderType",
    "Language",
    "MasterLabel",
    "NamespacePrefix",
)


class RegistrationProjector:
    """Queries a registration by developer name."""

    def __init__(self, gateway: DataGateway) -> None:
        self._gateway = gateway

    def fetch(self, registered_name: str, identity: str) -> RegisteredExtension | None:
        """Return the first record named ``registered_name``, or None.

        Extra rows are ignored; the name is expected to be unique but this
        is not asserted.
        """
        statement = (
            f"SELECT {','.join(PROJECTION_FIELDS)} FROM {REGISTRATION_OBJECT} "
            f"WHERE DeveloperName={quote(registered_name)}"
        )
        result = self._gateway.query(statement, identity)
        if not result.records:
            return None
        return RegisteredExtension.model_validate(result.records[0])

    def project(self, registered_name: str, identity: str) -> RegistrationResult | None:
        record = self.fetch(registered_name, identity)
        if record is None:
            return None
        return RegistrationResult.from_record(record)
