"""Typed records exchanged between the registration steps."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "PROVIDER_TYPE_EXTENSION",
    "RegistrationRequest",
    "ApexClassRef",
    "RegisteredExtension",
    "RegistrationResult",
]

PROVIDER_TYPE_EXTENSION = "Extension"


class RegistrationRequest(BaseModel):
    """Inputs for one registration call.

    ``registered_name`` may be missing here; the registrar rejects it
    before anything is written.
    """

    registered_name: str | None = None
    extension_point_name: str
    apex_class_name: str
    apex_namespace: str | None = None
    acting_identity: str


class ApexClassRef(BaseModel):
    """An Apex class resolved by name."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class RegisteredExtension(BaseModel):
    """A RegisteredExternalService row as returned by a query."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str = Field(alias="Id")
    developer_name: str = Field(alias="DeveloperName")
    master_label: str | None = Field(default=None, alias="MasterLabel")
    extension_point_name: str = Field(alias="ExtensionPointName")
    external_service_provider_id: str = Field(alias="ExternalServiceProviderId")
    external_service_provider_type: str = Field(alias="ExternalServiceProviderType")
    config_url: str | None = Field(default=None, alias="ConfigUrl")
    documentation_url: str | None = Field(default=None, alias="DocumentationUrl")
    language: str | None = Field(default=None, alias="Language")
    namespace_prefix: str | None = Field(default=None, alias="NamespacePrefix")


class RegistrationResult(BaseModel):
    """Public projection of a registered extension."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    unique_extension_id: str = Field(alias="UniqueExtensionId")
    apex_class_id: str = Field(alias="ApexClassId")
    registered_extension_name: str = Field(alias="RegisteredExtensionName")
    extension_point_name: str = Field(alias="ExtensionPointName")
    external_service_provider_type: str = Field(alias="ExternalServiceProviderType")

    @classmethod
    def from_record(cls, record: RegisteredExtension) -> RegistrationResult:
        return cls(
            unique_extension_id=record.id,
            apex_class_id=record.external_service_provider_id,
            registered_extension_name=record.developer_name,
            extension_point_name=record.extension_point_name,
            external_service_provider_type=record.external_service_provider_type,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping keyed by public field names."""
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=4)
