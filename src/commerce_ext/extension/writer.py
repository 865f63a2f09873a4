"""Creation of RegisteredExternalService records."""

from __future__ import annotations

import logging

from commerce_ext.errors import GatewayError, RegistrationConflictError, RegistrationWriteError
from commerce_ext.gateway.base import DataGateway
from commerce_ext.messages import Messages
from commerce_ext.records import PROVIDER_TYPE_EXTENSION

__all__ = ["RegistrationWriter", "REGISTRATION_OBJECT"]

REGISTRATION_OBJECT = "RegisteredExternalService"

_logger = logging.getLogger(__name__)


class RegistrationWriter:
    """Creates the registration record.

    Name uniqueness is left to the remote store; a rejected create is
    reported as a conflict.
    """

    def __init__(self, gateway: DataGateway, messages: Messages) -> None:
        self._gateway = gateway
        self._messages = messages

    def write(
        self,
        registered_name: str,
        extension_point_name: str,
        apex_class_id: str,
        identity: str,
    ) -> str:
        """Create the record and return its id.

        Raises:
            RegistrationConflictError: If the remote store rejects the record.
            RegistrationWriteError: If the create call fails in transport.
        """
        fields = {
            "DeveloperName": registered_name,
            "MasterLabel": registered_name,
            "ExtensionPointName": extension_point_name,
            "ExternalServiceProviderId": apex_class_id,
            "ExternalServiceProviderType": PROVIDER_TYPE_EXTENSION,
        }
        try:
            result = self._gateway.create(REGISTRATION_OBJECT, fields, identity)
        except GatewayError as exc:
            raise RegistrationWriteError(
                registered_name,
                exc.message,
                message=self._messages.get("extension.register.writeError", registered_name, "\n", exc.message, default=None),
                cause=exc,
            ) from exc

        if not result.success:
            remote_message = result.error_message
            raise RegistrationConflictError(
                registered_name,
                remote_message,
                message=self._messages.get("extension.register.error", registered_name, "\n", remote_message, default=None),
            )

        _logger.info("Created %s %s for %s", REGISTRATION_OBJECT, result.id, registered_name)
        return result.id
