"""Extension point name validation against the remote picklist."""

from __future__ import annotations

from commerce_ext.errors import InvalidExtensionPointError
from commerce_ext.gateway.base import DataGateway
from commerce_ext.messages import Messages
from commerce_ext.soql import quote

__all__ = ["ExtensionPointValidator", "EXTENSION_POINT_FIELD"]

EXTENSION_POINT_FIELD = "RegisteredExternalService.ExtensionPointName"


class ExtensionPointValidator:
    """Checks a name against the ExtensionPointName picklist on every call."""

    def __init__(self, gateway: DataGateway, messages: Messages) -> None:
        self._gateway = gateway
        self._messages = messages

    def validate(self, extension_point_name: str, identity: str) -> None:
        """Raise InvalidExtensionPointError unless the name is a picklist value.

        Gateway failures propagate unchanged.
        """
        statement = (
            f"SELECT Value FROM PicklistValueInfo WHERE Value={quote(extension_point_name)} "
            f"AND EntityParticle.DurableId = {quote(EXTENSION_POINT_FIELD)} LIMIT 1"
        )
        result = self._gateway.query(statement, identity)
        if result.total_size == 0:
            raise InvalidExtensionPointError(
                extension_point_name,
                message=self._messages.get("extension.register.errEPN", extension_point_name, default=None),
            )
