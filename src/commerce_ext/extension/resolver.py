"""Apex class lookup by name."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from commerce_ext.errors import ClassNotFoundError, GatewayError
from commerce_ext.gateway.base import DataGateway
from commerce_ext.messages import Messages
from commerce_ext.records import ApexClassRef
from commerce_ext.soql import quote

__all__ = ["ApexClassResolver"]

_logger = logging.getLogger(__name__)


class ApexClassResolver:
    """Maps an Apex class name to its id as seen by the acting identity."""

    def __init__(self, gateway: DataGateway, messages: Messages) -> None:
        self._gateway = gateway
        self._messages = messages

    def resolve(self, class_name: str, identity: str) -> ApexClassRef:
        """Return the class reference for ``class_name``.

        Raises:
            ClassNotFoundError: If the query fails, returns no row, or the
                row carries no ``Id``.
        """
        statement = f"SELECT Id FROM ApexClass WHERE Name={quote(class_name)} LIMIT 1"
        try:
            result = self._gateway.query(statement, identity)
        except GatewayError as exc:
            raise self._not_found(class_name, exc.message, exc) from exc
        except ValidationError as exc:
            raise self._not_found(class_name, f"Unreadable ApexClass result: {exc}", exc) from exc

        class_id = result.records[0].get("Id") if result.records else None
        if not class_id or not isinstance(class_id, str):
            raise self._not_found(class_name, None, None)

        _logger.debug("Resolved Apex class %s to %s", class_name, class_id)
        return ApexClassRef(id=class_id, name=class_name)

    def _not_found(
        self, class_name: str, remote_message: str | None, cause: Exception | None
    ) -> ClassNotFoundError:
        message = self._messages.get(
            "extension.register.errApexClass",
            class_name,
            "\n" if remote_message else "",
            remote_message or "",
            default=None,
        )
        return ClassNotFoundError(class_name, remote_message, message=message, cause=cause)
