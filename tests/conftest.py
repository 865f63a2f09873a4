"""Shared test fixtures: an in-memory org behind the DataGateway protocol."""

from __future__ import annotations

import re
from typing import Any

import pytest

from commerce_ext.errors import GatewayError
from commerce_ext.extension.registrar import ExtensionRegistrar
from commerce_ext.gateway.base import CreateResult, QueryResult
from commerce_ext.messages import Messages
from commerce_ext.records import RegistrationRequest

_APEX_CLASS = re.compile(r"FROM ApexClass WHERE Name='(?P<value>[^']*)'")
_PICKLIST = re.compile(r"FROM PicklistValueInfo WHERE Value='(?P<value>[^']*)'")
_REGISTERED = re.compile(r"FROM RegisteredExternalService WHERE DeveloperName='(?P<value>[^']*)'")


class FakeOrgGateway:
    """In-memory org answering the statements the registration steps issue.

    ``calls`` records every (operation, target) pair for ordering assertions.
    """

    def __init__(
        self,
        apex_classes: dict[str, str] | None = None,
        extension_points: set[str] | None = None,
    ) -> None:
        self.apex_classes = dict(apex_classes or {})
        self.extension_points = set(extension_points or set())
        self.records: list[dict[str, Any]] = []
        self.calls: list[tuple[str, str]] = []
        self.fail_on: dict[str, Exception] = {}
        self.hide_records = False
        self._next_id = 1

    def query(self, statement: str, identity: str) -> QueryResult:
        if match := _APEX_CLASS.search(statement):
            self._record_call("query", "ApexClass")
            name = match.group("value")
            rows = [{"Id": self.apex_classes[name]}] if name in self.apex_classes else []
        elif match := _PICKLIST.search(statement):
            self._record_call("query", "PicklistValueInfo")
            value = match.group("value")
            rows = [{"Value": value}] if value in self.extension_points else []
        elif match := _REGISTERED.search(statement):
            self._record_call("query", "RegisteredExternalService")
            name = match.group("value")
            rows = [] if self.hide_records else [r for r in self.records if r["DeveloperName"] == name]
        else:
            raise AssertionError(f"Unexpected statement: {statement}")
        return QueryResult(totalSize=len(rows), records=rows)

    def create(self, object_type: str, fields: dict[str, str], identity: str) -> CreateResult:
        self._record_call("create", object_type)
        if any(r["DeveloperName"] == fields["DeveloperName"] for r in self.records):
            return CreateResult(
                success=False,
                errors=["DUPLICATE_DEVELOPER_NAME: The name you entered is already in use."],
            )
        record_id = f"0ZE{self._next_id:015d}"
        self._next_id += 1
        self.records.append(
            {
                "attributes": {"type": object_type},
                "Id": record_id,
                "ConfigUrl": None,
                "DocumentationUrl": None,
                "Language": "en_US",
                "NamespacePrefix": None,
                **fields,
            }
        )
        return CreateResult(id=record_id, success=True)

    def _record_call(self, operation: str, target: str) -> None:
        self.calls.append((operation, target))
        key = f"{operation}:{target}"
        if key in self.fail_on:
            raise self.fail_on[key]


@pytest.fixture
def messages() -> Messages:
    """The bundled message catalogue."""
    return Messages.load()


@pytest.fixture
def org() -> FakeOrgGateway:
    """An org with one Apex class and one extension point."""
    return FakeOrgGateway(
        apex_classes={"MyHandler": "01p000000000AAA"},
        extension_points={"Checkout.PaymentGateway"},
    )


@pytest.fixture
def registrar(org: FakeOrgGateway, messages: Messages) -> ExtensionRegistrar:
    return ExtensionRegistrar(org, messages=messages)


@pytest.fixture
def request_factory() -> Any:
    """Build a RegistrationRequest for the default org, overriding any field."""

    def factory(**overrides: Any) -> RegistrationRequest:
        values: dict[str, Any] = {
            "registered_name": "MyGateway",
            "extension_point_name": "Checkout.PaymentGateway",
            "apex_class_name": "MyHandler",
            "acting_identity": "admin@store.example",
        }
        values.update(overrides)
        return RegistrationRequest(**values)

    return factory


@pytest.fixture
def transport_error() -> GatewayError:
    return GatewayError("Connection reset by peer")
