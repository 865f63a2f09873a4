"""DataGateway backed by the ``sfdx`` command-line executable."""

from __future__ import annotations

import json
import logging
import re
import subprocess
from typing import Any

from pydantic import ValidationError

from commerce_ext.config import Config
from commerce_ext.errors import GatewayError
from commerce_ext.gateway.base import CreateResult, QueryResult
from commerce_ext.soql import format_values

__all__ = ["SfdxGateway"]

_logger = logging.getLogger(__name__)

# Status codes the org returns when it refuses the record itself
_REJECTION_CODE = re.compile(
    r"\b(DUPLICATE_[A-Z_]+|FIELD_[A-Z_]+|REQUIRED_FIELD_MISSING|STRING_TOO_LONG"
    r"|INVALID_(?!SESSION_ID\b|AUTH_HEADER\b|LOGIN\b|GRANT\b)[A-Z_]+)"
)


class SfdxGateway:
    """Runs ``force:data`` commands and parses their ``--json`` output.

    Every call starts one process; nothing is cached between calls.
    """

    def __init__(self, executable: str = "sfdx", timeout: float = 120) -> None:
        self._executable = executable
        self._timeout = timeout

    @classmethod
    def from_config(cls, config: Config) -> SfdxGateway:
        return cls(
            executable=config.get("gateway.executable"),
            timeout=config.get("gateway.timeout"),
        )

    def query(self, statement: str, identity: str) -> QueryResult:
        payload = self._run(
            ["force:data:soql:query", "-q", statement, "-u", identity],
            statement,
        )
        if payload.get("status") != 0:
            raise GatewayError(_payload_message(payload), statement=statement)
        try:
            return QueryResult.model_validate(payload.get("result") or {})
        except ValidationError as exc:
            raise GatewayError(f"Unreadable query result: {exc}", statement=statement, cause=exc) from exc

    def create(self, object_type: str, fields: dict[str, str], identity: str) -> CreateResult:
        """Create one record.

        Returns a failed CreateResult only when the org rejected the record
        itself (duplicate value, field or constraint error). Every other
        failure, including auth and session errors, raises GatewayError.
        """
        try:
            values = format_values(fields)
        except ValueError as exc:
            raise GatewayError(str(exc), statement=object_type, cause=exc) from exc
        payload = self._run(
            ["force:data:record:create", "-s", object_type, "-v", values, "-u", identity],
            f"{object_type}: {values}",
        )
        result_data = payload.get("result") if isinstance(payload.get("result"), dict) else {}
        errors = _error_messages(result_data.get("errors"))

        if payload.get("status") != 0:
            message = _payload_message(payload)
            if errors or _is_record_rejection(payload):
                return CreateResult(success=False, errors=errors or [message])
            raise GatewayError(message, statement=values)

        if result_data.get("success") is False:
            return CreateResult(success=False, errors=errors or [_payload_message(payload)])
        record_id = result_data.get("id")
        if not record_id:
            raise GatewayError(
                f"Create of {object_type} reported success without a record id",
                statement=values,
            )
        return CreateResult(id=record_id, success=True)

    def _run(self, args: list[str], statement: str) -> dict[str, Any]:
        command = [self._executable, *args, "--json"]
        _logger.debug("Running %s", " ".join(command[:2]), extra={"statement": statement})
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except FileNotFoundError as exc:
            raise GatewayError(
                f"Executable not found: {self._executable}", statement=statement, cause=exc
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise GatewayError(
                f"{self._executable} timed out after {self._timeout}s", statement=statement, cause=exc
            ) from exc

        # --json output goes to stdout even when the command fails
        output = completed.stdout.strip() or completed.stderr.strip()
        try:
            payload = json.loads(output)
        except json.JSONDecodeError as exc:
            raise GatewayError(
                f"Unreadable output from {self._executable} (exit {completed.returncode}): {output[:200]}",
                statement=statement,
                cause=exc,
            ) from exc
        if not isinstance(payload, dict):
            raise GatewayError(f"Unexpected output from {self._executable}: {output[:200]}", statement=statement)
        return payload


def _payload_message(payload: dict[str, Any]) -> str:
    message = payload.get("message")
    if message:
        return str(message)
    return f"{payload.get('name', 'Error')} (status {payload.get('status')})"


def _is_record_rejection(payload: dict[str, Any]) -> bool:
    text = f"{payload.get('name') or ''} {payload.get('message') or ''}"
    return _REJECTION_CODE.search(text) is not None


def _error_messages(errors: Any) -> list[str]:
    if not isinstance(errors, list):
        return []
    messages = []
    for error in errors:
        if isinstance(error, dict):
            code = error.get("statusCode") or error.get("errorCode")
            text = error.get("message") or ""
            messages.append(f"{code}: {text}" if code else text)
        else:
            messages.append(str(error))
    return [message for message in messages if message]
