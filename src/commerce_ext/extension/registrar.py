"""ExtensionRegistrar: sequences the registration steps."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import ValidationError

from commerce_ext.config import Config
from commerce_ext.context import Context
from commerce_ext.errors import GatewayError, MissingNameError, ProjectionMissingError, RegistrationError
from commerce_ext.extension.projector import RegistrationProjector
from commerce_ext.extension.resolver import ApexClassResolver
from commerce_ext.extension.validator import ExtensionPointValidator
from commerce_ext.extension.writer import RegistrationWriter
from commerce_ext.gateway.base import DataGateway
from commerce_ext.gateway.sfdx import SfdxGateway
from commerce_ext.messages import Messages
from commerce_ext.observers import StepObserver
from commerce_ext.records import RegistrationRequest, RegistrationResult

__all__ = ["ExtensionRegistrar", "RegistrationState", "RegistrationOutcome"]

_logger = logging.getLogger(__name__)


class RegistrationState(str, enum.Enum):
    """Steps of a registration call, in order."""

    RESOLVING_CLASS = "resolving_class"
    VALIDATING_EXTENSION_POINT = "validating_extension_point"
    CHECKING_NAME = "checking_name"
    WRITING = "writing"
    PROJECTING = "projecting"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class RegistrationOutcome:
    """Result-type view of a registration call.

    Attributes:
        result: The projection when the call succeeded.
        error: The terminal error when it failed.
        state: The step that failed, or DONE.
    """

    result: RegistrationResult | None = None
    error: RegistrationError | None = None
    state: RegistrationState = RegistrationState.DONE

    @property
    def ok(self) -> bool:
        return self.error is None


class ExtensionRegistrar:
    """Registers an Apex class against an extension point.

    Runs resolve class, validate extension point, check name, write and
    project strictly in that order. The first failure ends the call; nothing
    is retried or rolled back, so a record written before a failed read-back
    stays in the org.
    """

    def __init__(
        self,
        gateway: DataGateway,
        messages: Messages | None = None,
        observers: list[StepObserver] | None = None,
    ) -> None:
        self._messages = messages if messages is not None else Messages.load()
        self._resolver = ApexClassResolver(gateway, self._messages)
        self._validator = ExtensionPointValidator(gateway, self._messages)
        self._writer = RegistrationWriter(gateway, self._messages)
        self._projector = RegistrationProjector(gateway)
        self._observers: list[StepObserver] = list(observers or [])

    @classmethod
    def from_config(
        cls,
        config: Config,
        gateway: DataGateway | None = None,
        messages: Messages | None = None,
        observers: list[StepObserver] | None = None,
    ) -> ExtensionRegistrar:
        """Build a registrar, creating the gateway and catalogue from ``config`` when not given."""
        if gateway is None:
            gateway = SfdxGateway.from_config(config)
        if messages is None:
            messages = Messages.load(config.get("messages.path"))
        return cls(gateway, messages=messages, observers=observers)

    def add_observer(self, observer: StepObserver) -> ExtensionRegistrar:
        self._observers.append(observer)
        return self

    def register(self, request: RegistrationRequest) -> RegistrationResult:
        """Register ``request`` and return the read-back projection.

        Raises:
            ClassNotFoundError: The Apex class did not resolve.
            InvalidExtensionPointError: The extension point is not a picklist value.
            MissingNameError: No registered name was given.
            RegistrationConflictError: The org rejected the record.
            RegistrationWriteError: The create call failed in transport.
            ProjectionMissingError: The record could not be read back.
            GatewayError: Extension point validation could not reach the org.
        """
        context = Context.create(request.acting_identity)
        return self._run(request, context)

    def try_register(self, request: RegistrationRequest) -> RegistrationOutcome:
        """Like :meth:`register`, but report registration errors in the outcome."""
        context = Context.create(request.acting_identity)
        try:
            result = self._run(request, context)
        except RegistrationError as exc:
            state = context.data.get("_state", RegistrationState.FAILED)
            return RegistrationOutcome(error=exc, state=state)
        return RegistrationOutcome(result=result)

    def _run(self, request: RegistrationRequest, context: Context) -> RegistrationResult:
        identity = request.acting_identity
        self._log(logging.INFO, "extension.register.retrievingApexClass", request.apex_class_name, identity)

        apex_class = self._step(
            RegistrationState.RESOLVING_CLASS,
            {"apex_class_name": request.apex_class_name},
            context,
            lambda: self._resolver.resolve(request.apex_class_name, identity),
        )
        self._step(
            RegistrationState.VALIDATING_EXTENSION_POINT,
            {"extension_point_name": request.extension_point_name},
            context,
            lambda: self._validator.validate(request.extension_point_name, identity),
        )
        registered_name = self._step(
            RegistrationState.CHECKING_NAME,
            {"registered_name": request.registered_name},
            context,
            lambda: self._check_name(request.registered_name),
        )
        if request.apex_namespace:
            self._log(logging.WARNING, "extension.register.ignoredNamespace", request.apex_namespace)

        record_id = self._step(
            RegistrationState.WRITING,
            {
                "registered_name": registered_name,
                "extension_point_name": request.extension_point_name,
                "apex_class_id": apex_class.id,
            },
            context,
            lambda: self._writer.write(registered_name, request.extension_point_name, apex_class.id, identity),
        )
        result = self._step(
            RegistrationState.PROJECTING,
            {"registered_name": registered_name},
            context,
            lambda: self._project(registered_name, record_id, identity),
        )

        context.data["_state"] = RegistrationState.DONE
        _logger.info(result.to_json())
        self._log(logging.INFO, "extension.register.savingConfigIntoConfig")
        return result

    def _step(
        self,
        state: RegistrationState,
        inputs: dict[str, Any],
        context: Context,
        action: Callable[[], Any],
    ) -> Any:
        context.data["_state"] = state
        step = state.value
        for observer in self._observers:
            observer.before(step, inputs, context)
        try:
            output = action()
        except Exception as exc:
            if isinstance(exc, RegistrationError) and exc.trace_id is None:
                exc.trace_id = context.trace_id
            for observer in reversed(self._observers):
                observer.on_error(step, exc, context)
            raise
        for observer in reversed(self._observers):
            observer.after(step, output, context)
        return output

    def _log(self, level: int, key: str, *args: Any) -> None:
        text = self._messages.get(key, *args, default=None)
        if text is not None:
            _logger.log(level, text)

    def _check_name(self, registered_name: str | None) -> str:
        if not registered_name:
            raise MissingNameError(message=self._messages.get("extension.register.undefinedName", default=None))
        return registered_name

    def _project(self, registered_name: str, record_id: str, identity: str) -> RegistrationResult:
        message = self._messages.get("extension.register.errProjection", registered_name, record_id, default=None)
        try:
            result = self._projector.project(registered_name, identity)
        except GatewayError as exc:
            raise ProjectionMissingError(
                registered_name,
                record_id=record_id,
                remote_message=exc.message,
                message=message,
                cause=exc,
            ) from exc
        except ValidationError as exc:
            raise ProjectionMissingError(
                registered_name,
                record_id=record_id,
                remote_message=f"Unreadable {registered_name} record: {exc}",
                message=message,
                cause=exc,
            ) from exc
        if result is None:
            raise ProjectionMissingError(registered_name, record_id=record_id, message=message)
        return result
