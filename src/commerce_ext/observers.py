"""Step observers for the registration pipeline."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from commerce_ext.context import Context

__all__ = ["StepObserver", "LoggingObserver"]


class StepObserver:
    """Base observer class with default no-op implementations.

    Subclass and override the hooks you need. Observers see each step of a
    registration call but cannot change its inputs or outcome.
    """

    def before(self, step: str, inputs: dict[str, Any], context: Context) -> None:
        """Called before a step runs."""

    def after(self, step: str, output: Any, context: Context) -> None:
        """Called after a step completes."""

    def on_error(self, step: str, error: Exception, context: Context) -> None:
        """Called when a step fails."""


class LoggingObserver(StepObserver):
    """Logs step start, completion (with duration) and failure.

    Per-call timing is kept in ``context.data``.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        log_inputs: bool = True,
        log_outputs: bool = True,
    ) -> None:
        self._logger = logger or logging.getLogger("commerce_ext.observers")
        self._log_inputs = log_inputs
        self._log_outputs = log_outputs

    def before(self, step: str, inputs: dict[str, Any], context: Context) -> None:
        context.data[f"_logging_start_{step}"] = time.time()
        if self._log_inputs:
            self._logger.info(
                f"[{context.trace_id}] START {step}",
                extra={
                    "trace_id": context.trace_id,
                    "step": step,
                    "identity": context.identity,
                    "inputs": inputs,
                },
            )

    def after(self, step: str, output: Any, context: Context) -> None:
        duration_ms = self._elapsed_ms(step, context)
        if self._log_outputs:
            self._logger.info(
                f"[{context.trace_id}] END {step} ({duration_ms:.2f}ms)",
                extra={
                    "trace_id": context.trace_id,
                    "step": step,
                    "duration_ms": duration_ms,
                    "output": output,
                },
            )

    def on_error(self, step: str, error: Exception, context: Context) -> None:
        duration_ms = self._elapsed_ms(step, context)
        self._logger.error(
            f"[{context.trace_id}] ERROR {step}: {error}",
            extra={
                "trace_id": context.trace_id,
                "step": step,
                "duration_ms": duration_ms,
                "error": str(error),
                "error_code": getattr(error, "code", None),
            },
        )

    @staticmethod
    def _elapsed_ms(step: str, context: Context) -> float:
        start_time = context.data.pop(f"_logging_start_{step}", time.time())
        return (time.time() - start_time) * 1000
