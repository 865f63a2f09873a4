"""Per-call registration context."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

__all__ = ["Context"]


@dataclass
class Context:
    """State shared by the steps of one registration call.

    ``data`` is scratch space for observers (e.g. step start times).
    """

    trace_id: str
    identity: str
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(cls, identity: str) -> Context:
        """Create a Context with a generated UUID v4 trace_id."""
        return cls(trace_id=str(uuid.uuid4()), identity=identity)
