from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(slots=True)
class InvalidArgumentError(ValueError):
    """Rejected codec input; carries a stable error code and the offending value."""

    code: str
    message: str
    details: Any | None = None

    def __str__(self) -> str:
        return self.message


def make_error_payload(
    *, code: str, message: str, details: Any | None
) -> dict[str, Any]:
    return {
        "code": code,
        "message": message,
        "details": details,
    }
