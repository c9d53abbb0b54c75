"""ServiceResult: what every GraphService operation hands back to the CLI.

INVARIANT: a failed result carries an error and no data; a successful
one carries data and no error.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ServiceError(BaseModel):
    """Why an operation failed: a stable code plus a readable message.

    Codes are ``PARSE_ERROR``, ``INVALID_NODE`` and ``INVALID_FORMAT``.
    """

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one reach/groups/check/export call.

    ``data`` holds the operation payload, ``warnings`` holds one-way
    links found by ``check``, and ``meta`` holds timing under ``-v``.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
