from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class ExitCode:
    OK = 0
    RUNTIME_ERROR = 1
    INVALID_USAGE = 2
    NOT_FOUND = 3


@dataclass(eq=False)
class ExaError(Exception):
    code: str
    message: str
    exit_code: int = ExitCode.RUNTIME_ERROR
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return self.message

    def to_error_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class MissingCredentialError(ExaError):
    """No API key was supplied and none was found in the environment."""


class InvalidInputError(ExaError):
    """A request value failed local validation; nothing was sent."""


class TransportError(ExaError):
    """The HTTP exchange itself failed (connect, DNS, TLS, timeout)."""


class DecodeError(ExaError):
    """A response body did not match the schema it was expected to have."""


@dataclass(frozen=True, slots=True)
class HttpErrorPayload:
    code: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


@dataclass(eq=False)
class HttpError(ExaError):
    """The service answered with a non-2xx status and a `{code, message}` body."""

    status: int = 0

    def __str__(self) -> str:
        return f"HTTP error: {self.status} - {self.code} - {self.message}"

    @property
    def payload(self) -> HttpErrorPayload:
        return HttpErrorPayload(code=self.code, message=self.message)

    def to_error_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": {**(self.details or {}), "status": self.status},
        }
