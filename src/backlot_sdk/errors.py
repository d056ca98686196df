"""Error values returned by the Backlot client instead of raised exceptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class ApiError:
    code: str
    message: str

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class UnsupportedMethod(ApiError):
    code: str = "unsupported"
    message: str = "Method not supported."


@dataclass(frozen=True)
class RemoteError(ApiError):
    """Any non-200 response. ``message`` is the server's reason phrase, verbatim."""

    status: int = 0

    @classmethod
    def from_status(cls, status: int, message: str) -> "RemoteError":
        return cls(code=str(status), message=message, status=status)


@dataclass(frozen=True)
class TransportError(ApiError):
    """Network level failure reported by the transport (DNS, refused, timeout)."""


@dataclass(frozen=True)
class DecodeError(ApiError):
    code: str = "invalid_json"
    message: str = "Response body is not valid JSON."


ApiResult = Union[Any, ApiError]


def is_error(result: ApiResult) -> bool:
    return isinstance(result, ApiError)


__all__ = [
    "ApiError",
    "ApiResult",
    "DecodeError",
    "RemoteError",
    "TransportError",
    "UnsupportedMethod",
    "is_error",
]
