"""Backlot API Python SDK."""

__version__ = "0.1.0"

from .client import BacklotClient
from .config import ClientConfig
from .errors import ApiError, DecodeError, RemoteError, TransportError, UnsupportedMethod, is_error
from .signing import RequestSigner, generate_signature

__all__ = [
    "ApiError",
    "BacklotClient",
    "ClientConfig",
    "DecodeError",
    "RemoteError",
    "RequestSigner",
    "TransportError",
    "UnsupportedMethod",
    "generate_signature",
    "is_error",
]
