from .client import WhmServer
from .models import (
    ConnectionIdentity,
    NormalizedResult,
    RawResponse,
    RequestDescriptor,
    ResponseShape,
    TlsPolicy,
)
from .query import encode_query
from .request import build_request
from .response import classify_response, normalize_response, symbolize_keys
from .transport import Transport
from .exceptions import (
    WhmError,
    WhmArgumentError,
    WhmTransportError,
    WhmParseError,
)

__version__ = "1.0.0"

__all__ = [
    "WhmServer",
    "ConnectionIdentity",
    "NormalizedResult",
    "RawResponse",
    "RequestDescriptor",
    "ResponseShape",
    "TlsPolicy",
    "Transport",
    "encode_query",
    "build_request",
    "classify_response",
    "normalize_response",
    "symbolize_keys",
    "WhmError",
    "WhmArgumentError",
    "WhmTransportError",
    "WhmParseError",
]
