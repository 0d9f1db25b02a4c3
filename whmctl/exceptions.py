# =============================================================================
# whmctl Library – Exceptions Module
# -----------------------------------------------------------------------------
# Copyright (c) Alejandro Feránandez Rodríguez. All rights reserved.
#
# This source code is released under the GEL 3.0 License.
#
# DISCLAIMER:
# This software is provided "AS IS", without warranty of any kind, express or
# implied, including but not limited to the warranties of merchantability,
# fitness for a particular purpose, and non-infringement. In no event shall the
# authors or copyright holders be liable for any claim, damages, or other
# liability, whether in an action of contract, tort, or otherwise, arising from,
# out of, or in connection with the software or the use or other dealings in
# the software.
#
# LICENSE – GEL 3.0:
# You may use, copy, modify, and distribute this code according to the terms of
# the GEL 3.0 License. A full copy of the license text should accompany any
# redistribution. If the license text is missing, see: https://gel-license.org
#  @author
#    Alejandro Fernández Rodríguez — github.com/afernandezLuc
#  @version 1.0.0
#  @date 2026-01-07
# =============================================================================

from __future__ import annotations

from typing import Optional


class WhmError(Exception):
    """
    Base exception for the library.

    All custom exceptions of the whmctl library inherit from this class so
    that callers can catch `WhmError` to handle any library-specific failure
    in a generic way.

    Note that a WHM call which the server itself reports as failed (an `error`
    key, or a status other than 1) is NOT an exception: it comes back as a
    `NormalizedResult` with `success=False`.
    """
    pass


class WhmArgumentError(WhmError, ValueError):
    """
    A required argument is missing or malformed.

    Raised synchronously, before any network I/O, e.g. when a `WhmServer` is
    built without a host or without an access hash.
    """
    pass


class WhmTransportError(WhmError):
    """
    Errors related to the transport layer.

    This includes problems such as:
      - DNS resolution failures
      - Connection refused / network unreachable
      - Request timeouts
      - TLS handshake or certificate verification failures

    The underlying `requests` exception is chained as `__cause__` and is also
    available as `cause`.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class WhmParseError(WhmError):
    """
    The body returned by WHM is not valid JSON.

    This usually means a protocol-level problem (wrong port, an HTML login
    page, a proxy error page...) that the caller needs to see.

    Attributes:
        http_status: HTTP status code of the offending response.
        body: Raw text body that could not be decoded.
    """

    def __init__(self, message: str, http_status: int, body: str) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.body = body
