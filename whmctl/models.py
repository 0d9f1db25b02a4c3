# =============================================================================
# whmctl Library – Data Models
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

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

from . import config


class ResponseShape(Enum):
    """
    Envelope shapes returned by the WHM JSON API.

    WHM is not consistent about where it puts the outcome of a call, so every
    decoded body is first assigned exactly one of these shapes:

      - ACTION:  `{"<result key>": [{"status": ..., "statusmsg": ..., ...}]}`
      - QUERY:   `{"status": ..., "statusmsg": ..., ...}`
      - ERROR:   `{"error": "..."}`
      - UNKNOWN: anything else (including non-object JSON)
    """

    ACTION = "action"
    QUERY = "query"
    ERROR = "error"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ConnectionIdentity:
    """
    Who we talk to and as whom.

    Attributes:
        host: WHM server hostname or IP address.
        credential: Remote access hash. Never shown in `repr`.
        account_name: WHM account the hash belongs to (normally "root").
        port: Destination port. `config.SECURE_PORT` (2087) means HTTPS.
        tls_verify: Verify the peer certificate against the bundled CA file.
            Only meaningful on the secure port.
        base_path: Path prefix of the JSON API.
    """

    host: str
    credential: str = field(repr=False)
    account_name: str = config.DEFAULT_USER
    port: int = config.SECURE_PORT
    tls_verify: bool = False
    base_path: str = config.BASE_PATH

    @property
    def secure(self) -> bool:
        return self.port == config.SECURE_PORT

    @property
    def scheme(self) -> str:
        return "https" if self.secure else "http"

    @property
    def base_url(self) -> str:
        """Base URL of the API, e.g. 'https://whm.example.com:2087/json-api/'."""
        return f"{self.scheme}://{self.host}:{self.port}{self.base_path.rstrip('/')}/"


@dataclass(frozen=True)
class TlsPolicy:
    """
    Transport security for a single request.

    Attributes:
        use_tls: True when the request goes over HTTPS.
        verify: Value handed to `requests` as `verify`: the path of the CA
            bundle when peer verification is on, False when it is off.
    """

    use_tls: bool
    verify: Union[bool, str]


@dataclass(frozen=True)
class RequestDescriptor:
    """Everything needed to issue one WHM API call. Built fresh per call."""

    operation: str
    query_string: str
    path: str
    url: str
    headers: Dict[str, str] = field(repr=False)
    tls: TlsPolicy
    method: str = "GET"


@dataclass(frozen=True)
class RawResponse:
    """HTTP status and undecoded text body of a WHM response."""

    http_status: int
    body: str


@dataclass(frozen=True)
class NormalizedResult:
    """
    Uniform outcome of a WHM call, whatever envelope the server used.

    Attributes:
        success: True only if WHM reported a status of 1.
        message: WHM status message, error text, or a diagnostic for
            unrecognized bodies. None when the server sent none.
        parameters: Every other field of the result record, with keys
            normalized recursively (see `response.symbolize_keys`).
            Never contains `status` or `statusmsg`.
    """

    success: bool
    message: Optional[str]
    parameters: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "params": self.parameters,
        }
