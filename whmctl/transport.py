# =============================================================================
# whmctl Library – HTTP Transport
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

import logging
from typing import Optional

import requests

from . import config
from .exceptions import WhmTransportError
from .models import RawResponse, RequestDescriptor

logger = logging.getLogger(__name__)


def _without_query(url: str) -> str:
    return url.split("?", 1)[0]


class Transport:
    """
    Executes WHM requests over a `requests.Session`.

    One attempt per call: there is no retry loop here, retrying is left to
    whoever calls the client.
    """

    def __init__(
        self,
        timeout_s: float = config.DEFAULT_TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Args:
            timeout_s: Connect/read timeout in seconds.
            session: Optional preconfigured requests.Session. If not provided,
                a new session is created.
        """
        self.timeout_s = float(timeout_s)
        self.session = session or requests.Session()

    def get(self, request: RequestDescriptor) -> RawResponse:
        """
        Perform a single GET for `request`.

        Returns:
            RawResponse with the HTTP status and text body. Non-2xx statuses
            are returned as-is.

        Raises:
            WhmTransportError:
                On DNS, connection, TLS or timeout failures.
        """
        logger.debug("GET %s %s", request.operation, _without_query(request.url))
        try:
            r = self.session.get(
                request.url,
                headers=request.headers,
                verify=request.tls.verify,
                timeout=self.timeout_s,
            )
        except requests.RequestException as exc:
            # query values may carry passwords
            detail = str(exc)
            if request.query_string:
                detail = detail.replace(request.query_string, "<query>")
            raise WhmTransportError(
                f"HTTP error calling {request.operation} on {_without_query(request.url)}: {detail}",
                cause=exc,
            ) from exc

        logger.debug("%s -> HTTP %s", request.operation, r.status_code)
        return RawResponse(http_status=r.status_code, body=r.text)

    def close(self) -> None:
        self.session.close()
