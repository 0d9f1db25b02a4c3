# =============================================================================
# WhmServer - HTTP client for the WHM JSON API
# -----------------------------------------------------------------------------
# Copyright (c) Alejandro Feránandez Rodríguez. All rights reserved.
#
# This source code is released under the GEL 3.0 License.
#
# DISCLAIMER:
# This software is provided "AS IS", without warranty of any kind, express or
# implied, including but not limited to the warranties of merchantability,
# fitness for a particular purpose and noninfringement. In no event shall the
# authors or copyright holders be liable for any claim, damages or other
# liability, whether in an action of contract, tort or otherwise, arising from,
# out of or in connection with the software or the use or other dealings in the
# software.
#
# LICENSE – GEL 3.0:
# You may use, copy, modify, and distribute this code according to the terms of
# the GEL 3.0 License. A full copy of the license should accompany any
# redistribution. If the license text is missing, see: https://gel-license.org
#  @author
#    Alejandro Fernández Rodríguez — github.com/afernandezLuc
#  @version 1.0.0
#  @date 2026-01-07
# =============================================================================

from __future__ import annotations

import json
import logging
import os
import re
from typing import Any, Dict, Mapping, Optional

import requests

from . import config
from .exceptions import WhmArgumentError, WhmParseError
from .models import ConnectionIdentity, NormalizedResult
from .query import encode_query
from .request import build_request
from .response import classify_response, normalize_response
from .transport import Transport

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(value: Optional[str], default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUE_VALUES


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name}")


class WhmServer:
    """
    Minimal client for the WHM (cPanel server management) JSON API.

    Every WHM function is reached the same way: an authenticated GET on
    `/json-api/<function>?<params>`. What differs wildly is the shape of the
    JSON that comes back, so this client focuses on:
      - Building the request (sorted, URL-encoded query; `WHM user:hash` auth)
      - HTTPS on port 2087, with optional certificate verification against
        the bundled CA file
      - Normalizing every response into a `NormalizedResult`

    A WHM-level failure (e.g. "username already exists") is returned as a
    result with `success=False`, not raised. Only transport problems and
    non-JSON bodies raise.

    The client keeps no per-call state, so a single instance can be shared.
    """

    def __init__(
        self,
        host: Optional[str] = None,
        hash: Optional[str] = None,
        user: str = config.DEFAULT_USER,
        ssl: bool = True,
        port: Optional[int] = None,
        ssl_verify: bool = False,
        timeout_s: float = config.DEFAULT_TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Create a WhmServer.

        Args:
            host:
                WHM server hostname or IP, e.g. 'whm.example.com'.
            hash:
                Remote access hash (WHM > Remote Access Key). Whitespace and
                line breaks are removed, so it can be pasted as shown by WHM.
            user:
                Account the hash belongs to. Defaults to 'root'.
            ssl:
                True for HTTPS on 2087, False for plain HTTP on 2086.
            port:
                Explicit port; overrides `ssl`. Only 2087 uses TLS.
            ssl_verify:
                Verify the server certificate against the bundled CA file.
                Off by default since most WHM servers use self-signed
                certificates.
            timeout_s:
                HTTP connect/read timeout in seconds.
            session:
                Optional preconfigured requests.Session.

        Raises:
            WhmArgumentError:
                If host or hash is missing, or the port is not an integer.
        """
        if not isinstance(host, str) or not host.strip():
            raise WhmArgumentError("Missing required parameter: host")
        if not isinstance(hash, str) or not hash.strip():
            raise WhmArgumentError("Missing required parameter: hash")

        if port is None:
            port = config.SECURE_PORT if ssl else config.INSECURE_PORT
        try:
            port = int(port)
        except (TypeError, ValueError) as exc:
            raise WhmArgumentError(f"Invalid port: {port!r}") from exc

        self.identity = ConnectionIdentity(
            host=host.strip(),
            credential=_WHITESPACE.sub("", hash),
            account_name=user or config.DEFAULT_USER,
            port=port,
            tls_verify=bool(ssl_verify),
        )
        self.transport = Transport(timeout_s=timeout_s, session=session)

        if self.identity.secure and not self.identity.tls_verify:
            logger.warning(
                "TLS certificate verification is disabled for %s", self.identity.host
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **kwargs: Any) -> "WhmServer":
        """
        Build a WhmServer from WHM_* environment variables.

        Reads WHM_HOST, WHM_HASH, WHM_USER, WHM_SSL, WHM_PORT, WHM_SSL_VERIFY
        and WHM_TIMEOUT. Keyword arguments are passed through to the
        constructor (e.g. `session`).
        """
        env = os.environ if environ is None else environ

        port = env.get(config.ENV_PORT) or None
        timeout = env.get(config.ENV_TIMEOUT) or None
        try:
            timeout_s = float(timeout) if timeout is not None else config.DEFAULT_TIMEOUT_S
        except ValueError as exc:
            raise WhmArgumentError(f"Invalid {config.ENV_TIMEOUT}: {timeout!r}") from exc

        return cls(
            host=env.get(config.ENV_HOST),
            hash=env.get(config.ENV_HASH),
            user=env.get(config.ENV_USER) or config.DEFAULT_USER,
            ssl=_env_flag(env.get(config.ENV_SSL), True),
            port=port,
            ssl_verify=_env_flag(env.get(config.ENV_SSL_VERIFY), False),
            timeout_s=timeout_s,
            **kwargs,
        )

    @property
    def url(self) -> str:
        """
        Base URL of the JSON API.

        Returns:
            e.g. 'https://whm.example.com:2087/json-api/'.
        """
        return self.identity.base_url

    def perform_request(
        self,
        function: str,
        options: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> NormalizedResult:
        """
        Call a WHM API function and normalize its response.

        Args:
            function: WHM function name, e.g. 'createacct' or 'listaccts'.
            options:
                Query parameters for the function. The reserved `key` (or
                `result_key`) entry names the key under which the function
                nests its result record (default 'result'); it is consumed
                and not sent. The mapping is not modified.
            **kwargs: Extra query parameters, merged over `options`.

        Returns:
            NormalizedResult with success flag, message and parameters.

        Raises:
            WhmTransportError:
                On network/connection failures (not retried).
            WhmParseError:
                If the body is not valid JSON.
        """
        params: Dict[str, Any] = dict(options or {})
        params.update(kwargs)

        result_key = config.DEFAULT_RESULT_KEY
        for name in config.RESULT_KEY_OPTIONS:
            if name in params:
                override = params.pop(name)
                if override:
                    result_key = str(override)

        request = build_request(self.identity, function, encode_query(params))
        raw = self.transport.get(request)

        try:
            body = json.loads(raw.body, parse_constant=_reject_constant)
        except ValueError as exc:
            logger.warning(
                "%s returned a non-JSON body (HTTP %s)", function, raw.http_status
            )
            raise WhmParseError(
                f"Invalid JSON from {function} (HTTP {raw.http_status}): {exc}",
                http_status=raw.http_status,
                body=raw.body,
            ) from exc

        shape = classify_response(body, result_key)
        logger.debug("%s response classified as %s", function, shape.value)
        return normalize_response(body, result_key, shape)

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self.transport.close()

    def __enter__(self) -> "WhmServer":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"WhmServer(url={self.url!r}, user={self.identity.account_name!r})"
