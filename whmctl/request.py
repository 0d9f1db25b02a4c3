# =============================================================================
# whmctl Library – Request Builder
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

import os

from . import config
from .models import ConnectionIdentity, RequestDescriptor, TlsPolicy


def ca_bundle_path() -> str:
    """Absolute path of the PEM trust store shipped with the library."""
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), config.CA_BUNDLE_FILENAME)


def authorization_header(identity: ConnectionIdentity) -> str:
    return f"WHM {identity.account_name}:{identity.credential}"


def tls_policy(identity: ConnectionIdentity) -> TlsPolicy:
    """
    Decide how the connection to `identity` is secured.

    Only the WHM secure port uses TLS. On it, the peer certificate is checked
    against the bundled CA file when `tls_verify` is set, and not checked at
    all otherwise (WHM ships with self-signed certificates). Any other port is
    plain HTTP, whatever `tls_verify` says.
    """
    if not identity.secure:
        return TlsPolicy(use_tls=False, verify=False)
    if identity.tls_verify:
        return TlsPolicy(use_tls=True, verify=ca_bundle_path())
    return TlsPolicy(use_tls=True, verify=False)


def build_request(
    identity: ConnectionIdentity,
    operation: str,
    query_string: str,
) -> RequestDescriptor:
    """
    Compute the request for one WHM API call. Performs no I/O.

    Args:
        identity: Connection identity (host, port, credential...).
        operation: WHM function name, e.g. 'createacct'.
        query_string: Already encoded query (see `query.encode_query`).

    Returns:
        RequestDescriptor with path, full URL, Authorization header and TLS
        policy.
    """
    path = f"{identity.base_path.rstrip('/')}/{operation}"
    if query_string:
        path = f"{path}?{query_string}"

    return RequestDescriptor(
        operation=operation,
        query_string=query_string,
        path=path,
        url=f"{identity.scheme}://{identity.host}:{identity.port}{path}",
        headers={"Authorization": authorization_header(identity)},
        tls=tls_policy(identity),
    )
