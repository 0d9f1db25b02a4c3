# =============================================================================
# whmctl Library – Configuration Defaults
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

# ---- Connection ----
DEFAULT_USER = "root"
SECURE_PORT = 2087     # WHM over HTTPS
INSECURE_PORT = 2086   # WHM over plain HTTP
BASE_PATH = "/json-api"
DEFAULT_TIMEOUT_S = 30.0

# ---- Responses ----
DEFAULT_RESULT_KEY = "result"
# Option names consumed by perform_request and never sent on the wire.
RESULT_KEY_OPTIONS = ("key", "result_key")

# ---- Trust store ----
# PEM bundle shipped next to this module.
CA_BUNDLE_FILENAME = "cacert.pem"

# ---- Environment (WhmServer.from_env) ----
ENV_HOST = "WHM_HOST"
ENV_HASH = "WHM_HASH"
ENV_USER = "WHM_USER"
ENV_SSL = "WHM_SSL"
ENV_PORT = "WHM_PORT"
ENV_SSL_VERIFY = "WHM_SSL_VERIFY"
ENV_TIMEOUT = "WHM_TIMEOUT"
