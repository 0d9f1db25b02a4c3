# =============================================================================
# whmctl Library – Query String Encoding
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

from typing import Any, Mapping
from urllib.parse import quote_plus


def _to_text(value: Any) -> str:
    # WHM expects lowercase booleans and an empty value for None
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(options: Mapping[str, Any]) -> str:
    """
    Encode an option map into a canonical WHM query string.

    Keys and values are stringified and form-encoded independently (space
    becomes '+', '&', '=' and every other reserved character is escaped).
    The encoded `key=value` pairs are then sorted before being joined with
    '&', so the output does not depend on the iteration order of `options`.

    Args:
        options: Option name -> scalar value (str, int, float, bool, None).

    Returns:
        The query string without a leading '?'. Empty input gives "".

    Example:
        >>> encode_query({"username": "x", "domain": "y.com"})
        'domain=y.com&username=x'
    """
    pairs = [
        f"{quote_plus(_to_text(key), safe='')}={quote_plus(_to_text(value), safe='')}"
        for key, value in options.items()
    ]
    return "&".join(sorted(pairs))
