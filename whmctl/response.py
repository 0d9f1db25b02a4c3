# =============================================================================
# whmctl Library – Response Classification and Normalization
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

import re
from typing import Any, Mapping, Optional

from . import config
from .models import NormalizedResult, ResponseShape

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_KEY_SEPARATORS = re.compile(r"[\s\-]+")

# Bookkeeping fields turned into success/message and never exposed as params.
_STATUS_FIELDS = ("status", "statusmsg")


def classify_response(body: Any, result_key: str = config.DEFAULT_RESULT_KEY) -> ResponseShape:
    """
    Assign a decoded WHM body to exactly one ResponseShape.

    First match wins:
      1. not a JSON object             -> UNKNOWN
      2. has an `error` key            -> ERROR
      3. has `result_key`              -> ACTION
      4. has `status` and `statusmsg`  -> QUERY
      5. anything else                 -> UNKNOWN

    ERROR beats everything else because it means the whole call failed.
    ACTION is checked before QUERY when a body qualifies for both.
    """
    if not isinstance(body, Mapping):
        return ResponseShape.UNKNOWN
    if "error" in body:
        return ResponseShape.ERROR
    if result_key in body:
        return ResponseShape.ACTION
    if "status" in body and "statusmsg" in body:
        return ResponseShape.QUERY
    return ResponseShape.UNKNOWN


def parse_status(value: Any) -> int:
    """
    Best-effort integer parse of a WHM status value.

    WHM sends the status as 1, "1", 1.0 or worse depending on the function.
    Integers are taken as-is, floats are truncated, strings are read up to
    the first non-digit ("1.0" and "1 ok" give 1). Everything else,
    including booleans and None, gives 0.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return 0
        return int(value)
    if isinstance(value, str):
        m = _LEADING_INT.match(value)
        return int(m.group(1)) if m else 0
    return 0


def symbolize_key(key: Any) -> str:
    """'Disk-Used ' -> 'disk_used'"""
    return _KEY_SEPARATORS.sub("_", str(key).strip()).lower()


def symbolize_keys(value: Any) -> Any:
    """
    Return a copy of `value` with every mapping key normalized.

    Works at every depth, including mappings nested inside lists. Leaves
    that are neither mappings nor lists are returned unchanged.
    """
    if isinstance(value, Mapping):
        return {symbolize_key(k): symbolize_keys(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [symbolize_keys(item) for item in value]
    return value


def _from_record(record: Mapping[str, Any]) -> NormalizedResult:
    params = {k: v for k, v in record.items() if k not in _STATUS_FIELDS}
    return NormalizedResult(
        success=parse_status(record.get("status")) == 1,
        message=record.get("statusmsg"),
        parameters=symbolize_keys(params),
    )


def _first_record(value: Any) -> Mapping[str, Any]:
    if isinstance(value, (list, tuple)) and value and isinstance(value[0], Mapping):
        return value[0]
    return {}


def normalize_response(
    body: Any,
    result_key: str = config.DEFAULT_RESULT_KEY,
    shape: Optional[ResponseShape] = None,
) -> NormalizedResult:
    """
    Turn a decoded WHM body into a NormalizedResult.

    Never raises on malformed sub-structure: a missing or unreadable status
    simply yields `success=False`.

    Args:
        body: Decoded JSON body.
        result_key: Key under which ACTION responses nest their record.
        shape: Precomputed shape; classified here when omitted.
    """
    if shape is None:
        shape = classify_response(body, result_key)

    if shape is ResponseShape.ACTION:
        return _from_record(_first_record(body[result_key]))
    if shape is ResponseShape.QUERY:
        return _from_record(body)
    if shape is ResponseShape.ERROR:
        return NormalizedResult(success=False, message=body["error"], parameters={})
    return NormalizedResult(
        success=False,
        message=f"Unknown error occurred {body!r}",
        parameters={},
    )
