"""Validation of submitted telemetry readings"""
import math
from collections.abc import Mapping
from datetime import datetime
from typing import Any, List, Union

from models.telemetry import (
    FIELD_RANGES,
    NUMERIC_FIELDS,
    REQUIRED_FIELDS,
    Defect,
    Reading,
)


def is_finite_number(value: Any) -> bool:
    """True for int/float values that are not NaN or infinite (bool excluded)"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large for a float
        return False


def is_valid_timestamp(value: str) -> bool:
    """Check that a string parses as an ISO-8601 date-time"""
    text = value.strip()
    if not text:
        return False
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        datetime.fromisoformat(text)
    except ValueError:
        return False
    return True


def find_defects(raw: Any) -> List[Defect]:
    """
    Return every defect found in a raw submission.

    Presence is checked first; a structurally incomplete object gets one
    defect per missing field and nothing else. Type, range and timestamp
    checks then run across all fields.
    """
    fields = raw if isinstance(raw, Mapping) else {}

    missing = [Defect(key, f"Missing field: {key}") for key in REQUIRED_FIELDS if key not in fields]
    if missing:
        return missing

    defects: List[Defect] = []

    for key in NUMERIC_FIELDS:
        if not is_finite_number(fields[key]):
            defects.append(Defect(key, f"{key} must be a number"))

    timestamp = fields["timestamp"]
    if not isinstance(timestamp, str):
        defects.append(Defect("timestamp", "timestamp must be a string"))

    for key in NUMERIC_FIELDS:
        value = fields[key]
        if not is_finite_number(value):
            continue
        field_range = FIELD_RANGES[key]
        if not field_range.contains(value):
            defects.append(Defect(key, f"{key} must be in range {field_range.describe()}"))

    if isinstance(timestamp, str) and not is_valid_timestamp(timestamp):
        defects.append(Defect("timestamp", "timestamp must be a valid date/time string"))

    return defects


def validate(raw: Any) -> Union[Reading, List[Defect]]:
    """Return the reading itself if it is valid, otherwise the full defect list"""
    defects = find_defects(raw)
    if defects:
        return defects
    return raw
