"""
Required-field check for incoming records.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def input_check(record: Mapping[str, Any] | None, *required: str) -> str | None:
    """
    Return an error message for the first required field that is missing
    or blank, or None when every required field is present.

    Fields not listed in `required` are not looked at.
    """
    record = record or {}
    for field in required:
        if field not in record or _is_blank(record[field]):
            return f"No {field} specified."
    return None
