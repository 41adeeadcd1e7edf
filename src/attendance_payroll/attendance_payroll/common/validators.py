from __future__ import annotations

import math
from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} không hợp lệ")
    return str(value).strip()


def require_positive_amount(value, field_name: str) -> float:
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} phải là số")
    if not math.isfinite(amount):
        raise ValidationError(f"{field_name} phải là số hữu hạn")
    if amount <= 0:
        raise ValidationError(f"{field_name} phải lớn hơn 0")
    return amount


def optional_text(value: Optional[str]) -> Optional[str]:
    """Strip free text; blank becomes None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None
