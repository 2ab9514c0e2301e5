"""Item Validation — pure field-level checks for candidate inventory records.

Invariants:
    - validate_item never raises and never touches IO; same input → same result
    - ValidationResult.errors maps field name → message; empty means accepted
    - values holds only the cleaned writable fields (trimmed strings, float price
      rounded half-up to cents, int stock); unknown keys such as id or
      timestamps are dropped
    - partial=True skips the "required" check for absent keys only — a key that
      is present (even as null) is fully validated

Design Decisions:
    - Price parsed through Decimal: numeric strings from form posts are accepted,
      NaN/Infinity and booleans are not
    - Messages match the ones the UI renders inline next to each input
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from warehouse.core.domain_types import (
    ItemField, NAME_MAX_LENGTH, CATEGORY_MAX_LENGTH, PRICE_MAX, STOCK_MAX,
)

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one write attempt."""
    errors: dict[str, str] = field(default_factory=dict)
    values: dict[str, Any] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_item(candidate: Mapping[str, Any], partial: bool = False) -> ValidationResult:
    """Validate a (possibly partial) candidate record. Pure, no IO."""
    errors: dict[str, str] = {}
    values: dict[str, Any] = {}

    for item_field, check in _CHECKS:
        key = item_field.value
        if partial and key not in candidate:
            continue
        error, cleaned = check(candidate.get(key))
        if error:
            errors[key] = error
        else:
            values[key] = cleaned

    return ValidationResult(errors=errors, values=values if not errors else {})


# --- Field checks -------------------------------------------------------------
# Each returns (error_message | None, cleaned_value).


def _check_name(value: Any) -> tuple[str | None, Any]:
    return _check_text(value, "Name", NAME_MAX_LENGTH)


def _check_category(value: Any) -> tuple[str | None, Any]:
    return _check_text(value, "Category", CATEGORY_MAX_LENGTH)


def _check_text(value: Any, label: str, max_length: int) -> tuple[str | None, Any]:
    if value is None:
        return f"{label} is required", None
    if not isinstance(value, str):
        return f"{label} must be a string", None
    text = value.strip()
    if not text:
        return f"{label} is required", None
    if len(text) > max_length:
        return f"{label} cannot exceed {max_length} characters", None
    return None, text


def _check_price(value: Any) -> tuple[str | None, Any]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return "Price is required", None
    amount = _parse_decimal(value)
    if amount is None or amount < 0:
        return "Price must be a valid non-negative number", None
    if amount > PRICE_MAX:
        return "Price cannot exceed $1,000,000", None
    return None, float(amount.quantize(_CENT, rounding=ROUND_HALF_UP))


def _check_stock(value: Any) -> tuple[str | None, Any]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return "Stock is required", None
    quantity = _parse_integer(value)
    if quantity is None or quantity < 0:
        return "Stock must be a valid non-negative integer", None
    if quantity > STOCK_MAX:
        return "Stock cannot exceed 1,000,000 units", None
    return None, quantity


_CHECKS = (
    (ItemField.NAME, _check_name),
    (ItemField.CATEGORY, _check_category),
    (ItemField.PRICE, _check_price),
    (ItemField.STOCK, _check_stock),
)


# --- Parsing helpers ----------------------------------------------------------


def _parse_decimal(value: Any) -> Decimal | None:
    """Parse int/float/Decimal/numeric str into a finite Decimal, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return Decimal(str(value))
    if isinstance(value, (int, Decimal)):
        amount = Decimal(value)
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None
    return amount if amount.is_finite() else None


def _parse_integer(value: Any) -> int | None:
    """Parse int, integral float/Decimal or digit str into int, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    amount = _parse_decimal(value)
    if amount is None or amount != amount.to_integral_value():
        return None
    return int(amount)
