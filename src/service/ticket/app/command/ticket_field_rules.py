"""Field rules shared by the create and update commands."""

from typing import Any

from src.platform.exception.exceptions import ValidationError


def require_text(value: Any, *, field: str, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f'{label} cannot be empty', field=field)
    return value


def require_positive_quantity(quantity: Any) -> int:
    # bool is an int subclass; True is not a quantity
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise ValidationError('Quantity must be greater than 0', field='quantity')
    return quantity
