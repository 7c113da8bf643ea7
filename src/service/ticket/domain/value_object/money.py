from decimal import Decimal
import re

import attrs

from src.platform.exception.exceptions import ValidationError


# e.g. "10.50 EUR", "10 EUR"
PRICE_PATTERN = re.compile(r'(\d+(?:\.\d{1,2})?) ([A-Z]{3})', re.ASCII)


@attrs.define(frozen=True)
class Money:
    amount: Decimal
    currency: str

    def __str__(self) -> str:
        return f'{self.amount} {self.currency}'


def is_valid_price(price: str) -> bool:
    return isinstance(price, str) and PRICE_PATTERN.fullmatch(price) is not None


def parse_price(price: str) -> tuple[Decimal, str]:
    """Split a ``"<amount> <CUR>"`` price string into its amount and currency code."""
    match = PRICE_PATTERN.fullmatch(price) if isinstance(price, str) else None
    if match is None:
        raise ValidationError(
            f'Invalid price format: {price!r}. Expected "XX.XX CUR" (e.g. "10.50 EUR")',
            field='price',
        )
    return Decimal(match.group(1)), match.group(2)
