from decimal import Decimal

import pytest

from src.platform.exception.exceptions import ValidationError
from src.service.ticket.domain.value_object.money import Money, is_valid_price, parse_price


pytestmark = pytest.mark.unit


class TestParsePrice:
    @pytest.mark.parametrize(
        'price,expected',
        [
            ('10.50 EUR', (Decimal('10.50'), 'EUR')),
            ('10 EUR', (Decimal('10'), 'EUR')),
            ('0.5 USD', (Decimal('0.5'), 'USD')),
        ],
    )
    def test_accepts_amount_and_three_letter_code(self, price, expected):
        assert parse_price(price) == expected
        assert is_valid_price(price)

    @pytest.mark.parametrize(
        'price',
        [
            '9.999 EUR',
            '10 EURO',
            '10 eur',
            '10.50EUR',
            '-1 EUR',
            '.50 EUR',
            '',
            '10.50 EUR ',
            '10.50 EUR\n',
            '10.50\tEUR',
            '10.50  EUR',
            '\u0665\u0660 USD',
        ],
    )
    def test_rejects_malformed_price(self, price):
        with pytest.raises(ValidationError) as exc_info:
            parse_price(price)

        assert exc_info.value.field == 'price'
        assert 'XX.XX CUR' in str(exc_info.value)
        assert not is_valid_price(price)

    def test_rejects_non_string(self):
        with pytest.raises(ValidationError):
            parse_price(10.5)  # type: ignore[arg-type]


class TestMoney:
    def test_renders_as_amount_and_currency(self):
        assert str(Money(amount=Decimal('10.50'), currency='EUR')) == '10.50 EUR'

    def test_is_immutable_value(self):
        money = Money(amount=Decimal('1'), currency='USD')

        assert money == Money(amount=Decimal('1'), currency='USD')
        with pytest.raises(AttributeError):
            money.amount = Decimal('2')  # type: ignore[misc]
