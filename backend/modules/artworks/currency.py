"""
Currency display helpers.

Listing prices are stored as plain numbers plus an ISO code. Unknown codes
fall back to GBP.
"""

from decimal import Decimal
from typing import NamedTuple, Union


class CurrencyConfig(NamedTuple):
    code: str
    symbol: str
    name: str


SUPPORTED_CURRENCIES: dict[str, CurrencyConfig] = {
    "GBP": CurrencyConfig("GBP", "£", "British Pound"),
    "USD": CurrencyConfig("USD", "$", "US Dollar"),
    "EUR": CurrencyConfig("EUR", "€", "Euro"),
    "JPY": CurrencyConfig("JPY", "¥", "Japanese Yen"),
}

DEFAULT_CURRENCY = "GBP"


def _lookup(currency_code: str) -> CurrencyConfig:
    return SUPPORTED_CURRENCIES.get(currency_code, SUPPORTED_CURRENCIES[DEFAULT_CURRENCY])


def format_price(price: Union[int, float, Decimal], currency_code: str = DEFAULT_CURRENCY) -> str:
    """
    Format a price with its currency symbol and thousands separators.

    At most three fraction digits are shown and trailing zeros are dropped:
    format_price(1234.5) == "£1,234.5", format_price(1500, "USD") == "$1,500".
    """
    value = Decimal(str(price)).quantize(Decimal("0.001")).normalize()
    if value == value.to_integral_value():
        amount = f"{int(value):,}"
    else:
        amount = f"{value:,f}"
    return f"{_lookup(currency_code).symbol}{amount}"


def get_currency_symbol(currency_code: str = DEFAULT_CURRENCY) -> str:
    return _lookup(currency_code).symbol


def get_currency_name(currency_code: str = DEFAULT_CURRENCY) -> str:
    return _lookup(currency_code).name


def is_supported_currency(currency_code: str) -> bool:
    return currency_code in SUPPORTED_CURRENCIES
