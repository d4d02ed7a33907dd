"""Money formatting helpers.

Amounts are stored in minor units (paise); dividing by 100 is the only
conversion applied before formatting.
"""

from decimal import Decimal

from babel.numbers import format_currency as babel_format_currency

from eventhub.core.config import get_settings

MINOR_UNITS_PER_MAJOR = 100


def minor_to_major(amount: int | float) -> Decimal:
    """Convert a minor-unit amount to major units without binary rounding."""
    return Decimal(str(amount)) / MINOR_UNITS_PER_MAJOR


def format_currency(
    amount: int | float | Decimal,
    currency: str | None = None,
    locale: str | None = None,
) -> str:
    """
    Format a major-unit amount as a localized currency string.

    Defaults to the configured currency and locale (INR in `en_IN`), e.g.
    `format_currency(12450)` -> `"₹12,450.00"`.

    Parameters:
        amount: Amount in major units.
        currency: ISO 4217 code overriding the configured one.
        locale: Babel locale identifier overriding the configured one.

    Returns:
        str: The formatted amount, rounded to the currency's fraction digits.
    """
    settings = get_settings()
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    return babel_format_currency(
        amount,
        currency or settings.CURRENCY_CODE,
        locale=locale or settings.CURRENCY_LOCALE,
    )


def format_minor_units(amount: int | float) -> str:
    return format_currency(minor_to_major(amount))
