"""
ISO 4217 currency code validation.
"""

import pycountry

from moneymoney_mcp.core.exceptions import InvalidCurrencyError


def validate_currency_code(code: object) -> str:
    """
    Check that a value is a recognized ISO 4217 alphabetic currency code.

    Args:
        code: Raw value from a MoneyMoney response

    Returns:
        The code, unchanged

    Raises:
        InvalidCurrencyError: If the code is not a known currency
    """
    if not isinstance(code, str) or len(code) != 3 or not code.isupper():
        raise InvalidCurrencyError(str(code))
    if pycountry.currencies.get(alpha_3=code) is None:
        raise InvalidCurrencyError(code)
    return code
