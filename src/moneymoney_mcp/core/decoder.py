"""
Property list decoder for MoneyMoney responses.

MoneyMoney answers export calls with an XML property list. The decoder parses
it and validates the result into the pydantic models.
"""

import plistlib
from datetime import datetime, timezone
from typing import Any, List, Optional, Union
from xml.parsers.expat import ExpatError

from pydantic import TypeAdapter, ValidationError

from moneymoney_mcp.core.exceptions import DecodeError, EmptyResponseError
from moneymoney_mcp.models.account import Account
from moneymoney_mcp.models.category import Category
from moneymoney_mcp.models.security import PortfolioResponse
from moneymoney_mcp.models.transaction import TransactionsResponse


def _to_aware(value: Any) -> Any:
    """
    Attach UTC to the naive datetimes plistlib produces.

    Args:
        value: Parsed plist value

    Returns:
        The same structure with every datetime timezone-aware
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    if isinstance(value, dict):
        return {key: _to_aware(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_to_aware(item) for item in value]
    return value


def decode_plist(payload: Optional[Union[str, bytes]]) -> Any:
    """
    Parse a raw plist response.

    Args:
        payload: Response text or bytes as returned by the transport

    Returns:
        Parsed plist value with timezone-aware datetimes

    Raises:
        EmptyResponseError: If there is no payload
        DecodeError: If the payload is not a valid plist
    """
    if payload is None or len(payload) == 0:
        raise EmptyResponseError()

    data = payload.encode("utf-8") if isinstance(payload, str) else payload
    # plistlib raises AttributeError or TypeError for some malformed elements
    try:
        value = plistlib.loads(data)
    except (
        plistlib.InvalidFileException,
        ExpatError,
        ValueError,
        AttributeError,
        TypeError,
    ) as e:
        raise DecodeError(f"Plist deserialization failed: {e}") from e

    return _to_aware(value)


def decode_response(payload: Optional[Union[str, bytes]], shape: Any) -> Any:
    """
    Parse a raw plist response into the given type.

    Args:
        payload: Response text or bytes as returned by the transport
        shape: Target type, e.g. ``List[Account]`` or ``TransactionsResponse``

    Returns:
        Validated instance of ``shape``

    Raises:
        EmptyResponseError: If there is no payload (or a balance list is empty)
        DecodeError: If the payload does not match ``shape``
        InvalidCurrencyError: If a currency code is not ISO 4217
    """
    return validate_value(decode_plist(payload), shape)


def validate_value(value: Any, shape: Any) -> Any:
    """
    Validate an already parsed plist value into the given type.

    Raises:
        DecodeError: If the value does not match ``shape``
    """
    try:
        return TypeAdapter(shape).validate_python(value)
    except ValidationError as e:
        raise DecodeError(f"Unexpected response structure: {e}") from e


def decode_accounts(payload: Optional[Union[str, bytes]]) -> List[Account]:
    """Decode an exportAccounts response."""
    return decode_response(payload, List[Account])


def decode_categories(payload: Optional[Union[str, bytes]]) -> List[Category]:
    """Decode an exportCategories response."""
    return decode_response(payload, List[Category])


def decode_transactions(payload: Optional[Union[str, bytes]]) -> TransactionsResponse:
    """Decode an exportTransactions response."""
    return decode_response(payload, TransactionsResponse)


def decode_portfolio(payload: Optional[Union[str, bytes]]) -> PortfolioResponse:
    """Decode an exportPortfolio response."""
    return decode_response(payload, PortfolioResponse)
