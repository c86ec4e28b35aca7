"""
MoneyMoney MCP - typed access to the MoneyMoney macOS app via AppleScript.
"""

from moneymoney_mcp.core.client import MoneyMoneyClient
from moneymoney_mcp.core.exceptions import (
    DecodeError,
    EmptyResponseError,
    InvalidCurrencyError,
    MissingParameterError,
    MoneyMoneyError,
    ScriptExecutionError,
)

__version__ = "0.1.0"

__all__ = [
    "MoneyMoneyClient",
    "DecodeError",
    "EmptyResponseError",
    "InvalidCurrencyError",
    "MissingParameterError",
    "MoneyMoneyError",
    "ScriptExecutionError",
]
