"""
Utility functions for MoneyMoney MCP.
"""

from moneymoney_mcp.utils.date_utils import (
    get_month_range,
    parse_iso_date,
    parse_period,
)

__all__ = [
    "get_month_range",
    "parse_iso_date",
    "parse_period",
]
