"""
MCP tools for MoneyMoney.
"""

from moneymoney_mcp.tools.tools import MoneyMoneyTools, create_tool_schemas

__all__ = ["MoneyMoneyTools", "create_tool_schemas"]
