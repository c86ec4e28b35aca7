"""
Pydantic models for MoneyMoney data structures.
"""

from moneymoney_mcp.models.account import (
    Account,
    AccountBalance,
    AccountType,
    account_type_to_str,
    decode_balance,
    parse_account_type,
)
from moneymoney_mcp.models.category import (
    BudgetPeriod,
    Category,
    CategoryBudget,
    decode_budget,
)
from moneymoney_mcp.models.security import PortfolioResponse, Security
from moneymoney_mcp.models.transaction import Transaction, TransactionsResponse

__all__ = [
    "Account",
    "AccountBalance",
    "AccountType",
    "BudgetPeriod",
    "Category",
    "CategoryBudget",
    "PortfolioResponse",
    "Security",
    "Transaction",
    "TransactionsResponse",
    "account_type_to_str",
    "decode_balance",
    "decode_budget",
    "parse_account_type",
]
