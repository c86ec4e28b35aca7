"""
MCP tool definitions for MoneyMoney.

Exposes client functionality through the Model Context Protocol.
"""

from collections import defaultdict
from typing import Any, Dict, List, Optional, Union

from moneymoney_mcp.core.client import MoneyMoneyClient
from moneymoney_mcp.core.params import (
    AddTransactionParams,
    ExportPortfolioParams,
    ExportTransactionsParams,
    SetTransactionParams,
)
from moneymoney_mcp.models.account import parse_account_type
from moneymoney_mcp.utils.date_utils import PERIODS, parse_iso_date, parse_period

DEFAULT_PERIOD = "last_30_days"

# Binary icons are of no use to MCP clients.
_EXCLUDE = {"icon"}


class MoneyMoneyTools:
    """Collection of MCP tools for working with MoneyMoney."""

    def __init__(self, client: MoneyMoneyClient):
        """
        Initialize tools with a MoneyMoney client.

        Args:
            client: MoneyMoneyClient instance
        """
        self.client = client

    def get_accounts(
        self, account_type: Optional[str] = None, include_groups: bool = True
    ) -> Dict[str, Any]:
        """
        Get all accounts with balances.

        Args:
            account_type: Optional filter by account type, English or German
                         (e.g. "Giro account", "Kreditkarte")
            include_groups: Include account groups (default: True)

        Returns:
            Dict with account count, balance totals per currency and accounts
        """
        accounts = self.client.export_accounts()

        if account_type:
            wanted = parse_account_type(account_type)
            accounts = [acc for acc in accounts if acc.account_type == wanted]
        if not include_groups:
            accounts = [acc for acc in accounts if not acc.group]

        # Groups repeat the balances of their members
        totals: Dict[str, float] = defaultdict(float)
        for acc in accounts:
            if not acc.group:
                totals[acc.balance.currency] += acc.balance.amount

        return {
            "count": len(accounts),
            "total_balance": {code: round(total, 2) for code, total in totals.items()},
            "accounts": [
                acc.model_dump(mode="json", exclude=_EXCLUDE) for acc in accounts
            ],
        }

    def get_account_balance(self, account: str) -> Dict[str, Any]:
        """
        Get balance for a specific account.

        Args:
            account: Account UUID, account number or name

        Returns:
            Dict with account details and balance

        Raises:
            ValueError: If the account is not found
        """
        acc = self.client.find_account(account)
        if acc is None:
            raise ValueError(f"Account not found: {account}")

        return {
            "uuid": str(acc.uuid),
            "name": acc.name,
            "account_type": acc.model_dump(mode="json")["account_type"],
            "amount": acc.balance.amount,
            "currency": acc.balance.currency,
            "account_number": acc.account_number,
            "bank_code": acc.bank_code,
            "refresh_timestamp": acc.refresh_timestamp.isoformat(),
        }

    def get_categories(self, with_budget: bool = False) -> Dict[str, Any]:
        """
        Get all categories.

        Args:
            with_budget: Only return categories that have a budget

        Returns:
            Dict with category count and list of categories
        """
        categories = self.client.export_categories()
        if with_budget:
            categories = [cat for cat in categories if cat.budget is not None]

        return {
            "count": len(categories),
            "categories": [
                cat.model_dump(mode="json", exclude=_EXCLUDE) for cat in categories
            ],
        }

    def get_transactions(
        self,
        period: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        account: Optional[str] = None,
        category: Optional[str] = None,
        limit: int = 100,
    ) -> Dict[str, Any]:
        """
        Get transactions with optional filters.

        Args:
            period: Period shorthand (this_month, last_30_days, ytd, etc.)
            start_date: Export transactions from this date (YYYY-MM-DD)
            end_date: Export transactions up to this date (YYYY-MM-DD)
            account: Account UUID, account number, IBAN or name
            category: Category UUID or name
            limit: Maximum number of transactions to return (default: 100)

        Returns:
            Dict with transaction count and list of transactions,
            newest first
        """
        if period:
            start, end = parse_period(period)
        elif start_date:
            start = parse_iso_date(start_date)
            end = parse_iso_date(end_date) if end_date else None
        else:
            start, end = parse_period(DEFAULT_PERIOD)

        params = ExportTransactionsParams(start)
        if end is not None:
            params = params.with_to_date(end)
        if account:
            params = params.with_from_account(account)
        if category:
            params = params.with_from_category(category)

        response = self.client.export_transactions(params)
        transactions = sorted(
            response.transactions, key=lambda txn: txn.booking_date, reverse=True
        )[:limit]

        return {
            "period": {
                "start_date": start.isoformat(),
                "end_date": end.isoformat() if end else None,
            },
            "count": len(transactions),
            "transactions": [txn.model_dump(mode="json") for txn in transactions],
        }

    def get_portfolio(
        self, account: Optional[str] = None, asset_class: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Get securities held in portfolio accounts.

        Args:
            account: Optional portfolio account filter
            asset_class: Optional asset class filter

        Returns:
            Dict with security count and list of securities
        """
        params = ExportPortfolioParams()
        if account:
            params = params.with_from_account(account)
        if asset_class:
            params = params.with_from_asset_class(asset_class)

        securities = self.client.export_portfolio(params).securities
        return {
            "count": len(securities),
            "securities": [sec.model_dump(mode="json") for sec in securities],
        }

    def add_transaction(
        self,
        account: str,
        date: str,
        name: str,
        amount: float,
        purpose: Optional[str] = None,
        category: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Add a transaction to an offline account.

        Args:
            account: Target account (UUID, account number, IBAN or name)
            date: Booking date (YYYY-MM-DD)
            name: Counterparty name
            amount: Amount, negative for expenses
            purpose: Optional purpose text
            category: Optional category (UUID or name)

        Returns:
            Dict confirming the added transaction
        """
        params = AddTransactionParams(account, parse_iso_date(date), name, amount)
        if purpose:
            params = params.with_purpose(purpose)
        if category:
            params = params.with_category(category)

        self.client.add_transaction(params)
        return {"status": "added", "transaction": params.to_payload()}

    def set_transaction(
        self,
        transaction_id: int,
        checkmark: Optional[Union[bool, str]] = None,
        category: Optional[str] = None,
        comment: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Change checkmark, category or comment of a transaction.

        Args:
            transaction_id: Transaction id from get_transactions
            checkmark: True/"on" or False/"off"
            category: New category (UUID or name)
            comment: New comment

        Returns:
            Dict confirming the change

        Raises:
            ValueError: If nothing is to be changed
        """
        if checkmark is None and category is None and comment is None:
            raise ValueError("Nothing to change: give checkmark, category or comment")

        params = SetTransactionParams(transaction_id)
        if checkmark is not None:
            params = params.with_checkmark(checkmark)
        if category is not None:
            params = params.with_category(category)
        if comment is not None:
            params = params.with_comment(comment)

        self.client.set_transaction(params)
        return {"status": "updated", "changes": params.to_payload()}


_DATE_SCHEMA = {"type": "string", "pattern": r"^\d{4}-\d{2}-\d{2}$"}
_CATEGORY_SCHEMA = {"type": "string", "description": "Category UUID or name"}


def create_tool_schemas() -> List[Dict[str, Any]]:
    """
    Create MCP tool schemas for all tools.

    Returns:
        List of tool schema definitions
    """
    return [
        {
            "name": "get_accounts",
            "description": (
                "Get all MoneyMoney accounts with balances. Optionally filter by "
                "account type (Giro account, Savings account, Credit card, ...)."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "account_type": {
                        "type": "string",
                        "description": "Filter by account type (English or German)",
                    },
                    "include_groups": {
                        "type": "boolean",
                        "description": "Include account groups (default: true)",
                        "default": True,
                    },
                },
            },
        },
        {
            "name": "get_account_balance",
            "description": "Get balance and details for one account.",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "account": {
                        "type": "string",
                        "description": "Account UUID, account number or name",
                    },
                },
                "required": ["account"],
            },
        },
        {
            "name": "get_categories",
            "description": "Get all categories, including budgets where set.",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "with_budget": {
                        "type": "boolean",
                        "description": "Only categories with a budget",
                        "default": False,
                    },
                },
            },
        },
        {
            "name": "get_transactions",
            "description": (
                "Export transactions for a date range, optionally limited to an "
                "account or category. Use 'period' for common date ranges; "
                "without dates, the last 30 days are returned."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "period": {
                        "type": "string",
                        "enum": list(PERIODS),
                        "description": "Period shorthand",
                    },
                    "start_date": {**_DATE_SCHEMA, "description": "Start date"},
                    "end_date": {**_DATE_SCHEMA, "description": "End date"},
                    "account": {
                        "type": "string",
                        "description": "Account UUID, account number, IBAN or name",
                    },
                    "category": {
                        "type": "string",
                        "description": "Category UUID or name",
                    },
                    "limit": {
                        "type": "integer",
                        "description": "Maximum number of results (default: 100)",
                        "default": 100,
                    },
                },
            },
        },
        {
            "name": "get_portfolio",
            "description": "Get securities held in portfolio accounts.",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "account": {
                        "type": "string",
                        "description": "Portfolio account UUID or name",
                    },
                    "asset_class": {
                        "type": "string",
                        "description": "Asset class",
                    },
                },
            },
        },
        {
            "name": "add_transaction",
            "description": "Add a transaction to an offline account.",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "account": {
                        "type": "string",
                        "description": "Account UUID, account number, IBAN or name",
                    },
                    "date": {**_DATE_SCHEMA, "description": "Booking date"},
                    "name": {"type": "string", "description": "Counterparty name"},
                    "amount": {
                        "type": "number",
                        "description": "Amount, negative for expenses",
                    },
                    "purpose": {"type": "string", "description": "Purpose text"},
                    "category": _CATEGORY_SCHEMA,
                },
                "required": ["account", "date", "name", "amount"],
            },
        },
        {
            "name": "set_transaction",
            "description": "Change checkmark, category or comment of a transaction.",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "transaction_id": {
                        "type": "integer",
                        "minimum": 0,
                        "description": "Transaction id from get_transactions",
                    },
                    "checkmark": {"type": "boolean", "description": "Checkmark on/off"},
                    "category": _CATEGORY_SCHEMA,
                    "comment": {"type": "string", "description": "Comment text"},
                },
                "required": ["transaction_id"],
            },
        },
    ]
