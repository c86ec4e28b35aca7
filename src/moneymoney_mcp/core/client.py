"""
Client for MoneyMoney's AppleScript API.

Every method makes exactly one blocking call to MoneyMoney. Nothing is
cached; changes made in MoneyMoney are visible on the next export.
"""

import logging
from typing import Any, List, Optional, Union
from uuid import UUID

from moneymoney_mcp.core.actions import Action, build_envelope, method_name
from moneymoney_mcp.core.decoder import validate_value
from moneymoney_mcp.core.params import (
    AddTransactionParams,
    CreateBankTransferParams,
    CreateDirectDebitParams,
    ExportAccountsParams,
    ExportCategoriesParams,
    ExportPortfolioParams,
    ExportTransactionsParams,
    SetTransactionParams,
)
from moneymoney_mcp.core.transport import OsaScriptTransport, Transport, execute_plist
from moneymoney_mcp.models.account import Account
from moneymoney_mcp.models.category import Category
from moneymoney_mcp.models.security import PortfolioResponse
from moneymoney_mcp.models.transaction import TransactionsResponse

logger = logging.getLogger(__name__)

# Offline accounts used for integration testing are named with this prefix.
TEST_ACCOUNT_PREFIX = "test-"


class MoneyMoneyClient:
    """
    Typed access to MoneyMoney.

    Wraps the transport and decoder and provides one method per
    MoneyMoney AppleScript method.
    """

    def __init__(self, transport: Optional[Transport] = None):
        """
        Initialize the client.

        Args:
            transport: Transport used to reach MoneyMoney.
                      If None, uses osascript.
        """
        if transport is None:
            transport = OsaScriptTransport()

        self.transport = transport

    def is_available(self) -> bool:
        """Check whether MoneyMoney can be scripted from this machine."""
        check = getattr(self.transport, "is_available", None)
        if check is None:
            return True
        return bool(check())

    # Low-level calls

    def call_action(self, action: Action) -> Optional[str]:
        """Run an action and return the raw response text."""
        logger.debug(f"{method_name(action)}: raw call")
        return self.transport.execute(build_envelope(action))

    def call_action_void(self, action: Action) -> None:
        """Run an action that changes data; raises unless MoneyMoney acknowledges it."""
        logger.debug(f"{method_name(action)}: acknowledged call")
        self.transport.execute_void(build_envelope(action, plist=False))

    def call_action_plist(self, action: Action, shape: Any) -> Any:
        """
        Run an action and decode its plist response into ``shape``.

        Raises:
            ScriptExecutionError: If the call fails
            EmptyResponseError: If MoneyMoney returned nothing
            DecodeError: If the response does not match ``shape``
        """
        logger.debug(f"{method_name(action)}: plist call")
        value = execute_plist(self.transport, build_envelope(action))
        return validate_value(value, shape)

    # Export methods

    def export_accounts(self) -> List[Account]:
        """
        Export all accounts, including account groups.

        Returns:
            Accounts in the order MoneyMoney shows them
        """
        return self.call_action_plist(ExportAccountsParams(), List[Account])

    def export_categories(self) -> List[Category]:
        """
        Export all categories with their budgets.

        Returns:
            Categories in the order MoneyMoney shows them
        """
        return self.call_action_plist(ExportCategoriesParams(), List[Category])

    def export_transactions(
        self, params: ExportTransactionsParams
    ) -> TransactionsResponse:
        """
        Export transactions.

        Args:
            params: Date range and optional account/category filters

        Returns:
            TransactionsResponse with the matching transactions
        """
        return self.call_action_plist(params, TransactionsResponse)

    def export_portfolio(
        self, params: Optional[ExportPortfolioParams] = None
    ) -> PortfolioResponse:
        """
        Export securities held in portfolio accounts.

        Args:
            params: Optional account/asset class filters

        Returns:
            PortfolioResponse with the matching securities
        """
        if params is None:
            params = ExportPortfolioParams()
        return self.call_action_plist(params, PortfolioResponse)

    # Transaction management

    def add_transaction(self, params: AddTransactionParams) -> None:
        """
        Add a transaction to an offline account.

        MoneyMoney does not return the new transaction; export
        transactions afterwards to learn its id.
        """
        self.call_action_void(params)
        logger.info(f"Added transaction to {params.to_account} on {params.on_date}")

    def set_transaction(self, params: SetTransactionParams) -> None:
        """Change checkmark, category or comment of an existing transaction."""
        self.call_action_void(params)
        logger.info(f"Updated transaction {params.transaction_id}")

    # Payments (experimental)

    def create_bank_transfer(self, params: CreateBankTransferParams) -> List[Any]:
        """Create a SEPA transfer. Returns MoneyMoney's raw plist answer."""
        return self.call_action_plist(params, List[Any])

    def create_direct_debit(self, params: CreateDirectDebitParams) -> List[Any]:
        """Create a SEPA direct debit. Returns MoneyMoney's raw plist answer."""
        return self.call_action_plist(params, List[Any])

    # Lookups

    def find_account(self, account: Union[str, UUID]) -> Optional[Account]:
        """
        Find an account by UUID, account number or name.

        Args:
            account: UUID, account number or exact account name

        Returns:
            The first matching account, or None
        """
        key = str(account)
        for acc in self.export_accounts():
            if key in (str(acc.uuid), acc.account_number, acc.name):
                return acc
        return None

    def get_test_accounts(self, prefix: str = TEST_ACCOUNT_PREFIX) -> List[Account]:
        """
        Get accounts reserved for testing.

        Args:
            prefix: Name prefix of test accounts (default: "test-")

        Returns:
            Accounts whose name starts with ``prefix``
        """
        return [acc for acc in self.export_accounts() if acc.name.startswith(prefix)]
