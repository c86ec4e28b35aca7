"""
Core functionality for MoneyMoney MCP.
"""

from moneymoney_mcp.core.actions import Action, build_envelope, method_name
from moneymoney_mcp.core.client import MoneyMoneyClient
from moneymoney_mcp.core.decoder import (
    decode_accounts,
    decode_categories,
    decode_plist,
    decode_portfolio,
    decode_response,
    decode_transactions,
)
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
from moneymoney_mcp.core.exceptions import (
    DecodeError,
    EmptyResponseError,
    InvalidCurrencyError,
    MissingParameterError,
    MoneyMoneyError,
    ScriptExecutionError,
)

__all__ = [
    "Action",
    "AddTransactionParams",
    "CreateBankTransferParams",
    "CreateDirectDebitParams",
    "ExportAccountsParams",
    "ExportCategoriesParams",
    "ExportPortfolioParams",
    "ExportTransactionsParams",
    "MoneyMoneyClient",
    "OsaScriptTransport",
    "SetTransactionParams",
    "Transport",
    "build_envelope",
    "decode_accounts",
    "decode_categories",
    "decode_plist",
    "decode_portfolio",
    "decode_response",
    "decode_transactions",
    "execute_plist",
    "method_name",
    "DecodeError",
    "EmptyResponseError",
    "InvalidCurrencyError",
    "MissingParameterError",
    "MoneyMoneyError",
    "ScriptExecutionError",
]
