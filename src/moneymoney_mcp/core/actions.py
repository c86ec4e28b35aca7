"""
Routing of parameter objects to MoneyMoney AppleScript methods.
"""

from typing import Any, Dict, Type, Union

from moneymoney_mcp.core.params import (
    ActionParams,
    AddTransactionParams,
    CreateBankTransferParams,
    CreateDirectDebitParams,
    ExportAccountsParams,
    ExportCategoriesParams,
    ExportPortfolioParams,
    ExportTransactionsParams,
    SetTransactionParams,
)

# One case per remote method, each carrying its own parameters.
Action = Union[
    ExportAccountsParams,
    ExportCategoriesParams,
    ExportTransactionsParams,
    ExportPortfolioParams,
    AddTransactionParams,
    SetTransactionParams,
    CreateBankTransferParams,
    CreateDirectDebitParams,
]

METHOD_NAMES: Dict[Type[ActionParams], str] = {
    ExportAccountsParams: "exportAccounts",
    ExportCategoriesParams: "exportCategories",
    ExportTransactionsParams: "exportTransactions",
    ExportPortfolioParams: "exportPortfolio",
    AddTransactionParams: "addTransaction",
    SetTransactionParams: "setTransaction",
    CreateBankTransferParams: "createBankTransfer",
    CreateDirectDebitParams: "createDirectDebit",
}

# Asks MoneyMoney to answer with a property list instead of plain text.
PLIST_FORMAT_ARG = ("as", "plist")


def method_name(action: Action) -> str:
    """
    Get the MoneyMoney method an action calls.

    Args:
        action: Parameter object for one MoneyMoney method

    Returns:
        AppleScript method name, e.g. "exportTransactions"

    Raises:
        TypeError: If the object is not a known action
    """
    try:
        return METHOD_NAMES[type(action)]
    except KeyError:
        raise TypeError(f"Not a MoneyMoney action: {type(action).__name__}") from None


def build_envelope(action: Action, plist: bool = True) -> Dict[str, Any]:
    """
    Wrap an action in the call envelope passed to the OSA script.

    Args:
        action: Parameter object for one MoneyMoney method
        plist: Ask MoneyMoney to answer with a plist. Calls that only change
               data return nothing and are sent without the format argument.

    Returns:
        {"method": name, "args": payload}; "args" is left out for methods
        without arguments
    """
    envelope: Dict[str, Any] = {"method": method_name(action)}
    payload = action.to_payload()
    if payload is not None:
        if plist:
            key, value = PLIST_FORMAT_ARG
            payload[key] = value
        envelope["args"] = payload
    return envelope
