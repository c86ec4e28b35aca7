"""
Account model for MoneyMoney data.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Dict, Union
from uuid import UUID

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from moneymoney_mcp.core.exceptions import DecodeError, EmptyResponseError
from moneymoney_mcp.models.currency import validate_currency_code


class AccountType(str, Enum):
    """
    Account types known to MoneyMoney.

    Values are the canonical English names sent back to MoneyMoney.
    """

    GROUP = "Account group"
    GIRO = "Giro account"
    SAVINGS = "Savings account"
    FIXED_TERM_DEPOSIT = "Fixed term deposit"
    LOAN = "Loan account"
    CREDIT_CARD = "Credit card"
    CASH = "Cash"
    OTHER = "Other"


# MoneyMoney reports account types in the language of its UI.
_ACCOUNT_TYPE_LOOKUP: Dict[str, AccountType] = {
    "account group": AccountType.GROUP,
    "kontengruppe": AccountType.GROUP,
    "giro account": AccountType.GIRO,
    "girokonto": AccountType.GIRO,
    "savings account": AccountType.SAVINGS,
    "sparkonto": AccountType.SAVINGS,
    "fixed term deposit": AccountType.FIXED_TERM_DEPOSIT,
    "festgeldanlage": AccountType.FIXED_TERM_DEPOSIT,
    "loan account": AccountType.LOAN,
    "darlehenskonto": AccountType.LOAN,
    "credit card": AccountType.CREDIT_CARD,
    "kreditkarte": AccountType.CREDIT_CARD,
    "cash": AccountType.CASH,
    "bargeld": AccountType.CASH,
    "other": AccountType.OTHER,
    "sonstige": AccountType.OTHER,
}


def parse_account_type(value: str) -> Union[AccountType, str]:
    """
    Map an English or German account type name to AccountType.

    Unrecognized names are returned verbatim as a custom type.

    Args:
        value: Account type as reported by MoneyMoney

    Returns:
        Matching AccountType member, or the original string
    """
    return _ACCOUNT_TYPE_LOOKUP.get(value.lower(), value)


def account_type_to_str(value: Union[AccountType, str]) -> str:
    """Return the canonical English name for an account type."""
    if isinstance(value, AccountType):
        return value.value
    return value


class AccountBalance(BaseModel):
    """Monetary amount with its ISO 4217 currency code."""

    model_config = {"frozen": True}

    amount: float
    currency: str

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        return validate_currency_code(v)


def decode_balance(value: Any) -> AccountBalance:
    """
    Decode MoneyMoney's balance list into an AccountBalance.

    MoneyMoney wraps the balance in a list of (amount, currency) pairs; only
    the first pair is used.

    Args:
        value: Sequence of [amount, currency_code] pairs

    Returns:
        AccountBalance for the first pair

    Raises:
        EmptyResponseError: If the sequence is empty
        InvalidCurrencyError: If the currency code is not ISO 4217
        DecodeError: If the value does not have the expected shape
    """
    if not isinstance(value, (list, tuple)):
        raise DecodeError(f"Expected a list of balances, got {type(value).__name__}")
    if len(value) == 0:
        raise EmptyResponseError("Account balance list is empty")

    first = value[0]
    if not isinstance(first, (list, tuple)) or len(first) != 2:
        raise DecodeError(f"Malformed balance entry: {first!r}")

    amount, code = first
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise DecodeError(f"Balance amount is not a number: {amount!r}")

    return AccountBalance(amount=float(amount), currency=validate_currency_code(code))


class Account(BaseModel):
    """
    Represents an account (or account group) exported from MoneyMoney.
    """

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
        "ser_json_bytes": "base64",
    }

    # Required fields
    uuid: UUID
    name: str
    balance: AccountBalance
    account_type: Annotated[
        Union[AccountType, str], Field(alias="type", union_mode="left_to_right")
    ]

    # Bank details
    owner: str = ""
    account_number: str = ""
    bank_code: str = ""
    currency: str = ""

    # Hierarchy
    group: bool = False
    portfolio: bool = False
    indentation: int = Field(default=0, ge=0, le=255)

    # Metadata
    icon: bytes = b""
    refresh_timestamp: datetime
    attributes: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("balance", mode="before")
    @classmethod
    def decode_balance_list(cls, v: Any) -> Any:
        if isinstance(v, (AccountBalance, dict)):
            return v
        return decode_balance(v)

    @field_validator("account_type", mode="before")
    @classmethod
    def normalize_account_type(cls, v: Any) -> Any:
        if isinstance(v, str) and not isinstance(v, AccountType):
            return parse_account_type(v)
        return v
