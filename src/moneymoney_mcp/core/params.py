"""
Request parameters for MoneyMoney AppleScript methods.

Each remote method has one parameter model. Required values are taken by the
constructor, optional values are set with chained ``with_*`` calls that return
a modified copy:

    params = ExportTransactionsParams(date(2024, 1, 1)).with_from_account("Giro")

``to_payload()`` produces the argument object MoneyMoney expects: camelCase
keys, dates as YYYY-MM-DD, and unset options left out entirely. MoneyMoney
treats an explicit null differently from a missing argument.
"""

from datetime import date
from typing import Any, Dict, Literal, Optional, TypeVar, Union

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from moneymoney_mcp.core.exceptions import MissingParameterError
from moneymoney_mcp.models.transaction import MAX_TRANSACTION_ID

P = TypeVar("P", bound="ActionParams")


class ActionParams(BaseModel):
    """Base class for all MoneyMoney method parameters."""

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
        "extra": "forbid",
    }

    @model_validator(mode="before")
    @classmethod
    def check_required(cls, data: Any) -> Any:
        """Raise MissingParameterError for required fields that are unset or None."""
        if not isinstance(data, dict):
            return data

        missing = []
        for name, field in cls.model_fields.items():
            if not field.is_required():
                continue
            alias = field.alias or name
            if data.get(name) is None and data.get(alias) is None:
                missing.append(alias)

        if missing:
            raise MissingParameterError(cls.__name__, missing)
        return data

    def with_options(self: P, **changes: Any) -> P:
        """
        Return a validated copy with the given fields replaced.

        Args:
            **changes: Field values keyed by Python field name

        Returns:
            New parameter object of the same type
        """
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)

    def to_payload(self) -> Optional[Dict[str, Any]]:
        """
        Serialize to the argument object sent to MoneyMoney.

        Returns:
            Dict keyed by MoneyMoney argument names, or None for methods
            without arguments
        """
        if not type(self).model_fields:
            return None
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ExportAccountsParams(ActionParams):
    """exportAccounts takes no arguments."""


class ExportCategoriesParams(ActionParams):
    """exportCategories takes no arguments."""


class ExportTransactionsParams(ActionParams):
    """
    Parameters for exportTransactions.

    Exports transactions booked on or after ``from_date``, optionally limited
    to an end date, an account and a category.
    """

    from_date: date
    to_date: Optional[date] = None
    from_account: Optional[str] = None
    from_category: Optional[str] = None

    def __init__(
        self, from_date: Optional[Union[date, str]] = None, **data: Any
    ) -> None:
        if from_date is not None:
            data["from_date"] = from_date
        super().__init__(**data)

    def with_to_date(self, to_date: Union[date, str]) -> "ExportTransactionsParams":
        """Export transactions booked up to and including this date."""
        return self.with_options(to_date=to_date)

    def with_from_account(self, account: str) -> "ExportTransactionsParams":
        """Limit the export to one account (UUID, account number, IBAN or name)."""
        return self.with_options(from_account=account)

    def with_from_category(self, category: str) -> "ExportTransactionsParams":
        """Limit the export to one category (UUID or name)."""
        return self.with_options(from_category=category)


class ExportPortfolioParams(ActionParams):
    """Parameters for exportPortfolio. All filters are optional."""

    from_account: Optional[str] = None
    from_asset_class: Optional[str] = None

    def with_from_account(self, account: str) -> "ExportPortfolioParams":
        """Limit the export to one portfolio account (UUID or name)."""
        return self.with_options(from_account=account)

    def with_from_asset_class(self, asset_class: str) -> "ExportPortfolioParams":
        """Limit the export to one asset class."""
        return self.with_options(from_asset_class=asset_class)


class AddTransactionParams(ActionParams):
    """
    Parameters for addTransaction.

    MoneyMoney only accepts new transactions for offline accounts.
    """

    to_account: str
    on_date: date
    to: str
    amount: float
    purpose: Optional[str] = None
    category: Optional[str] = None

    def __init__(
        self,
        to_account: Optional[str] = None,
        on_date: Optional[Union[date, str]] = None,
        to: Optional[str] = None,
        amount: Optional[float] = None,
        **data: Any,
    ) -> None:
        required = {
            "to_account": to_account,
            "on_date": on_date,
            "to": to,
            "amount": amount,
        }
        data.update({k: v for k, v in required.items() if v is not None})
        super().__init__(**data)

    def with_purpose(self, purpose: str) -> "AddTransactionParams":
        """Set the purpose text of the new transaction."""
        return self.with_options(purpose=purpose)

    def with_category(self, category: str) -> "AddTransactionParams":
        """Assign the new transaction to a category (UUID or name)."""
        return self.with_options(category=category)


class SetTransactionParams(ActionParams):
    """
    Parameters for setTransaction.

    The transaction id comes from a previous exportTransactions call.
    """

    transaction_id: int = Field(alias="id", ge=0, le=MAX_TRANSACTION_ID)
    checkmark_to: Optional[Literal["on", "off"]] = None
    category_to: Optional[str] = None
    comment_to: Optional[str] = None

    def __init__(self, transaction_id: Optional[int] = None, **data: Any) -> None:
        if transaction_id is not None:
            data["transaction_id"] = transaction_id
        super().__init__(**data)

    @field_validator("checkmark_to", mode="before")
    @classmethod
    def bool_to_on_off(cls, v: Any) -> Any:
        if isinstance(v, bool):
            return "on" if v else "off"
        return v

    def with_checkmark(self, value: Union[bool, str]) -> "SetTransactionParams":
        """Set the checkmark; accepts "on", "off" or a bool."""
        return self.with_options(checkmark_to=value)

    def with_category(self, category: str) -> "SetTransactionParams":
        """Move the transaction to another category (UUID or name)."""
        return self.with_options(category_to=category)

    def with_comment(self, comment: str) -> "SetTransactionParams":
        """Replace the comment of the transaction."""
        return self.with_options(comment_to=comment)


class CreateBankTransferParams(ActionParams):
    """
    Parameters for createBankTransfer (experimental).

    MoneyMoney opens a prefilled SEPA transfer window, or queues it in the
    outbox when ``into`` is "outbox".
    """

    from_account: Optional[str] = None
    to: Optional[str] = None
    iban: Optional[str] = None
    bic: Optional[str] = None
    amount: Optional[float] = None
    purpose: Optional[str] = None
    endtoend_reference: Optional[str] = None
    purpose_code: Optional[str] = None
    instrument_code: Optional[str] = None
    scheduled_date: Optional[date] = None
    into: Optional[str] = None

    def with_from_account(self, account: str) -> "CreateBankTransferParams":
        return self.with_options(from_account=account)

    def with_recipient(
        self, name: str, iban: str, bic: Optional[str] = None
    ) -> "CreateBankTransferParams":
        return self.with_options(to=name, iban=iban, bic=bic)

    def with_amount(self, amount: float) -> "CreateBankTransferParams":
        return self.with_options(amount=amount)

    def with_purpose(self, purpose: str) -> "CreateBankTransferParams":
        return self.with_options(purpose=purpose)


class CreateDirectDebitParams(ActionParams):
    """Parameters for createDirectDebit (experimental)."""

    from_account: Optional[str] = None
    for_debtor: Optional[str] = Field(default=None, alias="for")
    iban: Optional[str] = None
    bic: Optional[str] = None
    amount: Optional[float] = None
    purpose: Optional[str] = None
    endtoend_reference: Optional[str] = None
    purpose_code: Optional[str] = None
    instrument_code: Optional[str] = None
    sequence_code: Optional[str] = None
    mandate_reference: Optional[str] = None
    mandate_date: Optional[date] = None
    scheduled_date: Optional[date] = None
    into: Optional[str] = None

    def with_from_account(self, account: str) -> "CreateDirectDebitParams":
        return self.with_options(from_account=account)

    def with_debtor(
        self, name: str, iban: str, bic: Optional[str] = None
    ) -> "CreateDirectDebitParams":
        return self.with_options(for_debtor=name, iban=iban, bic=bic)

    def with_amount(self, amount: float) -> "CreateDirectDebitParams":
        return self.with_options(amount=amount)

    def with_mandate(
        self, reference: str, signed_on: Union[date, str]
    ) -> "CreateDirectDebitParams":
        return self.with_options(mandate_reference=reference, mandate_date=signed_on)
