"""
Transaction model for MoneyMoney data.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, computed_field
from pydantic.alias_generators import to_camel

# MoneyMoney transaction ids are unsigned 64-bit integers.
MAX_TRANSACTION_ID = 2**64 - 1


class Transaction(BaseModel):
    """
    Represents a transaction exported from MoneyMoney.

    The id is assigned by MoneyMoney and is needed to modify the
    transaction later with setTransaction.
    """

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
    }

    # Required fields
    transaction_id: int = Field(alias="id", ge=0, le=MAX_TRANSACTION_ID)
    booking_date: datetime
    value_date: datetime
    name: str
    amount: float  # Negative = debit
    currency: str
    account_uuid: UUID
    category_uuid: UUID

    # Optional fields
    purpose: Optional[str] = None
    booked: bool = False
    checkmark: bool = False
    comment: str = ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def display_name(self) -> str:
        """Get the best display name for this transaction."""
        return self.name or self.purpose or "Unknown"


class TransactionsResponse(BaseModel):
    """Result of exportTransactions."""

    model_config = {"frozen": True}

    creator: str = ""
    transactions: List[Transaction] = Field(default_factory=list)
