"""
Category model for MoneyMoney data.
"""

from enum import Enum
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from moneymoney_mcp.models.currency import validate_currency_code


class BudgetPeriod(str, Enum):
    """Budget periods offered by MoneyMoney."""

    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"
    TOTAL = "total"


class CategoryBudget(BaseModel):
    """
    Budget attached to a category.

    ``available`` is the amount left in the current period.
    """

    model_config = {"frozen": True, "strict": True}

    amount: float
    available: float
    period: str

    @field_validator("amount", "available", mode="before")
    @classmethod
    def int_to_float(cls, v: Any) -> Any:
        # plist <integer> values arrive as int
        if isinstance(v, int) and not isinstance(v, bool):
            return float(v)
        return v


def decode_budget(value: Any) -> Optional[CategoryBudget]:
    """
    Decode a category budget, treating anything but a full budget as absent.

    MoneyMoney sends an empty dictionary for categories without a budget.
    Partially filled or otherwise malformed budgets are also reported as
    None rather than failing the whole category.

    Args:
        value: Raw budget value from the plist

    Returns:
        CategoryBudget, or None
    """
    if isinstance(value, CategoryBudget):
        return value
    if not isinstance(value, dict) or not value:
        return None
    try:
        return CategoryBudget.model_validate(value)
    except ValidationError:
        return None


class Category(BaseModel):
    """
    Represents a category (or category group) exported from MoneyMoney.

    Categories form a tree; ``indentation`` is the depth shown in the UI.
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
    currency: str

    # Optional fields
    budget: Optional[CategoryBudget] = None
    is_default: bool = Field(default=False, alias="default")
    group: bool = False
    indentation: int = Field(default=0, ge=0, le=255)
    icon: bytes = b""

    @field_validator("budget", mode="before")
    @classmethod
    def decode_budget_value(cls, v: Any) -> Optional[CategoryBudget]:
        return decode_budget(v)

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        return validate_currency_code(v)
