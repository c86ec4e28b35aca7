"""
Security (portfolio holding) model for MoneyMoney data.
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class Security(BaseModel):
    """
    Represents a security held in a MoneyMoney portfolio account.

    MoneyMoney leaves out identifiers and prices it does not know, so most
    fields default to empty values.
    """

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
    }

    # Required fields
    uuid: UUID
    name: str
    quantity: float
    account_uuid: UUID
    account_name: str
    market_value: float

    # Identifiers
    isin: str = ""
    wkn: str = ""
    symbol: str = ""

    # Prices and performance
    market_price: float = 0.0
    currency: str = ""
    purchase_price: float = 0.0
    purchase_value: float = 0.0
    profit: float = 0.0
    profit_percent: float = 0.0

    # Classification
    asset_class: str = ""

    @property
    def identifier(self) -> Optional[str]:
        """ISIN, WKN or ticker symbol, whichever is known first."""
        return self.isin or self.wkn or self.symbol or None


class PortfolioResponse(BaseModel):
    """Result of exportPortfolio."""

    model_config = {"frozen": True}

    securities: List[Security] = Field(default_factory=list)
