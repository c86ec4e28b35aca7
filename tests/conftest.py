"""
Pytest configuration and fixtures for moneymoney-mcp tests.
"""

import plistlib
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

import pytest

from moneymoney_mcp.core.client import MoneyMoneyClient
from moneymoney_mcp.core.exceptions import ScriptExecutionError

CHECKING_UUID = "7a3c6f8e-2b1d-4e5f-9a0b-1c2d3e4f5a6b"
CASH_UUID = "0f1e2d3c-4b5a-6978-8796-a5b4c3d2e1f0"
GROUP_UUID = "11111111-2222-3333-4444-555555555555"
CATEGORY_UUID = "9e8d7c6b-5a49-3827-1605-f4e3d2c1b0a9"


class FakeTransport:
    """In-memory stand-in for osascript that records every envelope."""

    def __init__(
        self,
        responses: Optional[Dict[str, Optional[str]]] = None,
        acknowledge: bool = True,
    ):
        self.responses = responses or {}
        self.acknowledge = acknowledge
        self.calls: List[Dict[str, Any]] = []

    def is_available(self) -> bool:
        return True

    def execute(self, envelope: Dict[str, Any]) -> Optional[str]:
        self.calls.append(envelope)
        return self.responses.get(envelope["method"])

    def execute_void(self, envelope: Dict[str, Any]) -> None:
        self.calls.append(envelope)
        if not self.acknowledge:
            method = envelope["method"]
            raise ScriptExecutionError(f"MoneyMoney did not acknowledge {method}")


def to_plist(value: Any) -> str:
    """Encode a value the way MoneyMoney answers export calls."""
    return plistlib.dumps(value).decode("utf-8")


def make_account(**overrides: Any) -> Dict[str, Any]:
    account = {
        "accountNumber": "DE89370400440532013000",
        "attributes": {},
        "balance": [[1234.56, "EUR"]],
        "bankCode": "COBADEFFXXX",
        "currency": "EUR",
        "group": False,
        "icon": b"\x89PNG\r\n",
        "indentation": 1,
        "name": "test-checking",
        "owner": "Erika Mustermann",
        "portfolio": False,
        "refreshTimestamp": datetime(2024, 1, 15, 9, 30),
        "type": "Girokonto",
        "uuid": CHECKING_UUID,
    }
    account.update(overrides)
    return account


def make_category(**overrides: Any) -> Dict[str, Any]:
    category = {
        "budget": {},
        "currency": "EUR",
        "default": False,
        "group": False,
        "icon": b"",
        "indentation": 1,
        "name": "Groceries",
        "uuid": CATEGORY_UUID,
    }
    category.update(overrides)
    return category


def make_transaction(**overrides: Any) -> Dict[str, Any]:
    transaction = {
        "id": 12345,
        "bookingDate": datetime(2024, 1, 2, 12, 0),
        "valueDate": datetime(2024, 1, 2, 12, 0),
        "name": "Bakery Schmidt",
        "purpose": "Bread and rolls",
        "amount": -4.50,
        "currency": "EUR",
        "accountUuid": CASH_UUID,
        "categoryUuid": CATEGORY_UUID,
        "booked": True,
        "checkmark": False,
        "comment": "",
    }
    transaction.update(overrides)
    return transaction


def make_security(**overrides: Any) -> Dict[str, Any]:
    security = {
        "uuid": "5d4c3b2a-1908-4f7e-8d6c-5b4a39281706",
        "name": "iShares Core MSCI World",
        "isin": "IE00B4L5Y983",
        "wkn": "A0RPWH",
        "quantity": 12.5,
        "accountUuid": "6e5d4c3b-2a19-4087-9f6e-5d4c3b2a1908",
        "accountName": "test-depot",
        "marketPrice": 95.2,
        "currency": "EUR",
        "marketValue": 1190.0,
        "purchasePrice": 80.0,
        "purchaseValue": 1000.0,
        "profit": 190.0,
        "profitPercent": 19.0,
        "assetClass": "Equity",
    }
    security.update(overrides)
    return security


@pytest.fixture
def accounts_plist() -> str:
    """exportAccounts answer with a group, a giro and a cash account."""
    return to_plist(
        [
            make_account(
                uuid=GROUP_UUID,
                name="All accounts",
                type="Account group",
                group=True,
                indentation=0,
                accountNumber="",
                bankCode="",
                balance=[[1284.56, "EUR"]],
            ),
            make_account(),
            make_account(
                uuid=CASH_UUID,
                name="test-cash",
                type="Cash",
                accountNumber="",
                bankCode="",
                balance=[[50.0, "EUR"]],
            ),
        ]
    )


@pytest.fixture
def categories_plist() -> str:
    """exportCategories answer with and without a budget."""
    return to_plist(
        [
            make_category(),
            make_category(
                uuid="aaaaaaaa-bbbb-cccc-dddd-eeeeeeeeeeee",
                name="Restaurants",
                budget={"amount": 200.0, "available": 75.5, "period": "monthly"},
            ),
        ]
    )


@pytest.fixture
def transactions_plist() -> str:
    """exportTransactions answer with one transaction."""
    return to_plist({"creator": "MoneyMoney", "transactions": [make_transaction()]})


@pytest.fixture
def portfolio_plist() -> str:
    """exportPortfolio answer with one security."""
    return to_plist({"securities": [make_security()]})


@pytest.fixture
def fake_transport(
    accounts_plist: str,
    categories_plist: str,
    transactions_plist: str,
    portfolio_plist: str,
) -> FakeTransport:
    """Transport answering every export method with sample data."""
    return FakeTransport(
        {
            "exportAccounts": accounts_plist,
            "exportCategories": categories_plist,
            "exportTransactions": transactions_plist,
            "exportPortfolio": portfolio_plist,
        }
    )


@pytest.fixture
def make_transport() -> Callable[..., FakeTransport]:
    """Factory for transports with custom answers."""
    return FakeTransport


@pytest.fixture
def client(fake_transport: FakeTransport) -> MoneyMoneyClient:
    """Client wired to the sample-data transport."""
    return MoneyMoneyClient(fake_transport)


@pytest.fixture
def account_factory() -> Callable[..., Dict[str, Any]]:
    """Build raw exportAccounts entries."""
    return make_account


@pytest.fixture
def category_factory() -> Callable[..., Dict[str, Any]]:
    """Build raw exportCategories entries."""
    return make_category


@pytest.fixture
def transaction_factory() -> Callable[..., Dict[str, Any]]:
    """Build raw exportTransactions entries."""
    return make_transaction


@pytest.fixture
def security_factory() -> Callable[..., Dict[str, Any]]:
    """Build raw exportPortfolio entries."""
    return make_security


@pytest.fixture
def plist_encoder() -> Callable[[Any], str]:
    """Encode values as MoneyMoney plist answers."""
    return to_plist
