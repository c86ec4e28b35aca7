"""
Unit tests for MoneyMoney request parameters.
"""

from datetime import date

import pytest
from pydantic import ValidationError

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
from moneymoney_mcp.core.exceptions import MissingParameterError


class TestExportTransactionsParams:
    """Tests for exportTransactions parameters."""

    def test_only_required_field(self) -> None:
        params = ExportTransactionsParams(date(2024, 1, 1))
        assert params.to_payload() == {"fromDate": "2024-01-01"}

    def test_accepts_iso_string(self) -> None:
        params = ExportTransactionsParams("2024-01-01")
        assert params.from_date == date(2024, 1, 1)

    @pytest.mark.parametrize(
        "setter,value,key",
        [
            ("with_to_date", date(2024, 1, 31), "toDate"),
            ("with_from_account", "Giro", "fromAccount"),
            ("with_from_category", "Groceries", "fromCategory"),
        ],
    )
    def test_one_option_adds_one_key(self, setter: str, value, key: str) -> None:
        params = getattr(ExportTransactionsParams(date(2024, 1, 1)), setter)(value)
        payload = params.to_payload()
        assert set(payload) == {"fromDate", key}

    def test_all_options(self) -> None:
        params = (
            ExportTransactionsParams(date(2024, 1, 1))
            .with_to_date(date(2024, 1, 31))
            .with_from_account("DE89370400440532013000")
            .with_from_category("Groceries")
        )
        assert params.to_payload() == {
            "fromDate": "2024-01-01",
            "toDate": "2024-01-31",
            "fromAccount": "DE89370400440532013000",
            "fromCategory": "Groceries",
        }

    def test_setters_return_copies(self) -> None:
        original = ExportTransactionsParams(date(2024, 1, 1))
        changed = original.with_from_account("Giro")
        assert original.from_account is None
        assert changed.from_account == "Giro"

    def test_missing_from_date(self) -> None:
        with pytest.raises(MissingParameterError) as exc_info:
            ExportTransactionsParams()
        assert exc_info.value.missing == ["fromDate"]

    def test_invalid_date(self) -> None:
        with pytest.raises(ValidationError):
            ExportTransactionsParams("01/01/2024")

    def test_unknown_option_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ExportTransactionsParams(date(2024, 1, 1)).with_options(limit=10)


class TestNoArgumentParams:
    """Tests for methods without arguments."""

    def test_export_accounts_has_no_payload(self) -> None:
        assert ExportAccountsParams().to_payload() is None

    def test_export_categories_has_no_payload(self) -> None:
        assert ExportCategoriesParams().to_payload() is None

    def test_export_portfolio_empty_payload(self) -> None:
        assert ExportPortfolioParams().to_payload() == {}

    def test_export_portfolio_filters(self) -> None:
        params = ExportPortfolioParams().with_from_asset_class("Equity")
        assert params.to_payload() == {"fromAssetClass": "Equity"}


class TestAddTransactionParams:
    """Tests for addTransaction parameters."""

    def test_required_fields(self) -> None:
        params = AddTransactionParams("test-cash", date(2024, 3, 5), "Bakery", -4.5)
        assert params.to_payload() == {
            "toAccount": "test-cash",
            "onDate": "2024-03-05",
            "to": "Bakery",
            "amount": -4.5,
        }

    def test_optional_fields(self) -> None:
        params = (
            AddTransactionParams("test-cash", date(2024, 3, 5), "Bakery", -4.5)
            .with_purpose("Breakfast")
            .with_category("Groceries")
        )
        payload = params.to_payload()
        assert payload["purpose"] == "Breakfast"
        assert payload["category"] == "Groceries"

    def test_zero_amount_is_not_missing(self) -> None:
        params = AddTransactionParams("test-cash", date(2024, 3, 5), "Nobody", 0.0)
        assert params.to_payload()["amount"] == 0.0

    def test_missing_required_fields(self) -> None:
        with pytest.raises(MissingParameterError) as exc_info:
            AddTransactionParams("test-cash", date(2024, 3, 5))
        assert exc_info.value.missing == ["to", "amount"]
        assert "AddTransactionParams requires: to, amount" in str(exc_info.value)

    def test_keyword_construction(self) -> None:
        params = AddTransactionParams(
            to_account="test-cash", on_date="2024-03-05", to="Bakery", amount=-1.0
        )
        assert params.on_date == date(2024, 3, 5)


class TestSetTransactionParams:
    """Tests for setTransaction parameters."""

    def test_checkmark_only(self) -> None:
        params = SetTransactionParams(12345).with_checkmark("on")
        assert params.to_payload() == {"id": 12345, "checkmarkTo": "on"}

    def test_bool_checkmark(self) -> None:
        assert SetTransactionParams(1).with_checkmark(True).checkmark_to == "on"
        assert SetTransactionParams(1).with_checkmark(False).checkmark_to == "off"

    def test_invalid_checkmark(self) -> None:
        with pytest.raises(ValidationError):
            SetTransactionParams(1).with_checkmark("maybe")

    def test_category_and_comment(self) -> None:
        params = SetTransactionParams(7).with_category("Rent").with_comment("March")
        assert params.to_payload() == {
            "id": 7,
            "categoryTo": "Rent",
            "commentTo": "March",
        }

    def test_id_only(self) -> None:
        assert SetTransactionParams(42).to_payload() == {"id": 42}

    def test_id_zero_is_valid(self) -> None:
        assert SetTransactionParams(0).to_payload() == {"id": 0}

    def test_missing_id(self) -> None:
        with pytest.raises(MissingParameterError) as exc_info:
            SetTransactionParams()
        assert exc_info.value.missing == ["id"]

    def test_negative_id(self) -> None:
        with pytest.raises(ValidationError):
            SetTransactionParams(-5)


class TestPaymentParams:
    """Tests for the experimental SEPA parameters."""

    def test_bank_transfer_names(self) -> None:
        params = (
            CreateBankTransferParams()
            .with_from_account("Giro")
            .with_recipient("Max Mustermann", "DE02120300000000202051")
            .with_amount(12.5)
            .with_options(endtoend_reference="INV-1", scheduled_date=date(2024, 5, 1))
        )
        assert params.to_payload() == {
            "fromAccount": "Giro",
            "to": "Max Mustermann",
            "iban": "DE02120300000000202051",
            "amount": 12.5,
            "endtoendReference": "INV-1",
            "scheduledDate": "2024-05-01",
        }

    def test_empty_bank_transfer(self) -> None:
        assert CreateBankTransferParams().to_payload() == {}

    def test_direct_debit_uses_for(self) -> None:
        params = (
            CreateDirectDebitParams()
            .with_debtor("Erika Mustermann", "DE02120300000000202051", "BYLADEM1001")
            .with_mandate("M-42", "2023-12-01")
        )
        assert params.to_payload() == {
            "for": "Erika Mustermann",
            "iban": "DE02120300000000202051",
            "bic": "BYLADEM1001",
            "mandateReference": "M-42",
            "mandateDate": "2023-12-01",
        }
