"""Unit tests for record loading, balance snapshots and input validation"""

from datetime import date
from decimal import Decimal

import pytest

from core.errors import ProjectionInputError, RecordFormatError
from core.models import Transaction
from core.schema import AccountType, CategoryType
from data_prep.loader import (
    load_accounts,
    load_categories,
    load_transactions,
    transactions_to_frame,
)
from data_prep.snapshot import balance_snapshot
from data_prep.validators import ensure_valid, validate_projection_inputs
from ledgers.installments import Installment
from ledgers.scenario import ExtraSavings, OneTimePurchase


class TestLoader:
    def test_account_type_aliases(self):
        """Backend spellings map onto the canonical account types"""
        accounts = load_accounts(
            [
                {"id": "a1", "name": "Línea", "type": "CreditLine", "balance": "150000"},
                {"id": "a2", "name": "Tarjeta", "type": "credit", "balance": -20000},
                {"id": "a3", "type": " Vista ", "balance": 1000.5, "currency": "CLP"},
            ]
        )

        assert [a.type for a in accounts] == [
            AccountType.CREDIT_LINE,
            AccountType.CREDIT_CARD,
            AccountType.VISTA,
        ]
        assert accounts[0].balance == Decimal("150000")
        assert accounts[2].name == ""

    def test_category_type_aliases(self):
        categories = load_categories(
            [
                {"id": "c1", "name": "Arriendo", "type": "Gastos Fijos"},
                {"id": "c2", "name": "Ocio", "type": "gastos variables"},
                {"id": "c3", "name": "Sueldo", "type": "INCOME"},
                {"id": "c4", "name": "Fondo", "type": "Ahorro"},
            ]
        )

        assert [c.type for c in categories] == [
            CategoryType.FIXED_EXPENSE,
            CategoryType.VARIABLE_EXPENSE,
            CategoryType.INCOME,
            CategoryType.SAVINGS,
        ]

    def test_transactions_blank_ids_become_none(self):
        txs = load_transactions(
            [
                {"id": "t1", "date": "2026-05-03", "amount": "-15000", "category_id": ""},
                {
                    "id": "t2",
                    "date": date(2026, 5, 4),
                    "amount": 50000,
                    "category_id": None,
                    "destination_account_id": "acc-2",
                },
            ]
        )

        assert txs[0].date == date(2026, 5, 3)
        assert txs[0].category_id is None
        assert not txs[0].is_transfer
        assert txs[1].is_transfer

    @pytest.mark.parametrize(
        "loader, record",
        [
            (load_accounts, {"id": "a1", "type": "spaceship", "balance": 1}),
            (load_categories, {"id": "c1", "type": "misc"}),
            (load_transactions, {"id": "t1", "date": "not a date", "amount": 1}),
            (load_transactions, {"id": "t1", "date": "2026-01-01"}),
        ],
    )
    def test_malformed_records_raise(self, loader, record):
        with pytest.raises(RecordFormatError):
            loader([record])

    def test_transactions_to_frame(self, sample_transactions):
        df = transactions_to_frame(sample_transactions)

        assert len(df) == len(sample_transactions)
        assert int(df["is_transfer"].sum()) == 3
        assert isinstance(df.loc[0, "amount"], Decimal)
        assert str(df["date"].dtype).startswith("datetime64")

    def test_transactions_to_frame_accepts_raw_dicts(self):
        df = transactions_to_frame(
            [
                Transaction("t1", date(2026, 1, 2), Decimal("10")),
                {"id": "t2", "date": "2026-01-03", "amount": "-5", "destination_account_id": "x"},
            ]
        )

        assert list(df["is_transfer"]) == [False, True]

    def test_empty_frame_has_columns(self):
        df = transactions_to_frame([])

        assert df.empty
        assert {"date", "amount", "is_transfer"}.issubset(df.columns)


class TestSnapshot:
    def test_classification_by_type(self, sample_accounts):
        """Liabilities count as debt even when stored positive"""
        snap = balance_snapshot(sample_accounts)

        assert snap.liquid == Decimal("1500000")
        assert snap.receivable == Decimal("300000")
        assert snap.illiquid_assets == Decimal("2000000")
        assert snap.debt == Decimal("-200000")
        assert snap.net_worth == Decimal("3600000")
        assert snap.initial_liquidity == snap.liquid

    def test_no_accounts(self):
        snap = balance_snapshot([])

        assert snap.initial_wealth == 0
        assert snap.initial_liquidity == 0


class TestValidators:
    def test_clean_inputs(self):
        result = validate_projection_inputs(
            [Installment("i1", "Laptop", Decimal("1000"), 3)],
            [OneTimePurchase("s1", "Car", Decimal("5000"), 2)],
            12,
        )

        assert result.is_valid
        assert result.warnings == []
        assert "All checks passed" in result.summary()

    def test_warnings_do_not_block(self):
        """Paid-off installments, zero amounts and late scenarios only warn"""
        result = validate_projection_inputs(
            [Installment("i1", "Done", Decimal("1000"), 0), Installment("i2", "Free", Decimal("0"), 3)],
            [ExtraSavings("s1", "Later", Decimal("0"), start_month=24)],
            12,
        )

        assert result.is_valid
        assert len(result.warnings) == 4
        assert ensure_valid(result) is result

    def test_partial_year_warns_only_in_year_resolution(self):
        yearly = validate_projection_inputs([], [], 30, resolution="year")
        monthly = validate_projection_inputs([], [], 30)

        assert yearly.is_valid
        assert len(yearly.warnings) == 1
        assert "last 6 month(s)" in yearly.warnings[0]
        assert monthly.warnings == []

    def test_default_limit_ignores_environment(self, monkeypatch):
        """Without an explicit limit the built-in 360 months applies"""
        monkeypatch.setenv("WEALTH_MAX_HORIZON_MONTHS", "12")

        assert validate_projection_inputs([], [], 360).is_valid
        assert not validate_projection_inputs([], [], 361).is_valid

    def test_errors_block(self):
        result = validate_projection_inputs(
            [Installment("i1", "Refund", Decimal("-5"), 2)],
            [],
            120,
            max_horizon_months=60,
        )

        assert not result.is_valid
        assert len(result.errors) == 2
        assert "ERRORS (2)" in result.summary()
        with pytest.raises(ProjectionInputError) as exc:
            ensure_valid(result)
        assert exc.value.messages == result.errors
