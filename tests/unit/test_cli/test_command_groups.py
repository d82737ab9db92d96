#!/usr/bin/env python3
"""
Unit tests for the spendwise CLI command groups.

Each test runs against an empty file store under the per-test
SPENDWISE_DATA_DIR set by conftest.
"""

import pytest
from click.testing import CliRunner

from spendwise.cli.main import main
from spendwise.core.config import get_config
from spendwise.storage.files import FileFinanceStore

AS_OF = ["--as-of", "2026-10-18"]


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, *args):
    return runner.invoke(main, list(args), catch_exceptions=False)


class TestTransactionsCommands:
    """Test spendwise transactions ..."""

    def test_empty_list(self, runner):
        result = invoke(runner, "transactions", "list")
        assert result.exit_code == 0
        assert "No transactions yet" in result.output

    def test_add_and_list(self, runner):
        result = invoke(
            runner, "transactions", "add", "--category", "Food", "--amount", "249.50", "--date", "2026-10-02"
        )
        assert result.exit_code == 0
        assert "✅ Recorded expense ₹249.50 (Food) on 2026-10-02" in result.output

        result = invoke(runner, "transactions", "list")
        assert "2026-10-02" in result.output
        assert "₹249.50" in result.output
        assert "Food" in result.output

    def test_add_negative_amount_fails_cleanly(self, runner):
        result = runner.invoke(main, ["transactions", "add", "--category", "Food", "--amount", "-5"])
        assert result.exit_code != 0
        assert "Invalid input" in result.output
        assert FileFinanceStore.from_config(get_config().storage).list_transactions("test-user") == []

    def test_add_out_of_range_amount_fails_cleanly(self, runner):
        result = runner.invoke(main, ["transactions", "add", "--category", "Food", "--amount", "1e30"])
        assert result.exit_code == 1
        assert "Invalid input" in result.output

    def test_add_bad_date(self, runner):
        result = runner.invoke(
            main, ["transactions", "add", "--category", "Food", "--amount", "5", "--date", "02/10/2026"]
        )
        assert result.exit_code == 2
        assert "Invalid date format" in result.output

    def test_history_groups_by_month(self, runner):
        invoke(runner, "transactions", "add", "--category", "Food", "--amount", "10", "--date", "2026-09-02")
        invoke(
            runner,
            "transactions",
            "add",
            "--type",
            "income",
            "--category",
            "Salary",
            "--amount",
            "100",
            "--date",
            "2026-10-01",
        )

        result = invoke(runner, "transactions", "history")

        assert result.exit_code == 0
        assert result.output.index("October 2026") < result.output.index("September 2026")
        assert "Net ₹100.00" in result.output

    def test_delete(self, runner):
        invoke(runner, "transactions", "add", "--category", "Food", "--amount", "10", "--date", "2026-10-02")
        transaction_id = FileFinanceStore.from_config(get_config().storage).list_transactions("test-user")[0].id

        result = invoke(runner, "transactions", "delete", transaction_id)

        assert result.exit_code == 0
        assert "No transactions yet" in invoke(runner, "transactions", "list").output


class TestSubscriptionsCommands:
    """Test spendwise subscriptions ..."""

    def test_empty_list(self, runner):
        result = invoke(runner, "subscriptions", "list", *AS_OF)
        assert "No subscriptions added yet" in result.output

    def test_add_creates_linked_expense(self, runner):
        result = invoke(
            runner,
            "subscriptions",
            "add",
            "--category",
            "Hostinger",
            "--id",
            "WEB-01",
            "--amount",
            "299",
            "--start",
            "2026-10-01",
            "--end",
            "2027-09-30",
            *AS_OF,
        )
        assert result.exit_code == 0
        assert "✅ Added subscription WEB-01 (Hostinger)" in result.output
        assert "Linked expense ₹299.00 on 2026-10-18" in result.output

        assert "Hostinger" in invoke(runner, "transactions", "list").output

    def test_add_rejects_end_before_start(self, runner):
        result = runner.invoke(
            main,
            [
                "subscriptions",
                "add",
                "--category",
                "Outlook",
                "--amount",
                "99",
                "--start",
                "2026-10-10",
                "--end",
                "2026-10-01",
            ],
        )
        assert result.exit_code == 1
        assert "end_date" in result.output

    def test_list_expires_and_warns(self, runner):
        for category, end in [("Outlook", "2026-10-17"), ("SiteGround", "2026-10-20")]:
            invoke(
                runner,
                "subscriptions",
                "add",
                "--category",
                category,
                "--amount",
                "99",
                "--start",
                "2026-01-01",
                "--end",
                end,
                "--as-of",
                "2026-01-01",
            )

        result = invoke(runner, "subscriptions", "list", *AS_OF)

        assert "⚠️  Your subscription Outlook has expired!" in result.output
        assert "⏳ Your subscription SiteGround expires in 2 days" in result.output
        assert "Inactive" in result.output

        again = invoke(runner, "subscriptions", "list", *AS_OF)
        assert "has expired" not in again.output

    def test_toggle_unknown(self, runner):
        result = runner.invoke(main, ["subscriptions", "toggle", "nope"])
        assert result.exit_code == 1
        assert "Subscription not found" in result.output


class TestBudgetCommands:
    """Test spendwise budget ..."""

    def test_status_not_set(self, runner):
        result = invoke(runner, "budget", "status", *AS_OF)
        assert "Monthly Budget: not set" in result.output

    def test_over_budget(self, runner):
        invoke(runner, "budget", "set", "5000", *AS_OF)
        invoke(runner, "transactions", "add", "--category", "Rent", "--amount", "5200", "--date", "2026-10-01")

        result = invoke(runner, "budget", "status", *AS_OF)

        assert "Monthly Budget: ₹5,000.00" in result.output
        assert "Remaining: -₹200.00" in result.output
        assert "crossed your budget limit by ₹200.00" in result.output

    def test_set_negative_fails(self, runner):
        result = runner.invoke(main, ["budget", "set", "--", "-1"])
        assert result.exit_code == 1
        assert "Invalid input" in result.output


class TestReportAndWalletCommands:
    """Test spendwise report ... and spendwise wallet ..."""

    def test_trend_has_fixed_length(self, runner, temp_dir):
        invoke(runner, "transactions", "add", "--category", "Food", "--amount", "400", "--date", "2026-08-20")
        csv_path = temp_dir / "trend.csv"

        result = invoke(runner, "report", "trend", "--count", "3", "--csv", str(csv_path), *AS_OF)

        assert result.exit_code == 0
        lines = [line for line in result.output.splitlines() if "income" in line]
        assert len(lines) == 3
        assert lines[0].strip().startswith("Oct 2026")
        assert csv_path.exists()

    def test_categories_ignore_case(self, runner):
        for category in ["Food", "food"]:
            invoke(runner, "transactions", "add", "--category", category, "--amount", "10", "--date", "2026-10-02")

        exact = invoke(runner, "report", "categories", *AS_OF)
        folded = invoke(runner, "report", "categories", "--ignore-case", *AS_OF)

        assert exact.output.count("50.0%") == 2
        assert "100.0%" in folded.output

    def test_summary(self, runner):
        invoke(runner, "transactions", "add", "--category", "Food", "--amount", "600", "--date", "2026-10-02")
        result = invoke(runner, "report", "summary", "--months", "6", *AS_OF)
        assert "Total Expenses (6 months): ₹600.00" in result.output
        assert "Avg Monthly Spending: ₹100.00" in result.output

    def test_wallet(self, runner):
        invoke(runner, "wallet", "top-up", "1500", *AS_OF)
        invoke(runner, "transactions", "add", "--category", "Food", "--amount", "500.50", "--date", "2026-10-02")

        result = invoke(runner, "wallet", "show")

        assert "Balance:   ₹1,500.00" in result.output
        assert "Remaining: ₹999.50" in result.output

    def test_top_up_zero_fails(self, runner):
        result = runner.invoke(main, ["wallet", "top-up", "0"])
        assert result.exit_code == 1
