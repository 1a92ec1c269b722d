#!/usr/bin/env python3
"""
Integration tests for the records CLI.

Runs the fleet command against saved backend responses.
"""

import pytest
from click.testing import CliRunner

from fleet_finances.cli.main import main
from fleet_finances.core.json_utils import read_json, write_json


@pytest.fixture
def earnings_file(temp_dir, sample_earnings_response):
    path = temp_dir / "earnings.json"
    write_json(path, sample_earnings_response)
    return path


@pytest.fixture
def expenses_file(temp_dir, sample_expenses_response):
    path = temp_dir / "expenses.json"
    write_json(path, sample_expenses_response)
    return path


@pytest.mark.integration
class TestRecordsSummary:
    """Test fleet records summary."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_driver_totals(self, earnings_file):
        result = self.runner.invoke(main, ["records", "summary", str(earnings_file), "--driver", "driver-1"])

        assert result.exit_code == 0, result.output
        assert "Records: 2" in result.output
        assert "Total: AED 200.25" in result.output
        assert "Cash: AED 120.00 (1 records, 59.9%)" in result.output
        assert "Online: AED 80.25 (1 records, 40.1%)" in result.output

    def test_classifier_and_period(self, earnings_file):
        result = self.runner.invoke(
            main,
            ["records", "summary", str(earnings_file), "--classifier", "PocketSplit", "--period", "daily", "--on", "2024-03-05"],
        )

        assert result.exit_code == 0, result.output
        assert "Records: 1" in result.output
        assert "Total: AED 45.00" in result.output

    def test_expense_kind(self, expenses_file):
        result = self.runner.invoke(main, ["records", "summary", str(expenses_file), "--kind", "expense"])

        assert result.exit_code == 0, result.output
        assert "Total: AED 25.50" in result.output

    def test_by_account(self, earnings_file):
        result = self.runner.invoke(main, ["records", "summary", str(earnings_file), "--by-account"])

        assert result.exit_code == 0, result.output
        personal, limousine = result.output.split("Limousine Account:")
        assert "Personal Account:" in personal
        assert "Records: 2" in personal
        assert "Total: AED 165.00" in personal
        assert "Records: 1" in limousine
        assert "Total: AED 80.25" in limousine

    def test_account_filter(self, earnings_file):
        result = self.runner.invoke(
            main, ["records", "summary", str(earnings_file), "--account", "Limousine Account"]
        )

        assert result.exit_code == 0, result.output
        assert "Records: 1" in result.output
        assert "Total: AED 80.25" in result.output

    def test_by_account_without_accounts(self, expenses_file):
        result = self.runner.invoke(
            main, ["records", "summary", str(expenses_file), "--kind", "expense", "--by-account"]
        )

        assert result.exit_code == 0, result.output
        assert "No records with an account" in result.output

    def test_no_matches(self, earnings_file):
        result = self.runner.invoke(main, ["records", "summary", str(earnings_file), "--driver", "nobody"])

        assert result.exit_code == 0
        assert "Records: 0" in result.output
        assert "Total: AED 0.00" in result.output

    def test_missing_file(self, temp_dir):
        result = self.runner.invoke(main, ["records", "summary", str(temp_dir / "missing.json")])

        assert result.exit_code == 1
        assert "Could not load earning records" in result.output

    def test_unrecognised_response(self, temp_dir):
        path = temp_dir / "bad.json"
        write_json(path, {"message": "Unauthorized"})

        result = self.runner.invoke(main, ["records", "summary", str(path)])

        assert result.exit_code == 1
        assert "Could not load" in result.output

    def test_bad_date_bound(self, earnings_file):
        result = self.runner.invoke(main, ["records", "summary", str(earnings_file), "--start", "soon"])

        assert result.exit_code == 1
        assert "Unrecognised date" in result.output


@pytest.mark.integration
class TestRecordsDailyViews:
    """Test fleet records today and breakdown."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_today_feed(self, earnings_file):
        result = self.runner.invoke(main, ["records", "today", str(earnings_file), "--on", "2024-03-05"])

        assert result.exit_code == 0, result.output
        assert "Earnings on 2024-03-05:" in result.output
        assert "Online: AED 80.25" in result.output
        assert "PocketSplit: AED 45.00" in result.output
        assert "Total: AED 125.25" in result.output

    def test_today_without_records(self, earnings_file):
        result = self.runner.invoke(main, ["records", "today", str(earnings_file), "--on", "2024-03-06"])

        assert result.exit_code == 0
        assert "No records" in result.output
        assert "Total: AED 0.00" in result.output

    def test_weekly_breakdown(self, earnings_file):
        result = self.runner.invoke(main, ["records", "breakdown", str(earnings_file), "--on", "2024-03-06"])

        assert result.exit_code == 0, result.output
        assert "Earnings 2024-03-04 to 2024-03-10:" in result.output
        assert "Mon: AED 120.00 (1)" in result.output
        assert "Tue: AED 125.25 (2)" in result.output
        assert "Sun: AED 0.00 (0)" in result.output

    def test_monthly_breakdown(self, earnings_file):
        result = self.runner.invoke(
            main, ["records", "breakdown", str(earnings_file), "--period", "monthly", "--on", "2024-03-06"]
        )

        assert result.exit_code == 0, result.output
        assert "2024-03-04: AED 120.00 (1)" in result.output
        assert "2024-03-31: AED 0.00 (0)" in result.output


@pytest.mark.integration
class TestRecordsIncome:
    """Test fleet records income."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_monthly_income(self, earnings_file, expenses_file):
        result = self.runner.invoke(
            main,
            ["records", "income", str(earnings_file), str(expenses_file), "--driver", "driver-1", "--on", "2024-03-10"],
        )

        assert result.exit_code == 0, result.output
        assert "Period: 2024-03-01 to 2024-03-31" in result.output
        assert "Earnings: AED 200.25" in result.output
        assert "Earnings share (0.3): AED 60.08" in result.output
        assert "Expenses: AED 25.50" in result.output
        assert "Income: AED 34.58" in result.output

    def test_rate_override(self, earnings_file, expenses_file):
        result = self.runner.invoke(
            main,
            ["records", "income", str(earnings_file), str(expenses_file), "--driver", "driver-1", "--on", "2024-03-10", "--rate", "1"],
        )

        assert result.exit_code == 0, result.output
        assert "Income: AED 174.75" in result.output

    def test_invalid_rate(self, earnings_file, expenses_file):
        result = self.runner.invoke(
            main, ["records", "income", str(earnings_file), str(expenses_file), "--rate", "lots"]
        )

        assert result.exit_code == 1
        assert "Invalid --rate" in result.output


@pytest.mark.integration
class TestRecordsStatement:
    """Test fleet records statement."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_json_statement(self, earnings_file, temp_dir):
        output = temp_dir / "statement.json"
        result = self.runner.invoke(
            main,
            ["records", "statement", str(earnings_file), "--driver", "driver-1", "--driver-name", "Sam", "--output", str(output), "--format", "json"],
        )

        assert result.exit_code == 0, result.output
        assert "Earnings Statement: 2 rows, total AED 200.25" in result.output

        data = read_json(output)
        assert data["ownerName"] == "Sam"
        assert [row["date"] for row in data["rows"]] == ["2024-03-05", "2024-03-04"]
        assert data["totalAmount"] == "200.25"

    def test_default_html_output_location(self, earnings_file, tmp_path):
        result = self.runner.invoke(main, ["records", "statement", str(earnings_file), "--driver", "driver-2"])

        assert result.exit_code == 0, result.output
        written = list((tmp_path / "fleet_data" / "statements").glob("*_earning_statement_driver-2.html"))
        assert len(written) == 1
        assert "AED 45.00" in written[0].read_text(encoding="utf-8")

    def test_statement_requires_driver(self, earnings_file):
        result = self.runner.invoke(main, ["records", "statement", str(earnings_file)])

        assert result.exit_code == 1
        assert "owner id is missing" in result.output
