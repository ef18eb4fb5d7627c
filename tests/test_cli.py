"""Tests for the command line demo."""

import json
from decimal import Decimal

import pytest

from cart_pricing.__main__ import main, parse_add


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "CART_LOG_LEVEL",
        "CART_LOG_FORMAT",
        "CART_DEFAULT_TIER",
        "CART_BULK_THRESHOLD",
        "CART_BULK_RATE",
    ):
        monkeypatch.delenv(name, raising=False)


class TestParseAdd:
    """Tests for the --add argument parser."""

    def test_id_only(self) -> None:
        """A bare id means quantity one."""
        assert parse_add("6") == (6, 1)

    def test_id_and_quantity(self) -> None:
        """id:quantity sets both."""
        assert parse_add("1:3") == (1, 3)


class TestMain:
    """Tests for the main entry point."""

    def test_prints_breakdown(self, capsys) -> None:
        """Three laptops at the default tier print the expected total."""
        assert main(["--add", "1:3"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert Decimal(data["final_total"]) == Decimal("2770.2")
        assert data["items"][0]["name"] == "Gaming Laptop"

    def test_tier_flag(self, capsys) -> None:
        """--tier overrides the default loyalty tier."""
        assert main(["--add", "6", "--tier", "Bronze"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert Decimal(data["loyalty_discount"]) == Decimal("2")
        assert Decimal(data["final_total"]) == Decimal("38")

    def test_empty_cart(self, capsys) -> None:
        """No items prints an all-zero breakdown."""
        assert main([]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["items"] == []
        assert Decimal(data["final_total"]) == 0

    def test_unknown_product(self, capsys) -> None:
        """An unknown id exits with status 2 and a message."""
        assert main(["--add", "404"]) == 2
        assert "Product not in catalog: 404" in capsys.readouterr().err

    def test_zero_quantity(self, capsys) -> None:
        """A zero quantity is reported, not added."""
        assert main(["--add", "1:0"]) == 2
        assert "Quantity must be positive" in capsys.readouterr().err

    def test_bad_add_syntax(self) -> None:
        """A non-numeric --add value is an argparse usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--add", "laptop"])
        assert exc_info.value.code == 2

    def test_catalog_listing(self, capsys) -> None:
        """--catalog prints one line per product."""
        assert main(["--catalog"]) == 0

        out = capsys.readouterr().out
        assert "Gaming Laptop" in out
        assert len(out.strip().splitlines()) == 12

    def test_bad_settings(self, monkeypatch, capsys) -> None:
        """A malformed setting exits with status 2 and names the variable."""
        monkeypatch.setenv("CART_LOG_FORMAT", "xml")
        assert main([]) == 2
        assert "CART_LOG_FORMAT" in capsys.readouterr().err

    def test_non_finite_bulk_rate(self, monkeypatch, capsys) -> None:
        """A NaN bulk rate is a settings error, not a traceback."""
        monkeypatch.setenv("CART_BULK_RATE", "NaN")
        assert main([]) == 2
        assert "CART_BULK_RATE" in capsys.readouterr().err
