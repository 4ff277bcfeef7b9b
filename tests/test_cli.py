"""Tests for the command-line demo."""

import os

import pytest
import structlog

from storefront.__main__ import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("STOREFRONT_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "error")
    yield
    structlog.reset_defaults()


class TestCheckoutCommand:
    def test_default_checkout(self, capsys) -> None:
        assert main(["--no-delay", "checkout"]) == 0
        out = capsys.readouterr().out
        assert "Subtotal: $1079.97" in out
        assert "Discount (SUMMER10): -$108.00" in out
        assert "Total: $971.97" in out
        assert "Payment successful" in out

    def test_unknown_discount(self, capsys) -> None:
        assert main(["--no-delay", "checkout", "--discount", "NOPE"]) == 0
        out = capsys.readouterr().out
        assert "Unknown discount code: NOPE" in out
        assert "Total: $1079.97" in out


class TestRegisterCommand:
    def test_register_and_activate(self, capsys) -> None:
        code = main(
            ["--no-delay", "register", "--email", "bob@example.com", "--password", "Password1"]
        )
        assert code == 0
        assert "Account activated: bob@example.com" in capsys.readouterr().out

    def test_rejected_registration(self, capsys) -> None:
        code = main(["--no-delay", "register", "--email", "bob", "--password", "Password1"])
        assert code == 1
        assert "Invalid email format" in capsys.readouterr().out


class TestConfiguration:
    def test_bad_environment(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("STOREFRONT_PAYMENT_DELAY_MS", "soon")
        assert main(["checkout"]) == 2
        assert "STOREFRONT_PAYMENT_DELAY_MS" in capsys.readouterr().err
