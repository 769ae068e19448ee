"""Tests for environment-driven email settings."""

import pytest
from storefront.config import DEFAULT_BAKERY_NAME, EmailSettings, notifier_workers

SMTP_VARS = ("SMTP_HOST", "SMTP_PORT", "SMTP_USER", "SMTP_PASS", "SMTP_SECURE", "SMTP_FROM", "BAKERY_NAME")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in SMTP_VARS:
        monkeypatch.delenv(name, raising=False)


def _set_smtp(monkeypatch):
    monkeypatch.setenv("SMTP_HOST", "smtp.example.com")
    monkeypatch.setenv("SMTP_PORT", "465")
    monkeypatch.setenv("SMTP_USER", "orders@example.com")
    monkeypatch.setenv("SMTP_PASS", "secret")


class TestEmailSettings:
    def test_empty_environment_is_unconfigured(self):
        settings = EmailSettings.from_env()
        assert settings.is_configured is False
        assert settings.bakery_name == DEFAULT_BAKERY_NAME

    def test_all_four_values_configure_transport(self, monkeypatch):
        _set_smtp(monkeypatch)
        settings = EmailSettings.from_env()
        assert settings.is_configured is True
        assert settings.port == 465
        assert settings.secure is False

    @pytest.mark.parametrize("missing", ["SMTP_HOST", "SMTP_PORT", "SMTP_USER", "SMTP_PASS"])
    def test_any_missing_value_leaves_transport_unconfigured(self, monkeypatch, missing):
        _set_smtp(monkeypatch)
        monkeypatch.delenv(missing)
        assert EmailSettings.from_env().is_configured is False

    @pytest.mark.parametrize("value,expected", [("true", True), ("1", True), ("false", False), ("no", False)])
    def test_secure_flag(self, monkeypatch, value, expected):
        monkeypatch.setenv("SMTP_SECURE", value)
        assert EmailSettings.from_env().secure is expected

    def test_from_address_defaults_to_user(self, monkeypatch):
        _set_smtp(monkeypatch)
        assert EmailSettings.from_env().from_address == "orders@example.com"

        monkeypatch.setenv("SMTP_FROM", "Bakery <bakery@example.com>")
        assert EmailSettings.from_env().from_address == "Bakery <bakery@example.com>"

    def test_bakery_name_override(self, monkeypatch):
        monkeypatch.setenv("BAKERY_NAME", "Crumbs")
        assert EmailSettings.from_env().bakery_name == "Crumbs"


def test_notifier_workers(monkeypatch):
    monkeypatch.setenv("NOTIFIER_WORKERS", "4")
    assert notifier_workers() == 4
