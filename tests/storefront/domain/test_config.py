"""Tests for environment-driven settings."""

import pytest
from storefront.config import get_settings, reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


class TestDefaults:
    def test_checkout_constants(self, monkeypatch):
        for name in ("STOREFRONT_DELIVERY_FEE", "STOREFRONT_TAX_AMOUNT", "STOREFRONT_DELIVERY_ETA_MINUTES"):
            monkeypatch.delenv(name, raising=False)
        settings = get_settings()
        assert settings.delivery_fee == 49
        assert settings.tax_amount == 29
        assert settings.delivery_eta_minutes == 45

    def test_default_identities(self, monkeypatch):
        monkeypatch.delenv("STOREFRONT_DEFAULT_USER_ID", raising=False)
        monkeypatch.delenv("STOREFRONT_DEFAULT_STORE_ID", raising=False)
        settings = get_settings()
        assert settings.default_user_id == 1
        assert settings.default_store_id == 1

    def test_sample_data_is_off_under_test(self, monkeypatch):
        monkeypatch.setenv("PROTEAN_ENV", "test")
        monkeypatch.delenv("STOREFRONT_SEED_DATA", raising=False)
        assert get_settings().seed_data is False

    def test_sample_data_is_on_in_development(self, monkeypatch):
        monkeypatch.setenv("PROTEAN_ENV", "development")
        monkeypatch.delenv("STOREFRONT_SEED_DATA", raising=False)
        assert get_settings().seed_data is True


class TestOverrides:
    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_DELIVERY_FEE", "0")
        monkeypatch.setenv("STOREFRONT_DEFAULT_USER_ID", "42")
        monkeypatch.setenv("STOREFRONT_SEED_DATA", "yes")
        settings = get_settings()
        assert settings.delivery_fee == 0
        assert settings.default_user_id == 42
        assert settings.seed_data is True

    def test_settings_are_cached_until_reset(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("STOREFRONT_TAX_AMOUNT", "10")
        assert get_settings() is first
        reset_settings()
        assert get_settings().tax_amount == 10
