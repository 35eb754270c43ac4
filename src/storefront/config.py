"""Runtime settings for the storefront, read from environment variables.

Settings are loaded once and cached. Tests that tweak the environment call
``reset_settings()`` so the next ``get_settings()`` re-reads it.
"""

import os
from dataclasses import dataclass

_settings_instance = None


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    environment: str
    default_user_id: int
    default_store_id: int
    delivery_fee: float
    tax_amount: float
    delivery_eta_minutes: int
    seed_data: bool


def get_settings() -> Settings:
    """Return the process-wide settings (singleton)."""
    global _settings_instance
    if _settings_instance is None:
        environment = os.environ.get("PROTEAN_ENV", "development").lower()
        _settings_instance = Settings(
            environment=environment,
            default_user_id=int(os.environ.get("STOREFRONT_DEFAULT_USER_ID", "1")),
            default_store_id=int(os.environ.get("STOREFRONT_DEFAULT_STORE_ID", "1")),
            delivery_fee=float(os.environ.get("STOREFRONT_DELIVERY_FEE", "49")),
            tax_amount=float(os.environ.get("STOREFRONT_TAX_AMOUNT", "29")),
            delivery_eta_minutes=int(os.environ.get("STOREFRONT_DELIVERY_ETA_MINUTES", "45")),
            seed_data=_env_bool("STOREFRONT_SEED_DATA", environment != "test"),
        )
    return _settings_instance


def reset_settings():
    """Reset the settings singleton (useful for testing)."""
    global _settings_instance
    _settings_instance = None
