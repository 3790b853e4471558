"""Application settings, read from ``WDS_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = _DEFAULT_DATA_DIR
    log_level: str = "INFO"

    # --- Checkout pricing (IDR) ---
    delivery_fee: int = 5000
    rental_fee_per_gallon: int = 1000
    rental_cap: int = 100

    # --- Payment gateway ---
    payment_api_url: str = "https://app.sandbox.midtrans.com/snap/v1/transactions"
    payment_server_key: str = ""
    app_url: str = "http://localhost:5173"

    # --- Hosted auth (recovery links) ---
    auth_url: str = ""
    auth_service_key: str = ""

    # --- Transactional email ---
    email_api_url: str = "https://api.resend.com/emails"
    email_api_key: str = ""
    email_sender: str = "AirGalon <noreply@app.algoplus.com>"

    http_timeout: float = 10.0


@lru_cache
def get_settings() -> Settings:
    return Settings()
