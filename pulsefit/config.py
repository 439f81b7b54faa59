from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional


class Settings:
    """Centralized configuration for the PulseFit backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("PULSEFIT_DATA_ROOT") or data_root_default
        ).expanduser()
        self.app_db_path: Path = Path(
            os.environ.get("PULSEFIT_DB_PATH") or (self.data_root / "pulsefit.db")
        ).expanduser()

        # ---- Generative text (OpenAI-compatible chat completions) ----
        self.llm_api_key: Optional[str] = os.environ.get("PULSEFIT_LLM_API_KEY")
        self.llm_base_url: str = os.environ.get(
            "PULSEFIT_LLM_BASE_URL", "https://api.openai.com/v1"
        )
        self.llm_model: str = os.environ.get("PULSEFIT_LLM_MODEL", "gpt-4o-mini")
        self.llm_timeout: float = float(os.environ.get("PULSEFIT_LLM_TIMEOUT", "30"))
        self.llm_max_tokens: int = int(os.environ.get("PULSEFIT_LLM_MAX_TOKENS", "1000"))
        self.llm_temperature: float = float(os.environ.get("PULSEFIT_LLM_TEMPERATURE", "0.7"))

        # ---- Product lookup / notifications ----
        self.product_lookup_url: str = os.environ.get(
            "PULSEFIT_PRODUCT_LOOKUP_URL",
            "https://world.openfoodfacts.org/api/v2/product/{barcode}.json",
        )
        self.product_timeout: float = float(os.environ.get("PULSEFIT_PRODUCT_TIMEOUT", "10"))
        self.notify_webhook_url: Optional[str] = os.environ.get("PULSEFIT_NOTIFY_WEBHOOK_URL") or None

        # ---- Analytics windows ----
        self.progress_window_days: int = int(os.environ.get("PULSEFIT_PROGRESS_WINDOW_DAYS") or "30")
        self.near_expiry_days: int = int(os.environ.get("PULSEFIT_NEAR_EXPIRY_DAYS") or "7")
        self.expiry_alert_days: int = int(os.environ.get("PULSEFIT_EXPIRY_ALERT_DAYS") or "3")

        cors = os.environ.get("PULSEFIT_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
