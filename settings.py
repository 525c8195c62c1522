# settings.py
"""
App settings, read from AMINO_* environment variables or a local .env file.

Controls:
- Page title and header
- Example sequence offered in Single Sequence mode
- Spinner delay before showing a result
- Record caps for uploaded files
- Log level
"""
from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # --- Page ---
    app_title: str = "Amino Acid Sequence Analyzer"
    page_title: str = "Amino Acid Analyzer"
    example_sequence: str = "ARNDCEQGHILKMFPSTWYV"

    # --- UI feedback ---
    analysis_delay_seconds: float = 0.3  # 0 disables the spinner pause

    # --- Uploads ---
    max_records: int = 200
    max_records_limit: int = 5000
    preview_length: int = 500

    # --- Logging ---
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="AMINO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
