"""Zentrale Konfiguration via Pydantic Settings."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings

from lab_indicators.domain.models import Unit


class Settings(BaseSettings):
    """Application settings, loaded from environment / .env file."""

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    # Datenbank-Pfad (relativ zum Working Directory)
    labmanager_db_path: str = "data/labmanager.db"

    # Indikator-Berechnung
    default_window_years: int = 5
    default_locale: str = "en"
    indicator_timeout_s: float = 30.0
    include_sub_organizations: bool = True
    budget_unit: Unit = Unit.KILO

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def labmanager_db_available(self) -> bool:
        return Path(self.labmanager_db_path).exists()
