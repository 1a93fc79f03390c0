"""FastAPI Application Factory."""

from __future__ import annotations

import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lab_indicators.api.data import router as data_router
from lab_indicators.api.indicators import router as indicators_router
from lab_indicators.config import Settings

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Strukturiertes Logging mit Zeitstempel, Level und Modul-Name."""
    root = logging.getLogger("lab_indicators")
    if root.handlers:
        return

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(log_format, datefmt=date_format))

    root.setLevel(logging.INFO)
    root.addHandler(handler)
    # Verhindert doppelte Log-Eintraege bei uvicorn
    root.propagate = False


def create_app() -> FastAPI:
    """Erstellt und konfiguriert die FastAPI-Anwendung."""
    _configure_logging()
    settings = Settings()

    app = FastAPI(
        title="Lab Indicators API",
        description="Jahresindikatoren fuer Forschungsorganisationen: Publikationen, Rankings, FTE-Quoten.",
        version="0.1.0",
    )

    # CORS (konfigurierbar via CORS_ORIGINS env variable)
    origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(indicators_router)
    app.include_router(data_router)

    if settings.labmanager_db_available:
        logger.info("Labmanager DB: %s", settings.labmanager_db_path)
    else:
        logger.warning("Labmanager DB not found: %s", settings.labmanager_db_path)
    logger.info(
        "Standard-Zeitraum: %d Jahre, Locale: %s",
        settings.default_window_years, settings.default_locale,
    )

    return app


def main() -> None:
    """Startet den Server mit uvicorn."""
    import uvicorn

    settings = Settings()
    uvicorn.run(create_app(), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
