"""Pydantic Request/Response Models fuer die API."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from lab_indicators.domain.models import IndicatorConfigurationError

# --- Request ---

class IndicatorRequest(BaseModel):
    """Anfrage fuer die Indikatoren einer Organisation.

    Zeitraum: explizit (start_year/end_year) oder die letzten `years`
    vollen Kalenderjahren. Ist nur eine Grenze gesetzt, wird die andere
    ueber `years` ergaenzt.
    """

    organization_id: int = Field(..., ge=1, description="ID der Forschungsorganisation")
    start_year: int | None = Field(None, ge=1900, le=2100, description="Erstes Jahr (inklusiv)")
    end_year: int | None = Field(None, ge=1900, le=2100, description="Letztes Jahr (inklusiv)")
    years: int | None = Field(
        None, ge=1, le=30, description="Analysezeitraum in Jahren (Standard aus Settings)"
    )
    indicators: list[str] = Field(
        default_factory=list, description="Indikator-Schluessel (leer = alle)"
    )
    locale: str | None = Field(None, max_length=10, description="Sprache fuer Namen/Labels")

    @model_validator(mode="after")
    def check_window(self) -> IndicatorRequest:
        if (
            self.start_year is not None
            and self.end_year is not None
            and self.start_year > self.end_year
        ):
            raise IndicatorConfigurationError("start_year must be <= end_year")
        return self


# --- Response ---

class YearValue(BaseModel):
    """Ein Punkt der Zeitreihe."""

    year: int
    value: float


class IndicatorResult(BaseModel):
    """Berechneter Indikator fuer das Analysefenster."""

    key: str
    name: str = ""
    label: str = ""
    values: list[YearValue] = []
    merged_value: float = 0.0
    details: str | None = None


class IndicatorInfo(BaseModel):
    """Eintrag im Indikator-Katalog."""

    key: str
    name: str
    label: str


class ExplainabilityMetadata(BaseModel):
    """Transparenz-Metadaten fuer jede Analyse."""

    sources_used: list[str] = []
    methods: list[str] = []
    deterministic: bool = True
    warnings: list[str] = []
    query_time_ms: int = 0


class IndicatorsResponse(BaseModel):
    """Komplette Antwort mit allen angeforderten Indikatoren."""

    organization_id: int
    organization_name: str = ""
    analysis_period: str
    locale: str
    indicators: list[IndicatorResult] = []
    explainability: ExplainabilityMetadata = ExplainabilityMetadata()
