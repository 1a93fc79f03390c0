"""Unit-Tests fuer die Quotienten-Indikatoren."""

from unittest.mock import AsyncMock

import pytest

from lab_indicators.domain.indicators import AnnualIndicator, RatioIndicator, year_ratio
from lab_indicators.domain.labels import BundledMessageResolver
from lab_indicators.domain.models import ResearchOrganization, YearValueSeries
from lab_indicators.domain.reducers import sum_values

ORG = ResearchOrganization(id=1, name="Lab")
MESSAGES = BundledMessageResolver()


class _FixedIndicator(AnnualIndicator):
    """Indikator mit fester Zeitreihe (nur fuer Tests)."""

    def __init__(self, key: str, series: YearValueSeries) -> None:
        super().__init__(key, MESSAGES)
        self.series = series
        self.calls = 0

    async def values_per_year(self, organization, start_year, end_year) -> YearValueSeries:
        self.calls += 1
        return dict(self.series)


def _ratio(numerator: YearValueSeries, denominator: YearValueSeries, **kwargs) -> RatioIndicator:
    return RatioIndicator(
        "conferencePaperFteRatio", MESSAGES,
        _FixedIndicator("conferencePaperCount", numerator),
        _FixedIndicator("permanentResearcherFte", denominator),
        **kwargs,
    )


class TestYearRatio:
    def test_basic(self):
        assert year_ratio(4, 2.0) == 2.0

    def test_missing_denominator(self):
        assert year_ratio(4, None) == 0.0

    def test_zero_denominator(self):
        assert year_ratio(4, 0) == 0.0

    def test_missing_numerator(self):
        assert year_ratio(None, 3.0) == 0.0


class TestRatioIndicator:
    async def test_end_to_end(self):
        """Papers {2021: 4, 2022: 1}, FTE {2021: 2.0} -> {2021: 2.0, 2022: 0.0}, Mittel 1.0."""
        indicator = _ratio({2021: 4, 2022: 1}, {2021: 2.0})
        series = await indicator.values_per_year(ORG, 2021, 2022)
        assert series == {2021: 2.0, 2022: 0.0}
        assert await indicator.merged_value(ORG, 2021, 2022) == pytest.approx(1.0)

    async def test_empty_denominator(self):
        indicator = _ratio({2022: 4}, {})
        assert await indicator.values_per_year(ORG, 2022, 2022) == {2022: 0}

    async def test_years_follow_numerator(self):
        """Jahre nur im Nenner erscheinen nicht im Ergebnis."""
        indicator = _ratio({2021: 2}, {2020: 1.0, 2021: 4.0, 2022: 2.0})
        series = await indicator.values_per_year(ORG, 2020, 2022)
        assert set(series) == {2021}
        assert series[2021] == 0.5

    async def test_empty_numerator(self):
        indicator = _ratio({}, {2021: 1.0})
        assert await indicator.values_per_year(ORG, 2021, 2021) == {}
        assert await indicator.merged_value(ORG, 2021, 2021) == 0.0

    async def test_custom_reducer(self):
        indicator = _ratio({2021: 2, 2022: 6}, {2021: 1.0, 2022: 2.0}, reducer=sum_values)
        assert await indicator.merged_value(ORG, 2021, 2022) == 5.0

    async def test_both_sides_evaluated(self):
        indicator = _ratio({2021: 1}, {2021: 1.0})
        await indicator.values_per_year(ORG, 2021, 2021)
        assert indicator.numerator.calls == 1
        assert indicator.denominator.calls == 1

    async def test_denominator_error_propagates(self):
        failing = _FixedIndicator("permanentResearcherFte", {})
        failing.values_per_year = AsyncMock(side_effect=RuntimeError("boom"))
        indicator = RatioIndicator(
            "conferencePaperFteRatio", MESSAGES,
            _FixedIndicator("conferencePaperCount", {2021: 1}), failing,
        )
        with pytest.raises(RuntimeError):
            await indicator.values_per_year(ORG, 2021, 2021)

    def test_label(self):
        indicator = _ratio({}, {})
        assert indicator.label("en", 2019, 2023) == "Conference papers / FTE (2019-2023)"
