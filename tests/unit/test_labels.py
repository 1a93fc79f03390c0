"""Unit-Tests fuer lokalisierte Beschriftungen und den Referenzzeitraum."""

from datetime import date

import pytest

from lab_indicators.domain.labels import BundledMessageResolver, label_with_years, reference_period


class TestBundledMessageResolver:
    def test_english(self):
        resolver = BundledMessageResolver()
        assert resolver.get_message("en", "postdocCountIndicator.label") == "Postdocs"

    def test_french(self):
        resolver = BundledMessageResolver()
        assert resolver.get_message("fr", "phdStudentCountIndicator.label") == "Doctorants"

    def test_region_suffix_ignored(self):
        resolver = BundledMessageResolver()
        assert resolver.get_message("fr-FR", "engineerCountIndicator.label") == "Ingénieurs"
        assert resolver.get_message("en_GB", "engineerCountIndicator.label") == "Engineers"

    def test_unknown_locale_falls_back(self):
        resolver = BundledMessageResolver()
        assert resolver.get_message("de", "researcherCountIndicator.label") == "Researchers"

    def test_unknown_key_returns_key(self):
        assert BundledMessageResolver().get_message("en", "nope.label") == "nope.label"

    def test_arguments(self):
        resolver = BundledMessageResolver()
        text = resolver.get_message("en", "rankedJournalPaperCountIndicator.label", "Scimago")
        assert text == "Journal papers ranked on Scimago"

    def test_custom_catalog(self):
        resolver = BundledMessageResolver({"de": {"x": "Hallo {0}"}}, default_locale="de")
        assert resolver.get_message("it", "x", "Welt") == "Hallo Welt"
        assert resolver.locales == ["de"]

    def test_locales(self):
        assert BundledMessageResolver().locales == ["en", "fr"]


class TestLabelWithYears:
    def test_range(self):
        assert label_with_years("Papers", 2020, 2023) == "Papers (2020-2023)"

    def test_single_year(self):
        assert label_with_years("Papers", 2021, 2021) == "Papers (2021)"

    def test_only_one_bound(self):
        assert label_with_years("Papers", None, 2022) == "Papers (2022)"
        assert label_with_years("Papers", 2019, None) == "Papers (2019)"

    def test_no_years(self):
        assert label_with_years("Papers", None, None) == "Papers"


class TestReferencePeriod:
    def test_ends_previous_year(self):
        assert reference_period(3, today=date(2024, 5, 1)) == (2021, 2023)

    def test_single_year(self):
        assert reference_period(1, today=date(2024, 1, 1)) == (2023, 2023)

    def test_invalid_years(self):
        with pytest.raises(ValueError):
            reference_period(0)
