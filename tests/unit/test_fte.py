"""Unit-Tests fuer FTE- und Kopfzahl-Indikatoren."""

from datetime import date
from unittest.mock import AsyncMock

from lab_indicators.domain.fte import (
    MembershipFteIndicator,
    MembershipHeadcountIndicator,
    days_in_year,
    describe_persons,
    overlap_days,
    overlaps_window,
)
from lab_indicators.domain.labels import BundledMessageResolver
from lab_indicators.domain.models import Membership, MemberStatus, ResearchOrganization
from lab_indicators.domain.predicates import is_permanent_researcher, is_phd_student, is_postdoc, is_researcher

ORG = ResearchOrganization(id=3, name="Team")
MESSAGES = BundledMessageResolver()


def _member(
    person_id: int,
    status: MemberStatus,
    since: date | None = None,
    to: date | None = None,
    permanent: bool = False,
    name: str = "",
) -> Membership:
    return Membership(
        person_id=person_id, organization_id=3, status=status,
        since=since, to=to, permanent_position=permanent, person_name=name,
    )


class TestOverlapDays:
    def test_leap_year(self):
        assert days_in_year(2020) == 366
        assert days_in_year(2021) == 365

    def test_open_bounds_cover_full_year(self):
        m = _member(1, MemberStatus.RESEARCHER)
        assert overlap_days(m, 2020) == 366

    def test_partial_year(self):
        m = _member(1, MemberStatus.RESEARCHER, since=date(2021, 7, 2))
        assert overlap_days(m, 2021) == 183

    def test_inclusive_single_day(self):
        m = _member(1, MemberStatus.RESEARCHER, since=date(2021, 3, 1), to=date(2021, 3, 1))
        assert overlap_days(m, 2021) == 1

    def test_outside_year(self):
        m = _member(1, MemberStatus.RESEARCHER, since=date(2018, 1, 1), to=date(2019, 12, 31))
        assert overlap_days(m, 2020) == 0


class TestMembershipFteIndicator:
    async def test_full_year_weighted_by_status(self):
        memberships = [
            _member(1, MemberStatus.FULL_PROFESSOR, since=date(2010, 1, 1), permanent=True),
            _member(2, MemberStatus.RESEARCHER, since=date(2015, 1, 1), permanent=True),
        ]
        indicator = MembershipFteIndicator(
            "permanentResearcherFte", MESSAGES,
            AsyncMock(return_value=memberships), is_permanent_researcher,
        )
        assert await indicator.values_per_year(ORG, 2022, 2022) == {2022: 1.5}

    async def test_partial_year(self):
        memberships = [
            _member(1, MemberStatus.RESEARCHER, since=date(2021, 7, 2), permanent=True),
        ]
        indicator = MembershipFteIndicator(
            "permanentResearcherFte", MESSAGES,
            AsyncMock(return_value=memberships), is_permanent_researcher,
        )
        series = await indicator.values_per_year(ORG, 2020, 2022)
        assert series == {2021: 0.5014, 2022: 1.0}

    async def test_selector_applied(self):
        memberships = [
            _member(1, MemberStatus.RESEARCHER, permanent=False),
            _member(2, MemberStatus.PHD_STUDENT, permanent=True),
        ]
        indicator = MembershipFteIndicator(
            "permanentResearcherFte", MESSAGES,
            AsyncMock(return_value=memberships), is_permanent_researcher,
        )
        assert await indicator.values_per_year(ORG, 2021, 2021) == {}
        assert await indicator.merged_value(ORG, 2021, 2021) == 0.0

    async def test_merged_value_is_average(self):
        memberships = [
            _member(1, MemberStatus.PHD_STUDENT, since=date(2021, 1, 1), to=date(2022, 12, 31)),
            _member(2, MemberStatus.PHD_STUDENT, since=date(2022, 1, 1), to=date(2022, 12, 31)),
        ]
        indicator = MembershipFteIndicator(
            "phdStudentFte", MESSAGES, AsyncMock(return_value=memberships), is_phd_student,
        )
        assert await indicator.values_per_year(ORG, 2021, 2022) == {2021: 1.0, 2022: 2.0}
        assert await indicator.merged_value(ORG, 2021, 2022) == 1.5


class TestMembershipHeadcountIndicator:
    async def test_distinct_persons(self):
        """Mehrere Mitgliedschaften derselben Person zaehlen einmal."""
        memberships = [
            _member(1, MemberStatus.POSTDOC, since=date(2021, 1, 1), to=date(2021, 6, 30)),
            _member(1, MemberStatus.RESEARCHER, since=date(2021, 7, 1)),
            _member(2, MemberStatus.RESEARCHER, since=date(2022, 1, 1)),
            _member(3, MemberStatus.ASSOCIATED_MEMBER, since=date(2020, 1, 1)),
        ]
        indicator = MembershipHeadcountIndicator(
            "researcherCount", MESSAGES, AsyncMock(return_value=memberships), is_researcher,
        )
        assert await indicator.values_per_year(ORG, 2020, 2022) == {2021: 1, 2022: 2}

    def test_label_without_years(self):
        indicator = MembershipHeadcountIndicator(
            "postdocCount", MESSAGES, AsyncMock(return_value=[]), is_postdoc,
            year_based_label=False,
        )
        assert indicator.label("en", 2021, 2022) == "Postdocs"


class TestOverlapsWindow:
    def test_open_bounds(self):
        assert overlaps_window(_member(1, MemberStatus.RESEARCHER), 2021, 2022)

    def test_ends_before_window(self):
        m = _member(1, MemberStatus.RESEARCHER, since=date(2018, 1, 1), to=date(2020, 12, 31))
        assert not overlaps_window(m, 2021, 2022)

    def test_starts_after_window(self):
        m = _member(1, MemberStatus.RESEARCHER, since=date(2023, 1, 1))
        assert not overlaps_window(m, 2021, 2022)

    def test_touches_window_on_single_day(self):
        m = _member(1, MemberStatus.RESEARCHER, since=date(2019, 1, 1), to=date(2021, 1, 1))
        assert overlaps_window(m, 2021, 2022)


class TestMembershipDetails:
    """Die Details listen die ausgewaehlten Personen im Fenster."""

    def test_describe_persons_sorted_and_numbered(self):
        assert describe_persons(["Zeta, Zoe", "Alpha, Ann", ""]) == "1) Alpha, Ann\n2) Zeta, Zoe"

    def test_describe_persons_empty(self):
        assert describe_persons([]) is None
        assert describe_persons([""]) is None

    async def test_compute_lists_persons_in_window(self):
        memberships = [
            _member(1, MemberStatus.POSTDOC, since=date(2021, 1, 1), to=date(2021, 6, 30), name="Weber, Nina"),
            _member(1, MemberStatus.POSTDOC, since=date(2021, 9, 1), to=date(2022, 8, 31), name="Weber, Nina"),
            _member(2, MemberStatus.POSTDOC, since=date(2022, 3, 1), name="Adler, Tom"),
            _member(3, MemberStatus.POSTDOC, since=date(2017, 1, 1), to=date(2019, 12, 31), name="Alt, Eva"),
            _member(4, MemberStatus.RESEARCHER, since=date(2021, 1, 1), name="Berg, Lia"),
        ]
        indicator = MembershipHeadcountIndicator(
            "postdocCount", MESSAGES, AsyncMock(return_value=memberships), is_postdoc,
        )
        result = await indicator.compute(ORG, 2021, 2022)
        assert result.series == {2021: 1, 2022: 2}
        assert result.details == "1) Adler, Tom\n2) Weber, Nina"

    async def test_compute_without_persons(self):
        indicator = MembershipFteIndicator(
            "postdocFte", MESSAGES, AsyncMock(return_value=[]), is_postdoc,
        )
        result = await indicator.compute(ORG, 2021, 2022)
        assert result.series == {}
        assert result.details is None
