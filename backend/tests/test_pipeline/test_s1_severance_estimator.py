"""Tests for Stage 1: Severance Estimator."""

import pytest
from pydantic import ValidationError

from models.schemas.employee_profile import AGE_BRACKETS, EmployeeProfile
from models.schemas.entitlement_estimate import EntitlementEstimate
from services.pipeline.s1_severance_estimator import (
    POSITION_MULTIPLIERS,
    InvalidInputError,
    SeveranceEstimatorService,
    common_law_weeks,
    estimate,
    statutory_notice_weeks,
    statutory_severance_weeks,
)


class TestSeveranceEstimatorService:
    def setup_method(self):
        self.svc = SeveranceEstimatorService()

    def test_run_loads_once(self, profile):
        assert not self.svc.is_loaded
        result = self.svc.run(profile=profile)
        assert self.svc.is_loaded
        assert isinstance(result, EntitlementEstimate)


@pytest.mark.golden
class TestWorkedExample:
    """ON, 10y 0m, 41-50, professional, $104,000, no offer, no payroll."""

    def test_statutory_minimum(self, profile):
        result = estimate(profile)
        assert result.statutory_minimum.weeks == 8
        assert result.statutory_minimum.amount == 16_000

    def test_no_statutory_severance_without_payroll(self, profile):
        assert estimate(profile).statutory_severance is None

    def test_common_law_range(self, profile):
        cl = estimate(profile).common_law_range
        assert (cl.min_weeks, cl.max_weeks) == (26, 104)
        assert cl.min_amount == 52_000
        assert cl.max_amount == 208_000

    def test_recommended_is_midpoint(self, profile):
        rec = estimate(profile).recommended
        assert rec.weeks == 65
        assert rec.amount == 130_000

    def test_statutory_floor(self, profile):
        assert estimate(profile).statutory_floor == 16_000


class TestUnionMember:
    def test_all_zero(self, make_profile):
        result = estimate(make_profile(is_union_member=True, employer_payroll=5_000_000))
        assert result.statutory_minimum.weeks == 0
        assert result.statutory_minimum.amount == 0
        assert result.statutory_severance is None
        assert result.common_law_range.min_weeks == 0
        assert result.common_law_range.max_weeks == 0
        assert result.common_law_range.min_amount == 0
        assert result.common_law_range.max_amount == 0
        assert result.recommended.weeks == 0
        assert result.recommended.amount == 0


class TestStatutoryNotice:
    @pytest.mark.parametrize(
        "code,years,expected",
        [
            ("ON", 3.5, 3),
            ("ON", 12, 8),
            ("BC", 7.9, 7),
            ("NB", 10, 4),
            ("PE", 3, 3),
            ("PE", 6, 4),
            ("QC", 9, 8),
            ("XX", 10, 8),
            ("XX", 2.5, 2),
        ],
    )
    def test_standard_rule(self, code, years, expected):
        assert statutory_notice_weeks(code, years) == expected

    @pytest.mark.parametrize(
        "years,expected",
        [(0, 0), (0.99, 0), (1, 2), (1.5, 2), (3, 4), (7, 8), (10, 8)],
    )
    def test_federal_rule(self, years, expected):
        assert statutory_notice_weeks("Federal", years) == expected

    def test_zero_service_is_zero_everywhere(self):
        for code in ("ON", "NB", "Federal", "XX"):
            assert statutory_notice_weeks(code, 0) == 0


class TestStatutorySeverance:
    def test_eligible(self):
        assert statutory_severance_weeks("ON", 10, 3_000_000) == 10

    def test_capped_at_26_weeks(self):
        assert statutory_severance_weeks("ON", 30, 3_000_000) == 26

    def test_exact_thresholds(self):
        assert statutory_severance_weeks("ON", 5, 2_500_000) == 5

    def test_short_service(self):
        assert statutory_severance_weeks("ON", 4 + 11 / 12, 3_000_000) is None

    def test_small_employer(self):
        assert statutory_severance_weeks("ON", 10, 2_499_999) is None

    def test_missing_payroll(self):
        assert statutory_severance_weeks("ON", 10, None) is None

    def test_other_jurisdiction(self):
        assert statutory_severance_weeks("BC", 10, 3_000_000) is None

    def test_estimate_reports_amount(self, make_profile):
        result = estimate(make_profile(employer_payroll=3_000_000))
        assert result.statutory_severance is not None
        assert result.statutory_severance.weeks == 10
        assert result.statutory_severance.amount == 20_000
        assert result.statutory_floor == 36_000


class TestCommonLawRange:
    def test_zero_service_clamps_to_empty_range(self):
        assert common_law_weeks(0, "under-30", "labourer") == (0, 0)

    def test_inverted_range_clamps_min_to_max(self):
        # 3 months: min floor 0.5 months (2 weeks) exceeds max 0.3 months (1 week)
        assert common_law_weeks(0.25, "30-40", "technical") == (1, 1)

    def test_short_service_keeps_floor_when_not_inverted(self):
        assert common_law_weeks(0.25, "70+", "upper-management") == (2, 4)

    def test_long_service_hits_caps(self):
        # min capped at 6 months, max capped at 24 months
        assert common_law_weeks(30, "70+", "upper-management") == (26, 104)

    def test_zero_service_estimate(self, make_profile):
        result = estimate(make_profile(years_of_service=0, months_of_service=0))
        assert result.statutory_minimum.weeks == 0
        assert result.common_law_range.min_weeks <= result.common_law_range.max_weeks
        assert result.recommended.amount == 0

    @pytest.mark.parametrize("years", [0, 1, 2, 5, 10, 25])
    @pytest.mark.parametrize("months", [0, 1, 3, 6, 11])
    def test_recommended_within_range(self, make_profile, years, months):
        for bracket in AGE_BRACKETS:
            result = estimate(make_profile(
                years_of_service=years,
                months_of_service=months,
                age_bracket=bracket,
                annual_salary=87_500,
            ))
            cl = result.common_law_range
            assert cl.min_weeks <= cl.max_weeks
            assert cl.min_amount <= result.recommended.amount <= cl.max_amount


class TestMonotonicity:
    @pytest.mark.parametrize("total_years", [0.25, 0.5, 1, 1.5, 3, 8, 20])
    def test_age_bracket_never_decreases_bounds(self, total_years):
        previous = (0, 0)
        for bracket in AGE_BRACKETS:
            current = common_law_weeks(total_years, bracket, "technical")
            assert current[0] >= previous[0]
            assert current[1] >= previous[1]
            previous = current

    @pytest.mark.parametrize("total_years", [0.25, 0.5, 1, 1.5, 3, 8, 20])
    def test_position_multiplier_never_decreases_bounds(self, total_years):
        positions = sorted(POSITION_MULTIPLIERS, key=POSITION_MULTIPLIERS.get)
        previous = (0, 0)
        for position in positions:
            current = common_law_weeks(total_years, "41-50", position)
            assert current[0] >= previous[0]
            assert current[1] >= previous[1]
            previous = current


class TestInvalidInput:
    def test_schema_rejects_non_positive_salary(self, make_profile):
        with pytest.raises(ValidationError):
            make_profile(annual_salary=0)

    def test_schema_rejects_months_out_of_range(self, make_profile):
        with pytest.raises(ValidationError):
            make_profile(months_of_service=12)

    def test_schema_rejects_negative_years(self, make_profile):
        with pytest.raises(ValidationError):
            make_profile(years_of_service=-1)

    def test_schema_rejects_unknown_age_bracket(self, make_profile):
        with pytest.raises(ValidationError):
            make_profile(age_bracket="25-35")

    def test_estimator_rejects_unvalidated_salary(self, profile):
        bad = EmployeeProfile.model_construct(**{**profile.model_dump(), "annual_salary": -5})
        with pytest.raises(InvalidInputError):
            estimate(bad)

    def test_estimator_rejects_unvalidated_months(self, profile):
        bad = EmployeeProfile.model_construct(**{**profile.model_dump(), "months_of_service": 14})
        with pytest.raises(InvalidInputError):
            estimate(bad)

    @pytest.mark.parametrize(
        "field,value",
        [("annual_salary", float("inf")), ("annual_salary", float("nan")),
         ("current_offer", float("inf")), ("employer_payroll", float("nan"))],
    )
    def test_schema_rejects_non_finite_amounts(self, make_profile, field, value):
        with pytest.raises(ValidationError):
            make_profile(**{field: value})

    @pytest.mark.parametrize("field", ["annual_salary", "current_offer", "employer_payroll"])
    def test_estimator_rejects_unvalidated_infinity(self, profile, field):
        bad = EmployeeProfile.model_construct(**{**profile.model_dump(), field: float("inf")})
        with pytest.raises(InvalidInputError, match=field):
            estimate(bad)

    def test_unknown_jurisdiction_is_not_an_error(self, make_profile):
        result = estimate(make_profile(jurisdiction="XX"))
        assert result.statutory_minimum.weeks == 8
        assert result.statutory_severance is None
