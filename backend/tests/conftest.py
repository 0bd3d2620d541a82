"""Shared test configuration, pytest markers and profile fixtures."""

import pytest

from models.schemas.employee_profile import EmployeeProfile
from services.pipeline.stage_registry import clear as clear_registry


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "golden: pinned values from worked examples"
    )


@pytest.fixture(autouse=True)
def _reset_registry():
    """Clear stage registry before each test."""
    clear_registry()


def _make_profile(**overrides) -> EmployeeProfile:
    """Ontario professional, 10 years, 41-50, $104,000 (weekly pay $2,000)."""
    defaults = dict(
        jurisdiction="ON",
        years_of_service=10,
        months_of_service=0,
        age_bracket="41-50",
        job_position="professional",
        annual_salary=104_000,
        is_union_member=False,
    )
    defaults.update(overrides)
    return EmployeeProfile(**defaults)


@pytest.fixture
def make_profile():
    """Factory for profiles that differ from the default in a few fields."""
    return _make_profile


@pytest.fixture
def profile() -> EmployeeProfile:
    return _make_profile()
