"""
Pytest configuration and fixtures
"""

import pytest
from fastapi.testclient import TestClient

from prayaas.models.profile import (
    HealthCondition,
    IncomeRange,
    InsuranceType,
    Language,
    Occupation,
    UserProfile,
    get_default_profile,
)


@pytest.fixture
def default_profile() -> UserProfile:
    """Initial form state: age 30, family of 4"""
    return get_default_profile()


@pytest.fixture
def young_single_profile() -> UserProfile:
    return UserProfile(
        age=26,
        income_range=IncomeRange.LAKH_10_TO_15,
        occupation=Occupation.IT_PROFESSIONAL,
        family_members=1,
    )


@pytest.fixture
def senior_profile() -> UserProfile:
    return UserProfile(
        age=62,
        income_range=IncomeRange.LAKH_2_5_TO_5,
        occupation=Occupation.RETIRED,
        family_members=6,
        existing_insurance=frozenset({InsuranceType.HEALTH}),
        health_conditions=frozenset({HealthCondition.DIABETES, HealthCondition.HYPERTENSION}),
        language=Language.HINDI,
    )


@pytest.fixture
def client() -> TestClient:
    from prayaas.core.app import app

    return TestClient(app)
