"""
Tests for profile validation and value models
"""

import pytest
from pydantic import ValidationError

from prayaas.models.profile import (
    HealthCondition,
    IncomeRange,
    Occupation,
    UserProfile,
    get_profile_options,
)
from prayaas.models.recommendation import CategoryDistribution, CategoryShare, MatchBand
from prayaas.services.catalog import PolicyCatalog


class TestUserProfile:
    def test_defaults(self, default_profile):
        assert default_profile.age == 30
        assert default_profile.family_members == 4
        assert default_profile.health_conditions == frozenset({HealthCondition.NONE})
        assert default_profile.existing_insurance == frozenset()

    @pytest.mark.parametrize("age", [17, 81])
    def test_age_bounds(self, age):
        with pytest.raises(ValidationError):
            UserProfile(
                age=age,
                income_range=IncomeRange.UP_TO_2_5_LAKH,
                occupation=Occupation.OTHER,
                family_members=2,
            )

    @pytest.mark.parametrize("family_members", [0, 11])
    def test_family_bounds(self, family_members):
        with pytest.raises(ValidationError):
            UserProfile(
                age=30,
                income_range=IncomeRange.UP_TO_2_5_LAKH,
                occupation=Occupation.OTHER,
                family_members=family_members,
            )

    def test_unknown_label_rejected(self):
        with pytest.raises(ValidationError):
            UserProfile(age=30, income_range="A lot", occupation=Occupation.OTHER, family_members=2)

    def test_frozen(self, default_profile):
        with pytest.raises(ValidationError):
            default_profile.age = 40

    def test_from_labels(self):
        profile = UserProfile.model_validate(
            {
                "age": 45,
                "income_range": "Above ₹3 Crore",
                "occupation": "Engineer",
                "family_members": 3,
                "existing_insurance": ["Term Life", "Car Insurance"],
                "health_conditions": ["Diabetes"],
                "language": "Tamil",
            }
        )
        assert profile.income_range is IncomeRange.ABOVE_3_CRORE
        assert profile.income_range.rank == 11

    def test_option_sizes(self):
        options = get_profile_options()
        assert len(options["income_range"]) == 12
        assert len(options["occupation"]) == 18
        assert len(options["existing_insurance"]) == 6
        assert len(options["health_conditions"]) == 6
        assert len(options["language"]) == 8

    def test_income_ranks_ordered(self):
        assert [bracket.rank for bracket in IncomeRange] == list(range(12))


class TestCategoryDistribution:
    def test_weights_must_sum_to_100(self):
        with pytest.raises(ValidationError):
            CategoryDistribution(shares=[CategoryShare(label="Term Life", weight=50, color="#3b82f6")])


class TestShortlist:
    def test_match_bands(self):
        assert MatchBand.from_suitability(80) is MatchBand.STRONG
        assert MatchBand.from_suitability(79) is MatchBand.FAIR
        assert MatchBand.from_suitability(60) is MatchBand.FAIR
        assert MatchBand.from_suitability(59) is MatchBand.WEAK

    def test_shortlist_contents(self):
        policies = PolicyCatalog().shortlist()
        assert [(p.name, p.suitability) for p in policies] == [
            ("Jeevan Anand Plus", 85),
            ("Star Health Red Carpet", 78),
            ("HDFC Life Click 2 Protect Plus", 92),
        ]
        assert [p.match for p in policies] == [MatchBand.STRONG, MatchBand.FAIR, MatchBand.STRONG]
