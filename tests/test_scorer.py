"""
Unit tests for policy scoring, verdicts and the benefit projection
"""

import pytest

from prayaas.core.exceptions import InvalidQuery
from prayaas.models.policy import PolicyFacts, Verdict
from prayaas.services.catalog import REFERENCE_POLICY_FACTS, PolicyCatalog
from prayaas.services.scorer import PolicyScorer, project_benefits


class TestVerdict:
    @pytest.mark.parametrize(
        "overall, expected",
        [
            (100, Verdict.RECOMMENDED),
            (78, Verdict.RECOMMENDED),
            (70, Verdict.RECOMMENDED),
            (69, Verdict.MODERATELY_RECOMMENDED),
            (50, Verdict.MODERATELY_RECOMMENDED),
            (49, Verdict.NOT_RECOMMENDED),
            (0, Verdict.NOT_RECOMMENDED),
        ],
    )
    def test_thresholds(self, overall, expected):
        assert Verdict.from_score(overall) is expected


class TestPolicyScorer:
    @pytest.fixture
    def scorer(self):
        return PolicyScorer()

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_query_rejected(self, scorer, default_profile, name):
        with pytest.raises(InvalidQuery):
            scorer.score(default_profile, name)

    def test_invalid_query_is_value_error(self, scorer, default_profile):
        with pytest.raises(ValueError):
            scorer.analyze(default_profile, "")

    def test_reference_policy(self, scorer, default_profile):
        card = scorer.score(default_profile, "LIC Jeevan Anand")
        assert card.policy_name == "LIC Jeevan Anand"
        assert card.scores.overall == 78
        assert card.verdict is Verdict.RECOMMENDED
        assert card.scores.claim_settlement == 87
        assert card.scores.flexibility == 72
        assert card.premium_range == "₹15,000 - ₹20,000"
        assert card.coverage_amount == "₹20 Lakhs"
        assert card.term_length == "25 years"
        assert len(card.key_features) == 5

    def test_name_is_trimmed(self, scorer, default_profile):
        assert scorer.score(default_profile, "  HDFC Life Sanchay Plus ").policy_name == "HDFC Life Sanchay Plus"

    def test_sub_scores_in_bounds(self, scorer, senior_profile):
        card = scorer.score(senior_profile, "Any Policy")
        for _, value in card.radar:
            assert 0 <= value <= 100

    def test_radar_and_metrics_axes(self, scorer, default_profile):
        card = scorer.score(default_profile, "LIC Jeevan Anand")
        assert [axis for axis, _ in card.metrics] == ["Affordability", "Coverage", "Benefits", "Claims", "Flexibility"]
        assert card.radar[-1] == ("Overall", 78)
        assert dict(card.metrics) == {
            "Affordability": 82,
            "Coverage": 75,
            "Benefits": 85,
            "Claims": 87,
            "Flexibility": 72,
        }

    def test_missing_catalog_scores_fall_back(self, default_profile):
        facts = REFERENCE_POLICY_FACTS.model_copy(
            update={"affordability_score": None, "coverage_score": None, "benefits_score": None}
        )
        scorer = PolicyScorer(catalog=PolicyCatalog(facts=facts))
        scores = scorer.score(default_profile, "Plain Plan").scores
        assert (scores.affordability, scores.coverage, scores.benefits) == (70, 75, 80)

    @pytest.mark.parametrize(
        "overall, expected",
        [(69, Verdict.MODERATELY_RECOMMENDED), (49, Verdict.NOT_RECOMMENDED)],
    )
    def test_verdict_follows_catalog_suitability(self, default_profile, overall, expected):
        facts = PolicyFacts(**{**REFERENCE_POLICY_FACTS.model_dump(), "suitability_score": overall})
        scorer = PolicyScorer(catalog=PolicyCatalog(facts=facts))
        assert scorer.analyze(default_profile, "Weak Plan").verdict is expected

    def test_analysis_bundle(self, scorer, default_profile):
        analysis = scorer.analyze(default_profile, "LIC Jeevan Anand")
        assert analysis.verdict is Verdict.RECOMMENDED
        assert len(analysis.projection) == 6
        assert analysis.projection[0].age == 30
        assert analysis.projection[-1].age == 55
        assert "age (30)" in analysis.summary
        assert "income (₹5 Lakh - ₹7.5 Lakh)" in analysis.summary
        assert "family size (4 members)" in analysis.summary

    def test_catalog_copy_is_not_shared(self, scorer, default_profile):
        card = scorer.score(default_profile, "LIC Jeevan Anand")
        card.key_features.append("mutated")
        assert len(scorer.score(default_profile, "LIC Jeevan Anand").key_features) == 5


class TestBenefitProjection:
    def test_step_zero(self):
        first = project_benefits(30, 17500)[0]
        assert first.benefits == pytest.approx(100000)
        assert first.premiums_paid == 0
        assert first.age == 30

    def test_growth(self):
        premium = 20000
        points = project_benefits(40, premium)
        base = premium * 100000 / 17500
        for i, point in enumerate(points):
            assert point.age == 40 + 5 * i
            assert point.benefits == pytest.approx(base * 1.05 ** (5 * i))
            assert point.premiums_paid == pytest.approx(premium * 5 * i)

    def test_deterministic(self):
        assert project_benefits(45, 17500) == project_benefits(45, 17500)


class TestCatalogScoreFallback:
    def test_zero_score_is_kept(self, default_profile):
        facts = REFERENCE_POLICY_FACTS.model_copy(update={"affordability_score": 0})
        scorer = PolicyScorer(catalog=PolicyCatalog(facts=facts))
        assert scorer.score(default_profile, "Costly Plan").scores.affordability == 0
