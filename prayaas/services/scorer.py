import functools

from loguru import logger

from prayaas.core.constants import (
    DEFAULT_AFFORDABILITY_SCORE,
    DEFAULT_BENEFITS_SCORE,
    DEFAULT_COVERAGE_SCORE,
    PROJECTION_GROWTH_RATE,
    PROJECTION_REFERENCE_BENEFIT,
    PROJECTION_REFERENCE_PREMIUM,
    PROJECTION_STEP_YEARS,
    PROJECTION_STEPS,
)
from prayaas.core.exceptions import InvalidQuery
from prayaas.models.policy import BenefitPoint, PolicyAnalysis, PolicyFacts, PolicyScoreCard, SubScores
from prayaas.models.profile import UserProfile
from prayaas.services.catalog import PolicyCatalog, policy_catalog


@functools.lru_cache(maxsize=256)
def _projection_series(age: int, baseline_premium: float) -> tuple[tuple[int, float, float], ...]:
    benefit_base = baseline_premium * PROJECTION_REFERENCE_BENEFIT / PROJECTION_REFERENCE_PREMIUM
    series = []
    for step in range(PROJECTION_STEPS):
        years = step * PROJECTION_STEP_YEARS
        series.append(
            (
                age + years,
                benefit_base * (1 + PROJECTION_GROWTH_RATE) ** years,
                baseline_premium * years,
            )
        )
    return tuple(series)


def project_benefits(age: int, baseline_premium: float) -> list[BenefitPoint]:
    """
    Benefit timeline in 5-year steps starting at the given age.

    Benefits compound at 5% a year from ``baseline_premium * 100000 / 17500``;
    premiums paid grow linearly. Deterministic for identical inputs.
    """
    return [
        BenefitPoint(age=point_age, benefits=benefits, premiums_paid=paid)
        for point_age, benefits, paid in _projection_series(age, float(baseline_premium))
    ]


class PolicyScorer:
    """
    Scores a named policy against a profile.

    Sub-scores come from the catalog facts. The profile is part of the contract
    so that profile-weighted catalog matching can replace the lookup without
    touching callers.
    """

    def __init__(self, catalog: PolicyCatalog = policy_catalog):
        self.catalog = catalog

    @staticmethod
    def _validate_query(policy_name: str) -> str:
        name = (policy_name or "").strip()
        if not name:
            logger.warning("Rejected blank policy name")
            raise InvalidQuery("Policy name must not be blank")
        return name

    @staticmethod
    def _sub_scores(facts: PolicyFacts) -> SubScores:
        return SubScores(
            affordability=(
                facts.affordability_score if facts.affordability_score is not None else DEFAULT_AFFORDABILITY_SCORE
            ),
            coverage=facts.coverage_score if facts.coverage_score is not None else DEFAULT_COVERAGE_SCORE,
            benefits=facts.benefits_score if facts.benefits_score is not None else DEFAULT_BENEFITS_SCORE,
            claim_settlement=facts.claim_settlement_ratio,
            flexibility=facts.flexibility_score,
            overall=facts.suitability_score,
        )

    def score(self, profile: UserProfile, policy_name: str) -> PolicyScoreCard:
        name = self._validate_query(policy_name)
        facts = self.catalog.lookup(name)

        card = PolicyScoreCard(
            policy_name=name,
            premium_range=facts.premium_range,
            coverage_amount=facts.coverage_amount,
            term_length=facts.term_length,
            key_features=list(facts.key_features),
            avg_premium=facts.avg_premium,
            coverage_value=facts.coverage_value,
            scores=self._sub_scores(facts),
        )
        logger.info(f"Scored policy '{name}': overall={card.scores.overall} ({card.verdict.value})")
        return card

    def analyze(self, profile: UserProfile, policy_name: str) -> PolicyAnalysis:
        card = self.score(profile, policy_name)
        return PolicyAnalysis(
            score_card=card,
            verdict=card.verdict,
            projection=project_benefits(profile.age, card.avg_premium),
            summary=(
                f"This policy has been analyzed against your profile including age ({profile.age}), "
                f"income ({profile.income_range.value}), family size ({profile.family_members} members), "
                "and current insurance portfolio."
            ),
        )


policy_scorer = PolicyScorer()
