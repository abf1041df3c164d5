from enum import Enum

from pydantic import BaseModel, Field, computed_field

from prayaas.core.constants import VERDICT_MODERATE_MIN, VERDICT_RECOMMENDED_MIN


class Verdict(str, Enum):
    RECOMMENDED = "Recommended"
    MODERATELY_RECOMMENDED = "Moderately Recommended"
    NOT_RECOMMENDED = "Not Recommended"

    @classmethod
    def from_score(cls, overall: int) -> "Verdict":
        """Three-tier mapping of overall suitability; lower bounds are inclusive."""
        if overall >= VERDICT_RECOMMENDED_MIN:
            return cls.RECOMMENDED
        if overall >= VERDICT_MODERATE_MIN:
            return cls.MODERATELY_RECOMMENDED
        return cls.NOT_RECOMMENDED


class SubScores(BaseModel):
    """The six bounded scores every policy is rated on."""

    affordability: int = Field(ge=0, le=100)
    coverage: int = Field(ge=0, le=100)
    benefits: int = Field(ge=0, le=100)
    claim_settlement: int = Field(ge=0, le=100)
    flexibility: int = Field(ge=0, le=100)
    overall: int = Field(ge=0, le=100, description="Overall suitability, the primary ranking signal")


class PolicyFacts(BaseModel):
    """
    Product facts as held by the policy catalog.

    Affordability, coverage and benefits scores are optional; the scorer falls
    back to defaults when the catalog has not computed them.
    """

    premium_range: str
    coverage_amount: str
    term_length: str
    key_features: list[str] = Field(default_factory=list)
    avg_premium: float
    coverage_value: float
    suitability_score: int = Field(ge=0, le=100)
    claim_settlement_ratio: int = Field(ge=0, le=100)
    flexibility_score: int = Field(ge=0, le=100)
    affordability_score: int | None = Field(default=None, ge=0, le=100)
    coverage_score: int | None = Field(default=None, ge=0, le=100)
    benefits_score: int | None = Field(default=None, ge=0, le=100)


class PolicyScoreCard(BaseModel):
    policy_name: str
    premium_range: str
    coverage_amount: str
    term_length: str
    key_features: list[str] = Field(default_factory=list)
    avg_premium: float
    coverage_value: float
    scores: SubScores

    @computed_field
    @property
    def verdict(self) -> Verdict:
        return Verdict.from_score(self.scores.overall)

    @computed_field
    @property
    def metrics(self) -> list[tuple[str, int]]:
        """Component scores, without the overall suitability."""
        s = self.scores
        return [
            ("Affordability", s.affordability),
            ("Coverage", s.coverage),
            ("Benefits", s.benefits),
            ("Claims", s.claim_settlement),
            ("Flexibility", s.flexibility),
        ]

    @computed_field
    @property
    def radar(self) -> list[tuple[str, int]]:
        """All six axes, overall last."""
        return self.metrics + [("Overall", self.scores.overall)]


class BenefitPoint(BaseModel):
    age: int
    benefits: float
    premiums_paid: float


class PolicyAnalysis(BaseModel):
    score_card: PolicyScoreCard
    verdict: Verdict
    projection: list[BenefitPoint]
    summary: str
