from enum import Enum

from pydantic import BaseModel, Field, computed_field, model_validator

from prayaas.core.constants import MATCH_FAIR_MIN, MATCH_STRONG_MIN


class CategoryShare(BaseModel):
    label: str
    weight: int = Field(ge=0, le=100, description="Share of the recommended focus, in percent")
    color: str = Field(description="Chart color tag, e.g. '#3b82f6'")


class CategoryDistribution(BaseModel):
    """
    Weighted breakdown of recommended insurance focus areas.

    Shares keep their rule-table order and always sum to 100.
    """

    shares: list[CategoryShare]

    @model_validator(mode="after")
    def check_weights_sum(self):
        total = sum(share.weight for share in self.shares)
        if total != 100:
            raise ValueError(f"Category weights must sum to 100, got {total}")
        return self

    def as_dict(self) -> dict[str, int]:
        return {share.label: share.weight for share in self.shares}

    def labels(self) -> list[str]:
        return [share.label for share in self.shares]


class MatchBand(str, Enum):
    STRONG = "Strong"
    FAIR = "Fair"
    WEAK = "Weak"

    @classmethod
    def from_suitability(cls, suitability: int) -> "MatchBand":
        if suitability >= MATCH_STRONG_MIN:
            return cls.STRONG
        if suitability >= MATCH_FAIR_MIN:
            return cls.FAIR
        return cls.WEAK


class PolicyRecommendation(BaseModel):
    name: str
    company: str
    premium: str
    coverage: str
    suitability: int = Field(ge=0, le=100)
    key_features: list[str] = Field(default_factory=list)
    description: str = ""

    @computed_field
    @property
    def match(self) -> MatchBand:
        return MatchBand.from_suitability(self.suitability)


class RecommendationResult(BaseModel):
    distribution: CategoryDistribution
    policies: list[PolicyRecommendation]
