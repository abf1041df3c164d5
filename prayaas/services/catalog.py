from loguru import logger

from prayaas.models.policy import PolicyFacts
from prayaas.models.recommendation import PolicyRecommendation

REFERENCE_POLICY_FACTS = PolicyFacts(
    premium_range="₹15,000 - ₹20,000",
    coverage_amount="₹20 Lakhs",
    term_length="25 years",
    key_features=[
        "Comprehensive life cover with maturity benefits",
        "Tax benefits under Section 80C and 10(10D)",
        "Flexible premium payment options",
        "Accidental death and disability benefit",
        "Option to increase coverage without medical checkup",
    ],
    avg_premium=17500,
    coverage_value=2000000,
    suitability_score=78,
    claim_settlement_ratio=87,
    flexibility_score=72,
    affordability_score=82,
    coverage_score=75,
    benefits_score=85,
)

SHORTLIST: tuple[PolicyRecommendation, ...] = (
    PolicyRecommendation(
        name="Jeevan Anand Plus",
        company="LIC of India",
        premium="₹12,000 - ₹15,000",
        coverage="₹15 Lakhs",
        suitability=85,
        key_features=["Death Benefit", "Maturity Benefit", "Tax Benefits", "Loan Facility"],
        description="A comprehensive life insurance plan with savings component",
    ),
    PolicyRecommendation(
        name="Star Health Red Carpet",
        company="Star Health Insurance",
        premium="₹8,500 - ₹12,000",
        coverage="₹10 Lakhs Family",
        suitability=78,
        key_features=["Family Coverage", "Pre-existing Disease Cover", "No Room Rent Limit", "Wellness Benefits"],
        description="Premium health insurance with comprehensive family coverage",
    ),
    PolicyRecommendation(
        name="HDFC Life Click 2 Protect Plus",
        company="HDFC Life",
        premium="₹6,000 - ₹9,000",
        coverage="₹25 Lakhs",
        suitability=92,
        key_features=["Pure Term Plan", "High Coverage", "Online Application", "Accidental Benefits"],
        description="Affordable term insurance with high coverage at low premiums",
    ),
)


class PolicyCatalog:
    """
    Fixed, in-memory policy catalog.

    Every lookup resolves to the same reference facts; names are opaque keys.
    """

    def __init__(
        self,
        facts: PolicyFacts = REFERENCE_POLICY_FACTS,
        shortlist: tuple[PolicyRecommendation, ...] = SHORTLIST,
    ):
        self._facts = facts
        self._shortlist = shortlist

    def lookup(self, policy_name: str) -> PolicyFacts:
        logger.debug(f"Catalog lookup for '{policy_name}' resolved to reference facts")
        return self._facts.model_copy(deep=True)

    def shortlist(self) -> list[PolicyRecommendation]:
        return [policy.model_copy(deep=True) for policy in self._shortlist]


policy_catalog = PolicyCatalog()
