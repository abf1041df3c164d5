from loguru import logger

from prayaas.models.profile import UserProfile
from prayaas.models.recommendation import RecommendationResult
from prayaas.services.catalog import PolicyCatalog, policy_catalog
from prayaas.services.classifier import ProfileClassifier, profile_classifier


class RecommendationService:
    """Facade for the recommendation view: focus areas plus a policy shortlist."""

    def __init__(
        self,
        classifier: ProfileClassifier = profile_classifier,
        catalog: PolicyCatalog = policy_catalog,
    ):
        self.classifier = classifier
        self.catalog = catalog

    def recommend(self, profile: UserProfile) -> RecommendationResult:
        distribution = self.classifier.classify(profile)
        policies = self.catalog.shortlist()
        logger.info(f"Recommended focus {distribution.labels()} with {len(policies)} shortlisted policies")
        return RecommendationResult(distribution=distribution, policies=policies)


recommendation_service = RecommendationService()
