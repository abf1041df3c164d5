"""
Advisory services.

Three independent, stateless components sharing only the read-only profile:
the focus-area classifier, the policy scorer and the chat intent router.
"""

from prayaas.services.classifier import ProfileClassifier
from prayaas.services.intent_router import IntentRouter
from prayaas.services.recommendations import RecommendationService
from prayaas.services.scorer import PolicyScorer, project_benefits

__all__ = [
    "ProfileClassifier",
    "PolicyScorer",
    "IntentRouter",
    "RecommendationService",
    "project_benefits",
]
