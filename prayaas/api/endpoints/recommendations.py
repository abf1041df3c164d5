from fastapi import APIRouter, HTTPException
from loguru import logger

from prayaas.models.profile import UserProfile
from prayaas.models.recommendation import CategoryDistribution, RecommendationResult
from prayaas.services.classifier import profile_classifier
from prayaas.services.recommendations import recommendation_service

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


@router.post("", response_model=RecommendationResult)
async def get_recommendations(profile: UserProfile) -> RecommendationResult:
    try:
        return recommendation_service.recommend(profile)
    except Exception as e:
        logger.exception(f"Error building recommendations: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/distribution", response_model=CategoryDistribution)
async def get_distribution(profile: UserProfile) -> CategoryDistribution:
    try:
        return profile_classifier.classify(profile)
    except Exception as e:
        logger.exception(f"Error classifying profile: {e}")
        raise HTTPException(status_code=500, detail=str(e))
