from fastapi import APIRouter, HTTPException
from loguru import logger
from pydantic import BaseModel, Field

from prayaas.core.exceptions import InvalidQuery
from prayaas.models.policy import PolicyAnalysis
from prayaas.models.profile import UserProfile
from prayaas.services.scorer import policy_scorer

router = APIRouter(prefix="/policies", tags=["policies"])


class AnalysisRequest(BaseModel):
    profile: UserProfile
    policy_name: str = Field(description="Policy to analyze, e.g. 'LIC Jeevan Anand'")


@router.post("/analyze", response_model=PolicyAnalysis)
async def analyze_policy(payload: AnalysisRequest) -> PolicyAnalysis:
    try:
        return policy_scorer.analyze(payload.profile, payload.policy_name)
    except InvalidQuery as e:
        raise HTTPException(status_code=400, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error analyzing policy '{payload.policy_name}': {e}")
        raise HTTPException(status_code=500, detail=str(e))
