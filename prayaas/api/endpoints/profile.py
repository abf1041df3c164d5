from fastapi import APIRouter

from prayaas.models.profile import UserProfile, get_default_profile, get_profile_options

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("/default", response_model=UserProfile)
async def default_profile() -> UserProfile:
    return get_default_profile()


@router.get("/options")
async def profile_options() -> dict[str, list[str]]:
    return get_profile_options()
