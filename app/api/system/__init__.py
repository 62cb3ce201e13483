from fastapi import APIRouter

from app.services.system import get_version_info, mission_clock


router = APIRouter()


@router.get("/version")
def version() -> dict:
    """PUBLIC: Build version with git branch and commit."""
    return get_version_info()


@router.get("/clock")
def clock() -> dict:
    """PUBLIC: Current UTC time in day-of-year clock format."""
    return mission_clock()
