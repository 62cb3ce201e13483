from fastapi import APIRouter

from app.services.roles import list_role_catalog


router = APIRouter()


@router.get("")
def list_roles() -> dict:
    """PUBLIC: The static role catalog keyed by callsign."""
    return list_role_catalog()
