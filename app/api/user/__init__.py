from fastapi import APIRouter
from pydantic import BaseModel

from app.models.role import Role
from app.services.missions import assign_mission
from app.services.roles import (
    get_current_role,
    get_allowed_roles,
    list_users_by_mission,
    list_users_current_role,
    set_current_role,
    set_allowed_roles,
)


router = APIRouter()


class RoleBody(BaseModel):
    name: str | None = None
    callsign: str

    def to_role(self) -> Role:
        return Role(name=self.name, callsign=self.callsign)


@router.get("")
def list_users(mission: str | None = None) -> list[dict]:
    """List members of a mission with a callsign map of their allowed roles."""
    return list_users_by_mission(mission)


@router.get("/current-roles")
def list_current_roles(mission: str | None = None) -> list[dict]:
    """List members of a mission, each carrying only that mission's entry."""
    return list_users_current_role(mission)


@router.get("/current-role")
def current_role(email: str | None = None, mission: str | None = None) -> dict:
    """Current role of a user on a mission."""
    return get_current_role(email, mission).to_output()


@router.get("/allowed-roles")
def allowed_roles(email: str | None = None, mission: str | None = None) -> list[dict]:
    """Allowed roles of a user on a mission, in stored order."""
    return [role.to_output() for role in get_allowed_roles(email, mission)]


class AssignMissionBody(BaseModel):
    email: str | None = None
    mission: str | None = None

@router.post("/mission")
def join_mission(body: AssignMissionBody) -> dict:
    """Join a mission; the first member becomes Mission Director."""
    return assign_mission(body.email, body.mission).to_output()


class SetRoleBody(BaseModel):
    email: str | None = None
    mission: str | None = None
    role: RoleBody | None = None

@router.post("/role")
def update_current_role(body: SetRoleBody) -> dict:
    """Overwrite a user's current role on a mission."""
    role = body.role.to_role() if body.role else None
    return set_current_role(body.email, body.mission, role).to_dict()


class SetAllowedRolesBody(BaseModel):
    email: str | None = None
    mission: str | None = None
    roles: list[RoleBody] | None = None

@router.post("/allowed-roles")
def update_allowed_roles(body: SetAllowedRolesBody) -> dict:
    """Replace a user's allowed roles on a mission."""
    # Order is preserved; clients render roles in the order they were sent
    roles = [r.to_role() for r in body.roles] if body.roles is not None else None
    return set_allowed_roles(body.email, body.mission, roles).to_dict()
