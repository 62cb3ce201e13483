from __future__ import annotations

import logging
from typing import Any

from app.models.role import Role
from app.models.user import User, Mission
from app.utils.base import NotFound
from app.utils.config import get_role_catalog
from app.services.common import require_params, store_operation


logger = logging.getLogger(__name__)


def _find_user_mission(email: str, mission: str) -> tuple[User, Mission]:
    user: User | None = User.objects(auth__email=email, missions__name=mission).first()
    if not user or not user.missions:
        logger.warning("User %s not found or has no missions", email)
        raise NotFound(f"User {email} not found for mission {mission}")

    entry = user.find_mission(mission)
    if not entry:
        logger.warning("User %s doesn't have mission %s", email, mission)
        raise NotFound(f"User {email} not found for mission {mission}")
    return user, entry


def get_current_role(email: str, mission: str) -> Role:
    require_params(email=email, mission=mission)
    with store_operation("get_current_role", email=email, mission=mission):
        _, entry = _find_user_mission(email, mission)
    if entry.current_role is None:
        raise NotFound(f"User {email} has no current role for mission {mission}")
    return entry.current_role


def get_allowed_roles(email: str, mission: str) -> list[Role]:
    require_params(email=email, mission=mission)
    with store_operation("get_allowed_roles", email=email, mission=mission):
        _, entry = _find_user_mission(email, mission)
    return list(entry.allowed_roles or [])


def _users_for_mission(operation: str, mission: str, raw: bool = False) -> list:
    require_params(mission=mission)
    with store_operation(operation, mission=mission):
        queryset = User.objects(missions__name=mission).only("auth", "missions")
        users = list(queryset.as_pymongo() if raw else queryset)
    logger.info("Found %d users for mission %s", len(users), mission)
    if not users:
        raise NotFound(f"No users found for mission {mission}")
    return users


def _auth_output(user: User) -> dict[str, Any] | None:
    return user.auth.to_output() if user.auth else None


def _email(user: User) -> str | None:
    return user.auth.email if user.auth else None


def list_users_by_mission(mission: str) -> list[dict[str, Any]]:
    """Summarize every member of a mission.

    Reads the stored documents as-is so one malformed record cannot fail the
    whole listing. Allowed roles are flattened to a ``{callsign: 1}``
    membership map. Users without the mission are skipped, as are allowed
    roles that are not objects with a callsign.
    """
    summaries: list[dict[str, Any]] = []
    for doc in _users_for_mission("list_users_by_mission", mission, raw=True):
        auth = doc.get("auth") if isinstance(doc.get("auth"), dict) else None
        email = auth.get("email") if auth else None
        entry = next(
            (m for m in doc.get("missions") or [] if isinstance(m, dict) and m.get("name") == mission),
            None,
        )
        if not entry:
            logger.warning("User %s doesn't have mission %s", email, mission)
            continue

        allowed_roles = entry.get("allowedRoles") or []
        if not isinstance(allowed_roles, list):
            logger.warning("Invalid allowedRoles for user %s: %r", email, allowed_roles)
            allowed_roles = []
        if not allowed_roles:
            logger.warning("User %s has empty allowedRoles for mission %s", email, mission)

        membership: dict[str, int] = {}
        for role in allowed_roles:
            if isinstance(role, dict) and role.get("callsign"):
                membership[role["callsign"]] = 1
            else:
                logger.warning("Invalid role structure for user %s: %r", email, role)

        summaries.append({
            "auth": auth,
            "currentRole": entry.get("currentRole"),
            "allowedRoles": membership,
        })

    logger.info("Processed %d users for mission %s", len(summaries), mission)
    return summaries


def list_users_current_role(mission: str) -> list[dict[str, Any]]:
    """Return each member of a mission with only that mission's entry."""
    results: list[dict[str, Any]] = []
    for user in _users_for_mission("list_users_current_role", mission):
        entry = user.find_mission(mission)
        if not entry:
            logger.warning("User %s doesn't have mission %s", _email(user), mission)
            continue
        results.append({"auth": _auth_output(user), "missions": [entry.to_output()]})
    return results


def set_current_role(email: str, mission: str, role: Role | None) -> User:
    """Overwrite a user's current role for a mission.

    The role is stored as given; it is not checked against the catalog or the
    user's allowed roles.
    """
    require_params(email=email, mission=mission, role=role)
    with store_operation("set_current_role", email=email, mission=mission):
        user, entry = _find_user_mission(email, mission)
        entry.current_role = role
        user.save()
    return user


def set_allowed_roles(email: str, mission: str, roles: list[Role] | None) -> User:
    """Replace a user's allowed roles for a mission, keeping the given order."""
    require_params(email=email, mission=mission, roles=roles)
    with store_operation("set_allowed_roles", email=email, mission=mission):
        user, entry = _find_user_mission(email, mission)
        entry.allowed_roles = list(roles)
        user.save()
    return user


def list_role_catalog() -> dict[str, Any]:
    return get_role_catalog().to_output()
