from __future__ import annotations

import logging

from app.models.role import Role
from app.models.user import User, Mission
from app.utils.base import NotFound
from app.utils.config import RoleCatalog, get_role_catalog
from app.services.common import require_params, store_operation


logger = logging.getLogger(__name__)


def assign_mission(email: str, mission_name: str, catalog: RoleCatalog | None = None) -> Mission:
    """Add a user to a mission, or reconcile their existing membership.

    The first member of a mission (across all users) becomes Mission Director
    with the default and director roles allowed. Later members join with the
    default role only. A user who already belongs keeps their allowed roles,
    and their current role falls back to the default when it is no longer
    allowed.

    The member count is read before the user is saved, so two first members
    racing each other can both become director.
    """
    require_params(email=email, mission=mission_name)
    catalog = catalog or get_role_catalog()

    with store_operation("assign_mission", email=email, mission=mission_name):
        member_count: int = User.objects(missions__name=mission_name).count()
        user: User | None = User.objects(auth__email=email).first()
        if not user:
            raise NotFound(f"User {email} not found")

        if member_count == 0:
            director = Role.from_def(catalog.mission_director)
            mission = Mission(
                name=mission_name,
                current_role=director,
                allowed_roles=[Role.from_def(catalog.default_role), Role.from_def(catalog.mission_director)],
            )
            user.missions.append(mission)
            logger.info("User %s is the first member of mission %s, assigned %s", email, mission_name, director.callsign)
        else:
            existing = user.find_missions(mission_name)
            for entry in existing:
                if not entry.allows(entry.current_role):
                    logger.info("Current role of %s on %s is not allowed, resetting to default", email, mission_name)
                    entry.current_role = Role.from_def(catalog.default_role)

            if existing:
                mission = existing[-1]
            else:
                mission = Mission(
                    name=mission_name,
                    current_role=Role.from_def(catalog.default_role),
                    allowed_roles=[Role.from_def(catalog.default_role)],
                )
                user.missions.append(mission)
                logger.info("User %s joined mission %s as observer", email, mission_name)

        user.save()
    return mission
