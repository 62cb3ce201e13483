from __future__ import annotations

from app.connections.mongo import init_mongo, close_mongo
from app.models.user import User, UserAuth, Mission
from app.services.missions import assign_mission


DEFAULT_MISSION = "AZero"


def _ensure_users() -> list[User]:
    users: list[User] = []
    fixtures = [
        ("100001", "Alice Example", "alice@example.com"),
        ("100002", "Bob Example", "bob@example.com"),
        ("100003", "Carol Example", "carol@example.com"),
    ]
    for auth_id, name, email in fixtures:
        user = User.objects(auth__email=email).first()
        if not user:
            user = User(auth=UserAuth(auth_id=auth_id, name=name, email=email))
            user.save()
        users.append(user)
    return users


def populate(mission_name: str = DEFAULT_MISSION) -> list[Mission]:
    """Create fixture users and join them to a mission in order.

    The first fixture user to join an empty mission becomes its director.
    Running it again leaves existing memberships as they are.
    """
    users = _ensure_users()
    return [assign_mission(user.auth.email, mission_name) for user in users]


def seed(reset: bool = False) -> None:
    init_mongo()
    try:
        if reset:
            User.drop_collection()
        populate()
        print("Seed completed.")
    finally:
        close_mongo()


if __name__ == "__main__":
    seed(reset=True)
