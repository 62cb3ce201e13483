from mongoengine import StringField, ListField, DictField, EmbeddedDocumentField

from app.models.base import BaseDocument, BaseEmbeddedDocument
from app.models.role import Role


class UserAuth(BaseEmbeddedDocument):
    """Embedded: identity issued by the sign-in provider.

    All fields are optional but must be strings when present.
    """
    auth_id = StringField(db_field="id", required=False, null=True)
    token = StringField(required=False, null=True)
    email = StringField(required=False, null=True)
    name = StringField(required=False, null=True)

    meta = {
        "strict": False,
    }


class Mission(BaseEmbeddedDocument):
    """Embedded: a user's membership of a mission.

    Fields:
    - name (str): mission name, shared across users
    - current_role (Role): role the user is acting as
    - allowed_roles (list[Role]): roles the user may switch to
    """
    name = StringField(required=False, null=True)
    current_role = EmbeddedDocumentField(Role, db_field="currentRole", required=False, null=True)
    allowed_roles = ListField(EmbeddedDocumentField(Role), db_field="allowedRoles", null=False, default=list)

    meta = {
        "strict": False,
    }

    def allows(self, role: Role | None) -> bool:
        return any(allowed.same_as(role) for allowed in self.allowed_roles or [])


class User(BaseDocument):
    """User document.

    Fields:
    - auth (UserAuth): identity; `auth.email` is the lookup key
    - grid (list[dict]): saved dashboard layout
    - missions (list[Mission]): one entry per joined mission
    """
    auth = EmbeddedDocumentField(UserAuth, required=True, null=False)
    grid = ListField(DictField(), null=False, default=list)
    missions = ListField(EmbeddedDocumentField(Mission), null=False, default=list)

    meta = {
        "collection": "users",
        "strict": False,
        "indexes": [
            {"fields": ["auth.email"], "unique": True, "sparse": True},
            {"fields": ["missions.name"]},
        ],
    }

    def find_missions(self, name: str) -> list[Mission]:
        return [m for m in self.missions or [] if m.name == name]

    def find_mission(self, name: str) -> Mission | None:
        return next(iter(self.find_missions(name)), None)
