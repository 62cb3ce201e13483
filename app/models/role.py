from mongoengine import StringField

from app.models.base import BaseEmbeddedDocument
from app.utils.config import RoleDef


class Role(BaseEmbeddedDocument):
    """Embedded: a role held or allowed within a mission.

    Fields:
    - name (str): display name, e.g. "Mission Director"
    - callsign (str): catalog key, e.g. "MD"

    Values are copied from the role catalog on assignment but are not checked
    against it when set by a client.
    """
    name = StringField(required=False, null=True)
    callsign = StringField(required=False, null=True)

    meta = {
        "strict": False,
    }

    @classmethod
    def from_def(cls, role: RoleDef) -> "Role":
        return cls(name=role.name, callsign=role.callsign)

    def same_as(self, other: "Role | None") -> bool:
        if other is None:
            return False
        return self.name == other.name and self.callsign == other.callsign

    def to_output(self, fields=None, exclude=None):
        data = super().to_output(fields=fields, exclude=exclude)
        return {k: v for k, v in data.items() if v is not None}
