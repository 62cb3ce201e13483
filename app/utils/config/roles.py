"""Static role catalog.

The catalog is read from ``roles.json`` next to this module (or from
``settings.role_catalog_path``) the first time it is requested and is never
mutated afterwards.
"""
from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from app.utils.base import RoleCallsign
from app.utils.config.env import settings


_DEFAULT_CATALOG_PATH = Path(__file__).with_name("roles.json")


class RoleDef(BaseModel):
    """A role definition from the catalog."""
    model_config = ConfigDict(frozen=True)

    name: str
    callsign: str


class RoleCatalog(BaseModel):
    """Role definitions keyed by callsign."""
    model_config = ConfigDict(frozen=True)

    roles: Mapping[str, RoleDef]

    @field_validator("roles", mode="after")
    @classmethod
    def _freeze_roles(cls, roles: Mapping[str, RoleDef]) -> Mapping[str, RoleDef]:
        return MappingProxyType(dict(roles))

    @model_validator(mode="after")
    def _check_roles(self) -> "RoleCatalog":
        for key, role in self.roles.items():
            if key != role.callsign:
                raise ValueError(f"Catalog key {key!r} does not match callsign {role.callsign!r}")
        for required in (RoleCallsign.MISSION_DIRECTOR, RoleCallsign.OBSERVER):
            if required.value not in self.roles:
                raise ValueError(f"Catalog is missing required role {required.value!r}")
        return self

    def get(self, callsign: str | RoleCallsign) -> RoleDef:
        if isinstance(callsign, RoleCallsign):
            callsign = callsign.value
        return self.roles[callsign]

    @property
    def mission_director(self) -> RoleDef:
        return self.get(RoleCallsign.MISSION_DIRECTOR)

    @property
    def default_role(self) -> RoleDef:
        return self.get(RoleCallsign.OBSERVER)

    def to_output(self) -> dict:
        return {"roles": {key: role.model_dump() for key, role in self.roles.items()}}


def load_role_catalog(path: str | Path | None = None) -> RoleCatalog:
    catalog_path = Path(path) if path else _DEFAULT_CATALOG_PATH
    return RoleCatalog.model_validate(json.loads(catalog_path.read_text(encoding="utf-8")))


@lru_cache(maxsize=1)
def get_role_catalog() -> RoleCatalog:
    return load_role_catalog(settings.role_catalog_path)
