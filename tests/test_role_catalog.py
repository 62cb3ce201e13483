"""Tests for the static role catalog."""

import json

import pytest
from pydantic import ValidationError

from app.utils.base import RoleCallsign
from app.utils.config import load_role_catalog, get_role_catalog


class TestDefaultCatalog:
    def test_contains_every_callsign(self, catalog):
        assert set(catalog.roles) == set(RoleCallsign.values())

    def test_director_and_default_roles(self, catalog):
        assert catalog.mission_director.callsign == "MD"
        assert catalog.mission_director.name == "Mission Director"
        assert catalog.default_role.callsign == "VIP"
        assert catalog.default_role.name == "Observer"

    def test_cached_between_calls(self):
        assert get_role_catalog() is get_role_catalog()

    def test_roles_are_immutable(self, catalog):
        with pytest.raises(ValidationError):
            catalog.roles["MD"].name = "Someone Else"
        with pytest.raises(TypeError):
            catalog.roles["XO"] = catalog.roles["MD"]
        assert "XO" not in get_role_catalog().roles

    def test_output_is_keyed_by_callsign(self, catalog):
        output = catalog.to_output()
        assert output["roles"]["SYS"] == {"name": "Systems Engineer", "callsign": "SYS"}


class TestLoadCatalog:
    def _write(self, tmp_path, roles):
        path = tmp_path / "roles.json"
        path.write_text(json.dumps({"roles": roles}))
        return path

    def test_loads_custom_file(self, tmp_path):
        path = self._write(tmp_path, {
            "MD": {"name": "Flight Director", "callsign": "MD"},
            "VIP": {"name": "Guest", "callsign": "VIP"},
        })
        catalog = load_role_catalog(path)
        assert catalog.mission_director.name == "Flight Director"
        assert list(catalog.roles) == ["MD", "VIP"]

    def test_rejects_key_callsign_mismatch(self, tmp_path):
        path = self._write(tmp_path, {
            "MD": {"name": "Mission Director", "callsign": "MD"},
            "VIP": {"name": "Observer", "callsign": "OBS"},
        })
        with pytest.raises(ValidationError):
            load_role_catalog(path)

    def test_requires_default_role(self, tmp_path):
        path = self._write(tmp_path, {"MD": {"name": "Mission Director", "callsign": "MD"}})
        with pytest.raises(ValidationError):
            load_role_catalog(path)
