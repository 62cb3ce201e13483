from enum import Enum


class BaseEnum(Enum):
    @classmethod
    def values(cls):
        return [item.value for item in cls]


class RoleCallsign(BaseEnum):
    MISSION_DIRECTOR = "MD"
    OBSERVER = "VIP"
    SYSTEMS = "SYS"
    SPACECRAFT = "CC"
    GROUND_NETWORK = "IT"
    PROXY = "PROXY"
