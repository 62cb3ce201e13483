from app.utils.base.enums import BaseEnum, RoleCallsign
from app.utils.base.exceptions import ServiceError, InvalidInput, NotFound, DataStoreFailure

__all__ = ["BaseEnum", "RoleCallsign", "ServiceError", "InvalidInput", "NotFound", "DataStoreFailure"]
