from app.utils.config.env import Settings, settings
from app.utils.config.log import configure_logging
from app.utils.config.roles import RoleDef, RoleCatalog, get_role_catalog, load_role_catalog

__all__ = ["Settings", "settings", "RoleDef", "RoleCatalog", "get_role_catalog", "load_role_catalog", "configure_logging"]
