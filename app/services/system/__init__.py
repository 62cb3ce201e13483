from __future__ import annotations

import logging
from datetime import datetime, timezone
from importlib.metadata import PackageNotFoundError, version

from app.utils.base import ServiceError
from app.utils.config import settings


logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "mission-roles"


def get_version_info() -> dict[str, str]:
    """Installed package version plus the git branch/commit baked into the environment."""
    try:
        package_version = version(DISTRIBUTION_NAME)
    except PackageNotFoundError as exc:
        logger.error("Error fetching version info: %s", exc)
        raise ServiceError("Failed to retrieve version information", detail=str(exc)) from exc
    return {
        "version": package_version,
        "branch": settings.git_branch,
        "commit": settings.git_commit,
    }


def mission_clock(now: datetime | None = None) -> dict:
    """UTC clock in day-of-year notation, e.g. ``"042.07:05:09 UTC"``."""
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    days = f"{now.timetuple().tm_yday:03d}"
    hours = f"{now.hour:02d}"
    minutes = f"{now.minute:02d}"
    seconds = f"{now.second:02d}"
    return {
        "today": now.isoformat(),
        "year": now.year,
        "days": days,
        "hours": hours,
        "minutes": minutes,
        "seconds": seconds,
        "utc": f"{days}.{hours}:{minutes}:{seconds} UTC",
    }
