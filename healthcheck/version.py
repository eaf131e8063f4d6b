import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

VERSION_FILENAME = "version.json"


class VersionInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: Optional[str] = None
    commit: Optional[str] = None


def default_version_path() -> Path:
    override = os.getenv("VERSION_FILE")
    if override:
        return Path(override)
    return Path(__file__).resolve().parent / VERSION_FILENAME


def load_version_info(path=None) -> VersionInfo:
    """Read build metadata once at startup. Any failure yields an empty record."""
    path = Path(path) if path is not None else default_version_path()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return VersionInfo.model_validate(data)
    except (OSError, ValueError) as exc:
        logger.warning("Could not load version info from %s: %s", path, exc)
        return VersionInfo()
