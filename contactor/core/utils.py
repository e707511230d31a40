"""Configuration helpers backed by environment variables."""
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = Path(".env")
DEFAULT_SOURCE = Path("contacts.json")


def get_config_value(key: str, default: str = "") -> str:
    """Return an environment setting, or ``default`` when unset or empty."""

    return os.getenv(key) or default


def parse_env_line(raw_line: str) -> Optional[Tuple[str, str]]:
    """Split one ``[export ]KEY=value`` line; comments and junk yield None."""

    line = raw_line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    if line.startswith("export "):
        line = line[len("export "):]
    key, value = line.split("=", 1)
    key = key.strip()
    if not key:
        return None
    return key, value.strip().strip('"').strip("'")


def load_env_file(path: Path) -> Dict[str, str]:
    """Copy settings from an env file into ``os.environ``.

    Variables that are already set keep their value. Returns the settings
    that were actually applied.
    """

    applied: Dict[str, str] = {}
    if not path.exists():
        return applied

    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        logger.warning("Could not read env file %s: %s", path, exc)
        return applied

    for raw_line in lines:
        parsed = parse_env_line(raw_line)
        if parsed is None or parsed[0] in os.environ:
            continue
        key, value = parsed
        os.environ[key] = value
        applied[key] = value

    logger.debug("Loaded %d settings from %s", len(applied), path)
    return applied


def default_source_path() -> Path:
    """Resolve the contacts export to read when none is given explicitly."""

    load_env_file(Path(get_config_value("CONTACTOR_ENV_FILE", str(DEFAULT_ENV_FILE))))
    return Path(get_config_value("CONTACTOR_SOURCE", str(DEFAULT_SOURCE)))
