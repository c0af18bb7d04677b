"""Config file discovery.

Walk-up finder locates rosterctl.toml, similar to how git finds .git/.
Supports the ROSTERCTL_CONFIG env var and the --config CLI flag.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "rosterctl.toml"
CONFIG_ENV_VAR = "ROSTERCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for rosterctl.toml.

    Returns the path to the config file, or None if not found.
    Checks ROSTERCTL_CONFIG first; if it is set but missing, returns None.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent
