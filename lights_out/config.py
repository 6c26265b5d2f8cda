from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from lights_out.models import GameSettings

ENV_PREFIX = "LIGHTS_OUT_"

# env var suffix -> GameSettings field
_ENV_FIELDS: dict[str, str] = {
    "LAYOUT": "initial_layout",
    "RAW_INPUT": "raw_input",
    "LOG_LEVEL": "log_level",
    "SCRAMBLE": "scramble_moves",
    "SEED": "seed",
}


def project_root() -> Path:
    # lights_out/config.py -> lights_out/ -> project root
    return Path(__file__).resolve().parents[1]


def load_dotenv_if_present(path: Path | None = None) -> bool:
    """Load a repo `.env` without overriding variables already set in the shell."""

    env_path = path or project_root() / ".env"
    if not env_path.exists():
        return False

    from dotenv import load_dotenv

    return load_dotenv(dotenv_path=env_path, override=False)


def load_settings(environ: Mapping[str, str] | None = None) -> GameSettings:
    """Build settings from `LIGHTS_OUT_*` variables.

    Unset variables fall back to the model defaults; pydantic handles coercion
    ("0"/"false" -> False, "12" -> 12) and raises ValidationError on bad values.
    """

    env = os.environ if environ is None else environ
    raw: dict[str, str] = {}
    for suffix, field_name in _ENV_FIELDS.items():
        value = env.get(f"{ENV_PREFIX}{suffix}")
        if value is not None and value.strip() != "":
            raw[field_name] = value.strip()
    return GameSettings.model_validate(raw)
