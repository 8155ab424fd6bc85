"""Configuration helpers: vault discovery, settings, date parsing."""

import os
import pathlib
import sys
from datetime import date, datetime

DATE_FORMAT = "%Y-%m-%d"


class ConfigError(ValueError):
    """settings.toml holds a value memo cannot use."""


def get_vault_dir() -> pathlib.Path:
    env = os.environ.get("MEMO_DIR")
    if env:
        print(f"Using vault from MEMO_DIR: {env}", file=sys.stderr)
        return pathlib.Path(env)
    config_path = pathlib.Path.home() / ".config" / "memo" / "config"
    if config_path.exists():
        for line in config_path.read_text().splitlines():
            line = line.strip()
            if line.startswith("DIR="):
                return pathlib.Path(line[4:].strip())
    print(f"Error: no vault configured. Set MEMO_DIR or add DIR=<path> to {config_path}",
          file=sys.stderr)
    sys.exit(1)


def load_settings(vault_dir: pathlib.Path) -> dict:
    settings_path = vault_dir / ".memo" / "settings.toml"
    settings = {
        "vault_name": vault_dir.name,
        "files_per_day": 3,
        "store": ".memo/revs.json",
        "subjects": None,
    }
    if settings_path.exists():
        settings.update(_parse_toml_simple(settings_path.read_text()))
    per_day = settings["files_per_day"]
    if not isinstance(per_day, int) or isinstance(per_day, bool) or per_day < 0:
        raise ConfigError(f"{settings_path}: files_per_day must be a whole number, got {per_day!r}")
    return settings


def _parse_toml_simple(text: str) -> dict:
    """Minimal TOML parser for flat key=value files."""
    result = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" in line:
            k, v = line.split("=", 1)
            k = k.strip()
            v = v.strip()
            if v.startswith("[") and v.endswith("]"):
                v = [x.strip().strip('"').strip("'") for x in v[1:-1].split(",") if x.strip()]
            elif v.startswith('"') and v.endswith('"'):
                v = v[1:-1]
            elif v.isdigit():
                v = int(v)
            elif v == "true":
                v = True
            elif v == "false":
                v = False
            result[k] = v
    return result


def parse_date(text: str) -> date:
    """Parse a YYYY-MM-DD override. Raises ValueError on anything else."""
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except ValueError:
        raise ValueError(f"invalid date '{text}', expected YYYY-MM-DD") from None
