"""Load, save, and validate the JSON config at ~/.config/alias-it/config.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from alias_it.shell_alias import ShellKind

logger = logging.getLogger(__name__)

DEFAULTS: dict[str, dict[str, Any]] = {
    "detect_shell": {
        "value": True,
        "description": "Pick the rc file from $SHELL. false = always use default_shell. Override with --no-detect.",
    },
    "default_shell": {
        "value": "zsh",
        "description": "Shell whose rc file is used when detection is off: zsh or bash.",
    },
}


def config_dir() -> Path:
    return Path.home() / ".config" / "alias-it"


def config_path() -> Path:
    return config_dir() / "config.json"


def load_config() -> dict[str, Any]:
    """Return a flat dict of {key: value} from the config file, merged with defaults."""
    values: dict[str, Any] = {k: v["value"] for k, v in DEFAULTS.items()}

    try:
        path = config_path()
    except RuntimeError as exc:
        logger.warning("No home directory, using default config: %s", exc)
        return values

    if path.exists():
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
            for key, entry in raw.items():
                if key.startswith("_"):
                    continue
                if isinstance(entry, dict) and "value" in entry:
                    values[key] = entry["value"]
                else:
                    values[key] = entry
        except (json.JSONDecodeError, OSError, AttributeError) as exc:
            logger.warning("Could not read config at %s: %s", path, exc)

    return values


def save_config(values: dict[str, Any]) -> None:
    """Write current values back to the config file, preserving descriptions."""
    config_dir().mkdir(parents=True, exist_ok=True)
    data: dict[str, Any] = {
        "_description": "alias-it configuration. Edit values below; descriptions are for reference."
    }
    for key, meta in DEFAULTS.items():
        data[key] = {
            "value": values.get(key, meta["value"]),
            "description": meta["description"],
        }
    path = config_path()
    path.write_text(
        json.dumps(data, indent=4, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    logger.info("Config saved to %s", path)


def init_config_if_missing() -> bool:
    """Create default config file if it doesn't exist. Return True if created."""
    if config_path().exists():
        return False
    save_config({k: v["value"] for k, v in DEFAULTS.items()})
    return True


def detection_enabled(cfg: dict[str, Any]) -> bool:
    """The detect_shell setting; anything but a JSON boolean falls back to true."""
    value = cfg.get("detect_shell", True)
    if not isinstance(value, bool):
        logger.warning("detect_shell must be true or false, got %r; detecting", value)
        return True
    return value


def default_shell(cfg: dict[str, Any]) -> ShellKind:
    """The configured fallback shell; unknown names fall back to zsh."""
    name = str(cfg.get("default_shell", "zsh")).lower()
    try:
        kind = ShellKind(name)
    except ValueError:
        logger.warning("Unknown default_shell %r in config, using zsh", name)
        return ShellKind.ZSH
    if kind is ShellKind.UNKNOWN:
        return ShellKind.ZSH
    return kind
