"""Preset configuration loading and merging."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from xkpwgen.errors import InvalidInput, ResourceLoadFailure

logger = logging.getLogger(__name__)

_BUNDLED_DIR = Path(__file__).parent / "presets"

DEFAULTS = {
    "length": 4,
    "number": 5,
    "wordlist": "formal",
    "separator": " ",
    "colour": "auto",
}


def load_preset(name: str, search_dirs: list[Path] | None = None) -> dict:
    """Load a preset by name from bundled presets or user directories.

    Searches user directories first, then bundled presets.
    Raises FileNotFoundError if preset not found.
    """
    dirs = list(search_dirs or []) + [_BUNDLED_DIR]
    for d in dirs:
        path = Path(d) / f"{name}.yaml"
        if path.exists():
            logger.debug("Loading preset %s", path)
            try:
                with open(path, encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ResourceLoadFailure(f"Preset '{name}' is not valid YAML: {e}") from e
            except (OSError, UnicodeDecodeError) as e:
                raise ResourceLoadFailure(f"Cannot read preset '{name}' at {path}: {e}") from e
            if not isinstance(data, dict):
                raise InvalidInput(f"Preset '{name}' must be a mapping of option names to values.")
            return data
    raise FileNotFoundError(
        f"Preset '{name}' not found. Searched: {', '.join(str(d) for d in dirs)}"
    )


def merge_config(preset: dict, overrides: dict) -> dict:
    """Merge preset config with CLI overrides. None values in overrides are ignored."""
    result = dict(preset)
    for key, value in overrides.items():
        if value is not None:
            result[key] = value
    return result


def list_presets(search_dirs: list[Path] | None = None) -> list[str]:
    """List available preset names from bundled and user directories."""
    dirs = list(search_dirs or []) + [_BUNDLED_DIR]
    names = set()
    for d in dirs:
        d = Path(d)
        if d.is_dir():
            for f in d.glob("*.yaml"):
                names.add(f.stem)
    return sorted(names)


def _positive_int(cfg: dict, key: str) -> int:
    value = cfg[key]
    # bool is an int subclass; "yes" in YAML must not become 1
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidInput(f"'{key}' must be a positive integer, got {value!r}.")
    return value


def resolve_options(
    preset: str | None,
    overrides: dict,
    search_dirs: list[Path] | None = None,
) -> dict:
    """Combine built-in defaults, an optional preset and CLI overrides.

    Later layers win: defaults < preset < overrides.
    """
    cfg = dict(DEFAULTS)
    if preset:
        cfg = merge_config(cfg, load_preset(preset, search_dirs))
    cfg = merge_config(cfg, overrides)
    cfg["length"] = _positive_int(cfg, "length")
    cfg["number"] = _positive_int(cfg, "number")
    if not isinstance(cfg["wordlist"], str) or not cfg["wordlist"]:
        raise InvalidInput(f"'wordlist' must be a wordlist name or file path, got {cfg['wordlist']!r}.")
    cfg["separator"] = str(cfg["separator"])
    # YAML reads unquoted yes/no as booleans
    if isinstance(cfg["colour"], bool):
        cfg["colour"] = "yes" if cfg["colour"] else "no"
    if cfg["colour"] not in ("yes", "no", "auto"):
        raise InvalidInput(f"'colour' must be one of yes, no, auto, got {cfg['colour']!r}.")
    return cfg
