"""Tower style settings and the ``name-tower.yaml`` loader.

A style file looks like::

    name-tower:
      filler: "*"
      space-substitute: "*"
      separator: " "

The settings may also sit at the top level of the file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

STYLE_FILE_NAME = "name-tower.yaml"
STYLE_ENV_VAR = "NAME_TOWER_STYLE"
_SECTION_KEY = "name-tower"

# YAML key -> TowerStyle field
_KEY_MAP: Dict[str, str] = {
    "filler": "filler",
    "space-substitute": "space_substitute",
    "separator": "separator",
}


class StyleError(ValueError):
    """Raised when a style setting or style file is invalid."""


@dataclass(frozen=True)
class TowerStyle:
    """Characters used when rendering a tower."""

    filler: str = "*"
    space_substitute: str = "*"
    separator: str = " "

    def __post_init__(self) -> None:
        for field_name in ("filler", "space_substitute"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or len(value) != 1:
                raise StyleError(f"{field_name} must be a single character, got {value!r}")
            if value.isspace():
                raise StyleError(f"{field_name} must not be whitespace, got {value!r}")
        if not isinstance(self.separator, str) or not self.separator:
            raise StyleError(f"separator must be a non-empty string, got {self.separator!r}")
        if "\n" in self.separator or "\r" in self.separator:
            raise StyleError("separator must not contain a line break")


DEFAULT_STYLE = TowerStyle()


def find_style_file(start: Optional[Path] = None) -> Optional[Path]:
    """Find name-tower.yaml by searching upward from *start* (default: cwd)."""
    current = Path(start) if start is not None else Path.cwd()
    for parent in [current] + list(current.parents):
        style_path = parent / STYLE_FILE_NAME
        if style_path.is_file():
            return style_path
    return None


def _style_from_mapping(data: Any, source: Path) -> TowerStyle:
    if data is None:
        return DEFAULT_STYLE
    if not isinstance(data, dict):
        raise StyleError(f"{source}: expected a mapping, got {type(data).__name__}")
    if _SECTION_KEY in data:
        data = data[_SECTION_KEY] or {}
        if not isinstance(data, dict):
            raise StyleError(f"{source}: '{_SECTION_KEY}' must be a mapping")

    unknown = sorted(str(k) for k in data if k not in _KEY_MAP)
    if unknown:
        raise StyleError(f"{source}: unknown style keys: {', '.join(unknown)}")

    kwargs = {_KEY_MAP[key]: value for key, value in data.items()}
    try:
        return TowerStyle(**kwargs)
    except StyleError as exc:
        raise StyleError(f"{source}: {exc}") from exc


def load_style(path: Optional[os.PathLike] = None) -> TowerStyle:
    """Load a tower style.

    Resolution order: explicit *path*, then ``$NAME_TOWER_STYLE``, then a
    ``name-tower.yaml`` found upward from the current directory. Falls back to
    :data:`DEFAULT_STYLE` when none of these exist.
    """
    style_path: Optional[Path] = None
    if path is not None:
        style_path = Path(path)
    elif env_path := os.environ.get(STYLE_ENV_VAR):
        style_path = Path(os.path.expanduser(env_path))
        if not style_path.is_file():
            logger.warning("%s points to a missing file: %s", STYLE_ENV_VAR, style_path)
    else:
        style_path = find_style_file()

    if style_path is None:
        return DEFAULT_STYLE

    try:
        with open(style_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise StyleError(f"cannot read style file {style_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise StyleError(f"malformed style file {style_path}: {exc}") from exc

    style = _style_from_mapping(data, style_path)
    logger.debug("Loaded tower style from %s: %s", style_path, style)
    return style
