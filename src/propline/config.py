"""PropConfig: project-local settings for editing a properties file.

Looked up as ``propline.toml`` in the working directory or any parent:

    [propline]
    file = "app.properties"   # relative to the directory holding propline.toml
    separator = "="
    comment = "#"
    # charset = "utf-8"       # default: platform default
    # newline = "\\n"          # default: platform line separator
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from propline.models import COMMENT, DEFAULT_SEPARATOR

_CONFIG_FILENAME = "propline.toml"
_DEFAULT_FILE = "app.properties"


@dataclass
class PropConfig:
    """Resolved settings for one properties file."""

    root: Path                          # directory that contains propline.toml
    file: Path | None = None
    separator: str = DEFAULT_SEPARATOR
    comment: str = COMMENT
    charset: str | None = None          # None = platform default
    newline: str = os.linesep

    @property
    def config_path(self) -> Path:
        return self.root / _CONFIG_FILENAME


def load_config(root: Path | str | None = None) -> PropConfig:
    """Load propline.toml from root (or search upward from cwd if root is None)."""
    root_path = _find_root(Path(root) if root else Path.cwd())
    config_path = root_path / _CONFIG_FILENAME

    raw: dict[str, Any] = {}
    if config_path.exists():
        with config_path.open("rb") as f:
            raw = tomllib.load(f)

    section = raw.get("propline", {})
    file_rel = section.get("file")

    cfg = PropConfig(
        root=root_path,
        file=root_path / file_rel if file_rel else None,
        separator=str(section.get("separator", DEFAULT_SEPARATOR)),
        comment=str(section.get("comment", COMMENT)),
        charset=section.get("charset"),
        newline=str(section.get("newline", os.linesep)),
    )
    for name in ("separator", "comment", "newline"):
        if not getattr(cfg, name):
            msg = f"{config_path}: {name} must not be empty"
            raise ValueError(msg)
    return cfg


def _find_root(start: Path) -> Path:
    """Walk upward from start looking for propline.toml."""
    for directory in (start, *start.parents):
        if (directory / _CONFIG_FILENAME).exists():
            return directory
    return start


def init_config(root: Path, file: str | None = None) -> Path:
    """Write a default propline.toml at root. Raises if already exists."""
    config_path = root / _CONFIG_FILENAME
    if config_path.exists():
        msg = f"propline.toml already exists at {config_path}"
        raise FileExistsError(msg)

    content = f"""\
[propline]
file = "{file or _DEFAULT_FILE}"
# separator = "="
# comment = "#"
# charset = "utf-8"     # default: platform default
# newline = "\\n"        # default: platform line separator
"""
    config_path.write_text(content)
    return config_path
