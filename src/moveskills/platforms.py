"""Platform detection and the Claude skills directory table.

Claude Desktop reads skills from a fixed directory under the user's profile:

    darwin  ~/Library/Application Support/Claude/skills
    linux   ~/.config/Claude/skills
    win32   ~/AppData/Roaming/Claude/skills
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from . import SKILLS_DIRNAME
from .models import DEFAULT_UNITS, InstallConfig, Platform


class UnsupportedPlatformError(ValueError):
    """The host platform has no known skills directory."""


class SourceRootMissingError(FileNotFoundError):
    """The package's bundled skills are missing (corrupt or partial install)."""


def default_skills_dirs(home: Optional[Path] = None) -> Mapping[Platform, Path]:
    """Build the read-only platform -> skills directory table.

    Args:
        home: User home directory (default: Path.home()).

    Returns:
        Mapping[Platform, Path]: Destination for every supported platform.
    """
    base = home if home is not None else Path.home()
    return MappingProxyType({
        Platform.DARWIN: base / "Library" / "Application Support" / "Claude" / SKILLS_DIRNAME,
        Platform.LINUX: base / ".config" / "Claude" / SKILLS_DIRNAME,
        Platform.WIN32: base / "AppData" / "Roaming" / "Claude" / SKILLS_DIRNAME,
    })


def current_platform() -> str:
    """Return the running interpreter's platform identifier."""
    return sys.platform


def resolve_skills_dir(platform: str, table: Mapping[Platform, Path]) -> Path:
    """Look up the skills directory for a platform identifier.

    Args:
        platform: A ``sys.platform`` value.
        table: Platform -> skills directory mapping.

    Returns:
        Path: The skills directory for that platform.

    Raises:
        UnsupportedPlatformError: If the identifier is unknown or not in the table.
    """
    try:
        key = Platform(platform)
    except ValueError:
        raise UnsupportedPlatformError(f"Unsupported platform: {platform}") from None
    if key not in table:
        raise UnsupportedPlatformError(f"Unsupported platform: {platform}")
    return table[key]


def default_source_root() -> Path:
    """The plugins directory shipped inside this package."""
    return Path(__file__).resolve().parent / "plugins"


def load_config(home: Optional[Path] = None) -> InstallConfig:
    """Build the installer configuration for this process.

    Respects MOVE_SKILLS_DIR (destination override) and MOVE_SKILLS_SOURCE
    (source root override).
    """
    dest_env = os.environ.get("MOVE_SKILLS_DIR")
    source_env = os.environ.get("MOVE_SKILLS_SOURCE")
    return InstallConfig(
        platform=current_platform(),
        skills_dirs=dict(default_skills_dirs(home)),
        source_root=Path(source_env).expanduser() if source_env else default_source_root(),
        units=DEFAULT_UNITS,
        skills_dir_override=Path(dest_env).expanduser() if dest_env else None,
    )
