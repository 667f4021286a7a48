"""Move Skills data models — content units and installer results.

A content unit is one self-contained skill bundle (SKILL.md, examples, ...)
that lands as a same-named directory inside the Claude skills directory.
"""

from __future__ import annotations

import enum
import re
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_UNIT_NAME = re.compile(r"[a-z0-9]+(-[a-z0-9]+)*")


class Platform(str, enum.Enum):
    """Host operating systems with a known Claude skills directory."""

    DARWIN = "darwin"
    LINUX = "linux"
    WIN32 = "win32"


class UnitAction(str, enum.Enum):
    """What the installer did with a content unit."""

    INSTALLED = "installed"
    UPDATED = "updated"
    SKIPPED = "skipped"


class InstallErrorKind(str, enum.Enum):
    """Classification of a fatal installer failure."""

    UNSUPPORTED_PLATFORM = "unsupported_platform"
    MISSING_SOURCE_ROOT = "missing_source_root"
    COPY_FAILED = "copy_failed"


class ContentUnit(BaseModel):
    """A named skill bundle shipped inside the package."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Directory name of the skill (kebab-case)")
    description: str = Field(default="", description="One-line summary shown after install")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Enforce lowercase kebab-case; the name doubles as a directory name."""
        if not _UNIT_NAME.fullmatch(v):
            raise ValueError(f"Content unit name must be kebab-case: got '{v}'")
        return v

    def source_path(self, source_root: Path) -> Path:
        """Where the unit lives inside the bundled source root."""
        return source_root / self.name / "skills" / self.name

    def target_path(self, skills_dir: Path) -> Path:
        """Where the unit is installed: a direct child of the skills directory."""
        return skills_dir / self.name


DEFAULT_UNITS: tuple[ContentUnit, ...] = (
    ContentUnit(name="aptos-move-contract", description="Move smart contract development"),
    ContentUnit(name="aptos-ts-sdk", description="Aptos TypeScript SDK integration"),
)


class InstallConfig(BaseModel):
    """Everything the installer needs, resolved once at startup.

    The platform table is passed in rather than read from module scope so
    tests can inject fake platforms and destinations.
    """

    model_config = ConfigDict(frozen=True)

    platform: str = Field(description="Host platform identifier (sys.platform)")
    skills_dirs: dict[Platform, Path] = Field(description="Platform -> skills directory table")
    source_root: Path = Field(description="Bundled directory holding every content unit")
    units: tuple[ContentUnit, ...] = Field(default=DEFAULT_UNITS)
    skills_dir_override: Optional[Path] = Field(
        default=None, description="Explicit destination, bypasses the platform table"
    )


class UnitReport(BaseModel):
    """Outcome for a single content unit."""

    name: str
    action: UnitAction
    target_path: str = ""
    message: str = ""


class InstallResult(BaseModel):
    """Typed outcome of an installer run.

    A successful run may still contain skipped units; only fatal
    conditions set ``error``.
    """

    success: bool
    error: Optional[InstallErrorKind] = None
    message: str = ""
    skills_dir: str = ""
    units: list[UnitReport] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_consistency(self) -> "InstallResult":
        if self.success and self.error is not None:
            raise ValueError("success=True but error is set")
        if not self.success and (self.error is None or not self.message):
            raise ValueError("success=False requires an error kind and message")
        return self

    @property
    def installed_names(self) -> list[str]:
        """Names of units copied during this run, in order."""
        return [u.name for u in self.units if u.action != UnitAction.SKIPPED]

    @property
    def skipped(self) -> list[UnitReport]:
        return [u for u in self.units if u.action == UnitAction.SKIPPED]
