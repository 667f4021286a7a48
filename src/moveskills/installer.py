"""Move Skills installer — copy bundled skills into the Claude skills directory.

Flow:
    resolve skills dir -> verify source root -> ensure skills dir
    -> for each content unit: skip | stage copy -> swap into place

Each unit is copied into a hidden staging directory next to its target and
only then swapped in, so a failed copy leaves the previous install intact.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .fs import FileSystem, LocalFileSystem
from .models import (
    ContentUnit,
    InstallConfig,
    InstallErrorKind,
    InstallResult,
    UnitAction,
    UnitReport,
)
from .platforms import (
    SourceRootMissingError,
    UnsupportedPlatformError,
    resolve_skills_dir,
)

logger = logging.getLogger("moveskills.installer")


def staging_path(skills_dir: Path, name: str) -> Path:
    """Hidden sibling the new copy of a unit is built in."""
    return skills_dir / f".{name}.staging"


def previous_path(skills_dir: Path, name: str) -> Path:
    """Hidden sibling the old copy of a unit is parked in during the swap."""
    return skills_dir / f".{name}.previous"


class SkillInstaller:
    """Installs the configured content units, replacing earlier copies.

    Args:
        config: Resolved installer configuration.
        fs: Filesystem capability (default: the real disk).
    """

    def __init__(self, config: InstallConfig, fs: Optional[FileSystem] = None) -> None:
        self.config = config
        self.fs = fs or LocalFileSystem()

    def skills_dir(self) -> Path:
        """Resolve the destination directory.

        Raises:
            UnsupportedPlatformError: If no override is set and the platform is unknown.
        """
        if self.config.skills_dir_override is not None:
            return self.config.skills_dir_override
        return resolve_skills_dir(self.config.platform, self.config.skills_dirs)

    def check_source_root(self) -> Path:
        """Return the bundled source root.

        Raises:
            SourceRootMissingError: If the package ships no source root.
        """
        root = self.config.source_root
        if not self.fs.directory_exists(root):
            raise SourceRootMissingError(f"Source directory not found: {root}")
        return root

    def install(self) -> InstallResult:
        """Run the installer.

        Returns:
            InstallResult: Per-unit reports, or the classified fatal error.
        """
        try:
            skills_dir = self.skills_dir()
        except UnsupportedPlatformError as exc:
            logger.error("%s", exc)
            return InstallResult(
                success=False,
                error=InstallErrorKind.UNSUPPORTED_PLATFORM,
                message=str(exc),
            )

        try:
            source_root = self.check_source_root()
        except SourceRootMissingError as exc:
            logger.error("%s", exc)
            return InstallResult(
                success=False,
                error=InstallErrorKind.MISSING_SOURCE_ROOT,
                message=str(exc),
                skills_dir=str(skills_dir),
            )

        try:
            self.fs.ensure_directory(skills_dir)
        except OSError as exc:
            logger.error("Cannot create %s: %s", skills_dir, exc)
            return InstallResult(
                success=False,
                error=InstallErrorKind.COPY_FAILED,
                message=f"Cannot create {skills_dir}: {exc}",
                skills_dir=str(skills_dir),
            )
        logger.info("Installing %d skills into %s", len(self.config.units), skills_dir)

        reports: list[UnitReport] = []
        for unit in self.config.units:
            try:
                report = self.install_unit(unit, source_root, skills_dir)
            except OSError as exc:
                logger.error("Failed to install '%s': %s", unit.name, exc)
                return InstallResult(
                    success=False,
                    error=InstallErrorKind.COPY_FAILED,
                    message=f"Failed to install {unit.name}: {exc}",
                    skills_dir=str(skills_dir),
                    units=reports,
                )
            reports.append(report)

        return InstallResult(success=True, skills_dir=str(skills_dir), units=reports)

    def install_unit(self, unit: ContentUnit, source_root: Path, skills_dir: Path) -> UnitReport:
        """Copy one unit into place.

        Raises:
            OSError: If staging or swapping the copy fails.
        """
        source = unit.source_path(source_root)
        target = unit.target_path(skills_dir)

        if not self.fs.directory_exists(source):
            logger.warning("Plugin not found: %s, skipping", unit.name)
            return UnitReport(
                name=unit.name,
                action=UnitAction.SKIPPED,
                target_path=str(target),
                message=f"Plugin not found: {unit.name}",
            )

        staging = staging_path(skills_dir, unit.name)
        previous = previous_path(skills_dir, unit.name)
        if self.fs.directory_exists(staging):
            logger.info("Removing leftover %s", staging)
            self.fs.remove_tree(staging)
        if self.fs.directory_exists(previous):
            if self.fs.directory_exists(target):
                logger.info("Removing leftover %s", previous)
                self.fs.remove_tree(previous)
            else:
                # An interrupted swap left the old copy parked aside.
                logger.info("Restoring %s from %s", target, previous)
                self.fs.rename(previous, target)

        try:
            self.fs.copy_tree(source, staging)
        except OSError:
            if self.fs.directory_exists(staging):
                self.fs.remove_tree(staging)
            raise

        action = UnitAction.UPDATED if self.fs.directory_exists(target) else UnitAction.INSTALLED
        self._swap(staging, target, previous, replace=action == UnitAction.UPDATED)
        logger.info("%s %s -> %s", action.value.capitalize(), unit.name, target)

        return UnitReport(name=unit.name, action=action, target_path=str(target))

    def _swap(self, staging: Path, target: Path, previous: Path, replace: bool) -> None:
        """Move the staged copy to ``target``, restoring the old copy on failure."""
        if replace:
            try:
                self.fs.rename(target, previous)
            except OSError:
                self.fs.remove_tree(staging)
                raise
        try:
            self.fs.rename(staging, target)
        except OSError:
            try:
                if replace:
                    self.fs.rename(previous, target)
            finally:
                self.fs.remove_tree(staging)
            raise
        if replace:
            self.fs.remove_tree(previous)
