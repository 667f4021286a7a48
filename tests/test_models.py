"""Tests for Move Skills models — content units and install results."""

from pathlib import Path

import pytest

from moveskills.models import (
    DEFAULT_UNITS,
    ContentUnit,
    InstallErrorKind,
    InstallResult,
    UnitAction,
    UnitReport,
)


class TestContentUnit:
    """Test ContentUnit paths and validation."""

    def test_source_path_is_nested_skills_dir(self):
        """The bundled copy lives under <root>/<name>/skills/<name>."""
        unit = ContentUnit(name="aptos-ts-sdk")
        root = Path("/pkg/plugins")
        assert unit.source_path(root) == root / "aptos-ts-sdk" / "skills" / "aptos-ts-sdk"

    def test_target_path_is_direct_child(self):
        """The installed copy is a direct child of the skills directory."""
        unit = ContentUnit(name="alpha")
        skills_dir = Path("/home/u/.config/Claude/skills")
        assert unit.target_path(skills_dir).parent == skills_dir
        assert unit.target_path(skills_dir).name == "alpha"

    def test_name_validation_rejects_paths(self):
        """Unit names cannot smuggle in path separators."""
        with pytest.raises(ValueError, match="kebab-case"):
            ContentUnit(name="../escape")

    def test_name_validation_rejects_uppercase(self):
        """Names are not silently lowercased."""
        with pytest.raises(ValueError, match="kebab-case"):
            ContentUnit(name="Aptos-TS-SDK")

    def test_name_validation_rejects_unicode(self):
        with pytest.raises(ValueError, match="kebab-case"):
            ContentUnit(name="aptos-sdk-\u00e9")

    def test_name_validation_rejects_dangling_hyphen(self):
        with pytest.raises(ValueError, match="kebab-case"):
            ContentUnit(name="-alpha")

    def test_name_validation_rejects_empty(self):
        with pytest.raises(ValueError, match="kebab-case"):
            ContentUnit(name="")

    def test_default_units_order(self):
        """The shipped units are installed in a fixed order."""
        assert [u.name for u in DEFAULT_UNITS] == ["aptos-move-contract", "aptos-ts-sdk"]
        assert all(u.description for u in DEFAULT_UNITS)


class TestInstallResult:
    """Test InstallResult invariants."""

    def test_success_with_error_rejected(self):
        with pytest.raises(ValueError, match="success=True"):
            InstallResult(success=True, error=InstallErrorKind.COPY_FAILED, message="boom")

    def test_failure_requires_message(self):
        with pytest.raises(ValueError, match="success=False"):
            InstallResult(success=False, error=InstallErrorKind.COPY_FAILED)

    def test_installed_names_excludes_skipped(self):
        """Skipped units are not counted as installed."""
        result = InstallResult(
            success=True,
            units=[
                UnitReport(name="alpha", action=UnitAction.INSTALLED),
                UnitReport(name="beta", action=UnitAction.SKIPPED),
                UnitReport(name="gamma", action=UnitAction.UPDATED),
            ],
        )
        assert result.installed_names == ["alpha", "gamma"]
        assert [u.name for u in result.skipped] == ["beta"]
