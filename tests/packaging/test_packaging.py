"""Packaging correctness verification for object-brace-spacing.

Tests validate:
- Base install imports without the optional esprima parser
- py.typed marker ships with the package
- Pytest plugin entry point is registered
- Package metadata and public exports are correct
"""

from __future__ import annotations

from importlib.metadata import entry_points, version
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstallNoImportError:
    """Verify base install does not import esprima eagerly."""

    def test_import_object_brace_spacing(self):  # type: ignore[no-untyped-def]
        import object_brace_spacing

        assert hasattr(object_brace_spacing, "check_source")
        assert hasattr(object_brace_spacing, "check_file")
        assert hasattr(object_brace_spacing, "BracketSpacingChecker")

    def test_hosts_import(self):  # type: ignore[no-untyped-def]
        from object_brace_spacing.hosts import EsprimaFile

        assert callable(EsprimaFile)


class TestPackageFiles:
    def test_py_typed_present(self):  # type: ignore[no-untyped-def]
        import object_brace_spacing

        package_dir = Path(object_brace_spacing.__file__).parent
        assert (package_dir / "py.typed").is_file()

    def test_pyproject_present(self):  # type: ignore[no-untyped-def]
        assert (PROJECT_ROOT / "pyproject.toml").is_file()


class TestPytestPluginDiscovery:
    def test_entry_point_registered(self):  # type: ignore[no-untyped-def]
        pytest11_eps = entry_points(group="pytest11")
        ours = [ep for ep in pytest11_eps if "object_brace_spacing" in ep.value]
        assert ours, (
            f"No pytest11 entry point found for object-brace-spacing. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_available(self):  # type: ignore[no-untyped-def]
        import importlib

        mod = importlib.import_module(
            "object_brace_spacing.integrations._pytest_plugin"
        )
        assert callable(mod.assert_object_brackets_spaced)


class TestPackageMetadata:
    def test_version(self):  # type: ignore[no-untyped-def]
        import object_brace_spacing

        assert object_brace_spacing.__version__ == "0.1.0"
        assert version("object-brace-spacing") == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        import object_brace_spacing

        expected = {
            "OPTION_NAME",
            "BracketSpacingChecker",
            "BracketSpacingMode",
            "ConfigError",
            "Errors",
            "RuleConfig",
            "SourceChecker",
            "Violation",
            "check_file",
            "check_source",
            "is_valid",
        }
        actual = set(object_brace_spacing.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
