"""
Integration tests for the built-in migration properties.

Each test starts from the faithful source/target pair in conftest.py and
breaks one aspect of the migration.
"""

import json
from dataclasses import replace

import pytest

from migration_verifier.config import ProjectLayout
from migration_verifier.core.models import PropertyOutcome, ViolationKind
from migration_verifier.properties import (
    DEPENDENCY_COMPLETENESS,
    FILE_PRESENCE,
    IMPORT_RESOLUTION,
    PROPERTIES,
    SYMBOL_PRESERVATION,
    run_suite,
    verify_dependency_completeness,
    verify_file_presence,
    verify_import_resolution,
    verify_symbol_preservation,
)


class TestFaithfulMigration:
    """A faithful migration passes every property."""

    def test_all_properties_pass(self, config):
        report = run_suite(config)

        assert report.passed, [r.to_dict() for r in report.results]
        assert [r.name for r in report.results] == list(PROPERTIES)
        assert all(r.seed == 1234 for r in report.results)

    def test_universe_sizes(self, config):
        report = run_suite(config)

        assert report.result(FILE_PRESENCE).universe_size == 3
        # Navbar: 2 aliases; button: 1 relative; index: 1 relative
        assert report.result(IMPORT_RESOLUTION).universe_size == 4
        assert report.result(DEPENDENCY_COMPLETENESS).universe_size == 2
        assert report.result(SYMBOL_PRESERVATION).universe_size == 3

    def test_idempotent(self, config):
        first = run_suite(config)
        second = run_suite(config)

        assert first.to_dict() == second.to_dict()


class TestFilePresence:
    """Tests for verify_file_presence."""

    def test_missing_component_reported(self, config, target_root):
        (target_root / "src/components/ui/button.tsx").unlink()

        result = verify_file_presence(config)

        assert result.outcome is PropertyOutcome.VIOLATED
        assert result.violation.kind is ViolationKind.PRESENCE
        assert result.violation.element.endswith("button.tsx")
        assert "absent in target" in result.violation.description

    def test_changed_extension_reported(self, config, target_root):
        components = target_root / "src/components"
        (components / "Navbar.tsx").rename(components / "Navbar.jsx")

        result = verify_file_presence(config)

        assert result.outcome is PropertyOutcome.VIOLATED
        assert result.violation.element.endswith("Navbar.tsx")

    def test_directory_in_place_of_file_reported(self, config, target_root):
        navbar = target_root / "src/components/Navbar.tsx"
        navbar.unlink()
        navbar.mkdir()

        result = verify_file_presence(config)

        assert result.outcome is PropertyOutcome.VIOLATED
        assert result.violation.element.endswith("Navbar.tsx")
        assert "not a file" in result.violation.description

    def test_extra_target_files_are_fine(self, config, target_root):
        (target_root / "src/components/Footer.tsx").write_text("x")

        assert verify_file_presence(config).passed

    def test_missing_source_subtree_is_vacuous(self, config, source_root):
        layout = ProjectLayout(presence_dirs=("src/assets",))

        result = verify_file_presence(replace(config, layout=layout))

        assert result.passed
        assert result.vacuous

    def test_staged_subtrees_extend_universe(self, config, source_root, target_root):
        (source_root / "public").mkdir()
        (source_root / "public/favicon.ico").write_bytes(b"\x00")
        layout = ProjectLayout(presence_dirs=("src/components", "public"))

        result = verify_file_presence(replace(config, layout=layout))

        assert result.universe_size == 4
        assert result.outcome is PropertyOutcome.VIOLATED
        assert result.violation.element.endswith("favicon.ico")


class TestImportResolution:
    """Tests for verify_import_resolution."""

    def test_unresolved_relative_import_reports_file_and_reference(self, config, target_root):
        navbar = target_root / "src/components/Navbar.tsx"
        navbar.write_text("import { slugify } from './utils/helpers'\n")

        result = verify_import_resolution(config)

        assert result.outcome is PropertyOutcome.VIOLATED
        violation = result.violation
        assert violation.kind is ViolationKind.RESOLUTION
        assert violation.details["file"] == str(navbar)
        assert violation.details["reference"] == "./utils/helpers"
        assert str(navbar) in violation.element

    def test_unresolved_alias_import(self, config, target_root):
        (target_root / "src/lib/utils.ts").unlink()

        result = verify_import_resolution(config)

        assert result.outcome is PropertyOutcome.VIOLATED
        assert "lib/utils" in result.violation.details["reference"]

    def test_external_references_are_exempt(self, config, target_root):
        (target_root / "src/components/Navbar.tsx").write_text(
            "import { Link } from '@tanstack/react-router'\nimport x from 'not-installed'\n"
        )

        result = verify_import_resolution(config)

        assert result.passed
        assert result.universe_size == 2  # button.tsx + index.ts only

    def test_deferred_prefix_skipped(self, config, target_root):
        (target_root / "src/components/Hero.tsx").write_text("import logo from '@/assets/logo.svg'\n")

        assert not verify_import_resolution(config).passed

        layout = ProjectLayout(deferred_prefixes=("@/assets",))
        assert verify_import_resolution(replace(config, layout=layout)).passed

    def test_non_module_files_ignored(self, config, target_root):
        (target_root / "src/components/notes.md").write_text("import x from './nowhere'\n")

        assert verify_import_resolution(config).passed

    def test_missing_components_is_vacuous(self, config, target_root):
        layout = ProjectLayout(components_dir="src/widgets")

        result = verify_import_resolution(replace(config, layout=layout))

        assert result.vacuous


class TestDependencyCompleteness:
    """Tests for verify_dependency_completeness."""

    def _write_target_deps(self, target_root, deps):
        (target_root / "package.json").write_text(json.dumps({"dependencies": deps}))

    def test_absent_dependency_reported(self, config, target_root):
        self._write_target_deps(target_root, {"@radix-ui/react-slot": "^1.1.0"})

        result = verify_dependency_completeness(config)

        assert result.outcome is PropertyOutcome.VIOLATED
        assert result.violation.kind is ViolationKind.MANIFEST
        assert result.violation.element == "@radix-ui/react-dialog"
        assert result.violation.details["reasons"] == ["AbsentInTarget"]

    def test_invalid_target_version_reported(self, config, target_root):
        self._write_target_deps(target_root, {
            "@radix-ui/react-dialog": "^1.1.2",
            "@radix-ui/react-slot": "latest",
        })

        result = verify_dependency_completeness(config)

        assert result.violation.element == "@radix-ui/react-slot"
        assert result.violation.details["reasons"] == ["InvalidVersionSyntax"]
        assert result.violation.details["sides"] == ["target"]

    def test_no_scoped_dependencies_is_vacuous(self, config):
        layout = ProjectLayout(scope_prefix="@mui/")

        result = verify_dependency_completeness(replace(config, layout=layout))

        assert result.passed
        assert result.vacuous

    def test_malformed_manifest_is_error_not_violation(self, config, target_root):
        (target_root / "package.json").write_text("{ not json")

        result = verify_dependency_completeness(config)

        assert result.outcome is PropertyOutcome.ERROR
        assert result.error_type == "ManifestParseError"
        assert str(target_root) in result.error

    def test_missing_source_manifest_is_error(self, config, source_root):
        (source_root / "package.json").unlink()

        result = verify_dependency_completeness(config)

        assert result.outcome is PropertyOutcome.ERROR
        assert result.error_type == "FilesystemError"


class TestSymbolPreservation:
    """Tests for verify_symbol_preservation."""

    def test_missing_symbol_reported(self, config, target_root):
        (target_root / "src/styles.css").write_text(":root { --background: #000; --spacing: 4px; }")

        result = verify_symbol_preservation(config)

        assert result.outcome is PropertyOutcome.VIOLATED
        assert result.violation.kind is ViolationKind.PRESERVATION
        assert result.violation.element == "primary"

    def test_missing_target_style_sheet_is_error(self, config, target_root):
        (target_root / "src/styles.css").unlink()

        result = verify_symbol_preservation(config)

        assert result.outcome is PropertyOutcome.ERROR
        assert result.error_type == "FilesystemError"


class TestRunSuite:
    """Tests for run_suite."""

    def test_failing_property_does_not_block_others(self, config, target_root):
        (target_root / "src/styles.css").unlink()
        (target_root / "package.json").write_text(json.dumps({"dependencies": {}}))

        report = run_suite(config)

        assert report.result(SYMBOL_PRESERVATION).outcome is PropertyOutcome.ERROR
        assert report.result(DEPENDENCY_COMPLETENESS).outcome is PropertyOutcome.VIOLATED
        assert report.result(FILE_PRESENCE).passed
        assert report.result(IMPORT_RESOLUTION).passed
        assert len(report.errors) == 1
        assert len(report.violations) == 1

    def test_undecodable_files_become_errors(self, config, target_root):
        (target_root / "package.json").write_bytes(b'{"dependencies": {"\xff": "1"}}')
        (target_root / "src/styles.css").write_bytes(b":root { --primary: \xff; }")

        report = run_suite(config)

        assert report.result(DEPENDENCY_COMPLETENESS).error_type == "ManifestParseError"
        assert report.result(SYMBOL_PRESERVATION).error_type == "FilesystemError"
        assert report.result(FILE_PRESENCE).passed
        assert report.result(IMPORT_RESOLUTION).passed

    def test_subset_runs_in_canonical_order(self, config):
        report = run_suite(config, [SYMBOL_PRESERVATION, FILE_PRESENCE])

        assert [r.name for r in report.results] == [FILE_PRESENCE, SYMBOL_PRESERVATION]

    def test_unknown_property_rejected(self, config):
        with pytest.raises(ValueError, match="Unknown properties"):
            run_suite(config, ["file_presense"])

    def test_unseeded_run_records_shared_seed(self, config):
        report = run_suite(replace(config, seed=None))

        assert {r.seed for r in report.results} == {report.seed}
