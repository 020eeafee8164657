"""Tests for the command-line entry point (tbxinit.cli).

Covers:
- Successful runs and the options passed through to the request/config
- --list-templates
- Error reporting and exit codes
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console

from tbxinit.cli import build_parser, main


pytestmark = pytest.mark.unit


@pytest.fixture
def recording_console():
    """Capture everything the CLI prints."""
    test_console = Console(record=True, width=200, force_terminal=False)
    with patch("tbxinit.utils.console", test_console), patch("tbxinit.cli.console", test_console):
        yield test_console


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args(["banana"])
        assert args.root_name == "banana"
        assert args.output_folder is None
        assert args.function_name is None
        assert args.toolbox_name is None
        assert args.toolbox_version is None
        assert args.skip_environment_check is False
        assert args.list_templates is False

    def test_short_options(self):
        args = build_parser().parse_args(["banana", "-o", "/tmp/x", "-q"])
        assert args.output_folder == "/tmp/x"
        assert args.quiet is True


# ---------------------------------------------------------------------------
# Successful runs
# ---------------------------------------------------------------------------


class TestMainSuccess:
    def test_creates_project(self, output_dir, recording_console, expected_files):
        main(["banana", "-o", str(output_dir), "--matlab-release", "R2024a"])
        root = output_dir / "banana"
        created = sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())
        assert created == expected_files
        text = recording_console.export_text()
        assert "Toolbox created" in text
        assert "Created 12 files in 4 folders." in text

    def test_passes_options(self, output_dir, recording_console):
        main([
            "2bad-name",
            "--output-folder", str(output_dir),
            "--function-name", "helper.m",
            "--toolbox-name", "Helpers",
            "--toolbox-version", "0.2.0",
            "--skip-environment-check",
            "--quiet",
        ])
        root = output_dir / "2bad-name"
        assert (root / "toolbox" / "helper.m").is_file()
        assert (root / "tests" / "helper_test.m").is_file()
        manifest = (root / "toolboxOptions.m").read_text(encoding="utf-8")
        assert 'opts.ToolboxName = "Helpers";' in manifest
        assert 'opts.ToolboxVersion = "0.2.0";' in manifest
        text = recording_console.export_text()
        assert "placed" not in text
        assert "Skipping the MATLAB release check." in text

    def test_markup_in_names_printed_literally(self, output_dir, recording_console):
        main([
            "[red]banana", "-o", str(output_dir), "-q",
            "--matlab-release", "R2024a",
            "--toolbox-name", "Fruit [/red] Tools",
        ])
        assert (output_dir / "[red]banana" / "toolboxOptions.m").is_file()
        text = recording_console.export_text()
        assert "Fruit [/red] Tools" in text
        assert "[red]banana" in text
        assert "Created 12 files in 4 folders." in text

    def test_output_folder_defaults_to_cwd(self, output_dir, recording_console, monkeypatch):
        monkeypatch.chdir(output_dir)
        main(["banana", "--skip-environment-check", "-q"])
        assert (output_dir / "banana" / "README.md").is_file()

    def test_custom_template_dir(self, template_copy, output_dir, recording_console):
        (template_copy / "README.md_TEMPLATE").write_text("custom\n", encoding="utf-8")
        main([
            "banana", "-o", str(output_dir), "-q",
            "--template-dir", str(template_copy),
            "--skip-environment-check",
        ])
        assert (output_dir / "banana" / "README.md").read_text(encoding="utf-8") == "custom\n"

    def test_list_templates(self, recording_console):
        main(["--list-templates"])
        lines = recording_console.export_text().split()
        assert "toolboxOptions.m" in lines
        assert "mwgitignore" in lines
        assert len(lines) == 13
        assert "Missing templates" not in recording_console.export_text()

    def test_list_templates_warns_on_missing(self, template_copy, recording_console):
        (template_copy / "buildfile.m_TEMPLATE").unlink()
        main(["--list-templates", "--template-dir", str(template_copy)])
        text = recording_console.export_text()
        assert "Missing templates: buildfile.m" in text


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestMainFailure:
    def test_missing_root_name(self, recording_console):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_existing_project(self, output_dir, recording_console):
        (output_dir / "banana").mkdir()
        with pytest.raises(SystemExit) as exc_info:
            main(["banana", "-o", str(output_dir), "--skip-environment-check"])
        assert exc_info.value.code == 1
        text = recording_console.export_text()
        assert "Error:" in text
        assert "Could not create directory" in text

    def test_unsupported_release(self, output_dir, recording_console):
        with pytest.raises(SystemExit) as exc_info:
            main(["banana", "-o", str(output_dir), "--matlab-release", "R2021a"])
        assert exc_info.value.code == 1
        assert "R2023b or newer is required" in recording_console.export_text()
        assert not (output_dir / "banana").exists()

    def test_invalid_version(self, output_dir, recording_console):
        with pytest.raises(SystemExit) as exc_info:
            main(["banana", "-o", str(output_dir), "--toolbox-version", "one", "--skip-environment-check"])
        assert exc_info.value.code == 1
        assert "toolbox_version" in recording_console.export_text()
        assert not (output_dir / "banana").exists()

    def test_root_name_path_rejected(self, output_dir, recording_console):
        elsewhere = output_dir.parent / "elsewhere"
        with pytest.raises(SystemExit) as exc_info:
            main([str(elsewhere), "-o", str(output_dir), "--skip-environment-check"])
        assert exc_info.value.code == 1
        assert "root_name" in recording_console.export_text()
        assert not elsewhere.exists()

    def test_invalid_minimum_release(self, output_dir, recording_console):
        with pytest.raises(SystemExit) as exc_info:
            main(["banana", "-o", str(output_dir), "--minimum-release", "latest"])
        assert exc_info.value.code == 1
        assert "minimum_release" in recording_console.export_text()
