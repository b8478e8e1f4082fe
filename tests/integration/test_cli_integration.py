"""
Integration tests for CLI commands.

Drives ``kodex.interfaces.cli.main.main`` in-process against a temporary
project folder. The interactive provider is replaced by a scripted one; all
other layers (config, store, workflows, output) are real.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest
from conftest import ScriptedChoiceProvider, pick

from kodex.helpers.dto.selection_dto import ALL_GROUPS
from kodex.interfaces.cli import ui
from kodex.interfaces.cli.main import main
from kodex.services.config_svc import ENV_CONFIG_PATH, ENV_OVERRIDES

# Mark all tests in this module
pytestmark = [pytest.mark.integration]

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture(autouse=True)
def project(tmp_path: Path, monkeypatch) -> Path:
    """Run every command from an isolated working directory."""
    monkeypatch.chdir(tmp_path)
    # Long tmp paths must not wrap inside asserted messages
    monkeypatch.setattr(ui.console, "width", 200)
    monkeypatch.delenv(ENV_CONFIG_PATH, raising=False)
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)
    return tmp_path


def use_provider(monkeypatch, provider) -> ScriptedChoiceProvider:
    monkeypatch.setattr("kodex.interfaces.cli.commands.build_cli.create_choice_provider", lambda ctx: provider)
    return provider


def reset_and_card(**kwargs) -> ScriptedChoiceProvider:
    return ScriptedChoiceProvider(
        answers=[pick("css", "html", kinds=("type",)), lambda choices: [ALL_GROUPS], pick("Reset", "Card")],
        **kwargs,
    )


def run_cli(*args, cwd: Path):
    """Run the CLI in a subprocess and return the completed process."""
    env = dict(os.environ, PYTHONPATH=str(PROJECT_ROOT))
    return subprocess.run(
        [sys.executable, "-m", "kodex", *args],
        capture_output=True,
        text=True,
        cwd=cwd,
        env=env,
    )


class TestCLIBuild:
    """Test the build command (default command)."""

    def test_separate_build(self, components_dir, project, monkeypatch, capsys):
        provider = use_provider(monkeypatch, reset_and_card())

        assert main(["build", "--separate"]) == 0

        assert sorted(p.name for p in (project / "dist").iterdir()) == ["card-0.html", "reset-1.css"]
        assert provider.confirm_messages == []
        out = capsys.readouterr().out
        assert "2 components generated successfully!" in out
        assert "card-0.html" in out

    def test_bundle_flag(self, components_dir, project, monkeypatch):
        use_provider(monkeypatch, reset_and_card())

        assert main(["build", "--bundle"]) == 0

        dist = project / "dist"
        assert sorted(p.name for p in dist.iterdir()) == ["bundle.css", "bundle.html"]
        assert (dist / "bundle.html").read_text(encoding="utf-8") == '/* Card - Content card (ID: 0) */\n<div class="card"></div>'

    def test_no_subcommand_asks_bundle_question(self, components_dir, project, monkeypatch):
        provider = use_provider(monkeypatch, reset_and_card(confirms=[True]))

        assert main([]) == 0

        assert provider.confirm_messages == ["Do you want to bundle the files by type?"]
        assert (project / "dist" / "bundle.css").is_file()

    def test_custom_directories(self, components_dir, project, monkeypatch):
        components_dir.rename(project / "snippets")
        use_provider(monkeypatch, reset_and_card())

        assert main(["build", "--separate", "--components-dir", "snippets", "--dist-dir", "out"]) == 0

        assert (project / "out" / "reset-1.css").is_file()
        assert not (project / "dist").exists()

    def test_empty_components_dir_writes_nothing(self, project, monkeypatch, capsys):
        (project / "components").mkdir()
        provider = use_provider(monkeypatch, ScriptedChoiceProvider())

        assert main(["build"]) == 0

        assert provider.calls == []
        assert not (project / "dist").exists()
        assert sorted(p.name for p in project.iterdir()) == ["components"]
        assert "No JSON components found" in capsys.readouterr().out

    def test_missing_components_dir(self, project, monkeypatch, capsys):
        use_provider(monkeypatch, ScriptedChoiceProvider())

        assert main(["build"]) == 0

        assert "folder not found" in capsys.readouterr().out
        assert not (project / "dist").exists()

    def test_invalid_component_file(self, components_dir, project, monkeypatch, capsys):
        (components_dir / "zz-broken.json").write_text("{", encoding="utf-8")
        use_provider(monkeypatch, ScriptedChoiceProvider())

        assert main(["build"]) == 0

        out = capsys.readouterr().out
        assert "Error loading components" in out
        assert "zz-broken.json" in out

    def test_cancel_writes_nothing(self, components_dir, project, monkeypatch, capsys):
        use_provider(monkeypatch, ScriptedChoiceProvider(answers=[KeyboardInterrupt()]))

        assert main(["build"]) == 0

        assert "Cancelled" in capsys.readouterr().out
        assert not (project / "dist").exists()

    def test_write_failure_exits_nonzero(self, components_dir, project, monkeypatch, capsys):
        (project / "dist").write_text("in the way", encoding="utf-8")
        use_provider(monkeypatch, reset_and_card())

        assert main(["build", "--separate"]) == 1

        assert "Failed to write" in capsys.readouterr().out

    def test_unexpected_error_exits_nonzero(self, components_dir, monkeypatch, capsys):
        def boom(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("kodex.interfaces.cli.commands.build_cli.build_components_workflow", boom)
        use_provider(monkeypatch, ScriptedChoiceProvider())

        assert main(["build"]) == 1

        assert "Error: RuntimeError: boom" in capsys.readouterr().out

    def test_unexpected_error_uses_configured_locale(self, components_dir, project, monkeypatch, capsys):
        (project / "kodex.yaml").write_text("ui:\n  locale: de\n", encoding="utf-8")

        def boom(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("kodex.interfaces.cli.commands.build_cli.build_components_workflow", boom)
        use_provider(monkeypatch, ScriptedChoiceProvider())

        assert main(["build"]) == 1

        assert "Fehler: RuntimeError: boom" in capsys.readouterr().out

    def test_banner_can_be_disabled_and_locale_switched(self, components_dir, project, monkeypatch, capsys):
        (project / "kodex.yaml").write_text("ui:\n  show_banner: false\n  locale: de\n", encoding="utf-8")
        use_provider(monkeypatch, reset_and_card())

        assert main(["build", "--separate"]) == 0

        out = capsys.readouterr().out
        assert "Your Private Component Library Bundler" not in out
        assert "Komponenten erfolgreich generiert" in out


class TestCLIProject:
    """Test list, init and config."""

    def test_list(self, components_dir, capsys):
        assert main(["list"]) == 0

        out = capsys.readouterr().out
        assert out.index("CSS") < out.index("HTML") < out.index("JS")
        assert "Button Style" in out
        assert "└─ forms" in out
        assert "3 groups available" in out

    def test_list_survives_wrong_shaped_config(self, components_dir, project, capsys):
        (project / "kodex.yaml").write_text("ui:\n  type_colors: red\npaths: dist\n", encoding="utf-8")

        assert main(["list"]) == 0

        out = capsys.readouterr().out
        assert "Button Style" in out
        assert "folder not found" not in out

    def test_list_without_components(self, project, capsys):
        assert main(["list"]) == 0
        assert "folder not found" in capsys.readouterr().out

    def test_init_twice(self, project, capsys):
        assert main(["init"]) == 0
        first = capsys.readouterr().out
        (project / "components" / "keep.json").write_text("{}", encoding="utf-8")

        assert main(["init"]) == 0
        second = capsys.readouterr().out

        assert "folder created" in first
        assert "already exists" in second
        assert "folder created" not in second
        assert (project / "components" / "keep.json").read_text(encoding="utf-8") == "{}"

    def test_init_blocked_by_file(self, project):
        (project / "dist").write_text("", encoding="utf-8")
        assert main(["init"]) == 1

    def test_config_show(self, project, capsys):
        (project / "config.json").write_text(json.dumps({"ui": {"type_colors": {"css": "magenta"}}}), encoding="utf-8")

        assert main(["config", "--show"]) == 0

        out = capsys.readouterr().out
        assert "ui.type_colors" in out
        assert "components_dir" in out
        assert "magenta" in out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "kodex 1.0.0" in capsys.readouterr().out


class TestCLISubprocess:
    """Run the installed entry module in a real interpreter."""

    def test_help(self, project):
        result = run_cli("--help", cwd=project)
        assert result.returncode == 0
        assert "list" in result.stdout
        assert "init" in result.stdout

    def test_list_help(self, project):
        result = run_cli("list", "--help", cwd=project)
        assert result.returncode == 0
        assert "--components-dir" in result.stdout
