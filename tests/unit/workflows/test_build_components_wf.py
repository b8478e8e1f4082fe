"""Unit tests for the build workflow."""

from pathlib import Path

import pytest
from conftest import ScriptedChoiceProvider, pick

from kodex.components.store.component_store_comp import load_components
from kodex.helpers.exceptions import OutputWriteError, SelectionCancelledError
from kodex.workflows.build.build_components_wf import build_components_workflow


def choose_reset_and_card() -> list:
    return [pick("css", "html", kinds=("type",)), lambda choices: ["__all_groups__"], pick("Reset", "Card")]


class TestBuildComponentsWorkflow:
    """Tests for build_components_workflow."""

    @pytest.mark.unit
    def test_separate_mode_after_question(self, components_dir: Path, tmp_path: Path) -> None:
        provider = ScriptedChoiceProvider(answers=choose_reset_and_card(), confirms=[False])
        dist = tmp_path / "dist"

        result = build_components_workflow(load_components(components_dir), provider, dist, bundle_question="Bundle?")

        assert result.status == "generated"
        assert result.bundle is False
        assert provider.confirm_messages == ["Bundle?"]
        assert sorted(p.name for p in dist.iterdir()) == ["card-0.html", "reset-1.css"]
        assert [f.filename for f in result.files] == ["card-0.html", "reset-1.css"]

    @pytest.mark.unit
    def test_bundle_mode_from_flag_skips_question(self, components_dir: Path, tmp_path: Path) -> None:
        provider = ScriptedChoiceProvider(answers=choose_reset_and_card())
        dist = tmp_path / "dist"

        result = build_components_workflow(load_components(components_dir), provider, dist, bundle=True)

        assert provider.confirm_messages == []
        assert result.bundle is True
        assert sorted(p.name for p in dist.iterdir()) == ["bundle.css", "bundle.html"]
        assert (dist / "bundle.css").read_text(encoding="utf-8") == "/* Reset - CSS reset (ID: 1) */\n* { margin: 0; }"

    @pytest.mark.unit
    def test_default_bundle_answer(self, components_dir: Path, tmp_path: Path) -> None:
        provider = ScriptedChoiceProvider(answers=choose_reset_and_card())
        result = build_components_workflow(
            load_components(components_dir), provider, tmp_path / "dist", default_bundle=True
        )
        assert result.bundle is True

    @pytest.mark.unit
    def test_nothing_selected_writes_nothing(self, tmp_path: Path) -> None:
        dist = tmp_path / "dist"
        result = build_components_workflow([], ScriptedChoiceProvider(), dist)

        assert result.status == "nothing_selected"
        assert result.files == []
        assert not dist.exists()

    @pytest.mark.unit
    def test_cancel_at_bundle_question_writes_nothing(self, components_dir: Path, tmp_path: Path) -> None:
        provider = ScriptedChoiceProvider(answers=choose_reset_and_card(), confirms=[KeyboardInterrupt()])
        dist = tmp_path / "dist"

        with pytest.raises(SelectionCancelledError):
            build_components_workflow(load_components(components_dir), provider, dist)

        assert not dist.exists()

    @pytest.mark.unit
    def test_write_failure_propagates(self, components_dir: Path, tmp_path: Path) -> None:
        blocker = tmp_path / "dist"
        blocker.write_text("not a directory", encoding="utf-8")
        provider = ScriptedChoiceProvider(answers=choose_reset_and_card(), confirms=[False])

        with pytest.raises(OutputWriteError):
            build_components_workflow(load_components(components_dir), provider, blocker)
