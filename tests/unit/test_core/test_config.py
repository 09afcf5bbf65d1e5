"""
test_config.py - 설정 로드 테스트
"""

from pathlib import Path

import yaml

from src.core.config import load_config, resolve_config
from src.domain.constants import DEFAULT_CONFIG


class TestLoadConfig:
    """load_config 함수 테스트."""

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "missing.yaml")
        assert config == DEFAULT_CONFIG

    def test_defaults_not_shared(self, tmp_path: Path):
        config = load_config(tmp_path / "missing.yaml")
        config["paths"]["ui_dir"] = "Changed"

        assert DEFAULT_CONFIG["paths"]["ui_dir"] == "UI"

    def test_partial_override_merged(self, tmp_path: Path):
        path = tmp_path / "custom.yaml"
        path.write_text(
            yaml.safe_dump({"paths": {"ui_dir": "Interface"}, "meta": {"script_sidecars": True}}),
            encoding="utf-8",
        )

        config = load_config(path)

        assert config["paths"]["ui_dir"] == "Interface"
        assert config["paths"]["styles_dir"] == "UI/Styles"
        assert config["meta"]["script_sidecars"] is True
        assert config["meta"]["importers"]["markup"] == "ScriptedImporter"

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == DEFAULT_CONFIG

    def test_repository_default_matches_constants(self, default_config_path: Path):
        """저장소 default.yaml = DEFAULT_CONFIG."""
        assert load_config(default_config_path) == DEFAULT_CONFIG


class TestResolveConfig:

    def test_none(self):
        assert resolve_config(None) == DEFAULT_CONFIG

    def test_nested_override(self):
        config = resolve_config({"meta": {"importers": {"behavior_script": "CustomImporter"}}})

        assert config["meta"]["importers"]["behavior_script"] == "CustomImporter"
        assert config["meta"]["importers"]["stylesheet"] == "ScriptedImporter"
