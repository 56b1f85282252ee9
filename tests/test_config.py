"""Tests for the configuration model and JSON store."""

from __future__ import annotations

from pathlib import Path

import orjson
import pytest

from brewfmt.io.config_io import load_config, save_config
from brewfmt.models.config import (
    DEFAULT_EXTENSIONS,
    DEFAULT_IGNORE_DIRS,
    DEFAULT_PRETTIER_OPTIONS,
    FormatterConfig,
    normalize_extension,
)
from brewfmt.models.paths import StatePaths


class TestFormatterConfig:
    def test_defaults(self) -> None:
        config = FormatterConfig()
        assert config.extensions == list(DEFAULT_EXTENSIONS)
        assert config.ignore_dirs == list(DEFAULT_IGNORE_DIRS)
        assert config.prettier == DEFAULT_PRETTIER_OPTIONS
        assert config.eslint.enabled is True
        assert config.stylelint.enabled is True

    def test_defaults_are_not_shared(self) -> None:
        a = FormatterConfig()
        b = FormatterConfig()
        a.extensions.append(".py")
        a.prettier["printWidth"] = 80
        assert ".py" not in b.extensions
        assert b.prettier["printWidth"] == 100

    def test_to_dict_uses_file_keys(self) -> None:
        data = FormatterConfig().to_dict()
        assert set(data) == {
            "extensions",
            "ignoreDirs",
            "prettierConfig",
            "eslintConfig",
            "stylelintConfig",
        }
        assert data["eslintConfig"] == {"enabled": True}

    def test_merged_is_shallow(self) -> None:
        merged = FormatterConfig().merged({"prettierConfig": {"semi": False}})
        assert merged.prettier == {"semi": False}
        assert merged.extensions == list(DEFAULT_EXTENSIONS)

    def test_merged_ignores_unknown_and_mistyped_keys(self) -> None:
        merged = FormatterConfig().merged({"bogus": 1, "extensions": ".js", "ignoreDirs": ["x"]})
        assert merged.extensions == list(DEFAULT_EXTENSIONS)
        assert merged.ignore_dirs == ["x"]

    def test_with_overrides_does_not_mutate(self) -> None:
        config = FormatterConfig()
        run = config.with_overrides(extensions=["JS", ".ts"], ignore_dirs=["out"])
        assert run.extensions == [".js", ".ts"]
        assert run.ignore_dirs == ["out"]
        assert config.extensions == list(DEFAULT_EXTENSIONS)

    def test_extension_set_is_lowercase(self) -> None:
        config = FormatterConfig(extensions=[".JS", ".Css"])
        assert config.extension_set() == frozenset({".js", ".css"})

    def test_normalize_extension(self) -> None:
        assert normalize_extension(" md ") == ".md"
        assert normalize_extension(".TSX") == ".tsx"


class TestConfigIO:
    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        config, found = load_config(tmp_path / "nope.json")
        assert found is False
        assert config == FormatterConfig()

    def test_partial_file_keeps_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_bytes(orjson.dumps({"ignoreDirs": ["out"], "eslintConfig": {"enabled": False}}))

        config, found = load_config(path)

        assert found is True
        assert config.ignore_dirs == ["out"]
        assert config.eslint.enabled is False
        assert config.extensions == list(DEFAULT_EXTENSIONS)
        assert config.prettier == DEFAULT_PRETTIER_OPTIONS
        assert config.stylelint.enabled is True

    def test_non_boolean_linter_flag_keeps_default(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = tmp_path / "config.json"
        path.write_bytes(orjson.dumps({"eslintConfig": {"enabled": "false"}}))

        config, found = load_config(path)

        assert found is True
        assert config.eslint.enabled is True
        assert "non-boolean" in caplog.text

    def test_malformed_file_keeps_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json")
        config, found = load_config(path)
        assert found is False
        assert config == FormatterConfig()

    def test_non_object_file_keeps_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("[1, 2, 3]")
        config, found = load_config(path)
        assert found is False
        assert config == FormatterConfig()

    def test_load_over_given_config(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_bytes(orjson.dumps({"extensions": [".rb"]}))
        base = FormatterConfig(ignore_dirs=["only"])
        config, found = load_config(path, base)
        assert found is True
        assert config.extensions == [".rb"]
        assert config.ignore_dirs == ["only"]

    def test_save_then_load_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "dir" / "config.json"
        config = FormatterConfig(extensions=[".js", ".md"], ignore_dirs=["dist"])
        config.prettier["printWidth"] = 80
        config.stylelint.enabled = False

        assert save_config(config, path) is True
        loaded, found = load_config(path)

        assert found is True
        assert loaded == config

    def test_save_writes_indented_json(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        save_config(FormatterConfig(), path)
        text = path.read_text()
        assert text.startswith("{\n  ")
        assert list(tmp_path.glob("*.tmp")) == []

    def test_save_failure_returns_false(self, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        assert save_config(FormatterConfig(), blocker / "config.json") is False


class TestStatePaths:
    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BREWFMT_HOME", str(tmp_path / "state"))
        paths = StatePaths.resolve()
        assert paths.config_file == tmp_path / "state" / "config.json"
        assert paths.tool_dir("eslint") == tmp_path / "state" / "tools" / "eslint"

    def test_default_home(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("BREWFMT_HOME", raising=False)
        paths = StatePaths.resolve()
        assert paths.home == Path.home() / ".brew-formatter"
