"""Tests for Config."""

from __future__ import annotations

import pytest

from commerce_ext.config import Config
from commerce_ext.errors import ConfigError, ConfigNotFoundError


class TestGet:
    def test_dot_path_lookup(self) -> None:
        config = Config({"gateway": {"executable": "sf"}})
        assert config.get("gateway.executable") == "sf"

    def test_falls_back_to_builtin_defaults(self) -> None:
        config = Config()
        assert config.get("gateway.executable") == "sfdx"
        assert config.get("gateway.timeout") == 120

    def test_unknown_key_returns_default(self) -> None:
        assert Config().get("nope.missing", "fallback") == "fallback"
        assert Config().get("messages.path") is None


class TestFromYaml:
    def test_loads_file(self, tmp_path) -> None:
        path = tmp_path / "commerce.yaml"
        path.write_text("gateway:\n  timeout: 30\nmessages:\n  path: /etc/messages.yaml\n")
        config = Config.from_yaml(str(path))
        assert config.get("gateway.timeout") == 30
        assert config.get("gateway.executable") == "sfdx"
        assert config.get("messages.path") == "/etc/messages.yaml"

    def test_empty_file_is_empty_config(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert Config.from_yaml(str(path)).get("gateway.timeout") == 120

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ConfigNotFoundError) as exc_info:
            Config.from_yaml(str(tmp_path / "absent.yaml"))
        assert exc_info.value.code == "CONFIG_NOT_FOUND"

    def test_invalid_yaml(self, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("gateway: [unclosed\n")
        with pytest.raises(ConfigError):
            Config.from_yaml(str(path))

    def test_non_mapping_root(self, tmp_path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            Config.from_yaml(str(path))

    @pytest.mark.parametrize("timeout", ["0", "-5", "soon"])
    def test_rejects_bad_timeout(self, tmp_path, timeout) -> None:
        path = tmp_path / "timeout.yaml"
        path.write_text(f"gateway:\n  timeout: {timeout}\n")
        with pytest.raises(ConfigError, match="gateway.timeout"):
            Config.from_yaml(str(path))
