"""Tests for settings loading."""

import pytest

from tfsage.config.loader import ConfigLoader, get_config_value
from tfsage.exceptions import ConfigError


@pytest.fixture
def user_config(tmp_path):
    """Path of a user settings file inside the test directory."""
    path = tmp_path / "user" / "config.yaml"
    path.parent.mkdir()
    return path


class TestConfigLoader:
    """Tests for ConfigLoader.load()."""

    def test_defaults(self, tmp_path, user_config):
        config = ConfigLoader(project_dir=tmp_path, config_path=user_config).load()

        assert config["terraform"]["binary"] == "terraform"
        assert config["template"]["name"] == "main.tpl"
        assert config["_meta"]["config_sources"] == []

    def test_user_settings_override_defaults(self, tmp_path, user_config):
        user_config.write_text("terraform:\n  binary: /usr/local/bin/terraform\n")

        config = ConfigLoader(project_dir=tmp_path, config_path=user_config).load()

        assert config["terraform"]["binary"] == "/usr/local/bin/terraform"
        assert config["template"]["name"] == "main.tpl"
        assert config["_meta"]["config_sources"] == [str(user_config)]

    def test_project_settings_override_user_settings(self, tmp_path, user_config):
        user_config.write_text("terraform:\n  binary: tofu\ntemplate:\n  name: user.tpl\n")
        (tmp_path / "tfsage.yaml").write_text("template:\n  name: project.tpl\n")

        config = ConfigLoader(project_dir=tmp_path, config_path=user_config).load()

        assert config["terraform"]["binary"] == "tofu"
        assert config["template"]["name"] == "project.tpl"
        assert len(config["_meta"]["config_sources"]) == 2

    def test_env_overrides(self, tmp_path, user_config, monkeypatch):
        (tmp_path / "tfsage.yaml").write_text("terraform:\n  binary: tofu\n")
        monkeypatch.setenv("TFSAGE_TERRAFORM_BINARY", "/opt/terraform")
        monkeypatch.setenv("TFSAGE_LOGGING_LEVEL", "DEBUG")

        config = ConfigLoader(project_dir=tmp_path, config_path=user_config).load()

        assert config["terraform"]["binary"] == "/opt/terraform"
        assert config["logging"]["level"] == "DEBUG"

    def test_env_override_below_value_raises(self, tmp_path, user_config, monkeypatch):
        monkeypatch.setenv("TFSAGE_TERRAFORM_BINARY_PATH", "/x")

        with pytest.raises(ConfigError, match="TFSAGE_TERRAFORM_BINARY_PATH"):
            ConfigLoader(project_dir=tmp_path, config_path=user_config).load()

    def test_env_override_of_section_raises(self, tmp_path, user_config, monkeypatch):
        monkeypatch.setenv("TFSAGE_TERRAFORM", "tofu")

        with pytest.raises(ConfigError, match="section 'terraform'"):
            ConfigLoader(project_dir=tmp_path, config_path=user_config).load()

    def test_env_override_creates_new_section(self, tmp_path, user_config, monkeypatch):
        monkeypatch.setenv("TFSAGE_LOG_FORMAT", "json")

        config = ConfigLoader(project_dir=tmp_path, config_path=user_config).load()

        assert config["log"] == {"format": "json"}
        assert config["terraform"]["binary"] == "terraform"

    def test_empty_file(self, tmp_path, user_config):
        user_config.write_text("")
        config = ConfigLoader(project_dir=tmp_path, config_path=user_config).load()
        assert config["terraform"]["binary"] == "terraform"

    def test_invalid_yaml_raises(self, tmp_path, user_config):
        user_config.write_text("terraform: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            ConfigLoader(project_dir=tmp_path, config_path=user_config).load()

    def test_non_mapping_raises(self, tmp_path, user_config):
        (tmp_path / "tfsage.yaml").write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping"):
            ConfigLoader(project_dir=tmp_path, config_path=user_config).load()

    def test_default_user_settings_location(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        settings = tmp_path / "xdg" / "terraform-sage" / "config.yaml"
        settings.parent.mkdir(parents=True)
        settings.write_text("template:\n  name: xdg.tpl\n")

        config = ConfigLoader(project_dir=tmp_path).load()

        assert config["template"]["name"] == "xdg.tpl"


class TestGetConfigValue:
    """Tests for get_config_value()."""

    def test_nested_lookup(self):
        config = {"terraform": {"binary": "tofu"}}
        assert get_config_value(config, "terraform.binary") == "tofu"

    def test_default(self):
        assert get_config_value({}, "logging.level") is None
        assert get_config_value({"logging": "x"}, "logging.level", "INFO") == "INFO"
