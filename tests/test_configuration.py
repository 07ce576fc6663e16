"""Tests for configuration loading.

These tests verify:
- Values are read from the YAML file
- Defaults apply when sections are missing
- Environment variables override paths
- APP_ENV selects the config file
- Invalid values fail fast
"""

import os
import tempfile

import pytest
import yaml

from cheesedir.config import configuration


class TestConfiguration:
    """Test load_config with a temporary YAML file."""

    @pytest.fixture
    def write_config(self, monkeypatch):
        """Point the loader at a temporary YAML file with the given content."""
        paths = []

        for key in ("CHEESEDIR_CSV_PATH", "CHEESEDIR_OUTPUT_PATH", "CHEESEDIR_DB_PATH"):
            monkeypatch.delenv(key, raising=False)
        # Keep a developer's .env out of the test run
        monkeypatch.setattr(configuration, "load_dotenv", lambda: None)

        def _write(content: dict) -> str:
            fd, config_path = tempfile.mkstemp(suffix=".yaml")
            os.close(fd)
            with open(config_path, "w") as f:
                yaml.dump(content, f)
            paths.append(config_path)

            def mock_load():
                with open(config_path, "r") as f:
                    return yaml.safe_load(f) or {}

            monkeypatch.setattr(configuration, "_load_yaml_config", mock_load)
            configuration.reset_config()
            return config_path

        yield _write

        # Cleanup
        configuration.reset_config()
        for path in paths:
            if os.path.exists(path):
                os.remove(path)

    def test_values_from_yaml(self, write_config):
        write_config({
            "data": {
                "csv_path": "cheeses.csv",
                "output_path": "out.csv",
                "record_limit": 25,
            },
            "database": {"path": "test.db", "mirror_enabled": False},
            "logging": {"level": "DEBUG"},
        })

        config = configuration.load_config()

        assert config.data.csv_path == "cheeses.csv"
        assert config.data.output_path == "out.csv"
        assert config.data.record_limit == 25
        assert config.database.path == "test.db"
        assert config.database.mirror_enabled is False
        assert config.logging.level == "DEBUG"

    def test_defaults(self, write_config):
        write_config({})

        config = configuration.load_config()

        assert config.data.csv_path == "data/canadianCheeseDirectory.csv"
        assert config.data.output_path == "cheese_directory_output.csv"
        assert config.data.record_limit == 10000
        assert config.database.path == "cheesedir.db"
        assert config.database.mirror_enabled is True
        assert config.logging.level == "INFO"

    def test_environment_overrides(self, write_config, monkeypatch):
        write_config({"database": {"path": "yaml.db"}})
        monkeypatch.setenv("CHEESEDIR_DB_PATH", "env.db")
        monkeypatch.setenv("CHEESEDIR_CSV_PATH", "env.csv")

        config = configuration.load_config()

        assert config.database.path == "env.db"
        assert config.data.csv_path == "env.csv"

    @pytest.mark.parametrize("limit", [0, -5, "many"])
    def test_invalid_record_limit(self, write_config, limit):
        write_config({"data": {"record_limit": limit}})

        with pytest.raises(configuration.ConfigurationError):
            configuration.load_config()

    @pytest.mark.parametrize("value", ["false", "no", 0, 1])
    def test_mirror_enabled_must_be_boolean(self, write_config, value):
        write_config({"database": {"mirror_enabled": value}})

        with pytest.raises(configuration.ConfigurationError):
            configuration.load_config()

    def test_mirror_enabled_false(self, write_config):
        write_config({"database": {"mirror_enabled": False}})

        assert configuration.load_config().database.mirror_enabled is False

    def test_get_config_is_cached(self, write_config):
        write_config({})

        assert configuration.get_config() is configuration.get_config()

    @pytest.mark.parametrize(
        "app_env,filename",
        [("dev", "config_dev.yaml"), ("test", "config_test.yaml"), ("", "config.yaml")],
    )
    def test_config_filename_from_app_env(self, monkeypatch, app_env, filename):
        monkeypatch.setenv("APP_ENV", app_env)

        assert configuration._get_config_filename() == filename

    def test_missing_config_file(self, monkeypatch, tmp_path):
        monkeypatch.setattr(configuration, "_get_project_root", lambda: tmp_path)
        monkeypatch.delenv("APP_ENV", raising=False)

        with pytest.raises(configuration.ConfigurationError):
            configuration._load_yaml_config()

    def test_malformed_yaml_raises(self, monkeypatch, tmp_path):
        (tmp_path / "config.yaml").write_text("data: [unclosed\n", encoding="utf-8")
        monkeypatch.setattr(configuration, "_get_project_root", lambda: tmp_path)
        monkeypatch.delenv("APP_ENV", raising=False)

        with pytest.raises(configuration.ConfigurationError) as exc_info:
            configuration._load_yaml_config()

        assert "Invalid YAML" in str(exc_info.value)

    def test_project_config_file_loads(self, monkeypatch):
        monkeypatch.delenv("APP_ENV", raising=False)

        yaml_config = configuration._load_yaml_config()

        assert yaml_config["data"]["csv_path"] == "data/canadianCheeseDirectory.csv"
