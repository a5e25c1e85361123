import tomllib
from pathlib import Path

from config import Config, load_config


class TestLoadConfig:
    """Tests for load_config."""

    def test_creates_default_file(self, tmp_path):
        """Test a missing config file is created with defaults."""
        config_path = tmp_path / "vaultix.toml"

        config = load_config(config_path)

        assert config == Config.default()
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        assert data["database"]["filename"] == "vaultix.db"
        assert data["simulation"]["interval_seconds"] == 10.0
        assert data["simulation"]["volatility"] == 0.02

    def test_reads_values(self, tmp_path):
        """Test values from the file override defaults."""
        config_path = tmp_path / "vaultix.toml"
        config_path.write_text(
            f'base_dir = "{tmp_path.as_posix()}/data"\n'
            "[logging]\n"
            'level = "DEBUG"\n'
            "[simulation]\n"
            "enabled = false\n"
            "interval_seconds = 2\n"
        )

        config = load_config(config_path)

        assert config.base_dir == Path(f"{tmp_path.as_posix()}/data")
        assert config.db_path == config.base_dir / "db" / "vaultix.db"
        assert config.log_level == "DEBUG"
        assert config.log_dir == config.base_dir / "logs"
        assert config.simulation_enabled is False
        assert config.simulation_interval == 2.0
        assert config.simulation_volatility == 0.02
