"""Tests for configuration loading from the environment."""

from pathlib import Path

import pytest

from actions_clean.config import CleanupConfig


class TestConfigLoading:
    """Tests for loading configuration from runner variables."""

    def test_load_from_environment_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test loading config from environment variables."""
        monkeypatch.setenv("GITHUB_WORKSPACE", "/runner/work/repo")
        monkeypatch.setenv("HOME", "/home/runner")
        monkeypatch.setenv("INPUT_CLEANUP_HOME", "false")
        monkeypatch.setenv("INPUT_CLEANUP_WORKSPACE", "true")
        monkeypatch.setenv("INPUT_DRY_RUN", "true")
        monkeypatch.setenv("RUNNER_DEBUG", "1")

        config = CleanupConfig()

        assert config.workspace == Path("/runner/work/repo")
        assert config.home == Path("/home/runner")
        assert config.cleanup_home is False
        assert config.cleanup_workspace is True
        assert config.dry_run is True
        assert config.debug is True

    def test_case_insensitive_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that environment variable names are case insensitive."""
        monkeypatch.setenv("github_workspace", "/ws")
        monkeypatch.setenv("Input_Dry_Run", "true")

        config = CleanupConfig()

        assert config.workspace == Path("/ws")
        assert config.dry_run is True

    def test_load_from_env_file(self, tmp_path: Path) -> None:
        """Test loading config from an explicit env file."""
        env_file = tmp_path / "runner.env"
        env_file.write_text(
            """
GITHUB_WORKSPACE=/runner/work/from-file
INPUT_CLEANUP_HOME=false
"""
        )

        config = CleanupConfig(env_file=env_file)

        assert config.workspace == Path("/runner/work/from-file")
        assert config.cleanup_home is False

    def test_environment_variables_override_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that environment variables override the env file."""
        env_file = tmp_path / "runner.env"
        env_file.write_text(
            """
GITHUB_WORKSPACE=/runner/work/from-file
INPUT_DRY_RUN=false
"""
        )
        monkeypatch.setenv("INPUT_DRY_RUN", "true")

        config = CleanupConfig(env_file=str(env_file))

        assert config.dry_run is True
        # This should still come from file
        assert config.workspace == Path("/runner/work/from-file")

    def test_dotenv_in_cwd_is_ignored(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a .env file in the working directory is not read implicitly."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("INPUT_CLEANUP_HOME=false\n")
        monkeypatch.setenv("GITHUB_WORKSPACE", "/ws")

        config = CleanupConfig()

        assert config.cleanup_home is True

    def test_explicit_values_override_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that init values take precedence over the environment."""
        monkeypatch.setenv("GITHUB_WORKSPACE", "/from-env")

        config = CleanupConfig(GITHUB_WORKSPACE="/explicit")

        assert config.workspace == Path("/explicit")
