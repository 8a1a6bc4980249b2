"""Tests for configuration loading."""

import os

import pytest

from repo_pulse.config import PulseConfig, load_config
from repo_pulse.exceptions import InvalidConfigError, RepoPulseError


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's real config files and env out of these tests."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setattr("pathlib.Path.home", lambda: home)
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("REPO_PULSE_"):
            monkeypatch.delenv(key)
    return home, work


class TestPulseConfig:
    def test_defaults(self):
        config = PulseConfig()
        assert config.git_max_commits == 0
        assert config.include_merges is False
        assert config.all_refs is True
        assert config.verbosity == "normal"

    def test_negative_max_commits_rejected(self):
        with pytest.raises(ValueError, match="git_max_commits"):
            PulseConfig(git_max_commits=-1)

    def test_bad_port_rejected(self):
        with pytest.raises(ValueError, match="server_port"):
            PulseConfig(server_port=70000)

    def test_verbosity_properties(self):
        assert PulseConfig(verbosity="verbose").verbose
        assert PulseConfig(verbosity="quiet").quiet


class TestLoadConfig:
    def test_no_sources(self):
        assert load_config() == PulseConfig()

    def test_overrides(self):
        config = load_config(git_max_commits=100, verbose=True)
        assert config.git_max_commits == 100
        assert config.verbosity == "verbose"

    def test_none_overrides_ignored(self):
        assert load_config(git_max_commits=None).git_max_commits == 0

    def test_project_file(self, isolated_config):
        _, work = isolated_config
        (work / "repo-pulse.toml").write_text("git_max_commits = 25\n")
        assert load_config().git_max_commits == 25

    def test_section_table(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('[repo-pulse]\ninclude_merges = true\nserver_host = "0.0.0.0"\n')
        config = load_config(config_file=path)
        assert config.include_merges is True
        assert config.server_host == "0.0.0.0"

    def test_explicit_file_beats_project_file(self, isolated_config, tmp_path):
        _, work = isolated_config
        (work / "repo-pulse.toml").write_text("git_max_commits = 25\n")
        explicit = tmp_path / "explicit.toml"
        explicit.write_text("git_max_commits = 7\n")
        assert load_config(config_file=explicit).git_max_commits == 7

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(RepoPulseError, match="Config file not found"):
            load_config(config_file=tmp_path / "nope.toml")

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("git_max_commits = = 3\n")
        with pytest.raises(RepoPulseError, match="Invalid config file"):
            load_config(config_file=path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "unknown.toml"
        path.write_text("colour = 'blue'\n")
        with pytest.raises(RepoPulseError, match="Invalid configuration"):
            load_config(config_file=path)

    def test_invalid_value(self):
        with pytest.raises(InvalidConfigError):
            load_config(git_timeout_seconds=0)

    def test_env_vars(self, monkeypatch):
        monkeypatch.setenv("REPO_PULSE_GIT_MAX_COMMITS", "42")
        monkeypatch.setenv("REPO_PULSE_INCLUDE_MERGES", "yes")
        monkeypatch.setenv("REPO_PULSE_VERBOSITY", "quiet")
        config = load_config()
        assert config.git_max_commits == 42
        assert config.include_merges is True
        assert config.verbosity == "quiet"

    def test_env_beats_file_and_overrides_beat_env(self, isolated_config, monkeypatch):
        _, work = isolated_config
        (work / "repo-pulse.toml").write_text("git_max_commits = 25\n")
        monkeypatch.setenv("REPO_PULSE_GIT_MAX_COMMITS", "42")
        assert load_config().git_max_commits == 42
        assert load_config(git_max_commits=3).git_max_commits == 3

    def test_bad_env_value(self, monkeypatch):
        monkeypatch.setenv("REPO_PULSE_ALL_REFS", "maybe")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config()
        assert exc_info.value.key == "REPO_PULSE_ALL_REFS"
