# tests/test_config.py
"""
Tests for timing configuration and presets.
"""

import threading

import pytest

from uiauto_electron.config import TimeConfig, TimeoutSettings, available_presets, configure_for_ci
from uiauto_electron.exceptions import ConfigError


@pytest.fixture
def clean_config():
    """Run without the suite-wide fast overrides."""
    TimeConfig._local.override = None
    yield
    TimeConfig.reset_to_defaults()


class TestPresets:
    """Tests for preset construction."""

    def test_default_values(self, clean_config):
        config = TimeConfig.current()
        assert config.menu_open.timeout == 5.0
        assert config.menu_settle.timeout == 1.0
        assert config.after_select_pause == 0.5
        assert config.scroll_page_pause == 0.1

    def test_known_presets(self):
        assert set(available_presets()) == {"default", "fast", "slow", "ci"}

    def test_unknown_preset(self):
        with pytest.raises(ValueError):
            TimeConfig("turbo")

    def test_ci_preset_is_run_scoped(self, clean_config):
        configure_for_ci()
        assert TimeConfig.current().exists_wait.timeout == 15.0
        TimeConfig.clear_run_config()
        assert TimeConfig.current().exists_wait.timeout == 5.0

    def test_build_from_overrides(self):
        config = TimeConfig.build_from(preset="slow", overrides={"menu_settle": 4, "after_select_pause": 0})
        assert config.menu_settle == TimeoutSettings(timeout=4.0, interval=0.2)
        assert config.after_select_pause == 0.0
        assert config.settings("menu_open").timeout == 10.0


class TestOverride:
    """Tests for temporary overrides."""

    def test_override_restores_previous(self, clean_config):
        with TimeConfig.override(submenu_probe={"interval": 0.5}) as config:
            assert TimeConfig.current() is config
            assert config.submenu_probe == TimeoutSettings(timeout=2.0, interval=0.5)
        assert TimeConfig.current().submenu_probe.interval == 0.1

    def test_override_beats_run_config(self, clean_config):
        TimeConfig.apply_overrides({"list_prime": 9})
        with TimeConfig.override(list_prime=1):
            assert TimeConfig.current().list_prime.timeout == 1.0
        assert TimeConfig.current().list_prime.timeout == 9.0

    def test_override_is_thread_local(self, clean_config):
        seen = {}
        with TimeConfig.override(after_expand_pause=3):
            worker = threading.Thread(
                target=lambda: seen.setdefault("pause", TimeConfig.current().after_expand_pause)
            )
            worker.start()
            worker.join()
        assert seen["pause"] == 0.2

    @pytest.mark.parametrize("overrides", [{"no_such_wait": 1}, {"menu_open": "long"}])
    def test_invalid_overrides(self, overrides):
        with pytest.raises(ValueError):
            with TimeConfig.override(**overrides):
                pass

    def test_round_trip_dict(self):
        config = TimeConfig("fast")
        assert TimeConfig.build_from(overrides=config.to_dict()).to_dict() == config.to_dict()


class TestFromYaml:
    """Tests for loading timings from a file."""

    def test_preset_and_overrides(self, tmp_path):
        path = tmp_path / "timings.yaml"
        path.write_text(
            "preset: ci\n"
            "overrides:\n"
            "  menu_settle: {timeout: 2.5}\n"
            "  after_select_pause: 0.7\n",
            encoding="utf-8",
        )
        config = TimeConfig.from_yaml(str(path))
        assert config.menu_settle == TimeoutSettings(timeout=2.5, interval=0.3)
        assert config.after_select_pause == 0.7
        assert config.exists_wait.timeout == 15.0

    def test_empty_file_is_default(self, tmp_path):
        path = tmp_path / "timings.yaml"
        path.write_text("", encoding="utf-8")
        assert TimeConfig.from_yaml(str(path)).to_dict() == TimeConfig().to_dict()

    @pytest.mark.parametrize("content", [
        "- not\n- a mapping\n",
        "preset: turbo\n",
        "overrides:\n  no_such_wait: 1\n",
    ])
    def test_invalid_files(self, tmp_path, content):
        path = tmp_path / "timings.yaml"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigError):
            TimeConfig.from_yaml(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read"):
            TimeConfig.from_yaml(str(tmp_path / "absent.yaml"))
