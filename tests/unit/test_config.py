"""Tests for configuration classes."""

import json
from pathlib import Path

import pytest

from word_drill.config import ConfigManager, DrillConfig, create_default_config


class TestDrillConfig:
    """Tests for DrillConfig."""

    def test_defaults(self):
        config = DrillConfig()
        assert config.words_per_page == 70
        assert config.history_limit == 50
        assert config.max_miss_count == 4
        assert config.mastery_threshold == 10
        assert config.known_reinsert_offset == 5
        assert config.missed_reinsert_offset == 2
        assert config.clean_set_miss_limit == 3
        assert config.hq_sets_to_advance == 3
        assert config.storage_backend == "json"
        assert config.catalog_key == "word-catalog"
        assert config.state_key == "learning-state"

    def test_is_frozen(self):
        config = DrillConfig()
        with pytest.raises(AttributeError):
            config.words_per_page = 10

    def test_string_data_dir_converted(self):
        assert DrillConfig(data_dir="/tmp/drill").data_dir == Path("/tmp/drill")

    def test_rejects_non_positive_page_size(self):
        with pytest.raises(ValueError, match="words_per_page"):
            DrillConfig(words_per_page=0)

    def test_create_default_config_overrides(self):
        config = create_default_config(words_per_page=50, history_limit=10)
        assert config.words_per_page == 50
        assert config.history_limit == 10


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_missing_file_gives_defaults(self, tmp_path):
        manager = ConfigManager(tmp_path / "config.json")
        assert manager.config_exists() is False
        assert manager.load_config() == DrillConfig()

    def test_save_and_load(self, tmp_path):
        manager = ConfigManager(tmp_path / "sub" / "config.json")
        config = DrillConfig(words_per_page=20, data_dir=tmp_path / "data")
        manager.save_config(config)

        saved = json.loads((tmp_path / "sub" / "config.json").read_text(encoding="utf-8"))
        assert saved["data_dir"] == str(tmp_path / "data")
        assert manager.load_config() == config

    def test_overrides_win_over_file(self, tmp_path):
        manager = ConfigManager(tmp_path / "config.json")
        manager.save_config(DrillConfig(words_per_page=20))
        assert manager.load_config(data_dir=tmp_path).data_dir == tmp_path
        assert manager.load_config(data_dir=tmp_path).words_per_page == 20

    def test_invalid_json_falls_back(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{broken", encoding="utf-8")
        assert ConfigManager(path).load_config() == DrillConfig()

    def test_unknown_key_falls_back(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"colour": "blue"}), encoding="utf-8")
        assert ConfigManager(path).load_config(words_per_page=5).words_per_page == 5

    def test_delete(self, tmp_path):
        manager = ConfigManager(tmp_path / "config.json")
        manager.save_config(DrillConfig())
        manager.delete_config()
        assert manager.config_exists() is False
