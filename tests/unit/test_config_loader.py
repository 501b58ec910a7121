"""Unit tests for configuration loading"""

from pathlib import Path

import pytest
import yaml

from pixel_astar.utils.config_loader import ConfigManager, SystemConfig, load_config, validate_config

REPO_CONFIG = Path(__file__).resolve().parents[2] / "config" / "main_config.yaml"


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "main_config.yaml"
    path.write_text(yaml.safe_dump({
        'planning': {'heuristic_type': 'euclidean', 'allow_diagonal': True},
        'imaging': {'output_file': 'out.png'},
    }))
    return path


class TestConfigLoading:

    def test_repository_config_is_valid(self):
        config = load_config(str(REPO_CONFIG))

        assert config.planning['heuristic_type'] == 'node'
        assert config.imaging['walkable_color'] == [255, 255, 255]
        assert validate_config(config) == {}

    def test_load_yaml(self, config_file):
        config = load_config(str(config_file))

        assert isinstance(config, SystemConfig)
        assert config.planning['heuristic_type'] == 'euclidean'
        assert config.imaging['output_file'] == 'out.png'
        assert config.evaluation == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "config.ini"
        path.write_text("[planning]\n")
        with pytest.raises(ValueError):
            load_config(str(path))

    def test_missing_named_config_uses_defaults(self, tmp_path):
        config = ConfigManager(str(tmp_path)).load_config('main')
        assert config == SystemConfig()

    def test_named_config_is_cached(self, tmp_path, config_file):
        manager = ConfigManager(str(tmp_path))
        assert manager.load_config('main') is manager.load_config('main')

    def test_env_overrides(self, config_file, monkeypatch):
        monkeypatch.setenv("PIXEL_ASTAR_PLANNING_HEURISTIC_TYPE", "octile")
        monkeypatch.setenv("PIXEL_ASTAR_PLANNING_ALLOW_DIAGONAL", "false")
        monkeypatch.setenv("PIXEL_ASTAR_IMAGING_PATH_COLOR", "[0, 0, 255]")
        monkeypatch.setenv("PIXEL_ASTAR_EVALUATION_OBSTACLE_DENSITY", "0.35")

        config = load_config(str(config_file))

        assert config.planning['heuristic_type'] == 'octile'
        assert config.planning['allow_diagonal'] is False
        assert config.imaging['path_color'] == [0, 0, 255]
        assert config.imaging['output_file'] == 'out.png'
        assert config.evaluation['obstacle_density'] == 0.35

    def test_unknown_sections_ignored(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"planning": {"weight": 1.5}, "rl": {"ppo": {}}}')

        config = load_config(str(path))

        assert config.planning == {'weight': 1.5}
        assert not hasattr(config, 'rl')

    def test_save_round_trip(self, tmp_path, config_file):
        manager = ConfigManager(str(tmp_path))
        config = manager.load_file(config_file)

        saved = tmp_path / "saved" / "copy.yaml"
        manager.save_config(config, str(saved))

        assert manager.load_file(saved) == config


class TestValidateConfig:

    def test_reports_problems(self):
        config = SystemConfig(
            planning={'heuristic_type': 'teleport'},
            imaging={'path_color': [300, 0, 0]},
            evaluation={'obstacle_density': 1.5, 'grid_size': 1},
        )

        errors = validate_config(config)

        assert set(errors) == {'planning', 'imaging', 'evaluation'}
        assert len(errors['evaluation']) == 2

    def test_empty_config_is_valid(self):
        assert validate_config(SystemConfig()) == {}
