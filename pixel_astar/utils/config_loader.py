import os
import yaml
import json
import logging
import copy
from typing import Dict, List, Optional, Any
from pathlib import Path
from dataclasses import dataclass, field, fields

from pixel_astar.planning.heuristics import HEURISTIC_FUNCTIONS


@dataclass
class SystemConfig:

    planning: Dict[str, Any] = field(default_factory=dict)
    imaging: Dict[str, Any] = field(default_factory=dict)
    evaluation: Dict[str, Any] = field(default_factory=dict)

    logging: Dict[str, Any] = field(default_factory=dict)
    output_paths: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, config_data: Optional[Dict[str, Any]]) -> 'SystemConfig':
        config_data = config_data or {}
        known = {f.name for f in fields(cls)}

        unknown = set(config_data) - known
        if unknown:
            logging.getLogger(__name__).warning(
                f"Ignoring unknown config sections: {sorted(unknown)}"
            )

        return cls(**{key: value or {} for key, value in config_data.items() if key in known})

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: copy.deepcopy(getattr(self, f.name)) for f in fields(self)}


class ConfigManager:

    def __init__(self, config_dir: str = "config"):
        self.config_dir = Path(config_dir)
        self.logger = logging.getLogger(__name__)

        self._config_cache: Dict[str, SystemConfig] = {}

        self.default_configs = {
            'main': self.config_dir / 'main_config.yaml',
        }

        self.env_prefix = 'PIXEL_ASTAR_'

        self.logger.debug(f"Config Manager initialized: {config_dir}")

    def load_config(self, config_name: str = 'main') -> SystemConfig:

        if config_name in self._config_cache:
            return self._config_cache[config_name]

        config_path = self.default_configs.get(config_name, self.config_dir / f"{config_name}_config.yaml")

        if not config_path.exists():
            self.logger.warning(f"Config file not found: {config_path}, using defaults")
            config_data = {}
        else:
            config_data = self._load_config_file(config_path)

        system_config = self._finalize(config_data)

        self._config_cache[config_name] = system_config

        self.logger.info(f"Configuration loaded: {config_name}")
        return system_config

    def load_file(self, config_path: Path) -> SystemConfig:
        return self._finalize(self._load_config_file(Path(config_path)))

    def _finalize(self, config_data: Dict[str, Any]) -> SystemConfig:
        config_data = self._apply_env_overrides(config_data)
        return SystemConfig.from_dict(config_data)

    def _load_config_file(self, config_path: Path) -> Dict[str, Any]:

        suffix = config_path.suffix.lower()
        if suffix not in ['.yaml', '.yml', '.json']:
            raise ValueError(f"Unsupported config format: {config_path.suffix}")

        with open(config_path, 'r') as f:
            if suffix == '.json':
                data = json.load(f)
            else:
                data = yaml.safe_load(f)

        return data or {}

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:

        overrides = {}

        for key, value in os.environ.items():
            if key.startswith(self.env_prefix):
                config_key = key[len(self.env_prefix):].lower()
                section, _, option = config_key.partition('_')
                if not option:
                    continue

                parsed_value = self._parse_env_value(value)

                self._set_nested_value(overrides, [section, option], parsed_value)

        if overrides:
            config_data = self._merge_configs(config_data, overrides)
            self.logger.info(f"Applied environment overrides to {sorted(overrides)}")

        return config_data

    def _parse_env_value(self, value: str) -> Any:

        if value.lower() in ['true', 'false']:
            return value.lower() == 'true'

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        try:
            return json.loads(value)
        except (json.JSONDecodeError, ValueError):
            pass

        return value

    def _set_nested_value(self, config: Dict[str, Any], path: List[str], value: Any):

        current = config
        for key in path[:-1]:
            if key not in current:
                current[key] = {}
            current = current[key]

        current[path[-1]] = value

    def _merge_configs(self, base_config: Dict[str, Any], override_config: Dict[str, Any]) -> Dict[str, Any]:

        result = copy.deepcopy(base_config)

        for key, value in override_config.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def save_config(self, config: SystemConfig, output_path: str):

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w') as f:
            if output_path.suffix.lower() in ['.yaml', '.yml']:
                yaml.dump(config.to_dict(), f, default_flow_style=False, indent=2)
            else:
                json.dump(config.to_dict(), f, indent=2)

        self.logger.info(f"Configuration saved to {output_path}")


def load_config(config_path: Optional[str] = None) -> SystemConfig:

    manager = ConfigManager()

    if config_path:
        custom_path = Path(config_path)
        if not custom_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return manager.load_file(custom_path)

    return manager.load_config('main')


def _is_color(value: Any) -> bool:
    return (isinstance(value, (list, tuple)) and len(value) == 3
            and all(isinstance(c, int) and 0 <= c <= 255 for c in value))


def validate_config(config: SystemConfig) -> Dict[str, List[str]]:

    errors = {}

    planning_errors = []
    heuristic_type = config.planning.get('heuristic_type', 'node')
    if heuristic_type not in HEURISTIC_FUNCTIONS:
        planning_errors.append(
            f"Unknown heuristic '{heuristic_type}', expected one of {sorted(HEURISTIC_FUNCTIONS)}"
        )
    if config.planning.get('weight', 1.0) < 0:
        planning_errors.append("Heuristic weight must be non-negative")

    if planning_errors:
        errors['planning'] = planning_errors

    imaging_errors = []
    for key in ['walkable_color', 'path_color']:
        if key in config.imaging and not _is_color(config.imaging[key]):
            imaging_errors.append(f"{key} must be three integers in [0, 255]")

    if imaging_errors:
        errors['imaging'] = imaging_errors

    evaluation_errors = []
    density = config.evaluation.get('obstacle_density', 0.2)
    if not 0.0 <= density < 1.0:
        evaluation_errors.append("Obstacle density must be in [0, 1)")
    grid_size = config.evaluation.get('grid_size', 64)
    if not isinstance(grid_size, int) or grid_size < 2:
        evaluation_errors.append("Grid size must be an integer >= 2")

    if evaluation_errors:
        errors['evaluation'] = evaluation_errors

    return errors
