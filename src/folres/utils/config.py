import os
import copy
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from folres.core.exceptions import UnknownHeuristicError
from folres.selectors.registry import DEFAULT_HEURISTIC, get_heuristic


DEFAULT_CONFIG: Dict[str, Any] = {
    'resolver': {
        'heuristic': DEFAULT_HEURISTIC,
        'strategy': 'equiv',
        'max_steps': 10000,
        'prefer_counterproof': False,
    },
    'logging': {
        'level': 'WARNING',
    },
}

STRATEGIES = ('equiv', 'tseitin')


class Config:
    def __init__(self, config_path: Optional[str] = None):
        load_dotenv()
        self.config_path = config_path or self._find_config_file()
        self.config = self._load_config()
        self._resolve_environment_variables()

    def _find_config_file(self) -> Optional[str]:
        """Find the default config file, if there is one."""
        possible_paths = [
            Path(os.environ['FOLRES_CONFIG']) if os.environ.get('FOLRES_CONFIG') else None,
            Path.cwd() / "configs" / "default.yaml",
            Path.home() / ".folres" / "config.yaml",
        ]

        for path in possible_paths:
            if path is not None and path.exists():
                return str(path)

        return None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file on top of the defaults."""
        config = copy.deepcopy(DEFAULT_CONFIG)
        if self.config_path is None:
            return config
        with open(self.config_path, 'r') as f:
            loaded = yaml.safe_load(f) or {}
        return _deep_update(config, loaded)

    def _resolve_environment_variables(self):
        """Resolve ${VAR:default} references in config values."""
        def resolve_value(value):
            if isinstance(value, str) and value.startswith("${") and value.endswith("}"):
                var_default = value[2:-1].split(":", 1)
                var_name = var_default[0]
                default_value = var_default[1] if len(var_default) > 1 else ""
                raw = os.environ.get(var_name, default_value)
                # Parse "500" or "true" into the matching YAML scalar.
                return yaml.safe_load(raw) if raw else raw
            elif isinstance(value, dict):
                return {k: resolve_value(v) for k, v in value.items()}
            elif isinstance(value, list):
                return [resolve_value(v) for v in value]
            return value

        self.config = resolve_value(self.config)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-separated key."""
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def __getitem__(self, key: str) -> Any:
        """Allow dictionary-style access."""
        return self.get(key)

    def update(self, updates: Dict[str, Any]):
        """Update configuration with new values."""
        self.config = _deep_update(self.config, updates)


def _deep_update(d, u):
    for k, v in u.items():
        if isinstance(v, dict):
            d[k] = _deep_update(d.get(k, {}) if isinstance(d.get(k), dict) else {}, v)
        else:
            d[k] = v
    return d


@dataclass
class ResolverConfig:
    """Settings for one proof attempt."""
    heuristic: str = DEFAULT_HEURISTIC
    strategy: str = 'equiv'
    max_steps: int = 10000
    prefer_counterproof: bool = False

    def __post_init__(self):
        if self.strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy: {self.strategy} (expected one of {', '.join(STRATEGIES)})")
        if self.max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {self.max_steps}")
        try:
            get_heuristic(self.heuristic)
        except UnknownHeuristicError as e:
            raise ValueError(str(e)) from e

    @classmethod
    def from_config(cls, config: Config) -> 'ResolverConfig':
        section = config.get('resolver', {}) or {}
        return cls(
            heuristic=str(section.get('heuristic', DEFAULT_HEURISTIC)),
            strategy=str(section.get('strategy', 'equiv')),
            max_steps=int(section.get('max_steps', 10000)),
            prefer_counterproof=bool(section.get('prefer_counterproof', False)),
        )

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> 'ResolverConfig':
        """Load resolver settings from the ``resolver`` section of a YAML file."""
        with open(yaml_path, 'r') as f:
            data = yaml.safe_load(f) or {}
        section = data.get('resolver', data)
        return cls(**{k: v for k, v in section.items() if k in cls.__dataclass_fields__})

    def to_yaml(self, yaml_path: Path):
        with open(yaml_path, 'w') as f:
            yaml.safe_dump({'resolver': asdict(self)}, f, default_flow_style=False)


# Global config instance
_config = None

def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config():
    global _config
    _config = None
