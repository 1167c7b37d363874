"""Configuration loading and management."""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, Optional, Any
import yaml


@dataclass
class ProjectConfig:
    name: str = "filekit"
    description: str = "Defensive file-system helpers"
    version: str = "0.1.0"


@dataclass
class LoggingConfig:
    level: str = "INFO"
    enabled: bool = True
    console: bool = True
    json_file: bool = False
    log_dir: str = "./logs"


@dataclass
class Config:
    """Main configuration container."""
    project: ProjectConfig = field(default_factory=ProjectConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Root path for resolving relative paths
    root_path: Path = field(default_factory=lambda: Path.cwd())

    def resolve_path(self, path: str) -> Path:
        """Resolve a relative path to absolute."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self.root_path / p

    @property
    def logs_path(self) -> Path:
        return self.resolve_path(self.logging.log_dir)


def _dict_to_dataclass(cls, data: Optional[Dict[str, Any]]):
    """Recursively convert a dictionary to a dataclass instance."""
    if data is None:
        return cls()

    field_types = {f.name: f.type for f in cls.__dataclass_fields__.values()}
    kwargs = {}

    for key, value in data.items():
        if key in field_types:
            field_type = field_types[key]
            # Check if it's a dataclass
            if hasattr(field_type, '__dataclass_fields__') and isinstance(value, dict):
                kwargs[key] = _dict_to_dataclass(field_type, value)
            else:
                kwargs[key] = value

    return cls(**kwargs)


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, looks for configs/filekit.yaml

    Returns:
        Config object with all settings
    """
    if config_path is None:
        # Try to find config in standard locations
        candidates = [
            Path.cwd() / "configs" / "filekit.yaml",
            Path.cwd() / "filekit.yaml",
        ]
        for candidate in candidates:
            if candidate.exists():
                config_path = str(candidate)
                break
        else:
            # Return default config
            return Config()

    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    # Relative paths resolve against the directory holding configs/
    root = config_file.parent
    if root.name == "configs":
        root = root.parent
    config = Config(root_path=root)

    if 'project' in data:
        config.project = _dict_to_dataclass(ProjectConfig, data['project'])
    if 'logging' in data:
        config.logging = _dict_to_dataclass(LoggingConfig, data['logging'])

    return config
