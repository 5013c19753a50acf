"""
Engine configuration.

Configuration can be built in code, read from YAML/JSON files or taken
from environment variables.
"""

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Mapping, Optional

import yaml

_TRUTHY = {"1", "true", "yes", "on"}

ENV_VARS = {
    "validate_move_color": "BLOKUS_VALIDATE_MOVE_COLOR",
    "validate_set_moves": "BLOKUS_VALIDATE_SET_MOVES",
    "drop_finished_colors": "BLOKUS_DROP_FINISHED_COLORS",
    "movegen_debug": "BLOKUS_MOVEGEN_DEBUG",
}


def _file_format(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return "yaml"
    if suffix == ".json":
        return "json"
    raise ValueError(f"Unsupported config file format: {path.suffix}")


@dataclass
class EngineConfig:
    """
    Structured engine configuration.

    Attributes:
        validate_move_color: Reject moves whose color is not the active color
        validate_set_moves: Re-check set moves against the rules before committing
        drop_finished_colors: Remove a color from the turn queue once it has placed
            all of its shapes. When False the color stays in rotation and can only skip.
        movegen_debug: Log move generation timings at INFO level
    """

    validate_move_color: bool = True
    validate_set_moves: bool = True
    drop_finished_colors: bool = False
    movegen_debug: bool = False

    @classmethod
    def from_dict(cls, config_dict: Mapping) -> "EngineConfig":
        """Create config from a dictionary, ignoring unknown keys."""
        valid_keys = {f.name for f in fields(cls)}
        filtered_dict = {k: v for k, v in (config_dict or {}).items() if k in valid_keys}
        return cls(**filtered_dict)

    @classmethod
    def from_file(cls, config_path: Path) -> "EngineConfig":
        """
        Load config from a YAML or JSON file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the suffix is neither YAML nor JSON
        """
        path = Path(config_path)
        if not path.is_file():
            raise FileNotFoundError(f"Engine config not found: {path}")

        file_format = _file_format(path)
        text = path.read_text(encoding="utf-8")
        loaded = yaml.safe_load(text) if file_format == "yaml" else json.loads(text)
        return cls.from_dict(loaded)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        """Build config from BLOKUS_* environment variables, defaults elsewhere."""
        environ = os.environ if environ is None else environ
        config_dict = {}
        for name, var in ENV_VARS.items():
            raw = environ.get(var)
            if raw is not None and raw != "":
                config_dict[name] = raw.strip().lower() in _TRUTHY
        return cls.from_dict(config_dict)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def save_to_file(self, config_path: Path):
        """Write the config as YAML or JSON, chosen by the file suffix."""
        path = Path(config_path)
        if _file_format(path) == "yaml":
            text = yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=False)
        else:
            text = json.dumps(self.to_dict(), indent=2) + "\n"
        path.write_text(text, encoding="utf-8")

    def log_config(self, logger: logging.Logger):
        """Log the effective configuration."""
        logger.info("Engine Configuration")
        logger.info(f"Validate Move Color: {self.validate_move_color}")
        logger.info(f"Validate Set Moves: {self.validate_set_moves}")
        logger.info(f"Drop Finished Colors: {self.drop_finished_colors}")
        logger.info(f"Move Generation Debug: {self.movegen_debug}")
