from dataclasses import dataclass
from typing import Dict, Optional

import yaml


KEEP_TYPES = ("way", "relation")


class ConfigError(ValueError):
    pass


@dataclass
class CleanOptions:
    require_name: bool = False
    min_name_len: int = 0
    # Always on from the command line; only library callers may switch it off.
    dedupe: bool = True
    keep_type: Optional[str] = None
    max_extent_km: float = 50.0

    def __post_init__(self):
        self.min_name_len = max(0, int(self.min_name_len))
        if self.keep_type is not None and self.keep_type not in KEEP_TYPES:
            raise ConfigError(f"keep_type must be one of {KEEP_TYPES} or null, got {self.keep_type!r}")


def load_config(path: str) -> Dict:
    """
    Load option defaults from a YAML file, e.g.:

        require_name: true
        min_name_len: 3
        keep_type: way
        max_extent_km: 25
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            cfg = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(cfg, dict):
        raise ConfigError(f"Config {path} must be a mapping")
    unknown = sorted(set(cfg) - {'require_name', 'min_name_len', 'keep_type', 'max_extent_km'})
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")
    return cfg


def build_options(cfg: Dict, require_name: Optional[bool] = None, min_name_len: Optional[int] = None,
                  keep_type: Optional[str] = None) -> CleanOptions:
    """Merge config file values with command-line overrides (None means not given)."""
    merged = dict(cfg)
    if require_name is not None:
        merged['require_name'] = require_name
    if min_name_len is not None:
        merged['min_name_len'] = min_name_len
    if keep_type is not None:
        merged['keep_type'] = keep_type
    require = merged.get('require_name', False)
    if not isinstance(require, bool):
        raise ConfigError(f"require_name must be true or false, got {require!r}")
    try:
        return CleanOptions(
            require_name=require,
            min_name_len=merged.get('min_name_len') or 0,
            keep_type=merged.get('keep_type'),
            max_extent_km=float(merged.get('max_extent_km', 50.0)),
        )
    except ConfigError:
        raise
    except (TypeError, ValueError) as e:
        raise ConfigError(str(e)) from e
