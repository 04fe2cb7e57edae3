from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple

import yaml

from one_euro.filters.one_euro import OneEuroFilter
from one_euro.utils.errors import InvalidParameter


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, 'r') as f:
        return yaml.safe_load(f) or {}


@dataclass
class FilterConfig:
    frequency: float = 120.0      # Hz, replaced by timestamp deltas at runtime
    min_cutoff: float = 1.0       # Hz
    beta: float = 0.0
    derivate_cutoff: float = 1.0  # Hz
    strict: bool = False


@dataclass
class DemoConfig:
    duration: float = 10.0        # s
    noise: float = 0.2            # peak-to-peak of the uniform noise
    seed: Optional[int] = None


def _section(cfg: Dict[str, Any], name: str, cls):
    sec = cfg.get(name) or {}
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(sec) - known)
    if unknown:
        raise InvalidParameter(f"unknown key(s) in '{name}' section: {', '.join(unknown)}")
    return cls(**sec)


def load_filter_config(path: str) -> Tuple[FilterConfig, DemoConfig]:
    """Read the `filter:` and `demo:` sections of a yaml file."""
    cfg = load_yaml(path)
    return _section(cfg, "filter", FilterConfig), _section(cfg, "demo", DemoConfig)


def build_filter(cfg: FilterConfig) -> OneEuroFilter:
    return OneEuroFilter(
        frequency=cfg.frequency,
        min_cutoff=cfg.min_cutoff,
        beta=cfg.beta,
        derivate_cutoff=cfg.derivate_cutoff,
        strict=cfg.strict,
    )
