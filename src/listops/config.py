from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict

import yaml


DISJUNCTION_STRATEGIES = ("compose", "single_pass")
COMBINATION_STRATEGIES = ("recursive", "bitmask")
WINDOW_FUNCTIONS = ("mean", "sum", "min", "max", "median", "std")


@dataclass(frozen=True)
class OpsConfig:
    """Run-time switches for the list operations.

    The defaults reproduce the reference behaviour: no input validation,
    disjunction computed by composing union and difference, combinations
    enumerated by recursion.
    """

    validate_inputs: bool = False
    disjunction_strategy: str = "compose"
    combination_strategy: str = "recursive"

    # Window exercises
    window_fn: str = "mean"

    # Comparison of float results
    float_tol: float = 1e-9

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def replace(self, **changes: Any) -> "OpsConfig":
        return replace(self, **changes)

    def validate(self) -> None:
        if not isinstance(self.validate_inputs, bool):
            raise ValueError(f"validate_inputs must be a bool, got {self.validate_inputs!r}")
        for name in ("disjunction_strategy", "combination_strategy", "window_fn"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a str, got {getattr(self, name)!r}")
        if isinstance(self.float_tol, bool) or not isinstance(self.float_tol, (int, float)):
            raise ValueError(f"float_tol must be a number, got {self.float_tol!r}")
        if self.disjunction_strategy not in DISJUNCTION_STRATEGIES:
            raise ValueError(f"disjunction_strategy must be one of {list(DISJUNCTION_STRATEGIES)}")
        if self.combination_strategy not in COMBINATION_STRATEGIES:
            raise ValueError(f"combination_strategy must be one of {list(COMBINATION_STRATEGIES)}")
        if self.window_fn not in WINDOW_FUNCTIONS:
            raise ValueError(f"window_fn must be one of {list(WINDOW_FUNCTIONS)}")
        if not (self.float_tol > 0):
            raise ValueError("float_tol must be positive")


def config_from_dict(d: Dict[str, Any]) -> OpsConfig:
    known = {f.name for f in fields(OpsConfig)}
    unknown = sorted(set(d) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")
    d = dict(d)
    # YAML 1.1 reads exponents without a dot (1e-9) as strings
    if isinstance(d.get("float_tol"), str):
        try:
            d["float_tol"] = float(d["float_tol"])
        except ValueError:
            raise ValueError(f"float_tol must be a number, got {d['float_tol']!r}") from None
    cfg = OpsConfig(**d)
    cfg.validate()
    return cfg


def load_config(path: str | Path) -> OpsConfig:
    p = Path(path)
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {p}")
    return config_from_dict(data)


def resolve_config(config: OpsConfig | None) -> OpsConfig:
    if config is None:
        return OpsConfig()
    config.validate()
    return config
