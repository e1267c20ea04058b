"""
Aerodynamic calculator configuration.

The defaults are the empirical constants of the extended Barrowman
model; change them only for sensitivity studies, since reference
outputs depend on them.

Usage:
    from aerodynamics.config import AerodynamicsConfig, load_config

    config = load_config("configs/aero.yaml")
    config = AerodynamicsConfig(large_aoa_threshold=15.0)
"""

import yaml
from dataclasses import dataclass, asdict, fields
from typing import Dict, Any
from pathlib import Path


# Angle of attack above which a large-AOA warning is raised (deg)
LARGE_AOA_THRESHOLD_DEG = 17.5

# Axial gap between body components treated as a discontinuity (m)
DISCONTINUITY_TOLERANCE = 0.0001

# Ad-hoc pitch/yaw damping amplification; higher damping yields a much
# more realistic apogee turn
DAMPING_AMPLIFICATION = 3.0


@dataclass
class AerodynamicsConfig:
    """Tunable constants of the aerodynamic calculator"""

    large_aoa_threshold: float = LARGE_AOA_THRESHOLD_DEG  # degrees
    discontinuity_tolerance: float = DISCONTINUITY_TOLERANCE  # m
    damping_amplification: float = DAMPING_AMPLIFICATION

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AerodynamicsConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(
                f"Unknown aerodynamics config keys: {sorted(unknown)}. "
                f"Options: {sorted(known)}"
            )
        return cls(**{k: float(v) for k, v in data.items()})

    def save(self, path: str):
        """Save configuration to YAML file"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.dump({"aerodynamics": self.to_dict()}, f,
                      default_flow_style=False, sort_keys=False)


def load_config(path: str) -> AerodynamicsConfig:
    """
    Load aerodynamics configuration from a YAML file.

    The values may sit at the top level or under an ``aerodynamics`` key.
    """
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    if "aerodynamics" in data:
        data = data["aerodynamics"] or {}
    return AerodynamicsConfig.from_dict(data)
