"""
Flight condition value object.

All values are stored as numpy float64 so that degenerate inputs
(zero velocity, zero reference area) propagate inf/NaN through the
coefficient formulas instead of raising ZeroDivisionError.
"""
from dataclasses import dataclass, fields
import numpy as np

from airframe import Configuration


# Kinematic viscosity of sea-level standard air (m^2/s)
SEA_LEVEL_KINEMATIC_VISCOSITY = 1.5e-5

# Floor for the Prandtl-Glauert factor near Mach 1
_BETA_MIN = 0.25


@dataclass(frozen=True)
class FlightConditions:
    """
    Immutable flight state for one aerodynamic evaluation.

    Attributes:
        mach: Free-stream Mach number
        velocity: Air-relative speed (m/s)
        reference_area: Reference area for coefficients (m^2)
        reference_length: Reference length for moment coefficients (m)
        aoa: Angle of attack (rad)
        pitch_rate: Pitch rate (rad/s)
        yaw_rate: Yaw rate (rad/s)
        roll_rate: Roll rate (rad/s)
        kinematic_viscosity: Atmospheric kinematic viscosity (m^2/s)
    """

    mach: float
    velocity: float
    reference_area: float
    reference_length: float
    aoa: float = 0.0
    pitch_rate: float = 0.0
    yaw_rate: float = 0.0
    roll_rate: float = 0.0
    kinematic_viscosity: float = SEA_LEVEL_KINEMATIC_VISCOSITY

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(self, f.name, np.float64(getattr(self, f.name)))

    @classmethod
    def for_configuration(cls, configuration: Configuration, mach: float,
                          velocity: float, **kwargs) -> "FlightConditions":
        """Conditions using the configuration's maximum body diameter as reference"""
        return cls(
            mach=mach,
            velocity=velocity,
            reference_area=configuration.reference_area,
            reference_length=configuration.reference_length,
            **kwargs,
        )

    @property
    def sin_aoa(self) -> float:
        return np.sin(self.aoa)

    @property
    def sinc_aoa(self) -> float:
        """sin(aoa)/aoa, continuous at zero"""
        if abs(self.aoa) < 1e-4:
            return 1.0 - self.aoa**2 / 6
        return np.sin(self.aoa) / self.aoa

    @property
    def beta(self) -> float:
        """Compressibility factor sqrt(|M^2 - 1|), floored near Mach 1"""
        return max(np.sqrt(abs(self.mach**2 - 1)), _BETA_MIN)

    @property
    def is_degenerate(self) -> bool:
        """True when a coefficient normalization would divide by zero"""
        return (
            self.velocity == 0
            or self.reference_area == 0
            or self.reference_length == 0
        )
