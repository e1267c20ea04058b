"""
Aerodynamic force and moment coefficients.

An AerodynamicForces record holds either one component's contribution
or the whole-vehicle aggregate. Every numeric field starts as NaN,
meaning "not computed"; ``zero()`` resets the record for summation.
"""
from dataclasses import dataclass, fields
from typing import Any, Optional
import math

from airframe import Coordinate


NOT_COMPUTED = math.nan


@dataclass(eq=False)
class AerodynamicForces:
    """
    Force record for a component or the whole rocket.

    Attributes:
        component: Component (or airframe, for the aggregate) this describes
        cp: Center of pressure, weighted by CN_alpha
        cn_alpha: Normal force coefficient derivative (1/rad)
        cn: Normal force coefficient
        cm: Pitching moment coefficient about the nose tip
        c_side: Side force coefficient
        c_yaw: Yawing moment coefficient
        c_roll: Total rolling moment coefficient
        c_roll_damp: Roll damping moment coefficient
        c_roll_force: Roll forcing moment coefficient
        friction_cd: Skin friction drag coefficient
        pressure_cd: Pressure drag coefficient
        base_cd: Base drag coefficient
        cd: Total drag coefficient (friction + pressure + base)
        c_axial: Body-axial drag coefficient
        cg: Center of gravity, weighted by mass
        longitudinal_inertia: Pitch/yaw moment of inertia (kg*m^2)
        rotational_inertia: Roll moment of inertia (kg*m^2)
        pitch_damping_moment: Pitch damping moment coefficient
        yaw_damping_moment: Yaw damping moment coefficient
    """

    component: Optional[Any] = None
    cp: Coordinate = Coordinate.NUL
    cn_alpha: float = NOT_COMPUTED
    cn: float = NOT_COMPUTED
    cm: float = NOT_COMPUTED
    c_side: float = NOT_COMPUTED
    c_yaw: float = NOT_COMPUTED
    c_roll: float = NOT_COMPUTED
    c_roll_damp: float = NOT_COMPUTED
    c_roll_force: float = NOT_COMPUTED
    friction_cd: float = NOT_COMPUTED
    pressure_cd: float = NOT_COMPUTED
    base_cd: float = NOT_COMPUTED
    cd: float = NOT_COMPUTED
    c_axial: float = NOT_COMPUTED
    cg: Coordinate = Coordinate.NUL
    longitudinal_inertia: float = NOT_COMPUTED
    rotational_inertia: float = NOT_COMPUTED
    pitch_damping_moment: float = NOT_COMPUTED
    yaw_damping_moment: float = NOT_COMPUTED

    def zero(self) -> "AerodynamicForces":
        """Reset every coefficient to zero (component is kept)"""
        for f in fields(self):
            if f.name == "component":
                continue
            if f.name in ("cp", "cg"):
                setattr(self, f.name, Coordinate.NUL)
            else:
                setattr(self, f.name, 0.0)
        return self

    def copy_nonaxial_from(self, other: "AerodynamicForces"):
        """Copy the CP and normal/moment coefficients of another record"""
        self.cp = other.cp
        self.cn_alpha = other.cn_alpha
        self.cn = other.cn
        self.cm = other.cm
        self.c_side = other.c_side
        self.c_yaw = other.c_yaw
        self.c_roll = other.c_roll
        self.c_roll_damp = other.c_roll_damp
        self.c_roll_force = other.c_roll_force

    def has_drag_breakdown(self) -> bool:
        """Whether any of the friction/pressure/base terms was computed"""
        return not (
            math.isnan(self.friction_cd)
            and math.isnan(self.pressure_cd)
            and math.isnan(self.base_cd)
        )
