"""
Non-axial force aggregation.

Walks the active configuration front to back, asks each aerodynamic
component's calculator for its normal-force contribution, moves the CP
into the rocket frame and sums the coefficients. Body diameter steps and
gaps between consecutive symmetric components raise a discontinuity
warning.
"""
from typing import Dict, Optional
import math

from airframe import Component, Configuration, SymmetricComponent, fuzzy_equals, Coordinate

from .conditions import FlightConditions
from .config import AerodynamicsConfig
from .forces import AerodynamicForces
from .registry import CalculatorRegistry
from .warning_set import AeroWarning, WarningSet


def calculate_nonaxial_forces(
    configuration: Configuration,
    registry: CalculatorRegistry,
    conditions: FlightConditions,
    warnings: WarningSet,
    forces_map: Optional[Dict[Component, AerodynamicForces]] = None,
    config: Optional[AerodynamicsConfig] = None,
) -> AerodynamicForces:
    """
    Sum the normal-force coefficients of the active components.

    Args:
        configuration: Active-stage configuration
        registry: Calculator registry of the airframe
        conditions: Flight conditions
        warnings: Warning sink
        forces_map: Optional per-component records to fill with each
            component's CP and coefficients
        config: Calculator constants (defaults if None)

    Returns:
        Aggregate record with the combined CP and summed coefficients
    """
    config = config or AerodynamicsConfig()

    total = AerodynamicForces().zero()

    if conditions.aoa > math.radians(config.large_aoa_threshold):
        warnings.add(AeroWarning.large_aoa(conditions.aoa))

    radius = 0.0  # aft radius of the previous symmetric component
    aft_x = 0.0  # aft position of the previous symmetric component
    forces = AerodynamicForces()
    seen = False  # running CP starts at the first component

    for comp in configuration:
        if not comp.is_aerodynamic:
            continue

        if isinstance(comp, SymmetricComponent):
            x = comp.to_absolute(Coordinate.NUL).x
            if x > aft_x + config.discontinuity_tolerance:
                if not fuzzy_equals(radius, 0.0):
                    warnings.add(AeroWarning.discontinuity())
                    radius = 0.0
            aft_x = comp.to_absolute(Coordinate(comp.length)).x

            # Radius step is reported but not corrected for
            if not fuzzy_equals(comp.fore_radius, radius):
                warnings.add(AeroWarning.discontinuity())
            radius = comp.aft_radius

        forces.zero()
        registry.resolve(comp).calculate_nonaxial_forces(conditions, forces, warnings)
        forces.cp = comp.to_absolute(forces.cp)
        forces.cm = forces.cn * forces.cp.x / conditions.reference_length

        if forces_map is not None:
            forces_map[comp].copy_nonaxial_from(forces)

        # Plain running midpoint, not weighted by CN_alpha
        total.cp = total.cp.midpoint(forces.cp) if seen else forces.cp
        seen = True
        total.cn_alpha += forces.cn_alpha
        total.cn += forces.cn
        total.cm += forces.cm
        total.c_side += forces.c_side
        total.c_yaw += forces.c_yaw
        total.c_roll += forces.c_roll
        total.c_roll_damp += forces.c_roll_damp
        total.c_roll_force += forces.c_roll_force

    return total
