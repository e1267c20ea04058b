"""
Zero-lift drag: skin friction, pressure and base drag.

Skin friction uses the rocket's length Reynolds number with either a
partially laminar ("perfect finish") or a fully turbulent boundary
layer, corrected for compressibility and limited from below by the
surface roughness of each component. Pressure drag combines each
calculator's forebody drag with stagnation drag on forward-facing
diameter steps; base drag acts on backward-facing steps and the aft end.

All coefficients are referenced to ``conditions.reference_area``.

References:
    - Niskanen, S. "Development of an Open Source model rocket
      simulation software", 2009, Ch. 3.4.
"""
from typing import Dict, Optional
import numpy as np

from airframe import (
    Component,
    Configuration,
    Finish,
    SymmetricComponent,
    TrapezoidFinSet,
)

from .conditions import FlightConditions
from .forces import AerodynamicForces
from .registry import CalculatorRegistry
from .warning_set import WarningSet

# Mach range over which sub- and supersonic corrections are blended
_BLEND_LOW = 0.9
_BLEND_HIGH = 1.1


def stagnation_cd(mach: float) -> float:
    """Stagnation pressure coefficient on a forward-facing area"""
    if mach <= 1:
        pressure = 1 + mach**2 / 4 + mach**4 / 40
    else:
        pressure = 1.84 - 0.76 / mach**2 + 0.166 / mach**4 + 0.035 / mach**6
    return 0.85 * pressure


def base_cd(mach: float) -> float:
    """Base pressure coefficient on a backward-facing area"""
    if mach <= 1:
        return 0.12 + 0.13 * mach**2
    return 0.25 / mach


def _blend(mach: float, c1: float, c2: float) -> float:
    """Subsonic factor below Mach 0.9, supersonic above 1.1, linear between"""
    if mach < _BLEND_LOW:
        return c1
    if mach < _BLEND_HIGH:
        return c2 * (mach - _BLEND_LOW) / 0.2 + c1 * (_BLEND_HIGH - mach) / 0.2
    return c2


def skin_friction_coefficient(reynolds: float, mach: float, perfect_finish: bool) -> float:
    """
    Compressibility-corrected skin friction coefficient, before the
    roughness limit is applied.

    Args:
        reynolds: Reynolds number based on rocket length
        mach: Mach number
        perfect_finish: Partially laminar (True) or fully turbulent boundary layer

    Returns:
        Skin friction coefficient Cf
    """
    m2 = mach**2
    if perfect_finish:
        if reynolds < 1e4:
            cf = 1.33e-2
        elif reynolds < 5.39e5:
            # Laminar
            cf = 1.328 / np.sqrt(reynolds)
        else:
            # Transitional
            cf = 1.0 / (1.50 * np.log(reynolds) - 5.6) ** 2 - 1700 / reynolds

        # Compressibility correction fades in between Re 1e6 and 3e6
        c1 = c2 = 1.0
        if reynolds > 1e6:
            ramp = min((reynolds - 1e6) / 2e6, 1.0)
            c1 = 1 - 0.1 * m2 * ramp
            c2 = 1 + (1.0 / (1 + 0.045 * m2) ** 0.25 - 1) * ramp
    else:
        if reynolds < 1e4:
            cf = 1.48e-2
        else:
            cf = 1.0 / (1.50 * np.log(reynolds) - 5.6) ** 2
        c1 = 1 - 0.1 * m2
        c2 = 1 / (1 + 0.15 * m2) ** 0.58

    return cf * _blend(mach, c1, c2)


def roughness_correction(mach: float) -> float:
    """Compressibility correction of the roughness-limited Cf"""
    if mach < _BLEND_LOW:
        return 1 - 0.1 * mach**2
    if mach > _BLEND_HIGH:
        return 1 / (1 + 0.18 * mach**2)
    return _blend(mach, 1 - 0.1 * _BLEND_LOW**2, 1.0 / (1 + 0.18 * _BLEND_HIGH**2))


def roughness_limited_cf(finish: Finish, length: float, correction: float) -> float:
    """Skin friction coefficient of a fully rough surface"""
    return 0.032 * (finish.roughness_size / length) ** 0.2 * correction


def calculate_friction_drag(
    configuration: Configuration,
    registry: CalculatorRegistry,
    conditions: FlightConditions,
    forces_map: Optional[Dict[Component, AerodynamicForces]] = None,
) -> float:
    """
    Skin friction drag coefficient of the active configuration.

    Body wetted areas are summed and corrected with the overall body
    fineness ratio; fin friction is corrected for fin thickness.
    """
    mach = conditions.mach
    perfect = configuration.rocket.perfect_finish
    length = configuration.length

    reynolds = conditions.velocity * length / conditions.kinematic_viscosity
    cf = skin_friction_coefficient(reynolds, mach, perfect)
    correction = roughness_correction(mach)

    fin_friction = 0.0
    body_friction = 0.0
    max_r = 0.0
    body_length = 0.0
    limited: Dict[Finish, float] = {}

    for comp in configuration:
        if not isinstance(comp, (SymmetricComponent, TrapezoidFinSet)):
            continue

        if comp.finish not in limited:
            limited[comp.finish] = roughness_limited_cf(comp.finish, length, correction)
        rough_cf = limited[comp.finish]

        if perfect:
            # Roughness only limits once the layer is turbulent
            component_cf = rough_cf if reynolds > 1e6 and rough_cf > cf else cf
        else:
            component_cf = max(cf, rough_cf)

        if isinstance(comp, SymmetricComponent):
            friction = component_cf * comp.wetted_area
            body_friction += friction
            if forces_map is not None:
                # Fineness correction applied below
                forces_map[comp].friction_cd = friction / conditions.reference_area
            max_r = max(max_r, comp.fore_radius, comp.aft_radius)
            body_length += comp.length
        else:
            mac = registry.resolve(comp).mac_length
            friction = (component_cf * (1 + 2 * comp.thickness / mac)
                        * 2 * comp.num_fins * comp.fin_area)
            fin_friction += friction
            if forces_map is not None:
                forces_map[comp].friction_cd = friction / conditions.reference_area

    # Fineness ratio may be infinite without a body
    fineness = np.float64(body_length + 0.0001) / max_r
    fineness_correction = 1 + 1.0 / (2 * fineness)

    if forces_map is not None:
        for comp, forces in forces_map.items():
            if isinstance(comp, SymmetricComponent):
                forces.friction_cd *= fineness_correction

    return (fin_friction + fineness_correction * body_friction) / conditions.reference_area


def calculate_pressure_drag(
    configuration: Configuration,
    registry: CalculatorRegistry,
    conditions: FlightConditions,
    forces_map: Optional[Dict[Component, AerodynamicForces]] = None,
    warnings: Optional[WarningSet] = None,
) -> float:
    """Forebody pressure drag plus stagnation drag on forward-facing steps"""
    stagnation = stagnation_cd(conditions.mach)
    base = base_cd(conditions.mach)

    total = 0.0
    radius = 0.0
    for comp in configuration:
        if not comp.is_aerodynamic:
            continue

        cd = registry.resolve(comp).calculate_pressure_drag(conditions, stagnation, base, warnings)
        total += cd
        if forces_map is not None:
            forces_map[comp].pressure_cd = cd

        if isinstance(comp, SymmetricComponent):
            if radius < comp.fore_radius:
                area = np.pi * (comp.fore_radius**2 - radius**2)
                cd = stagnation * area / conditions.reference_area
                total += cd
                if forces_map is not None:
                    forces_map[comp].pressure_cd += cd
            radius = comp.aft_radius

    return total


def calculate_base_drag(
    configuration: Configuration,
    conditions: FlightConditions,
    forces_map: Optional[Dict[Component, AerodynamicForces]] = None,
) -> float:
    """
    Base drag of backward-facing steps and the aft end.

    Each step is attributed to the symmetric component in front of it.
    """
    base = base_cd(conditions.mach)

    total = 0.0
    radius = 0.0
    previous = None
    for comp in configuration.symmetric_components():
        if radius > comp.fore_radius:
            area = np.pi * (radius**2 - comp.fore_radius**2)
            cd = base * area / conditions.reference_area
            total += cd
            if forces_map is not None:
                forces_map[previous].base_cd = cd
        radius = comp.aft_radius
        previous = comp

    if radius > 0:
        cd = base * np.pi * radius**2 / conditions.reference_area
        total += cd
        if forces_map is not None:
            forces_map[previous].base_cd = cd

    return total
