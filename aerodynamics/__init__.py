"""
Aerodynamics Module

Extended Barrowman estimation of the aerodynamic coefficients of a
rocket airframe: center of pressure, normal force and moments, and a
friction/pressure/base drag breakdown with axial and damping
corrections.

Example usage:
    from airframe import RocketAirframe, Configuration
    from aerodynamics import BarrowmanCalculator, FlightConditions, WarningSet

    config = Configuration(RocketAirframe.estes_alpha())
    calc = BarrowmanCalculator(config)

    conditions = FlightConditions.for_configuration(config, mach=0.3, velocity=100.0,
                                                    aoa=0.05)
    warnings = WarningSet()
    analysis = calc.get_force_analysis(conditions, warnings)
    for component, forces in analysis.items():
        print(f"{component.name}: CNa={forces.cn_alpha:.3f} CD={forces.cd:.4f}")
"""

from .calculator import BarrowmanCalculator
from .conditions import FlightConditions
from .config import AerodynamicsConfig, load_config
from .forces import AerodynamicForces
from .registry import CalculatorRegistry, GeometryCache, CALCULATOR_TYPES
from .warning_set import AeroWarning, WarningKind, WarningSet, IgnoreWarningSet
from .drag import stagnation_cd, base_cd
from .axial import axial_drag_multiplier

__all__ = [
    "BarrowmanCalculator",
    "FlightConditions",
    "AerodynamicsConfig",
    "load_config",
    "AerodynamicForces",
    "CalculatorRegistry",
    "GeometryCache",
    "CALCULATOR_TYPES",
    "AeroWarning",
    "WarningKind",
    "WarningSet",
    "IgnoreWarningSet",
    "stagnation_cd",
    "base_cd",
    "axial_drag_multiplier",
]
