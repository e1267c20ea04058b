"""
Extended Barrowman aerodynamic calculator.

Entry point tying together the per-component calculators, the
non-axial aggregator, the drag models, the axial corrector and the
damping estimator for one airframe configuration.

Usage:
    from airframe import RocketAirframe, Configuration
    from aerodynamics import BarrowmanCalculator, FlightConditions

    config = Configuration(RocketAirframe.estes_alpha())
    calc = BarrowmanCalculator(config)
    conditions = FlightConditions.for_configuration(config, mach=0.3, velocity=100.0)
    forces = calc.get_aerodynamic_forces(0.0, conditions)
    print(f"CP at {forces.cp.x:.3f} m, CD={forces.cd:.3f}")
"""
from typing import Dict, Optional, Type
import logging
import math

import numpy as np

from airframe import Component, ComponentKind, Configuration, Coordinate, MassCalculator

from .axial import calculate_axial_drag
from .barrowman import RocketComponentCalc
from .conditions import FlightConditions
from .config import AerodynamicsConfig
from .damping import calculate_damping_moments
from .drag import calculate_friction_drag, calculate_pressure_drag, calculate_base_drag
from .forces import AerodynamicForces
from .nonaxial import calculate_nonaxial_forces
from .registry import CalculatorRegistry
from .warning_set import IgnoreWarningSet, WarningSet

logger = logging.getLogger(__name__)


def _float_errors_ignored():
    """Degenerate inputs yield inf/NaN coefficients rather than exceptions"""
    return np.errstate(divide="ignore", invalid="ignore", over="ignore")


class BarrowmanCalculator:
    """
    Aerodynamic coefficient calculator for one configuration.

    Calculator instances and body geometry are cached and rebuilt when
    the airframe's modification id changes. An instance is not safe to
    share between threads; use ``new_instance()`` for a private copy.

    Args:
        configuration: Active-stage configuration to analyze
        mass_calculator: Mass properties model (dry airframe if None)
        config: Calculator constants (defaults if None)
        calculator_types: Optional kind-to-calculator override table
    """

    def __init__(
        self,
        configuration: Configuration,
        mass_calculator: Optional[MassCalculator] = None,
        config: Optional[AerodynamicsConfig] = None,
        calculator_types: Optional[Dict[ComponentKind, Type[RocketComponentCalc]]] = None,
    ):
        self.configuration = configuration
        self.mass_calculator = mass_calculator or MassCalculator()
        self.config = config or AerodynamicsConfig()
        self._calculator_types = calculator_types
        self.registry = CalculatorRegistry(configuration.rocket, calculator_types)

    def new_instance(self) -> "BarrowmanCalculator":
        """Calculator over the same configuration with its own caches"""
        return BarrowmanCalculator(
            self.configuration,
            mass_calculator=self.mass_calculator,
            config=self.config,
            calculator_types=self._calculator_types,
        )

    def _prepare(self, conditions: FlightConditions,
                 warnings: Optional[WarningSet]) -> WarningSet:
        if conditions.is_degenerate:
            logger.warning(
                f"Degenerate flight conditions (velocity={conditions.velocity}, "
                f"reference area={conditions.reference_area}, "
                f"reference length={conditions.reference_length}); "
                f"coefficients will contain inf/NaN"
            )
        return warnings if warnings is not None else IgnoreWarningSet()

    def _nonaxial(self, conditions, warnings, forces_map=None) -> AerodynamicForces:
        return calculate_nonaxial_forces(
            self.configuration, self.registry, conditions, warnings,
            forces_map=forces_map, config=self.config,
        )

    def _drag(self, conditions, warnings, total, forces_map=None):
        total.friction_cd = calculate_friction_drag(
            self.configuration, self.registry, conditions, forces_map)
        total.pressure_cd = calculate_pressure_drag(
            self.configuration, self.registry, conditions, forces_map, warnings)
        total.base_cd = calculate_base_drag(self.configuration, conditions, forces_map)

    def _mass_properties(self, time: float, total: AerodynamicForces):
        total.cg = self.mass_calculator.get_cg(self.configuration, time)
        total.longitudinal_inertia = self.mass_calculator.get_longitudinal_inertia(
            self.configuration, time)
        total.rotational_inertia = self.mass_calculator.get_rotational_inertia(
            self.configuration, time)

    def get_cp(self, conditions: FlightConditions,
               warnings: Optional[WarningSet] = None) -> Coordinate:
        """
        Center of pressure of the configuration.

        Returns:
            CP in the rocket frame: the running midpoint of the component
            CPs in traversal order, carrying the total CN_alpha as weight
        """
        warnings = self._prepare(conditions, warnings)
        with _float_errors_ignored():
            return self._nonaxial(conditions, warnings).cp

    def get_force_analysis(self, conditions: FlightConditions,
                           warnings: Optional[WarningSet] = None) -> Dict[object, AerodynamicForces]:
        """
        Per-component force breakdown.

        Returns:
            Records for every active component in traversal order, with
            the whole-rocket aggregate last, keyed by the airframe
        """
        warnings = self._prepare(conditions, warnings)
        forces_map: Dict[Component, AerodynamicForces] = {}
        for comp in self.configuration:
            forces_map[comp] = AerodynamicForces(
                component=comp, cg=self.mass_calculator.get_component_cg(comp))

        with _float_errors_ignored():
            total = self._nonaxial(conditions, warnings, forces_map)
            self._drag(conditions, warnings, total, forces_map)
            total.cg = self.mass_calculator.get_cg(self.configuration)

            rocket = self.configuration.rocket
            total.component = rocket
            analysis: Dict[object, AerodynamicForces] = dict(forces_map)
            analysis[rocket] = total

            for forces in analysis.values():
                if not forces.has_drag_breakdown():
                    continue
                if math.isnan(forces.base_cd):
                    forces.base_cd = 0.0
                if math.isnan(forces.pressure_cd):
                    forces.pressure_cd = 0.0
                if math.isnan(forces.friction_cd):
                    forces.friction_cd = 0.0
                forces.cd = forces.base_cd + forces.pressure_cd + forces.friction_cd
                forces.c_axial = calculate_axial_drag(conditions, forces.cd)

        return analysis

    def get_aerodynamic_forces(self, time: float, conditions: FlightConditions,
                               warnings: Optional[WarningSet] = None) -> AerodynamicForces:
        """
        Complete aerodynamic force coefficients of the configuration.

        Pitch and yaw damping moments are included in ``cm`` and ``c_yaw``.

        Args:
            time: Flight time (s), passed to the mass model
            conditions: Flight conditions
            warnings: Warning sink (discarded if None)

        Returns:
            Aggregate force record
        """
        warnings = self._prepare(conditions, warnings)
        with _float_errors_ignored():
            total = self._nonaxial(conditions, warnings)
            self._drag(conditions, warnings, total)
            total.cd = total.friction_cd + total.pressure_cd + total.base_cd
            total.c_axial = calculate_axial_drag(conditions, total.cd)

            self._mass_properties(time, total)

            calculate_damping_moments(
                self.configuration, self.registry, conditions, total,
                amplification=self.config.damping_amplification,
            )
            total.cm -= total.pitch_damping_moment
            total.c_yaw -= total.yaw_damping_moment

        return total

    def get_axial_forces(self, time: float, conditions: FlightConditions,
                         warnings: Optional[WarningSet] = None) -> AerodynamicForces:
        """Drag and mass properties only; normal-force coefficients stay zero"""
        warnings = self._prepare(conditions, warnings)
        total = AerodynamicForces().zero()
        with _float_errors_ignored():
            self._drag(conditions, warnings, total)
            total.cd = total.friction_cd + total.pressure_cd + total.base_cd
            total.c_axial = calculate_axial_drag(conditions, total.cd)
            self._mass_properties(time, total)
        return total
