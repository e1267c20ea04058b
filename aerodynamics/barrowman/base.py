"""
Contract for per-component aerodynamic calculators.

One calculator instance is built per aerodynamic component whenever the
airframe geometry changes, so geometry-only quantities can be
precomputed in ``__init__``.
"""
from abc import ABC, abstractmethod

from airframe import Component, RocketAirframe

from ..conditions import FlightConditions
from ..forces import AerodynamicForces
from ..warning_set import WarningSet


class RocketComponentCalc(ABC):
    """Normal-force and pressure-drag contribution of one component"""

    def __init__(self, component: Component, rocket: RocketAirframe):
        self.component = component

    @abstractmethod
    def calculate_nonaxial_forces(self, conditions: FlightConditions,
                                  forces: AerodynamicForces, warnings: WarningSet):
        """
        Fill the normal-force coefficients of ``forces``.

        The CP is returned in the component's local frame with its weight
        set to CN_alpha; ``cn_alpha``, ``cn``, ``cm``, ``c_side``,
        ``c_yaw``, ``c_roll``, ``c_roll_damp`` and ``c_roll_force`` are
        set. ``forces`` arrives zeroed.
        """

    @abstractmethod
    def calculate_pressure_drag(self, conditions: FlightConditions, stagnation_cd: float,
                                base_cd: float, warnings: WarningSet) -> float:
        """
        Forebody pressure drag coefficient of the component.

        Args:
            conditions: Flight conditions
            stagnation_cd: Stagnation pressure coefficient at this Mach
            base_cd: Base pressure coefficient at this Mach
            warnings: Warning sink

        Returns:
            Pressure drag coefficient referenced to the reference area
        """
