"""
Mass properties of the active configuration.

Dry-airframe model built from per-component masses and CG positions.
The aerodynamic calculator consumes it through ``get_cg``,
``get_longitudinal_inertia`` and ``get_rotational_inertia``; a
time-dependent model (burning motor) can be substituted by any object
with the same three methods.
"""
from .configuration import Configuration
from .components import Component
from .coordinate import Coordinate


class MassCalculator:
    """Time-invariant mass model for an airframe without propellant"""

    def get_component_cg(self, component: Component) -> Coordinate:
        """CG of a single component, weighted by its mass"""
        return Coordinate(component.get_cg_position(), 0.0, 0.0, component.get_mass())

    def get_cg(self, configuration: Configuration, time: float = 0.0) -> Coordinate:
        """
        Center of gravity of the active components.

        Args:
            configuration: Active-stage configuration
            time: Flight time (s); the dry model does not depend on it

        Returns:
            CG coordinate weighted by total mass
        """
        cg = Coordinate.NUL
        for comp in configuration:
            cg = cg.average(self.get_component_cg(comp))
        return cg

    def get_longitudinal_inertia(self, configuration: Configuration, time: float = 0.0) -> float:
        """
        Pitch/yaw moment of inertia about the CG (kg*m^2).

        Each component is treated as a slender rod of its own length,
        shifted to the rocket CG with the parallel axis theorem.
        """
        cg_x = self.get_cg(configuration, time).x
        inertia = 0.0
        for comp in configuration:
            m = comp.get_mass()
            inertia += m * comp.length**2 / 12 + m * (comp.get_cg_position() - cg_x) ** 2
        return inertia

    def get_rotational_inertia(self, configuration: Configuration, time: float = 0.0) -> float:
        """Roll moment of inertia (kg*m^2)"""
        body_radius = configuration.reference_length / 2
        inertia = sum(comp.get_roll_inertia(body_radius) for comp in configuration)

        # Ensure minimum inertia for numerical stability
        return max(inertia, 1e-6)
