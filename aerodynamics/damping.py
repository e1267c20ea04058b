"""
Pitch and yaw damping moment estimate.

The body is treated as a cylinder of the mean body diameter rotating
about the CG, and each fin set as a flat plate at its mid-chord. The
resulting moments scale with the square of the angular rate over the
airspeed.
"""
from airframe import Configuration, Coordinate, TrapezoidFinSet

from .conditions import FlightConditions
from .config import DAMPING_AMPLIFICATION
from .forces import AerodynamicForces
from .registry import CalculatorRegistry


def damping_multiplier(configuration: Configuration, registry: CalculatorRegistry,
                       conditions: FlightConditions, cg_x: float) -> float:
    """Geometry factor of the damping moments about an axial CG position"""
    geometry = registry.geometry(configuration)
    normalization = conditions.reference_area * conditions.reference_length

    # Body
    mul = 0.275 * geometry.mean_diameter / normalization
    mul *= cg_x**4 + (geometry.length - cg_x) ** 4

    # Fins
    for comp in configuration:
        if isinstance(comp, TrapezoidFinSet):
            midchord = comp.to_absolute(Coordinate(registry.resolve(comp).midchord_position)).x
            mul += (0.6 * min(comp.num_fins, 4) * comp.fin_area
                    * abs(midchord - cg_x) ** 3 / normalization)

    return mul


def _sign(value: float) -> float:
    return 1.0 if value >= 0 else -1.0


def calculate_damping_moments(configuration: Configuration, registry: CalculatorRegistry,
                              conditions: FlightConditions, total: AerodynamicForces,
                              amplification: float = DAMPING_AMPLIFICATION):
    """
    Set ``pitch_damping_moment`` and ``yaw_damping_moment`` of ``total``.

    ``total.cg`` must already hold the rocket CG.
    """
    mul = damping_multiplier(configuration, registry, conditions, total.cg.x)
    mul *= amplification

    pitch = conditions.pitch_rate
    yaw = conditions.yaw_rate
    velocity = conditions.velocity
    total.pitch_damping_moment = mul * _sign(pitch) * (pitch / velocity) ** 2
    total.yaw_damping_moment = mul * _sign(yaw) * (yaw / velocity) ** 2
