"""
Rocket Airframe Module

Provides classes for defining rocket airframe geometry and physical
properties: the component tree, its active-stage configuration and a
dry mass model. Airframes can be defined programmatically or loaded
from YAML.

Example usage:
    from airframe import RocketAirframe, Configuration

    airframe = RocketAirframe.estes_alpha()
    config = Configuration(airframe)

    print(airframe.summary())
    print(f"Reference diameter: {config.reference_length * 1000:.1f} mm")
"""

from .airframe import RocketAirframe, Stage
from .configuration import Configuration
from .coordinate import Coordinate, fuzzy_equals
from .mass import MassCalculator
from .components import (
    Component,
    ComponentKind,
    ExternalComponent,
    SymmetricComponent,
    NoseCone,
    Transition,
    BodyTube,
    TrapezoidFinSet,
    LaunchLug,
    MotorMount,
    MassObject,
    Material,
    Finish,
    NoseConeShape,
    FinCrossSection,
)

__all__ = [
    "RocketAirframe",
    "Stage",
    "Configuration",
    "Coordinate",
    "fuzzy_equals",
    "MassCalculator",
    "Component",
    "ComponentKind",
    "ExternalComponent",
    "SymmetricComponent",
    "NoseCone",
    "Transition",
    "BodyTube",
    "TrapezoidFinSet",
    "LaunchLug",
    "MotorMount",
    "MassObject",
    "Material",
    "Finish",
    "NoseConeShape",
    "FinCrossSection",
]
