"""
Rocket component definitions for airframe modeling.

Each component represents a physical part of the rocket with geometry,
material properties, and methods to calculate mass and moment of inertia.
Axisymmetric shells (nose cones, transitions, body tubes) additionally
expose the profile-derived quantities used by the aerodynamic
calculators: fore/aft radius, wetted area, planform area and volume.

All dimensions are in SI units (meters, kilograms, radians).
Positions are absolute, measured from the nose tip.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Optional
from enum import Enum
import numpy as np

from .coordinate import Coordinate


class ComponentKind(Enum):
    """Closed set of component geometry kinds"""
    NOSE_CONE = "nose_cone"
    TRANSITION = "transition"
    BODY_TUBE = "body_tube"
    FIN_SET = "fin_set"
    LAUNCH_LUG = "launch_lug"
    INNER_TUBE = "inner_tube"
    MASS_OBJECT = "mass_object"

    @property
    def is_aerodynamic(self) -> bool:
        """Whether components of this kind interact with the airflow"""
        return self not in (ComponentKind.INNER_TUBE, ComponentKind.MASS_OBJECT)


class Finish(Enum):
    """Surface finish classes with their average roughness height (m)"""
    ROUGH = ("Rough", 500e-6)
    UNFINISHED = ("Unfinished", 150e-6)
    NORMAL = ("Regular paint", 60e-6)
    SMOOTH = ("Smooth paint", 20e-6)
    POLISHED = ("Polished", 2e-6)

    def __init__(self, label: str, roughness_size: float):
        self.label = label
        self.roughness_size = roughness_size

    @classmethod
    def from_name(cls, name: str) -> "Finish":
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(
                f"Unknown surface finish: {name}. "
                f"Options: {[f.name.lower() for f in cls]}"
            ) from None


class NoseConeShape(Enum):
    """Nose cone shape types"""
    OGIVE = "ogive"
    CONICAL = "conical"
    ELLIPTICAL = "elliptical"
    PARABOLIC = "parabolic"
    POWER_SERIES = "power_series"
    HAACK = "haack"


class FinCrossSection(Enum):
    """Fin cross-section shapes"""
    SQUARE = "square"
    ROUNDED = "rounded"
    AIRFOIL = "airfoil"
    DOUBLE_WEDGE = "double_wedge"


@dataclass
class Material:
    """Material properties for structural components"""
    name: str
    density: float  # kg/m^3

    @classmethod
    def balsa(cls) -> 'Material':
        return cls("Balsa", 160.0)

    @classmethod
    def plywood_birch(cls) -> 'Material':
        return cls("Birch Plywood", 630.0)

    @classmethod
    def fiberglass(cls) -> 'Material':
        return cls("Fiberglass", 1800.0)

    @classmethod
    def cardboard(cls) -> 'Material':
        return cls("Cardboard", 680.0)

    @classmethod
    def abs_plastic(cls) -> 'Material':
        return cls("ABS Plastic", 1050.0)

    @classmethod
    def from_name(cls, name: str) -> 'Material':
        """Get material by name, with fallback to cardboard"""
        materials = {
            'balsa': cls.balsa(),
            'birch plywood': cls.plywood_birch(),
            'plywood': cls.plywood_birch(),
            'fiberglass': cls.fiberglass(),
            'cardboard': cls.cardboard(),
            'abs plastic': cls.abs_plastic(),
            'abs': cls.abs_plastic(),
            'plastic': cls.abs_plastic(),
        }
        return materials.get(name.lower(), cls.cardboard())


def shape_profile(shape: NoseConeShape, x, length: float, radius: float,
                  parameter: float = 1.0):
    """
    Radius of a nose-like profile at axial distance x from its tip.

    Args:
        shape: Profile shape
        x: Axial position(s) from the tip (m), scalar or array
        length: Profile length (m)
        radius: Base radius (m)
        parameter: Shape parameter (exponent for power series,
            K for parabolic series). Haack profiles use the LD-Haack form.

    Returns:
        Radius at x (m), same shape as x
    """
    x = np.clip(np.asarray(x, dtype=float), 0.0, length)
    if radius <= 0 or length <= 0:
        return np.zeros_like(x)
    t = x / length

    if shape == NoseConeShape.CONICAL:
        r = radius * t
    elif shape == NoseConeShape.OGIVE:
        # Tangent ogive
        rho = (radius**2 + length**2) / (2 * radius)
        r = np.sqrt(np.maximum(rho**2 - (length - x) ** 2, 0.0)) - (rho - radius)
    elif shape == NoseConeShape.ELLIPTICAL:
        r = radius * np.sqrt(np.maximum(1 - (1 - t) ** 2, 0.0))
    elif shape == NoseConeShape.PARABOLIC:
        k = min(max(parameter, 0.0), 1.0)
        r = radius * (2 * t - k * t**2) / (2 - k)
    elif shape == NoseConeShape.POWER_SERIES:
        r = radius * t**parameter
    elif shape == NoseConeShape.HAACK:
        theta = np.arccos(1 - 2 * t)
        r = radius * np.sqrt(np.maximum(theta - np.sin(2 * theta) / 2, 0.0) / np.pi)
    else:
        raise ValueError(f"Unknown nose cone shape: {shape}")

    # Pin the base so adjoining components see the exact radius
    return np.where(t >= 1.0, radius, np.maximum(r, 0.0))


@dataclass(eq=False)
class Component:
    """Base class for rocket components"""
    name: str
    position: float  # Distance from nose tip (m)
    mass_override: Optional[float] = None  # kg, if set overrides calculated mass

    kind: ClassVar[ComponentKind]

    @property
    def is_aerodynamic(self) -> bool:
        return self.kind.is_aerodynamic

    def to_absolute(self, coord: Coordinate) -> Coordinate:
        """Map a coordinate local to this component into the rocket frame"""
        return coord.add(self.position)

    def get_mass(self) -> float:
        """Get component mass (override or calculated)"""
        if self.mass_override is not None:
            return self.mass_override
        return self._calculate_mass()

    def _calculate_mass(self) -> float:
        """Calculate mass from geometry and material. Override in subclasses."""
        return 0.0

    def get_cg_position(self) -> float:
        """Get center of gravity position from nose tip"""
        return self.position

    def get_roll_inertia(self, body_radius: float = 0.0) -> float:
        """
        Get moment of inertia about roll axis.

        Args:
            body_radius: Rocket body radius for parallel axis calculations (m)

        Returns:
            Moment of inertia (kg*m^2)
        """
        return 0.0


@dataclass(eq=False)
class ExternalComponent(Component):
    """Component exposed to the airflow, with a surface finish"""
    finish: Finish = Finish.NORMAL


@dataclass(eq=False)
class SymmetricComponent(ExternalComponent, ABC):
    """
    Axisymmetric shell defined by a radius profile along its length.

    Subclasses provide ``length`` and ``get_radius``; the aerodynamic
    quantities are integrated from the profile.
    """
    PROFILE_DIVISIONS: ClassVar[int] = 128

    @property
    def fore_radius(self) -> float:
        return float(self.get_radius(0.0))

    @property
    def aft_radius(self) -> float:
        return float(self.get_radius(self.length))

    @abstractmethod
    def get_radius(self, x):
        """Outer radius at local axial position x (m)"""

    def _profile(self):
        x = np.linspace(0.0, self.length, self.PROFILE_DIVISIONS + 1)
        return x, self.get_radius(x)

    @property
    def wetted_area(self) -> float:
        """Outer surface area exposed to the flow (m^2)"""
        x, r = self._profile()
        r_mid = (r[:-1] + r[1:]) / 2
        return float(np.sum(2 * np.pi * r_mid * np.hypot(np.diff(x), np.diff(r))))

    @property
    def planform_area(self) -> float:
        """Side-view projected area (m^2)"""
        x, r = self._profile()
        return float(np.sum((r[:-1] + r[1:]) * np.diff(x)))

    @property
    def planform_center(self) -> float:
        """Local x of the planform area centroid (m)"""
        x, r = self._profile()
        strip = (r[:-1] + r[1:]) * np.diff(x)
        area = np.sum(strip)
        if area <= 0:
            return self.length / 2
        return float(np.sum((x[:-1] + x[1:]) / 2 * strip) / area)

    @property
    def volume(self) -> float:
        """Volume enclosed by the outer surface (m^3)"""
        x, r = self._profile()
        r0, r1 = r[:-1], r[1:]
        return float(np.sum(np.pi * np.diff(x) * (r0**2 + r0 * r1 + r1**2) / 3))


@dataclass(eq=False)
class NoseCone(SymmetricComponent):
    """Nose cone component"""
    length: float = 0.07  # m
    base_diameter: float = 0.024  # m (outer diameter at base)
    shape: NoseConeShape = NoseConeShape.OGIVE
    shape_parameter: float = 1.0  # Power for power series, etc.
    thickness: float = 0.002  # m, wall thickness
    material: Material = field(default_factory=Material.abs_plastic)

    kind: ClassVar[ComponentKind] = ComponentKind.NOSE_CONE

    def get_radius(self, x):
        return shape_profile(self.shape, x, self.length, self.base_diameter / 2,
                             self.shape_parameter)

    def _calculate_mass(self) -> float:
        """Approximate as hollow shell of the outer surface"""
        return self.wetted_area * self.thickness * self.material.density

    def get_cg_position(self) -> float:
        """CG of hollow cone is approximately 2/3 from tip"""
        return self.position + self.length * 0.67

    def get_roll_inertia(self, body_radius: float = 0.0) -> float:
        """Thin-shell cone about axis: approximately (1/2) * m * r^2"""
        m = self.get_mass()
        r = self.base_diameter / 2
        return 0.5 * m * r**2


@dataclass(eq=False)
class Transition(SymmetricComponent):
    """
    Shoulder or boat-tail between two diameters.

    The profile is a nose-cone shape spanning the radius difference,
    mirrored for decreasing (boat-tail) transitions.
    """
    length: float = 0.03  # m
    fore_diameter: float = 0.024  # m
    aft_diameter: float = 0.018  # m
    shape: NoseConeShape = NoseConeShape.CONICAL
    shape_parameter: float = 1.0
    thickness: float = 0.002  # m
    material: Material = field(default_factory=Material.abs_plastic)

    kind: ClassVar[ComponentKind] = ComponentKind.TRANSITION

    def get_radius(self, x):
        r_fore = self.fore_diameter / 2
        r_aft = self.aft_diameter / 2
        x = np.asarray(x, dtype=float)
        if r_aft >= r_fore:
            r = r_fore + shape_profile(self.shape, x, self.length, r_aft - r_fore,
                                       self.shape_parameter)
        else:
            r = r_aft + shape_profile(self.shape, self.length - x, self.length,
                                      r_fore - r_aft, self.shape_parameter)
        return np.where(x <= 0.0, r_fore, np.where(x >= self.length, r_aft, r))

    def _calculate_mass(self) -> float:
        return self.wetted_area * self.thickness * self.material.density

    def get_cg_position(self) -> float:
        return self.position + self.length / 2

    def get_roll_inertia(self, body_radius: float = 0.0) -> float:
        r_avg = (self.fore_diameter + self.aft_diameter) / 4
        return self.get_mass() * r_avg**2


@dataclass(eq=False)
class BodyTube(SymmetricComponent):
    """Cylindrical body tube"""
    length: float = 0.30  # m
    outer_diameter: float = 0.024  # m
    inner_diameter: float = 0.022  # m
    material: Material = field(default_factory=Material.cardboard)

    kind: ClassVar[ComponentKind] = ComponentKind.BODY_TUBE

    @property
    def wall_thickness(self) -> float:
        return (self.outer_diameter - self.inner_diameter) / 2

    def get_radius(self, x):
        return np.full_like(np.asarray(x, dtype=float), self.outer_diameter / 2)

    # Exact forms for a cylinder

    @property
    def wetted_area(self) -> float:
        return np.pi * self.outer_diameter * self.length

    @property
    def planform_area(self) -> float:
        return self.outer_diameter * self.length

    @property
    def planform_center(self) -> float:
        return self.length / 2

    @property
    def volume(self) -> float:
        return np.pi * (self.outer_diameter / 2) ** 2 * self.length

    def _calculate_mass(self) -> float:
        """Calculate mass of hollow cylinder"""
        r_out = self.outer_diameter / 2
        r_in = self.inner_diameter / 2
        volume = np.pi * self.length * (r_out**2 - r_in**2)
        return volume * self.material.density

    def get_cg_position(self) -> float:
        """CG at center of tube"""
        return self.position + self.length / 2

    def get_roll_inertia(self, body_radius: float = 0.0) -> float:
        """Thin-walled cylinder: I = m * r_avg^2"""
        m = self.get_mass()
        r_avg = (self.outer_diameter + self.inner_diameter) / 4
        return m * r_avg**2


@dataclass(eq=False)
class TrapezoidFinSet(ExternalComponent):
    """
    Trapezoidal fin set (most common fin shape).

    Represents a set of identical fins symmetrically arranged around the body.
    ``position`` is the leading edge of the root chord.
    """
    num_fins: int = 4
    root_chord: float = 0.05  # m
    tip_chord: float = 0.025  # m
    span: float = 0.04  # m (semi-span, from body surface to tip)
    sweep_length: float = 0.0  # m, leading edge sweep
    thickness: float = 0.003  # m
    cant_angle: float = 0.0  # rad
    cross_section: FinCrossSection = FinCrossSection.SQUARE
    material: Material = field(default_factory=Material.plywood_birch)

    kind: ClassVar[ComponentKind] = ComponentKind.FIN_SET

    @property
    def length(self) -> float:
        """Axial extent of the fin set (m)"""
        return max(self.root_chord, self.sweep_length + self.tip_chord)

    @property
    def fin_area(self) -> float:
        """Area of single fin (trapezoid)"""
        return 0.5 * (self.root_chord + self.tip_chord) * self.span

    @property
    def total_fin_area(self) -> float:
        """Total area of all fins"""
        return self.fin_area * self.num_fins

    def _calculate_mass(self) -> float:
        """Calculate total mass of all fins"""
        volume = self.fin_area * self.thickness * self.num_fins
        return volume * self.material.density

    def get_single_fin_mass(self) -> float:
        """Mass of a single fin"""
        return self.get_mass() / self.num_fins

    def get_cg_position(self) -> float:
        """Approximate CG at 40% of root chord from leading edge"""
        return self.position + self.root_chord * 0.4

    def get_roll_inertia(self, body_radius: float) -> float:
        """
        Roll inertia of fin set using parallel axis theorem.

        I = I_cm + m*d^2 where d is distance from roll axis to fin CG.

        Args:
            body_radius: Rocket body radius (m)

        Returns:
            Total moment of inertia for all fins (kg*m^2)
        """
        single_fin_mass = self.get_single_fin_mass()

        # Fin CG distance from body surface (approximately at 40% of span)
        fin_cg_from_surface = self.span * 0.4

        d = body_radius + fin_cg_from_surface

        # Fin's own inertia about its CG (thin plate perpendicular to roll axis)
        I_cm = (1/12) * single_fin_mass * self.span**2

        I_single = I_cm + single_fin_mass * d**2

        return self.num_fins * I_single

    def get_damping_coefficient(self, body_radius: float) -> float:
        """
        Get roll damping coefficient.

        Damping torque = -C_damp * omega * q / V

        Args:
            body_radius: Rocket body radius (m)

        Returns:
            Damping coefficient (m^4)
        """
        moment_arm = body_radius + self.span / 2
        return self.total_fin_area * moment_arm**2


@dataclass(eq=False)
class LaunchLug(ExternalComponent):
    """Launch lug mounted on the outside of the body"""
    length: float = 0.03  # m
    outer_diameter: float = 0.005  # m
    thickness: float = 0.0005  # m
    material: Material = field(default_factory=Material.cardboard)

    kind: ClassVar[ComponentKind] = ComponentKind.LAUNCH_LUG

    @property
    def frontal_area(self) -> float:
        """Annular area facing the flow (m^2)"""
        r_out = self.outer_diameter / 2
        r_in = max(r_out - self.thickness, 0.0)
        return np.pi * (r_out**2 - r_in**2)

    def _calculate_mass(self) -> float:
        return self.frontal_area * self.length * self.material.density

    def get_cg_position(self) -> float:
        return self.position + self.length / 2


@dataclass(eq=False)
class MotorMount(Component):
    """Motor mount tube (inner tube for holding the motor)"""
    length: float = 0.07  # m
    outer_diameter: float = 0.020  # m
    inner_diameter: float = 0.018  # m (motor diameter)
    material: Material = field(default_factory=Material.cardboard)

    kind: ClassVar[ComponentKind] = ComponentKind.INNER_TUBE

    def _calculate_mass(self) -> float:
        """Calculate mass of hollow cylinder"""
        r_out = self.outer_diameter / 2
        r_in = self.inner_diameter / 2
        volume = np.pi * self.length * (r_out**2 - r_in**2)
        return volume * self.material.density

    def get_cg_position(self) -> float:
        """CG at center of mount"""
        return self.position + self.length / 2

    def get_roll_inertia(self, body_radius: float = 0.0) -> float:
        """Small contribution, mostly near centerline"""
        m = self.get_mass()
        r_avg = (self.outer_diameter + self.inner_diameter) / 4
        return 0.5 * m * r_avg**2


@dataclass(eq=False)
class MassObject(Component):
    """
    Generic mass object (payload, electronics, etc.)

    Used for components where we know the mass but not detailed geometry.
    """
    mass: float = 0.01  # kg
    length: float = 0.02  # m (for CG calculation)
    radius_of_gyration: float = 0.01  # m (for inertia estimation)

    kind: ClassVar[ComponentKind] = ComponentKind.MASS_OBJECT

    def _calculate_mass(self) -> float:
        return self.mass

    def get_cg_position(self) -> float:
        return self.position + self.length / 2

    def get_roll_inertia(self, body_radius: float = 0.0) -> float:
        """Use radius of gyration: I = m * k^2"""
        return self.mass * self.radius_of_gyration**2
