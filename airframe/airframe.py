"""
RocketAirframe - Complete physical rocket definition.

Holds the full component tree (every stage, whether or not it is
currently active) together with a modification counter. Anything that
caches data derived from the geometry compares against
``modification_id`` and rebuilds when it changes; callers that edit
components in place must call ``fire_change()`` afterwards.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Dict, Any
from pathlib import Path
import logging
import yaml

from .components import (
    Component,
    NoseCone,
    Transition,
    BodyTube,
    TrapezoidFinSet,
    LaunchLug,
    MotorMount,
    MassObject,
    Material,
    NoseConeShape,
    FinCrossSection,
    Finish,
    SymmetricComponent,
)

logger = logging.getLogger(__name__)


_COMPONENT_TYPES = {
    cls.__name__: cls
    for cls in (NoseCone, Transition, BodyTube, TrapezoidFinSet,
                LaunchLug, MotorMount, MassObject)
}


@dataclass(eq=False)
class Stage:
    """One stage of the rocket, components ordered front to back"""
    name: str
    components: List[Component] = field(default_factory=list)


@dataclass(eq=False)
class RocketAirframe:
    """
    Complete physical definition of a rocket airframe.

    Attributes:
        name: Descriptive name for the airframe
        description: Optional longer description
        stages: Stages from the top (sustainer) down
        perfect_finish: Assume a partially laminar boundary layer when
            estimating skin friction
        source_file: Path to source file if loaded from .yaml
    """

    name: str
    description: str = ""
    stages: List[Stage] = field(default_factory=list)
    perfect_finish: bool = False
    source_file: Optional[str] = None

    _modification_id: int = field(default=0, init=False, repr=False)

    @classmethod
    def single_stage(cls, name: str, components: List[Component],
                     **kwargs) -> "RocketAirframe":
        """Build a one-stage airframe from a front-to-back component list"""
        return cls(name=name, stages=[Stage("Sustainer", list(components))], **kwargs)

    @property
    def modification_id(self) -> int:
        """Counter bumped on every structural or geometry change"""
        return self._modification_id

    def fire_change(self):
        """Notify that the component tree or its geometry has changed"""
        self._modification_id += 1
        logger.debug(f"{self.name}: geometry changed (modification {self._modification_id})")

    def add_component(self, component: Component, stage: int = 0):
        self.stages[stage].components.append(component)
        self.fire_change()

    def add_stage(self, stage: Stage):
        self.stages.append(stage)
        self.fire_change()

    def set_perfect_finish(self, perfect: bool):
        self.perfect_finish = perfect
        self.fire_change()

    def iter_components(self) -> Iterator[Component]:
        """Iterate every component of every stage, front to back"""
        for stage in self.stages:
            yield from stage.components

    @property
    def components(self) -> List[Component]:
        return list(self.iter_components())

    def body_radius_at(self, x: float) -> float:
        """Outer body radius at absolute axial position x (0 if no body)"""
        for comp in self.iter_components():
            if isinstance(comp, SymmetricComponent):
                if comp.position <= x <= comp.position + comp.length:
                    return float(comp.get_radius(x - comp.position))
        return 0.0

    @property
    def body_diameter(self) -> float:
        """Maximum body diameter (m)"""
        radii = [
            max(c.fore_radius, c.aft_radius)
            for c in self.iter_components()
            if isinstance(c, SymmetricComponent)
        ]
        return 2 * max(radii) if radii else 0.0

    @property
    def total_length(self) -> float:
        """Total rocket length (m)"""
        extents = [c.position + c.length for c in self.iter_components()
                   if hasattr(c, "length")]
        return max(extents) if extents else 0.0

    @property
    def dry_mass(self) -> float:
        """Total dry mass of all components (kg)"""
        return sum(c.get_mass() for c in self.iter_components())

    def get_fin_set(self) -> Optional[TrapezoidFinSet]:
        """Get the primary fin set (first TrapezoidFinSet found)"""
        for comp in self.iter_components():
            if isinstance(comp, TrapezoidFinSet):
                return comp
        return None

    def summary(self) -> str:
        """Return a human-readable summary of the airframe"""
        lines = [
            f"Airframe: {self.name}",
            f"  Length: {self.total_length*1000:.1f} mm",
            f"  Diameter: {self.body_diameter*1000:.1f} mm",
            f"  Dry mass: {self.dry_mass*1000:.1f} g",
            f"  Stages: {len(self.stages)}",
            f"  Components: {len(self.components)}",
            f"  Finish: {'perfect' if self.perfect_finish else 'regular'}",
        ]

        fin_set = self.get_fin_set()
        if fin_set:
            lines.append(f"  Fins: {fin_set.num_fins}x, span={fin_set.span*1000:.1f}mm")

        return "\n".join(lines)

    # Serialization methods

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "name": self.name,
            "description": self.description,
            "perfect_finish": self.perfect_finish,
            "stages": [
                {
                    "name": stage.name,
                    "components": [self._component_to_dict(c) for c in stage.components],
                }
                for stage in self.stages
            ],
        }

    def _component_to_dict(self, comp: Component) -> Dict[str, Any]:
        """Convert a component to dictionary"""
        data = {
            "type": type(comp).__name__,
            "name": comp.name,
            "position": comp.position,
        }

        if comp.mass_override is not None:
            data["mass_override"] = comp.mass_override

        if hasattr(comp, "finish"):
            data["finish"] = comp.finish.name.lower()

        if isinstance(comp, NoseCone):
            data.update(
                {
                    "length": comp.length,
                    "base_diameter": comp.base_diameter,
                    "shape": comp.shape.value,
                    "shape_parameter": comp.shape_parameter,
                    "thickness": comp.thickness,
                    "material": comp.material.name,
                }
            )
        elif isinstance(comp, Transition):
            data.update(
                {
                    "length": comp.length,
                    "fore_diameter": comp.fore_diameter,
                    "aft_diameter": comp.aft_diameter,
                    "shape": comp.shape.value,
                    "shape_parameter": comp.shape_parameter,
                    "thickness": comp.thickness,
                    "material": comp.material.name,
                }
            )
        elif isinstance(comp, BodyTube):
            data.update(
                {
                    "length": comp.length,
                    "outer_diameter": comp.outer_diameter,
                    "inner_diameter": comp.inner_diameter,
                    "material": comp.material.name,
                }
            )
        elif isinstance(comp, TrapezoidFinSet):
            data.update(
                {
                    "num_fins": comp.num_fins,
                    "root_chord": comp.root_chord,
                    "tip_chord": comp.tip_chord,
                    "span": comp.span,
                    "sweep_length": comp.sweep_length,
                    "thickness": comp.thickness,
                    "cant_angle": comp.cant_angle,
                    "cross_section": comp.cross_section.value,
                    "material": comp.material.name,
                }
            )
        elif isinstance(comp, LaunchLug):
            data.update(
                {
                    "length": comp.length,
                    "outer_diameter": comp.outer_diameter,
                    "thickness": comp.thickness,
                    "material": comp.material.name,
                }
            )
        elif isinstance(comp, MotorMount):
            data.update(
                {
                    "length": comp.length,
                    "outer_diameter": comp.outer_diameter,
                    "inner_diameter": comp.inner_diameter,
                    "material": comp.material.name,
                }
            )
        elif isinstance(comp, MassObject):
            data.update(
                {
                    "mass": comp.mass,
                    "length": comp.length,
                    "radius_of_gyration": comp.radius_of_gyration,
                }
            )

        return data

    def save_yaml(self, path: str):
        """Save airframe definition to YAML file"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def load_yaml(cls, path: str) -> "RocketAirframe":
        """Load airframe from YAML file"""
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        airframe = cls._from_dict(data, source_file=str(path))
        logger.info(f"Loaded {len(airframe.components)} components from {Path(path).name}")
        return airframe

    @classmethod
    def load(cls, path: str) -> "RocketAirframe":
        """
        Load airframe from file (auto-detect format).

        Args:
            path: Path to airframe file (.yaml/.yml)

        Returns:
            RocketAirframe instance
        """
        path = Path(path)

        if path.suffix.lower() in (".yaml", ".yml"):
            return cls.load_yaml(str(path))
        else:
            raise ValueError(f"Unsupported airframe file format: {path.suffix}")

    @classmethod
    def _component_from_dict(cls, comp_data: Dict[str, Any]) -> Component:
        comp_data = dict(comp_data)  # Copy to avoid mutation
        comp_type = comp_data.pop("type")
        if comp_type not in _COMPONENT_TYPES:
            raise ValueError(
                f"Unknown component type: {comp_type}. "
                f"Options: {list(_COMPONENT_TYPES)}"
            )

        material_name = comp_data.pop("material", None)
        if material_name:
            comp_data["material"] = Material.from_name(material_name)

        if "finish" in comp_data:
            comp_data["finish"] = Finish.from_name(comp_data["finish"])
        if "shape" in comp_data:
            comp_data["shape"] = NoseConeShape(comp_data["shape"])
        if "cross_section" in comp_data:
            comp_data["cross_section"] = FinCrossSection(comp_data["cross_section"])

        return _COMPONENT_TYPES[comp_type](**comp_data)

    @classmethod
    def _from_dict(
        cls, data: Dict[str, Any], source_file: str = None
    ) -> "RocketAirframe":
        """Create airframe from dictionary"""
        if "stages" in data:
            stages = [
                Stage(
                    name=stage_data.get("name", f"Stage {i + 1}"),
                    components=[cls._component_from_dict(c)
                                for c in stage_data.get("components", [])],
                )
                for i, stage_data in enumerate(data["stages"])
            ]
        else:
            # Flat component list is a single stage
            stages = [
                Stage(
                    name="Sustainer",
                    components=[cls._component_from_dict(c)
                                for c in data.get("components", [])],
                )
            ]

        return cls(
            name=data.get("name", "Unnamed Airframe"),
            description=data.get("description", ""),
            stages=stages,
            perfect_finish=bool(data.get("perfect_finish", False)),
            source_file=source_file,
        )

    # Factory methods for common rockets

    @classmethod
    def estes_alpha(cls) -> "RocketAirframe":
        """
        Create Estes Alpha III airframe.

        Classic beginner rocket designed for Estes C6 motors.
        Approximately 31cm long, 24mm diameter.
        """
        return cls.single_stage(
            "Estes Alpha III",
            [
                NoseCone(
                    name="Nose Cone",
                    position=0.0,
                    length=0.07,
                    base_diameter=0.024,
                    shape=NoseConeShape.OGIVE,
                    thickness=0.002,
                    material=Material.abs_plastic(),
                ),
                BodyTube(
                    name="Body Tube",
                    position=0.07,
                    length=0.24,
                    outer_diameter=0.024,
                    inner_diameter=0.022,
                    material=Material.cardboard(),
                ),
                LaunchLug(
                    name="Launch Lug",
                    position=0.15,
                    length=0.03,
                    outer_diameter=0.005,
                ),
                TrapezoidFinSet(
                    name="Fins",
                    position=0.26,
                    num_fins=3,
                    root_chord=0.05,
                    tip_chord=0.025,
                    span=0.04,
                    sweep_length=0.02,
                    thickness=0.002,
                    material=Material.balsa(),
                ),
                MotorMount(
                    name="Motor Mount",
                    position=0.24,
                    length=0.07,
                    outer_diameter=0.020,
                    inner_diameter=0.018,
                    material=Material.cardboard(),
                ),
            ],
            description="Classic beginner rocket for C6 motors",
        )

    @classmethod
    def high_power_minimum_diameter(
        cls, motor_diameter: float = 0.038
    ) -> "RocketAirframe":
        """
        Create a minimum-diameter high-power rocket with a boat-tail.

        Args:
            motor_diameter: Motor diameter in meters (default 38mm)
        """
        body_od = motor_diameter + 0.003  # Small clearance
        body_id = motor_diameter + 0.001

        return cls.single_stage(
            f"Min-D {motor_diameter*1000:.0f}mm",
            [
                NoseCone(
                    name="Nose Cone",
                    position=0.0,
                    length=0.15,
                    base_diameter=body_od,
                    shape=NoseConeShape.OGIVE,
                    thickness=0.003,
                    material=Material.fiberglass(),
                    finish=Finish.SMOOTH,
                ),
                BodyTube(
                    name="Body Tube",
                    position=0.15,
                    length=0.60,
                    outer_diameter=body_od,
                    inner_diameter=body_id,
                    material=Material.fiberglass(),
                    finish=Finish.SMOOTH,
                ),
                TrapezoidFinSet(
                    name="Fins",
                    position=0.65,
                    num_fins=4,
                    root_chord=0.10,
                    tip_chord=0.05,
                    span=0.06,
                    sweep_length=0.05,
                    thickness=0.003,
                    cross_section=FinCrossSection.ROUNDED,
                    material=Material.fiberglass(),
                    finish=Finish.SMOOTH,
                ),
                Transition(
                    name="Boat Tail",
                    position=0.75,
                    length=0.04,
                    fore_diameter=body_od,
                    aft_diameter=motor_diameter + 0.0005,
                    material=Material.fiberglass(),
                    finish=Finish.SMOOTH,
                ),
            ],
            description=f"Minimum diameter rocket for {motor_diameter*1000:.0f}mm motors",
            perfect_finish=True,
        )
