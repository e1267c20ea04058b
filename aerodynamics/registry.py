"""
Calculator registry and geometry cache.

Maps each aerodynamic component of the full component tree to its
calculator, and holds the body geometry used by the damping estimator.
Both live in one cache record tagged with the airframe's modification
id, so a single geometry change notification invalidates both.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Type
import logging

from airframe import Component, ComponentKind, Configuration, RocketAirframe

from .barrowman import (
    RocketComponentCalc,
    NoseConeCalc,
    TransitionCalc,
    BodyTubeCalc,
    FinSetCalc,
    LaunchLugCalc,
)

logger = logging.getLogger(__name__)


CALCULATOR_TYPES: Dict[ComponentKind, Type[RocketComponentCalc]] = {
    ComponentKind.NOSE_CONE: NoseConeCalc,
    ComponentKind.TRANSITION: TransitionCalc,
    ComponentKind.BODY_TUBE: BodyTubeCalc,
    ComponentKind.FIN_SET: FinSetCalc,
    ComponentKind.LAUNCH_LUG: LaunchLugCalc,
}

_missing = [k for k in ComponentKind if k.is_aerodynamic and k not in CALCULATOR_TYPES]
if _missing:
    raise TypeError(f"No aerodynamic calculator for kinds: {[k.value for k in _missing]}")


@dataclass(frozen=True)
class GeometryCache:
    """Body geometry summary of the active configuration"""
    mean_diameter: float  # planform area / length (m)
    length: float  # summed length of symmetric components (m)


@dataclass
class _CacheRecord:
    generation: int
    calculators: Dict[Component, RocketComponentCalc]
    geometry: Optional[GeometryCache] = None


class CalculatorRegistry:
    """
    Lazily built component-to-calculator map.

    Args:
        rocket: Airframe whose full component tree is registered
        calculator_types: Optional kind-to-calculator override table
    """

    def __init__(self, rocket: RocketAirframe,
                 calculator_types: Optional[Dict[ComponentKind, Type[RocketComponentCalc]]] = None):
        self.rocket = rocket
        self.calculator_types = dict(CALCULATOR_TYPES if calculator_types is None
                                     else calculator_types)
        self._cache: Optional[_CacheRecord] = None

    @property
    def generation(self) -> Optional[int]:
        """Modification id the current cache was built for (None if empty)"""
        return self._cache.generation if self._cache is not None else None

    def invalidate(self):
        """Drop the calculator map and geometry cache"""
        self._cache = None

    def _current(self) -> _CacheRecord:
        if self._cache is None or self._cache.generation != self.rocket.modification_id:
            self._cache = _CacheRecord(self.rocket.modification_id, self._build())
        return self._cache

    def _build(self) -> Dict[Component, RocketComponentCalc]:
        calculators = {}
        for comp in self.rocket.iter_components():
            if not comp.is_aerodynamic:
                continue
            calc_type = self.calculator_types.get(comp.kind)
            if calc_type is None:
                raise TypeError(
                    f"No aerodynamic calculator for {comp.kind.value} component '{comp.name}'. "
                    f"Options: {[k.value for k in self.calculator_types]}"
                )
            calculators[comp] = calc_type(comp, self.rocket)

        logger.debug(
            f"Built {len(calculators)} calculators for {self.rocket.name} "
            f"(modification {self.rocket.modification_id})"
        )
        return calculators

    def resolve(self, component: Component) -> RocketComponentCalc:
        """Calculator for an aerodynamic component of the airframe"""
        return self._current().calculators[component]

    def __len__(self) -> int:
        return len(self._current().calculators)

    def geometry(self, configuration: Configuration) -> GeometryCache:
        """Mean body diameter and length, computed once per generation"""
        record = self._current()
        if record.geometry is None:
            area = 0.0
            length = 0.0
            for comp in configuration.symmetric_components():
                area += comp.planform_area
                length += comp.length
            diameter = area / length if length > 0 else 0.0
            record.geometry = GeometryCache(mean_diameter=diameter, length=length)
            logger.debug(f"Geometry cache: diameter={diameter:.4f} m, length={length:.4f} m")
        return record.geometry
