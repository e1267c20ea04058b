"""
Active-stage view of a rocket airframe.

A Configuration selects which stages of a RocketAirframe are currently
flying and iterates their components front to back. Changing the stage
selection does not count as a geometry change.
"""
from typing import Iterable, Iterator, Optional
import numpy as np

from .airframe import RocketAirframe
from .components import Component, SymmetricComponent


class Configuration:
    """Ordered traversal of the components of the active stages"""

    def __init__(self, rocket: RocketAirframe, active_stages: Optional[Iterable[int]] = None):
        self.rocket = rocket
        if active_stages is None:
            active_stages = range(len(rocket.stages))
        self._active = set()
        self.set_active_stages(active_stages)

    def set_active_stages(self, stages: Iterable[int]):
        stages = set(stages)
        for s in stages:
            if not 0 <= s < len(self.rocket.stages):
                raise ValueError(
                    f"Stage index {s} out of range for {len(self.rocket.stages)} stages"
                )
        self._active = stages

    def set_to_stage(self, stage: int):
        """Activate stages 0..stage (the sustainer down to the given stage)"""
        self.set_active_stages(range(stage + 1))

    @property
    def active_stages(self):
        return sorted(self._active)

    def is_stage_active(self, stage: int) -> bool:
        return stage in self._active

    def __iter__(self) -> Iterator[Component]:
        for i, stage in enumerate(self.rocket.stages):
            if i in self._active:
                yield from stage.components

    def symmetric_components(self) -> Iterator[SymmetricComponent]:
        for comp in self:
            if isinstance(comp, SymmetricComponent):
                yield comp

    @property
    def length(self) -> float:
        """Axial extent of the active components (m)"""
        fore = [c.position for c in self]
        aft = [c.position + c.length for c in self]
        if not fore:
            return 0.0
        return max(aft) - min(fore)

    @property
    def reference_length(self) -> float:
        """Maximum body diameter of the active stages (m)"""
        radii = [max(c.fore_radius, c.aft_radius) for c in self.symmetric_components()]
        return 2 * max(radii) if radii else 0.0

    @property
    def reference_area(self) -> float:
        """Cross-section area at the reference diameter (m^2)"""
        return np.pi * (self.reference_length / 2) ** 2
