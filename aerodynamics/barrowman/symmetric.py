"""
Barrowman calculators for axisymmetric body components.

Normal force follows the slender-body result CN_alpha = 2 (A_aft - A_fore)
/ A_ref, plus a body-lift term proportional to planform area that
matters at larger angles of attack.
"""
import numpy as np

from airframe import Coordinate, NoseConeShape, fuzzy_equals

from .base import RocketComponentCalc
from ..warning_set import AeroWarning

# Body lift coefficient (Galejs)
BODY_LIFT_K = 1.1


class SymmetricComponentCalc(RocketComponentCalc):
    """Shared calculator for nose cones, transitions and body tubes"""

    def __init__(self, component, rocket):
        super().__init__(component, rocket)
        self.length = component.length
        self.fore_radius = component.fore_radius
        self.aft_radius = component.aft_radius
        self.planform_area = component.planform_area
        self.planform_center = component.planform_center

        self.is_tube = fuzzy_equals(self.fore_radius, self.aft_radius)
        if self.is_tube:
            self._cna = 0.0
            self._cp_x = 0.0
        else:
            a0 = np.pi * self.fore_radius**2
            a1 = np.pi * self.aft_radius**2
            self._cna = 2 * (a1 - a0)
            self._cp_x = (self.length * a1 - component.volume) / (a1 - a0)

    def calculate_nonaxial_forces(self, conditions, forces, warnings):
        cp = self._lift_cp(conditions)
        if not self.is_tube:
            cp = Coordinate(
                self._cp_x, 0.0, 0.0,
                self._cna * conditions.sinc_aoa / conditions.reference_area,
            ).average(cp)

        forces.cp = cp
        forces.cn_alpha = cp.weight
        forces.cn = forces.cn_alpha * conditions.aoa
        forces.cm = forces.cn * cp.x / conditions.reference_length
        forces.c_side = 0.0
        forces.c_yaw = 0.0
        forces.c_roll = 0.0
        forces.c_roll_damp = 0.0
        forces.c_roll_force = 0.0

        if conditions.mach > 1.1:
            warnings.add(AeroWarning.supersonic_body())

    def _lift_cp(self, conditions) -> Coordinate:
        """Body lift acting at the planform centroid"""
        return Coordinate(
            self.planform_center, 0.0, 0.0,
            BODY_LIFT_K * self.planform_area / conditions.reference_area
            * conditions.sin_aoa * conditions.sinc_aoa,
        )

    def calculate_pressure_drag(self, conditions, stagnation_cd, base_cd, warnings):
        if self.is_tube:
            return 0.0

        r0, r1 = self.fore_radius, self.aft_radius
        if r1 > r0:
            area = np.pi * (r1**2 - r0**2)
            return self._forebody_cd(conditions, stagnation_cd) * area / conditions.reference_area

        # Boat-tail: a fraction of the base drag depending on its steepness
        area = np.pi * (r0**2 - r1**2)
        length_ratio = self.length / (2 * (r0 - r1))
        if length_ratio < 1:
            cd = base_cd
        elif length_ratio < 3:
            cd = base_cd * (3 - length_ratio) / 2
        else:
            cd = 0.0
        return cd * area / conditions.reference_area

    def _forebody_cd(self, conditions, stagnation_cd) -> float:
        """Pressure coefficient of a forward-facing slope, on its frontal area"""
        sin_phi = np.sin(np.arctan2(self.aft_radius - self.fore_radius, self.length))
        if conditions.mach < 1:
            return self._subsonic_shape_factor() * 0.8 * sin_phi**2
        return stagnation_cd * sin_phi**2

    def _subsonic_shape_factor(self) -> float:
        """1 for pointed straight-sided profiles, 0 for tangent ones"""
        shape = getattr(self.component, "shape", NoseConeShape.CONICAL)
        if shape == NoseConeShape.CONICAL:
            return 1.0
        if shape == NoseConeShape.POWER_SERIES and self.component.shape_parameter >= 1:
            return 1.0
        return 0.0


class NoseConeCalc(SymmetricComponentCalc):
    pass


class TransitionCalc(SymmetricComponentCalc):
    pass


class BodyTubeCalc(SymmetricComponentCalc):
    """Cylinders only contribute body lift and no forebody pressure drag"""

    def calculate_pressure_drag(self, conditions, stagnation_cd, base_cd, warnings):
        return 0.0
