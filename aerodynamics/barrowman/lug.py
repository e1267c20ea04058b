"""Launch lug calculator: no normal force, stagnation drag on the annulus."""
from airframe import Coordinate

from .base import RocketComponentCalc


class LaunchLugCalc(RocketComponentCalc):

    def __init__(self, component, rocket):
        super().__init__(component, rocket)
        self.frontal_area = component.frontal_area

    def calculate_nonaxial_forces(self, conditions, forces, warnings):
        forces.cp = Coordinate.NUL
        forces.cn_alpha = 0.0
        forces.cn = 0.0
        forces.cm = 0.0
        forces.c_side = 0.0
        forces.c_yaw = 0.0
        forces.c_roll = 0.0
        forces.c_roll_damp = 0.0
        forces.c_roll_force = 0.0

    def calculate_pressure_drag(self, conditions, stagnation_cd, base_cd, warnings):
        return stagnation_cd * self.frontal_area / conditions.reference_area
