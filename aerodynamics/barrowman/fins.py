"""
Barrowman calculator for trapezoidal fin sets.

Lift slope of a single fin follows Diederich's subsonic planform
correlation and first-order Ackeret theory above Mach 1.5, blended
linearly in between. Mean aerodynamic chord (MAC) quantities are
precomputed from the planform.

References:
    - Barrowman, J.S. "The Practical Calculation of the Aerodynamic
      Characteristics of Slender Finned Vehicles", 1967.
    - Niskanen, S. "Development of an Open Source model rocket
      simulation software", 2009, Ch. 3.
"""
import numpy as np

from airframe import Coordinate, FinCrossSection

from .base import RocketComponentCalc

# Fin-fin interference for more than four fins (MIL-HDBK-762)
_FIN_COUNT_FACTOR = {5: 0.948, 6: 0.913, 7: 0.854, 8: 0.810}

# Mach range blended between subsonic and supersonic lift slope
_SUBSONIC_MACH = 1.0
_SUPERSONIC_MACH = 1.5

# Beta used at the subsonic end of the transonic blend
_BETA_TRANSONIC = 0.25


class FinSetCalc(RocketComponentCalc):

    def __init__(self, component, rocket):
        super().__init__(component, rocket)
        cr = component.root_chord
        ct = component.tip_chord
        s = component.span

        self.body_radius = rocket.body_radius_at(component.position)
        self.fin_area = component.fin_area

        if cr + ct > 0:
            taper = (cr + 2 * ct) / (3 * (cr + ct))
            self.mac_length = 2 / 3 * (cr + ct - cr * ct / (cr + ct))
        else:
            taper = 0.0
            self.mac_length = np.float64(0.0)
        self.mac_span = s * taper
        self.mac_lead = component.sweep_length * taper
        self.midchord_position = self.mac_lead + self.mac_length / 2

        self.aspect_ratio = 2 * s**2 / self.fin_area if self.fin_area > 0 else 0.0
        self.midchord_sweep = np.arctan2(component.sweep_length + ct / 2 - cr / 2, s)
        self.leading_edge_sweep = np.arctan2(component.sweep_length, s)

        r = self.body_radius
        self.body_interference = 1 + r / (s + r) if s + r > 0 else 1.0

        n = component.num_fins
        self.fin_count_factor = 1.0 if n <= 4 else _FIN_COUNT_FACTOR.get(n, 0.75)

    def _subsonic_slope(self, beta: float) -> float:
        ar = self.aspect_ratio
        return 2 * np.pi * ar / (2 + np.sqrt(4 + (beta * ar / np.cos(self.midchord_sweep)) ** 2))

    def fin_lift_slope(self, conditions) -> float:
        """Lift slope of one fin referenced to its own area (1/rad)"""
        mach = conditions.mach
        if mach <= _SUBSONIC_MACH:
            return self._subsonic_slope(conditions.beta)

        supersonic = 2 / np.sqrt(max(mach, _SUPERSONIC_MACH) ** 2 - 1)
        if mach >= _SUPERSONIC_MACH:
            return supersonic

        subsonic = self._subsonic_slope(_BETA_TRANSONIC)
        t = (mach - _SUBSONIC_MACH) / (_SUPERSONIC_MACH - _SUBSONIC_MACH)
        return subsonic + (supersonic - subsonic) * t

    def _supersonic_cp_fraction(self, mach: float) -> float:
        ar_beta = self.aspect_ratio * np.sqrt(mach**2 - 1)
        return float(np.clip((ar_beta - 0.67) / (2 * ar_beta - 1), 0.0, 1.0))

    def _cp_chord_fraction(self, mach: float) -> float:
        """CP position along the MAC as a fraction of its length"""
        if mach <= 0.5 or self.aspect_ratio <= 0:
            return 0.25
        if mach >= 2:
            return self._supersonic_cp_fraction(mach)
        return 0.25 + (self._supersonic_cp_fraction(2.0) - 0.25) * (mach - 0.5) / 1.5

    def calculate_nonaxial_forces(self, conditions, forces, warnings):
        fins = self.component
        n = fins.num_fins

        slope = self.fin_lift_slope(conditions)
        cna_single = slope * self.fin_area / conditions.reference_area
        cna = self.body_interference * self.fin_count_factor * n / 2 * cna_single

        cp_x = self.mac_lead + self._cp_chord_fraction(conditions.mach) * self.mac_length
        forces.cp = Coordinate(cp_x, 0.0, 0.0, cna)
        forces.cn_alpha = cna
        forces.cn = cna * conditions.aoa
        forces.cm = forces.cn * cp_x / conditions.reference_length
        forces.c_side = 0.0
        forces.c_yaw = 0.0

        # Roll forcing from cant, damping from roll rate
        arm = self.mac_span + self.body_radius
        forces.c_roll_force = (
            n * arm * cna_single * fins.cant_angle / conditions.reference_length
        )
        forces.c_roll_damp = (
            slope * fins.get_damping_coefficient(self.body_radius) * conditions.roll_rate
            / (conditions.velocity * conditions.reference_area * conditions.reference_length)
        )
        forces.c_roll = forces.c_roll_force - forces.c_roll_damp

    def calculate_pressure_drag(self, conditions, stagnation_cd, base_cd, warnings):
        fins = self.component
        mach = conditions.mach

        if fins.cross_section == FinCrossSection.SQUARE:
            leading = stagnation_cd
            trailing = base_cd
        else:
            # Rounded leading edge
            if mach < 0.9:
                leading = (1 - mach**2) ** -0.417 - 1
            elif mach < 1:
                leading = 1 - 1.785 * (mach - 0.9)
            else:
                leading = 1.214 - 0.502 / mach**2 + 0.1095 / mach**4
            trailing = base_cd / 2 if fins.cross_section == FinCrossSection.ROUNDED else 0.0

        cd = leading * np.cos(self.leading_edge_sweep) ** 2 + trailing
        frontal_area = fins.num_fins * fins.span * fins.thickness
        return cd * frontal_area / conditions.reference_area
