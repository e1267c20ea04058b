"""
Axial drag corrector.

Converts the zero-lift drag coefficient into a body-axial force
coefficient as a function of angle of attack. The multiplier rises from
1 at zero angle to 1.3 at 17 degrees and falls to 0 at 90 degrees; past
90 degrees the curve is mirrored and the axial force changes sign.
Both segments are Bernstein polynomials fixed by value and derivative
constraints at their end points.
"""
from scipy import interpolate
import numpy as np

# Angle of peak axial drag multiplier (rad)
PEAK_AOA = np.radians(17.0)

# Cubic on [0, 17 deg]: 1 -> 1.3 with zero slope at both ends
AXIAL_DRAG_POLY1 = interpolate.BPoly.from_derivatives(
    [0.0, PEAK_AOA], [[1.0, 0.0], [1.3, 0.0]])

# Quartic on [17, 90 deg]: 1.3 -> 0, flat at both ends, zero curvature at 90
AXIAL_DRAG_POLY2 = interpolate.BPoly.from_derivatives(
    [PEAK_AOA, np.pi / 2], [[1.3, 0.0], [0.0, 0.0, 0.0]])


def axial_drag_multiplier(aoa: float) -> float:
    """Magnitude of the axial-to-zero-lift drag ratio at an angle of attack"""
    aoa = min(max(aoa, 0.0), np.pi)
    if aoa > np.pi / 2:
        aoa = np.pi - aoa
    if aoa < PEAK_AOA:
        return float(AXIAL_DRAG_POLY1(aoa))
    return float(AXIAL_DRAG_POLY2(aoa))


def calculate_axial_drag(conditions, cd: float) -> float:
    """
    Axial force coefficient from the zero-lift drag coefficient.

    Negative when the flow comes from behind (aoa >= 90 deg).
    """
    mul = axial_drag_multiplier(conditions.aoa)
    if conditions.aoa < np.pi / 2:
        return mul * cd
    return -mul * cd
