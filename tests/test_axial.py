"""
Tests for the axial drag corrector.
"""

import pytest
import numpy as np


class TestAxialDragPolynomials:
    """Tests for the constrained polynomial segments."""

    def test_degrees(self):
        """Test that the segments are a cubic and a quartic."""
        from aerodynamics.axial import AXIAL_DRAG_POLY1, AXIAL_DRAG_POLY2

        assert AXIAL_DRAG_POLY1.c.shape[0] - 1 == 3
        assert AXIAL_DRAG_POLY2.c.shape[0] - 1 == 4

    def test_flat_at_ends(self):
        """Test zero slope at the interval ends."""
        from aerodynamics.axial import AXIAL_DRAG_POLY1, AXIAL_DRAG_POLY2

        d1 = AXIAL_DRAG_POLY1.derivative()
        d2 = AXIAL_DRAG_POLY2.derivative()
        assert float(d1(0.0)) == pytest.approx(0.0, abs=1e-9)
        assert float(d1(np.radians(17))) == pytest.approx(0.0, abs=1e-9)
        assert float(d2(np.radians(17))) == pytest.approx(0.0, abs=1e-9)
        assert float(d2(np.pi / 2)) == pytest.approx(0.0, abs=1e-9)
        assert float(d2.derivative()(np.pi / 2)) == pytest.approx(0.0, abs=1e-9)


class TestAxialDragMultiplier:
    """Tests for the axial drag multiplier."""

    def test_boundary_values(self):
        """Test the multiplier at 0, 17 and 90 degrees."""
        from aerodynamics import axial_drag_multiplier

        assert axial_drag_multiplier(0.0) == pytest.approx(1.0)
        assert axial_drag_multiplier(np.radians(17)) == pytest.approx(1.3)
        assert axial_drag_multiplier(np.pi / 2) == pytest.approx(0.0, abs=1e-12)

    def test_continuous_at_peak(self):
        """Test continuity where the two polynomials meet."""
        from aerodynamics import axial_drag_multiplier

        peak = np.radians(17)
        below = axial_drag_multiplier(peak - 1e-9)
        above = axial_drag_multiplier(peak + 1e-9)
        assert below == pytest.approx(above, rel=1e-6)

    def test_mirrored_past_ninety(self):
        """Test symmetry about 90 degrees and clamping."""
        from aerodynamics import axial_drag_multiplier

        for deg in (5, 30, 60):
            assert axial_drag_multiplier(np.radians(180 - deg)) == pytest.approx(
                axial_drag_multiplier(np.radians(deg)))
        assert axial_drag_multiplier(-0.5) == pytest.approx(1.0)
        assert axial_drag_multiplier(4.0) == pytest.approx(1.0)


class TestAxialDrag:
    """Tests for the axial force coefficient."""

    def _conditions(self, aoa_deg):
        from aerodynamics import FlightConditions
        return FlightConditions(mach=0.3, velocity=100.0, reference_area=1e-3,
                                reference_length=0.035, aoa=np.radians(aoa_deg))

    def test_sign(self):
        """Test that the axial force reverses with flow from behind."""
        from aerodynamics.axial import calculate_axial_drag

        assert calculate_axial_drag(self._conditions(0), 0.5) == pytest.approx(0.5)
        assert calculate_axial_drag(self._conditions(17), 0.5) == pytest.approx(0.65)
        assert calculate_axial_drag(self._conditions(180), 0.5) == pytest.approx(-0.5)
        assert calculate_axial_drag(self._conditions(150), 0.5) < 0
