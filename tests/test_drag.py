"""
Tests for friction, pressure and base drag.
"""

import pytest
import numpy as np


def _forces_map(config):
    from aerodynamics import AerodynamicForces
    return {c: AerodynamicForces(component=c) for c in config}


def _stepped_body(nose_diameter, tube_diameter):
    from airframe import RocketAirframe, Configuration, NoseCone, BodyTube, NoseConeShape

    rocket = RocketAirframe.single_stage("Stepped", [
        NoseCone(name="Nose", position=0.0, length=0.1, base_diameter=nose_diameter,
                 shape=NoseConeShape.OGIVE),
        BodyTube(name="Tube", position=0.1, length=0.3, outer_diameter=tube_diameter),
    ])
    return Configuration(rocket)


class TestPressureCoefficients:
    """Tests for stagnation and base pressure coefficients."""

    def test_low_speed_values(self):
        """Test incompressible limits."""
        from aerodynamics import stagnation_cd, base_cd

        assert stagnation_cd(0.0) == pytest.approx(0.85)
        assert base_cd(0.0) == pytest.approx(0.12)

    def test_branches_meet_at_mach_one(self):
        """Test agreement of subsonic and supersonic branches at Mach 1."""
        from aerodynamics import stagnation_cd, base_cd

        assert base_cd(1.0) == pytest.approx(base_cd(1.0 + 1e-9), rel=1e-6)
        # The stagnation fits differ by about half a percent at Mach 1
        assert stagnation_cd(1.0) == pytest.approx(stagnation_cd(1.0 + 1e-9), rel=1e-2)

    def test_supersonic_base(self):
        """Test base pressure decay above Mach 1."""
        from aerodynamics import base_cd

        assert base_cd(2.0) == pytest.approx(0.125)


class TestSkinFriction:
    """Tests for the skin friction coefficient."""

    def test_perfect_finish_regimes(self):
        """Test the constant, laminar and transitional regimes."""
        from aerodynamics.drag import skin_friction_coefficient

        assert skin_friction_coefficient(5e3, 0.0, True) == pytest.approx(1.33e-2)
        assert skin_friction_coefficient(1e5, 0.0, True) == pytest.approx(1.328 / np.sqrt(1e5))

        re = 2e6
        expected = 1.0 / (1.5 * np.log(re) - 5.6) ** 2 - 1700 / re
        assert skin_friction_coefficient(re, 0.0, True) == pytest.approx(expected)

    def test_perfect_finish_continuous_in_reynolds(self):
        """Test continuity across Re = 1e4 and Re = 5.39e5."""
        from aerodynamics.drag import skin_friction_coefficient

        for re in (1e4, 5.39e5):
            below = skin_friction_coefficient(re * (1 - 1e-9), 0.3, True)
            above = skin_friction_coefficient(re * (1 + 1e-9), 0.3, True)
            assert below == pytest.approx(above, rel=2e-3)

    def test_turbulent_continuous_in_reynolds(self):
        """Test continuity of the fully turbulent fit at Re = 1e4."""
        from aerodynamics.drag import skin_friction_coefficient

        below = skin_friction_coefficient(1e4 * (1 - 1e-9), 0.3, False)
        above = skin_friction_coefficient(1e4 * (1 + 1e-9), 0.3, False)
        assert below == pytest.approx(above, rel=2e-3)

    @pytest.mark.parametrize("perfect", [True, False])
    @pytest.mark.parametrize("re", [5e5, 2e6, 1e7])
    def test_continuous_across_mach_blend(self, perfect, re):
        """Test continuity at both ends of the transonic blend."""
        from aerodynamics.drag import skin_friction_coefficient

        for mach in (0.9, 1.1):
            below = skin_friction_coefficient(re, mach - 1e-9, perfect)
            above = skin_friction_coefficient(re, mach + 1e-9, perfect)
            assert below == pytest.approx(above, rel=1e-6)

    def test_compressibility_ramp(self):
        """Test that the perfect-finish correction fades in from Re = 1e6."""
        from aerodynamics.drag import skin_friction_coefficient

        base = 1.0 / (1.5 * np.log(1e6) - 5.6) ** 2 - 1700 / 1e6
        assert skin_friction_coefficient(1e6, 0.8, True) == pytest.approx(base)

        re = 2e6
        uncorrected = 1.0 / (1.5 * np.log(re) - 5.6) ** 2 - 1700 / re
        expected = uncorrected * (1 - 0.1 * 0.8**2 * 0.5)
        assert skin_friction_coefficient(re, 0.8, True) == pytest.approx(expected)

    def test_roughness_correction_continuous(self):
        """Test continuity of the roughness correction blend."""
        from aerodynamics.drag import roughness_correction

        for mach in (0.9, 1.1):
            assert roughness_correction(mach - 1e-9) == pytest.approx(
                roughness_correction(mach + 1e-9), rel=1e-6)

    def test_roughness_limited_value(self):
        """Test the roughness-limited coefficient."""
        from airframe import Finish
        from aerodynamics.drag import roughness_limited_cf

        value = roughness_limited_cf(Finish.NORMAL, 0.5, 1.0)
        assert value == pytest.approx(0.032 * (60e-6 / 0.5) ** 0.2)


class TestFrictionDrag:
    """Tests for configuration friction drag."""

    def test_map_sums_to_total(self, three_segment_config, subsonic_conditions):
        """Test that per-component friction adds up to the total."""
        from aerodynamics import CalculatorRegistry
        from aerodynamics.drag import calculate_friction_drag

        registry = CalculatorRegistry(three_segment_config.rocket)
        forces_map = _forces_map(three_segment_config)
        total = calculate_friction_drag(three_segment_config, registry,
                                        subsonic_conditions, forces_map)

        assert total > 0
        assert sum(f.friction_cd for f in forces_map.values()) == pytest.approx(total)

    def test_body_fineness_correction(self, three_segment_config, subsonic_conditions):
        """Test the body friction against the closed form."""
        from aerodynamics import CalculatorRegistry
        from aerodynamics.drag import (
            calculate_friction_drag, skin_friction_coefficient, roughness_correction,
            roughness_limited_cf,
        )
        from airframe import Finish

        config = three_segment_config
        registry = CalculatorRegistry(config.rocket)
        total = calculate_friction_drag(config, registry, subsonic_conditions)

        re = 100.0 * 0.55 / 1.5e-5
        cf = max(skin_friction_coefficient(re, 0.3, False),
                 roughness_limited_cf(Finish.SMOOTH, 0.55, roughness_correction(0.3)))
        wet = sum(c.wetted_area for c in config.symmetric_components())
        fineness = (0.55 + 0.0001) / 0.025
        expected = cf * wet * (1 + 1 / (2 * fineness)) / subsonic_conditions.reference_area

        assert total == pytest.approx(expected)

    def test_perfect_finish_reduces_friction(self, three_segment_config):
        """Test that a laminar boundary layer lowers friction at low Reynolds."""
        from aerodynamics import CalculatorRegistry, FlightConditions
        from aerodynamics.drag import calculate_friction_drag

        config = three_segment_config
        conditions = FlightConditions.for_configuration(config, mach=0.05, velocity=10.0)

        regular = calculate_friction_drag(config, CalculatorRegistry(config.rocket), conditions)
        config.rocket.set_perfect_finish(True)
        perfect = calculate_friction_drag(config, CalculatorRegistry(config.rocket), conditions)

        assert perfect < regular

    def test_rough_finish_increases_friction(self, three_segment_config, subsonic_conditions):
        """Test that surface roughness limits the coefficient from below."""
        from airframe import Finish
        from aerodynamics import CalculatorRegistry
        from aerodynamics.drag import calculate_friction_drag

        config = three_segment_config
        smooth = calculate_friction_drag(config, CalculatorRegistry(config.rocket),
                                         subsonic_conditions)
        for comp in config:
            comp.finish = Finish.ROUGH
        config.rocket.fire_change()
        rough = calculate_friction_drag(config, CalculatorRegistry(config.rocket),
                                        subsonic_conditions)

        assert rough > smooth

    def test_fin_friction(self, estes_config):
        """Test fin friction including the thickness correction."""
        from aerodynamics import CalculatorRegistry, FlightConditions
        from aerodynamics.drag import calculate_friction_drag

        conditions = FlightConditions.for_configuration(estes_config, mach=0.3, velocity=100.0)
        registry = CalculatorRegistry(estes_config.rocket)
        forces_map = _forces_map(estes_config)
        calculate_friction_drag(estes_config, registry, conditions, forces_map)

        nose, tube, lug, fins, mount = estes_config.rocket.components
        assert forces_map[fins].friction_cd > 0
        assert np.isnan(forces_map[lug].friction_cd)
        assert np.isnan(forces_map[mount].friction_cd)


class TestPressureDrag:
    """Tests for pressure and stagnation drag."""

    def test_conical_nose(self, three_segment_config, subsonic_conditions):
        """Test forebody drag of a conical nose on a continuous body."""
        from aerodynamics import CalculatorRegistry
        from aerodynamics.drag import calculate_pressure_drag

        config = three_segment_config
        forces_map = _forces_map(config)
        total = calculate_pressure_drag(config, CalculatorRegistry(config.rocket),
                                        subsonic_conditions, forces_map)

        sin2 = 0.025**2 / (0.1**2 + 0.025**2)
        nose = config.rocket.components[0]
        assert forces_map[nose].pressure_cd == pytest.approx(0.8 * sin2)
        # Gentle boat-tail and cylinder add nothing
        assert total == pytest.approx(0.8 * sin2)

    def test_forward_step_stagnation(self):
        """Test stagnation drag on a forward-facing diameter step."""
        from aerodynamics import CalculatorRegistry, FlightConditions, stagnation_cd
        from aerodynamics.drag import calculate_pressure_drag

        config = _stepped_body(nose_diameter=0.04, tube_diameter=0.05)
        conditions = FlightConditions.for_configuration(config, mach=0.3, velocity=100.0)
        forces_map = _forces_map(config)
        calculate_pressure_drag(config, CalculatorRegistry(config.rocket), conditions, forces_map)

        tube = config.rocket.components[1]
        step = np.pi * (0.025**2 - 0.02**2) / conditions.reference_area
        assert forces_map[tube].pressure_cd == pytest.approx(stagnation_cd(0.3) * step)

    def test_launch_lug(self, estes_config):
        """Test stagnation drag on the launch lug annulus."""
        from aerodynamics import CalculatorRegistry, FlightConditions, stagnation_cd
        from aerodynamics.drag import calculate_pressure_drag

        conditions = FlightConditions.for_configuration(estes_config, mach=0.3, velocity=100.0)
        forces_map = _forces_map(estes_config)
        calculate_pressure_drag(estes_config, CalculatorRegistry(estes_config.rocket),
                                conditions, forces_map)

        lug = estes_config.rocket.components[2]
        expected = stagnation_cd(0.3) * lug.frontal_area / conditions.reference_area
        assert forces_map[lug].pressure_cd == pytest.approx(expected)


class TestBaseDrag:
    """Tests for base drag."""

    def test_aft_end(self, three_segment_config, subsonic_conditions):
        """Test base drag of the aft end on the last body component."""
        from aerodynamics import base_cd
        from aerodynamics.drag import calculate_base_drag

        config = three_segment_config
        forces_map = _forces_map(config)
        total = calculate_base_drag(config, subsonic_conditions, forces_map)

        tail = config.rocket.components[2]
        expected = base_cd(0.3) * (0.02 / 0.025) ** 2
        assert total == pytest.approx(expected)
        assert forces_map[tail].base_cd == pytest.approx(expected)

    def test_backward_step(self):
        """Test base drag of a backward step attributed to the part in front."""
        from aerodynamics import FlightConditions, base_cd
        from aerodynamics.drag import calculate_base_drag

        config = _stepped_body(nose_diameter=0.05, tube_diameter=0.04)
        conditions = FlightConditions.for_configuration(config, mach=0.3, velocity=100.0)
        forces_map = _forces_map(config)
        total = calculate_base_drag(config, conditions, forces_map)

        nose, tube = config.rocket.components
        step = base_cd(0.3) * (0.025**2 - 0.02**2) / 0.025**2
        aft = base_cd(0.3) * (0.02 / 0.025) ** 2
        assert forces_map[nose].base_cd == pytest.approx(step)
        assert forces_map[tube].base_cd == pytest.approx(aft)
        assert total == pytest.approx(step + aft)
