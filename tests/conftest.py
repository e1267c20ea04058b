"""
Pytest fixtures for airframe and aerodynamics tests.
"""
import pytest

import numpy as np


@pytest.fixture
def three_segment_airframe():
    """Conical nose, cylinder and boat-tail with a smooth finish."""
    from airframe import (
        RocketAirframe,
        NoseCone,
        BodyTube,
        Transition,
        NoseConeShape,
        Finish,
    )

    return RocketAirframe.single_stage(
        "Three Segment",
        [
            NoseCone(
                name="Nose",
                position=0.0,
                length=0.1,
                base_diameter=0.05,
                shape=NoseConeShape.CONICAL,
                finish=Finish.SMOOTH,
            ),
            BodyTube(
                name="Body",
                position=0.1,
                length=0.4,
                outer_diameter=0.05,
                inner_diameter=0.048,
                finish=Finish.SMOOTH,
            ),
            Transition(
                name="Boat Tail",
                position=0.5,
                length=0.05,
                fore_diameter=0.05,
                aft_diameter=0.04,
                shape=NoseConeShape.CONICAL,
                finish=Finish.SMOOTH,
            ),
        ],
    )


@pytest.fixture
def estes_alpha_airframe():
    """Get an Estes Alpha III airframe."""
    from airframe import RocketAirframe
    return RocketAirframe.estes_alpha()


@pytest.fixture
def three_segment_config(three_segment_airframe):
    """Configuration of the three segment airframe with all stages active."""
    from airframe import Configuration
    return Configuration(three_segment_airframe)


@pytest.fixture
def estes_config(estes_alpha_airframe):
    """Configuration of the Estes Alpha III airframe."""
    from airframe import Configuration
    return Configuration(estes_alpha_airframe)


@pytest.fixture
def subsonic_conditions(three_segment_config):
    """Mach 0.3 at 2 degrees angle of attack for the three segment airframe."""
    from aerodynamics import FlightConditions
    return FlightConditions.for_configuration(
        three_segment_config, mach=0.3, velocity=100.0, aoa=np.radians(2.0)
    )


@pytest.fixture
def sample_aero_config_yaml(tmp_path):
    """Aerodynamics config YAML with non-default values."""
    import yaml

    config = {
        'aerodynamics': {
            'large_aoa_threshold': 15.0,
            'discontinuity_tolerance': 0.001,
            'damping_amplification': 1.0,
        }
    }

    config_file = tmp_path / "aero.yaml"
    with open(config_file, 'w') as f:
        yaml.dump(config, f)

    return str(config_file)
