"""
Per-component Barrowman calculators.

One calculator class per aerodynamic component kind, all implementing
the RocketComponentCalc contract.
"""

from .base import RocketComponentCalc
from .symmetric import SymmetricComponentCalc, NoseConeCalc, TransitionCalc, BodyTubeCalc
from .fins import FinSetCalc
from .lug import LaunchLugCalc

__all__ = [
    "RocketComponentCalc",
    "SymmetricComponentCalc",
    "NoseConeCalc",
    "TransitionCalc",
    "BodyTubeCalc",
    "FinSetCalc",
    "LaunchLugCalc",
]
