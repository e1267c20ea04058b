"""
Advisory warnings raised during aerodynamic calculations.

Warnings never abort a calculation. A WarningSet keeps at most one
warning per kind; a repeated large angle-of-attack warning keeps the
largest angle seen.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional
import logging
import math

logger = logging.getLogger(__name__)


class WarningKind(Enum):
    LARGE_AOA = "large_aoa"
    DISCONTINUITY = "discontinuity"
    SUPERSONIC_BODY = "supersonic_body"


@dataclass(frozen=True)
class AeroWarning:
    """One advisory condition"""
    kind: WarningKind
    message: str
    value: Optional[float] = None

    @classmethod
    def large_aoa(cls, aoa: float) -> "AeroWarning":
        return cls(
            WarningKind.LARGE_AOA,
            f"Large angle of attack encountered ({math.degrees(aoa):.1f} deg)",
            float(aoa),
        )

    @classmethod
    def discontinuity(cls) -> "AeroWarning":
        return cls(WarningKind.DISCONTINUITY, "Discontinuity in rocket body diameter")

    @classmethod
    def supersonic_body(cls) -> "AeroWarning":
        return cls(
            WarningKind.SUPERSONIC_BODY,
            "Body calculations may not be entirely accurate at supersonic speeds",
        )

    def __str__(self) -> str:
        return self.message


class WarningSet:
    """Append-only collection of warnings, one per kind"""

    def __init__(self):
        self._warnings: Dict[WarningKind, AeroWarning] = {}

    def add(self, warning: AeroWarning) -> bool:
        """
        Record a warning.

        Returns:
            True if the set changed
        """
        existing = self._warnings.get(warning.kind)
        if existing is not None:
            if warning.kind != WarningKind.LARGE_AOA or not warning.value > existing.value:
                return False
        else:
            logger.debug(f"Aerodynamic warning: {warning}")
        self._warnings[warning.kind] = warning
        return True

    def get(self, kind: WarningKind) -> Optional[AeroWarning]:
        return self._warnings.get(kind)

    def __contains__(self, kind: WarningKind) -> bool:
        return kind in self._warnings

    def __iter__(self) -> Iterator[AeroWarning]:
        return iter(list(self._warnings.values()))

    def __len__(self) -> int:
        return len(self._warnings)

    def __repr__(self) -> str:
        return f"WarningSet({[w.kind.value for w in self]})"


class IgnoreWarningSet(WarningSet):
    """Warning sink that discards everything"""

    def add(self, warning: AeroWarning) -> bool:
        return False
