"""
broadside Miscellaneous Weights

Named weight allowances outside the modelled components.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class MiscWeights:
    """Allowances in tons."""

    vital: int = 0  # below water, inside the protected space
    hull: int = 0  # hull above water
    on: int = 0  # on deck
    above: int = 0  # above deck
    void: int = 0  # void or bulge filling

    def wgt(self) -> int:
        return self.vital + self.hull + self.on + self.above + self.void

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vital": self.vital,
            "hull": self.hull,
            "on": self.on,
            "above": self.above,
            "void": self.void,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MiscWeights":
        return cls(
            vital=int(data["vital"]),
            hull=int(data["hull"]),
            on=int(data["on"]),
            above=int(data["above"]),
            void=int(data["void"]),
        )
