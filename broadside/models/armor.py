"""
broadside Armor Model

Weight and coverage of belts, bulkheads, bulges, protective decks and
conning towers.

Deck armor over the vitals depends on magazine and machinery weight, and
machinery weight depends (through displacement factor) on armor weight. The
caller decides which machinery weight to pass in; see Ship.deck_engine_wgt().
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, TYPE_CHECKING
import math

from broadside.core.constants import ARMOR_LB_PER_FT2_IN, POUND2TON
from broadside.core.enums import LegacyTextEnum, Units
from broadside.core.numeric import fdiv, fmin, powf

if TYPE_CHECKING:
    from broadside.models.hull import Hull


# =============================================================================
# ENUMERATIONS
# =============================================================================

class DeckType(LegacyTextEnum):
    """Layout of the protective deck over the middle body."""
    ARMOURED = "Armoured deck"
    PROTECTED = "Protected deck"
    MULTIPLE = "Multiple armoured decks"
    BOX_MACHINERY = "Box over machinery & magazines"
    BOX_MAGAZINES = "Box over magazines"

    @property
    def area_factor(self) -> float:
        """Plate area over flat deck area (slopes, framing)."""
        return {
            DeckType.ARMOURED: 1.0,
            DeckType.PROTECTED: 1.15,
            DeckType.MULTIPLE: 1.05,
            DeckType.BOX_MACHINERY: 1.0,
            DeckType.BOX_MAGAZINES: 1.0,
        }[self]

    @property
    def is_box(self) -> bool:
        return self in (DeckType.BOX_MACHINERY, DeckType.BOX_MAGAZINES)

    def coverage(self, hull: "Hull", wgt_mag: float, wgt_engine: float) -> float:
        """Share of the waterplane the middle deck covers."""
        full = hull.fd_len + hull.ad_len()
        if self is DeckType.BOX_MACHINERY:
            return fmin(BOX_BASE + BOX_SLOPE * fdiv(wgt_mag + wgt_engine, hull.d()), full)
        if self is DeckType.BOX_MAGAZINES:
            return fmin(BOX_BASE / 2.0 + BOX_SLOPE * fdiv(wgt_mag, hull.d()), full)
        return full


class BulkheadType(LegacyTextEnum):
    """Role of the longitudinal torpedo bulkheads."""
    STRENGTHENED = "Strengthened"  # counts toward longitudinal strength
    ADDITIONAL = "Additional"      # extra protection only


# =============================================================================
# CONSTANTS
# =============================================================================

# Box decks: covered share = base + slope·(protected weight / displacement)
BOX_BASE = 0.2
BOX_SLOPE = 2.0

# Conning tower proportions as multiples of d^(1/3)
CT_DIAMETER = 0.6
CT_HEIGHT = 0.4
CT_ROOF_FACTOR = 0.5  # roof plate at half the wall thickness


def plate_wgt(area: float, thick: float) -> float:
    """Tons of steel plate: area ft², thickness in."""
    return area * thick * ARMOR_LB_PER_FT2_IN / POUND2TON


# =============================================================================
# SECTIONS
# =============================================================================

@dataclass
class ArmorSection:
    """A pair of armor strakes, one each side: thickness in, length and height ft."""

    thick: float = 0.0
    length: float = 0.0
    height: float = 0.0

    def wgt(self, lwl: float, cwp: float, b: float) -> float:
        """
        Weight of both sides, tons.

        Plate area is corrected for the hull's girth: fuller waterplanes
        need less extra plate to follow the side.
        """
        girth = 1.0 + (1.0 - cwp) * fdiv(b, lwl)
        return plate_wgt(fmin(self.length, lwl) * self.height * 2.0 * girth, self.thick)

    def coverage(self, lwl: float) -> float:
        return fdiv(self.length, lwl)

    def to_dict(self) -> Dict[str, Any]:
        return {"thick": self.thick, "length": self.length, "height": self.height}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArmorSection":
        return cls(
            thick=float(data["thick"]),
            length=float(data["length"]),
            height=float(data["height"]),
        )


@dataclass
class ConningTower:
    """Armored conning tower."""

    thick: float = 0.0

    def wgt(self, d: float) -> float:
        size = powf(d, 1.0 / 3.0)
        diameter = CT_DIAMETER * size
        walls = math.pi * diameter * CT_HEIGHT * size
        roof = math.pi * diameter ** 2 / 4.0 * CT_ROOF_FACTOR
        return plate_wgt(walls + roof, self.thick)

    def to_dict(self) -> Dict[str, Any]:
        return {"thick": self.thick}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConningTower":
        return cls(thick=float(data["thick"]))


@dataclass
class DeckArmor:
    """Protective deck: forecastle, middle body and quarterdeck thicknesses."""

    fc: float = 0.0
    md: float = 0.0
    qd: float = 0.0
    kind: DeckType = DeckType.ARMOURED

    def wgt(self, hull: "Hull", wgt_mag: float, wgt_engine: float) -> float:
        wp = hull.wp()
        middle = wp * self.kind.coverage(hull, wgt_mag, wgt_engine) * self.kind.area_factor
        return (
            plate_wgt(wp * hull.fc_len, self.fc)
            + plate_wgt(middle, self.md)
            + plate_wgt(wp * hull.qd_len, self.qd)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"fc": self.fc, "md": self.md, "qd": self.qd, "kind": self.kind.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeckArmor":
        return cls(
            fc=float(data["fc"]),
            md=float(data["md"]),
            qd=float(data["qd"]),
            kind=DeckType(data["kind"]),
        )


# =============================================================================
# ARMOR SCHEME
# =============================================================================

@dataclass
class Armor:
    """Complete armor scheme of a ship."""

    main: ArmorSection = field(default_factory=ArmorSection)
    end: ArmorSection = field(default_factory=ArmorSection)
    upper: ArmorSection = field(default_factory=ArmorSection)
    bulkhead: ArmorSection = field(default_factory=ArmorSection)
    bulge: ArmorSection = field(default_factory=ArmorSection)
    deck: DeckArmor = field(default_factory=DeckArmor)
    ct_fwd: ConningTower = field(default_factory=ConningTower)
    ct_aft: ConningTower = field(default_factory=ConningTower)

    incline: float = 0.0  # main belt, degrees from vertical
    bh_kind: BulkheadType = BulkheadType.STRENGTHENED
    bh_beam: float = 0.0  # beam between torpedo bulkheads, ft
    units: Units = Units.IMPERIAL

    def incline_factor(self) -> float:
        return 1.0 / math.cos(math.radians(self.incline))

    def belts_wgt(self, hull: "Hull") -> float:
        lwl, cwp, b = hull.lwl(), hull.cwp(), hull.b
        return (
            self.main.wgt(lwl, cwp, b) * self.incline_factor()
            + self.end.wgt(lwl, cwp, b)
            + self.upper.wgt(lwl, cwp, b)
            + self.bulkhead.wgt(lwl, cwp, b)
            + self.bulge.wgt(lwl, cwp, b)
        )

    def ct_wgt(self, d: float) -> float:
        return self.ct_fwd.wgt(d) + self.ct_aft.wgt(d)

    def wgt(self, hull: "Hull", wgt_mag: float, wgt_engine: float) -> float:
        """Total hull armor, tons. Gun armor is carried by the batteries."""
        return (
            self.belts_wgt(hull)
            + self.deck.wgt(hull, wgt_mag, wgt_engine)
            + self.ct_wgt(hull.d())
        )

    def belt_coverage(self, lwl: float) -> float:
        """Main belt length as a share of the waterline."""
        return self.main.coverage(lwl)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "main": self.main.to_dict(),
            "end": self.end.to_dict(),
            "upper": self.upper.to_dict(),
            "bulkhead": self.bulkhead.to_dict(),
            "bulge": self.bulge.to_dict(),
            "deck": self.deck.to_dict(),
            "ct_fwd": self.ct_fwd.to_dict(),
            "ct_aft": self.ct_aft.to_dict(),
            "incline": self.incline,
            "bh_kind": self.bh_kind.value,
            "bh_beam": self.bh_beam,
            "units": self.units.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Armor":
        return cls(
            main=ArmorSection.from_dict(data["main"]),
            end=ArmorSection.from_dict(data["end"]),
            upper=ArmorSection.from_dict(data["upper"]),
            bulkhead=ArmorSection.from_dict(data["bulkhead"]),
            bulge=ArmorSection.from_dict(data["bulge"]),
            deck=DeckArmor.from_dict(data["deck"]),
            ct_fwd=ConningTower.from_dict(data["ct_fwd"]),
            ct_aft=ConningTower.from_dict(data["ct_aft"]),
            incline=float(data["incline"]),
            bh_kind=BulkheadType(data["bh_kind"]),
            bh_beam=float(data["bh_beam"]),
            units=Units(data["units"]),
        )
