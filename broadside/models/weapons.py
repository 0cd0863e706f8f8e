"""
broadside Weapons Model

Gun batteries, torpedo mounts, mines and anti-submarine weapons: weights,
placement, broadside and the space torpedo mounts take from the deck or the
hull.

Gun and mount weights are tons; shell and broadside weights are lb.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, TYPE_CHECKING
import math

from broadside.core.constants import FT3_PER_TON_SEA, POUND2TON
from broadside.core.enums import LegacyTextEnum, Units
from broadside.core.numeric import fdiv
from broadside.models.armor import plate_wgt

if TYPE_CHECKING:
    from broadside.models.hull import Hull


# =============================================================================
# GUN ENUMERATIONS
# =============================================================================

class GunType(LegacyTextEnum):
    MUZZLE_LOADING = "Muzzle loading"
    BREECH_LOADING = "Breech loading"
    QUICK_FIRING = "Quick firing"
    ANTI_AIR = "Anti-air"
    DUAL_PURPOSE = "Dual purpose"
    MACHINE_GUN = "Machine gun"

    @property
    def wgt_factor(self) -> float:
        return {
            GunType.MUZZLE_LOADING: 1.2,
            GunType.BREECH_LOADING: 1.0,
            GunType.QUICK_FIRING: 1.1,
            GunType.ANTI_AIR: 1.0,
            GunType.DUAL_PURPOSE: 1.15,
            GunType.MACHINE_GUN: 0.75,
        }[self]


class MountType(LegacyTextEnum):
    BROADSIDE = "Broadside"
    COLES_TURRET = "Coles/Ericsson Turret"
    OPEN_BARBETTE = "Open barbette"
    CLOSED_BARBETTE = "Turret on barbette"
    DECK_AND_HOIST = "Deck and hoist"
    DECK = "Deck"

    @property
    def mount_factor(self) -> float:
        """Mount weight per ton of gun."""
        return {
            MountType.BROADSIDE: 0.6,
            MountType.COLES_TURRET: 3.0,
            MountType.OPEN_BARBETTE: 1.2,
            MountType.CLOSED_BARBETTE: 2.5,
            MountType.DECK_AND_HOIST: 0.8,
            MountType.DECK: 0.5,
        }[self]

    @property
    def wgt_adj(self) -> float:
        """Share of gun weight counted as borne (trainable, high) weight."""
        return {
            MountType.BROADSIDE: 0.5,
            MountType.COLES_TURRET: 1.8,
            MountType.OPEN_BARBETTE: 1.0,
            MountType.CLOSED_BARBETTE: 1.6,
            MountType.DECK_AND_HOIST: 0.8,
            MountType.DECK: 0.6,
        }[self]

    @property
    def has_barbette(self) -> bool:
        return self in (MountType.OPEN_BARBETTE, MountType.CLOSED_BARBETTE, MountType.DECK_AND_HOIST)


class GunLayoutType(LegacyTextEnum):
    SINGLE = "Single"
    TWIN = "Twin"
    TRIPLE = "Triple"
    QUAD = "Quad"
    QUINTUPLE = "Quintuple"

    @property
    def guns(self) -> int:
        return list(GunLayoutType).index(self) + 1


class GunDistributionType(LegacyTextEnum):
    """
    Where a group's mounts sit along the hull.

    Positions are fractions of waterline length from midships, negative
    forward.
    """
    CENTERLINE_EVEN = "Centreline, evenly spread"
    CENTERLINE_ENDS = "Centreline ends, evenly spread"
    CENTERLINE_FD = "Centreline, forward deck"
    CENTERLINE_AD = "Centreline, aft deck"
    CENTERLINE_FWD = "Centreline, all forward"
    CENTERLINE_AFT = "Centreline, all aft"
    SIDES_EVEN = "Sides, evenly spread"
    SIDES_ENDS = "Sides ends, evenly spread"
    SIDES_FD = "Sides, forward deck"
    SIDES_AD = "Sides, aft deck"
    SIDES_ENDS_FD = "Sides ends, forward deck"

    @property
    def is_sides(self) -> bool:
        return self.name.startswith("SIDES")

    @property
    def broadside_fraction(self) -> float:
        """Share of the group's mounts bearing on one side."""
        return 0.5 if self.is_sides else 1.0

    @property
    def super_aft(self) -> bool:
        """Raised mounts of a spread layout are the aft ones."""
        return self in (
            GunDistributionType.CENTERLINE_EVEN,
            GunDistributionType.CENTERLINE_ENDS,
            GunDistributionType.SIDES_EVEN,
            GunDistributionType.SIDES_ENDS,
        )

    @property
    def super_factor_long(self) -> bool:
        """Concentrated layout that takes the superfiring weight penalty."""
        return self not in (
            GunDistributionType.CENTERLINE_EVEN,
            GunDistributionType.CENTERLINE_ENDS,
            GunDistributionType.SIDES_EVEN,
            GunDistributionType.SIDES_ENDS,
        )

    @property
    def names_superfiring(self) -> bool:
        """Raised mounts in this layout are described as superfiring."""
        return self not in (
            GunDistributionType.CENTERLINE_EVEN,
            GunDistributionType.CENTERLINE_FD,
            GunDistributionType.CENTERLINE_AD,
            GunDistributionType.SIDES_EVEN,
            GunDistributionType.SIDES_FD,
            GunDistributionType.SIDES_AD,
        )

    def g1_gun_position(self, fd_len: float, ad_len: float) -> float:
        """Position of the group when it is the first group of a battery."""
        return self._positions(fd_len, ad_len)[0]

    def g2_gun_position(self, fd_len: float, ad_len: float) -> float:
        """Position of the group when it is the second group of a battery."""
        return self._positions(fd_len, ad_len)[1]

    def _positions(self, fd_len: float, ad_len: float):
        kind = GunDistributionType
        if self in (kind.CENTERLINE_EVEN, kind.SIDES_EVEN):
            return 0.0, 0.0
        if self in (kind.CENTERLINE_ENDS, kind.SIDES_ENDS):
            return -0.35, 0.35
        if self in (kind.CENTERLINE_FD, kind.SIDES_FD):
            return -fd_len * 0.75, -fd_len * 0.25
        if self in (kind.CENTERLINE_AD, kind.SIDES_AD):
            return ad_len * 0.25, ad_len * 0.75
        if self is kind.CENTERLINE_FWD:
            return -0.4, -0.3
        if self is kind.CENTERLINE_AFT:
            return 0.3, 0.4
        return -fd_len * 0.5, -fd_len * 0.25

    def desc(self, num: int, fwd_len: float) -> str:
        """
        Placement text for a group of num mounts.

        fwd_len is forecastle plus forward deck length: a forward deck
        reaching past midships puts its guns amidships.
        """
        kind = GunDistributionType
        side = "sides" if self.is_sides else "centreline"
        if self in (kind.CENTERLINE_EVEN, kind.SIDES_EVEN):
            return f"{side}, evenly spread" if num > 1 else f"{side}, amidships"
        if self in (kind.CENTERLINE_ENDS, kind.SIDES_ENDS):
            return f"{side} ends, evenly spread" if num > 1 else f"{side}, forward"
        if self in (kind.CENTERLINE_FD, kind.SIDES_FD):
            return f"{side}, amidships (forward deck)" if fwd_len > 0.5 else f"{side}, forward deck"
        if self in (kind.CENTERLINE_AD, kind.SIDES_AD):
            return f"{side}, amidships (aft deck)" if fwd_len < 0.5 else f"{side}, aft deck"
        if self is kind.CENTERLINE_FWD:
            return "centreline, all forward"
        if self is kind.CENTERLINE_AFT:
            return "centreline, all aft"
        return "sides, amidships (forward deck)" if fwd_len > 0.5 else "sides ends, forward deck"


# =============================================================================
# GUN CONSTANTS
# =============================================================================

GUN_WGT_DIVISOR = 1340.0  # diam³·calibers per ton of gun
GUN_YEAR_BASE = 1900
GUN_YEAR_SPAN = 100.0
MAGAZINE_FACTOR = 1.5  # charges, cases and handling per lb of shell

# Mount armor plate as multiples of the mount footprint
MOUNT_SIZE_PER_INCH = 1.25  # ft of mount per inch of caliber
MOUNT_SIZE_BASE = 5.0
FACE_AREA = 0.25
BACK_AREA = 0.75
BARBETTE_DIAMETER = 0.8

DECK_HEIGHT = 8.0  # ft between decks

# Hull-mounted guns: freeboard below which they are washed out
HULL_MOUNT_ANY_SEA = 12.0
HULL_MOUNT_LIGHT_SEA = 16.0
LOWER_DECK_ANY_SEA = 19.0
LOWER_DECK_LIGHT_SEA = 24.0


# =============================================================================
# GUN BATTERY
# =============================================================================

@dataclass
class SubBattery:
    """Firing group: mounts above, on and below the main deck."""

    layout: GunLayoutType = GunLayoutType.SINGLE
    distribution: GunDistributionType = GunDistributionType.CENTERLINE_EVEN
    above: int = 0
    on: int = 0
    below: int = 0
    two_mounts_up: bool = False
    lower_deck: bool = False

    def num_mounts(self) -> int:
        return self.above + self.on + self.below

    def to_dict(self) -> Dict[str, Any]:
        return {
            "layout": self.layout.value,
            "distribution": self.distribution.value,
            "above": self.above,
            "on": self.on,
            "below": self.below,
            "two_mounts_up": self.two_mounts_up,
            "lower_deck": self.lower_deck,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SubBattery":
        return cls(
            layout=GunLayoutType(data["layout"]),
            distribution=GunDistributionType(data["distribution"]),
            above=int(data["above"]),
            on=int(data["on"]),
            below=int(data["below"]),
            two_mounts_up=bool(data["two_mounts_up"]),
            lower_deck=bool(data["lower_deck"]),
        )


@dataclass
class Battery:
    """Guns of one caliber and mount type."""

    num: int = 0
    diam: float = 0.0  # in
    length: float = 0.0  # calibers
    kind: GunType = GunType.BREECH_LOADING
    year: int = 1920
    shells: int = 0  # per gun
    mount_num: int = 0
    mount_kind: MountType = MountType.DECK
    groups: List[SubBattery] = field(default_factory=lambda: [SubBattery(), SubBattery()])

    armor_face: float = 0.0
    armor_back: float = 0.0
    armor_barb: float = 0.0
    units: Units = Units.IMPERIAL

    _shell_wgt: float = 0.0  # lb; zero means derived from caliber

    # ==================== Shells ====================

    def shell_wgt(self) -> float:
        return self._shell_wgt if self._shell_wgt > 0 else self.shell_wgt_calc()

    def set_shell_wgt(self, wgt: float) -> None:
        self._shell_wgt = wgt

    def shell_wgt_calc(self) -> float:
        """Typical shell for the caliber, lb: diam³ / 2."""
        return self.diam ** 3 / 2.0

    # ==================== Weights ====================

    def guns_per_mount(self) -> float:
        if self.mount_num <= 0:
            return 0.0
        return self.num / self.mount_num

    def gun_unit_wgt(self) -> float:
        """Weight of one gun, tons."""
        year_factor = 1.0 + max(0, GUN_YEAR_BASE - self.year) / GUN_YEAR_SPAN
        return self.diam ** 3 * self.length / GUN_WGT_DIVISOR * self.kind.wgt_factor * year_factor

    def gun_wgt(self) -> float:
        return self.gun_unit_wgt() * self.num

    def mount_wgt(self) -> float:
        return self.gun_wgt() * self.mount_kind.mount_factor

    def mag_wgt(self) -> float:
        """Magazine, tons."""
        return self.num * self.shells * self.shell_wgt() * MAGAZINE_FACTOR / POUND2TON

    def mount_size(self) -> float:
        """Diameter of one mount, ft."""
        return self.diam * MOUNT_SIZE_PER_INCH * math.sqrt(self.guns_per_mount()) + MOUNT_SIZE_BASE

    def armor_wgt(self, hull: "Hull") -> float:
        """Gunhouse and barbette armor of all mounts, tons."""
        if self.mount_num <= 0 or self.diam <= 0:
            return 0.0
        size = self.mount_size()
        per_mount = plate_wgt(size * size * FACE_AREA, self.armor_face) + plate_wgt(size * size * BACK_AREA, self.armor_back)
        if self.mount_kind.has_barbette:
            barbette = math.pi * size * BARBETTE_DIAMETER * max(hull.freeboard_dist(), 0.0)
            per_mount += plate_wgt(barbette, self.armor_barb)
        return per_mount * self.mount_num

    def broadside_wgt(self) -> float:
        """Shell weight of the guns bearing on one side, lb."""
        if self.mount_num <= 0:
            return 0.0
        mounts = sum(g.num_mounts() * g.distribution.broadside_fraction for g in self.groups)
        return mounts * self.guns_per_mount() * self.shell_wgt()

    def concentration(self, wgt_broad: float) -> float:
        """Penalty for a broadside dominated by this battery."""
        if wgt_broad <= 0 or self.mount_num <= 0:
            return 0.0
        share = self.broadside_wgt() / wgt_broad
        return share ** 2 * self.guns_per_mount() / 2.0

    # ==================== Placement ====================

    def super_(self, hull: "Hull") -> float:
        """
        Mean height factor of the mounts relative to the main deck.

        A raised mount sits a deck height above the freeboard, two if it is
        stacked; hull mounts a deck (or two on a lower deck) below it.
        """
        free = hull.freeboard_dist()
        if self.mount_num <= 0 or free <= 0:
            return 1.0
        total = 0.0
        for g in self.groups:
            up = 2.0 if g.two_mounts_up else 1.0
            down = 2.0 if g.lower_deck else 1.0
            total += g.above * (free + DECK_HEIGHT * up) / free
            total += g.on
            total += g.below * max(free - DECK_HEIGHT * down, 0.0) / free
        return total / self.mount_num

    def broad_and_below(self) -> bool:
        """Empty, or every mount broadside mounted below the main deck."""
        if self.num == 0:
            return True
        below = sum(g.below for g in self.groups)
        return self.mount_kind is MountType.BROADSIDE and below == self.mount_num

    def free(self, hull: "Hull") -> float:
        return hull.freeboard_dist()

    def hull_mount_limit(self, hull: "Hull", lower_deck: bool) -> str:
        """Sea state that washes out guns mounted in the hull."""
        free = self.free(hull)
        if free < (LOWER_DECK_ANY_SEA if lower_deck else HULL_MOUNT_ANY_SEA):
            return "Limited use in any sea"
        if free < (LOWER_DECK_LIGHT_SEA if lower_deck else HULL_MOUNT_LIGHT_SEA):
            return "Limited use in all but light seas"
        return "Limited use in heavy seas"

    def is_superfiring(self, index: int, corrected: bool = False) -> bool:
        """
        Whether group `index` has mounts firing over others.

        The second group's test compares against its own mount count, as
        the legacy program does; corrected=True compares against the mounts
        left over by the first group instead.
        """
        g = self.groups[index]
        if g.above <= 0 or not g.distribution.names_superfiring:
            return False
        if self.mount_kind in (MountType.BROADSIDE, MountType.COLES_TURRET):
            return False
        if index == 0:
            return g.above < self.mount_num - self.groups[1].above
        if corrected:
            return g.above < self.mount_num - self.groups[0].above
        return g.above < 2 * g.num_mounts() - g.above

    # ==================== Serialization ====================

    def to_dict(self) -> Dict[str, Any]:
        return {
            "num": self.num,
            "diam": self.diam,
            "len": self.length,
            "kind": self.kind.value,
            "year": self.year,
            "shells": self.shells,
            "shell_wgt": self._shell_wgt,
            "mount_num": self.mount_num,
            "mount_kind": self.mount_kind.value,
            "groups": [g.to_dict() for g in self.groups],
            "armor_face": self.armor_face,
            "armor_back": self.armor_back,
            "armor_barb": self.armor_barb,
            "units": self.units.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Battery":
        groups = [SubBattery.from_dict(g) for g in data["groups"]]
        if len(groups) != 2:
            raise ValueError(f"battery needs 2 gun groups, got {len(groups)}")
        return cls(
            num=int(data["num"]),
            diam=float(data["diam"]),
            length=float(data["len"]),
            kind=GunType(data["kind"]),
            year=int(data["year"]),
            shells=int(data["shells"]),
            _shell_wgt=float(data["shell_wgt"]),
            mount_num=int(data["mount_num"]),
            mount_kind=MountType(data["mount_kind"]),
            groups=groups,
            armor_face=float(data["armor_face"]),
            armor_back=float(data["armor_back"]),
            armor_barb=float(data["armor_barb"]),
            units=Units(data["units"]),
        )


# =============================================================================
# TORPEDOES
# =============================================================================

class TorpedoMountType(LegacyTextEnum):
    FIXED_TUBES = "Fixed tubes"
    DECK_SIDE_TUBES = "Deck side tubes"
    CENTER_TUBES = "Centre rotating tubes"
    DECK_RELOADS = "Deck reloads"
    BOW_TUBES = "Bow tubes"
    STERN_TUBES = "Stern tubes"
    BOW_AND_STERN_TUBES = "Bow & stern tubes"
    SUBMERGED_SIDE_TUBES = "Submerged side tubes"
    SUBMERGED_RELOADS = "Submerged reloads"

    @property
    def is_deck(self) -> bool:
        return self in (
            TorpedoMountType.FIXED_TUBES,
            TorpedoMountType.DECK_SIDE_TUBES,
            TorpedoMountType.CENTER_TUBES,
            TorpedoMountType.DECK_RELOADS,
        )

    @property
    def is_hull(self) -> bool:
        return not self.is_deck

    @property
    def mount_factor(self) -> float:
        """Tube or rack weight per ton of torpedo."""
        return {
            TorpedoMountType.FIXED_TUBES: 0.25,
            TorpedoMountType.DECK_SIDE_TUBES: 0.5,
            TorpedoMountType.CENTER_TUBES: 0.75,
            TorpedoMountType.DECK_RELOADS: 0.1,
            TorpedoMountType.BOW_TUBES: 1.0,
            TorpedoMountType.STERN_TUBES: 1.0,
            TorpedoMountType.BOW_AND_STERN_TUBES: 1.0,
            TorpedoMountType.SUBMERGED_SIDE_TUBES: 1.25,
            TorpedoMountType.SUBMERGED_RELOADS: 0.1,
        }[self]


# Deck area per torpedo: centre mounts span a share of beam, the rest
# take a packed length x diameter footprint
CENTER_BEAM_SHARE = 0.67
TUBE_FOOTPRINT_PACKING = 0.95
TRAINING_FOOTPRINT = 2.0  # side tubes and deck reloads need working room

# Hull volume per ft³ of torpedo
TUBE_VOLUME_FACTOR = 24.0
RELOAD_VOLUME_FACTOR = 4.0


@dataclass
class Torpedoes:
    """Torpedoes of one size and mount type."""

    year: int = 1920
    num: int = 0
    mounts: int = 0
    diam: float = 0.0  # in
    length: float = 0.0  # ft
    mount_kind: TorpedoMountType = TorpedoMountType.FIXED_TUBES
    units: Units = Units.IMPERIAL

    def volume(self) -> float:
        """Volume of one torpedo, ft³."""
        return math.pi / 4.0 * (self.diam / 12.0) ** 2 * self.length

    def wgt_torp(self) -> float:
        return self.volume() / FT3_PER_TON_SEA

    def wgt_weaps(self) -> float:
        return self.num * self.wgt_torp()

    def wgt_mounts(self) -> float:
        return self.wgt_weaps() * self.mount_kind.mount_factor

    def wgt(self) -> float:
        return self.wgt_weaps() + self.wgt_mounts()

    def deck_space(self, b: float) -> float:
        """Deck area taken by deck-mounted torpedoes, ft²."""
        kind = self.mount_kind
        if not kind.is_deck:
            return 0.0
        if kind is TorpedoMountType.CENTER_TUBES:
            return self.num * self.length * b * CENTER_BEAM_SHARE
        footprint = self.num * self.length * self.diam / 12.0 * TUBE_FOOTPRINT_PACKING
        if kind in (TorpedoMountType.DECK_SIDE_TUBES, TorpedoMountType.DECK_RELOADS):
            return footprint * TRAINING_FOOTPRINT
        return footprint

    def hull_space(self) -> float:
        """Hull volume taken by tubes and reloads below deck, ft³."""
        kind = self.mount_kind
        if kind.is_deck:
            return 0.0
        factor = RELOAD_VOLUME_FACTOR if kind is TorpedoMountType.SUBMERGED_RELOADS else TUBE_VOLUME_FACTOR
        return self.num * self.volume() * factor

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "num": self.num,
            "mounts": self.mounts,
            "diam": self.diam,
            "len": self.length,
            "mount_kind": self.mount_kind.value,
            "units": self.units.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Torpedoes":
        return cls(
            year=int(data["year"]),
            num=int(data["num"]),
            mounts=int(data["mounts"]),
            diam=float(data["diam"]),
            length=float(data["len"]),
            mount_kind=TorpedoMountType(data["mount_kind"]),
            units=Units(data["units"]),
        )


# =============================================================================
# MINES AND ASW
# =============================================================================

class MineType(LegacyTextEnum):
    SIDE_RAILS = "Side rails"
    STERN_RAILS = "Stern rails"
    BOW_TUBES = "Bow tubes"
    STERN_TUBES = "Stern tubes"
    SIDE_TUBES = "Side tubes"

    @property
    def mount_factor(self) -> float:
        return 0.1 if self in (MineType.SIDE_RAILS, MineType.STERN_RAILS) else 0.25

    @property
    def desc(self) -> str:
        return f"in {self.value.lower()}"


class ASWType(LegacyTextEnum):
    STERN_RACKS = "Stern racks"
    THROWERS = "Depth charge throwers"
    AHEAD_MORTAR = "Ahead throwing mortar"
    HEAVY_MORTAR = "Heavy ahead throwing mortar"

    @property
    def mount_factor(self) -> float:
        return {
            ASWType.STERN_RACKS: 0.1,
            ASWType.THROWERS: 0.5,
            ASWType.AHEAD_MORTAR: 1.0,
            ASWType.HEAVY_MORTAR: 1.5,
        }[self]

    @property
    def desc(self) -> str:
        if self in (ASWType.STERN_RACKS, ASWType.THROWERS):
            return "Depth charges"
        return "Ahead throwing AS mortars"

    @property
    def dc_desc(self) -> str:
        return f"in {self.value.lower()}" if self is ASWType.STERN_RACKS else f"from {self.value.lower()}"


@dataclass
class Mines:
    """Mines carried, with reloads."""

    year: int = 1920
    num: int = 0
    reload: int = 0
    wgt: float = 0.0  # lb per mine
    mount_kind: MineType = MineType.STERN_RAILS
    units: Units = Units.IMPERIAL

    def wgt_weaps(self) -> float:
        return (self.num + self.reload) * self.wgt / POUND2TON

    def wgt_mounts(self) -> float:
        return self.wgt_weaps() * self.mount_kind.mount_factor

    def total_wgt(self) -> float:
        return self.wgt_weaps() + self.wgt_mounts()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "num": self.num,
            "reload": self.reload,
            "wgt": self.wgt,
            "mount_kind": self.mount_kind.value,
            "units": self.units.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Mines":
        return cls(
            year=int(data["year"]),
            num=int(data["num"]),
            reload=int(data["reload"]),
            wgt=float(data["wgt"]),
            mount_kind=MineType(data["mount_kind"]),
            units=Units(data["units"]),
        )


@dataclass
class ASW:
    """Anti-submarine weapons of one kind."""

    year: int = 1920
    num: int = 0
    reload: int = 0
    wgt: float = 0.0  # lb per charge
    kind: ASWType = ASWType.STERN_RACKS
    units: Units = Units.IMPERIAL

    def wgt_weaps(self) -> float:
        return (self.num + self.reload) * self.wgt / POUND2TON

    def wgt_mounts(self) -> float:
        return self.wgt_weaps() * self.kind.mount_factor

    def total_wgt(self) -> float:
        return self.wgt_weaps() + self.wgt_mounts()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "num": self.num,
            "reload": self.reload,
            "wgt": self.wgt,
            "kind": self.kind.value,
            "units": self.units.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ASW":
        return cls(
            year=int(data["year"]),
            num=int(data["num"]),
            reload=int(data["reload"]),
            wgt=float(data["wgt"]),
            kind=ASWType(data["kind"]),
            units=Units(data["units"]),
        )
