"""
broadside Hull Geometry

Displacement, form coefficients, areas and freeboard of the hull from its
primary dimensions.

Displacement and waterline length are alternate entry points: set_d() holds
the length and lets the coefficients follow, set_lwl() holds the
displacement. Calling both in one update leaves whichever ran last in charge.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple
import math

from broadside.core.constants import FT3_PER_TON_SEA
from broadside.core.enums import LegacyTextEnum, Units
from broadside.core.numeric import fdiv, powf, sqrt


# =============================================================================
# ENUMERATIONS
# =============================================================================

class BowType(LegacyTextEnum):
    """Bow form. A ram carries its length in Hull.ram_len."""
    NORMAL = "Normal"
    RAM = "Ram"
    CLIPPER = "Clipper"
    BULBOUS = "Bulbous"

    @property
    def desc(self) -> str:
        return {
            BowType.NORMAL: "Normal bow",
            BowType.RAM: "Ram bow",
            BowType.CLIPPER: "Clipper bow",
            BowType.BULBOUS: "Bulbous bow",
        }[self]


class SternType(LegacyTextEnum):
    """Stern form."""
    CRUISER = "Cruiser"
    ROUND = "Round"
    TRANSOM = "Transom"
    CRUISER_TRANSOM = "Cruiser & Transom"

    @property
    def leff_factor(self) -> float:
        """Share of the stern overhang that lengthens the effective waterline."""
        return {
            SternType.CRUISER: 0.5,
            SternType.ROUND: 0.0,
            SternType.TRANSOM: 0.9,
            SternType.CRUISER_TRANSOM: 0.7,
        }[self]

    @property
    def desc(self) -> str:
        return {
            SternType.CRUISER: "Cruiser stern",
            SternType.ROUND: "Round stern",
            SternType.TRANSOM: "Transom stern",
            SternType.CRUISER_TRANSOM: "Cruiser & transom stern",
        }[self]


# =============================================================================
# CONSTANTS
# =============================================================================

# Midship coefficient fit (Kerlen)
CM_BASE = 1.006
CM_COEFF = 0.0056
CM_EXPONENT = -3.56

# Waterplane coefficient fit (Parsons)
CWP_BASE = 0.471
CWP_SLOPE = 0.551

# Wetted surface
WS_LENGTH_DRAFT_COEFF = 1.7
WS_SHAFT_ALLOWANCE = 0.025  # per shaft beyond the first

BULBOUS_LEFF_BONUS = 0.03  # share of lwl

# Freeboard description bands, as a share of 1.1·sqrt(lwl) at the bow
FREEBOARD_BANDS: List[Tuple[float, str]] = [
    (1.2, "High freeboard forward, a very dry ship"),
    (1.0, "Good freeboard forward, a dry ship"),
    (0.8, "Adequate freeboard, wet forward in heavy weather"),
]
FREEBOARD_LOW = "Low freeboard, very wet forward"


# =============================================================================
# HULL
# =============================================================================

@dataclass
class Hull:
    """
    Hull dimensions and deck sections.

    Section lengths (fc, fd, qd) are fractions of the waterline length; the
    aft deck takes the remainder. Heights are freeboard in feet at the fore
    and aft end of each section.
    """

    _d: float = 0.0  # normal displacement, tons
    _lwl: float = 0.0  # waterline length, ft
    b: float = 0.0  # beam, ft
    bb: float = 0.0  # beam over bulges, ft
    t: float = 0.0  # draft, ft

    bow_angle: float = 0.0  # degrees of rake
    stern_overhang: float = 0.0  # ft

    # Forecastle
    fc_len: float = 0.2
    fc_fwd: float = 0.0
    fc_aft: float = 0.0

    # Forward deck
    fd_len: float = 0.3
    fd_fwd: float = 0.0
    fd_aft: float = 0.0

    # Aft deck
    ad_fwd: float = 0.0
    ad_aft: float = 0.0

    # Quarterdeck
    qd_len: float = 0.15
    qd_fwd: float = 0.0
    qd_aft: float = 0.0

    bow_type: BowType = BowType.NORMAL
    ram_len: float = 0.0
    stern_type: SternType = SternType.CRUISER
    units: Units = Units.IMPERIAL

    # Mirrors Engine.shafts(); refreshed by Engine.set_shafts
    shafts: int = 1

    # ==================== Primary dimensions ====================

    def d(self) -> float:
        return self._d

    def set_d(self, d: float) -> None:
        self._d = d

    def lwl(self) -> float:
        return self._lwl

    def set_lwl(self, lwl: float) -> None:
        self._lwl = lwl

    def set_cb(self, cb: float) -> None:
        """Fix displacement from a block coefficient at the current dimensions."""
        self._d = cb * self._lwl * self.b * self.t / FT3_PER_TON_SEA

    # ==================== Coefficients ====================

    def cb(self) -> float:
        return self.cb_calc(self._d, self.t)

    def cb_calc(self, d: float, t: float) -> float:
        """Block coefficient: Cb = ∇ / (L·B·T)."""
        return fdiv(d * FT3_PER_TON_SEA, self._lwl * self.b * t)

    def cm(self) -> float:
        return self.cm_calc(self._d, self.t)

    def cm_calc(self, d: float, t: float) -> float:
        """Midship coefficient, Kerlen: Cm = 1.006 - 0.0056·Cb^-3.56."""
        return CM_BASE - CM_COEFF * powf(self.cb_calc(d, t), CM_EXPONENT)

    def cp(self) -> float:
        return self.cp_calc(self._d, self.t)

    def cp_calc(self, d: float, t: float) -> float:
        """Prismatic coefficient: Cp = Cb / Cm."""
        return fdiv(self.cb_calc(d, t), self.cm_calc(d, t))

    def cwp(self) -> float:
        return self.cwp_calc(self._d, self.t)

    def cwp_calc(self, d: float, t: float) -> float:
        """Waterplane coefficient, Parsons: Cwp = Cb / (0.471 + 0.551·Cb)."""
        cb = self.cb_calc(d, t)
        return fdiv(cb, CWP_BASE + CWP_SLOPE * cb)

    def cs(self) -> float:
        """Sharpness coefficient used by the wave-making resistance term."""
        return 0.4 * powf(fdiv(self.b, self._lwl) * 6.0, 1.0 / 3.0) * sqrt(fdiv(self.cb(), 0.52))

    # ==================== Areas and lengths ====================

    def wp(self) -> float:
        """Waterplane area, ft²."""
        return self.cwp() * self._lwl * self.b

    def ws(self) -> float:
        """
        Wetted surface, ft².

        Mumford: S = 1.7·L·T + ∇/T, plus an allowance for shaft
        appendages beyond the first.
        """
        bare = WS_LENGTH_DRAFT_COEFF * self._lwl * self.t + fdiv(self._d * FT3_PER_TON_SEA, self.t)
        return bare * (1.0 + WS_SHAFT_ALLOWANCE * max(self.shafts - 1, 0))

    def t_calc(self, d: float) -> float:
        """Draft at an alternate displacement, assuming wall sides."""
        return self.t + fdiv((d - self._d) * FT3_PER_TON_SEA, self.wp())

    def len2beam(self) -> float:
        return fdiv(self._lwl, self.b)

    def vn(self) -> float:
        """Natural speed, knots: sqrt(lwl)."""
        return sqrt(self._lwl)

    def leff(self) -> float:
        """Effective length for wave-making resistance, ft."""
        leff = self._lwl + self.stern_overhang * self.stern_type.leff_factor
        if self.bow_type is BowType.BULBOUS:
            leff += self._lwl * BULBOUS_LEFF_BONUS
        elif self.bow_type is BowType.RAM:
            leff += self.ram_len * 0.5
        return leff

    def loa(self) -> float:
        """Length overall, ft."""
        bow = self.fc_fwd * math.tan(math.radians(self.bow_angle))
        if self.bow_type is BowType.RAM:
            bow = max(bow, self.ram_len)
        return self._lwl + max(bow, 0.0) + self.stern_overhang

    def ad_len(self) -> float:
        return 1.0 - self.fc_len - self.fd_len - self.qd_len

    # ==================== Freeboard ====================

    def _sections(self) -> List[Tuple[float, float, float]]:
        return [
            (self.fc_len, self.fc_fwd, self.fc_aft),
            (self.fd_len, self.fd_fwd, self.fd_aft),
            (self.ad_len(), self.ad_fwd, self.ad_aft),
            (self.qd_len, self.qd_fwd, self.qd_aft),
        ]

    def freeboard(self) -> float:
        """Freeboard amidships, ft."""
        return (self.fd_aft + self.ad_fwd) / 2.0

    def freeboard_dist(self) -> float:
        """Length-weighted average freeboard, ft."""
        return sum(length * (fwd + aft) / 2.0 for length, fwd, aft in self._sections())

    def free_cap(self, cap: bool) -> float:
        """
        Freeboard available to the gun deck.

        When every battery is broadside mounted below deck (cap), low
        sections are raised to the midships freeboard.
        """
        if not cap:
            return self.freeboard_dist()
        mid = self.freeboard()
        return sum(length * max((fwd + aft) / 2.0, mid) for length, fwd, aft in self._sections())

    def freeboard_desc(self) -> str:
        ratio = fdiv(self.fc_fwd, 1.1 * sqrt(self._lwl))
        for threshold, desc in FREEBOARD_BANDS:
            if ratio >= threshold:
                return desc
        return FREEBOARD_LOW

    # ==================== Serialization ====================

    def to_dict(self) -> Dict[str, Any]:
        return {
            "d": self._d,
            "lwl": self._lwl,
            "b": self.b,
            "bb": self.bb,
            "t": self.t,
            "bow_angle": self.bow_angle,
            "stern_overhang": self.stern_overhang,
            "fc_len": self.fc_len,
            "fc_fwd": self.fc_fwd,
            "fc_aft": self.fc_aft,
            "fd_len": self.fd_len,
            "fd_fwd": self.fd_fwd,
            "fd_aft": self.fd_aft,
            "ad_fwd": self.ad_fwd,
            "ad_aft": self.ad_aft,
            "qd_len": self.qd_len,
            "qd_fwd": self.qd_fwd,
            "qd_aft": self.qd_aft,
            "bow_type": self.bow_type.value,
            "ram_len": self.ram_len,
            "stern_type": self.stern_type.value,
            "units": self.units.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Hull":
        return cls(
            _d=float(data["d"]),
            _lwl=float(data["lwl"]),
            b=float(data["b"]),
            bb=float(data["bb"]),
            t=float(data["t"]),
            bow_angle=float(data["bow_angle"]),
            stern_overhang=float(data["stern_overhang"]),
            fc_len=float(data["fc_len"]),
            fc_fwd=float(data["fc_fwd"]),
            fc_aft=float(data["fc_aft"]),
            fd_len=float(data["fd_len"]),
            fd_fwd=float(data["fd_fwd"]),
            fd_aft=float(data["fd_aft"]),
            ad_fwd=float(data["ad_fwd"]),
            ad_aft=float(data["ad_aft"]),
            qd_len=float(data["qd_len"]),
            qd_fwd=float(data["qd_fwd"]),
            qd_aft=float(data["qd_aft"]),
            bow_type=BowType(data["bow_type"]),
            ram_len=float(data["ram_len"]),
            stern_type=SternType(data["stern_type"]),
            units=Units(data["units"]),
        )
