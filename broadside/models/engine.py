"""
broadside Propulsion Model

Resistance, installed power, machinery weight and bunkerage from the fuel,
boiler and drive mix.

Resistance is the classic two-term split: skin friction on the wetted
surface and a wave-making term on displacement and effective length. A
max speed of zero is a valid floating battery and short-circuits every
speed-dependent figure to zero.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Set, TYPE_CHECKING

from broadside.core.constants import (
    BASE_PROPULSIVE_EFFICIENCY,
    BUNKER_MAX_RATIO,
    HP_FT_LB_PER_SEC,
    KNOT_FT_PER_SEC,
    POUND2TON,
    SKIN_FRICTION_COEFF,
    SKIN_FRICTION_EXPONENT,
)
from broadside.core.enums import LegacyTextEnum
from broadside.core.numeric import fdiv, powf
from broadside.core.unit_converter import clamp_to_bounds

if TYPE_CHECKING:
    from broadside.models.hull import Hull


# =============================================================================
# ENUMERATIONS
# =============================================================================

class FuelType(LegacyTextEnum):
    COAL = "Coal"
    OIL = "Oil"
    DIESEL = "Diesel"
    GASOLINE = "Gasoline"
    BATTERY = "Battery"


class BoilerType(LegacyTextEnum):
    SIMPLE = "Simple"    # single expansion reciprocating
    COMPLEX = "Complex"  # compound / triple expansion reciprocating
    TURBINE = "Turbine"

    @property
    def hp_per_ton(self) -> float:
        return {
            BoilerType.SIMPLE: 3.5,
            BoilerType.COMPLEX: 4.5,
            BoilerType.TURBINE: 6.0,
        }[self]

    def bunker_factor(self, year: int) -> float:
        """Fuel burnt per horsepower relative to a good 1890 plant."""
        if self is BoilerType.SIMPLE:
            return 1.0 + max(0, 1890 - year) / 50.0
        if self is BoilerType.COMPLEX:
            return 0.8
        return 0.7


class DriveType(LegacyTextEnum):
    DIRECT = "Direct"
    GEARED = "Geared"
    ELECTRIC = "Electric"
    HYDRAULIC = "Hydraulic"

    @property
    def efficiency(self) -> float:
        return {
            DriveType.DIRECT: 1.0,
            DriveType.GEARED: 0.97,
            DriveType.ELECTRIC: 0.9,
            DriveType.HYDRAULIC: 0.85,
        }[self]

    @property
    def wgt_factor(self) -> float:
        """Multiplier on power density."""
        return {
            DriveType.DIRECT: 1.0,
            DriveType.GEARED: 1.2,
            DriveType.ELECTRIC: 0.85,
            DriveType.HYDRAULIC: 0.9,
        }[self]


# =============================================================================
# CONSTANTS
# =============================================================================

# Power density of plants without boilers, hp per ton of engine displacement
IC_HP_PER_TON = {
    FuelType.DIESEL: 4.5,
    FuelType.GASOLINE: 9.0,
    FuelType.BATTERY: 1.5,
}

# Specific fuel consumption, lb per hp per hour
SFC = {
    FuelType.COAL: 2.2,
    FuelType.OIL: 1.5,
    FuelType.DIESEL: 0.45,
    FuelType.GASOLINE: 0.6,
    FuelType.BATTERY: 0.0,
}

# Oil firing lightens a steam plant by up to this share
OIL_FIRING_BONUS = 0.15

# Technology factor on power density
TECH_BASE_YEAR = 1890
TECH_SPAN = 50.0
TECH_MIN = 0.5
TECH_MAX = 3.0

SHAFT_EFFICIENCY_LOSS = 0.02  # per shaft beyond the first
DIRECT_TURBINE_PENALTY = 0.9  # direct-drive turbines turn too fast for the screw

# Engine volume, ft³ per ton of machinery
RECIP_FT3_PER_TON = 55.0
TURBINE_FT3_PER_TON = 40.0
IC_FT3_PER_TON = 35.0

# Advisories, hp per shaft
RECIP_HP_PER_SHAFT_LIMIT = 20000.0
SHAFT_HP_LIMIT = 75000.0


# =============================================================================
# ENGINE
# =============================================================================

@dataclass
class Engine:
    """
    Propulsion plant.

    Fuel, boiler and drive are sets: a plant may burn coal and oil, mix
    turbines with reciprocating cruising engines, and so on.
    """

    vmax: float = 0.0  # kts
    vcruise: float = 0.0  # kts
    range_nm: int = 0
    pct_coal: float = 0.0  # share of coal when both coal and oil fire
    fuel: Set[FuelType] = field(default_factory=lambda: {FuelType.COAL})
    boiler: Set[BoilerType] = field(default_factory=lambda: {BoilerType.SIMPLE})
    drive: Set[DriveType] = field(default_factory=lambda: {DriveType.DIRECT})
    year: int = 1920

    _shafts: int = 1

    # ==================== Shafts ====================

    def shafts(self) -> int:
        return self._shafts

    def set_shafts(self, shafts: int, hull: "Hull") -> None:
        """Set the shaft count and refresh the hull figures that depend on it."""
        self._shafts = shafts
        hull.shafts = shafts

    # ==================== Predicates ====================

    def burns_coal(self) -> bool:
        return FuelType.COAL in self.fuel

    def burns_oil(self) -> bool:
        return FuelType.OIL in self.fuel

    def is_steam(self) -> bool:
        return self.burns_coal() or self.burns_oil()

    def is_turbine(self) -> bool:
        return BoilerType.TURBINE in self.boiler

    def is_reciprocating(self) -> bool:
        return bool(self.boiler & {BoilerType.SIMPLE, BoilerType.COMPLEX}) and not self.is_turbine()

    def is_internal_combustion(self) -> bool:
        return bool(self.fuel & {FuelType.DIESEL, FuelType.GASOLINE})

    def num_engines(self) -> int:
        return len(self.fuel)

    def coal_share(self) -> float:
        """Share of steam raised by coal."""
        if self.burns_coal() and self.burns_oil():
            return self.pct_coal
        return 1.0 if self.burns_coal() else 0.0

    # ==================== Resistance ====================

    def rf(self, ws: float, v: float) -> float:
        """Frictional resistance, lb: Rf = 0.0093·S·V^1.825."""
        return SKIN_FRICTION_COEFF * ws * powf(v, SKIN_FRICTION_EXPONENT)

    def rw(self, d: float, length: float, cs: float, v: float) -> float:
        """Wave-making resistance, lb: Rw = Cs·Δ^(2/3)·V^4 / L."""
        return fdiv(cs * powf(d, 2.0 / 3.0) * powf(v, 4.0), length)

    def rf_max(self, ws: float) -> float:
        return self.rf(ws, self.vmax)

    def rf_cruise(self, ws: float) -> float:
        return self.rf(ws, self.vcruise)

    def rw_max(self, d: float, length: float, cs: float) -> float:
        return self.rw(d, length, cs, self.vmax)

    def rw_cruise(self, d: float, length: float, cs: float) -> float:
        return self.rw(d, length, cs, self.vcruise)

    def pw_max(self, d: float, length: float, cs: float, ws: float) -> float:
        """Share of max-speed resistance lost to wave-making."""
        if self.vmax <= 0:
            return 0.0
        rw = self.rw_max(d, length, cs)
        return fdiv(rw, self.rf_max(ws) + rw)

    def pw_cruise(self, d: float, length: float, cs: float, ws: float) -> float:
        if self.vcruise <= 0:
            return 0.0
        rw = self.rw_cruise(d, length, cs)
        return fdiv(rw, self.rf_cruise(ws) + rw)

    # ==================== Power ====================

    def propulsive_eff(self) -> float:
        eff = BASE_PROPULSIVE_EFFICIENCY * (1.0 - SHAFT_EFFICIENCY_LOSS * max(self._shafts - 1, 0))
        if self.drive:
            eff *= sum(drive.efficiency for drive in self.drive) / len(self.drive)
        if self.is_turbine() and DriveType.DIRECT in self.drive:
            eff *= DIRECT_TURBINE_PENALTY
        return eff

    def ehp(self, rf: float, rw: float, v: float) -> float:
        """Effective horsepower from resistance in lb at v knots."""
        return (rf + rw) * v * KNOT_FT_PER_SEC / HP_FT_LB_PER_SEC

    def _hp(self, d: float, lwl: float, leff: float, cs: float, ws: float, v: float) -> float:
        if v <= 0:
            return 0.0
        length = leff if leff > 0 else lwl
        ehp = self.ehp(self.rf(ws, v), self.rw(d, length, cs, v), v)
        return fdiv(ehp, self.propulsive_eff())

    def hp_max(self, d: float, lwl: float, leff: float, cs: float, ws: float) -> float:
        """Shaft horsepower for max speed."""
        return self._hp(d, lwl, leff, cs, ws, self.vmax)

    def hp_cruise(self, d: float, lwl: float, leff: float, cs: float, ws: float) -> float:
        return self._hp(d, lwl, leff, cs, ws, self.vcruise)

    def hp_per_ton(self) -> float:
        """
        Power density of the plant, hp per ton of engine displacement.

        Steam plants take the mean boiler density, improved by oil firing;
        internal combustion plants take their own figures. Mixed plants
        average the kinds they carry.
        """
        densities = []
        if self.is_steam() and self.boiler:
            steam = sum(boiler.hp_per_ton for boiler in self.boiler) / len(self.boiler)
            steam *= 1.0 + OIL_FIRING_BONUS * (1.0 - self.coal_share())
            densities.append(steam)
        densities.extend(IC_HP_PER_TON[fuel] for fuel in self.fuel if fuel in IC_HP_PER_TON)
        if not densities:
            return 0.0

        tech, _ = clamp_to_bounds(1.0 + (self.year - TECH_BASE_YEAR) / TECH_SPAN, TECH_MIN, TECH_MAX)
        drive = sum(d.wgt_factor for d in self.drive) / len(self.drive) if self.drive else 1.0
        return sum(densities) / len(densities) * tech * drive

    def d_engine(self, d: float, lwl: float, leff: float, cs: float, ws: float) -> float:
        """Engine displacement, tons. Installed machinery is half of it."""
        hp = self.hp_max(d, lwl, leff, cs, ws)
        if hp == 0:
            return 0.0
        return fdiv(hp, self.hp_per_ton())

    def vol_engine(self, d: float, lwl: float, leff: float, cs: float, ws: float) -> float:
        """Machinery space volume, ft³."""
        if self.is_turbine():
            density = TURBINE_FT3_PER_TON
        elif self.is_steam():
            density = RECIP_FT3_PER_TON
        else:
            density = IC_FT3_PER_TON
        return self.d_engine(d, lwl, leff, cs, ws) / 2.0 * density

    # ==================== Bunkerage ====================

    def bunker_factor(self) -> float:
        """Fuel economy of the best boiler fitted, for the plant's year."""
        if not self.boiler:
            return 1.0
        return min(boiler.bunker_factor(self.year) for boiler in self.boiler)

    def sfc(self) -> float:
        """Specific fuel consumption, lb per hp per hour."""
        if self.is_steam():
            coal = self.coal_share()
            steam = coal * SFC[FuelType.COAL] + (1.0 - coal) * SFC[FuelType.OIL]
            return steam * self.bunker_factor()
        for fuel in (FuelType.DIESEL, FuelType.GASOLINE, FuelType.BATTERY):
            if fuel in self.fuel:
                return SFC[fuel]
        return 0.0

    def bunker_max(self, d: float, lwl: float, leff: float, cs: float, ws: float) -> float:
        """Fuel for the full range at cruising speed, tons."""
        if self.vmax <= 0 or self.vcruise <= 0 or self.range_nm <= 0:
            return 0.0
        hours = self.range_nm / self.vcruise
        return self.hp_cruise(d, lwl, leff, cs, ws) * hours * self.sfc() / POUND2TON

    def bunker(self, d: float, lwl: float, leff: float, cs: float, ws: float) -> float:
        """Normal bunkerage, tons."""
        return self.bunker_max(d, lwl, leff, cs, ws) / BUNKER_MAX_RATIO

    # ==================== Advisories ====================

    def hp_per_shaft(self, hp: float) -> float:
        return fdiv(hp, self._shafts)

    def overpowered_recip(self, hp: float) -> bool:
        """More power per shaft than reciprocating engines can deliver."""
        return self.is_reciprocating() and self.hp_per_shaft(hp) > RECIP_HP_PER_SHAFT_LIMIT

    def overpowered_shafts(self, hp: float) -> bool:
        return self.hp_per_shaft(hp) > SHAFT_HP_LIMIT

    # ==================== Serialization ====================

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vmax": self.vmax,
            "vcruise": self.vcruise,
            "range": self.range_nm,
            "pct_coal": self.pct_coal,
            "fuel": sorted(f.value for f in self.fuel),
            "boiler": sorted(b.value for b in self.boiler),
            "drive": sorted(d.value for d in self.drive),
            "year": self.year,
            "shafts": self._shafts,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Engine":
        return cls(
            vmax=float(data["vmax"]),
            vcruise=float(data["vcruise"]),
            range_nm=int(data["range"]),
            pct_coal=float(data["pct_coal"]),
            fuel={FuelType(v) for v in data["fuel"]},
            boiler={BoilerType(v) for v in data["boiler"]},
            drive={DriveType(v) for v in data["drive"]},
            year=int(data["year"]),
            _shafts=int(data["shafts"]),
        )
