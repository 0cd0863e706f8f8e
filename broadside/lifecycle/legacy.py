"""
lifecycle/legacy.py - SpringSharp 3.0 ship import

SpringSharp stores a ship as one value per line in a fixed order. The order
is declared once in LEGACY_FIELDS; each entry names the field, how to decode
its line and where the value goes. After the fields come 33 lines with no
counterpart here, then free-form notes to the end of the file.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple, Type, Union
import logging

from broadside.core.constants import SPRINGSHARP_SIGNATURE, SPRINGSHARP_VERSION
from broadside.core.enums import LegacyTextEnum, Units
from broadside.errors.taxonomy import LegacyFieldError, UnknownFormat, UnsupportedVersion
from broadside.models.armor import BulkheadType, DeckType
from broadside.models.engine import BoilerType, DriveType, FuelType
from broadside.models.hull import BowType, SternType
from broadside.models.weapons import (
    ASWType,
    GunDistributionType,
    GunLayoutType,
    GunType,
    MineType,
    MountType,
    TorpedoMountType,
)
from broadside.ship import NUM_BATTERIES, Ship

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Lines between the last field and the notes
TRAILING_SKIP = 33

FIELD_KINDS = ("text", "int", "float", "pct", "bool", "enum", "skip")


@dataclass(frozen=True)
class LegacyField:
    """One line of a SpringSharp file."""

    name: str
    kind: str
    store: Optional[Callable[[Ship, Any], None]] = None
    enum_type: Optional[Type[LegacyTextEnum]] = None

    def decode(self, text: str) -> Any:
        if self.kind == "text":
            return text
        if self.kind == "int":
            return int(text.strip().replace(",", ""))
        if self.kind == "float":
            return float(text.strip().replace(",", ""))
        if self.kind == "pct":
            return float(text.strip().replace(",", "")) / 100.0
        if self.kind == "bool":
            if text.strip() not in ("True", "False"):
                raise ValueError(f"expected True or False, got {text.strip()!r}")
            return text.strip() == "True"
        if self.kind == "enum":
            return self.enum_type.parse(text)
        return None


# =============================================================================
# STORE HELPERS
# =============================================================================

def _resolve(obj: Any, part: str) -> Any:
    return obj[int(part)] if part.isdigit() else getattr(obj, part)


def _attr(path: str) -> Callable[[Ship, Any], None]:
    """Setter for a dotted path such as "batteries.0.groups.1.above"."""
    *parents, leaf = path.split(".")

    def store(ship: Ship, value: Any) -> None:
        obj = ship
        for part in parents:
            obj = _resolve(obj, part)
        setattr(obj, leaf, value)

    return store


def _flag(attr: str, member: Any) -> Callable[[Ship, Any], None]:
    """Add member to one of the engine's sets when the line reads True."""

    def store(ship: Ship, value: bool) -> None:
        if value:
            getattr(ship.engine, attr).add(member)

    return store


def _set_lwl(ship: Ship, value: float) -> None:
    ship.hull.set_lwl(value)


def _set_cb(ship: Ship, value: float) -> None:
    ship.hull.set_cb(value)


def _set_shafts(ship: Ship, value: int) -> None:
    ship.engine.set_shafts(value, ship.hull)


def _set_shell_wgt(index: int) -> Callable[[Ship, Any], None]:
    def store(ship: Ship, value: float) -> None:
        ship.batteries[index].set_shell_wgt(value)
    return store


def _set_bh_kind(ship: Ship, value: int) -> None:
    ship.armor.bh_kind = BulkheadType.ADDITIONAL if value == 0 else BulkheadType.STRENGTHENED


def _set_ram_len(ship: Ship, value: float) -> None:
    if ship.hull.bow_type is BowType.RAM:
        ship.hull.ram_len = value


def _text(path: str) -> LegacyField:
    return LegacyField(path, "text", _attr(path))


def _int(path: str) -> LegacyField:
    return LegacyField(path, "int", _attr(path))


def _float(path: str) -> LegacyField:
    return LegacyField(path, "float", _attr(path))


def _pct(path: str) -> LegacyField:
    return LegacyField(path, "pct", _attr(path))


def _bool(path: str) -> LegacyField:
    return LegacyField(path, "bool", _attr(path))


def _enum(path: str, enum_type: Type[LegacyTextEnum]) -> LegacyField:
    return LegacyField(path, "enum", _attr(path), enum_type)


def _each_battery(make: Callable[[str], LegacyField], attr: str) -> Tuple[LegacyField, ...]:
    return tuple(make(f"batteries.{i}.{attr}") for i in range(NUM_BATTERIES))


def _battery_block(i: int) -> Tuple[LegacyField, ...]:
    return (
        _int(f"batteries.{i}.num"),
        _float(f"batteries.{i}.diam"),
        _enum(f"batteries.{i}.kind", GunType),
        _int(f"batteries.{i}.groups.0.above"),
        _int(f"batteries.{i}.groups.0.below"),
        LegacyField(f"batteries.{i}.shell_wgt", "float", _set_shell_wgt(i)),
    )


def _mount_block(i: int) -> Tuple[LegacyField, ...]:
    return (
        _int(f"batteries.{i}.mount_num"),
        _enum(f"batteries.{i}.mount_kind", MountType),
        _enum(f"batteries.{i}.groups.0.distribution", GunDistributionType),
    )


def _section(name: str) -> Tuple[LegacyField, ...]:
    return (
        _float(f"armor.{name}.thick"),
        _float(f"armor.{name}.length"),
        _float(f"armor.{name}.height"),
    )


def _gun_armor(i: int) -> Tuple[LegacyField, ...]:
    return (
        _float(f"batteries.{i}.armor_face"),
        _float(f"batteries.{i}.armor_back"),
        _float(f"batteries.{i}.armor_barb"),
    )


# =============================================================================
# FIELD ORDER
# =============================================================================

LEGACY_FIELDS: Tuple[LegacyField, ...] = (
    _text("name"),
    _text("country"),
    _text("kind"),

    _enum("hull.units", Units),
    *_each_battery(lambda p: _enum(p, Units), "units"),
    _enum("torps.0.units", Units),
    _enum("armor.units", Units),

    _int("year"),
    _int("wgts.vital"),

    LegacyField("hull.lwl", "float", _set_lwl),
    _float("hull.b"),
    _float("hull.t"),
    _enum("hull.stern_type", SternType),
    LegacyField("hull.cb", "float", _set_cb),

    _float("hull.qd_aft"),
    _float("hull.stern_overhang"),
    _pct("hull.qd_len"),
    _float("hull.qd_fwd"),
    _float("hull.ad_aft"),
    _pct("hull.fd_len"),
    _float("hull.ad_fwd"),
    _float("hull.fd_aft"),
    _pct("hull.fc_len"),
    _float("hull.fd_fwd"),
    _float("hull.fc_aft"),
    _float("hull.fc_fwd"),
    _float("hull.bow_angle"),

    *(f for i in range(NUM_BATTERIES) for f in _battery_block(i)),

    _int("batteries.0.shells"),
    *(f for i in range(NUM_BATTERIES) for f in _mount_block(i)),

    _int("torps.0.num"),
    _int("torps.1.num"),
    _float("torps.0.diam"),

    *_section("main"),
    *_section("end"),
    *_section("upper"),
    *_section("bulkhead"),

    *(f for i in range(NUM_BATTERIES) for f in _gun_armor(i)),

    _float("armor.deck.md"),
    _float("armor.ct_fwd.thick"),
    _float("engine.vmax"),
    _float("engine.vcruise"),
    _int("engine.range_nm"),
    LegacyField("engine.shafts", "int", _set_shafts),
    _pct("engine.pct_coal"),

    LegacyField("engine.fuel.coal", "bool", _flag("fuel", FuelType.COAL)),
    LegacyField("engine.fuel.oil", "bool", _flag("fuel", FuelType.OIL)),
    LegacyField("engine.fuel.diesel", "bool", _flag("fuel", FuelType.DIESEL)),
    LegacyField("engine.fuel.gasoline", "bool", _flag("fuel", FuelType.GASOLINE)),
    LegacyField("engine.fuel.battery", "bool", _flag("fuel", FuelType.BATTERY)),
    LegacyField("engine.boiler.simple", "bool", _flag("boiler", BoilerType.SIMPLE)),
    LegacyField("engine.boiler.complex", "bool", _flag("boiler", BoilerType.COMPLEX)),
    LegacyField("engine.boiler.turbine", "bool", _flag("boiler", BoilerType.TURBINE)),
    LegacyField("engine.drive.direct", "bool", _flag("drive", DriveType.DIRECT)),
    LegacyField("engine.drive.geared", "bool", _flag("drive", DriveType.GEARED)),
    LegacyField("engine.drive.electric", "bool", _flag("drive", DriveType.ELECTRIC)),
    LegacyField("engine.drive.hydraulic", "bool", _flag("drive", DriveType.HYDRAULIC)),

    _int("trim"),
    _float("hull.bb"),
    _int("engine.year"),
    *_each_battery(_int, "year"),

    _enum("hull.bow_type", BowType),
    LegacyField("hull.ram_len", "float", _set_ram_len),

    _enum("torps.1.units", Units),
    _enum("mines.units", Units),
    _enum("asw.0.units", Units),
    _enum("asw.1.units", Units),

    *_each_battery(_float, "length"),
    _int("batteries.1.shells"),
    _int("batteries.2.shells"),
    _int("batteries.3.shells"),
    _int("batteries.4.shells"),

    *_each_battery(lambda p: _enum(p, GunDistributionType), "groups.1.distribution"),
    *_each_battery(_int, "groups.1.above"),
    *_each_battery(_bool, "groups.1.two_mounts_up"),
    *_each_battery(_int, "groups.1.on"),
    *_each_battery(_int, "groups.1.below"),
    *_each_battery(_bool, "groups.1.lower_deck"),

    _int("torps.0.mounts"),
    _int("torps.1.mounts"),
    _float("torps.1.diam"),
    _float("torps.0.length"),
    _float("torps.1.length"),
    _enum("torps.0.mount_kind", TorpedoMountType),
    _enum("torps.1.mount_kind", TorpedoMountType),

    _int("mines.num"),
    _int("mines.reload"),
    _float("mines.wgt"),
    _enum("mines.mount_kind", MineType),

    _int("asw.0.num"),
    _int("asw.1.num"),
    _int("asw.0.reload"),
    _int("asw.1.reload"),
    _float("asw.0.wgt"),
    _float("asw.1.wgt"),
    _enum("asw.0.kind", ASWType),
    _enum("asw.1.kind", ASWType),

    _int("wgts.hull"),
    _int("wgts.on"),
    _int("wgts.above"),

    _float("armor.incline"),
    *_section("bulge"),
    LegacyField("armor.bh_kind", "int", _set_bh_kind),
    _float("armor.bh_beam"),
    _float("armor.deck.fc"),
    _float("armor.deck.qd"),
    _enum("armor.deck.kind", DeckType),
    _float("armor.ct_aft.thick"),

    # Mount counts repeated, later values win
    *_each_battery(_int, "groups.0.above"),
    *_each_battery(_int, "groups.0.below"),
    *_each_battery(_int, "groups.1.above"),
    *(LegacyField(f"batteries.{i}.groups.1.on", "skip") for i in range(NUM_BATTERIES)),
    *_each_battery(_int, "groups.1.below"),
    *_each_battery(lambda p: _enum(p, GunLayoutType), "groups.0.layout"),
    *_each_battery(lambda p: _enum(p, GunLayoutType), "groups.1.layout"),

    _int("wgts.void"),
)


# =============================================================================
# IMPORT
# =============================================================================

def _check_header(lines: List[str]) -> None:
    header = lines[0] if lines else ""
    if SPRINGSHARP_VERSION in header:
        return
    if SPRINGSHARP_SIGNATURE in header:
        raise UnsupportedVersion(
            "SpringSharp file too old",
            recovery_hint=f"Re-save the design with {SPRINGSHARP_VERSION}",
            header=header,
        )
    raise UnknownFormat("Unknown file format", header=header)


def _backfill_on_deck(ship: Ship, line_no: int) -> None:
    """Mounts of group 0 on the deck are whatever the other counts leave over."""
    for i, b in enumerate(ship.batteries):
        g0, g1 = b.groups
        on = b.mount_num - g0.above - g0.below - g1.above - g1.on - g1.below
        if on < 0:
            raise LegacyFieldError(
                f"batteries.{i}.groups.0.on",
                line_no,
                f"mount counts exceed the {b.mount_num} mounts of the battery",
            )
        g0.on = on
        logger.debug(f"Back-filled batteries[{i}] group 0 on-deck mounts: {on}")


def parse_springsharp(text: str) -> Ship:
    """Decode SpringSharp 3.0 file text into a new Ship."""
    lines = text.splitlines()
    _check_header(lines)

    ship = Ship()
    ship.engine.fuel = set()
    ship.engine.boiler = set()
    ship.engine.drive = set()

    line_no = 1
    for spec in LEGACY_FIELDS:
        line_no += 1
        if line_no > len(lines):
            raise LegacyFieldError(spec.name, line_no, "file ends before this field")
        if spec.kind == "skip":
            logger.debug(f"Skipped line {line_no} ({spec.name})")
            continue
        try:
            value = spec.decode(lines[line_no - 1])
        except ValueError as e:
            raise LegacyFieldError(spec.name, line_no, str(e)) from e
        spec.store(ship, value)

    ship.notes = lines[line_no + TRAILING_SKIP:]

    _backfill_on_deck(ship, line_no)

    # SpringSharp keeps a single year for the hull and the non-gun weapons
    for t in ship.torps:
        t.year = ship.year
    ship.mines.year = ship.year
    for a in ship.asw:
        a.year = ship.year

    ship.engine.set_shafts(ship.engine.shafts(), ship.hull)
    return ship


def import_springsharp(path: PathLike) -> Ship:
    """Read a SpringSharp 3.0 file into a new Ship."""
    path = Path(path)
    ship = parse_springsharp(path.read_text(encoding="utf-8", errors="replace"))
    logger.info(f"Imported SpringSharp ship {ship.name!r} from {path}")
    return ship
