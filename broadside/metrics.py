"""
broadside Metric Snapshot

One-pass evaluation of every whole-ship figure, and the weight breakdown
by group.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List
import logging

from broadside.core.numeric import fdiv
from broadside.ship import Ship

logger = logging.getLogger(__name__)


@dataclass
class WeightItem:
    """One group of the weight breakdown."""

    name: str = ""
    wgt: float = 0.0  # tons
    percent: float = 0.0  # of normal displacement

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "wgt": round(self.wgt, 0),
            "percent": round(self.percent, 1),
        }


# Group order of the breakdown
WEIGHT_GROUPS = ("armament", "armor", "machinery", "hull", "misc", "load")


@dataclass
class WeightBreakdown:
    """Normal displacement split by weight group. The groups sum to d."""

    d: float = 0.0
    items: List[WeightItem] = field(default_factory=list)

    @classmethod
    def from_ship(cls, ship: Ship) -> "WeightBreakdown":
        with ship.evaluation_pass():
            d = ship.d()
            wgts = {
                "armament": ship.wgt_guns() + ship.wgt_gun_mounts() + ship.wgt_weaps(),
                "armor": ship.wgt_armor(),
                "machinery": ship.wgt_engine(),
                "hull": ship.wgt_hull(),
                "misc": float(ship.wgts.wgt()),
                "load": ship.wgt_load(),
            }
        items = [WeightItem(name, wgts[name], fdiv(wgts[name], d) * 100.0) for name in WEIGHT_GROUPS]
        return cls(d=d, items=items)

    @property
    def total(self) -> float:
        return sum(item.wgt for item in self.items)

    def get(self, name: str) -> WeightItem:
        for item in self.items:
            if item.name == name:
                return item
        raise KeyError(name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "d": round(self.d, 0),
            "total": round(self.total, 0),
            "items": [item.to_dict() for item in self.items],
        }


@dataclass
class ShipMetrics:
    """
    Every derived figure of a ship, evaluated once.

    Values are exactly what the Ship accessors return within the same
    evaluation pass; only to_dict() rounds.
    """

    name: str = ""

    # Displacement
    d: float = 0.0
    d_lite: float = 0.0
    d_std: float = 0.0
    d_max: float = 0.0
    t_max: float = 0.0
    cb_max: float = 0.0

    # Weights
    wgt_guns: float = 0.0
    wgt_gun_mounts: float = 0.0
    wgt_gun_armor: float = 0.0
    wgt_mag: float = 0.0
    wgt_broad: float = 0.0
    wgt_borne: float = 0.0
    wgt_weaps: float = 0.0
    wgt_armor: float = 0.0
    wgt_engine: float = 0.0
    wgt_bunker: float = 0.0
    wgt_load: float = 0.0
    wgt_hull: float = 0.0
    wgt_hull_plus: float = 0.0
    wgt_struct: float = 0.0
    d_factor: float = 0.0

    # Machinery
    hp_max: float = 0.0
    hp_cruise: float = 0.0

    # Crew
    crew_max: int = 0
    crew_min: int = 0

    # Space
    deck_space: float = 0.0
    hull_space: float = 0.0
    room: float = 0.0
    hull_room: float = 0.0
    deck_room: float = 0.0
    deck_room_quality: str = ""
    hull_room_quality: str = ""
    vitalspace: float = 0.0
    vitalspace_length: float = 0.0

    # Stability
    stability: float = 0.0
    stability_adj: float = 0.0
    metacenter: float = 0.0
    roll_period: float = 0.0
    recoil: float = 0.0
    gun_super_factor: float = 0.0
    super_factor_long: float = 0.0
    gun_concentration: float = 0.0

    # Seakeeping
    seaboat: float = 0.0
    steadiness: float = 0.0
    seakeeping: float = 0.0
    type_sea: str = ""
    seakeeping_desc: List[str] = field(default_factory=list)

    # Strength
    str_cross: float = 0.0
    str_long: float = 0.0
    str_comp: float = 0.0

    # Survivability
    flotation: float = 0.0
    damage_shell_size: float = 0.0
    damage_shell_num: float = 0.0
    damage_torp_num: float = 0.0

    # Cost
    cost_dollar: float = 0.0
    cost_lb: float = 0.0

    ship_type: List[str] = field(default_factory=list)
    design_failures: List[str] = field(default_factory=list)
    advisories: List[str] = field(default_factory=list)

    @classmethod
    def from_ship(cls, ship: Ship) -> "ShipMetrics":
        with ship.evaluation_pass():
            metrics = cls(
                name=ship.name,
                d=ship.d(),
                d_lite=ship.d_lite(),
                d_std=ship.d_std(),
                d_max=ship.d_max(),
                t_max=ship.t_max(),
                cb_max=ship.cb_max(),
                wgt_guns=ship.wgt_guns(),
                wgt_gun_mounts=ship.wgt_gun_mounts(),
                wgt_gun_armor=ship.wgt_gun_armor(),
                wgt_mag=ship.wgt_mag(),
                wgt_broad=ship.wgt_broad(),
                wgt_borne=ship.wgt_borne(),
                wgt_weaps=ship.wgt_weaps(),
                wgt_armor=ship.wgt_armor(),
                wgt_engine=ship.wgt_engine(),
                wgt_bunker=ship.wgt_bunker(),
                wgt_load=ship.wgt_load(),
                wgt_hull=ship.wgt_hull(),
                wgt_hull_plus=ship.wgt_hull_plus(),
                wgt_struct=ship.wgt_struct(),
                d_factor=ship.d_factor(),
                hp_max=ship.hp_max(),
                hp_cruise=ship.hp_cruise(),
                crew_max=ship.crew_max(),
                crew_min=ship.crew_min(),
                deck_space=ship.deck_space(),
                hull_space=ship.hull_space(),
                room=ship.room(),
                hull_room=ship.hull_room(),
                deck_room=ship.deck_room(),
                deck_room_quality=ship.deck_room_quality(),
                hull_room_quality=ship.hull_room_quality(),
                vitalspace=ship.vitalspace(),
                vitalspace_length=ship.vitalspace_length(),
                stability=ship.stability(),
                stability_adj=ship.stability_adj(),
                metacenter=ship.metacenter(),
                roll_period=ship.roll_period(),
                recoil=ship.recoil(),
                gun_super_factor=ship.gun_super_factor(),
                super_factor_long=ship.super_factor_long(),
                gun_concentration=ship.gun_concentration(),
                seaboat=ship.seaboat(),
                steadiness=ship.steadiness(),
                seakeeping=ship.seakeeping(),
                type_sea=ship.type_sea().value,
                seakeeping_desc=ship.seakeeping_desc(),
                str_cross=ship.str_cross(),
                str_long=ship.str_long(),
                str_comp=ship.str_comp(),
                flotation=ship.flotation(),
                damage_shell_size=ship.damage_shell_size(),
                damage_shell_num=ship.damage_shell_num(),
                damage_torp_num=ship.damage_torp_num(),
                cost_dollar=ship.cost_dollar(),
                cost_lb=ship.cost_lb(),
                ship_type=ship.ship_type(),
                design_failures=[f.value for f in ship.design_failures()],
                advisories=[a.value for a in ship.advisories()],
            )
        logger.debug(f"Evaluated metrics for {ship.name!r}: {len(metrics.design_failures)} design failures")
        return metrics

    @property
    def is_buildable(self) -> bool:
        return not self.design_failures

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "displacement": {
                "d": round(self.d, 0),
                "d_lite": round(self.d_lite, 0),
                "d_std": round(self.d_std, 0),
                "d_max": round(self.d_max, 0),
                "t_max": round(self.t_max, 2),
                "cb_max": round(self.cb_max, 3),
            },
            "weights": {
                "guns": round(self.wgt_guns, 1),
                "gun_mounts": round(self.wgt_gun_mounts, 1),
                "gun_armor": round(self.wgt_gun_armor, 1),
                "mag": round(self.wgt_mag, 1),
                "broad_lb": round(self.wgt_broad, 0),
                "borne": round(self.wgt_borne, 1),
                "weaps": round(self.wgt_weaps, 1),
                "armor": round(self.wgt_armor, 1),
                "engine": round(self.wgt_engine, 1),
                "bunker": round(self.wgt_bunker, 1),
                "load": round(self.wgt_load, 1),
                "hull": round(self.wgt_hull, 1),
                "hull_plus": round(self.wgt_hull_plus, 1),
                "struct_lb_ft2": round(self.wgt_struct, 2),
                "d_factor": round(self.d_factor, 3),
            },
            "machinery": {
                "hp_max": round(self.hp_max, 0),
                "hp_cruise": round(self.hp_cruise, 0),
            },
            "crew": {"max": self.crew_max, "min": self.crew_min},
            "space": {
                "deck_space": round(self.deck_space, 4),
                "hull_space": round(self.hull_space, 4),
                "room": round(self.room, 3),
                "hull_room": round(self.hull_room, 3),
                "deck_room": round(self.deck_room, 3),
                "deck_room_quality": self.deck_room_quality,
                "hull_room_quality": self.hull_room_quality,
                "vitalspace": round(self.vitalspace, 1),
                "vitalspace_length": round(self.vitalspace_length, 1),
            },
            "stability": {
                "stability": round(self.stability, 3),
                "stability_adj": round(self.stability_adj, 3),
                "metacenter": round(self.metacenter, 2),
                "roll_period": round(self.roll_period, 1),
                "recoil": round(self.recoil, 3),
                "gun_super_factor": round(self.gun_super_factor, 3),
                "super_factor_long": round(self.super_factor_long, 3),
                "gun_concentration": round(self.gun_concentration, 3),
            },
            "seakeeping": {
                "seaboat": round(self.seaboat, 3),
                "steadiness": round(self.steadiness, 1),
                "seakeeping": round(self.seakeeping, 3),
                "type_sea": self.type_sea,
                "desc": list(self.seakeeping_desc),
            },
            "strength": {
                "cross": round(self.str_cross, 3),
                "long": round(self.str_long, 3),
                "comp": round(self.str_comp, 3),
            },
            "survivability": {
                "flotation": round(self.flotation, 0),
                "shell_size": round(self.damage_shell_size, 1),
                "shell_num": round(self.damage_shell_num, 1),
                "torp_num": round(self.damage_torp_num, 2),
            },
            "cost": {
                "dollar": round(self.cost_dollar, 3),
                "lb": round(self.cost_lb, 3),
            },
            "ship_type": list(self.ship_type),
            "design_failures": list(self.design_failures),
            "advisories": list(self.advisories),
            "is_buildable": self.is_buildable,
        }
