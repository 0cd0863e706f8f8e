"""
broadside Models

Component models the ship aggregates: hull, armor, engine, weapons and
miscellaneous weights.
"""

from broadside.models.hull import Hull, BowType, SternType
from broadside.models.armor import (
    Armor,
    ArmorSection,
    BulkheadType,
    ConningTower,
    DeckArmor,
    DeckType,
)
from broadside.models.engine import Engine, FuelType, BoilerType, DriveType
from broadside.models.weapons import (
    ASW,
    ASWType,
    Battery,
    GunDistributionType,
    GunLayoutType,
    GunType,
    Mines,
    MineType,
    MountType,
    SubBattery,
    Torpedoes,
    TorpedoMountType,
)
from broadside.models.weights import MiscWeights

__all__ = [
    "Hull", "BowType", "SternType",
    "Armor", "ArmorSection", "BulkheadType", "ConningTower", "DeckArmor", "DeckType",
    "Engine", "FuelType", "BoilerType", "DriveType",
    "ASW", "ASWType", "Battery", "GunDistributionType", "GunLayoutType", "GunType",
    "Mines", "MineType", "MountType", "SubBattery", "Torpedoes", "TorpedoMountType",
    "MiscWeights",
]
