"""
Integration tests for the design pipeline.

Import a SpringSharp design, evaluate it, save it and load it back.
"""

import pytest

from broadside.bootstrap.config import BroadsideConfig, DeckEngineCoupling, ModelConfig, set_config
from broadside.core.constants import SPRINGSHARP_VERSION
from broadside.lifecycle import import_springsharp, load_ship, save_ship
from broadside.lifecycle.legacy import LEGACY_FIELDS, TRAILING_SKIP
from broadside.metrics import ShipMetrics, WeightBreakdown
from broadside.models.armor import DeckType
from broadside.models.engine import BoilerType, FuelType
from broadside.models.weapons import MountType

CRUISER = {
    "name": "Example",
    "country": "Testland",
    "kind": "CL",
    "year": "1920",
    "hull.lwl": "500",
    "hull.b": "50",
    "hull.bb": "50",
    "hull.t": "10",
    "hull.cb": "0.98",
    "hull.fc_len": "20",
    "hull.fd_len": "30",
    "hull.qd_len": "15",
    "hull.fc_fwd": "10",
    "hull.fc_aft": "10",
    "hull.fd_fwd": "10",
    "hull.fd_aft": "10",
    "hull.ad_fwd": "10",
    "hull.ad_aft": "10",
    "hull.qd_fwd": "10",
    "hull.qd_aft": "10",
    "batteries.0.num": "8",
    "batteries.0.diam": "6",
    "batteries.0.length": "50",
    "batteries.0.kind": "Breech loading",
    "batteries.0.shells": "150",
    "batteries.0.mount_num": "4",
    "batteries.0.mount_kind": "Turret on barbette",
    "batteries.0.groups.0.distribution": "Centreline ends, evenly spread",
    "batteries.0.groups.1.distribution": "Centreline ends, evenly spread",
    "batteries.0.groups.0.layout": "Twin",
    "batteries.0.groups.1.layout": "Twin",
    "batteries.0.groups.0.above": "1",
    "batteries.0.groups.1.above": "1",
    "batteries.0.groups.1.on": "1",
    "batteries.0.armor_face": "3",
    "batteries.0.armor_back": "1",
    "batteries.0.armor_barb": "2",
    "batteries.0.year": "1920",
    "armor.main.thick": "3",
    "armor.main.length": "300",
    "armor.main.height": "8",
    "armor.deck.md": "1.5",
    "armor.ct_fwd.thick": "4",
    "engine.vmax": "25",
    "engine.vcruise": "12",
    "engine.range_nm": "5,000",
    "engine.shafts": "4",
    "engine.year": "1920",
    "engine.fuel.oil": "True",
    "engine.boiler.turbine": "True",
    "engine.drive.geared": "True",
    "trim": "50",
}


def springsharp_file(path, overrides, notes=()):
    lines = [SPRINGSHARP_VERSION]
    for f in LEGACY_FIELDS:
        if f.name in overrides:
            lines.append(overrides[f.name])
        elif f.kind == "enum":
            lines.append(next(iter(f.enum_type)).value)
        elif f.kind == "bool":
            lines.append("False")
        elif f.kind == "text":
            lines.append("")
        else:
            lines.append("0")
    lines.extend(["0"] * TRAILING_SKIP)
    lines.extend(notes)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def imported(tmp_path):
    path = springsharp_file(tmp_path / "example.sship", CRUISER, notes=["Laid down as a trials cruiser."])
    return import_springsharp(path)


class TestImportedDesign:
    """Tests that an imported design evaluates like a hand-built one."""

    def test_imported_fields(self, imported):
        assert imported.name == "Example"
        assert imported.hull.d() == pytest.approx(7000.0)
        assert imported.engine.fuel == {FuelType.OIL}
        assert imported.engine.boiler == {BoilerType.TURBINE}
        assert imported.batteries[0].mount_kind is MountType.CLOSED_BARBETTE
        assert imported.notes == ["Laid down as a trials cruiser."]

    def test_mount_layout(self, imported):
        g0, g1 = imported.batteries[0].groups
        assert (g0.above, g0.on, g0.below) == (1, 1, 0)
        assert (g1.above, g1.on, g1.below) == (1, 1, 0)
        assert imported.input_errors() == []

    def test_matches_hand_built(self, imported, ship):
        ours = ShipMetrics.from_ship(imported)
        theirs = ShipMetrics.from_ship(ship)
        assert ours.wgt_broad == pytest.approx(theirs.wgt_broad)
        assert ours.wgt_guns == pytest.approx(theirs.wgt_guns)
        assert ours.wgt_armor == pytest.approx(theirs.wgt_armor)
        assert ours.hp_max == pytest.approx(theirs.hp_max)
        assert ours.wgt_engine == pytest.approx(theirs.wgt_engine)
        assert ours.str_comp == pytest.approx(theirs.str_comp)
        assert ours.seakeeping == pytest.approx(theirs.seakeeping)

    def test_breakdown_balances(self, imported):
        breakdown = WeightBreakdown.from_ship(imported)
        assert breakdown.total == pytest.approx(imported.d())


class TestSaveLoad:
    """Tests the ship file round trip of an imported design."""

    def test_round_trip_preserves_metrics(self, imported, tmp_path):
        path = tmp_path / "example.ship"
        save_ship(imported, path)
        restored = load_ship(path)

        assert restored == imported
        before, after = ShipMetrics.from_ship(imported), ShipMetrics.from_ship(restored)
        assert after.wgt_hull == before.wgt_hull
        assert after.flotation == before.flotation
        assert after.design_failures == before.design_failures
        assert after.advisories == before.advisories

    def test_edit_after_load(self, imported, tmp_path):
        path = tmp_path / "example.ship"
        save_ship(imported, path)
        restored = load_ship(path)

        restored.armor.main.thick = 6.0
        assert restored.wgt_armor() > imported.wgt_armor()
        assert restored.wgt_hull() < imported.wgt_hull()


class TestModelConfiguration:
    """Tests configuration effects on a full evaluation."""

    def test_fixed_point_coupling(self, ship):
        ship.armor.deck.kind = DeckType.BOX_MACHINERY
        pinned = ShipMetrics.from_ship(ship)
        set_config(BroadsideConfig(model=ModelConfig(deck_engine_coupling=DeckEngineCoupling.FIXED_POINT)))
        solved = ShipMetrics.from_ship(ship)

        # Above 5,000 tons machinery weight does not depend on deck armor
        assert solved.wgt_engine == pytest.approx(pinned.wgt_engine)
        assert solved.wgt_armor > pinned.wgt_armor
        assert solved.wgt_hull < pinned.wgt_hull
