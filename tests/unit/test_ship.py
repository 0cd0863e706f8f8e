"""
Unit tests for the Ship aggregator.
"""

import logging
import math

import pytest

from broadside.bootstrap.config import BroadsideConfig, DeckEngineCoupling, ModelConfig, set_config
from broadside.models.armor import DeckType
from broadside.models.engine import BoilerType
from broadside.models.weapons import (
    Battery,
    GunDistributionType,
    MountType,
    SubBattery,
    Torpedoes,
    TorpedoMountType,
)
from broadside.ship import Advisory, DesignFailure, SeaType, Ship


def use_model(**kwargs):
    set_config(BroadsideConfig(model=ModelConfig(**kwargs)))


class TestYearAdjustment:
    """Tests for the technology year factor."""

    def test_before_1890(self):
        assert Ship.year_adj(1889) == pytest.approx(0.985, abs=1e-5)

    def test_linear_before_1890(self):
        assert Ship.year_adj(1860) == pytest.approx(1.0 - 30.0 / 66.666664)

    def test_plateau(self):
        assert Ship.year_adj(1890) == 1.0
        assert Ship.year_adj(1920) == 1.0
        assert Ship.year_adj(1950) == 1.0

    def test_after_1950(self):
        assert Ship.year_adj(1951) == 0.0


class TestCrew:
    """Tests for complement."""

    def test_crew_for_1000_tons(self, bare_ship):
        bare_ship.hull.set_d(1000.0)
        assert bare_ship.crew_max() == 115
        assert bare_ship.crew_min() == 88

    def test_no_displacement_no_crew(self, bare_ship):
        bare_ship.hull.set_d(0.0)
        assert bare_ship.crew_max() == 0
        assert bare_ship.crew_min() == 0


class TestSpace:
    """Tests for deck and hull space."""

    def fit(self, ship, kind):
        ship.torps[0] = Torpedoes(num=3, mounts=2, diam=20.0, length=10.0, mount_kind=kind)

    def test_no_torpedoes(self, bare_ship):
        assert bare_ship.deck_space() == 0.0
        assert bare_ship.hull_space() == 0.0

    def test_centre_tubes(self, bare_ship):
        self.fit(bare_ship, TorpedoMountType.CENTER_TUBES)
        assert bare_ship.deck_space() == pytest.approx(0.0415, abs=1e-4)
        assert bare_ship.hull_space() == 0.0

    @pytest.mark.parametrize(
        "kind, deck, hull",
        [
            (TorpedoMountType.FIXED_TUBES, 0.002, 0.0),
            (TorpedoMountType.DECK_SIDE_TUBES, 0.0039, 0.0),
            (TorpedoMountType.CENTER_TUBES, 0.0415, 0.0),
            (TorpedoMountType.DECK_RELOADS, 0.0039, 0.0),
            (TorpedoMountType.BOW_TUBES, 0.0, 0.0064),
            (TorpedoMountType.STERN_TUBES, 0.0, 0.0064),
            (TorpedoMountType.BOW_AND_STERN_TUBES, 0.0, 0.0064),
            (TorpedoMountType.SUBMERGED_SIDE_TUBES, 0.0, 0.0064),
            (TorpedoMountType.SUBMERGED_RELOADS, 0.0, 0.0011),
        ],
    )
    def test_space_by_mount_type(self, bare_ship, kind, deck, hull):
        self.fit(bare_ship, kind)
        assert round(bare_ship.deck_space(), 4) == deck
        assert round(bare_ship.hull_space(), 4) == hull

    def test_submerged_tubes(self, bare_ship):
        self.fit(bare_ship, TorpedoMountType.SUBMERGED_SIDE_TUBES)
        assert bare_ship.hull_space() == pytest.approx(0.0064, abs=1e-4)
        assert bare_ship.deck_space() == 0.0

    def test_submerged_reloads(self, bare_ship):
        self.fit(bare_ship, TorpedoMountType.SUBMERGED_RELOADS)
        assert bare_ship.hull_space() == pytest.approx(0.0011, abs=1e-4)

    def test_space_never_negative(self, bare_ship):
        for kind in TorpedoMountType:
            self.fit(bare_ship, kind)
            assert bare_ship.deck_space() >= 0.0
            assert bare_ship.hull_space() >= 0.0

    def test_room_quality(self, bare_ship, monkeypatch):
        for value, label in ((1.5, "Excellent"), (1.0, "Adequate"), (0.5, "Cramped"), (0.3, "Poor")):
            monkeypatch.setattr(Ship, "deck_room", lambda self, v=value: v)
            assert bare_ship.deck_room_quality() == label

    def test_hull_room_quality(self, bare_ship, monkeypatch):
        for value, label in ((0.5, "Excellent"), (1.0, "Adequate"), (2.0, "Cramped"), (2.5, "Extremely poor")):
            monkeypatch.setattr(Ship, "hull_room", lambda self, v=value: v)
            assert bare_ship.hull_room_quality() == label


class TestDisplacement:
    """Tests for displacement variants and weight balance."""

    def test_immobile_ship(self, bare_ship):
        """No machinery, no bunker: only stores are load."""
        assert bare_ship.wgt_bunker() == 0.0
        assert bare_ship.wgt_load() == pytest.approx(140.0)
        assert bare_ship.d_lite() == pytest.approx(6860.0)
        assert bare_ship.d_std() == pytest.approx(7000.0)
        assert bare_ship.d_max() == pytest.approx(7000.0)

    def test_bare_hull_carries_everything(self, bare_ship):
        assert bare_ship.wgt_engine() == 0.0
        assert bare_ship.wgt_armor() == 0.0
        assert bare_ship.wgt_hull() == pytest.approx(6860.0)

    def test_weights_balance(self, ship):
        """Hull weight is whatever the other groups leave."""
        total = (
            ship.wgt_guns() + ship.wgt_gun_mounts() + ship.wgt_weaps() + ship.wgt_armor()
            + ship.wgt_engine() + ship.wgt_load() + ship.wgts.wgt() + ship.wgt_hull()
        )
        assert total == pytest.approx(ship.d())

    def test_max_displacement(self, ship):
        bunker = ship.wgt_bunker()
        assert bunker > 0
        assert ship.d_max() == pytest.approx(7000.0 + 0.8 * bunker)
        assert ship.d_std() == pytest.approx(7000.0 - bunker)
        assert ship.t_max() > ship.hull.t

    def test_borne_weight(self, ship):
        battery = ship.batteries[0]
        assert ship.wgt_borne() == pytest.approx(battery.gun_wgt() * 1.6 * 2.0)

    def test_engine_weight_is_half_engine_displacement(self, ship):
        """Above 5,000 tons the displacement factor has no effect."""
        assert ship.wgt_engine() == pytest.approx(ship.d_engine() / 2.0)

    def test_light_ship_relief(self, ship):
        """A small, heavily loaded ship gets lighter machinery."""
        ship.hull.set_d(1000.0)
        ship.hull.set_lwl(250.0)
        ship.hull.b = 25.0
        ship.hull.t = 8.0
        ship.armor.main.thick = 12.0
        assert ship.d_factor() < 1.0
        assert ship.wgt_engine() < ship.d_engine() / 2.0


class TestGunFactors:
    """Tests for gun height and concentration factors."""

    def test_unarmed_sentinel(self, bare_ship):
        assert bare_ship.gun_super_factor() == 1.0

    def test_raised_guns(self, ship):
        """Mounts average 1.4 deck heights, weighted by the turret factor."""
        assert ship.batteries[0].super_(ship.hull) == pytest.approx(1.4)
        assert ship.gun_super_factor() == pytest.approx(1.4 * 1.6)

    def test_concentration(self, ship):
        assert ship.gun_concentration() == pytest.approx(1.0)

    def test_super_factor_long_spread(self, bare_ship):
        """Without a main battery the factor is the hull room."""
        assert bare_ship.super_factor_long() == pytest.approx(bare_ship.hull_room())

    def test_super_factor_long_concentrated(self, ship):
        """Both groups at one end take the concentration penalty."""
        for g in ship.batteries[0].groups:
            g.distribution = GunDistributionType.CENTERLINE_FWD
        expected = ship.hull_room() * 0.8 * ship.gun_super_factor()
        assert ship.super_factor_long() == pytest.approx(expected)

    def test_cap_calc_broadside(self, bare_ship, ship):
        assert bare_ship.cap_calc_broadside() is True
        assert ship.cap_calc_broadside() is False


class TestDeckEngineCoupling:
    """Tests for the deck armor / machinery break point."""

    def box_deck(self, ship):
        ship.armor.deck.kind = DeckType.BOX_MACHINERY
        ship.armor.deck.md = 2.0

    def test_pinned_at_break_point(self, ship):
        assert ship.deck_engine_wgt() == 0.0

    def test_fixed_point_converges(self, ship):
        use_model(deck_engine_coupling=DeckEngineCoupling.FIXED_POINT)
        assert ship.deck_engine_wgt() == pytest.approx(ship.wgt_engine())

    def test_box_deck_grows_with_machinery(self, ship):
        self.box_deck(ship)
        pinned = ship.wgt_armor()
        use_model(deck_engine_coupling=DeckEngineCoupling.FIXED_POINT)
        assert ship.wgt_armor() > pinned

    def test_non_convergence_warns(self, ship, caplog, monkeypatch):
        use_model(deck_engine_coupling=DeckEngineCoupling.FIXED_POINT, fixed_point_max_iterations=3)
        monkeypatch.setattr(Ship, "_engine_wgt", lambda self, w: w + 1.0)
        with caplog.at_level(logging.WARNING, logger="broadside.ship"):
            assert ship.deck_engine_wgt() == 3.0
        assert "did not converge" in caplog.text


class TestEvaluationPass:
    """Tests for memoized evaluation."""

    def test_figures_follow_edits(self, bare_ship):
        before = bare_ship.wgt_load()
        bare_ship.hull.set_d(8000.0)
        assert bare_ship.wgt_load() != before

    def test_memo_within_pass(self, bare_ship):
        with bare_ship.evaluation_pass():
            before = bare_ship.wgt_load()
            bare_ship.hull.set_d(8000.0)
            assert bare_ship.wgt_load() == before
        assert bare_ship.wgt_load() == pytest.approx(160.0)

    def test_nested_pass_shares_memo(self, bare_ship):
        with bare_ship.evaluation_pass():
            outer = bare_ship.wgt_load()
            with bare_ship.evaluation_pass():
                bare_ship.hull.set_d(8000.0)
                assert bare_ship.wgt_load() == outer
            assert bare_ship._memo is not None
        assert bare_ship._memo is None

    def test_pass_values_match(self, ship):
        plain = ship.seakeeping()
        with ship.evaluation_pass():
            assert ship.seakeeping() == plain


class TestStrength:
    """Tests for hull strength."""

    def test_comp_equals_cross_when_balanced(self, bare_ship, monkeypatch):
        monkeypatch.setattr(Ship, "str_cross", lambda self: 0.8)
        monkeypatch.setattr(Ship, "str_long", lambda self: 0.8)
        assert bare_ship.str_comp() == pytest.approx(0.8)

    def test_comp_weighted_to_weaker(self, bare_ship, monkeypatch):
        monkeypatch.setattr(Ship, "str_cross", lambda self: 2.0)
        monkeypatch.setattr(Ship, "str_long", lambda self: 1.0)
        assert bare_ship.str_comp() == pytest.approx(2.0 ** 0.25)

    def test_pre_1900_derating(self, ship):
        modern = ship.str_cross()
        ship.year = 1880
        assert ship.str_cross() == pytest.approx(modern * 0.8)

    def test_whole_century_derating(self, ship):
        """Derating by whole centuries leaves the nineteenth century untouched."""
        use_model(linear_pre_1900_derating=False)
        modern = ship.str_cross()
        ship.year = 1880
        assert ship.str_cross() == pytest.approx(modern)
        assert Ship._pre_1900(1801) == 1.0
        assert Ship._pre_1900(1800) == 0.0

    def test_hull_strained(self, bare_ship, monkeypatch):
        monkeypatch.setattr(Ship, "str_comp", lambda self: 0.7)
        assert bare_ship.hull_strained() is True
        monkeypatch.setattr(Ship, "str_comp", lambda self: 0.9)
        assert bare_ship.hull_strained() is False


class TestSurvivability:
    """Tests for flotation and damage figures."""

    def test_flotation_non_negative(self, bare_ship, ship):
        assert bare_ship.flotation() >= 0.0
        assert ship.flotation() >= 0.0

    def test_flotation_falls_with_stability(self, bare_ship, monkeypatch):
        values = []
        for adj in (0.95, 0.8, 0.6, 0.4):
            monkeypatch.setattr(Ship, "stability_adj", lambda self, a=adj: a)
            values.append(bare_ship.flotation())
        assert all(a > b for a, b in zip(values, values[1:]))
        assert values[-1] > 0

    def test_damage_shell_size(self, bare_ship, ship):
        assert bare_ship.damage_shell_size() == 6.0
        ship.batteries[0].diam = 12.0
        assert ship.damage_shell_size() == 12.0

    def test_bigger_shells_fewer_hits(self, ship):
        small = ship.damage_shell_num()
        ship.batteries[0].diam = 12.0
        assert ship.damage_shell_num() < small

    def test_torpedo_hits(self, bare_ship):
        hits = bare_ship.damage_torp_num()
        assert hits > 0 and math.isfinite(hits)

    def test_bigger_torpedoes_fewer_hits(self, bare_ship):
        bare_ship.torps[0] = Torpedoes(num=4, mounts=1, diam=18.0, length=16.0)
        small = bare_ship.damage_torp_num()
        bare_ship.torps[0].diam = 24.0
        assert bare_ship.damage_torp_num() < small


class TestCost:
    """Tests for cost."""

    def test_pre_war_cost(self, bare_ship):
        bare_ship.year = 1900
        assert bare_ship.cost_dollar() == pytest.approx(6860.0 * 0.00014)

    def test_wartime_escalation(self, bare_ship):
        bare_ship.year = 1920
        assert bare_ship.cost_dollar() == pytest.approx(6860.0 * 0.00014 * (1 + 7.5 / 5.5))
        assert bare_ship.cost_lb() == pytest.approx(bare_ship.cost_dollar() / 4.0)


class TestSeakeeping:
    """Tests for seakeeping classification."""

    @pytest.mark.parametrize("value,expected", [
        (0.5, SeaType.BAD_SEA),
        (0.9, SeaType.POOR_SEA),
        (1.0, SeaType.ERROR),
        (1.3, SeaType.GOOD_SEA),
        (1.6, SeaType.FINE_SEA),
    ])
    def test_type_sea(self, bare_ship, monkeypatch, value, expected):
        monkeypatch.setattr(Ship, "seakeeping", lambda self: value)
        assert bare_ship.type_sea() == expected

    def test_fine_seaboat_with_guns(self, ship, monkeypatch):
        monkeypatch.setattr(Ship, "seakeeping", lambda self: 1.6)
        monkeypatch.setattr(Ship, "steadiness", lambda self: 50.0)
        assert ship.seakeeping_desc() == [
            "Excellent seaboat, comfortable, can fire her guns in the heaviest weather",
        ]

    def test_steady_platform(self, bare_ship, monkeypatch):
        monkeypatch.setattr(Ship, "seakeeping", lambda self: 0.5)
        monkeypatch.setattr(Ship, "steadiness", lambda self: 80.0)
        desc = bare_ship.seakeeping_desc()
        assert desc[0] == "Ship has slow easy roll, a good steady, gun platform"
        assert desc[1].startswith("Caution: Lacks seaworthiness")

    def test_seaboat_capped(self, ship):
        assert ship.seaboat() <= 2.0
        assert ship.steadiness() <= 100.0

    def test_trim_trades_stability_for_steadiness(self, ship):
        stable = ship.stability_adj()
        ship.trim = 80
        assert ship.stability_adj() < stable


class TestClassification:
    """Tests for period type labels."""

    def test_barbette_ship(self, ship):
        ship.batteries[0].mount_kind = MountType.OPEN_BARBETTE
        assert "Barbette Ship" in ship.ship_type()

    def test_central_citadel(self, ship):
        ship.batteries[0].groups[0].distribution = GunDistributionType.CENTERLINE_FD
        assert "Central Citadel Ship" in ship.ship_type()

    def test_unarmoured_frigate(self, bare_ship):
        bare_ship.batteries[0] = Battery(
            num=20, diam=6.0, length=20.0, mount_num=20, mount_kind=MountType.BROADSIDE,
            groups=[SubBattery(below=20), SubBattery()],
        )
        assert bare_ship.ship_type() == ["Frigate (Unarmoured)"]

    def test_armoured_corvette(self, bare_ship):
        bare_ship.batteries[0] = Battery(
            num=8, diam=8.0, length=20.0, mount_num=8, mount_kind=MountType.BROADSIDE,
            groups=[SubBattery(on=8), SubBattery()],
        )
        bare_ship.armor.main.thick = 4.0
        bare_ship.armor.main.length = 300.0
        bare_ship.armor.main.height = 8.0
        assert bare_ship.ship_type() == ["Armoured Corvette (Central Battery Ironclad)"]

    def test_secondary_below_reads_main_second_group(self, bare_ship):
        bare_ship.batteries[0] = Battery(
            num=8, diam=8.0, length=20.0, mount_num=8, mount_kind=MountType.BROADSIDE,
            groups=[SubBattery(on=8), SubBattery()],
        )
        bare_ship.batteries[1] = Battery(
            num=4, diam=4.0, length=20.0, mount_num=4, mount_kind=MountType.BROADSIDE,
            groups=[SubBattery(on=4), SubBattery(below=4)],
        )
        assert bare_ship.ship_type() == ["Corvette (Unarmoured)"]
        use_model(corrected_ship_type_below=True)
        assert bare_ship.ship_type() == ["Frigate (Unarmoured)"]

    def test_superfiring_flag(self, ship):
        battery = ship.batteries[0]
        battery.groups[0].above, battery.groups[0].on = 0, 2
        battery.groups[1].above, battery.groups[1].on = 2, 0
        assert ship.is_superfiring(0, 1) is False
        use_model(corrected_group_superfire=True)
        assert ship.is_superfiring(0, 1) is True


class TestFailures:
    """Tests for design failures and advisories."""

    def test_bare_ship_buildable(self, bare_ship):
        assert bare_ship.design_failures() == []

    def test_impossible_displacement(self, bare_ship):
        bare_ship.hull.b = 0.0
        assert DesignFailure.DISPLACEMENT in bare_ship.design_failures()

    def test_gun_weight(self, bare_ship):
        bare_ship.batteries[0] = Battery(num=1, diam=1.0, length=10.0, mount_num=1, groups=[SubBattery(on=1), SubBattery()])
        bare_ship.batteries[0].set_shell_wgt(40000.0)
        assert DesignFailure.GUN_WEIGHT in bare_ship.design_failures()

    def test_armour_failure_monotonic(self, bare_ship):
        """Once armor outweighs the ship, thicker armor never clears the flag."""
        bare_ship.armor.main.length = 500.0
        bare_ship.armor.main.height = 20.0
        flags = []
        for thick in (0.0, 5.0, 10.0, 20.0, 40.0, 80.0):
            bare_ship.armor.main.thick = thick
            flags.append(DesignFailure.ARMOR_WEIGHT in bare_ship.design_failures())
        assert flags == sorted(flags)
        assert flags[0] is False and flags[-1] is True

    def test_failure_order(self, bare_ship, monkeypatch):
        monkeypatch.setattr(Ship, "str_comp", lambda self: 0.1)
        monkeypatch.setattr(Ship, "metacenter", lambda self: -1.0)
        bare_ship.hull.b = 0.0
        failures = bare_ship.design_failures()
        assert failures[0] == DesignFailure.DISPLACEMENT
        assert failures[-2:] == [DesignFailure.LOAD_WEIGHT, DesignFailure.CAPSIZE]

    def test_capsize(self, bare_ship, monkeypatch):
        monkeypatch.setattr(Ship, "metacenter", lambda self: 0.0)
        assert bare_ship.capsize_warn() is True
        assert DesignFailure.CAPSIZE in bare_ship.design_failures()

    def test_tender_advisory(self, bare_ship, monkeypatch):
        monkeypatch.setattr(Ship, "stability_adj", lambda self: 0.9)
        assert Advisory.TENDER in bare_ship.advisories()

    def test_capsizing_ship_is_not_reported_tender(self, bare_ship, monkeypatch):
        monkeypatch.setattr(Ship, "stability_adj", lambda self: 0.9)
        monkeypatch.setattr(Ship, "metacenter", lambda self: -1.0)
        assert DesignFailure.CAPSIZE in bare_ship.design_failures()
        assert Advisory.TENDER not in bare_ship.advisories()

    def test_shaft_power_advisory(self, ship, monkeypatch):
        monkeypatch.setattr(Ship, "hp_max", lambda self: 300004.0)
        advisories = ship.advisories()
        assert Advisory.SHAFT_POWER in advisories
        assert Advisory.RECIP_POWER not in advisories

    def test_reciprocating_power_advisory_wins(self, ship, monkeypatch):
        ship.engine.boiler = {BoilerType.COMPLEX}
        monkeypatch.setattr(Ship, "hp_max", lambda self: 400000.0)
        advisories = ship.advisories()
        assert Advisory.RECIP_POWER in advisories
        assert Advisory.SHAFT_POWER not in advisories

    def test_delicate_machinery(self, bare_ship, monkeypatch):
        monkeypatch.setattr(Ship, "d_engine", lambda self: 100.0)
        monkeypatch.setattr(Ship, "wgt_engine", lambda self: 19.9)
        assert bare_ship.delicate_machinery() is True
        assert Advisory.DELICATE_MACHINERY in bare_ship.advisories()
        monkeypatch.setattr(Ship, "wgt_engine", lambda self: 20.0)
        assert bare_ship.delicate_machinery() is False

    def test_immobile_ship_is_not_delicate(self, bare_ship):
        assert bare_ship.delicate_machinery() is False

    def test_short_belt(self, ship):
        ship.armor.main.length = 10.0
        assert Advisory.SHORT_BELT in ship.advisories()

    def test_messages(self):
        assert DesignFailure.CAPSIZE.value == "DESIGN FAILURE: Ship will capsize"
        assert Advisory.TENDER.value == "Caution: Poor stability - excessive risk of capsizing"


class TestInputErrors:
    """Tests for structural input checks."""

    def test_valid_ship(self, ship):
        assert ship.input_errors() == []

    def test_bad_dimensions(self, bare_ship):
        bare_ship.hull.b = 0.0
        bare_ship.trim = 150
        fields = [e.field for e in bare_ship.input_errors()]
        assert fields == ["hull.b", "trim"]

    def test_mount_count_mismatch(self, ship):
        ship.batteries[0].mount_num = 5
        errors = ship.input_errors()
        assert len(errors) == 1
        assert errors[0].field == "batteries[0].mount_num"

    def test_bulkhead_beam(self, bare_ship):
        bare_ship.armor.bulkhead.thick = 1.5
        assert [e.field for e in bare_ship.input_errors()] == ["armor.bh_beam"]


class TestShipSerialization:
    """Tests for to_dict / from_dict."""

    def test_default_round_trip(self):
        ship = Ship()
        assert Ship.from_dict(ship.to_dict()) == ship

    def test_round_trip_refreshes_shafts(self, ship):
        restored = Ship.from_dict(ship.to_dict())
        assert restored == ship
        assert restored.hull.shafts == 4
