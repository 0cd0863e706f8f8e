"""
Unit tests for hull geometry.
"""

import math

import pytest

from broadside.models.hull import BowType, Hull, SternType, FREEBOARD_LOW


class TestCoefficients:
    """Tests for form coefficients of the 500 x 50 x 10 ft test hull."""

    def test_block_coefficient(self, test_hull):
        """Cb = 7000 * 35 / (500 * 50 * 10)."""
        assert test_hull.cb() == pytest.approx(0.98)

    def test_waterplane_coefficient(self, test_hull):
        """Parsons: Cwp = Cb / (0.471 + 0.551 Cb)."""
        assert test_hull.cwp() == pytest.approx(0.969357, rel=1e-5)

    def test_midship_coefficient(self, test_hull):
        """Kerlen: Cm approaches 1 for a full hull."""
        assert test_hull.cm() == pytest.approx(1.006 - 0.0056 * 0.98 ** -3.56)

    def test_prismatic_coefficient(self, test_hull):
        assert test_hull.cp() == pytest.approx(test_hull.cb() / test_hull.cm())

    def test_alternate_displacement(self, test_hull):
        """cb_calc uses the given displacement and draft."""
        assert test_hull.cb_calc(3500.0, 10.0) == pytest.approx(0.49)

    def test_zero_beam_is_infinite(self, test_hull):
        """Degenerate dimensions give inf, not ZeroDivisionError."""
        test_hull.b = 0.0
        assert test_hull.cb() == math.inf


class TestPrimaryDimensions:
    """Tests for the displacement and length entry points."""

    def test_set_d(self, test_hull):
        test_hull.set_d(5000.0)
        assert test_hull.d() == 5000.0
        assert test_hull.lwl() == 500.0

    def test_set_lwl_keeps_displacement(self, test_hull):
        test_hull.set_lwl(600.0)
        assert test_hull.d() == 7000.0
        assert test_hull.cb() == pytest.approx(7000.0 * 35.0 / (600.0 * 50.0 * 10.0))

    def test_set_cb(self, test_hull):
        """set_cb fixes displacement at the current dimensions."""
        test_hull.set_cb(0.5)
        assert test_hull.d() == pytest.approx(0.5 * 500.0 * 50.0 * 10.0 / 35.0)
        assert test_hull.cb() == pytest.approx(0.5)


class TestAreas:
    """Tests for areas and lengths."""

    def test_waterplane_area(self, test_hull):
        assert test_hull.wp() == pytest.approx(24233.9, rel=1e-4)

    def test_wetted_surface(self, test_hull):
        """Mumford: 1.7 L T + V / T."""
        assert test_hull.ws() == pytest.approx(1.7 * 500.0 * 10.0 + 7000.0 * 35.0 / 10.0)

    def test_wetted_surface_grows_with_shafts(self, test_hull):
        single = test_hull.ws()
        test_hull.shafts = 4
        assert test_hull.ws() > single

    def test_draft_at_displacement(self, test_hull):
        """One waterplane's worth of tons adds a foot of draft."""
        extra = test_hull.wp() / 35.0
        assert test_hull.t_calc(7000.0 + extra) == pytest.approx(11.0)

    def test_len2beam(self, test_hull):
        assert test_hull.len2beam() == 10.0

    def test_aft_deck_takes_remainder(self, test_hull):
        assert test_hull.ad_len() == pytest.approx(0.35)

    def test_leff_stern_overhang(self, test_hull):
        """Half a cruiser stern's overhang counts toward effective length."""
        test_hull.stern_overhang = 10.0
        assert test_hull.leff() == pytest.approx(505.0)
        test_hull.stern_type = SternType.ROUND
        assert test_hull.leff() == pytest.approx(500.0)

    def test_loa_includes_ram(self, test_hull):
        test_hull.bow_type = BowType.RAM
        test_hull.ram_len = 8.0
        test_hull.stern_overhang = 5.0
        assert test_hull.loa() == pytest.approx(513.0)


class TestFreeboard:
    """Tests for freeboard figures."""

    def test_midships(self, test_hull):
        test_hull.fd_aft = 12.0
        test_hull.ad_fwd = 8.0
        assert test_hull.freeboard() == 10.0

    def test_distributed(self, test_hull):
        """Flush 10 ft deck averages to 10 ft."""
        assert test_hull.freeboard_dist() == pytest.approx(10.0)

    def test_free_cap_raises_low_sections(self, test_hull):
        """With cap, sections lower than midships count at midships height."""
        test_hull.qd_fwd = 5.0
        test_hull.qd_aft = 5.0
        assert test_hull.free_cap(False) == pytest.approx(9.25)
        assert test_hull.free_cap(True) == pytest.approx(10.0)

    def test_freeboard_desc(self, test_hull):
        assert test_hull.freeboard_desc() == FREEBOARD_LOW
        test_hull.fc_fwd = 30.0
        assert test_hull.freeboard_desc() == "High freeboard forward, a very dry ship"


class TestHullSerialization:
    """Tests for to_dict / from_dict."""

    def test_round_trip(self, test_hull):
        test_hull.bow_type = BowType.RAM
        test_hull.ram_len = 6.0
        test_hull.stern_type = SternType.CRUISER_TRANSOM
        assert Hull.from_dict(test_hull.to_dict()) == test_hull

    def test_missing_key_raises(self, test_hull):
        data = test_hull.to_dict()
        del data["b"]
        with pytest.raises(KeyError):
            Hull.from_dict(data)
