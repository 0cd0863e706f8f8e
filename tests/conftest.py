"""
broadside Test Configuration and Fixtures

Shared hull and ship fixtures, and a fresh configuration for every test.
"""

import pytest

from broadside.bootstrap.config import BroadsideConfig, set_config
from broadside.models.engine import BoilerType, DriveType, Engine, FuelType
from broadside.models.hull import Hull
from broadside.models.weapons import (
    Battery,
    GunDistributionType,
    GunLayoutType,
    GunType,
    MountType,
    SubBattery,
)
from broadside.ship import Ship


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the default model configuration."""
    config = BroadsideConfig()
    set_config(config)
    yield config
    set_config(None)


def make_hull() -> Hull:
    """500 x 50 x 10 ft hull of 7,000 tons with a flush 10 ft freeboard."""
    hull = Hull()
    hull.set_d(7000.0)
    hull.set_lwl(500.0)
    hull.b = 50.0
    hull.bb = 50.0
    hull.t = 10.0
    hull.fc_len = 0.2
    hull.fc_fwd = 10.0
    hull.fc_aft = 10.0
    hull.fd_len = 0.3
    hull.fd_fwd = 10.0
    hull.fd_aft = 10.0
    hull.ad_fwd = 10.0
    hull.ad_aft = 10.0
    hull.qd_len = 0.15
    hull.qd_fwd = 10.0
    hull.qd_aft = 10.0
    return hull


def make_ship() -> Ship:
    """Turbine cruiser on the test hull with a twin-turret main battery."""
    ship = Ship(name="Test Cruiser", country="Testland", kind="CL", year=1920)
    ship.hull = make_hull()
    ship.engine = Engine(
        vmax=25.0,
        vcruise=12.0,
        range_nm=5000,
        fuel={FuelType.OIL},
        boiler={BoilerType.TURBINE},
        drive={DriveType.GEARED},
        year=1920,
    )
    ship.engine.set_shafts(4, ship.hull)
    ship.batteries[0] = Battery(
        num=8,
        diam=6.0,
        length=50.0,
        kind=GunType.BREECH_LOADING,
        shells=150,
        mount_num=4,
        mount_kind=MountType.CLOSED_BARBETTE,
        groups=[
            SubBattery(layout=GunLayoutType.TWIN, distribution=GunDistributionType.CENTERLINE_ENDS, above=1, on=1),
            SubBattery(layout=GunLayoutType.TWIN, distribution=GunDistributionType.CENTERLINE_ENDS, above=1, on=1),
        ],
        armor_face=3.0,
        armor_back=1.0,
        armor_barb=2.0,
    )
    ship.armor.main.thick = 3.0
    ship.armor.main.length = 300.0
    ship.armor.main.height = 8.0
    ship.armor.deck.md = 1.5
    ship.armor.ct_fwd.thick = 4.0
    return ship


@pytest.fixture
def test_hull() -> Hull:
    return make_hull()


@pytest.fixture
def ship() -> Ship:
    return make_ship()


@pytest.fixture
def bare_ship() -> Ship:
    """Unarmed, unarmored, immobile ship on the test hull."""
    ship = Ship(name="Hulk", year=1920)
    ship.hull = make_hull()
    return ship
