"""
broadside Ship Performance Model

The Ship record and every whole-ship figure derived from it: displacement
variants, weights, room, stability, seakeeping, strength, survivability,
cost and design failures.

Figures are pulled on demand and recomputed on every call. Inside
`with ship.evaluation_pass():` each figure is computed once and reused; the
memo is dropped when the pass ends, so a pass must not span changes to the
record.

Engine weight and deck armor weight depend on each other. The deck armor
term is evaluated with the engine weight pinned at
DECK_ARMOR_ENGINE_BREAK_POINT unless the model configuration selects the
fixed-point solver.
"""

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional
import functools
import logging
import math

from broadside.bootstrap.config import DeckEngineCoupling, get_config
from broadside.core.constants import (
    COST_ESCALATION_YEAR,
    CREW_MAX_COEFF,
    CREW_MAX_EXPONENT,
    CREW_MIN_RATIO,
    DECK_ARMOR_ENGINE_BREAK_POINT,
    FT3_PER_TON_SEA,
    MAX_BUNKER_FRACTION,
    POUND2TON,
    STORES_FRACTION,
    YEAR_ADJ_EARLY,
    YEAR_ADJ_LATE,
    YEAR_ADJ_SPAN,
)
from broadside.core.numeric import fdiv, fmax, fmin, powf, sqrt, to_u32
from broadside.errors.taxonomy import StructuralInputError
from broadside.models.armor import Armor, BulkheadType
from broadside.models.engine import Engine
from broadside.models.hull import Hull
from broadside.models.weapons import (
    ASW,
    Battery,
    GunDistributionType,
    Mines,
    MountType,
    Torpedoes,
)
from broadside.models.weights import MiscWeights

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMERATIONS
# =============================================================================

class SeaType(Enum):
    """Seakeeping classification."""
    BAD_SEA = "BadSea"
    POOR_SEA = "PoorSea"
    FINE_SEA = "FineSea"
    GOOD_SEA = "GoodSea"
    ERROR = "Error"  # 0.995 <= seakeeping < 1.2 falls between the bands


class DesignFailure(str, Enum):
    """Conditions that make a design unbuildable. Values are report text."""
    DISPLACEMENT = "DESIGN FAILURE: Displacement impossible with given dimensions"
    GUN_WEIGHT = "DESIGN FAILURE: Gun weight too much for hull"
    ARMOR_WEIGHT = "DESIGN FAILURE: Armour weight too much for hull"
    LOAD_WEIGHT = "DESIGN FAILURE: Overall load weight too much for hull"
    CAPSIZE = "DESIGN FAILURE: Ship will capsize"


class Advisory(str, Enum):
    """Warnings about a buildable but flawed design. Values are report text."""
    TENDER = "Caution: Poor stability - excessive risk of capsizing"
    HULL_STRAINED = "Caution: Hull subject to strain in open-sea"
    RECIP_POWER = "Caution: Too much power for reciprocating engines."
    SHAFT_POWER = "Caution: Too much power for number of propellor shafts."
    DELICATE_MACHINERY = "Caution: Delicate, lightweight machinery."
    SHORT_BELT = "Caution: Main belt does not cover the vital spaces"


# =============================================================================
# CONSTANTS
# =============================================================================

SEA_DESC = {
    SeaType.BAD_SEA: "Caution: Lacks seaworthiness - very limited seakeeping ability",
    SeaType.POOR_SEA: "Poor seaboat, wet and uncomfortable, reduced performance in heavy weather",
    SeaType.GOOD_SEA: "Good seaboat, rides out heavy weather easily",
    SeaType.ERROR: "Invalid SeaType",
}
STEADY_DESC = "Ship has slow easy roll, a good steady, gun platform"
UNSTEADY_DESC = "Ship has quick, lively roll, not a steady gun platform"

NUM_BATTERIES = 5
NUM_TORPS = 2
NUM_ASW = 2


# =============================================================================
# MEMOIZATION
# =============================================================================

def metric(func):
    """Cache a figure for the duration of an evaluation pass."""

    @functools.wraps(func)
    def wrapper(self, *args):
        memo = self._memo
        if memo is None:
            return func(self, *args)
        key = (func.__name__,) + args
        if key not in memo:
            memo[key] = func(self, *args)
        return memo[key]

    return wrapper


# =============================================================================
# SHIP
# =============================================================================

@dataclass
class Ship:
    """
    All the parts of a ship.

    batteries[0] is the main battery; torps[0] and asw[0] are the main
    torpedo and ASW fits, index 1 the secondary.
    """

    name: str = ""
    country: str = ""
    kind: str = ""  # informative only
    year: int = 1920  # laid down

    # Balance between stability (0) and steadiness (100)
    trim: int = 50

    hull: Hull = field(default_factory=Hull)
    armor: Armor = field(default_factory=Armor)
    engine: Engine = field(default_factory=Engine)
    batteries: List[Battery] = field(default_factory=lambda: [Battery() for _ in range(NUM_BATTERIES)])
    torps: List[Torpedoes] = field(default_factory=lambda: [Torpedoes() for _ in range(NUM_TORPS)])
    mines: Mines = field(default_factory=Mines)
    asw: List[ASW] = field(default_factory=lambda: [ASW() for _ in range(NUM_ASW)])
    wgts: MiscWeights = field(default_factory=MiscWeights)

    notes: List[str] = field(default_factory=list)

    _memo: Optional[Dict[tuple, Any]] = field(default=None, init=False, repr=False, compare=False)

    @contextmanager
    def evaluation_pass(self) -> Iterator["Ship"]:
        """Memoize figures until the block exits. Nested passes share the outer memo."""
        if self._memo is not None:
            yield self
            return
        self._memo = {}
        try:
            yield self
        finally:
            self._memo = None

    # ==================== Year adjustment ====================

    @staticmethod
    def year_adj(year: int) -> float:
        """Technology factor: linear before 1890, 1 to 1950, 0 after."""
        if year <= YEAR_ADJ_EARLY:
            return 1.0 - (YEAR_ADJ_EARLY - year) / YEAR_ADJ_SPAN
        if year <= YEAR_ADJ_LATE:
            return 1.0
        return 0.0

    # ==================== Space ====================

    @metric
    def deck_space(self) -> float:
        """Share of the waterplane taken by deck-mounted torpedoes."""
        space = sum(w.deck_space(self.hull.b) for w in self.torps)
        return fdiv(space, self.hull.wp())

    @metric
    def hull_space(self) -> float:
        """Share of the underwater volume taken by hull-mounted torpedoes."""
        space = sum(w.hull_space() for w in self.torps)
        return fdiv(space, self.hull.d() * FT3_PER_TON_SEA)

    @metric
    def room(self) -> float:
        """Load on the internal volume: vitals, stores and machinery against displacement."""
        load = (
            self.wgt_mag()
            + self.hull.d() * STORES_FRACTION
            + self.wgt_borne() * 6.4
            + self.wgt_engine() * 3.0
            + self.wgts.vital
            + self.wgts.hull
        )
        return fdiv(fdiv(load, self.hull.d() * 0.94), 1.0 - self.hull_space())

    @metric
    def hull_room(self) -> float:
        """Room, tightened by torpedo bulkheads set inboard of the side."""
        hull = self.hull
        if self.armor.bulkhead.wgt(hull.lwl(), hull.cwp(), hull.b) > 0.1:
            return self.room() * fdiv(hull.b, self.armor.bh_beam)
        return self.room()

    @metric
    def deck_room(self) -> float:
        """Deck area per crewman, relative to a norm."""
        hull = self.hull
        return fdiv(
            hull.wp() / FT3_PER_TON_SEA / 15.0 * (1.0 - self.deck_space()),
            self.crew_min(),
        ) * hull.freeboard_dist()

    def deck_room_quality(self) -> str:
        sp = self.deck_room()
        if sp > 1.2:
            return "Excellent"
        if sp > 0.9:
            return "Adequate"
        if sp >= 0.5:
            return "Cramped"
        return "Poor"

    def hull_room_quality(self) -> str:
        sp = self.hull_room()
        if sp < 5.0 / 6.0:
            return "Excellent"
        if sp < 1.1111112:
            return "Adequate"
        if sp <= 2.0:
            return "Cramped"
        return "Extremely poor"

    def vitalspace(self) -> float:
        """Forecastle and quarterdeck length (% of lwl) left over by the vital spaces."""
        return (1.0 - 0.65 * self.hull_room()) * 50.0 - 0.01

    def vitalspace_length(self) -> float:
        """Minimum belt length covering machinery and magazines, ft."""
        return self.hull.lwl() * 0.65 * self.hull_room() + 0.01

    # ==================== Displacement ====================

    def d(self) -> float:
        return self.hull.d()

    @metric
    def wgt_bunker(self) -> float:
        hull = self.hull
        return self.engine.bunker(hull.d(), hull.lwl(), hull.leff(), hull.cs(), hull.ws())

    def wgt_bunker_max(self) -> float:
        hull = self.hull
        return self.engine.bunker_max(hull.d(), hull.lwl(), hull.leff(), hull.cs(), hull.ws())

    @metric
    def wgt_load(self) -> float:
        """Bunker, magazines and stores."""
        return self.hull.d() * STORES_FRACTION + self.wgt_bunker() + self.wgt_mag()

    def d_lite(self) -> float:
        """Light displacement: no bunker, magazines or stores."""
        return self.hull.d() - self.wgt_load()

    def d_std(self) -> float:
        """Standard displacement (Washington/London treaties): no bunker."""
        return self.hull.d() - self.wgt_bunker()

    def d_max(self) -> float:
        """Maximum displacement: full bunker, magazines and stores."""
        return self.hull.d() + MAX_BUNKER_FRACTION * self.wgt_bunker()

    def t_max(self) -> float:
        return self.hull.t_calc(self.d_max())

    def cb_max(self) -> float:
        d_max = self.d_max()
        return self.hull.cb_calc(d_max, self.hull.t_calc(d_max))

    # ==================== Crew ====================

    def crew_max(self) -> int:
        return to_u32(powf(self.hull.d(), CREW_MAX_EXPONENT) * CREW_MAX_COEFF)

    def crew_min(self) -> int:
        return to_u32(self.crew_max() * CREW_MIN_RATIO)

    # ==================== Weapon weights ====================

    @metric
    def wgt_guns(self) -> float:
        return sum(b.gun_wgt() for b in self.batteries)

    @metric
    def wgt_gun_mounts(self) -> float:
        return sum(b.mount_wgt() for b in self.batteries)

    @metric
    def wgt_gun_armor(self) -> float:
        return sum(b.armor_wgt(self.hull) for b in self.batteries)

    @metric
    def wgt_mag(self) -> float:
        return sum(b.mag_wgt() for b in self.batteries)

    @metric
    def wgt_broad(self) -> float:
        """Broadside, lb."""
        return sum(b.broadside_wgt() for b in self.batteries)

    @metric
    def wgt_borne(self) -> float:
        """Gun weight carried high and trained, counted twice."""
        return sum(b.gun_wgt() * b.mount_kind.wgt_adj for b in self.batteries) * 2.0

    @metric
    def wgt_weaps(self) -> float:
        """Torpedoes, mines and ASW weapons with their mounts."""
        return (
            sum(w.wgt() for w in self.torps)
            + sum(w.total_wgt() for w in self.asw)
            + self.mines.total_wgt()
        )

    @metric
    def gun_concentration(self) -> float:
        wgt_broad = self.wgt_broad()
        return sum(b.concentration(wgt_broad) for b in self.batteries)

    @metric
    def gun_wtf(self) -> float:
        """Gun, mount and gun armor weight weighted by mount height and trainable share."""
        wtf = 0.0
        for b in self.batteries:
            if b.diam == 0:
                continue
            wtf += (b.gun_wgt() + b.mount_wgt() + b.armor_wgt(self.hull)) * b.super_(self.hull) * b.mount_kind.wgt_adj
        return wtf

    @metric
    def gun_super_factor(self) -> float:
        """Mean height of the armament; 1.0 for an unarmed ship."""
        total = self.wgt_gun_armor() + self.wgt_guns() + self.wgt_gun_mounts()
        if total == 0:
            return 1.0
        return self.gun_wtf() / total

    @metric
    def super_factor_long(self) -> float:
        """Penalty for main battery weight concentrated along the hull."""
        main = self.batteries[0]
        g0, g1 = main.groups
        gsf = self.gun_super_factor()
        even = (GunDistributionType.CENTERLINE_EVEN, GunDistributionType.SIDES_EVEN)

        a = self.hull_room()
        if (g0.distribution in even or g1.distribution in even) and main.mount_num in (3, 4):
            a *= gsf

        fd_len, ad_len = self.hull.fd_len, self.hull.ad_len()
        concentrated = (
            (g0.num_mounts() > 0 and g1.num_mounts() == 0 and g0.distribution.super_factor_long)
            or (g1.num_mounts() > 0 and g0.num_mounts() == 0 and g1.distribution.super_factor_long)
            or (
                g0.num_mounts() > 0
                and g1.num_mounts() > 0
                and abs(g0.distribution.g1_gun_position(fd_len, ad_len)
                        - g1.distribution.g2_gun_position(fd_len, ad_len)) < 0.2
            )
        )
        if concentrated:
            return a * 0.8 * gsf
        return a * (2.0 * gsf - 1.0)

    # ==================== Machinery and armor weights ====================

    def d_engine(self) -> float:
        hull = self.hull
        return self.engine.d_engine(hull.d(), hull.lwl(), hull.leff(), hull.cs(), hull.ws())

    def hp_max(self) -> float:
        hull = self.hull
        return self.engine.hp_max(hull.d(), hull.lwl(), hull.leff(), hull.cs(), hull.ws())

    def hp_cruise(self) -> float:
        hull = self.hull
        return self.engine.hp_cruise(hull.d(), hull.lwl(), hull.leff(), hull.cs(), hull.ws())

    @metric
    def deck_engine_wgt(self) -> float:
        """Engine weight seen by the deck armor over the machinery."""
        model = get_config().model
        if model.deck_engine_coupling is DeckEngineCoupling.PINNED:
            return DECK_ARMOR_ENGINE_BREAK_POINT
        return self._solve_engine_wgt(model.fixed_point_max_iterations, model.fixed_point_tolerance)

    def _solve_engine_wgt(self, max_iterations: int, tolerance: float) -> float:
        wgt = DECK_ARMOR_ENGINE_BREAK_POINT
        for iteration in range(1, max_iterations + 1):
            nxt = self._engine_wgt(wgt)
            if not math.isfinite(nxt):
                logger.warning(f"Engine weight diverged after {iteration} iterations for {self.name!r}")
                return wgt
            if abs(nxt - wgt) <= tolerance:
                logger.debug(f"Engine weight converged to {nxt:.3f} t in {iteration} iterations")
                return nxt
            wgt = nxt
        logger.warning(f"Engine weight did not converge in {max_iterations} iterations for {self.name!r}")
        return wgt

    def _armor_wgt(self, deck_engine: float) -> float:
        return self.armor.wgt(self.hull, self.wgt_mag(), deck_engine) + self.wgt_gun_armor()

    def _d_factor(self, deck_engine: float) -> float:
        weights = self.d_engine() + 8.0 * self.wgt_borne() + self._armor_wgt(deck_engine) + self.wgts.wgt()
        return fmin(fdiv(self.hull.d(), weights), 10.0)

    def _engine_wgt(self, deck_engine: float) -> float:
        d = self.hull.d()
        d_factor = self._d_factor(deck_engine)
        if 600.0 <= d < 5000.0 and d_factor < 1.0:
            p = 1.0 - d / 5000.0
        elif d < 600.0 and d_factor < 1.0:
            p = 0.88
        else:
            p = 0.0
        return self.d_engine() / 2.0 * powf(d_factor, p)

    @metric
    def wgt_armor(self) -> float:
        """Hull and gun armor."""
        return self._armor_wgt(self.deck_engine_wgt())

    @metric
    def d_factor(self) -> float:
        """Engine weight relief for a heavily loaded ship under 5,000 tons."""
        return self._d_factor(self.deck_engine_wgt())

    @metric
    def wgt_engine(self) -> float:
        """Machinery, adjusted by the displacement factor."""
        return self._engine_wgt(self.deck_engine_wgt())

    def delicate_machinery(self) -> bool:
        """Machinery lighter than a fifth of the engine displacement."""
        return self.wgt_engine() < self.d_engine() / 5.0

    # ==================== Hull weights ====================

    @metric
    def wgt_hull(self) -> float:
        """Whatever displacement the other weights leave for the hull."""
        return (
            self.hull.d()
            - self.wgt_guns()
            - self.wgt_gun_mounts()
            - self.wgt_weaps()
            - self.wgt_armor()
            - self.wgt_engine()
            - self.wgt_load()
            - self.wgts.wgt()
        )

    @metric
    def wgt_hull_plus(self) -> float:
        """Hull plus guns and mounts, less borne weight."""
        return self.wgt_hull() + self.wgt_guns() + self.wgt_gun_mounts() - self.wgt_borne()

    def _strength_bulkhead_wgt(self) -> float:
        if self.armor.bh_kind is BulkheadType.STRENGTHENED:
            hull = self.hull
            return self.armor.bulkhead.wgt(hull.lwl(), hull.cwp(), hull.b)
        return 0.0

    @metric
    def wgt_struct(self) -> float:
        """Structure weight per ft² of hull surface, lb."""
        hull = self.hull
        area = hull.ws() + 2.0 * hull.lwl() * hull.free_cap(self.cap_calc_broadside()) + hull.wp()
        return fdiv((self.wgt_hull_plus() + self._strength_bulkhead_wgt()) * POUND2TON, area)

    # ==================== Stability ====================

    @metric
    def stability(self) -> float:
        """Inherent stability before the trim adjustment."""
        hull, armor = self.hull, self.armor
        d, cwp, b = hull.d(), hull.cwp(), hull.b

        # Belt terms take displacement as their length argument.
        a = (
            armor.ct_wgt(d) * 5.0
            + (self.wgt_borne() + self.wgt_gun_armor()) * (2.0 * self.gun_super_factor() - 1.0) * 4.0
            + self.wgts.hull * 2.0
            + self.wgts.on * 3.0
            + self.wgts.above * 4.0
            + armor.upper.wgt(d, cwp, b) * 2.0
            + armor.main.wgt(d, cwp, b)
            + armor.end.wgt(d, cwp, b)
            + armor.deck.wgt(hull, self.wgt_mag(), self.deck_engine_wgt())
            + (self.wgt_hull_plus() + self.wgt_guns() + self.wgt_gun_mounts() - self.wgt_borne())
            * 1.5 * fdiv(hull.freeboard(), hull.t)
        )

        deck_room = self.deck_room()
        if deck_room < 1.0:
            a += (self.wgt_engine() + self.wgts.vital + self.wgts.void) * (1.0 - powf(deck_room, 2.0))

        if a > 0:
            return sqrt(fdiv(d * fdiv(hull.bb, hull.t), a) * 0.5) * powf(fdiv(8.76755, hull.len2beam()), 0.25)
        return a

    @metric
    def stability_adj(self) -> float:
        """Stability after the trim setting."""
        return self.stability() * ((50.0 - self.trim) / 150.0 + 1.0)

    @metric
    def metacenter(self) -> float:
        return powf(self.hull.b, 1.5) * (self.stability_adj() - 0.5) / 0.5 / 200.0

    def roll_period(self) -> float:
        """Roll period, seconds."""
        return fdiv(0.42 * self.hull.bb, sqrt(self.metacenter()))

    def recoil(self) -> float:
        """Ability of the ship to absorb the recoil of her broadside."""
        hull = self.hull
        d, bb = hull.d(), hull.bb
        effect = (
            fdiv(fdiv(self.wgt_broad(), d) * hull.freeboard_dist() * self.gun_super_factor(), bb)
            * powf(fdiv(powf(d, 1.0 / 3.0), bb) * 3.0, 2.0)
            * 7.0
        )
        adj = self.stability_adj()
        if adj > 0:
            return fdiv(effect, adj * ((50.0 - self.steadiness()) / 150.0 + 1.0))
        return effect

    def tender_warn(self) -> bool:
        return self.stability_adj() <= 0.995

    def capsize_warn(self) -> bool:
        return self.metacenter() <= 0.0

    # ==================== Seakeeping ====================

    @metric
    def cap_calc_broadside(self) -> bool:
        """Whether every battery is broadside mounted below deck."""
        return all(b.broad_and_below() for b in self.batteries)

    @metric
    def seaboat(self) -> float:
        """Seaworthiness before steadiness: freeboard, proportions, top weight and speed."""
        hull, engine = self.hull, self.engine
        d, lwl, bb = hull.d(), hull.lwl(), hull.bb
        free = hull.free_cap(self.cap_calc_broadside())

        top_weight = (
            d
            + self.armor.end.wgt(lwl, hull.cwp(), hull.b) * 3.0
            + self.wgt_hull_plus() / 3.0
            + (self.wgt_borne() + self.wgt_gun_armor()) * self.super_factor_long()
        )
        a = sqrt(fdiv(free, 2.4 * powf(d, 0.2))) * (
            powf(self.stability() * 5.0 * fdiv(bb, lwl), 0.2)
            * sqrt(fdiv(free, lwl) * 20.0)
            * fdiv(d, top_weight)
        ) * 8.0

        draft_ratio = fdiv(hull.t, bb)
        b = a * (sqrt(draft_ratio / 0.3) if draft_ratio < 0.3 else 1.0)

        rf = engine.rf_max(hull.ws())
        ratio = fdiv(rf, rf + engine.rw_max(d, lwl, hull.cs()))
        c = b * (powf(ratio, 2.0) if ratio < 0.55 and engine.vmax > 0 else 0.3025)

        return fmin(c, 2.0)

    @metric
    def steadiness(self) -> float:
        """Roll steadiness as a gun platform, 0 to 100."""
        return fmin(self.trim * self.seaboat(), 100.0)

    @metric
    def seakeeping(self) -> float:
        return self.seaboat() * fmin(self.steadiness(), 50.0) / 50.0

    def is_steady(self) -> bool:
        return self.steadiness() >= 69.5

    def is_unsteady(self) -> bool:
        return self.steadiness() < 30.0

    def type_sea(self) -> SeaType:
        sk = self.seakeeping()
        if sk < 0.7:
            return SeaType.BAD_SEA
        if sk < 0.995:
            return SeaType.POOR_SEA
        if sk >= 1.5:
            return SeaType.FINE_SEA
        if sk >= 1.2:
            return SeaType.GOOD_SEA
        return SeaType.ERROR

    def seakeeping_desc(self) -> List[str]:
        """Roll and seaworthiness lines for the report."""
        lines = []
        if self.is_steady():
            lines.append(STEADY_DESC)
        elif self.is_unsteady():
            lines.append(UNSTEADY_DESC)

        sea = self.type_sea()
        if sea is SeaType.FINE_SEA:
            if self.wgt_guns() > 0:
                lines.append("Excellent seaboat, comfortable, can fire her guns in the heaviest weather")
            else:
                lines.append("Excellent seaboat, comfortable, rides out heavy weather easily")
        else:
            lines.append(SEA_DESC[sea])
        return lines

    # ==================== Strength ====================

    @staticmethod
    def _pre_1900(year: int) -> float:
        if year >= 1900:
            return 1.0
        if get_config().model.linear_pre_1900_derating:
            return 1.0 - (1900 - year) / 100.0
        # Whole centuries only: no derating for 1801-1899
        return float(1 - (1900 - int(year)) // 100)

    @metric
    def str_cross(self) -> float:
        """Cross-sectional strength."""
        hull = self.hull
        d = hull.d()
        concentration = 1.0 + self.gun_concentration() if self.wgt_broad() > 0 else 1.0

        top = (
            self.wgt_broad()
            + self.wgt_borne()
            + self.wgt_gun_armor()
            + self.armor.ct_wgt(d)
        ) * (concentration * self.gun_super_factor())
        load = fdiv(d + top + fmax(self.hp_max(), 0.0) / 100.0, d)

        section = sqrt(hull.bb * (hull.t + hull.freeboard_dist()))
        return fdiv(fdiv(self.wgt_struct(), section), load) * 0.6 * self._pre_1900(self.year)

    @metric
    def str_long(self) -> float:
        """Longitudinal strength."""
        hull = self.hull
        lwl, cwp, b = hull.lwl(), hull.cwp(), hull.b
        depth = hull.t + hull.free_cap(self.cap_calc_broadside())
        load = (
            hull.d()
            + self.armor.end.wgt(lwl, cwp, b) * 3.0
            + (self.wgt_borne() + self.wgt_gun_armor()) * self.super_factor_long() * 2.0
        )
        girder = self.wgt_hull_plus() + self._strength_bulkhead_wgt()
        return fdiv(girder, powf(fdiv(lwl, depth), 2.0) * load) * 850.0 * self._pre_1900(self.year)

    @metric
    def str_comp(self) -> float:
        """
        Composite strength.

        The weaker of the two is raised by the ratio of the stronger to it:
        to the 0.25 power when cross-sectional strength dominates, to the
        0.1 power when longitudinal strength does.
        """
        cross, long = self.str_cross(), self.str_long()
        if cross > long:
            return long * powf(fdiv(cross, long), 0.25)
        return cross * powf(fdiv(long, cross), 0.1)

    def hull_strained(self) -> bool:
        comp = self.str_comp()
        return 0.5 <= comp < 0.885 and (self.engine.vmax < 24.0 or self.hull.d() > 4000.0)

    # ==================== Survivability ====================

    @metric
    def flotation(self) -> float:
        """Estimate of the lb of non-critical shell hits needed to sink the ship."""
        hull = self.hull
        cap = self.cap_calc_broadside()
        free = hull.free_cap(cap) if cap else hull.freeboard_dist()

        a = (free * hull.wp() / FT3_PER_TON_SEA + hull.d()) / 2.0

        adj = self.stability_adj()
        a *= powf(adj, 0.5 if adj > 1.0 else 4.0)

        comp = self.str_comp()
        a *= comp if comp < 1.0 else 1.0

        room = self.room()
        a = fdiv(a, powf(room, 2.0 if room > 1.0 else 1.0))

        return fmax(a * self.year_adj(self.year), 0.0)

    def damage_shell_size(self) -> float:
        """Caliber of the main battery, or 6 in for an unarmed ship."""
        diam = self.batteries[0].diam
        return diam if diam > 0 else 6.0

    def damage_shell_num(self) -> float:
        """Non-critical hits of the damage shell size needed to sink the ship."""
        return fdiv(self.flotation(), powf(self.damage_shell_size(), 3.0) / 2.0 * self.year_adj(self.year))

    def damage_torp_num(self) -> float:
        """Non-critical torpedo hits needed to sink the ship."""
        hull, bh = self.hull, self.armor.bulkhead
        lwl, bb = hull.lwl(), hull.bb
        flotation = self.flotation()

        bulkhead = powf(
            fdiv(fdiv(bh.thick / 2.0 * bh.length, lwl) / 0.65 * bh.height, hull.t),
            1.0 / 3.0,
        )
        resistance = (
            powf(flotation / 10000.0, 1.0 / 3.0)
            + powf(bb / 75.0, 2.0)
            + bulkhead * flotation / 35000.0 * bb / 50.0
        )
        hits = fdiv(resistance, self.room()) * fdiv(lwl, lwl + bb)

        adj = self.stability_adj()
        if adj < 1.0:
            hits *= powf(adj, 4.0)
        hits *= 1.0 - self.hull_space()

        main = self.torps[0]
        if main.wgt_weaps() > 0:
            hits *= 1.313 / (main.wgt_weaps() / main.num)
        return hits

    # ==================== Cost ====================

    def cost_dollar(self) -> float:
        """Cost, millions of US dollars."""
        base = (
            (self.hull.d() - self.wgt_load()) * 0.00014
            + self.wgt_engine() * 0.00056
            + (self.wgt_borne() * 8.0) * 0.00042
        )
        if self.year + 2.0 > COST_ESCALATION_YEAR:
            return base * (1.0 + (self.year + 1.5 - COST_ESCALATION_YEAR) / 5.5)
        return base

    def cost_lb(self) -> float:
        """Cost, millions of British pounds."""
        return self.cost_dollar() / 4.0

    # ==================== Classification ====================

    def ship_type(self) -> List[str]:
        """Period type labels implied by the armament and armor layout."""
        labels = []
        main, sec, ter = self.batteries[0], self.batteries[1], self.batteries[2]

        if MountType.OPEN_BARBETTE in (main.mount_kind, sec.mount_kind):
            labels.append("Barbette Ship")

        if main.groups[0].distribution in (GunDistributionType.CENTERLINE_FD, GunDistributionType.SIDES_ENDS_FD):
            labels.append("Central Citadel Ship")

        broad = [b for b in (main, sec, ter) if b.mount_kind is MountType.BROADSIDE]
        if not broad:
            return labels

        if get_config().model.corrected_ship_type_below:
            broad_below = any(b.groups[0].below + b.groups[1].below > 0 for b in broad)
        else:
            # Secondary and tertiary take their second group from the main battery
            broad_below = any(b.groups[0].below + main.groups[1].below > 0 for b in broad)
        broad_no_back = any(b.armor_face > 0 for b in broad)

        hull = self.hull
        lwl, cwp, b = hull.lwl(), hull.cwp(), hull.b
        has_belt = (
            self.armor.main.wgt(lwl, cwp, b)
            + self.armor.end.wgt(lwl, cwp, b)
            + self.armor.upper.wgt(lwl, cwp, b)
        ) > 0

        rank = "Frigate" if broad_below else "Corvette"
        if not has_belt:
            labels.append(f"{rank} (Unarmoured)")
        elif broad_no_back:
            labels.append("Armoured Casemate Ship")
        elif hull.fc_len + hull.fd_len < 0.5:
            labels.append(f"Armoured {rank} (Broadside Ironclad)")
        else:
            labels.append(f"Armoured {rank} (Central Battery Ironclad)")
        return labels

    def is_superfiring(self, battery: int, group: int) -> bool:
        corrected = get_config().model.corrected_group_superfire
        return self.batteries[battery].is_superfiring(group, corrected)

    # ==================== Failures and advisories ====================

    def design_failures(self) -> List[DesignFailure]:
        """Independent failure conditions; the figures are still produced."""
        failures = []
        d = self.hull.d()
        cb = self.hull.cb()
        if not 0 < cb <= 1:
            failures.append(DesignFailure.DISPLACEMENT)
        if d < self.wgt_broad() / 4.0:
            failures.append(DesignFailure.GUN_WEIGHT)
        if self.wgt_armor() > d:
            failures.append(DesignFailure.ARMOR_WEIGHT)
        if self.str_comp() < 0.5:
            failures.append(DesignFailure.LOAD_WEIGHT)
        if self.capsize_warn():
            failures.append(DesignFailure.CAPSIZE)
        return failures

    def advisories(self) -> List[Advisory]:
        advisories = []
        if self.tender_warn() and not self.capsize_warn():
            advisories.append(Advisory.TENDER)
        if self.hull_strained():
            advisories.append(Advisory.HULL_STRAINED)
        hp = self.hp_max()
        if self.engine.overpowered_recip(hp):
            advisories.append(Advisory.RECIP_POWER)
        elif self.engine.overpowered_shafts(hp):
            advisories.append(Advisory.SHAFT_POWER)
        if self.delicate_machinery():
            advisories.append(Advisory.DELICATE_MACHINERY)
        if self.armor.main.thick > 0 and self.armor.main.length < self.vitalspace_length():
            advisories.append(Advisory.SHORT_BELT)
        return advisories

    def input_errors(self) -> List[StructuralInputError]:
        """Inputs that leave the formulas undefined. Reported, never raised."""
        hull = self.hull
        errors = []
        for name, value in (("hull.lwl", hull.lwl()), ("hull.b", hull.b), ("hull.bb", hull.bb), ("hull.t", hull.t)):
            if not value > 0:
                errors.append(StructuralInputError(name, value, "must be positive"))
        if not hull.d() > 0:
            errors.append(StructuralInputError("hull.d", hull.d(), "displacement must be positive"))
        if not 0 <= self.trim <= 100:
            errors.append(StructuralInputError("trim", self.trim, "must be between 0 and 100"))
        if self.armor.bulkhead.thick > 0 and not self.armor.bh_beam > 0:
            errors.append(StructuralInputError(
                "armor.bh_beam", self.armor.bh_beam, "torpedo bulkheads need a positive beam between them",
            ))
        for i, b in enumerate(self.batteries):
            placed = sum(g.num_mounts() for g in b.groups)
            if placed != b.mount_num:
                errors.append(StructuralInputError(
                    f"batteries[{i}].mount_num", b.mount_num, f"{placed} mounts placed in groups",
                ))
        return errors

    # ==================== Serialization ====================

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "country": self.country,
            "kind": self.kind,
            "year": self.year,
            "trim": self.trim,
            "hull": self.hull.to_dict(),
            "armor": self.armor.to_dict(),
            "engine": self.engine.to_dict(),
            "batteries": [b.to_dict() for b in self.batteries],
            "torps": [t.to_dict() for t in self.torps],
            "mines": self.mines.to_dict(),
            "asw": [a.to_dict() for a in self.asw],
            "wgts": self.wgts.to_dict(),
            "notes": list(self.notes),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Ship":
        ship = cls(
            name=str(data["name"]),
            country=str(data["country"]),
            kind=str(data["kind"]),
            year=int(data["year"]),
            trim=int(data["trim"]),
            hull=Hull.from_dict(data["hull"]),
            armor=Armor.from_dict(data["armor"]),
            engine=Engine.from_dict(data["engine"]),
            batteries=[Battery.from_dict(b) for b in data["batteries"]],
            torps=[Torpedoes.from_dict(t) for t in data["torps"]],
            mines=Mines.from_dict(data["mines"]),
            asw=[ASW.from_dict(a) for a in data["asw"]],
            wgts=MiscWeights.from_dict(data["wgts"]),
            notes=[str(n) for n in data["notes"]],
        )
        for key, count in (("batteries", NUM_BATTERIES), ("torps", NUM_TORPS), ("asw", NUM_ASW)):
            found = len(getattr(ship, key))
            if found != count:
                raise ValueError(f"{key} needs {count} entries, got {found}")
        ship.engine.set_shafts(ship.engine.shafts(), ship.hull)
        return ship
