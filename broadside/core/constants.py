"""
broadside Physical and Empirical Constants

Constants shared by the hull, armor, propulsion, weapons and ship models.
All quantities are imperial: feet, long tons, inches of plate, knots.
"""

# ==================== Physical Constants ====================

# Mass
POUND2TON = 2240.0  # lb per long ton

# Seawater
FT3_PER_TON_SEA = 35.0  # ft³ of seawater per long ton

# Armor plate
ARMOR_LB_PER_FT2_IN = 40.8  # lb per ft² per inch of steel plate

# Speed and power
KNOT_FT_PER_SEC = 1.6878  # ft/s per knot
HP_FT_LB_PER_SEC = 550.0  # ft·lb/s per horsepower

# ==================== Resistance ====================

SKIN_FRICTION_COEFF = 0.0093  # lb per ft² at 1 kt
SKIN_FRICTION_EXPONENT = 1.825
BASE_PROPULSIVE_EFFICIENCY = 0.55

# ==================== Ship Aggregator ====================

# Crew
CREW_MAX_COEFF = 0.65
CREW_MAX_EXPONENT = 0.75
CREW_MIN_RATIO = 0.7692

# Displacement variants
STORES_FRACTION = 0.02  # stores and provisions as share of normal displacement
MAX_BUNKER_FRACTION = 0.8  # share of bunker added for maximum displacement
BUNKER_MAX_RATIO = 1.8  # maximum bunker over normal bunker

# Year adjustment
YEAR_ADJ_EARLY = 1890
YEAR_ADJ_LATE = 1950
YEAR_ADJ_SPAN = 66.666664

# Cost
COST_ESCALATION_YEAR = 1914

# Deck armor is computed with this engine weight while the
# deck/engine coupling is pinned.
DECK_ARMOR_ENGINE_BREAK_POINT = 0.0

# ==================== Persistence ====================

SHIP_FILE_VERSION = 1
SHIP_FILE_EXT = "ship"
SS_SHIP_FILE_EXT = "sship"
SPRINGSHARP_SIGNATURE = "SpringSharp"
SPRINGSHARP_VERSION = "SpringSharp Version 3.0"
