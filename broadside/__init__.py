"""
broadside - Ship Performance Model

Pre-modern warship design figures from hull, armor, machinery and armament
inputs.
"""

__version__ = "0.3.0"

from broadside.ship import Ship, SeaType, DesignFailure, Advisory
from broadside.metrics import ShipMetrics, WeightBreakdown
from broadside.lifecycle import (
    save_ship,
    load_ship,
    import_springsharp,
    parse_springsharp,
)

__all__ = [
    "__version__",
    "Ship",
    "SeaType",
    "DesignFailure",
    "Advisory",
    "ShipMetrics",
    "WeightBreakdown",
    "save_ship",
    "load_ship",
    "import_springsharp",
    "parse_springsharp",
]
