"""
lifecycle/ - Ship files

Save and load of broadside ship files, and import of SpringSharp 3.0 designs.
"""

from .store import (
    ShipFileVersion,
    dumps_ship,
    loads_ship,
    save_ship,
    load_ship,
)

from .legacy import (
    LegacyField,
    LEGACY_FIELDS,
    parse_springsharp,
    import_springsharp,
)

__all__ = [
    # Store
    "ShipFileVersion",
    "dumps_ship",
    "loads_ship",
    "save_ship",
    "load_ship",
    # Legacy
    "LegacyField",
    "LEGACY_FIELDS",
    "parse_springsharp",
    "import_springsharp",
]
