"""
broadside Errors

Structured exception taxonomy.
"""

from broadside.errors.taxonomy import (
    ErrorCategory,
    ErrorSeverity,
    BroadsideError,
    StructuralInputError,
    FormatError,
    ParseError,
    UnknownFormat,
    LegacyFieldError,
    VersionError,
    IncompatibleVersion,
    UnsupportedVersion,
)

__all__ = [
    "ErrorCategory",
    "ErrorSeverity",
    "BroadsideError",
    "StructuralInputError",
    "FormatError",
    "ParseError",
    "UnknownFormat",
    "LegacyFieldError",
    "VersionError",
    "IncompatibleVersion",
    "UnsupportedVersion",
]
