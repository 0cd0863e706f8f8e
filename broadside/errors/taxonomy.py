"""
errors/taxonomy.py - broadside error taxonomy

Structured error types for ship loading, importing and input validation.

Design-quality problems (capsize risk, hull strain, overweight guns) are not
errors: the ship model reports them as design failures and advisories and
always produces a full set of figures.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
from enum import Enum


# =============================================================================
# ERROR CATEGORIES AND SEVERITY
# =============================================================================

class ErrorCategory(Enum):
    """Categories of broadside errors."""
    STRUCTURAL = "structural_input"  # Inputs that make a formula undefined
    FORMAT = "format"                # Malformed persisted or legacy data
    VERSION = "version"              # Unsupported file version
    UNITS = "units"                  # Unsupported unit conversion


class ErrorSeverity(Enum):
    """Severity levels for broadside errors."""
    ERROR = "error"       # Operation failed, cannot continue
    WARNING = "warning"   # Figures produced but not meaningful


# =============================================================================
# BASE ERROR CLASS
# =============================================================================

class BroadsideError(Exception):
    """
    Base class for broadside errors.

    Provides structured error information with:
    - Error code for programmatic handling
    - Human-readable message
    - Recovery hint for the designer
    - Detailed context for debugging
    """

    code: str = "BRD_000"
    category: ErrorCategory = ErrorCategory.FORMAT
    severity: ErrorSeverity = ErrorSeverity.ERROR

    def __init__(
        self,
        message: str = "",
        *,
        recovery_hint: str = "",
        details: Optional[Dict[str, Any]] = None,
        **kwargs,
    ):
        self.message = message or self.__class__.__doc__ or "broadside error"
        self.recovery_hint = recovery_hint
        self.details = details or {}
        self.details.update(kwargs)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "recovery_hint": self.recovery_hint,
            "details": self.details,
        }

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.recovery_hint:
            parts.append(f"Hint: {self.recovery_hint}")
        return " ".join(parts)


# =============================================================================
# STRUCTURAL INPUT
# =============================================================================

class StructuralInputError(BroadsideError):
    """Input outside the domain of the hull formulas."""

    code = "BRD_100"
    category = ErrorCategory.STRUCTURAL
    severity = ErrorSeverity.WARNING

    def __init__(self, field: str, value: Any, reason: str, **kwargs):
        self.field = field
        self.value = value
        super().__init__(
            f"{field} = {value!r}: {reason}",
            field=field,
            value=value,
            **kwargs,
        )


# =============================================================================
# FORMAT ERRORS
# =============================================================================

class FormatError(BroadsideError):
    """Malformed persisted or imported ship data."""

    code = "BRD_200"
    category = ErrorCategory.FORMAT


class ParseError(FormatError):
    """Ship file could not be decoded."""

    code = "BRD_201"


class UnknownFormat(FormatError):
    """File is not a recognised ship design format."""

    code = "BRD_202"


class LegacyFieldError(FormatError):
    """A positional field of a legacy ship file could not be decoded."""

    code = "BRD_203"

    def __init__(self, field: str, line_no: int, reason: str, **kwargs):
        self.field = field
        self.line_no = line_no
        super().__init__(
            f"Line {line_no} ({field}): {reason}",
            field=field,
            line_no=line_no,
            **kwargs,
        )


# =============================================================================
# VERSION ERRORS
# =============================================================================

class VersionError(BroadsideError):
    """Unsupported file version."""

    code = "BRD_300"
    category = ErrorCategory.VERSION


class IncompatibleVersion(VersionError):
    """Ship file written by an incompatible version."""

    code = "BRD_301"

    def __init__(self, version: Any, **kwargs):
        self.version = version
        super().__init__(
            f"Cannot open ship files of this version: {version}!",
            version=version,
            **kwargs,
        )


class UnsupportedVersion(VersionError):
    """Legacy file written by an older version of the legacy program."""

    code = "BRD_302"
