"""
Package `lichelper.services.narrowing`

Narrows a pool of licence records down to the single licence a feature runs
under, reporting the discarded candidates when nothing suitable is left.

Modules:
- helper: `LicHelper`, the chainable narrowing engine
- predicates: `LicenseRecord -> bool` functions used by the finders
- depend: parser for `"<name> <version-constraints>"` package strings
- capacity: parser for the `capacity` licence property
- errors: `LicErr` (no/ambiguous licence) and the argument/parse errors
"""

from .capacity import parse_capacity
from .depend import DependencySpec, VersionConstraint, parse_depend, parse_packages
from .errors import CapacityParseError, DependParseError, InvalidArgument, LicErr, LicErrKind
from .helper import LicHelper
from . import predicates
from .predicates import (
    has_capacity,
    has_package,
    is_licensee,
    is_product,
    is_products,
    is_valid,
    is_vendor,
)

__all__ = [
    "LicHelper",
    "LicErr",
    "LicErrKind",
    "InvalidArgument",
    "DependParseError",
    "CapacityParseError",
    "DependencySpec",
    "VersionConstraint",
    "parse_depend",
    "parse_packages",
    "parse_capacity",
    "predicates",
    "is_vendor",
    "is_product",
    "is_products",
    "is_licensee",
    "is_valid",
    "has_package",
    "has_capacity",
]
