"""
Parser for the `capacity` licence property: `qty1 unit1;qty2 unit2;...`.
"""

from typing import Dict

from lichelper.models.schemas import LicenseRecord
from .errors import CapacityParseError

CAPACITY_KEY = "capacity"


def parse_capacity(license: LicenseRecord) -> Dict[str, int]:
    """
    Maps each unit of the licence's capacity to its quantity.

    A licence without a `capacity` property has no capacity: `{}`.
    When a unit appears twice the last quantity wins. A token whose quantity is
    not an integer raises `CapacityParseError`.
    """
    value = license.prop(CAPACITY_KEY)
    capacity: Dict[str, int] = {}
    if value is None:
        return capacity
    for token in value.split(";"):
        token = token.strip()
        if not token:
            continue
        qty, _, unit = token.partition(" ")
        unit = unit.strip()
        if not unit:
            raise CapacityParseError(f"Missing unit in capacity {token!r} for {license}")
        try:
            capacity[unit] = int(qty)
        except ValueError as e:
            raise CapacityParseError(f"Invalid capacity {token!r} for {license}") from e
    return capacity
