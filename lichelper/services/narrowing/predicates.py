"""
Predicates over `LicenseRecord` used by `LicHelper`.

Each factory returns a plain `LicenseRecord -> bool` function so that the
named finders and `LicHelper.find_all` share one narrowing primitive.
"""

from typing import Callable, Iterable

from lichelper.models.schemas import EntityRef, LicenseRecord
from .capacity import parse_capacity
from .depend import DependencySpec, parse_packages

Predicate = Callable[[LicenseRecord], bool]

PACKAGES_KEY = "packages"


def is_valid(license: LicenseRecord) -> bool:
    return license.is_valid


def is_vendor(vendor: EntityRef) -> Predicate:
    return lambda lic: lic.vendor == vendor


def is_product(product: EntityRef) -> Predicate:
    return lambda lic: lic.product == product


def is_products(products: Iterable[EntityRef]) -> Predicate:
    ids = {p.id for p in products}
    return lambda lic: lic.product.id in ids


def is_licensee(licensee: str) -> Predicate:
    wanted = licensee.strip().casefold()
    return lambda lic: lic.licensee.strip().casefold() == wanted


def has_package(query: DependencySpec) -> Predicate:
    """
    Matches licences declaring at least one package with the query's name whose
    constraint accepts the query's version.
    """
    def _match(lic: LicenseRecord) -> bool:
        for spec in parse_packages(lic.prop(PACKAGES_KEY)):
            if spec.name == query.name and spec.match(query.version):
                return True
        return False
    return _match


def has_capacity(unit: str, minimum: int) -> Predicate:
    """Matches licences that declare `unit` with at least `minimum` of it."""
    def _match(lic: LicenseRecord) -> bool:
        capacity = parse_capacity(lic)
        return unit in capacity and capacity[unit] >= minimum
    return _match
