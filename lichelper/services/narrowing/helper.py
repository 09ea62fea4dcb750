"""
This module provides `LicHelper`, the engine that narrows a pool of licence
records down to the one licence a feature should run under.

Typical use:

    lic = (LicHelper.from_provider(provider)
           .find_vendor(vendor, strict=True)
           .find_product(product, strict=True)
           .find_valid(strict=True)
           .get(strict=True))

Each finder keeps the candidates matching its predicate, preserving their order,
and returns the helper itself. A strict finder that leaves no candidate raises
`LicErr` carrying the candidates it started from. The candidate list is already
replaced when the error is raised, so a caught strict failure leaves the helper
empty (or, for `find_valid`, holding only valid licences).

A helper is meant for one validation attempt on one thread; use `duplicate()`
to branch a search without affecting the original.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from lichelper.models.schemas import EntityRef, LicenseRecord
from lichelper.services.provider import LicenseProvider
from . import predicates
from .depend import DependencySpec, parse_depend
from .errors import DependParseError, InvalidArgument, LicErr, LicErrKind
from .predicates import Predicate

logger = logging.getLogger(__name__)


class LicHelper:

    def __init__(self, licenses: Iterable[LicenseRecord]):
        self._licenses: List[LicenseRecord] = list(licenses)

    @classmethod
    def from_provider(cls, provider: LicenseProvider) -> "LicHelper":
        """Builds a helper over every licence the provider knows about."""
        return cls(provider.all_licenses())

    @property
    def licenses(self) -> Tuple[LicenseRecord, ...]:
        return tuple(self._licenses)

    def __len__(self):
        return len(self._licenses)

    def __iter__(self) -> Iterator[LicenseRecord]:
        return iter(self.licenses)

    def __repr__(self):
        return f"LicHelper({len(self._licenses)} licences)"

    def duplicate(self) -> "LicHelper":
        return LicHelper(self._licenses)

    # ------------------------------------------------------------------
    # Finders
    # ------------------------------------------------------------------

    def find_vendor(self, vendor: EntityRef, *, strict: bool) -> "LicHelper":
        return self._whittle_down(f"No licence found for vendor {vendor}", strict, predicates.is_vendor(vendor))

    def find_product(self, product: EntityRef, *, strict: bool) -> "LicHelper":
        return self._whittle_down(f"No licence found for product {product}", strict, predicates.is_product(product))

    def find_products(self, products: Iterable[EntityRef], *, strict: bool) -> "LicHelper":
        products = list(products)
        names = ", ".join(str(p) for p in products)
        return self._whittle_down(f"No licence found for products {names}", strict, predicates.is_products(products))

    def find_licensee(self, licensee: str, *, strict: bool) -> "LicHelper":
        return self._whittle_down(f"No licence found for licensee {licensee}", strict, predicates.is_licensee(licensee))

    def find_package(self, package: Union[str, DependencySpec], *, strict: bool) -> "LicHelper":
        """
        Keeps licences whose `packages` property accepts the given package version.

        The query must name one exact version (`"acmeExt 1.0"`); ranges, "plus"
        versions and unparsable strings raise `InvalidArgument` whatever `strict` is.
        """
        try:
            query = parse_depend(package)
        except DependParseError as e:
            raise InvalidArgument(f"Invalid package query {package!r}: {e}") from e
        if not query.is_simple:
            raise InvalidArgument(f"Package query must be a single exact version: {query}")
        return self._whittle_down(f"No licence found for package {query}", strict, predicates.has_package(query))

    def find_capacity(self, unit: str, minimum: int, *, strict: bool) -> "LicHelper":
        return self._whittle_down(
            f"No licence found with capacity of {minimum} {unit}",
            strict,
            predicates.has_capacity(unit, minimum),
        )

    def find_valid(self, *, strict: bool) -> "LicHelper":
        """
        Keeps only valid licences.

        The candidates are narrowed before the strict check, so after this call the
        helper holds valid licences only, even when it raises.
        """
        snapshot = self.licenses
        self._whittle_down("No valid licence found", False, predicates.is_valid)
        if strict and not self._licenses:
            raise self._error(_invalid_message(snapshot), snapshot)
        return self

    def find_all(self, message: str, predicate: Predicate, *, strict: bool) -> "LicHelper":
        """Keeps licences matching an arbitrary predicate; `message` is used on failure."""
        return self._whittle_down(message, strict, predicate)

    # ------------------------------------------------------------------
    # Terminal accessor
    # ------------------------------------------------------------------

    def get(self, *, strict: bool) -> Optional[LicenseRecord]:
        """
        Returns the first valid licence among the current candidates.

        In strict mode exactly one valid licence must remain: none raises a
        not-found `LicErr`, several raise an ambiguous one. The candidates are left
        untouched.
        """
        valid = [lic for lic in self._licenses if lic.is_valid]
        if strict and len(valid) > 1:
            raise self._error("Multiple valid licences found", valid, LicErrKind.AMBIGUOUS)
        if strict and not valid:
            raise self._error(_invalid_message(self._licenses), self._licenses)
        return valid[0] if valid else None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _whittle_down(self, message: str, strict: bool, predicate: Predicate) -> "LicHelper":
        snapshot = self.licenses
        self._licenses = [lic for lic in snapshot if predicate(lic)]
        logger.debug("%s: %d -> %d licences", message, len(snapshot), len(self._licenses))
        if strict and not self._licenses:
            raise self._error(message, snapshot)
        return self

    @staticmethod
    def _error(message: str, rejected: Iterable[LicenseRecord],
               kind: LicErrKind = LicErrKind.NOT_FOUND) -> LicErr:
        err = LicErr(message, rejected, kind)
        logger.info("Licence narrowing failed (%s): %s [%d rejected]", kind.value, message, len(err.rejected))
        return err


def _invalid_message(snapshot) -> str:
    """Tells "no licence at all" apart from "a licence exists but is invalid"."""
    if not snapshot:
        return "No licence found"
    first = snapshot[0]
    if first.validation_error:
        return f"Licence is not valid: {first.validation_error}"
    return "Licence is not valid"
