"""
Sources of licence records.

The narrowing engine never talks to storage or the network: it asks a
`LicenseProvider` once for every known licence and works on that snapshot.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List

from lichelper.models.schemas import LicenseRecord


class LicenseProvider(ABC):
    """Service that enumerates every licence known to the host."""

    @abstractmethod
    def all_licenses(self) -> List[LicenseRecord]:
        """Return the complete, current list of licence records."""


class StaticLicenseProvider(LicenseProvider):
    """Serves a fixed list, e.g. the records posted to the API."""

    def __init__(self, licenses: Iterable[LicenseRecord]) -> None:
        self._licenses = list(licenses)

    def all_licenses(self) -> List[LicenseRecord]:
        return list(self._licenses)
