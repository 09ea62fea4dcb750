"""
Error model of the narrowing engine.

Two families, caught separately by callers:
- `LicErr`: the data did not contain a (unique) matching licence. Callers catch it
  and disable the dependent feature.
- `InvalidArgument` and the parse errors: the caller or the data broke a format
  contract. They derive from `ValueError` and never from `LicErr`.
"""

from enum import Enum
from typing import Iterable, Optional, Tuple

from lichelper.models.schemas import LicenseRecord


class LicErrKind(str, Enum):
    NOT_FOUND = "not_found"
    AMBIGUOUS = "ambiguous"


class LicErr(Exception):
    """
    No licence (or more than one) survived a strict narrowing step.

    `rejected` is a snapshot of the candidates as they were *before* the failing
    step; it is empty when the error is built from a message only.
    """

    def __init__(
        self,
        message: str,
        rejected: Iterable[LicenseRecord] = (),
        kind: LicErrKind = LicErrKind.NOT_FOUND,
    ):
        super().__init__(message)
        self.message = message
        self.rejected: Tuple[LicenseRecord, ...] = tuple(rejected)
        self.kind = kind

    @property
    def first_rejected(self) -> Optional[LicenseRecord]:
        return self.rejected[0] if self.rejected else None

    def __str__(self):
        return self.message


class InvalidArgument(ValueError):
    """The caller passed an argument the engine cannot work with."""


class DependParseError(ValueError):
    """A dependency string is not of the form `<name> <constraints>`."""


class CapacityParseError(ValueError):
    """A capacity token is not of the form `<quantity> <unit>`."""
