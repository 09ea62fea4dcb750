"""
This module implements a small parser for the dependency strings stored in a
licence's `packages` property (and for package queries).

Supported syntax:
- `<name> <constraints>` where name is an identifier and constraints is a
  comma-separated list of alternatives.
- Each alternative is one of:
    `1.2`      exact: matches only version 1.2
    `1.2+`     plus: matches 1.2 and any later version
    `1.2-1.5`  range: matches 1.2 <= v <= 1.5 (both ends inclusive)

Versions are dotted integers and are compared with `packaging.version.Version`.
"""

import re
from typing import List, Optional, Union

from packaging.version import Version

from .errors import DependParseError

_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_VERSION_RE = re.compile(r"^\d+(\.\d+)*$")


def _parse_version(token: str) -> Version:
    token = token.strip()
    if not _VERSION_RE.match(token):
        raise DependParseError(f"Invalid version: {token!r}")
    return Version(token)


class VersionConstraint:
    """
    One alternative of a dependency: exact version, open-ended "plus", or range.
    """
    def __init__(self, version: Version, is_plus: bool = False, end: Optional[Version] = None):
        self.version = version
        self.is_plus = is_plus
        self.end = end

    @property
    def is_range(self) -> bool:
        return self.end is not None

    @property
    def is_exact(self) -> bool:
        return not self.is_plus and self.end is None

    def matches(self, version: Version) -> bool:
        if self.is_plus:
            return version >= self.version
        if self.end is not None:
            return self.version <= version <= self.end
        return version == self.version

    def __str__(self):
        if self.is_plus:
            return f"{self.version}+"
        if self.end is not None:
            return f"{self.version}-{self.end}"
        return str(self.version)

    def __repr__(self):
        return f"VersionConstraint({self})"


class DependencySpec:
    """
    A package name plus the version constraints it accepts (any-of).
    """
    def __init__(self, name: str, constraints: List[VersionConstraint]):
        self.name = name
        self.constraints = constraints

    @property
    def is_simple(self) -> bool:
        """True for a single exact version, the only form usable as a query."""
        return len(self.constraints) == 1 and self.constraints[0].is_exact

    @property
    def version(self) -> Version:
        """The first constraint's (start) version."""
        return self.constraints[0].version

    def match(self, version: Version) -> bool:
        return any(c.matches(version) for c in self.constraints)

    def __str__(self):
        return f"{self.name} {', '.join(str(c) for c in self.constraints)}"

    def __repr__(self):
        return f"DependencySpec({self})"


def _parse_constraint(token: str) -> VersionConstraint:
    token = token.strip()
    if not token:
        raise DependParseError("Empty version constraint")
    if token.endswith("+"):
        return VersionConstraint(_parse_version(token[:-1]), is_plus=True)
    if "-" in token:
        start, end = token.split("-", 1)
        return VersionConstraint(_parse_version(start), end=_parse_version(end))
    return VersionConstraint(_parse_version(token))


def parse_depend(text: Union[str, DependencySpec]) -> DependencySpec:
    """
    Parses a dependency string such as `"acmeExt 1.0"` or `"acmeExt 1.0-2.0, 3.0+"`.

    A `DependencySpec` is returned unchanged. Raises `DependParseError` when the
    string does not follow the grammar described in the module docstring.
    """
    if isinstance(text, DependencySpec):
        return text
    if text is None:
        raise DependParseError("Missing dependency string")
    if not isinstance(text, str):
        raise DependParseError(f"Expected a dependency string, got {type(text).__name__}")
    parts = text.strip().split(None, 1)
    if len(parts) != 2:
        raise DependParseError(f"Expected '<name> <version>': {text!r}")
    name, rest = parts
    if not _NAME_RE.match(name):
        raise DependParseError(f"Invalid package name: {name!r}")
    constraints = [_parse_constraint(tok) for tok in rest.split(",")]
    return DependencySpec(name, constraints)


def parse_packages(value: Optional[str]) -> List[DependencySpec]:
    """
    Parses a `;`-delimited `packages` property value.

    Empty tokens and tokens that fail to parse are skipped.
    """
    specs: List[DependencySpec] = []
    if not value:
        return specs
    for token in value.split(";"):
        token = token.strip()
        if not token:
            continue
        try:
            specs.append(parse_depend(token))
        except DependParseError:
            continue
    return specs
