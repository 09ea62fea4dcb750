"""
Unit tests for `lichelper.services.narrowing.depend`.

Covers:
1. Parsing of exact, "plus", range and multi-alternative dependency strings.
2. Version matching semantics of each constraint form.
3. Lenient parsing of the `packages` property (empty/malformed tokens skipped).
"""

import pytest
from packaging.version import Version

from lichelper.services.narrowing import depend as dp
from lichelper.services.narrowing.errors import DependParseError

# ==================================================================================
#                                 TEST: PARSING
# ==================================================================================

def test_parse_exact_version():
    spec = dp.parse_depend("acmeExt 1.0")
    assert spec.name == "acmeExt"
    assert spec.is_simple
    assert spec.version == Version("1.0")
    assert str(spec) == "acmeExt 1.0"


def test_parse_plus_and_range_are_not_simple():
    """Open-ended and ranged specs cannot serve as queries."""
    plus = dp.parse_depend("acmeExt 1.0+")
    rng = dp.parse_depend("acmeExt 1.0-2.0")
    assert plus.constraints[0].is_plus
    assert rng.constraints[0].is_range
    assert not plus.is_simple
    assert not rng.is_simple


def test_parse_multiple_alternatives():
    spec = dp.parse_depend("acmeExt 1.0, 2.0-3.0, 5+")
    assert len(spec.constraints) == 3
    assert not spec.is_simple
    assert str(spec) == "acmeExt 1.0, 2.0-3.0, 5+"


def test_parse_returns_spec_unchanged():
    spec = dp.parse_depend("acmeExt 1.0")
    assert dp.parse_depend(spec) is spec


@pytest.mark.parametrize("text", [
    "",
    "acmeExt",
    "1acme 1.0",
    "acme-ext 1.0",
    "acmeExt one",
    "acmeExt 1.0-",
    "acmeExt 1.0,",
    "acmeExt 1..0",
])
def test_parse_malformed_raises(text):
    with pytest.raises(DependParseError):
        dp.parse_depend(text)


@pytest.mark.parametrize("value", [123, 1.0, ["acmeExt", "1.0"]])
def test_parse_non_string_raises(value):
    with pytest.raises(DependParseError):
        dp.parse_depend(value)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        dp.parse_depend("nope")

# ==================================================================================
#                                 TEST: MATCHING
# ==================================================================================

def test_exact_matches_only_that_version():
    spec = dp.parse_depend("acmeExt 1.0")
    assert spec.match(Version("1.0"))
    assert not spec.match(Version("1.0.1"))
    assert not spec.match(Version("0.9"))


def test_plus_matches_version_and_later():
    spec = dp.parse_depend("acmeExt 1.2+")
    assert spec.match(Version("1.2"))
    assert spec.match(Version("7.0"))
    assert not spec.match(Version("1.1.9"))


def test_range_is_inclusive_on_both_ends():
    spec = dp.parse_depend("acmeExt 1.0-2.0")
    assert spec.match(Version("1.0"))
    assert spec.match(Version("1.5.3"))
    assert spec.match(Version("2.0"))
    assert not spec.match(Version("2.0.1"))
    assert not spec.match(Version("0.9"))


def test_any_alternative_matches():
    spec = dp.parse_depend("acmeExt 1.0, 3.0+")
    assert spec.match(Version("1.0"))
    assert spec.match(Version("4.1"))
    assert not spec.match(Version("2.0"))

# ==================================================================================
#                            TEST: PACKAGES PROPERTY
# ==================================================================================

def test_parse_packages_skips_empty_and_malformed_tokens():
    specs = dp.parse_packages("acmeExt 1.0;;  ;garbage;otherPkg 2.0+;")
    assert [s.name for s in specs] == ["acmeExt", "otherPkg"]


def test_parse_packages_missing_value():
    assert dp.parse_packages(None) == []
    assert dp.parse_packages("") == []
