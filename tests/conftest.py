"""
Shared fixtures for the licence narrowing test-suite.

Provides a small factory for `LicenseRecord` objects and the canonical
three-licence pool {valid vendor A, invalid vendor A, vendor B}.
"""

import pytest

from lichelper.models.schemas import EntityRef, LicenseRecord

VENDOR_A = EntityRef(id="acme", label="Acme Corp")
VENDOR_B = EntityRef(id="globex", label="Globex")
PRODUCT_X = EntityRef(id="acme.x", label="Acme X")
PRODUCT_Y = EntityRef(id="acme.y", label="Acme Y")


def _make_license(vendor=VENDOR_A, product=PRODUCT_X, licensee="Initech",
                  properties=None, is_valid=True, validation_error=None):
    return LicenseRecord(
        vendor=vendor,
        product=product,
        licensee=licensee,
        properties=properties or {},
        is_valid=is_valid,
        validation_error=validation_error,
    )


@pytest.fixture
def make_license():
    """Factory fixture: builds a licence, defaults to a valid Acme X licence."""
    return _make_license


@pytest.fixture
def valid_vendor_a():
    return _make_license(licensee="valid-a")


@pytest.fixture
def invalid_vendor_a():
    return _make_license(licensee="invalid-a", is_valid=False, validation_error="Licence expired")


@pytest.fixture
def vendor_b():
    return _make_license(vendor=VENDOR_B, product=PRODUCT_Y, licensee="b")


@pytest.fixture
def pool(valid_vendor_a, invalid_vendor_a, vendor_b):
    return [valid_vendor_a, invalid_vendor_a, vendor_b]
