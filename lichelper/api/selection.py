import logging

from fastapi import APIRouter, HTTPException

from lichelper.models.schemas import SelectRequest, SelectResponse
from lichelper.services.narrowing import (
    CapacityParseError,
    InvalidArgument,
    LicErr,
    LicErrKind,
    LicHelper,
    parse_capacity,
)
from lichelper.services.provider import StaticLicenseProvider
from lichelper.services.report_service import describe_error


router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/licenses/select", response_model=SelectResponse)
def select_license(payload: SelectRequest):
    strict = payload.strict
    helper = LicHelper.from_provider(StaticLicenseProvider(payload.licenses))

    try:
        # 1) Vendor / product(s) / licensee
        if payload.vendor is not None:
            helper.find_vendor(payload.vendor, strict=strict)
        if payload.product is not None:
            helper.find_product(payload.product, strict=strict)
        if payload.products:
            helper.find_products(payload.products, strict=strict)
        if payload.licensee:
            helper.find_licensee(payload.licensee, strict=strict)

        # 2) Package compatibility
        if payload.package:
            helper.find_package(payload.package, strict=strict)

        # 3) Capacity minimums
        for unit, minimum in (payload.capacity or {}).items():
            helper.find_capacity(unit, minimum, strict=strict)

        # 4) Validity and the single survivor
        license = helper.find_valid(strict=strict).get(strict=strict)
        capacity = parse_capacity(license) if license is not None else {}

    except LicErr as e:
        status = 409 if e.kind == LicErrKind.AMBIGUOUS else 404
        raise HTTPException(status_code=status, detail=describe_error(e).model_dump())
    except (InvalidArgument, CapacityParseError) as e:
        logger.warning("Rejected licence selection request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return SelectResponse(license=license, capacity=capacity)
