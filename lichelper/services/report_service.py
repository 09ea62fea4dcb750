"""
This module turns a `LicErr` into diagnostics for the host: a structured detail
(returned by the API) and a human-readable text report (forwarded to fault or
feature-disabling mechanisms).
"""

from typing import List

from lichelper.core.config import REPORT_MAX_REJECTED
from lichelper.models.schemas import LicenseErrorDetail, LicenseRecord, RejectedLicense
from lichelper.services.narrowing import LicErr


def _summarize(license: LicenseRecord) -> RejectedLicense:
    return RejectedLicense(
        vendor=str(license.vendor),
        product=str(license.product),
        licensee=license.licensee,
        is_valid=license.is_valid,
        validation_error=license.validation_error,
    )


def describe_error(err: LicErr, max_rejected: int = REPORT_MAX_REJECTED) -> LicenseErrorDetail:
    """
    Builds the structured diagnostic of a narrowing failure.

    Args:
        err (LicErr): The failure raised by `LicHelper`.
        max_rejected (int): How many rejected licences to list.

    Returns:
        LicenseErrorDetail: message, kind and the (possibly truncated) rejected set.
    """
    rejected: List[RejectedLicense] = [_summarize(lic) for lic in err.rejected[:max_rejected]]
    return LicenseErrorDetail(
        message=err.message,
        kind=err.kind.value,
        rejected_count=len(err.rejected),
        rejected=rejected,
    )


def format_error_report(err: LicErr, max_rejected: int = REPORT_MAX_REJECTED) -> str:
    """
    Renders a narrowing failure as plain text.

    Returns:
        str: the message followed by one line per rejected licence.
    """
    detail = describe_error(err, max_rejected)
    lines = [
        "Licence check failed",
        "--------------------",
        f"Reason: {detail.message} ({detail.kind})",
    ]
    if not detail.rejected_count:
        lines.append("No licences were considered.")
        return "\n".join(lines) + "\n"

    lines.append(f"Rejected licences: {detail.rejected_count}")
    for item in detail.rejected:
        status = "valid" if item.is_valid else "invalid"
        lines.append(f"- {item.product} ({item.vendor}) for {item.licensee or '?'}: {status}")
        if item.validation_error:
            lines.append(f"  Error: {item.validation_error}")
    hidden = detail.rejected_count - len(detail.rejected)
    if hidden > 0:
        lines.append(f"... and {hidden} more")
    return "\n".join(lines) + "\n"
