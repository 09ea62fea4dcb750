"""
Pydantic models shared by the narrowing engine and the HTTP layer.

`EntityRef` and `LicenseRecord` describe licences handed to us by the host
platform; the request/response models describe the `/api/licenses/select`
endpoint.
"""

from typing import Dict, List, Mapping, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class EntityRef(BaseModel):
    """
    Identifier of a vendor or product, with an optional display label.

    Two refs are equal when their ids are equal; the label is only for display.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    label: Optional[str] = None

    def __eq__(self, other):
        if not isinstance(other, EntityRef):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __str__(self):
        return self.label or self.id


class LicenseRecord(BaseModel):
    """
    Read-only view of one licence as issued by the distribution platform.

    `is_valid` and `validation_error` are computed by the host (signature and
    expiry checks) before the record reaches us. `properties` is accepted and
    serialized as a mapping but stored as a tuple of pairs so the record stays
    hashable and snapshots of it cannot change.
    """
    model_config = ConfigDict(frozen=True)

    vendor: EntityRef
    product: EntityRef
    licensee: str = ""
    properties: Tuple[Tuple[str, str], ...] = ()
    is_valid: bool = False
    validation_error: Optional[str] = None

    @field_validator("properties", mode="before")
    @classmethod
    def _freeze_properties(cls, value):
        if isinstance(value, Mapping):
            return tuple(value.items())
        return value

    @field_serializer("properties")
    def _dump_properties(self, properties):
        return dict(properties)

    def prop(self, key: str) -> Optional[str]:
        return dict(self.properties).get(key)

    def __str__(self):
        return f"{self.product} ({self.vendor}) for {self.licensee or '?'}"


class SelectRequest(BaseModel):
    licenses: List[LicenseRecord]
    vendor: Optional[EntityRef] = None
    product: Optional[EntityRef] = None
    products: Optional[List[EntityRef]] = None
    package: Optional[str] = None
    licensee: Optional[str] = None
    capacity: Optional[Dict[str, int]] = None
    strict: bool = True


class SelectResponse(BaseModel):
    license: Optional[LicenseRecord] = None
    capacity: Dict[str, int] = Field(default_factory=dict)


class RejectedLicense(BaseModel):
    vendor: str
    product: str
    licensee: str
    is_valid: bool
    validation_error: Optional[str] = None


class LicenseErrorDetail(BaseModel):
    message: str
    kind: str
    rejected_count: int
    rejected: List[RejectedLicense]
