"""Pydantic schemas for Profile API."""

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.profile import ProfileKind, ProfileRecord, field_set_for


class ProfileUpdate(BaseModel):
    """Schema for saving a profile (all fields optional).

    Omitted fields keep their stored value. ``weight`` and ``height`` are
    read in lbs/inches when ``imperial`` is true.
    """

    name: str | None = Field(None, max_length=200)
    email: str | None = Field(None, max_length=255)
    phone_number: str | None = Field(None, max_length=32)
    address: str | None = Field(None, max_length=500)
    weight: str | None = Field(None, max_length=16)
    height: str | None = Field(None, max_length=16)
    imperial: bool = False

    def edits(self) -> dict[str, str]:
        return self.model_dump(exclude={"imperial"}, exclude_none=True)


class ProfileResponse(BaseModel):
    """Schema for Profile response. Weight and height are metric."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user_id": "u_123",
                "kind": "patient",
                "external_id": "P-0042",
                "external_id_label": "Patient ID",
                "name": "Jane Doe",
                "email": "jane@example.com",
                "phone_number": "(555) 987-6543",
                "address": "123 Main St, Springfield",
                "weight": "70",
                "height": "172",
            }
        },
    )

    user_id: str
    kind: ProfileKind
    external_id: str
    external_id_label: str
    name: str
    email: str
    phone_number: str
    address: str
    weight: str | None = None
    height: str | None = None

    @classmethod
    def from_record(cls, record: ProfileRecord, kind: ProfileKind) -> "ProfileResponse":
        field_set = field_set_for(kind)
        return cls(
            user_id=record.user_id,
            kind=kind,
            external_id=record.external_id,
            external_id_label=field_set.external_id_label,
            name=record.name,
            email=record.email,
            phone_number=record.phone_number,
            address=record.address,
            weight=record.weight if field_set.has_metrics else None,
            height=record.height if field_set.has_metrics else None,
        )


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse


class UnitConversion(BaseModel):
    """Weight/height pair in a display unit."""

    weight: str = ""
    height: str = ""
    imperial: bool = False
