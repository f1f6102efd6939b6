"""Profile record domain entity."""

from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any


class ProfileKind(StrEnum):
    """Which variant of the profile screen a record is edited through."""

    PATIENT = "patient"
    PRACTITIONER = "practitioner"


# Entity attribute -> document key
DOCUMENT_KEYS: dict[str, str] = {
    "external_id": "patientID",
    "name": "name",
    "email": "email",
    "phone_number": "phoneNumber",
    "address": "address",
    "weight": "weight",
    "height": "height",
}


@dataclass(frozen=True)
class ProfileFieldSet:
    """The editable fields that apply to a profile kind.

    ``validated`` is ordered: a save checks fields in exactly this order and
    stops at the first failure.
    """

    kind: ProfileKind
    mutable: tuple[str, ...]
    validated: tuple[str, ...]
    external_id_label: str

    @property
    def has_metrics(self) -> bool:
        return "weight" in self.mutable


PATIENT_FIELDS = ProfileFieldSet(
    kind=ProfileKind.PATIENT,
    mutable=("name", "email", "phone_number", "address", "weight", "height"),
    validated=("email", "phone_number", "weight", "height", "address"),
    external_id_label="Patient ID",
)

PRACTITIONER_FIELDS = ProfileFieldSet(
    kind=ProfileKind.PRACTITIONER,
    mutable=("name", "email", "phone_number", "address"),
    validated=("email", "phone_number", "address"),
    external_id_label="Medical License Number",
)


def field_set_for(kind: ProfileKind) -> ProfileFieldSet:
    """Get the field set for a profile kind."""
    if kind == ProfileKind.PATIENT:
        return PATIENT_FIELDS
    return PRACTITIONER_FIELDS


@dataclass
class ProfileRecord:
    """Domain entity for a persisted per-user profile document.

    Absent document fields are represented as empty strings.
    """

    user_id: str
    external_id: str = ""
    name: str = ""
    email: str = ""
    phone_number: str = ""
    address: str = ""
    weight: str = ""
    height: str = ""
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_document(cls, user_id: str, data: dict[str, Any] | None) -> "ProfileRecord":
        """Build a record from a raw store document."""
        data = data or {}
        values = {
            attr: _as_text(data.get(key)) for attr, key in DOCUMENT_KEYS.items()
        }
        extra = {k: v for k, v in data.items() if k not in DOCUMENT_KEYS.values()}
        return cls(user_id=user_id, extra=extra, **values)

    def copy(self) -> "ProfileRecord":
        """Return an independent working copy."""
        return replace(self, extra=dict(self.extra))

    def partial_document(self, fields: tuple[str, ...]) -> dict[str, Any]:
        """Build a partial update payload for the given entity attributes.

        Empty optional metrics are written as ``None``. The identifier is
        never part of the payload.
        """
        payload: dict[str, Any] = {}
        for attr in fields:
            if attr == "external_id":
                continue
            value = getattr(self, attr)
            if attr in ("weight", "height") and value == "":
                value = None
            payload[DOCUMENT_KEYS[attr]] = value
        return payload


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
