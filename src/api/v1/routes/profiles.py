"""Profile API routes."""

from fastapi import APIRouter, Depends

from api.v1.dependencies import get_profile_synchronizer
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.profile import (
    ProfileDetailResponse,
    ProfileResponse,
    ProfileUpdate,
    UnitConversion,
)
from core.exceptions import RemoteFailureError
from domain.entities.profile import ProfileKind
from domain.services import unit_converter
from domain.services.profile_synchronizer import ProfileSynchronizer

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.post(
    "/convert-units",
    response_model=UnitConversion,
    summary="Toggle weight/height display units",
)
async def convert_units(body: UnitConversion) -> UnitConversion:
    """Convert a weight/height pair to the other unit system (display only)."""
    weight, height, imperial = unit_converter.toggle_units(body.weight, body.height, body.imperial)
    return UnitConversion(weight=weight, height=height, imperial=imperial)


@router.get(
    "/{user_id}",
    response_model=ProfileDetailResponse,
    summary="Get a profile",
    responses={
        404: {"model": ErrorResponse, "description": "Profile not found"},
        502: {"model": ErrorResponse, "description": "Profile store unavailable"},
    },
)
async def get_profile(
    user_id: str,
    kind: ProfileKind = ProfileKind.PATIENT,
    synchronizer: ProfileSynchronizer = Depends(get_profile_synchronizer),
) -> ProfileDetailResponse:
    """Get a profile record as stored (metric units)."""
    record = await synchronizer.fetch(user_id)
    return ProfileDetailResponse(data=ProfileResponse.from_record(record, kind))


@router.patch(
    "/{user_id}",
    response_model=ProfileDetailResponse,
    summary="Save profile edits",
    responses={
        200: {"description": "Profile saved; body is the re-fetched record"},
        404: {"model": ErrorResponse, "description": "Profile not found"},
        409: {"model": ErrorResponse, "description": "Email already in use"},
        422: {"model": ErrorResponse, "description": "A field failed validation"},
        502: {"model": ErrorResponse, "description": "Profile store unavailable"},
    },
)
async def save_profile(
    user_id: str,
    body: ProfileUpdate,
    kind: ProfileKind = ProfileKind.PATIENT,
    synchronizer: ProfileSynchronizer = Depends(get_profile_synchronizer),
) -> ProfileDetailResponse:
    """Validate, check email uniqueness and persist the submitted fields.

    Fields are checked in the order email, phone number, weight, height,
    address; the first failure is returned. With ``imperial`` set, only the
    submitted weight and height are converted; stored metrics that were not
    sent are left as they are.
    """
    edits = body.edits()
    if body.imperial:
        edits.update(_submitted_metrics_in_metric(edits))

    session = await synchronizer.open_session(user_id, kind)
    synchronizer.toggle_edit(session)
    synchronizer.apply_edits(session, edits)

    if not await synchronizer.save(session):
        raise session.last_error or RemoteFailureError("update")

    return ProfileDetailResponse(data=ProfileResponse.from_record(session.record, kind))


def _submitted_metrics_in_metric(edits: dict[str, str]) -> dict[str, str]:
    """Convert whichever of weight/height were submitted from lbs/inches."""
    weight, height = unit_converter.to_metric(
        edits.get("weight", ""), edits.get("height", ""), imperial=True
    )
    converted = {"weight": weight, "height": height}
    return {name: converted[name] for name in ("weight", "height") if name in edits}
