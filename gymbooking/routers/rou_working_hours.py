from fastapi import APIRouter, HTTPException, Depends
from sqlmodel import Session
from gymbooking.models.mod_schedule import DayOfWeek, OwnerKind, ScheduleOwner, WorkingHours
from gymbooking.schemas.sch_working_hours import WorkingHoursResponse, WorkingHoursUpdate
from gymbooking.services.svc_working_hours import WorkingHoursService
from gymbooking.configuration.database import get_session
from typing import List

router = APIRouter(
    prefix="/working-hours",
    tags=["Working Hours"],
    responses={404: {"description": "Not found"}},
)

def _to_response(entry: WorkingHours) -> WorkingHoursResponse:
    return WorkingHoursResponse(
        id=entry.id,
        owner_kind=entry.owner.kind,
        owner_id=entry.owner.id,
        day_of_week=entry.day_of_week,
        day_name=DayOfWeek(entry.day_of_week).name.capitalize(),
        start_time=entry.start_time,
        end_time=entry.end_time
    )

@router.get("/{owner_kind}/{owner_id}", response_model=List[WorkingHoursResponse])
def get_working_hours(
    owner_kind: OwnerKind,
    owner_id: str,
    session: Session = Depends(get_session)
):
    """
    Get the weekly working hours of a trainer or a fitness center.
    """
    owner = ScheduleOwner(kind=owner_kind, id=owner_id)
    return [_to_response(entry) for entry in WorkingHoursService.get_working_hours(session, owner)]

@router.put("/{owner_kind}/{owner_id}", response_model=List[WorkingHoursResponse])
def set_working_hours(
    owner_kind: OwnerKind,
    owner_id: str,
    update: WorkingHoursUpdate,
    session: Session = Depends(get_session)
):
    """
    Replace the weekly working hours of a trainer or a fitness center.

    - At most one window per day of week (0 = Sunday ... 6 = Saturday)
    - Each window must start before it ends
    - Days left out of the request are days off
    """
    owner = ScheduleOwner(kind=owner_kind, id=owner_id)
    return [_to_response(entry) for entry in WorkingHoursService.set_working_hours(session, owner, update)]

@router.delete("/{owner_kind}/{owner_id}/{day_of_week}", status_code=204)
def delete_working_hours(
    owner_kind: OwnerKind,
    owner_id: str,
    day_of_week: int,
    session: Session = Depends(get_session)
):
    """
    Remove the working hours of one day.

    Returns:
    - 204: Successfully deleted
    - 404: No working hours on that day
    """
    owner = ScheduleOwner(kind=owner_kind, id=owner_id)
    deleted = WorkingHoursService.delete_working_hours(session, owner, day_of_week)
    if not deleted:
        raise HTTPException(status_code=404, detail="Working hours not found")
