from fastapi import Depends
from sqlmodel import Session
from gymbooking.configuration.database import get_session
from gymbooking.services.svc_scheduling import SchedulingService
from gymbooking.services.svc_schedule_reader import SqlScheduleReader

def get_schedule_reader(session: Session = Depends(get_session)) -> SqlScheduleReader:
    """Request-scoped schedule reader sharing the request's session"""
    return SchedulingService.build_reader(session)
